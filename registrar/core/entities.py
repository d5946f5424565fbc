"""
Core entities for the Registrar package.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from .enums import EnrollmentStatus, PAYMENT_GATEWAY_ERROR
from .errors import AgeRestriction, EnrollmentError, PaymentFailed, PrerequisiteNotMet
from .interfaces import PaymentDecider, RandomPaymentDecider
from .results import Failure, Result, Success


logger = logging.getLogger(__name__)


class Student:
    """A student trying to enroll in a course. Read-only after construction."""

    def __init__(self, name: str, age: int, student_id: str):
        self._name = name
        self._age = age
        self._student_id = student_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    @property
    def student_id(self) -> str:
        return self._student_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        return {
            'name': self._name,
            'age': self._age,
            'student_id': self._student_id,
        }

    def __repr__(self) -> str:
        return f"Student(name={self._name!r}, age={self._age}, student_id={self._student_id!r})"


class Course:
    """A course with a fixed number of slots, a roster and a waitlist."""

    def __init__(self, title: str, available_slots: int,
                 payment_decider: Optional[PaymentDecider] = None):
        self.title = title
        self.available_slots = available_slots
        self._prerequisites: List[str] = []
        self._schedule: List[str] = []  # Time slots
        self._enrolled_students: List[Student] = []
        self._waitlist: List[Student] = []

        self._payment_decider = payment_decider if payment_decider is not None else RandomPaymentDecider()

    @property
    def prerequisites(self) -> List[str]:
        return self._prerequisites.copy()

    @property
    def schedule(self) -> List[str]:
        return self._schedule.copy()

    @property
    def enrolled_students(self) -> List[Student]:
        return self._enrolled_students.copy()

    @property
    def waitlist(self) -> List[Student]:
        return self._waitlist.copy()

    @property
    def payment_decider(self) -> PaymentDecider:
        return self._payment_decider

    def enroll_student(self, student: Student, min_age: int,
                       prerequisite: Optional[str] = None) -> Result[str, EnrollmentError]:
        """Enroll a student, or waitlist them when the course is full.

        Checks run in order and the first failure wins: minimum age, then the
        prerequisite, which must be a prefix of the student's ID. A rejected
        request leaves the course untouched. Asking again for a student already
        on the roster or the waitlist repeats the earlier outcome without
        adding them twice.
        """
        if student.age < min_age:
            logger.info("Rejected %s for %s: younger than %d", student.student_id, self.title, min_age)
            return Failure(AgeRestriction(min_age=min_age))

        if prerequisite is not None and not student.student_id.startswith(prerequisite):
            logger.info("Rejected %s for %s: prerequisite %s not met",
                        student.student_id, self.title, prerequisite)
            return Failure(PrerequisiteNotMet(prerequisite=prerequisite))

        if student in self._enrolled_students:
            return Success(f"{student.name} enrolled successfully!")
        if student in self._waitlist:
            return Success(f"{student.name} added to the waitlist.")

        if len(self._enrolled_students) < self.available_slots:
            self._enrolled_students.append(student)
            logger.info("Enrolled %s in %s (%d seats left)",
                        student.student_id, self.title, self.available_seats())
            return Success(f"{student.name} enrolled successfully!")

        self._waitlist.append(student)
        logger.info("Waitlisted %s for %s at position %d",
                    student.student_id, self.title, len(self._waitlist))
        return Success(f"{student.name} added to the waitlist.")

    def verify_payment(self, student: Student) -> Result[str, EnrollmentError]:
        """Run the simulated payment check for a student."""
        approved = self._payment_decider.decide()
        logger.debug("Payment for %s in %s %s", student.student_id, self.title,
                     "approved" if approved else "declined")

        if approved:
            return Success(f"Payment successful for {student.name}.")
        return Failure(PaymentFailed(reason=PAYMENT_GATEWAY_ERROR))

    def roster(self) -> List[Tuple[Student, EnrollmentStatus]]:
        """Enrolled students followed by waitlisted ones, in insertion order."""
        entries = [(student, EnrollmentStatus.ENROLLED) for student in self._enrolled_students]
        entries.extend((student, EnrollmentStatus.WAITLISTED) for student in self._waitlist)
        return entries

    def display_enrollment_status(self) -> None:
        """Print the enrollment status of every student in this course."""
        print(f"=== Enrollment Status for {self.title} ===")
        for student, status in self.roster():
            if status is EnrollmentStatus.ENROLLED:
                print(f"{student.name} is successfully enrolled.")
            else:
                print(f"{student.name} is on the waitlist.")

    def available_seats(self) -> int:
        return self.available_slots - len(self._enrolled_students)

    def add_prerequisite(self, prerequisite: str) -> None:
        """Record a prerequisite label for this course."""
        self._prerequisites.append(prerequisite)

    def schedule_course(self, time_slots: List[str]) -> None:
        """Replace the course schedule."""
        self._schedule = list(time_slots)

    def check_schedule_conflict(self, student: Optional[Student], selected_slot: str) -> bool:
        """Check whether the selected slot is one of this course's time slots."""
        return selected_slot in self._schedule

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        return {
            'title': self.title,
            'available_slots': self.available_slots,
            'available_seats': self.available_seats(),
            'prerequisites': list(self._prerequisites),
            'schedule': list(self._schedule),
            'roster': [
                {'name': student.name, 'student_id': student.student_id, 'status': status.value}
                for student, status in self.roster()
            ],
        }

    def __repr__(self) -> str:
        return f"Course(title={self.title!r}, available_slots={self.available_slots})"
