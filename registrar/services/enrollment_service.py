"""
Enrollment orchestration across courses and students.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.entities import Course, Student
from ..core.errors import EnrollmentError
from ..core.results import Result


logger = logging.getLogger(__name__)


class EnrollmentSystem:
    """Holds the courses and students and runs enrollment requests end-to-end."""

    def __init__(self):
        self._courses: List[Course] = []
        self._students: List[Student] = []

    @property
    def courses(self) -> List[Course]:
        return self._courses.copy()

    @property
    def students(self) -> List[Student]:
        return self._students.copy()

    def add_course(self, course: Course) -> None:
        """Add a course to the system."""
        self._courses.append(course)
        logger.debug("Added course %s with %d slots", course.title, course.available_slots)

    def add_student(self, student: Student) -> None:
        """Add a student to the system."""
        self._students.append(student)
        logger.debug("Added student %s", student.student_id)

    def enroll_student_in_course(self, student: Student, course: Course, min_age: int,
                                 prerequisite: Optional[str] = None) -> List[Result[str, EnrollmentError]]:
        """Enroll a student, then take payment, printing each outcome.

        Payment only runs when enrollment (or waitlisting) succeeded. A failed
        payment does not undo the enrollment. Returns the results in the order
        they were printed.
        """
        outcomes: List[Result[str, EnrollmentError]] = []

        enrollment = course.enroll_student(student, min_age, prerequisite)
        outcomes.append(enrollment)
        print(enrollment.describe())

        if enrollment.is_success:
            payment = course.verify_payment(student)
            outcomes.append(payment)
            print(payment.describe())
            if not payment.is_success:
                logger.warning("Payment failed for %s in %s: %s",
                               student.student_id, course.title, payment.error.reason)

        return outcomes

    def display_all_enrollment_statuses(self) -> None:
        """Display enrollment status for each course."""
        for course in self._courses:
            course.display_enrollment_status()

    def get_statistics(self) -> Dict[str, Any]:
        """Get enrollment statistics."""
        return {
            'total_courses': len(self._courses),
            'total_students': len(self._students),
            'total_enrolled': sum(len(course.enrolled_students) for course in self._courses),
            'total_waitlisted': sum(len(course.waitlist) for course in self._courses),
        }
