"""
Main entry point for the Registrar example driver.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import RegistrarConfig, configure_logging, load_config
from .core.entities import Course, Student
from .core.enums import PaymentMode
from .core.exceptions import RegistrarException
from .services import EnrollmentSystem, PaymentDeciderFactory


logger = logging.getLogger(__name__)


def build_example_system(config: RegistrarConfig) -> EnrollmentSystem:
    """Create the sample students and courses."""
    decider = PaymentDeciderFactory.create_decider(config.payment_mode, config.seed)

    system = EnrollmentSystem()
    system.add_course(Course("Swift Programming", 2, payment_decider=decider))
    system.add_course(Course("Java Programming", 1, payment_decider=decider))

    system.add_student(Student("John Doe", 18, "S001"))
    system.add_student(Student("Jane Smith", 20, "S002"))
    system.add_student(Student("Alice Johnson", 22, "S003"))
    return system


def run_example(config: Optional[RegistrarConfig] = None) -> EnrollmentSystem:
    """Enroll every sample student in the first course and print the statuses."""
    config = config or RegistrarConfig()
    system = build_example_system(config)

    course = system.courses[0]
    for student in system.students:
        system.enroll_student_in_course(student, course, config.min_age, config.prerequisite)

    system.display_all_enrollment_statuses()
    logger.info("Example finished: %s", system.get_statistics())
    return system


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Registrar course enrollment example")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--seed", type=int, help="Seed for the random payment decider")
    parser.add_argument("--payment", choices=[mode.value for mode in PaymentMode],
                        help="Payment decision strategy")
    parser.add_argument("--log-level", type=str, help="Logging level")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, seed=args.seed, payment_mode=args.payment,
                             log_level=args.log_level)
    except RegistrarException as e:
        configure_logging("ERROR")
        logger.error("%s", e.message)
        return 1

    configure_logging(config.log_level)
    run_example(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
