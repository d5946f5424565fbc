import logging

import pytest

from registrar.core.entities import Course, Student
from registrar.services.payment_service import FixedPaymentDecider


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() so caplog sees registrar records in every test."""
    yield
    package_logger = logging.getLogger("registrar")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def approving_decider():
    return FixedPaymentDecider(approve=True)


@pytest.fixture
def declining_decider():
    return FixedPaymentDecider(approve=False)


@pytest.fixture
def course(approving_decider):
    """Two-slot course whose payments always go through."""
    return Course("Swift Programming", 2, payment_decider=approving_decider)


@pytest.fixture
def qualified_students():
    return [
        Student("Ada Lovelace", 25, "CS101-9"),
        Student("Grace Hopper", 30, "CS101-12"),
        Student("Alan Turing", 41, "CS101-7"),
    ]
