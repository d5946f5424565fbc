"""
Registrar: a small course-enrollment workflow.

Students register for courses subject to age, prerequisite and capacity
checks, followed by a simulated payment step.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "Course enrollment workflow with age, prerequisite and capacity checks"
