"""
Custom exceptions for the Registrar package.

Enrollment and payment outcomes are never raised; they travel as
``Success``/``Failure`` results. These exceptions cover faults in how the
package is configured or used.
"""

from typing import Optional, Any, Dict


class RegistrarException(Exception):
    """Base exception for all Registrar-related errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(RegistrarException):
    """Raised when configuration is invalid."""
    pass


class ResultError(RegistrarException):
    """Raised when a result is unwrapped on the wrong branch."""
    pass
