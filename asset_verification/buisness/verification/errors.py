"""
Domain exceptions for asset verification

Raised by the business layer when input is malformed or a lifecycle rule is
violated. The presentation layer maps each type to an HTTP status.
"""


class VerificationDomainError(Exception):
    """Base exception for all verification domain errors"""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(VerificationDomainError):
    """Raised when required input is missing or malformed (empty title, unknown asset)"""
    pass


class InvalidStateError(VerificationDomainError):
    """Raised when an operation is not legal in the current lifecycle state"""
    pass


class NotFoundError(VerificationDomainError):
    """Raised when a referenced cycle or employee does not exist"""
    pass


class CycleClosedError(VerificationDomainError):
    """Raised when a submission targets a cycle that is no longer active"""
    pass
