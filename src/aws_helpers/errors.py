"""
Exceptions raised by the helper library.

Only errors detected locally live here. Failures reported by AWS itself
(botocore.exceptions.ClientError and friends) are never wrapped and reach the
caller exactly as the client raised them.
"""
from typing import Optional


class AwsHelperError(Exception):
    """Base class for errors raised by aws_helpers."""
    default_message = "An AWS helper error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(AwsHelperError):
    """Raised when a requested resource is not found."""
    default_message = "The requested resource was not found"


class NotAuthorized(AwsHelperError):
    """Raised when a user is not authorized to access a resource."""
    default_message = "Not authorized to access this resource"


class ConflictError(AwsHelperError):
    """Raised when a write conflicts with existing data."""
    default_message = "The request conflicts with existing data"


class UserNotFoundError(NotFound):
    """Raised when a user lookup in the directory matches nobody."""
    default_message = "The requested user does not exist"


class UserAccessViolationError(NotAuthorized):
    default_message = "This user doesn't have permission to access the requested resource"


class RegoConflictError(ConflictError):
    default_message = "This plate is already registered"
