"""
Custom exception classes for the application layer.

Domain validation failures live in domain.exceptions and propagate unchanged
out of the domain and repository layers. The classes here are raised by the
unit of work and by the use-case services that wrap domain failures.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class PersistenceError(ApplicationError):
    """Raised when the backing store rejects a commit"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)


class NotFoundError(ApplicationError):
    """Raised by use-case services when a requested aggregate is absent"""

    def __init__(self, resource: str, resource_id):
        details = {"resource": resource, "id": str(resource_id)}
        super().__init__(f"{resource} with ID '{resource_id}' not found.", details)


class UserCreationFailedError(ApplicationError):
    """Raised when a user cannot be created"""


class UserUpdateFailedError(ApplicationError):
    """Raised when a user cannot be updated"""


class RegistrationFailedError(ApplicationError):
    """Raised when the identity account and domain user cannot be stored together"""

    def __init__(self, email: str, message: str):
        details = {"email": email}
        super().__init__(message, details)
