"""
Domain Exceptions

Raised when an entity or value object would be constructed or mutated into
a state that breaks its invariants. No domain object is ever left in an
invalid state after one of these is raised.
"""


class DomainError(Exception):
    """Base exception for all domain rule violations"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class EmptyEmailError(DomainError):
    """Raised when an email address is None, empty or whitespace"""

    def __init__(self):
        super().__init__("The email address cannot be null or empty.")


class InvalidEmailError(DomainError):
    """Raised when an email address does not have a local@domain.tld shape"""

    def __init__(self, email: str):
        super().__init__(f"The email '{email}' is not valid.", {"email": email})


class InvalidArgumentError(DomainError, ValueError):
    """Raised when an argument breaks an entity invariant (empty name, empty owner)"""

    def __init__(self, argument: str, message: str | None = None):
        msg = message or f"Argument '{argument}' cannot be null or empty."
        super().__init__(msg, {"argument": argument})
        self.argument = argument
