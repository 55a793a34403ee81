"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or missing input. Always fixable by the caller."""

    pass


class AuthRequiredError(DomainError):
    """Raised when the caller identity cannot be resolved."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised by a vote store when a write would break (review, caller) uniqueness."""

    def __init__(self, review_id: str, caller_id: str):
        self.review_id = review_id
        self.caller_id = caller_id
        super().__init__(f"Vote already exists for review {review_id}")


class StoreError(DomainError):
    """Persistence failure other than a missing row."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Vote store failed during {operation}")
