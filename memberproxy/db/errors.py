"""Store error hierarchy.

Backends wrap driver-specific exceptions in one of these so callers can
handle storage failures without knowing which backend is configured.
"""


class StoreError(Exception):
    """Base exception for all store errors."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class StoreUnavailableError(StoreError):
    """Raised when the backing storage cannot be reached or rejects a write.

    Examples:
        - Database connection refused or timed out
        - Pool exhausted or closed
        - Statement failed inside the database
    """
