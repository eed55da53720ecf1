"""Failures raised by the Member Authority client.

Every way an Authority call can go wrong surfaces as an
``AuthorityFailure`` whose ``message`` is the text recorded in the audit
log and shown to the caller.
"""


class AuthorityFailure(Exception):
    """Base exception for failed Member Authority calls."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthorityError(AuthorityFailure):
    """The Authority answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        body: bytes = b"",
        content_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.content_type = content_type

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class AuthorityUnreachableError(AuthorityFailure):
    """The request never produced a response (connection refused, DNS, reset)."""


class AuthorityTimeoutError(AuthorityUnreachableError):
    """The request did not complete within the configured timeout."""
