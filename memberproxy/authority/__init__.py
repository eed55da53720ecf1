"""Client and failure types for the upstream Member Authority."""

from memberproxy.authority.client import AuthorityResponse, MemberAuthorityClient
from memberproxy.authority.errors import (
    AuthorityError,
    AuthorityFailure,
    AuthorityTimeoutError,
    AuthorityUnreachableError,
)

__all__ = [
    "AuthorityError",
    "AuthorityFailure",
    "AuthorityResponse",
    "AuthorityTimeoutError",
    "AuthorityUnreachableError",
    "MemberAuthorityClient",
]
