"""Async HTTP client for the Member Authority.

Usage:
    async with MemberAuthorityClient(base_url="http://info-service:8888") as client:
        response = await client.create_member({"name": "Alice"})
        print(response.status_code, response.text)
"""

import json
import time
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from memberproxy.authority.errors import (
    AuthorityError,
    AuthorityTimeoutError,
    AuthorityUnreachableError,
)
from memberproxy.config.models import AuthorityConfig
from memberproxy.observability.logging import get_logger

logger = get_logger(__name__)

_NO_BODY = object()


class AuthorityResponse(BaseModel):
    """Raw successful response from the Authority, passed through untouched."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    content: bytes = b""
    content_type: str | None = None

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


def failure_message(response: httpx.Response) -> str:
    """Extract a human-readable message from an error response.

    Prefers a ``message`` field of a JSON body (top level or under
    ``error``), then the raw body text, then a status line.
    """
    text = response.text.strip()
    if text:
        try:
            data = response.json()
        except ValueError:
            return text
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and isinstance(error.get("message"), str):
                return error["message"]
            if isinstance(data.get("message"), str) and data["message"]:
                return data["message"]
        return text

    request = response.request
    return (
        f"{response.status_code} {response.reason_phrase} "
        f"from {request.method} {request.url}"
    )


class MemberAuthorityClient:
    """Client for the Member Authority's ``/members`` resource.

    Any non-2xx status raises ``AuthorityError``; transport problems raise
    ``AuthorityUnreachableError`` and timeouts ``AuthorityTimeoutError``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8888",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the Member Authority
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub the Authority in tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls,
        config: AuthorityConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "MemberAuthorityClient":
        return cls(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "MemberAuthorityClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def _request(
        self,
        method: str,
        path: str,
        *,
        payload: Any = _NO_BODY,
    ) -> AuthorityResponse:
        start = time.perf_counter()
        url = f"{self.base_url}{path}"
        kwargs: dict[str, Any] = {}
        if payload is not _NO_BODY:
            # Encoded here so that a JSON null is sent rather than an empty body
            kwargs["content"] = json.dumps(payload).encode()
            kwargs["headers"] = {"Content-Type": "application/json"}

        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.warning("authority_timeout", method=method, url=url, timeout=self.timeout)
            raise AuthorityTimeoutError(
                f"Timed out after {self.timeout}s calling {method} {url}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "authority_unreachable",
                method=method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            detail = str(e)
            raise AuthorityUnreachableError(
                f"{type(e).__name__}: {detail}" if detail else type(e).__name__
            ) from e

        elapsed_ms = int((time.perf_counter() - start) * 1000)

        if not response.is_success:
            message = failure_message(response)
            logger.info(
                "authority_error_response",
                method=method,
                url=url,
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
            )
            raise AuthorityError(
                status_code=response.status_code,
                message=message,
                body=response.content,
                content_type=response.headers.get("content-type"),
            )

        logger.debug(
            "authority_response",
            method=method,
            url=url,
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
        )
        return AuthorityResponse(
            status_code=response.status_code,
            content=response.content,
            content_type=response.headers.get("content-type"),
        )

    async def create_member(self, payload: Any) -> AuthorityResponse:
        """POST /members"""
        return await self._request("POST", "/members", payload=payload)

    async def get_member(self, member_id: int) -> AuthorityResponse:
        """GET /members/{id}"""
        return await self._request("GET", f"/members/{member_id}")

    async def update_member(self, member_id: int, payload: Any) -> AuthorityResponse:
        """PUT /members/{id}"""
        return await self._request("PUT", f"/members/{member_id}", payload=payload)

    async def delete_member(self, member_id: int) -> AuthorityResponse:
        """DELETE /members/{id}"""
        return await self._request("DELETE", f"/members/{member_id}")
