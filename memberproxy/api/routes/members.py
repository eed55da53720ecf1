"""Member endpoints proxied to the Member Authority.

Each endpoint forwards its request unchanged and mirrors the Authority's
status code, body and content type on success. Failures propagate as
exceptions and are rendered by the global handlers.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Response

from memberproxy.api.dependencies import MemberProxyDep
from memberproxy.authority.client import AuthorityResponse

router = APIRouter(prefix="/members")

MemberPayload = Annotated[Any, Body(description="Opaque member payload")]


def _mirror(response: AuthorityResponse) -> Response:
    return Response(
        content=response.content,
        status_code=response.status_code,
        media_type=response.content_type,
    )


@router.post("")
async def create_member(proxy: MemberProxyDep, payload: MemberPayload) -> Response:
    """Create a member."""
    return _mirror(await proxy.create_member(payload))


@router.get("/{member_id}")
async def get_member(member_id: int, proxy: MemberProxyDep) -> Response:
    """Fetch a member by id."""
    return _mirror(await proxy.get_member(member_id))


@router.put("/{member_id}")
async def update_member(
    member_id: int, proxy: MemberProxyDep, payload: MemberPayload
) -> Response:
    """Update a member."""
    return _mirror(await proxy.update_member(member_id, payload))


@router.delete("/{member_id}")
async def delete_member(member_id: int, proxy: MemberProxyDep) -> Response:
    """Delete a member."""
    return _mirror(await proxy.delete_member(member_id))
