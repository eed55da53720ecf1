"""In-process stand-in for the Member Authority."""

import json
from itertools import count
from typing import Any

import httpx


class FakeMemberAuthority:
    """Handler for ``httpx.MockTransport`` serving the /members resource.

    Mirrors the real service: 201 with the stored member on create, 404 with
    a plain-text message for unknown ids, 204 on delete. ``fail_with``
    makes every following request raise a transport exception instead.
    """

    def __init__(self) -> None:
        self.members: dict[int, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self._ids = count(1)
        self._failure: tuple[type[httpx.HTTPError], str] | None = None

    def fail_with(self, exc_type: type[httpx.HTTPError], message: str) -> None:
        self._failure = (exc_type, message)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._failure is not None:
            exc_type, message = self._failure
            raise exc_type(message, request=request)

        parts = request.url.path.strip("/").split("/")
        if request.method == "POST" and parts == ["members"]:
            member = {"id": next(self._ids), **json.loads(request.content)}
            self.members[member["id"]] = member
            return httpx.Response(201, json=member)

        member_id = int(parts[1])
        if member_id not in self.members:
            return httpx.Response(404, text=f"Member not found with id: {member_id}")

        if request.method == "GET":
            return httpx.Response(200, json=self.members[member_id])
        if request.method == "PUT":
            data = json.loads(request.content)
            self.members[member_id].update(
                name=data.get("name"), contact=data.get("contact")
            )
            return httpx.Response(200, json=self.members[member_id])
        if request.method == "DELETE":
            del self.members[member_id]
            return httpx.Response(204)
        return httpx.Response(405)
