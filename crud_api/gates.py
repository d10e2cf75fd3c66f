"""Per-route validation gates.

A gate inspects a `GateContext` and either returns it (possibly with
values attached to ``ctx.state``) to let the request continue, or
returns a `Reject` to answer the request immediately. Routes declare
their gates as an ordered list; `run_gates` folds the context through
that list and stops at the first rejection.

`gate_chain` adapts a gate list into a FastAPI dependency so routes can
write ``ctx: GateContext = Depends(gate_chain(check_user_exists))``.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, Union

from fastapi import Request

from .errors import MALFORMED_BODY, GateRejected
from .models import is_project_id
from .repositories import ProjectRepository, UserRepository

USER_NAME_REQUIRED = "User name is required"
USER_NOT_FOUND = "User does not exists"
INVALID_PROJECT_ID = "Invalid project ID."

_INDEX_RE = re.compile(r"0|[1-9][0-9]*")
_BODY_METHODS = {"POST", "PUT", "PATCH"}


@dataclass
class GateContext:
    params: dict[str, str] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)
    users: Optional[UserRepository] = None
    projects: Optional[ProjectRepository] = None
    state: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Reject:
    status_code: int
    error: str


GateResult = Union[GateContext, Reject]
Gate = Callable[[GateContext], GateResult]


def run_gates(gates: Sequence[Gate], ctx: GateContext) -> GateResult:
    """Apply `gates` in order, returning the first `Reject` or the final context."""
    result: GateResult = ctx
    for gate in gates:
        result = gate(result)
        if isinstance(result, Reject):
            return result
    return result


def parse_index(raw: Optional[str]) -> Optional[int]:
    """Return `raw` as a list position, or None unless it is a plain decimal."""
    if raw is None or not _INDEX_RE.fullmatch(raw):
        return None
    return int(raw)


def check_user_exists(ctx: GateContext) -> GateResult:
    """Require a non-empty string ``name`` in the request body."""
    name = ctx.body.get("name")
    if not isinstance(name, str) or not name:
        return Reject(400, USER_NAME_REQUIRED)
    return ctx


def check_user_in_array(ctx: GateContext) -> GateResult:
    """Resolve the ``index`` route param to a stored user.

    On success the name and position are attached as ``state["user"]``
    and ``state["index"]``.
    """
    index = parse_index(ctx.params.get("index"))
    user = ctx.users.get(index) if index is not None else None
    if user is None:
        return Reject(400, USER_NOT_FOUND)
    ctx.state["user"] = user
    ctx.state["index"] = index
    return ctx


def validate_project_id(ctx: GateContext) -> GateResult:
    if not is_project_id(ctx.params.get("id", "")):
        return Reject(400, INVALID_PROJECT_ID)
    return ctx


async def _read_json_object(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError:
        raise GateRejected(400, MALFORMED_BODY) from None
    return payload if isinstance(payload, dict) else {}


def gate_chain(*gates: Gate):
    """Build a FastAPI dependency running `gates` against the current request.

    The dependency returns the final `GateContext`; a rejection is raised
    as `GateRejected` and rendered by the registered error handler.
    """

    async def dependency(request: Request) -> GateContext:
        body = await _read_json_object(request) if request.method in _BODY_METHODS else {}
        ctx = GateContext(
            params=dict(request.path_params),
            body=body,
            users=request.app.state.users,
            projects=request.app.state.projects,
        )
        result = run_gates(gates, ctx)
        if isinstance(result, Reject):
            raise GateRejected(result.status_code, result.error)
        return result

    return dependency
