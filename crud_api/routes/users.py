"""Users endpoints.

Users are addressed by their position in the list. Every route that
takes an ``index`` resolves it through `check_user_in_array`; create
and update require a ``name`` through `check_user_exists`.

Endpoints implemented:
- GET /teste
- GET /users
- GET /users/{index}
- POST /users
- PUT /users/{index}
- DELETE /users/{index}
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response

from ..errors import GateRejected
from ..gates import USER_NOT_FOUND, GateContext, check_user_exists, check_user_in_array, gate_chain
from ..repositories import UserRepository
from ..schemas import ErrorOut, MessageOut

router = APIRouter()

_gate_responses = {400: {"model": ErrorOut}}


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.users


@router.get("/teste", response_model=MessageOut)
def echo_query(nome: Optional[str] = None):
    """Greet the ``nome`` query parameter; an absent value greets nobody."""
    return {"message": f"Hello {nome if nome is not None else ''}"}


@router.get("/users", response_model=List[str])
def list_users(users: UserRepository = Depends(get_user_repository)):
    return users.list()


@router.get("/users/{index}", response_model=MessageOut, responses=_gate_responses)
def get_user(index: str, ctx: GateContext = Depends(gate_chain(check_user_in_array))):
    """Describe the user stored at ``index``."""
    return {"message": f"Buscando o usuário {ctx.state['user']}"}


@router.post("/users", response_model=List[str], responses=_gate_responses)
def create_user(ctx: GateContext = Depends(gate_chain(check_user_exists))):
    """Append ``name`` to the list and return the whole list."""
    return ctx.users.insert(ctx.body["name"])


@router.put("/users/{index}", response_model=List[str], responses=_gate_responses)
def update_user(
    index: str,
    ctx: GateContext = Depends(gate_chain(check_user_exists, check_user_in_array)),
):
    """Overwrite the user at ``index`` with ``name`` and return the whole list."""
    updated = ctx.users.update(ctx.state["index"], ctx.body["name"])
    if updated is None:
        raise GateRejected(400, USER_NOT_FOUND)
    return updated


@router.delete("/users/{index}", responses=_gate_responses)
def delete_user(index: str, ctx: GateContext = Depends(gate_chain(check_user_in_array))):
    """Remove the user at ``index``; later users move down one position."""
    if ctx.users.remove(ctx.state["index"]) is None:
        raise GateRejected(400, USER_NOT_FOUND)
    return Response(status_code=200)
