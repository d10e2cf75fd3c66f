"""Projects endpoints.

Projects are addressed by a generated identifier. Every route runs the
scoped ``[projects]`` request logger; routes under ``/projects/{id}``
check the identifier format with `validate_project_id` first.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response

from ..errors import ProjectNotFound
from ..gates import GateContext, gate_chain, validate_project_id
from ..logging_middleware import log_project_request
from ..repositories import ProjectRepository
from ..schemas import ErrorOut, ProjectIn, ProjectOut

router = APIRouter(prefix="/projects", dependencies=[Depends(log_project_request)])

_gate_responses = {400: {"model": ErrorOut}}


def get_project_repository(request: Request) -> ProjectRepository:
    return request.app.state.projects


@router.get("", response_model=List[ProjectOut])
def list_projects(title: Optional[str] = None, projects: ProjectRepository = Depends(get_project_repository)):
    """List projects, optionally only those whose title contains ``title``."""
    return [p.to_dict() for p in projects.list(title)]


@router.post("", response_model=ProjectOut)
def create_project(
    payload: Optional[ProjectIn] = None,
    projects: ProjectRepository = Depends(get_project_repository),
):
    payload = payload or ProjectIn()
    return projects.insert(payload.title, payload.owner).to_dict()


@router.put("/{id}", response_model=ProjectOut, responses=_gate_responses)
def update_project(
    id: str,
    payload: Optional[ProjectIn] = None,
    ctx: GateContext = Depends(gate_chain(validate_project_id)),
):
    """Replace title and owner of a project; the identifier never changes."""
    payload = payload or ProjectIn()
    project = ctx.projects.update(id, payload.title, payload.owner)
    if project is None:
        raise ProjectNotFound(id)
    return project.to_dict()


@router.delete("/{id}", status_code=204, responses=_gate_responses)
def delete_project(id: str, ctx: GateContext = Depends(gate_chain(validate_project_id))):
    if not ctx.projects.remove(id):
        raise ProjectNotFound(id)
    return Response(status_code=204)
