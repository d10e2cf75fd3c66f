"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and document the routes in
the generated OpenAPI description.
"""

from pydantic import BaseModel
from typing import Optional


class ProjectIn(BaseModel):
    """Payload for creating or replacing a project."""
    title: Optional[str] = None
    owner: Optional[str] = None


class ProjectOut(BaseModel):
    """Project representation returned by the API."""
    id: str
    title: Optional[str] = None
    owner: Optional[str] = None


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    """Body of every 400 response produced by a validation gate."""
    error: str
