"""Error types and their HTTP rendering.

Every client-input failure is reported as a 400 JSON body of the form
``{"error": "<message>"}``. Anything else is left to propagate to the
server's default handling.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = "Project not found."
MALFORMED_BODY = "Malformed JSON body."
INVALID_BODY = "Invalid request body."


class GateRejected(Exception):
    """Raised when a validation gate short-circuits the request."""

    def __init__(self, status_code: int, error: str):
        super().__init__(error)
        self.status_code = status_code
        self.error = error


class ProjectNotFound(Exception):
    """Raised when a well-formed project identifier is not stored."""

    def __init__(self, project_id: str):
        super().__init__(project_id)
        self.project_id = project_id


def _error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers on `app`."""

    @app.exception_handler(GateRejected)
    async def handle_gate_rejected(request: Request, exc: GateRejected) -> JSONResponse:
        logger.warning("gate_rejected %s %s: %s", request.method, request.url.path, exc.error)
        return _error_response(exc.status_code, exc.error)

    @app.exception_handler(ProjectNotFound)
    async def handle_project_not_found(request: Request, exc: ProjectNotFound) -> JSONResponse:
        logger.warning("project_not_found %s", exc.project_id)
        return _error_response(400, PROJECT_NOT_FOUND)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        logger.warning("request_invalid %s %s: %s", request.method, request.url.path, errors)
        if any(err.get("type") == "json_invalid" for err in errors):
            return _error_response(400, MALFORMED_BODY)
        return _error_response(400, INVALID_BODY)
