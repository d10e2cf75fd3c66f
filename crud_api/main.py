"""FastAPI application entrypoint.

`create_app` builds a fully wired application: logging, fresh in-memory
repositories on ``app.state``, the global request logger, the JSON
error handlers and the users/projects routers. A module-level ``app``
is created at import time so it can be served with::

    uvicorn crud_api.main:app --reload

Each call to `create_app` starts from the configured seed, which is
what the test-suite relies on for isolation.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .config import Settings, settings as default_settings
from .errors import register_error_handlers
from .logging_middleware import request_logging_middleware
from .repositories import ProjectRepository, UserRepository
from .routes import projects, users

logger = logging.getLogger("crud_api.api")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application."""
    settings = settings or default_settings
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(title="Users & Projects API")
    app.state.settings = settings
    app.state.users = UserRepository(settings.SEED_USERS)
    app.state.projects = ProjectRepository()

    app.middleware("http")(request_logging_middleware)
    register_error_handlers(app)

    app.include_router(users.router, tags=["users"])
    app.include_router(projects.router, tags=["projects"])

    @app.get("/health")
    def health():
        """Lightweight health check for uptime monitoring."""
        return {"status": "ok"}

    logger.debug("application created with %d seeded users", len(app.state.users))
    return app


app = create_app()
