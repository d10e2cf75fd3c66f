"""Request logging.

Two loggers observe requests without touching them:

- `request_logging_middleware` runs for every request. It logs the
  method and URL, times the rest of the pipeline and logs the elapsed
  time once a response (or an exception) comes back.
- `log_project_request` is a yield dependency attached to the projects
  router. It writes its own ``[projects]`` labelled lines on a separate
  logger so both timings can be read side by side.
"""

import json
import logging
import time
import uuid

from fastapi import Request, Response

logger = logging.getLogger("crud_api.requests")
project_logger = logging.getLogger("crud_api.projects")


def _url(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


async def request_logging_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    logger.info("request_started method=%s url=%s request_id=%s", request.method, _url(request), req_id)
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "method": request.method,
                    "url": _url(request),
                    "duration_ms": elapsed_ms,
                },
                ensure_ascii=False,
            ),
        )
        raise
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info(
        "request_done %s",
        json.dumps(
            {
                "request_id": req_id,
                "method": request.method,
                "url": _url(request),
                "status_code": response.status_code,
                "duration_ms": elapsed_ms,
            },
            ensure_ascii=False,
        ),
    )
    return response


async def log_project_request(request: Request):
    """Time a projects route under the ``[projects]`` label."""
    project_logger.info("[projects] %s %s", request.method, _url(request))
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        project_logger.info("[projects] %s %s took %.2fms", request.method, _url(request), elapsed_ms)
