"""Global HTTP middleware for request logging and response rendering."""

import json
import logging
import time

from fastapi import FastAPI, Request
from starlette.responses import Response

from blog_api.core.error_handler import classify_error

logger = logging.getLogger("blog_api.access")


async def log_requests(request: Request, call_next) -> Response:
    """Log every request on the way in and its status on the way out."""
    logger.info(f"<-- {request.method} {request.url.path}")
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"--> {request.method} {request.url.path} {response.status_code} {elapsed_ms:.0f}ms")
    return response


async def catch_unhandled_errors(request: Request, call_next) -> Response:
    """Classify failures no exception handler caught, inside the CORS and logging layers."""
    try:
        return await call_next(request)
    except Exception as exc:
        return classify_error(request, exc)


async def pretty_json(request: Request, call_next) -> Response:
    """Re-render JSON responses with indentation when ``?pretty`` is present."""
    response = await call_next(request)
    if "pretty" not in request.query_params:
        return response
    if not response.headers.get("content-type", "").startswith("application/json"):
        return response

    body = b"".join([chunk async for chunk in response.body_iterator])
    try:
        pretty = json.dumps(json.loads(body), indent=2, ensure_ascii=False).encode("utf-8")
    except ValueError:
        pretty = body

    headers = {k: v for k, v in response.headers.items() if k.lower() != "content-length"}
    return Response(
        content=pretty,
        status_code=response.status_code,
        headers=headers,
        media_type="application/json",
    )


def register_middleware(app: FastAPI) -> None:
    # Registered inner-first: log_requests wraps pretty_json, which wraps catch_unhandled_errors
    app.middleware("http")(catch_unhandled_errors)
    app.middleware("http")(pretty_json)
    app.middleware("http")(log_requests)
