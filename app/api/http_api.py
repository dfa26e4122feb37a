"""
HTTP API adapter for the Gemini task proxy.

Architectural role:
- Expose a single task-dispatch endpoint to the browser frontend.
- Keep the provider API key on the server.
- Validate task name and parameters before any provider call.
- Normalize handler output or failure to JSON responses.

Endpoint responsibilities:
- `POST /api/gemini`: dispatch `{task, params}` to the registered handler.
- Any other method on `/api/gemini`: HTTP 405.
- `GET /api/tasks`: list registered task names.
- `GET /health`: liveness probe.

API request lifecycle (`POST /api/gemini`):
1. Parse request JSON and read `task` / `params`.
2. Look up `task` in `app.core.tasks` (exact match).
3. Validate `params` against the task's parameter model.
4. Build a per-request client from process configuration.
5. Run the handler (blocking I/O, executed in the threadpool).
6. Return the handler result as HTTP 200.

Input validation behavior:
- Body that is not valid JSON -> HTTP 400.
- Unknown or missing `task` -> HTTP 400 `Invalid task specified`.
- `params` rejected by the task model -> HTTP 400.

Error handling strategy:
- Routing and validation failures never reach the provider.
- Every handler exception is logged with traceback and returned as HTTP 500
  with `str(exc)`, or a generic message when the exception has none.
"""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.tasks import TASKS, get_task
from app.llm.client import make_client
from app.llm.provider_config import load_config

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An internal server error occurred"

app = FastAPI(
    title="Mockup Studio API",
    version="1.0.0",
    description="Server-side proxy for Gemini image and listing tasks.",
)

# Comma-separated list of browser origins allowed to call the proxy.
# Unset means same-origin only: no CORS headers, preflights get 405.
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "").split(",")
    if origin.strip()
]

if CORS_ALLOW_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=["POST"],
        allow_headers=["*"],
    )


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into `field: message; ...` using wire field names."""
    details = []
    for err in exc.errors():
        location = ".".join(str(item) for item in err.get("loc", ())) or "params"
        details.append(f"{location}: {err.get('msg')}")
    return "; ".join(details)


# ============================================================
# Task Dispatch
# ============================================================

@app.post("/api/gemini")
async def dispatch_task(request: Request):
    """
    Route one `{task, params}` request to its handler.

    Returns:
    - 200 with the handler's result object.
    - 400 for invalid JSON, unknown task, or invalid params.
    - 500 for any failure raised by the handler or provider.
    """
    try:
        body = await request.json()
    except ValueError:
        return error_response(400, "Request body must be valid JSON")

    if not isinstance(body, dict):
        body = {}

    task_name = body.get("task")
    spec = get_task(task_name)
    if spec is None:
        return error_response(400, "Invalid task specified")

    raw_params = body.get("params")
    if raw_params is None:
        raw_params = {}

    try:
        params = spec.params_model.model_validate(raw_params)
    except ValidationError as exc:
        return error_response(
            400, f"Invalid parameters for task '{spec.name}': {format_validation_error(exc)}"
        )

    try:
        client = make_client(load_config())
        result = await run_in_threadpool(spec.handler, client, params)
    except Exception as exc:
        logger.exception("Error in task %s", spec.name)
        return error_response(500, str(exc) or GENERIC_ERROR_MESSAGE)

    return result


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Give every 405 the `{"error": ...}` shape; other HTTP errors keep FastAPI defaults."""
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    response = error_response(405, "Method Not Allowed")
    if exc.headers:
        response.headers.update(exc.headers)
    return response


# ============================================================
# Discovery / Health
# ============================================================

@app.get("/api/tasks")
def list_tasks():
    """Return the registered task names."""
    return {"tasks": list(TASKS)}


@app.get("/health")
def health():
    return {"status": "ok"}
