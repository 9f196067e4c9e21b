"""
Taskboard Server — FastAPI Wiring for the Task Handlers
========================================================
Routes HTTP requests to TaskHandlers and renders their HandlerResponse
as JSON.

Launch:
    python -m taskboard.server          # Direct
    python -m taskboard.cli serve       # Via CLI

Endpoints (relative to the API prefix, default /api):
    GET    /tasks                → All tasks
    POST   /tasks                → Create a task  {"title": "..."}
    GET    /tasks/{id}           → One task
    PATCH  /tasks/{id}/done      → Mark a task complete
    GET    /                     → Plain-text banner (outside the prefix)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from taskboard import __version__
from taskboard.config import ServerConfig
from taskboard.handlers import HandlerResponse, TaskHandlers
from taskboard.task_logger import TaskLogger, configure_logging
from taskboard.task_store import TaskStore


# ─────────────────────────────────────────────────────────────
#  Response Models (OpenAPI documentation only)
# ─────────────────────────────────────────────────────────────

class TaskModel(BaseModel):
    id: int
    title: str
    completed: bool


class ErrorModel(BaseModel):
    error: str


# ─────────────────────────────────────────────────────────────
#  Helpers
# ─────────────────────────────────────────────────────────────

def get_handlers(request: Request) -> TaskHandlers:
    """Dependency — the handlers bound to this app's store."""
    return request.app.state.handlers


def _render(response: HandlerResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status, content=response.body)


async def _read_body(request: Request):
    """Parsed JSON body, or an empty mapping when absent or malformed."""
    try:
        return await request.json()
    except ValueError:
        return {}


# ─────────────────────────────────────────────────────────────
#  Routes — Tasks
# ─────────────────────────────────────────────────────────────

router = APIRouter()


@router.get("/tasks")
async def list_tasks(handlers: TaskHandlers = Depends(get_handlers)):
    """Return every task in creation order."""
    return _render(handlers.list())


@router.post(
    "/tasks",
    status_code=201,
    responses={201: {"model": TaskModel}, 400: {"model": ErrorModel}},
)
async def create_task(request: Request, handlers: TaskHandlers = Depends(get_handlers)):
    """Create an open task from {"title": "..."}."""
    body = await _read_body(request)
    return _render(handlers.create(body))


@router.get(
    "/tasks/{task_id}",
    responses={200: {"model": TaskModel}, 404: {"model": ErrorModel}},
)
async def get_task(task_id: str, handlers: TaskHandlers = Depends(get_handlers)):
    """Return one task by id."""
    return _render(handlers.get_by_id(task_id))


@router.patch(
    "/tasks/{task_id}/done",
    responses={
        200: {"model": TaskModel},
        400: {"model": ErrorModel},
        404: {"model": ErrorModel},
    },
)
async def mark_task_done(task_id: str, handlers: TaskHandlers = Depends(get_handlers)):
    """Mark a task complete. Completing a done task is a no-op."""
    return _render(handlers.mark_done(task_id))


# ─────────────────────────────────────────────────────────────
#  App Factory
# ─────────────────────────────────────────────────────────────

def create_app(
    store: Optional[TaskStore] = None,
    config: Optional[ServerConfig] = None,
    logger: Optional[TaskLogger] = None,
) -> FastAPI:
    """Build the FastAPI app around an (optionally injected) TaskStore."""
    config = config or ServerConfig()
    store = store if store is not None else TaskStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        store.reset()

    app = FastAPI(title="Taskboard", version=__version__, lifespan=lifespan)
    app.state.config = config
    app.state.store = store
    app.state.handlers = TaskHandlers(store, logger=logger)

    app.include_router(router, prefix=config.api_prefix)

    @app.get("/", response_class=PlainTextResponse)
    async def index():
        return config.banner

    return app


def run_server(config: Optional[ServerConfig] = None):
    """Launch the Taskboard server with uvicorn."""
    import uvicorn

    config = config or ServerConfig.from_env()
    configure_logging(config.log_level)
    app = create_app(config=config)

    print(f"Server running at {config.base_url}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run_server()
