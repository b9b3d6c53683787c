"""Snackboard Server - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from snackboard.config import settings
from snackboard.database import engine, init_db
from snackboard.errors import SnackboardError

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database and the admin account on startup."""
    from snackboard.services.auth_service import ensure_admin

    init_db()
    with Session(engine) as session:
        ensure_admin(session)
    logger.info("%s ready (db=%s)", settings.app_name, settings.database_path)

    yield


app = FastAPI(
    title=settings.app_name,
    description="Family snack selection within a points budget",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error responses: {message} or {message, field} ---

@app.exception_handler(SnackboardError)
async def snackboard_error_handler(request: Request, exc: SnackboardError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report the first offending field, e.g. {"message": ..., "field": "pointsAllowed"}."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = [str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path")]
    body = {"message": first.get("msg", "Invalid request")}
    if loc:
        body["field"] = ".".join(loc)
    return JSONResponse(status_code=400, content=body)


# --- Register API routers ---
from snackboard.api.auth import router as auth_router  # noqa: E402
from snackboard.api.categories import router as categories_router  # noqa: E402
from snackboard.api.families import router as families_router  # noqa: E402
from snackboard.api.snacks import router as snacks_router  # noqa: E402
from snackboard.api.selections import router as selections_router  # noqa: E402
from snackboard.api.master_list import router as master_list_router  # noqa: E402

API_PREFIX = "/api"

app.include_router(auth_router, prefix=API_PREFIX)
app.include_router(categories_router, prefix=API_PREFIX)
app.include_router(families_router, prefix=API_PREFIX)
app.include_router(snacks_router, prefix=API_PREFIX)
app.include_router(selections_router, prefix=API_PREFIX)
app.include_router(master_list_router, prefix=API_PREFIX)


@app.get("/")
def root():
    """Server info."""
    return {
        "name": settings.app_name,
        "version": VERSION,
        "status": "running",
    }


@app.get("/api/health")
def health():
    return {"status": "ok"}
