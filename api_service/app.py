"""
FastAPI service for the job board.

Provides the REST API used by the front end to create job postings and to
search them by text, location, job type and salary range.
"""

import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from jobboard.common.error_handling import (
    DomainRuleError,
    FieldError,
    FieldValidationError,
    StoreError,
)
from jobboard.common.logger import setup_logging
from version import __version__

from .config import settings, validate_config_on_startup
from .models import HealthResponse
from .routes import jobs_router

setup_logging(level=settings.log_level, format=settings.log_format)
logger = logging.getLogger(__name__)

# Validate configuration at startup
validate_config_on_startup()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.ensure_indexes_on_startup:
        from .routes.jobs import get_job_service
        get_job_service().repository.ensure_indexes()
    logger.info(f"Job Posting API started on port {settings.port}")
    yield


app = FastAPI(title="Job Posting API", version=__version__, lifespan=lifespan)

if settings.cors_origins_list:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(jobs_router, prefix=settings.api_prefix)


# =============================================================================
# Error handlers
# =============================================================================

def _server_error_body(exc: BaseException) -> dict:
    body = {"message": "Server Error", "error": str(exc)}
    if settings.expose_error_details:
        body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return body


@app.exception_handler(FieldValidationError)
async def field_validation_error_handler(request: Request, exc: FieldValidationError):
    return JSONResponse(status_code=400, content=exc.to_dict())


@app.exception_handler(DomainRuleError)
async def domain_rule_error_handler(request: Request, exc: DomainRuleError):
    return JSONResponse(status_code=400, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies in the same per-field shape as rule failures."""
    errors = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error.get("loc", ())[1:]) or "body"
        errors.append(FieldError(path=path, msg=error.get("msg", "Invalid value"), value=error.get("input")))
    return JSONResponse(status_code=400, content=FieldValidationError(errors).to_dict())


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(f"Store error on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=500, content=_server_error_body(exc.cause or exc))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=_server_error_body(exc))


# =============================================================================
# Service endpoints
# =============================================================================

@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Job Posting API is running. Use POST /api/jobs to create and GET /api/jobs to search."


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="healthy", version=__version__, environment=settings.environment)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api_service.app:app", host="0.0.0.0", port=settings.port)
