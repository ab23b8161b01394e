# workforce/main.py
import logging
import traceback
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workforce import database
from workforce.config import Settings
from workforce.routers import auth, employees, tasks
from workforce.schemas import FieldError
from workforce.utils.errors import AppError, status_for_message
from workforce.utils.logging_config import RequestLoggingMiddleware, setup_logging

logger = logging.getLogger(__name__)

API_NAME = "Employee & Task Management API"
API_VERSION = "2.0.0"


def _error_body(message: str, **extra) -> dict:
    return {"success": False, "message": message, **extra}


def _field_errors(exc: RequestValidationError) -> list:
    errors = []
    for err in exc.errors():
        # Drop the "body"/"query"/"path" prefix from the location
        loc = [str(part) for part in err.get("loc", ())[1:]]
        message = err.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append(FieldError(field=".".join(loc), message=message).model_dump())
    return errors


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.message)

        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = _field_errors(exc)
        logger.warning("Validation failed for %s %s", request.method, request.url.path, extra={"errors": errors})
        return JSONResponse(status_code=400, content=_error_body("Validation failed", errors=errors))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            logger.warning("404 Not Found: %s %s", request.method, request.url.path)
            return JSONResponse(status_code=404, content=_error_body("Route not found", path=request.url.path))
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        status_code = status_for_message(str(exc))
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)

        message = str(exc) if status_code != 500 else "Internal Server Error"
        body = _error_body(message)
        if settings.is_development:
            body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return JSONResponse(status_code=status_code, content=body)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API with explicitly injected settings"""
    settings = settings or Settings.from_env()
    settings.validate()
    setup_logging(settings)

    database.init_engine(settings.database_url)
    # SQLite is for local runs and tests; PostgreSQL schemas come from Alembic
    if settings.database_url.startswith("sqlite"):
        database.create_all()

    app = FastAPI(title=API_NAME, version=API_VERSION)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Route registration
    app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
    app.include_router(employees.router, prefix="/employees", tags=["Employees"])
    app.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])

    register_exception_handlers(app, settings)

    @app.get("/")
    def read_root():
        return {
            "name": API_NAME,
            "version": API_VERSION,
            "description": "Employee and task management API built with FastAPI and SQLAlchemy",
            "endpoints": {
                "documentation": "/docs",
                "auth": "/auth",
                "employees": "/employees",
                "tasks": "/tasks",
            },
            "status": "running",
        }

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info("%s configured (environment=%s)", API_NAME, settings.environment)
    return app
