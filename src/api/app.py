from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from libs.result import Error
from src.adapter.services.database import Database
from .error import ClientError, ServerError, error_body
from .middleware import RequestLoggingMiddleware
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    body = error_body(exc.base_error)
    logger.warning(f"Client error: {body}")
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(
        f"Server error: {exc.base_error.code} on {request.method} {request.url.path} "
        f"- {exc.base_error.reason}"
    )
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.base_error))


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    body = error_body(
        Error(code="INVALID_INPUT", message="Invalid request body", reason=problems)
    )
    logger.warning(f"Client error: {body}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    body = error_body(
        Error(code="INTERNAL_ERROR", message="Internal server error", reason=str(exc))
    )
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)


def create_app(ApplicationConfig, database: Database = None) -> FastAPI:
    if database is None:
        database = Database(
            ApplicationConfig.DB_URI,
            echo=ApplicationConfig.DB_ECHO,
            pool_size=ApplicationConfig.DB_POOL_SIZE,
            max_overflow=ApplicationConfig.DB_MAX_OVERFLOW,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Project tracker API starting")
        yield
        logger.info("Project tracker API shutting down")
        await app.state.database.dispose()

    app = FastAPI(title="Project Tracker API", version="0.1.0", lifespan=lifespan)
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from src.api.routes import health_check, projects

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(projects.router, prefix=ApplicationConfig.API_PREFIX, tags=["Projects"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
