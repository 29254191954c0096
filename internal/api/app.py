"""
FastAPI application factory.
The lifespan populates the DI container once; routes resolve from it.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status as http_status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import ContainerError, bootstrap_container, get_settings, logger
from internal.api.routes import create_demo_routes, create_health_routes
from internal.api.utils import handle_api_error


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.
    """
    settings = get_settings()
    logger.info(
        f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Wiring mode: {settings.wiring_mode}")

    try:
        bootstrap_container(settings.wiring_mode, settings)
    except ContainerError as e:
        logger.error(f"Failed to initialize DI Container: {e}")
        raise

    logger.info(f"========== {settings.app_name} API service started successfully ==========")
    yield
    logger.info("========== API service stopped successfully ==========")


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    tags_metadata = [
        {
            "name": "Demo",
            "description": "Controller, service and repository components resolved from the container.",
        },
        {
            "name": "Health",
            "description": "Health check endpoints for monitoring API status.",
        },
    ]

    logger.debug("Configuring FastAPI instance...")
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Inversion of Control demo: components wired by a dependency injection container.",
        lifespan=lifespan,
        openapi_tags=tags_metadata,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ContainerError)
    async def container_error_handler(request: Request, exc: ContainerError):
        logger.error(f"Container error on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=handle_api_error(exc),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content=handle_api_error(exc))

    app.include_router(create_health_routes())
    app.include_router(create_demo_routes())
    logger.info("FastAPI application created successfully")
    return app
