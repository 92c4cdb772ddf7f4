"""Main FastAPI application."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal.core.config import Settings, settings as default_settings
from portal.core.logging import setup_logging, get_logger
from portal.core.middleware import RequestIDMiddleware
from portal.core.exceptions import (
    BaseAPIException,
    base_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler,
)
from portal.api import (
    health_router,
    documents_router,
    session_router,
    contact_router,
    content_router,
)
from portal.services.library import DocumentLibrary, build_store
from portal.services.parsing import DocumentParser
from portal.services.session import SessionStore

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Connect the document storage on startup and release it on shutdown."""
    config: Settings = app.state.settings
    logger.info(f"Starting {config.APP_NAME} v{config.APP_VERSION}")
    logger.info(f"Environment: {config.ENVIRONMENT}")

    store = app.state.document_library.store
    try:
        await store.connect()
        logger.info(
            "Document storage connected",
            extra={"backend": type(store).__name__},
        )
    except Exception as e:
        logger.error(f"Startup failed: {str(e)}", exc_info=True)
        raise

    yield

    logger.info("Shutting down application")
    try:
        await app.state.document_library.store.disconnect()
        logger.info("Application shutdown complete")
    except Exception as e:
        logger.error(f"Shutdown error: {str(e)}", exc_info=True)


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Build the portal application.

    Each application owns its session store, document parser and document
    library; routers reach them through app.state.
    """
    config = config or default_settings

    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        description="Content service for the LMS portal: document parsing, sessions and course content",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
        debug=config.DEBUG,
    )

    app.state.settings = config
    app.state.session_store = SessionStore()
    app.state.document_parser = DocumentParser()
    app.state.document_library = DocumentLibrary(
        build_store(config),
        key=config.DOCUMENT_LIBRARY_KEY,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(BaseAPIException, base_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(health_router, prefix="", tags=["Health"])
    app.include_router(documents_router, prefix=config.API_V1_PREFIX)
    app.include_router(session_router, prefix=config.API_V1_PREFIX)
    app.include_router(contact_router, prefix=config.API_V1_PREFIX)
    app.include_router(content_router, prefix=config.API_V1_PREFIX)

    @app.get("/", tags=["Root"])
    async def root():
        return {
            "name": config.APP_NAME,
            "version": config.APP_VERSION,
            "environment": config.ENVIRONMENT,
            "status": "running",
        }

    return app


setup_logging(default_settings)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portal.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
