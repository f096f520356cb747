from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging
import uvicorn

from gestion_transporte.core.config import Settings, get_settings
from gestion_transporte.core.database import Base, build_engine, build_session_factory
from gestion_transporte.core.logging_config import setup_logging

import gestion_transporte.models  # Ensure models are registered

from gestion_transporte.routes.identification_types import id_type_router
from gestion_transporte.services.identification_type_service import IdentificationTypeException

logger = logging.getLogger(__name__)

GENERIC_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ---- STARTUP ----
    if app.state.settings.CREATE_TABLES:
        Base.metadata.create_all(bind=app.state.engine)

    yield

    # ---- SHUTDOWN ----
    app.state.engine.dispose()


async def identification_type_error_handler(request: Request, exc: IdentificationTypeException):
    logger.error(
        f"{request.method} {request.url.path} failed: {exc.__class__.__name__}: {exc.message}",
        exc_info=exc.__cause__ or exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_ERROR_DETAIL},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_ERROR_DETAIL},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Settings are resolved once here; the engine and session factory built
    from them live on ``app.state`` for the lifetime of the app.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Gestion Transporte API",
        version="1.0.0",
        lifespan=lifespan
    )

    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_exception_handler(IdentificationTypeException, identification_type_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(id_type_router, prefix=settings.API_PREFIX)

    @app.get(f"{settings.API_PREFIX}/")
    def root():
        return {"message": "Gestion Transporte API is running"}

    logger.info(f"Application configured for {settings.ENVIRONMENT} environment")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "gestion_transporte.main:app",
        host="0.0.0.0",
        port=8000,
        reload=app.state.settings.ENVIRONMENT == "development",
    )
