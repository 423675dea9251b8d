import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import get_settings
from app.core.exceptions import CipherClassroomError, EngineNotFoundError, ValidationError
from app.models.schemas import ErrorResponse

settings = get_settings()

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Set up root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def cipher_error_handler(request: Request, exc: CipherClassroomError) -> JSONResponse:
    """Render application errors as ErrorResponse bodies."""
    if isinstance(exc, EngineNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)

    body = ErrorResponse(error=type(exc).__name__, message=exc.message, details=exc.details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classical Cipher Classroom API. "
            "Encrypt and decrypt text with classical and competition ciphers, "
            "check cryptarithm solutions, and practise with generated challenges."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CipherClassroomError, cipher_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
