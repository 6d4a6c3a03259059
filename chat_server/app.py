from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from chat_server.config import Settings, settings as default_settings
from chat_server.errors import ChatServerError
from chat_server.logging import configure_logging
from chat_server.routers.chat import build_router
from chat_server.schema import MessageResponse
from chat_server.transform import Transformer, uppercase


@asynccontextmanager
async def lifetime(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"Starting {app.title}")
    yield
    logger.info(f"Shutting down {app.title}")


async def handle_chat_server_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = getattr(exc, "status_code", 500)
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app(settings: Settings | None = None, transform: Transformer = uppercase) -> FastAPI:
    """Assemble the FastAPI application.

    The transformer is handed straight to the chat router, so swapping it
    out (in tests, for instance) needs no dependency overrides.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)
    application = FastAPI(title=settings.PROJECT_NAME, lifespan=lifetime)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(ChatServerError, handle_chat_server_error)

    application.include_router(build_router(transform))

    @application.get("/ping")
    async def ping() -> MessageResponse:
        return MessageResponse(message="Pong!")

    return application


app = create_app()
