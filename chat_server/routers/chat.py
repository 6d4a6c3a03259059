from fastapi import APIRouter
from loguru import logger

from chat_server.schema import ChatMessage
from chat_server.transform import Transformer, uppercase


def build_router(transform: Transformer = uppercase) -> APIRouter:
    """Build the chat router around the given transformer."""
    router = APIRouter(tags=["chat"])

    @router.post("/sendChat")
    async def send_chat(message: ChatMessage) -> ChatMessage:
        logger.debug(f"Transforming message of length {len(message.text)}")
        return transform(message)

    return router
