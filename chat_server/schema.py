"""Pydantic models for request and response validation."""
from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """A chat message as sent by the client.

    The text travels as ``userMessage`` on the wire and that is the only
    key accepted when building one. Instances are frozen, so transforming a
    message always produces a new one.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(alias="userMessage")


class MessageResponse(BaseModel):
    message: str
