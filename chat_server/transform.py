from collections.abc import Callable

from chat_server.errors import TransformError
from chat_server.schema import ChatMessage


Transformer = Callable[[ChatMessage], ChatMessage]


def uppercase(message: ChatMessage) -> ChatMessage:
    """Return a new message with the text upper-cased.

    ``str.upper`` does not consult the process locale, so the result is the
    same on every host. The input message is left untouched.
    """
    text = getattr(message, "text", None)
    if not isinstance(text, str):
        raise TransformError(f"Cannot uppercase a message without text ({text=})")
    return ChatMessage(userMessage=text.upper())
