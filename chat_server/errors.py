class ChatServerError(Exception):
    """Base class for errors raised by the chat server."""

    status_code: int = 500


class TransformError(ChatServerError):
    """A message could not be transformed."""
