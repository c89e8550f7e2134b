"""Per-request correlation id."""

import uuid
from contextvars import ContextVar, Token

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """Generate a unique request ID."""
    return uuid.uuid4().hex


def get_request_id() -> str:
    """Get current request ID from context."""
    return request_id_var.get("")


def bind_request_id(request_id: str) -> Token:
    """Bind the request ID to the current context; returns the reset token."""
    return request_id_var.set(request_id)
