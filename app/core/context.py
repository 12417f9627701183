"""
Request-scoped context shared by the logger and the middleware
"""

import uuid
from contextvars import ContextVar
from typing import Optional

correlation_id_ctx: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get the correlation ID from the current context"""
    return correlation_id_ctx.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current context"""
    correlation_id_ctx.set(correlation_id)


def new_correlation_id() -> str:
    """Start a fresh correlation ID for work that does not come from a request"""
    correlation_id = str(uuid.uuid4())
    set_correlation_id(correlation_id)
    return correlation_id
