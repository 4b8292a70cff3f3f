"""
RequestContext management.
Use ContextVar to share the invocation id across one client call.
"""

import uuid
from contextvars import ContextVar
from typing import Optional


# Context variable for the invocation id (UUID) of the current call.
_invocation_id_var: ContextVar[Optional[str]] = ContextVar("invocation_id", default=None)


def get_invocation_id() -> Optional[str]:
    """Get the current invocation id."""
    return _invocation_id_var.get()


def generate_invocation_id() -> str:
    """
    Generate and set a new invocation id for the current context.
    """
    new_id = str(uuid.uuid4())
    _invocation_id_var.set(new_id)
    return new_id


def clear_invocation_id() -> None:
    """Clear the invocation id context."""
    _invocation_id_var.set(None)
