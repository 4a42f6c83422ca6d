"""Backend interfaces."""

from .protocol import TaskApiProtocol

__all__ = [
    "TaskApiProtocol",
]
