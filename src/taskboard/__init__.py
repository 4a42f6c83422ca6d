"""taskboard - terminal task board with server-confirmed editing."""

__version__ = "0.1.0"
