"""A small interactive shell with built-ins, redirection and background jobs."""

__version__ = "1.0.0"
__all__ = ["command", "executor", "shell"]