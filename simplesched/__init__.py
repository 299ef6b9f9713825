"""An interactive shell with a time-sliced, priority-aware process scheduler."""

__version__ = "0.1.0"

__all__ = ["tasks", "queue", "table", "priority", "scheduler", "shell"]