"""Terminal task manager that stores its tasks in a JSON file."""

__version__ = "0.1.0"
__all__ = ["cli", "storage", "task"]