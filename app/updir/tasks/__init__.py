"""Background task helpers."""

from updir.tasks.detached import effective_error, run_detached

__all__ = [
    "effective_error",
    "run_detached",
]
