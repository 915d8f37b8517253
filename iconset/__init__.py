"""Build tooling for the icon repository: catalogs, sprites, audits."""

from .codepoints import CodepointsFormatError, build_ijmap, titleize, write_ijmap
from .tasks import TASKS, UnknownTaskError, run_task

__version__ = "0.1.0"

__all__ = [
    "CodepointsFormatError",
    "TASKS",
    "UnknownTaskError",
    "build_ijmap",
    "run_task",
    "titleize",
    "write_ijmap",
]
