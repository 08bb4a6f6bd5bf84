"""Checkstyle verification engine."""

from zeus.engine.checkstyle.engine import (
    EngineDeps,
    check_many,
    check_one,
    collect,
    default_engine_deps,
)
from zeus.engine.checkstyle.models import BatchSummary, FileResult, State
from zeus.engine.checkstyle.style import Style

__all__ = [
    "BatchSummary",
    "EngineDeps",
    "FileResult",
    "State",
    "Style",
    "check_many",
    "check_one",
    "collect",
    "default_engine_deps",
]
