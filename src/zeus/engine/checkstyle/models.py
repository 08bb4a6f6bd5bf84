from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import typer

Diagnostic = str


class Severity(Enum):
    ERROR = "ERROR"

    @property
    def tag(self) -> str:
        return f"[{self.value}]"


class State(Enum):
    SUCCESSFUL = ("SUCCESSFUL", typer.colors.GREEN)
    FAILED = ("FAILED", typer.colors.RED)

    @property
    def status(self) -> str:
        return self.value[0]

    @property
    def color(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class FileResult:
    target: Path
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.diagnostics

    @property
    def state(self) -> State:
        return State.SUCCESSFUL if self.passed else State.FAILED


@dataclass
class BatchSummary:
    """Counters for one ``check_many`` call; ``files`` is derived, never stored."""

    successful: int = 0
    failed: int = 0
    errors: int = 0

    @property
    def files(self) -> int:
        return self.successful + self.failed

    def record(self, diagnostic_count: int) -> None:
        if diagnostic_count < 0:
            raise ValueError(f"negative diagnostic count: {diagnostic_count}")
        if diagnostic_count == 0:
            self.successful += 1
        else:
            self.failed += 1
            self.errors += diagnostic_count
