from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Callable, Iterator, Sequence

import typer

from zeus.engine.checkstyle.models import BatchSummary, Diagnostic, State

Echo = Callable[[str], None]

SUCCESS_BANNER = "Your source files are verified by checkstyle successfully!"
NOTHING_TO_VERIFY_BANNER = "You have nothing to verify with checkstyle!"

_ANSI_ENABLED: ContextVar[bool] = ContextVar("zeus_ansi_enabled", default=False)


@contextmanager
def ansi_scope(enabled: bool = True) -> Iterator[None]:
    """Enable colored output for the enclosed block only.

    The previous state is restored on exit, including when the block raises,
    so a failed render never leaves later output colored.
    """
    token = _ANSI_ENABLED.set(enabled)
    try:
        yield
    finally:
        _ANSI_ENABLED.reset(token)


def ansi_enabled() -> bool:
    return _ANSI_ENABLED.get()


def colorize(text: str, color: str) -> str:
    if not ansi_enabled():
        return text
    return typer.style(text, fg=color)


def underline(text: str) -> str:
    return f"{text}\n{'-' * len(text)}"


def footer_bar(summary: BatchSummary) -> str:
    parts = [f"\nFILES {summary.files}"]
    if summary.successful > 0:
        parts.append(f"SUCCESSFUL {summary.successful}")
    if summary.failed > 0:
        parts.append(f"FAILED {summary.failed}")
    if summary.errors > 0:
        parts.append(f"ERRORS {summary.errors}")
    bar = " | ".join(parts)
    return f"{bar}\n{'-' * len(bar.strip())}"


class ReportRenderer:
    def __init__(self, echo: Echo = typer.echo, *, color: bool = True):
        self._echo = echo
        self.color = color

    def render_file(self, name: str, diagnostics: Sequence[Diagnostic]) -> None:
        state = State.FAILED if diagnostics else State.SUCCESSFUL
        with ansi_scope(self.color):
            self._echo(f"{name} - {colorize(state.status, state.color)}")
            for line in diagnostics:
                self._echo(colorize(line.strip(), State.FAILED.color))

    def render_footer(self, summary: BatchSummary) -> None:
        if summary.errors > 0:
            self._echo(footer_bar(summary))
        else:
            self._echo(underline(SUCCESS_BANNER))

    def render_nothing_to_verify(self) -> None:
        self._echo(underline(NOTHING_TO_VERIFY_BANNER))
