"""Checkstyle orchestration: launch, parse, render, count.

Files are checked one at a time in the order given. The first fatal error
(invalid target, checker failure, empty capture) aborts the whole batch.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Sequence

from zeus.config import CheckstyleSettings
from zeus.engine.checkstyle.launcher import launch
from zeus.engine.checkstyle.models import BatchSummary, Diagnostic, FileResult
from zeus.engine.checkstyle.parser import parse_output
from zeus.engine.checkstyle.renderer import ReportRenderer
from zeus.engine.checkstyle.style import Style
from zeus.runtime.log_policy import get_logger

LaunchFn = Callable[[Style, Path], str]
ParseFn = Callable[[str], list[Diagnostic]]

_log = get_logger(__name__)


@dataclass(frozen=True)
class EngineDeps:
    launch: LaunchFn
    parse: ParseFn
    renderer: ReportRenderer


def default_engine_deps(
    settings: CheckstyleSettings | None = None,
    *,
    color: bool = True,
) -> EngineDeps:
    return EngineDeps(
        launch=partial(launch, settings=settings),
        parse=parse_output,
        renderer=ReportRenderer(color=color),
    )


def collect(style: Style, target: Path, *, deps: EngineDeps | None = None) -> FileResult:
    deps = deps or default_engine_deps()
    target = Path(target)
    raw = deps.launch(style, target)
    return FileResult(target=target, diagnostics=tuple(deps.parse(raw)))


def check_one(style: Style, target: Path, *, deps: EngineDeps | None = None) -> int:
    deps = deps or default_engine_deps()
    result = collect(style, target, deps=deps)
    deps.renderer.render_file(result.target.name, result.diagnostics)
    return len(result.diagnostics)


def check_many(
    style: Style,
    targets: Sequence[Path],
    *,
    deps: EngineDeps | None = None,
) -> int:
    deps = deps or default_engine_deps()
    if not targets:
        deps.renderer.render_nothing_to_verify()
        return 0
    summary = BatchSummary()
    for target in targets:
        summary.record(check_one(style, target, deps=deps))
    _log.debug(
        "checkstyle batch: files=%d successful=%d failed=%d errors=%d",
        summary.files,
        summary.successful,
        summary.failed,
        summary.errors,
    )
    deps.renderer.render_footer(summary)
    return summary.errors
