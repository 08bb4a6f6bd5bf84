from __future__ import annotations

from dataclasses import dataclass, field
import os
import subprocess
from typing import Callable, Iterable, Sequence

from zeus.config import SuiteSettings
from zeus.exceptions import TestRunFailed, UnknownTestError
from zeus.runtime.log_policy import get_logger
from zeus.suite.registry import is_known

RunCommand = Callable[..., subprocess.CompletedProcess]

_log = get_logger(__name__)


def invocation_argv(identifier: str, settings: SuiteSettings) -> list[str]:
    return [
        settings.java,
        "-cp",
        os.pathsep.join(settings.classpath),
        settings.runner,
        "--select-class",
        identifier,
    ]


@dataclass(frozen=True)
class TestInvocation:
    """A resolved test class; calling it runs the class in a fresh JVM."""

    __test__ = False

    identifier: str
    argv: tuple[str, ...]
    run_fn: RunCommand = field(default=subprocess.run, compare=False, repr=False)

    def __call__(self) -> None:
        _log.debug("running %s", " ".join(self.argv))
        completed = self.run_fn(list(self.argv), check=False)
        if completed.returncode != 0:
            raise TestRunFailed(self.identifier, int(completed.returncode))


def resolve(
    identifiers: Iterable[str],
    *,
    settings: SuiteSettings | None = None,
    run_fn: RunCommand = subprocess.run,
    known_fn: Callable[[str], bool] = is_known,
) -> list[TestInvocation]:
    """Resolve every identifier up front; nothing runs if one is unknown."""
    settings = settings or SuiteSettings()
    invocations: list[TestInvocation] = []
    for identifier in identifiers:
        if not known_fn(identifier):
            raise UnknownTestError(identifier)
        invocations.append(
            TestInvocation(
                identifier=identifier,
                argv=tuple(invocation_argv(identifier, settings)),
                run_fn=run_fn,
            )
        )
    return invocations


def run_all(
    invocations: Sequence[Callable[[], None]],
    *,
    on_start: Callable[[str], None] | None = None,
) -> int:
    for invocation in invocations:
        if on_start is not None:
            on_start(getattr(invocation, "identifier", repr(invocation)))
        invocation()
    return len(invocations)
