from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import shutil
import subprocess
from typing import Callable

from zeus.config import BuildSettings
from zeus.exceptions import BuildFailed
from zeus.runtime.log_policy import get_logger

RunCommand = Callable[..., subprocess.CompletedProcess]

_log = get_logger(__name__)


@dataclass(frozen=True)
class BuildResult:
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def maven_executable(maven_home: str | None, *, which_fn: Callable[[str], str | None] = shutil.which) -> str:
    name = "mvn.cmd" if os.name == "nt" else "mvn"
    if maven_home:
        return str(Path(maven_home).expanduser() / "bin" / name)
    return which_fn(name) or name


def maven_argv(project_root: Path, settings: BuildSettings) -> list[str]:
    pom = Path(settings.pom)
    if not pom.is_absolute():
        pom = project_root / pom
    return [maven_executable(settings.maven_home), "-f", str(pom), *settings.goals]


def run_maven(
    project_root: Path,
    *,
    settings: BuildSettings | None = None,
    run_fn: RunCommand = subprocess.run,
) -> BuildResult:
    settings = settings or BuildSettings()
    argv = maven_argv(project_root, settings)
    _log.info("running %s", " ".join(argv))
    try:
        completed = run_fn(argv, cwd=str(project_root), check=False)
    except OSError as exc:
        _log.error("cannot start maven (%s): %s", argv[0], exc)
        return BuildResult(exit_code=127)
    return BuildResult(exit_code=int(completed.returncode))


def ensure_built(
    project_root: Path,
    *,
    settings: BuildSettings | None = None,
    run_fn: RunCommand = subprocess.run,
) -> BuildResult:
    result = run_maven(project_root, settings=settings, run_fn=run_fn)
    if not result.ok:
        raise BuildFailed(result.exit_code)
    return result
