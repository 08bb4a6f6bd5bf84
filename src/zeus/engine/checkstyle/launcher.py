from __future__ import annotations

from pathlib import Path
import subprocess
from typing import Callable

from zeus.config import CheckstyleSettings
from zeus.engine.checkstyle.style import Style
from zeus.engine.file_types import FileType, match
from zeus.exceptions import (
    CheckerInterrupted,
    CheckerProcessFailed,
    TargetNotAFile,
    TargetNotFound,
    TargetTypeUnsupported,
)
from zeus.runtime.log_policy import get_logger

PopenFactory = Callable[..., subprocess.Popen]

_COMMAND_NOT_FOUND_EXIT = 127

_log = get_logger(__name__)


def validate_target(target: Path, *, file_type: FileType = FileType.JAVA) -> Path:
    path = Path(target).absolute()
    if not path.exists():
        raise TargetNotFound(path)
    if not path.is_file():
        raise TargetNotAFile(path)
    if not match(path.name, file_type):
        raise TargetTypeUnsupported(path)
    return path


def checkstyle_argv(style: Style, target: Path, settings: CheckstyleSettings) -> list[str]:
    argv = [settings.java, "-Duser.language=en"]
    if settings.classpath:
        argv.extend(["-cp", settings.classpath])
    argv.extend([settings.main_class, "-c", style.config, str(target)])
    return argv


def launch(
    style: Style,
    target: Path,
    *,
    settings: CheckstyleSettings | None = None,
    file_type: FileType = FileType.JAVA,
    popen_fn: PopenFactory = subprocess.Popen,
) -> str:
    """Run Checkstyle on one file and return its merged stdout/stderr.

    Output is decoded as UTF-8 with undecodable bytes replaced. The target
    is validated before anything is spawned. A non-zero exit raises
    ``CheckerProcessFailed``; an interrupt while waiting kills the child and
    raises ``CheckerInterrupted`` chained to the interrupt.
    """
    path = validate_target(target, file_type=file_type)
    argv = checkstyle_argv(style, path, settings or CheckstyleSettings())
    _log.debug("launching checkstyle: %s", " ".join(argv))
    try:
        process = popen_fn(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        _log.debug("cannot start %s: %s", argv[0], exc)
        raise CheckerProcessFailed(
            _COMMAND_NOT_FOUND_EXIT, path=path, output=str(exc)
        ) from exc
    try:
        output, _ = process.communicate()
    except KeyboardInterrupt as exc:
        process.kill()
        process.wait()
        _log.warning("checkstyle interrupted while checking %s", path)
        raise CheckerInterrupted(path) from exc
    exit_code = process.returncode
    _log.debug("checkstyle exited with %s for %s", exit_code, path)
    if exit_code != 0:
        raise CheckerProcessFailed(exit_code, path=path, output=output or "")
    return output or ""
