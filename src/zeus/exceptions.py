"""Error taxonomy for the Zeus harness.

Every failure raised by Zeus derives from :class:`ZeusError` and carries an
:class:`ErrorKind`, so callers can branch on ``exc.kind`` instead of matching
message text.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    TARGET_NOT_FOUND = "target_not_found"
    TARGET_NOT_A_FILE = "target_not_a_file"
    TARGET_TYPE_UNSUPPORTED = "target_type_unsupported"
    CHECKER_PROCESS_FAILED = "checker_process_failed"
    CHECKER_INTERRUPTED = "checker_interrupted"
    EMPTY_CAPTURE = "empty_capture"
    UNKNOWN_STYLE = "unknown_style"
    BUILD_FAILED = "build_failed"
    UNKNOWN_TEST = "unknown_test"
    SCHEDULE_NOT_FOUND = "schedule_not_found"
    TEST_RUN_FAILED = "test_run_failed"


class ZeusError(RuntimeError):
    """Base class for every fatal Zeus condition."""

    kind: ErrorKind


class InvalidTarget(ZeusError):
    """A check target was rejected before any process was started."""

    def __init__(self, message: str, *, path: Path):
        super().__init__(message)
        self.path = path


class TargetNotFound(InvalidTarget):
    kind = ErrorKind.TARGET_NOT_FOUND

    def __init__(self, path: Path):
        super().__init__(f"{path} is absent", path=path)


class TargetNotAFile(InvalidTarget):
    kind = ErrorKind.TARGET_NOT_A_FILE

    def __init__(self, path: Path):
        super().__init__(f"{path} is not a file", path=path)


class TargetTypeUnsupported(InvalidTarget):
    kind = ErrorKind.TARGET_TYPE_UNSUPPORTED

    def __init__(self, path: Path):
        super().__init__(f"{path.name} is not supported", path=path)


class CheckerProcessFailed(ZeusError):
    kind = ErrorKind.CHECKER_PROCESS_FAILED

    def __init__(self, exit_code: int, *, path: Path | None = None, output: str = ""):
        message = f"Checkstyle process exited with code: {exit_code}"
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)
        self.exit_code = exit_code
        self.path = path
        self.output = output


class CheckerInterrupted(ZeusError):
    kind = ErrorKind.CHECKER_INTERRUPTED

    def __init__(self, path: Path):
        super().__init__(f"Checkstyle process was interrupted ({path})")
        self.path = path


class EmptyCaptureError(ZeusError):
    kind = ErrorKind.EMPTY_CAPTURE

    def __init__(self) -> None:
        super().__init__("Checkstyle console captor is empty")


class UnknownStyleError(ZeusError):
    kind = ErrorKind.UNKNOWN_STYLE

    def __init__(self, name: str, *, known: tuple[str, ...] = ()):
        message = f"unknown checkstyle style: {name!r}"
        if known:
            message = f"{message} (expected one of: {', '.join(known)})"
        super().__init__(message)
        self.name = name


class BuildFailed(ZeusError):
    kind = ErrorKind.BUILD_FAILED

    def __init__(self, exit_code: int):
        super().__init__(f"Maven build exited with code: {exit_code}")
        self.exit_code = exit_code


class UnknownTestError(ZeusError):
    kind = ErrorKind.UNKNOWN_TEST

    def __init__(self, identifier: str):
        super().__init__(f"unknown test: {identifier}")
        self.identifier = identifier


class ScheduleNotFound(ZeusError):
    kind = ErrorKind.SCHEDULE_NOT_FOUND

    def __init__(self, week: int, day: int):
        super().__init__(f"no tests scheduled for week {week} day {day}")
        self.week = week
        self.day = day


class TestRunFailed(ZeusError):
    __test__ = False
    kind = ErrorKind.TEST_RUN_FAILED

    def __init__(self, identifier: str, exit_code: int):
        super().__init__(f"{identifier} exited with code: {exit_code}")
        self.identifier = identifier
        self.exit_code = exit_code
