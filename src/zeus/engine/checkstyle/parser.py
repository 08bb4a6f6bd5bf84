from __future__ import annotations

from zeus.engine.checkstyle.models import Diagnostic, Severity
from zeus.engine.file_types import FileType
from zeus.exceptions import EmptyCaptureError

STARTING_AUDIT = "Starting audit..."
AUDIT_DONE = "Audit done."
BOILERPLATE_LINES = frozenset({STARTING_AUDIT, AUDIT_DONE})

MISSING_JAVADOC_TYPE = "[MissingJavadocType]"
MISSING_JAVADOC_METHOD = "[MissingJavadocMethod]"
SUPPRESSED_CATEGORIES: tuple[str, ...] = (MISSING_JAVADOC_TYPE, MISSING_JAVADOC_METHOD)


def _is_noise(line: str) -> bool:
    if line.strip() in BOILERPLATE_LINES:
        return True
    return any(category in line for category in SUPPRESSED_CATEGORIES)


def strip_path_prefix(line: str, marker: str = FileType.JAVA.extension) -> str:
    # Last occurrence wins, even when the marker is not a real path boundary.
    index = line.rfind(marker)
    if index < 0:
        return line.strip()
    return line[index + len(marker) + 1 :]


def parse_output(text: str, *, file_type: FileType = FileType.JAVA) -> list[Diagnostic]:
    if not text.strip():
        raise EmptyCaptureError()
    diagnostics: list[Diagnostic] = []
    for line in text.strip().splitlines():
        if not line.strip() or _is_noise(line):
            continue
        rest = strip_path_prefix(line, file_type.extension)
        diagnostics.append(f"{Severity.ERROR.tag} {rest}")
    return diagnostics
