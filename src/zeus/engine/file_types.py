from __future__ import annotations

from enum import Enum
from pathlib import Path


class FileType(Enum):
    JAVA = ".java"

    @property
    def extension(self) -> str:
        return self.value


def match(name: str, file_type: FileType) -> bool:
    return name.endswith(file_type.extension) and len(name) > len(file_type.extension)


def find_sources(root: Path, file_type: FileType = FileType.JAVA) -> list[Path]:
    """Every regular file under ``root`` whose name matches ``file_type``, sorted."""
    if not root.is_dir():
        return []
    return sorted(
        path
        for path in root.rglob(f"*{file_type.extension}")
        if path.is_file() and match(path.name, file_type)
    )
