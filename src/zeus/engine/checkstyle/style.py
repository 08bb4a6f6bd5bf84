from __future__ import annotations

from enum import Enum

from zeus.exceptions import UnknownStyleError


class Style(Enum):
    """Checkstyle rule sets shipped inside the Checkstyle jar."""

    GOOGLE = "/google_checks.xml"
    SUN = "/sun_checks.xml"

    @property
    def config(self) -> str:
        return self.value

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(member.name.lower() for member in cls)

    @classmethod
    def from_name(cls, name: str) -> "Style":
        key = name.strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise UnknownStyleError(name, known=cls.names()) from None
