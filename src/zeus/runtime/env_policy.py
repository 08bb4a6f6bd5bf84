from __future__ import annotations

import os

JAVA_ENV = "ZEUS_JAVA"
CHECKSTYLE_CLASSPATH_ENV = "ZEUS_CHECKSTYLE_CLASSPATH"
MAVEN_HOME_ENV = "ZEUS_MAVEN_HOME"
LOG_LEVEL_ENV = "ZEUS_LOG_LEVEL"
NO_COLOR_ENV = "NO_COLOR"

ZEUS_ENV_KEYS: tuple[str, ...] = (
    JAVA_ENV,
    CHECKSTYLE_CLASSPATH_ENV,
    MAVEN_HOME_ENV,
    LOG_LEVEL_ENV,
)


def env_text(name: str, *, default: str = "") -> str:
    return os.getenv(name, default).strip()


def env_optional(name: str) -> str | None:
    value = env_text(name)
    return value or None


def color_disabled_by_env() -> bool:
    # https://no-color.org: any non-empty value disables color.
    return bool(os.getenv(NO_COLOR_ENV, ""))
