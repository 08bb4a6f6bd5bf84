from __future__ import annotations

from datetime import date, datetime, time
import os
from pathlib import Path
from typing import List, Optional, TypeAlias
import tomllib

from pydantic import BaseModel, field_validator

from zeus.runtime.env_policy import (
    CHECKSTYLE_CLASSPATH_ENV,
    JAVA_ENV,
    MAVEN_HOME_ENV,
    env_optional,
)
from zeus.runtime.log_policy import get_logger

DEFAULT_CONFIG_NAME = "zeus.toml"
CHECKSTYLE_MAIN_CLASS = "com.puppycrawl.tools.checkstyle.Main"
JUNIT_CONSOLE_LAUNCHER = "org.junit.platform.console.ConsoleLauncher"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]

_log = get_logger(__name__)


class CheckstyleSettings(BaseModel):
    java: str = "java"
    classpath: str = ""
    main_class: str = CHECKSTYLE_MAIN_CLASS
    style: str = "google"

    @field_validator("classpath", mode="before")
    @classmethod
    def _join_classpath(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            return _join_path_list(value)
        return value


class BuildSettings(BaseModel):
    maven_home: Optional[str] = None
    pom: str = "pom.xml"
    goals: List[str] = ["clean", "compile", "package"]


class SuiteSettings(BaseModel):
    java: str = "java"
    classpath: List[str] = ["target/classes", "target/test-classes"]
    runner: str = JUNIT_CONSOLE_LAUNCHER

    @field_validator("classpath", mode="before")
    @classmethod
    def _split_classpath(cls, value: object) -> object:
        if isinstance(value, str):
            return [part for part in value.split(os.pathsep) if part.strip()]
        return value


class ZeusSettings(BaseModel):
    checkstyle: CheckstyleSettings = CheckstyleSettings()
    build: BuildSettings = BuildSettings()
    tests: SuiteSettings = SuiteSettings()


def _join_path_list(entries: object) -> str:
    return os.pathsep.join(str(entry) for entry in entries if str(entry).strip())


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        _log.warning("cannot read %s: %s", path, exc)
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        _log.warning("ignoring malformed %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def _section(data: TomlTable, name: str) -> TomlTable:
    section = data.get(name, {})
    return section if isinstance(section, dict) else {}


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged


def _env_overrides() -> dict[str, TomlTable]:
    return {
        "checkstyle": {
            "java": env_optional(JAVA_ENV),
            "classpath": env_optional(CHECKSTYLE_CLASSPATH_ENV),
        },
        "build": {"maven_home": env_optional(MAVEN_HOME_ENV)},
        "tests": {"java": env_optional(JAVA_ENV)},
    }


def load_settings(root: Path | None = None, config_path: Path | None = None) -> ZeusSettings:
    """Load ``zeus.toml`` and apply ``ZEUS_*`` environment overrides.

    Non-empty environment values win over the file. A section that fails
    validation raises ``pydantic.ValidationError`` naming the bad field.
    """
    data = load_config(root=root, config_path=config_path)
    overrides = _env_overrides()
    sections = {
        name: merge_payload(overrides[name], _section(data, name))
        for name in ("checkstyle", "build", "tests")
    }
    return ZeusSettings.model_validate(sections)


__all__ = [
    "BuildSettings",
    "CheckstyleSettings",
    "DEFAULT_CONFIG_NAME",
    "SuiteSettings",
    "ZeusSettings",
    "load_config",
    "load_settings",
    "merge_payload",
]
