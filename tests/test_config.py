from __future__ import annotations

import os
from pathlib import Path

from pydantic import ValidationError
import pytest

from zeus.config import (
    CHECKSTYLE_MAIN_CLASS,
    JUNIT_CONSOLE_LAUNCHER,
    load_config,
    load_settings,
    merge_payload,
)

from tests.env_helpers import zeus_env_scope


def _write_config(root: Path, body: str) -> Path:
    path = root / "zeus.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_defaults_without_config(tmp_path: Path) -> None:
    settings = load_settings(root=tmp_path)
    assert settings.checkstyle.java == "java"
    assert settings.checkstyle.classpath == ""
    assert settings.checkstyle.main_class == CHECKSTYLE_MAIN_CLASS
    assert settings.checkstyle.style == "google"
    assert settings.build.maven_home is None
    assert settings.build.goals == ["clean", "compile", "package"]
    assert settings.tests.classpath == ["target/classes", "target/test-classes"]
    assert settings.tests.runner == JUNIT_CONSOLE_LAUNCHER


def test_load_config_reads_sections(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        '[checkstyle]\nstyle = "sun"\nclasspath = ["lib/cs.jar", "lib/extra.jar"]\n'
        '[build]\ngoals = ["package"]\n',
    )
    settings = load_settings(root=tmp_path)
    assert settings.checkstyle.style == "sun"
    assert settings.checkstyle.classpath == os.pathsep.join(["lib/cs.jar", "lib/extra.jar"])
    assert settings.build.goals == ["package"]


def test_explicit_config_path(tmp_path: Path) -> None:
    path = tmp_path / "elsewhere.toml"
    path.write_text('[build]\npom = "module/pom.xml"\n', encoding="utf-8")
    assert load_settings(root=tmp_path / "missing", config_path=path).build.pom == "module/pom.xml"


def test_malformed_toml_is_ignored(tmp_path: Path) -> None:
    _write_config(tmp_path, "[checkstyle\nstyle=")
    assert load_config(root=tmp_path) == {}
    assert load_settings(root=tmp_path).checkstyle.style == "google"


def test_environment_overrides_file(tmp_path: Path) -> None:
    _write_config(tmp_path, '[checkstyle]\njava = "/file/java"\n[build]\nmaven_home = "/file/mvn"\n')
    with zeus_env_scope({"ZEUS_JAVA": "/env/java", "ZEUS_MAVEN_HOME": "/env/mvn"}):
        settings = load_settings(root=tmp_path)
    assert settings.checkstyle.java == "/env/java"
    assert settings.tests.java == "/env/java"
    assert settings.build.maven_home == "/env/mvn"


def test_blank_environment_does_not_override(tmp_path: Path) -> None:
    _write_config(tmp_path, '[checkstyle]\nclasspath = "cs.jar"\n')
    with zeus_env_scope({"ZEUS_CHECKSTYLE_CLASSPATH": "  "}):
        assert load_settings(root=tmp_path).checkstyle.classpath == "cs.jar"


def test_suite_classpath_string_is_split(tmp_path: Path) -> None:
    _write_config(tmp_path, f'[tests]\nclasspath = "a{os.pathsep}b{os.pathsep}"\n')
    assert load_settings(root=tmp_path).tests.classpath == ["a", "b"]


def test_invalid_section_raises(tmp_path: Path) -> None:
    _write_config(tmp_path, "[build]\ngoals = 3\n")
    with pytest.raises(ValidationError):
        load_settings(root=tmp_path)


def test_merge_payload_skips_none() -> None:
    assert merge_payload({"a": None, "b": 2}, {"a": 1, "c": 3}) == {"a": 1, "b": 2, "c": 3}
