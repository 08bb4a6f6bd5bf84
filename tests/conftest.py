from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import logging

import pytest

from tests.env_helpers import zeus_env_scope
from tests.process_fakes import FakePopenFactory


@pytest.fixture(autouse=True)
def _isolated_zeus_env():
    with zeus_env_scope({}):
        yield


@pytest.fixture
def popen_factory() -> FakePopenFactory:
    return FakePopenFactory()


@pytest.fixture
def write_java(tmp_path: Path):
    def _write(relative: str, body: str = "class A {}\n") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _detach_zeus_log_handlers():
    yield
    logger = logging.getLogger("zeus")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
