from __future__ import annotations

import pytest

from zeus.engine.checkstyle.parser import parse_output, strip_path_prefix
from zeus.exceptions import EmptyCaptureError, ErrorKind

from tests.process_fakes import checkstyle_output


def test_parse_output_drops_boilerplate_and_javadoc_noise() -> None:
    text = checkstyle_output(
        "[WARN] /home/u/src/A.java:3:1: Missing a Javadoc comment. [MissingJavadocType]",
        "[WARN] /home/u/src/A.java:7:5: Missing a Javadoc comment. [MissingJavadocMethod]",
    )
    assert parse_output(text) == []


def test_parse_output_strips_path_and_tags_each_line() -> None:
    text = checkstyle_output(
        "[WARN] /home/u/src/B.java:12: Line is longer than 100 characters. [LineLength]",
        "[WARN] /home/u/src/B.java:20:3: 'if' is not followed by whitespace. [WhitespaceAround]",
    )
    assert parse_output(text) == [
        "[ERROR] 12: Line is longer than 100 characters. [LineLength]",
        "[ERROR] 20:3: 'if' is not followed by whitespace. [WhitespaceAround]",
    ]


def test_parse_output_uses_last_marker_occurrence() -> None:
    text = "[WARN] /tmp/x.java/Y.java:4: bad [Indentation]"
    assert parse_output(text) == ["[ERROR] 4: bad [Indentation]"]


def test_parse_output_keeps_line_without_marker_whole() -> None:
    assert parse_output("  Checkstyle ends with 1 errors.  ") == [
        "[ERROR] Checkstyle ends with 1 errors."
    ]


def test_parse_output_skips_blank_lines_between_diagnostics() -> None:
    text = "Starting audit...\n\n[WARN] /a/C.java:1: x [Foo]\n   \nAudit done.\n"
    assert parse_output(text) == ["[ERROR] 1: x [Foo]"]


def test_boilerplate_must_match_whole_line() -> None:
    text = "[WARN] /a/D.java:2: Audit done. is not a sentence [Foo]"
    assert parse_output(text) == ["[ERROR] 2: Audit done. is not a sentence [Foo]"]


@pytest.mark.parametrize("text", ["", "   ", "\n\n"])
def test_parse_output_rejects_empty_capture(text: str) -> None:
    with pytest.raises(EmptyCaptureError) as excinfo:
        parse_output(text)
    assert excinfo.value.kind is ErrorKind.EMPTY_CAPTURE
    assert str(excinfo.value) == "Checkstyle console captor is empty"


def test_only_boilerplate_is_not_empty_capture() -> None:
    assert parse_output(checkstyle_output()) == []


def test_strip_path_prefix_skips_one_separator() -> None:
    assert strip_path_prefix("/p/Q.java:9:2: msg") == "9:2: msg"
    assert strip_path_prefix("no marker here ") == "no marker here"
