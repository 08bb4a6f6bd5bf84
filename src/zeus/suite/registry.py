"""Week/day schedule of the bootcamp test classes."""

from __future__ import annotations

from typing import Iterator

from zeus.exceptions import ScheduleNotFound, UnknownTestError

TESTS_PACKAGE = "com.kovalevskyi.academy.codingbootcamp.suite.tests"


def _qualified(week: int, day: int, *names: str) -> tuple[str, ...]:
    return tuple(f"{TESTS_PACKAGE}.week{week}.day{day}.{name}" for name in names)


SCHEDULE: tuple[tuple[tuple[str, ...], ...], ...] = (
    (
        _qualified(0, 0, "MainTest"),
        _qualified(0, 1, "AlphabetTest", "NumbersTest"),
        _qualified(0, 2, "NumbersTest"),
        _qualified(0, 3, "PointTest"),
    ),
    (
        (),
        _qualified(1, 1, "StringUtilsTest", "StdStringTest"),
        _qualified(1, 2, "ListTest"),
    ),
    (
        _qualified(
            2,
            0,
            "MainPrintParamTest",
            "MainPrintReversedParamTest",
            "CalculatorTest",
            "MainPrintSortedParamTest",
        ),
        _qualified(2, 1, "BoxGeneratorTest", "TextPrinter2Test", "TextPrinterTest"),
        (),
    ),
)


def scheduled_tests(week: int, day: int) -> tuple[str, ...]:
    if not 0 <= week < len(SCHEDULE):
        raise ScheduleNotFound(week, day)
    days = SCHEDULE[week]
    if not 0 <= day < len(days):
        raise ScheduleNotFound(week, day)
    return days[day]


def iter_days() -> Iterator[tuple[int, int, tuple[str, ...]]]:
    for week, days in enumerate(SCHEDULE):
        for day, identifiers in enumerate(days):
            yield week, day, identifiers


def all_tests() -> tuple[str, ...]:
    return tuple(identifier for _, _, identifiers in iter_days() for identifier in identifiers)


def is_known(identifier: str) -> bool:
    return identifier in all_tests()


def find_test(name: str, *, week: int | None = None, day: int | None = None) -> str:
    """Resolve a fully qualified or simple class name to a scheduled identifier.

    Simple names are looked up in the given week/day first, then across the
    whole schedule; a simple name shared by several days needs week and day.
    """
    if is_known(name):
        return name
    suffix = f".{name}"
    if week is not None and day is not None:
        for identifier in scheduled_tests(week, day):
            if identifier.endswith(suffix):
                return identifier
    matches = [identifier for identifier in all_tests() if identifier.endswith(suffix)]
    if len(matches) == 1:
        return matches[0]
    raise UnknownTestError(name)
