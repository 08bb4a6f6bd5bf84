from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence

from pydantic import ValidationError
import typer

from zeus import __version__
from zeus.build.maven import ensure_built
from zeus.config import ZeusSettings, load_settings
from zeus.engine.checkstyle.engine import EngineDeps, check_many, default_engine_deps
from zeus.engine.checkstyle.style import Style
from zeus.engine.file_types import find_sources
from zeus.exceptions import CheckerInterrupted, CheckerProcessFailed, ZeusError
from zeus.runtime.env_policy import color_disabled_by_env
from zeus.runtime.log_policy import get_logger, init_logging
from zeus.suite.dispatcher import resolve, run_all
from zeus.suite.registry import all_tests, find_test, scheduled_tests

app = typer.Typer(add_completion=False, help="Zeus the Mighty")

DEFAULT_SOURCE_DIR = Path("src/main/java")
_UNSET = -1

_EXIT_OK = 0
_EXIT_DIAGNOSTICS = 1
_EXIT_FATAL = 2
_EXIT_INTERRUPTED = 130

_MISSING_CLASSPATH_HINT = (
    "checkstyle classpath is not configured; set [checkstyle].classpath in "
    "zeus.toml or ZEUS_CHECKSTYLE_CLASSPATH to the checkstyle jar"
)

_log = get_logger(__name__)


@dataclass(frozen=True)
class TestSessionOptions:
    __test__ = False

    week: int = _UNSET
    day: int = _UNSET
    run_all: bool = False
    test: str | None = None
    show: bool = False
    maven_home: str | None = None
    root: Path = Path(".")

    @property
    def has_week_and_day(self) -> bool:
        return self.week != _UNSET and self.day != _UNSET


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _load_settings_or_exit(root: Path, config: Path | None) -> ZeusSettings:
    try:
        return load_settings(root=root, config_path=config)
    except ValidationError as exc:
        typer.secho(f"invalid configuration: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=_EXIT_FATAL) from exc


def _select_tests(options: TestSessionOptions) -> Sequence[str]:
    if options.run_all:
        return all_tests()
    if options.test is not None:
        return (find_test(options.test, week=options.week, day=options.day),)
    return scheduled_tests(options.week, options.day)


def _run_test_session(
    options: TestSessionOptions,
    *,
    settings: ZeusSettings,
    ensure_built_fn: Callable[..., object] = ensure_built,
    resolve_fn: Callable[..., list] = resolve,
    run_all_fn: Callable[..., int] = run_all,
) -> int:
    if options.test is not None and not options.run_all and not options.has_week_and_day:
        typer.echo("you need to specify week and day like this: --week X --day Y")
        return _EXIT_OK
    try:
        if options.show:
            for identifier in scheduled_tests(options.week, options.day):
                typer.echo(f"test: {identifier}")
            return _EXIT_OK
        if options.run_all and options.has_week_and_day:
            typer.echo(
                "one can not ask Zeus to run all test and specific tests (week/day) "
                "at the same time!"
            )
            return _EXIT_OK
        identifiers = _select_tests(options)
        invocations = resolve_fn(identifiers, settings=settings.tests)
        build_settings = settings.build
        if options.maven_home:
            build_settings = build_settings.model_copy(update={"maven_home": options.maven_home})
        typer.echo("Zeus is about to start compiling your project")
        typer.echo(f"Zeus is about to execute 'mvn {' '.join(build_settings.goals)}'")
        ensure_built_fn(options.root, settings=build_settings)
        typer.echo("Zeus happy")
        run_all_fn(invocations, on_start=lambda identifier: typer.echo(f"Zeus runs {identifier}"))
    except ZeusError as exc:
        _log.debug("test session failed: %s", exc.kind.value)
        typer.secho("Zeus is VERY unhappy!!!!", err=True, fg=typer.colors.RED)
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        return 1
    return _EXIT_OK


def _run_checkstyle(
    *,
    style_name: str,
    paths: Sequence[Path],
    root: Path,
    settings: ZeusSettings,
    color: bool,
    engine_deps_fn: Callable[..., EngineDeps] = default_engine_deps,
) -> int:
    try:
        style = Style.from_name(style_name)
        targets = list(paths) if paths else find_sources(root / DEFAULT_SOURCE_DIR)
        deps = engine_deps_fn(settings.checkstyle, color=color)
        errors = check_many(style, targets, deps=deps)
    except CheckerInterrupted as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        return _EXIT_INTERRUPTED
    except ZeusError as exc:
        typer.secho(str(exc), err=True, fg=typer.colors.RED)
        if isinstance(exc, CheckerProcessFailed):
            if exc.output.strip():
                typer.echo(exc.output.rstrip(), err=True)
            if not settings.checkstyle.classpath:
                typer.secho(_MISSING_CLASSPATH_HINT, err=True, fg=typer.colors.YELLOW)
        return _EXIT_FATAL
    return _EXIT_DIAGNOSTICS if errors else _EXIT_OK


def _context_callable(ctx: typer.Context, key: str, default: Callable[..., int]) -> Callable[..., int]:
    obj = ctx.obj
    if isinstance(obj, Mapping):
        candidate = obj.get(key)
        if callable(candidate):
            return candidate
    return default


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Compile, style-check and test a bootcamp project."""


@app.command("test")
def run_tests_command(
    ctx: typer.Context,
    week: int = typer.Option(_UNSET, "--week", "-w", help="number of the week to test"),
    day: int = typer.Option(_UNSET, "--day", "-d", help="number of the day to test"),
    run_all_tests: bool = typer.Option(False, "--all", "-a", help="run all tests"),
    maven_home: Optional[str] = typer.Option(
        None, "--maven", "-m", help="path to the maven home"
    ),
    show: bool = typer.Option(False, "--show", "-s", help="show tests for week/day"),
    test_name: Optional[str] = typer.Option(
        None, "--test", "-t", help="specific test to execute"
    ),
    root: Path = typer.Option(Path("."), "--root", help="project root (with pom.xml)"),
    config: Optional[Path] = typer.Option(None, "--config", help="path to zeus.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Build the project with Maven and run the scheduled test classes."""
    init_logging(verbose=verbose)
    settings = _load_settings_or_exit(root, config)
    options = TestSessionOptions(
        week=week,
        day=day,
        run_all=run_all_tests,
        test=test_name,
        show=show,
        maven_home=maven_home,
        root=root,
    )
    run_fn = _context_callable(ctx, "run_test_session", _run_test_session)
    raise typer.Exit(code=run_fn(options, settings=settings))


@app.command("checkstyle")
def checkstyle(
    ctx: typer.Context,
    paths: List[Path] = typer.Argument(None, help="Java files to check"),
    style: Optional[str] = typer.Option(
        None, "--style", help="checkstyle profile (google|sun)"
    ),
    root: Path = typer.Option(Path("."), "--root", help="project root"),
    config: Optional[Path] = typer.Option(None, "--config", help="path to zeus.toml"),
    color: bool = typer.Option(True, "--color/--no-color"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Verify Java sources with Checkstyle.

    Without PATHS every .java file under ROOT/src/main/java is checked.
    """
    init_logging(verbose=verbose)
    settings = _load_settings_or_exit(root, config)
    run_fn = _context_callable(ctx, "run_checkstyle", _run_checkstyle)
    exit_code = run_fn(
        style_name=style or settings.checkstyle.style,
        paths=list(paths or []),
        root=root,
        settings=settings,
        color=color and not color_disabled_by_env(),
    )
    raise typer.Exit(code=exit_code)


@app.command("styles")
def styles() -> None:
    """List the available checkstyle profiles."""
    for member in Style:
        typer.echo(f"{member.name.lower()}\t{member.config}")
