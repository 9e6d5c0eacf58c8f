"""Command-line interface.

Usage:
    memberaccess check src/app.ts src/util.ts -o no-public
    memberaccess check src/app.ts --config tslint.json --fix
    memberaccess options

Exit codes: 0 when no errors remain, 1 on violations, 2 on usage,
configuration or parse errors.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path

import typer

from memberaccess import __version__
from memberaccess.application.options import OPTION_DESCRIPTIONS
from memberaccess.application.reporters.console import ConsoleConfig, ConsoleReporter
from memberaccess.application.reporters.json_reporter import JSONReporter
from memberaccess.application.reporters.plain_text import PlainTextReporter
from memberaccess.application.services.checker import MemberAccessChecker
from memberaccess.domain.exceptions.base import MemberAccessError
from memberaccess.domain.model.enums import Severity
from memberaccess.infrastructure.adapters.tree_sitter_parser import TreeSitterSourceParser
from memberaccess.infrastructure.adapters.tslint_config import TslintConfigLoader

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


class OutputFormat(str, Enum):
    """Report format selectable with --format."""

    PLAIN = "plain"
    JSON = "json"
    CONSOLE = "console"


app = typer.Typer(
    name="memberaccess",
    help="Check TypeScript class members for explicit visibility modifiers.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _reporter(output_format: OutputFormat) -> PlainTextReporter | JSONReporter | ConsoleReporter:
    match output_format:
        case OutputFormat.JSON:
            return JSONReporter(sys.stdout)
        case OutputFormat.CONSOLE:
            return ConsoleReporter(sys.stdout, ConsoleConfig(force_terminal=sys.stdout.isatty()))
        case _:
            return PlainTextReporter(sys.stdout)


def _fail(error: MemberAccessError) -> typer.Exit:
    typer.echo(f"error: {error}", err=True)
    return typer.Exit(code=EXIT_ERROR)


@app.command()
def check(
    paths: list[Path] = typer.Argument(..., help="TypeScript files to check"),  # noqa: B008
    option: list[str] | None = typer.Option(  # noqa: B008
        None, "--option", "-o", help="Rule option token (repeatable)"
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="tslint.json providing the member-access entry"
    ),
    strict_options: bool = typer.Option(
        False, "--strict-options", help="Fail on conflicting options instead of disabling the rule"
    ),
    fix: bool = typer.Option(False, "--fix", help="Apply fixes in place, then report what remains"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.PLAIN, "--format", "-f", help="Report format"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Check files for member visibility violations."""
    _configure_logging(verbose)

    tokens: list[str] = []
    severity = Severity.ERROR
    if config is not None:
        try:
            settings = TslintConfigLoader().load(config)
        except MemberAccessError as e:
            raise _fail(e) from e
        if not settings.enabled:
            typer.echo(f"member-access is disabled in {config}", err=True)
            raise typer.Exit(code=EXIT_OK)
        tokens.extend(settings.tokens)
        severity = settings.severity
    tokens.extend(option or ())

    parser = TreeSitterSourceParser()
    try:
        checker = MemberAccessChecker.from_options(
            parser, tokens, strict=strict_options, severity=severity
        )
        result = checker.check_files(paths)

        if fix:
            fixed = 0
            for file_result in result.files:
                if not any(v.fixable for v in file_result.violations):
                    continue
                text = checker.fixed_text(file_result)
                file_result.source.path.write_text(text, encoding="utf-8", newline="")
                fixed += 1
                logger.info("Fixed %s", file_result.source.path)
            if fixed:
                result = checker.check_files(paths)
    except MemberAccessError as e:
        raise _fail(e) from e

    _reporter(output_format).report(result)
    raise typer.Exit(code=EXIT_OK if result.passed else EXIT_VIOLATIONS)


@app.command()
def options() -> None:
    """List recognized option tokens."""
    for token, description in OPTION_DESCRIPTIONS.items():
        typer.echo(f"{token:<28} {description}")


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


def main() -> None:
    """Entry point for the memberaccess script."""
    app()


if __name__ == "__main__":
    main()
