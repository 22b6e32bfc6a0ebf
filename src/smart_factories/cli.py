"""Command line interface for previewing Smart Factories output."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Callable

import click
from rich.console import Console
from rich.table import Table

from smart_factories import __version__
from smart_factories.combinators import pluck, pluck_many
from smart_factories.core import (
    DEFAULT_STRING_LENGTH,
    IntRange,
    expand,
    random_bool,
    random_int,
    random_long,
    random_string,
)
from smart_factories.errors import EmptyCandidateSet, InvalidRange

EXIT_SUCCESS = 0
EXIT_USAGE = 1
EXIT_INVALID_RANGE = 2
EXIT_EMPTY_CANDIDATES = 3

DEFAULT_SAMPLE_COUNT = 5

console = Console()


def _package_version() -> str:
    try:
        return version("smart-factories")
    except PackageNotFoundError:
        return __version__


def _handle_action(action: Callable[[], None]) -> int:
    try:
        action()
    except InvalidRange as exc:
        console.print(f"[red]Invalid range:[/red] {exc}")
        return EXIT_INVALID_RANGE
    except EmptyCandidateSet as exc:
        console.print(f"[red]Nothing to pick from:[/red] {exc}")
        return EXIT_EMPTY_CANDIDATES
    return EXIT_SUCCESS


def _generator_for(kind: str, min_value: int | None, max_value: int | None) -> Callable[[], object]:
    if kind == "bool":
        return random_bool
    if kind == "int":
        return lambda: random_int(min_value, max_value)
    if kind == "long":
        return lambda: random_long(min_value, max_value)
    length = IntRange(
        DEFAULT_STRING_LENGTH.low if min_value is None else min_value,
        DEFAULT_STRING_LENGTH.high if max_value is None else max_value,
    )
    return lambda: random_string(length)


def _print_values(title: str, values: list[object]) -> None:
    table = Table(title=title, min_width=len(title) + 4)
    table.add_column("#", justify="right")
    table.add_column("Value")
    for index, value in enumerate(values, start=1):
        table.add_row(str(index), repr(value))
    console.print(table)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=False,
)
@click.version_option(version=_package_version(), prog_name="Smart Factories")
def cli() -> None:
    """Preview randomized test data produced by Smart Factories."""


@cli.command(
    help="Generate sample values of a primitive type.",
    epilog="Examples:\n  smart-factories sample int --min 1 --max 6\n  smart-factories sample string --min 3 --max 3 --count 10",
)
@click.argument("kind", type=click.Choice(["bool", "int", "long", "string"], case_sensitive=False))
@click.option("--min", "min_value", type=int, default=None, help="Lower bound (string length for strings).")
@click.option("--max", "max_value", type=int, default=None, help="Upper bound (string length for strings).")
@click.option(
    "--count",
    type=click.IntRange(min=0),
    default=DEFAULT_SAMPLE_COUNT,
    show_default=True,
    help="Number of values to generate.",
)
@click.pass_context
def sample(ctx: click.Context, kind: str, min_value: int | None, max_value: int | None, count: int) -> None:
    kind = kind.lower()

    def _run() -> None:
        generator = _generator_for(kind, min_value, max_value)
        _print_values(f"{kind} samples", expand(IntRange.of(count), generator))

    ctx.exit(_handle_action(_run))


@cli.command(
    name="pluck",
    help="Pick one (or with --many, several) of the given values.",
    epilog="Examples:\n  smart-factories pluck visa mastercard amex\n  smart-factories pluck a b c d --many --min 1 --max 2",
)
@click.argument("values", nargs=-1)
@click.option("--many/--one", default=False, help="Pick a random subset instead of a single value.")
@click.option("--min", "min_count", type=int, default=0, show_default=True, help="Minimum subset size.")
@click.option("--max", "max_count", type=int, default=None, help="Maximum subset size (defaults to all values).")
@click.pass_context
def pluck_command(
    ctx: click.Context,
    values: tuple[str, ...],
    many: bool,
    min_count: int,
    max_count: int | None,
) -> None:
    def _run() -> None:
        if not many:
            console.print(pluck(values))
            return
        count_range = IntRange(min_count, len(values) if max_count is None else max_count)
        _print_values("plucked values", list(pluck_many(values, count_range)))

    ctx.exit(_handle_action(_run))


@cli.command(name="version", help="Show the installed version.")
def version_command() -> None:
    console.print(f"Smart Factories {_package_version()}")


def main(argv: list[str] | None = None) -> int:
    try:
        return cli.main(args=argv, prog_name="smart-factories", standalone_mode=False)
    except SystemExit as exc:  # noqa: TRY003
        code = exc.code if isinstance(exc.code, int) else EXIT_USAGE
        return code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
