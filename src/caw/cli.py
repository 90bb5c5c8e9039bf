"""Command-line interface for caw."""

from __future__ import annotations

from datetime import datetime
from typing import BinaryIO, Optional, TextIO

import click

from . import api
from .codec.mapping import MIN_DICTIONARY_SIZE
from .config import DEFAULT_CHARACTER_LIMIT, ArmorConfig
from .dictionary import DICTIONARY_ENV, Dictionary, load_dictionary
from .exceptions import CawError
from .keying.pcg import SEED_BITS
from .utils import configure_logging


class SeedType(click.ParamType):
    """Unsigned 128-bit integer in decimal, ``0x`` hex or ``0b`` binary notation."""

    name = "seed"

    def convert(self, value, param, ctx):  # type: ignore[override]
        if isinstance(value, int):
            seed = value
        else:
            try:
                seed = int(str(value), 0)
            except ValueError:
                self.fail(f"{value!r} is not an integer", param, ctx)
        if seed < 0 or seed >> SEED_BITS:
            self.fail("seed must fit in 128 unsigned bits", param, ctx)
        return seed


SEED = SeedType()

_seed_option = click.option(
    "--seed", type=SEED, required=True, envvar="CAW_SEED", help="Shared 128-bit seed."
)
_date_option = click.option(
    "--date",
    "key_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Shared calendar date (YYYY-MM-DD). Defaults to today in UTC.",
)
_dictionary_option = click.option(
    "--dictionary",
    "dictionary_path",
    type=click.Path(exists=True, dir_okay=False),
    envvar=DICTIONARY_ENV,
    required=True,
    help=f"Line-delimited word list (or set {DICTIONARY_ENV}).",
)


def _load(path: str) -> Dictionary:
    try:
        return load_dictionary(path)
    except CawError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Set the log level for the CLI session.",
)
def main(log_level: str | None) -> None:
    """caw command-line interface: armor bytes as dictionary words."""
    configure_logging(log_level)


@main.command("don")
@_seed_option
@_date_option
@_dictionary_option
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=DEFAULT_CHARACTER_LIMIT,
    show_default=True,
    help="Soft character limit per fragment.",
)
@click.option("--pad/--no-pad", default=False, help="Zero-pad odd-length input instead of failing.")
@click.argument("source", type=click.File("rb"), default="-")
def don_command(
    seed: int,
    key_date: Optional[datetime],
    dictionary_path: str,
    limit: int,
    pad: bool,
    source: BinaryIO,
) -> None:
    """Armor SOURCE (default: stdin) and print one fragment per line."""
    dictionary = _load(dictionary_path)
    config = ArmorConfig(character_limit=limit, odd_length="zero-pad" if pad else "reject")
    try:
        fragments = api.don(source.read(), seed, dictionary, date=key_date, config=config)
    except CawError as exc:
        raise click.ClickException(str(exc)) from exc
    for fragment in fragments:
        click.echo(fragment)


@main.command("doff")
@_seed_option
@_date_option
@_dictionary_option
@click.option(
    "--output",
    "-o",
    type=click.File("wb"),
    default="-",
    help="Where to write the recovered bytes (default: stdout).",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def doff_command(
    seed: int,
    key_date: Optional[datetime],
    dictionary_path: str,
    output: BinaryIO,
    source: TextIO,
) -> None:
    """Recover bytes from fragments in SOURCE, one per line, in any order."""
    dictionary = _load(dictionary_path)
    fragments = [line for line in source.read().splitlines() if line.strip()]
    try:
        data = api.doff(fragments, seed, dictionary, date=key_date)
    except CawError as exc:
        raise click.ClickException(str(exc)) from exc
    output.write(data)


@main.command()
@_dictionary_option
def doctor(dictionary_path: str) -> None:
    """Check that a dictionary is usable for armoring."""
    dictionary = _load(dictionary_path)
    if len(dictionary) < MIN_DICTIONARY_SIZE:
        raise click.ClickException(
            f"dictionary has {len(dictionary)} words; at least {MIN_DICTIONARY_SIZE} are required"
        )
    click.echo(f"{len(dictionary)} words, fingerprint {dictionary.fingerprint[:16]}")


__all__ = ["main"]
