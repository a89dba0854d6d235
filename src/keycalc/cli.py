"""Drive a calculator engine from key names on the command line or stdin."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

import click

from keycalc.actions import dispatch
from keycalc.config import FormatConfig
from keycalc.core import CalculatorEngine, Snapshot
from keycalc.keys import action_for_key
from keycalc.logging_config import setup_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def read_keys(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def render(snapshot: Snapshot) -> str:
    if snapshot.expression_text:
        return f"{snapshot.expression_text}\n{snapshot.display_text}"
    return snapshot.display_text


def run_keys(
    engine: CalculatorEngine, keys: Iterable[str], strict: bool = False
) -> Iterator[tuple[str, Snapshot]]:
    """Feed key names to the engine, yielding each handled key with its snapshot."""
    for key in keys:
        action = action_for_key(key)
        if action is None:
            if strict:
                raise click.UsageError(f"Unknown key: {key!r}")
            logger.warning("Skipping unknown key %r", key)
            continue
        yield key, dispatch(engine, action)


@click.command()
@click.argument("keys", nargs=-1)
@click.option("--trace", is_flag=True, default=False, help="Print the display after every key")
@click.option("--strict", is_flag=True, default=False, help="Fail on keys with no binding")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def main(keys: tuple[str, ...], trace: bool, strict: bool, log_level: str) -> None:
    """Press KEYS on a keypad calculator (read from stdin when none are given).

    Keys are names such as 1 2 . + - * / = % Backspace Escape n.
    """
    setup_logging(log_level)
    engine = CalculatorEngine(FormatConfig.from_env())
    source = keys if keys else read_keys(click.get_text_stream("stdin"))

    for key, snapshot in run_keys(engine, source, strict=strict):
        if trace:
            suffix = f" [{snapshot.expression_text}]" if snapshot.expression_text else ""
            click.echo(f"{key} -> {snapshot.display_text}{suffix}")

    click.echo(render(engine.snapshot))


if __name__ == "__main__":  # pragma: no cover
    main()
