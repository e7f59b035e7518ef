"""CLI entrypoint for the Davis line-protocol converter.

Reads a ``current_conditions`` JSON document from a file or stdin and
writes InfluxDB line protocol to stdout, ready to be piped into a write
endpoint.  Diagnostics go to stderr through logging.

Usage::

    curl -s http://wll.local/v1/current_conditions | davis-lp --device weatherlink-live
    davis-lp --device airlink --input airlink.json
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from collections.abc import Sequence
from typing import IO

import click

from davis_lp.config import ConverterConfig
from davis_lp.models.result import ConversionResult, ConversionStatus
from davis_lp.router import Device, convert

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_FAILURE = 1
EXIT_NO_OUTPUT = 2


def _split_documents(text: str, ndjson: bool) -> list[str]:
    if ndjson:
        return [line for line in text.splitlines() if line.strip()]
    return [text]


def _exit_code(results: Sequence[ConversionResult]) -> int:
    """0 if anything was written, 1 on any parse failure, 2 otherwise."""
    if any(result.ok for result in results):
        return EXIT_OK
    if any(result.status is ConversionStatus.PARSE_FAILURE for result in results):
        return EXIT_PARSE_FAILURE
    return EXIT_NO_OUTPUT


# ── CLI definition ──────────────────────────────────────────────────────


@click.command("davis-lp")
@click.option(
    "--device",
    type=click.Choice([d.value for d in Device], case_sensitive=False),
    default=Device.WEATHERLINK_LIVE.value,
    show_default=True,
    help="Device that produced the JSON document.",
)
@click.option(
    "--input",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    show_default=True,
    help="JSON file to convert ('-' reads stdin).",
)
@click.option(
    "--outdoor-txid",
    default=None,
    type=int,
    help="Transmitter id of the outdoor ISS (overrides OUTDOOR_TXID env var).",
)
@click.option(
    "--rain-cup-size",
    default=None,
    type=float,
    help="Rain collector size in mm per tip (overrides RAIN_CUP_SIZE_MM env var).",
)
@click.option(
    "--auto-rain-size/--no-auto-rain-size",
    default=None,
    help="Derive the cup size from the reported rain_size code (overrides AUTO_RAIN_SIZE).",
)
@click.option(
    "--ndjson",
    is_flag=True,
    default=False,
    help="Treat the input as one JSON document per line.",
)
@click.option(
    "--log-level",
    default=None,
    help="Log level (overrides LOG_LEVEL env var).",
)
def main(
    device: str,
    input_file: IO[str],
    outdoor_txid: int | None,
    rain_cup_size: float | None,
    auto_rain_size: bool | None,
    ndjson: bool,
    log_level: str | None,
) -> None:
    """Convert Davis WeatherLink Live / AirLink JSON to InfluxDB line protocol."""
    # ── Configuration ───────────────────────────────────────────────────
    config = ConverterConfig.from_env()

    # CLI overrides take precedence over env vars
    overrides: dict[str, object] = {}
    if outdoor_txid is not None:
        overrides["outdoor_txid"] = outdoor_txid
    if rain_cup_size is not None:
        overrides["rain_cup_size_mm"] = rain_cup_size
    if auto_rain_size is not None:
        overrides["auto_rain_size"] = auto_rain_size
    if log_level:
        overrides["log_level"] = log_level
    if overrides:
        config = dataclasses.replace(config, **overrides)

    config.configure_logging()

    # ── Convert ─────────────────────────────────────────────────────────
    documents = _split_documents(input_file.read(), ndjson)
    results = [convert(document, Device(device.lower()), config) for document in documents]

    payloads = [result.payload for result in results if result.ok and result.payload]
    if payloads:
        click.echo("\n".join(payloads))

    logger.info(
        "Converted %d/%d documents | points=%d | device=%s",
        len(payloads),
        len(documents),
        sum(result.line_count for result in results),
        device,
    )

    sys.exit(_exit_code(results))


if __name__ == "__main__":
    main()
