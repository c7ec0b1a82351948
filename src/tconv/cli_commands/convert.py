"""``tconv convert``: convert a stored transcript into a Converse payload."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from tconv.cli_commands._output import print_error, print_result
from tconv.core.errors import InvalidTranscript
from tconv.core.interface.config import ConverterConfig
from tconv.core.interface.converters.bedrock import TranscriptConverter
from tconv.sdk.errors import TranscriptLoadError
from tconv.sdk.loader import SettingsLoader, TranscriptLoader
from tconv.utils.telemetry import configure_telemetry


@click.command("convert")
@click.argument("transcript_file", type=click.Path(exists=True))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="Settings YAML (converter policy and telemetry).",
)
@click.option("--json", "as_json", is_flag=True, help="Output the wire payload as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Log conversion details to stderr.")
def convert(
    transcript_file: str, config_file: str | None, as_json: bool, verbose: bool
) -> None:
    """Convert a transcript file into a Converse ``{system, messages}`` payload.

    TRANSCRIPT_FILE is a JSON or YAML list of turns, or a mapping with a
    ``messages`` list.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = ConverterConfig()
    try:
        if config_file:
            settings = SettingsLoader(Path(config_file)).load()
            config = settings.converter
            if settings.telemetry:
                configure_telemetry(settings.telemetry)
        transcript = TranscriptLoader(Path(transcript_file)).load()
    except TranscriptLoadError as exc:
        print_error("Error loading input", exc)
        sys.exit(1)

    try:
        result = TranscriptConverter(config).convert(transcript)
    except InvalidTranscript as exc:
        print_error("Invalid transcript", exc.reason)
        sys.exit(1)

    print_result(result, as_json=as_json)
