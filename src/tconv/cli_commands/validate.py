"""``tconv validate``: check a transcript against the conversion invariants."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tconv.cli_commands._output import console, print_error
from tconv.core.errors import InvalidTranscript
from tconv.core.interface.converters.bedrock import TranscriptConverter
from tconv.sdk.errors import TranscriptLoadError
from tconv.sdk.loader import TranscriptLoader


@click.command("validate")
@click.argument("transcript_file", type=click.Path(exists=True))
def validate(transcript_file: str) -> None:
    """Check that TRANSCRIPT_FILE can be converted."""
    try:
        transcript = TranscriptLoader(Path(transcript_file)).load()
        TranscriptConverter().convert(transcript)
    except TranscriptLoadError as exc:
        print_error("Error loading input", exc)
        sys.exit(1)
    except InvalidTranscript as exc:
        print_error("Invalid transcript", exc.reason)
        sys.exit(1)

    console.print(f"[green]OK[/green] {len(transcript)} turn(s)")
