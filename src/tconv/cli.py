"""tconv CLI entrypoint."""

from __future__ import annotations

import click

from tconv import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tconv")
def main() -> None:
    """tconv: convert chat transcripts into Bedrock Converse payloads."""


# Register subcommands
from tconv.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
