"""Shared CLI output formatters."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tconv.core.interface.wire import (  # noqa: TC001
    ConversionResult,
    WireContentPart,
    WireText,
    WireToolUse,
)

console = Console()


def print_error(label: str, detail: object) -> None:
    """Print a red label followed by an unstyled detail message."""
    console.print(f"[red]{label}:[/red] {escape(str(detail))}")


def print_result(result: ConversionResult, *, as_json: bool = False) -> None:
    """Pretty-print a conversion result, or dump it as wire JSON."""
    if as_json:
        console.print_json(result.to_json())
        return

    system = escape(_truncate(result.system)) if result.system else "(none)"
    console.print(f"[bold]System:[/bold] {system}")

    table = Table(title="Converse Messages")
    table.add_column("#", justify="right")
    table.add_column("Role", style="cyan")
    table.add_column("Content")

    for index, message in enumerate(result.messages):
        summary = "\n".join(_describe(part) for part in message.content) or "(empty)"
        table.add_row(str(index), message.role, Text(summary))

    console.print(table)


def _describe(part: WireContentPart) -> str:
    if isinstance(part, WireText):
        return _truncate(part.text)
    if isinstance(part, WireToolUse):
        return f"tool use {part.tool_use.name} ({part.tool_use.tool_use_id})"
    texts = " ".join(block.text for block in part.tool_result.content)
    return f"tool result {part.tool_result.tool_use_id}: {_truncate(texts)}"


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
