"""Transcript model, wire model and provider conversion."""

from tconv.core.interface.config import ConverterConfig
from tconv.core.interface.converter import Converter
from tconv.core.interface.converters.bedrock import TranscriptConverter
from tconv.core.interface.models import (
    ContentPart,
    TextPart,
    ToolCallPart,
    ToolInvocation,
    Transcript,
    Turn,
    UnknownPart,
)
from tconv.core.interface.wire import (
    ConversionResult,
    WireContentPart,
    WireMessage,
    WireText,
    WireToolResult,
    WireToolUse,
)

__all__ = [
    "ContentPart",
    "ConversionResult",
    "Converter",
    "ConverterConfig",
    "TextPart",
    "ToolCallPart",
    "ToolInvocation",
    "Transcript",
    "TranscriptConverter",
    "Turn",
    "UnknownPart",
    "WireContentPart",
    "WireMessage",
    "WireText",
    "WireToolResult",
    "WireToolUse",
]
