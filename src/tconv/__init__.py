"""tconv: convert chat transcripts into Bedrock Converse payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from tconv.core.errors import InvalidTranscript as InvalidTranscript
    from tconv.core.interface.converters.bedrock import TranscriptConverter as TranscriptConverter
    from tconv.core.interface.models import Turn as Turn

_EXPORTS = {
    "InvalidTranscript": "tconv.core.errors",
    "TranscriptConverter": "tconv.core.interface.converters.bedrock",
    "Turn": "tconv.core.interface.models",
}


def __getattr__(name: str) -> object:
    module_path = _EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'tconv' has no attribute {name!r}")
