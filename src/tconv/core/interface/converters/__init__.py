"""Provider-specific converter implementations."""

from tconv.core.interface.converters.bedrock import TranscriptConverter

__all__ = ["TranscriptConverter"]
