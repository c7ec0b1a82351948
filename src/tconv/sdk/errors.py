"""SDK error types."""

from __future__ import annotations

from tconv.core.errors import TranscriptError


class TranscriptLoadError(TranscriptError):
    """Raised when a transcript or settings file cannot be read, parsed or validated."""
