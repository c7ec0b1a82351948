"""Loading transcripts and settings from files."""

from tconv.sdk.errors import TranscriptLoadError
from tconv.sdk.loader import SettingsLoader, TranscriptLoader
from tconv.sdk.models import ConverterSettings, TelemetrySettings

__all__ = [
    "ConverterSettings",
    "SettingsLoader",
    "TelemetrySettings",
    "TranscriptLoadError",
    "TranscriptLoader",
]
