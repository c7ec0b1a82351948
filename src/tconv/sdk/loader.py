"""File loaders for transcripts and converter settings."""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from tconv.core.interface.models import Transcript
from tconv.sdk.errors import TranscriptLoadError
from tconv.sdk.models import ConverterSettings

if TYPE_CHECKING:
    from pathlib import Path


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TranscriptLoadError(f"Cannot read {path}: {exc}") from exc


class TranscriptLoader:
    """Load a stored transcript from a JSON or YAML file.

    The file holds either a list of turn records, or a mapping with a
    ``messages`` list (the shape a stored chat thread is exported in).
    Files ending in ``.yaml`` or ``.yml`` are parsed as YAML, anything else
    as JSON.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> Transcript:
        """Read, parse and validate the transcript.

        Raises:
            TranscriptLoadError: On read errors, parse errors, an unexpected
                top-level shape, or records that fail validation.
        """
        data = self._parse(_read(self._path))

        if isinstance(data, dict) and "messages" in data:
            data = data["messages"]
        if not isinstance(data, list):
            raise TranscriptLoadError(
                "Transcript must be a list of turns or a mapping with a 'messages' list"
            )

        try:
            return Transcript.from_records(data)
        except ValidationError as exc:
            raise TranscriptLoadError(str(exc)) from exc

    def _parse(self, raw: str) -> Any:
        if self._path.suffix.lower() in (".yaml", ".yml"):
            try:
                return yaml.safe_load(raw)
            except yaml.YAMLError as exc:
                raise TranscriptLoadError(f"YAML parse error: {exc}") from exc
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise TranscriptLoadError(f"JSON parse error: {exc}") from exc


class SettingsLoader:
    """Load and validate a settings YAML file into :class:`ConverterSettings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ConverterSettings:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing. An empty file
        yields the default settings.

        Raises:
            TranscriptLoadError: On YAML parse errors or schema validation failures.
        """
        expanded = os.path.expandvars(_read(self._path))

        try:
            data: Any = yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise TranscriptLoadError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise TranscriptLoadError("Settings YAML must be a mapping")

        try:
            return ConverterSettings.model_validate(data)
        except ValidationError as exc:
            raise TranscriptLoadError(str(exc)) from exc
