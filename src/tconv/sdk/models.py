"""Pydantic models for the settings YAML consumed by ``tconv convert --config``."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tconv.core.interface.config import ConverterConfig


class TelemetrySettings(BaseModel):
    """Optional tracing configuration."""

    enabled: bool = False
    service_name: str = "tconv"
    console: bool = False
    otlp_endpoint: str | None = None


class ConverterSettings(BaseModel):
    """Top-level settings file."""

    version: str = "1"
    converter: ConverterConfig = Field(default_factory=ConverterConfig)
    telemetry: TelemetrySettings | None = None
