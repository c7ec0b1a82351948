"""Converter protocol: turns a transcript into a provider payload and back.

Each provider gets a concrete converter. The transcript model stays
provider-agnostic; provider conventions (such as tool results travelling
as user messages) live only inside the converter.
"""

from collections.abc import Sequence
from typing import Any, Protocol

from tconv.core.interface.models import Transcript, Turn
from tconv.core.interface.wire import ConversionResult


class Converter(Protocol):
    """Protocol for provider-specific transcript converters."""

    def convert(self, turns: Sequence[Turn] | Transcript) -> ConversionResult:
        """Convert a transcript to the provider's ``{system, messages}`` payload.

        Raises:
            InvalidTranscript: If the transcript cannot be expressed for the provider.
        """
        ...

    def from_provider(self, response: dict[str, Any]) -> Turn:
        """Convert a provider's raw response into an assistant turn."""
        ...
