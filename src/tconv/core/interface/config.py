"""Converter configuration: repair texts and tool-result matching mode."""

from typing import Literal

from pydantic import BaseModel


class ConverterConfig(BaseModel):
    """Tunable policy for :class:`~tconv.core.interface.converters.bedrock.TranscriptConverter`.

    ``pending_tools`` selects how tool results are matched to tool calls:

    - ``latest``: only the most recent tool call is awaiting a result; a
      result for any earlier call is ignored.
    - ``all``: every tool call awaits its own result, and all results
      attached to one turn are sent back in a single user message.
    """

    alternation_filler: str = "I understand."
    continuation_prompt: str = "Continue."
    pending_tools: Literal["latest", "all"] = "latest"
