"""Bedrock Converse converter: system extraction, role alternation and tool results.

Key differences from the transcript model:
- The system prompt is a separate top-level field, and only one is allowed.
- Messages must alternate user/assistant, starting with user and ending with
  user. Gaps are filled with short synthetic turns instead of merging.
- Tool results travel as user messages holding ``toolResult`` blocks, placed
  right after the assistant message that requested them.
"""

import logging
from collections.abc import Sequence
from typing import Any

from tconv.core.errors import InvalidTranscript
from tconv.core.interface.config import ConverterConfig
from tconv.core.interface.models import (
    ContentPart,
    TextPart,
    ToolCallPart,
    ToolInvocation,
    Transcript,
    Turn,
)
from tconv.core.interface.wire import (
    ConversionResult,
    WireContentPart,
    WireMessage,
    WireText,
    WireToolResult,
    WireToolUse,
)
from tconv.utils.telemetry import (
    ATTR_ALTERNATION_REPAIRS,
    ATTR_MESSAGES,
    ATTR_PENDING_TOOLS,
    ATTR_PROVIDER,
    ATTR_SYSTEM,
    ATTR_TOOL_RESULTS,
    ATTR_TRAILING_REPAIR,
    ATTR_TURNS,
    get_tracer,
)

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)


class TranscriptConverter:
    """Converts transcripts to and from the Bedrock Converse message format.

    Instances hold only their configuration, so one converter can be shared
    freely between threads.
    """

    provider = "bedrock"

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self.config = config or ConverterConfig()

    def convert(self, turns: Sequence[Turn] | Transcript) -> ConversionResult:
        """Convert a transcript to ``{system, messages}``.

        Raises:
            InvalidTranscript: If the first non-system turn is not a user turn
                (or there is none), or if more than one system turn exists.
        """
        turns = list(turns)

        with _tracer.start_as_current_span("transcript.convert") as span:
            span.set_attribute(ATTR_PROVIDER, self.provider)
            span.set_attribute(ATTR_TURNS, len(turns))
            span.set_attribute(ATTR_PENDING_TOOLS, self.config.pending_tools)

            _check_leading_user(turns)
            system = _extract_system(turns)

            assembler = _MessageAssembler(self.config)
            for turn in turns:
                if turn.role != "system":
                    assembler.add(turn)
            assembler.close()

            span.set_attribute(ATTR_SYSTEM, system is not None)
            span.set_attribute(ATTR_MESSAGES, len(assembler.messages))
            span.set_attribute(ATTR_ALTERNATION_REPAIRS, assembler.alternation_repairs)
            span.set_attribute(ATTR_TRAILING_REPAIR, assembler.trailing_repair)
            span.set_attribute(ATTR_TOOL_RESULTS, assembler.tool_results)

            logger.debug(
                "Converted %d turn(s) into %d message(s)", len(turns), len(assembler.messages)
            )
            return ConversionResult(system=system, messages=assembler.messages)

    def from_provider(self, response: dict[str, Any]) -> Turn:
        """Convert a Converse API response into an assistant turn."""
        message = response.get("output", {}).get("message", {})

        content: list[ContentPart] = []
        for block in message.get("content", []):
            if "text" in block:
                content.append(TextPart(text=block["text"]))
            elif "toolUse" in block:
                tool_use = block["toolUse"]
                content.append(
                    ToolCallPart(
                        tool_call_id=tool_use["toolUseId"],
                        tool_name=tool_use["name"],
                        args=tool_use.get("input", {}),
                    )
                )
            else:
                logger.debug("Skipping response block %s", sorted(block))

        metadata: dict[str, Any] = {}
        if response.get("usage"):
            metadata["usage"] = response["usage"]
        metadata["stop_reason"] = response.get("stopReason")

        return Turn(role="assistant", content=content, metadata=metadata)


def _check_leading_user(turns: list[Turn]) -> None:
    first = next((turn for turn in turns if turn.role != "system"), None)
    if first is None or first.role != "user":
        raise InvalidTranscript(InvalidTranscript.LEADING_USER)


def _extract_system(turns: list[Turn]) -> str | None:
    system_turns = [turn for turn in turns if turn.role == "system"]
    if len(system_turns) > 1:
        raise InvalidTranscript(InvalidTranscript.MULTIPLE_SYSTEM)
    if not system_turns:
        return None
    return system_turns[0].text


class _MessageAssembler:
    """Builds the alternating message list one transcript turn at a time."""

    def __init__(self, config: ConverterConfig) -> None:
        self.config = config
        self.messages: list[WireMessage] = []
        self.last_role: str | None = None
        self.pending: list[str] = []
        self.alternation_repairs = 0
        self.tool_results = 0
        self.trailing_repair = False

    def add(self, turn: Turn) -> None:
        content = self._normalize(turn)

        if turn.role == "user" and self.last_role == "user":
            logger.debug("Inserting assistant filler between consecutive user messages")
            self._emit(WireMessage.text("assistant", self.config.alternation_filler))
            self.alternation_repairs += 1

        role = "user" if turn.role == "user" else "assistant"
        self._emit(WireMessage(role=role, content=content))

        if turn.tool_invocations:
            self._splice_results(turn.tool_invocations)

    def close(self) -> None:
        if self.messages and self.messages[-1].role != "user":
            self._emit(WireMessage.text("user", self.config.continuation_prompt))
            self.trailing_repair = True

    def _emit(self, message: WireMessage) -> None:
        self.messages.append(message)
        self.last_role = message.role

    def _normalize(self, turn: Turn) -> list[WireContentPart]:
        if isinstance(turn.content, str):
            return [WireText(text=turn.content)]

        parts: list[WireContentPart] = []
        for part in turn.content:
            if isinstance(part, TextPart):
                parts.append(WireText(text=part.text))
            elif isinstance(part, ToolCallPart):
                parts.append(WireToolUse.create(part.tool_call_id, part.tool_name, part.args))
                self._mark_pending(part.tool_call_id)
            else:
                logger.debug("Dropping unsupported content part of type %r", part.type)
        return parts

    def _mark_pending(self, tool_call_id: str) -> None:
        if self.config.pending_tools == "latest":
            self.pending = [tool_call_id]
        elif tool_call_id not in self.pending:
            self.pending.append(tool_call_id)

    def _splice_results(self, invocations: list[ToolInvocation]) -> None:
        results: list[WireContentPart] = []
        for invocation in invocations:
            if not invocation.has_result or invocation.tool_call_id not in self.pending:
                logger.debug(
                    "Ignoring tool invocation %s (state=%s)",
                    invocation.tool_call_id,
                    invocation.state,
                )
                continue
            self.pending.remove(invocation.tool_call_id)
            results.append(WireToolResult.from_value(invocation.tool_call_id, invocation.result))

        if results:
            self._emit(WireMessage(role="user", content=results))
            self.tool_results += len(results)
