"""Transcript model: the provider-agnostic chat history fed to converters.

Turns are stored the way the chat front-end records them: camelCase keys,
content either as a plain string or as a list of typed parts, and tool
results attached to the turn that issued the call via ``toolInvocations``.
Python code uses the snake_case attribute names; both spellings validate.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

Role = Literal["system", "user", "assistant"]

# ---------------------------------------------------------------------------
# Content Parts
# ---------------------------------------------------------------------------


class TextPart(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class ToolCallPart(BaseModel):
    """A tool call requested by an assistant turn."""

    model_config = {"populate_by_name": True}

    type: Literal["tool-call"] = "tool-call"
    tool_call_id: str = Field(alias="toolCallId")
    tool_name: str = Field(alias="toolName")
    args: Any = None


class UnknownPart(BaseModel):
    """Any part shape no converter understands. Kept so nothing is lost on load."""

    model_config = {"extra": "allow"}

    type: str = ""


ContentPart = TextPart | ToolCallPart | UnknownPart

_KNOWN_PARTS: dict[str, type[BaseModel]] = {
    "text": TextPart,
    "tool-call": ToolCallPart,
}


def parse_part(raw: Any) -> ContentPart:
    """Classify one raw content item.

    Bare strings become text. Mappings with a known ``type`` that validate
    become that part; everything else is an :class:`UnknownPart`.
    """
    if isinstance(raw, (TextPart, ToolCallPart, UnknownPart)):
        return raw
    if isinstance(raw, str):
        return TextPart(text=raw)
    if not isinstance(raw, dict):
        return UnknownPart(type=type(raw).__name__)

    part_type = raw.get("type")
    model = _KNOWN_PARTS.get(part_type) if isinstance(part_type, str) else None
    if model is not None:
        try:
            part: ContentPart = model.model_validate(raw)  # type: ignore[assignment]
            return part
        except ValidationError:
            pass

    extra = {k: v for k, v in raw.items() if k != "type"}
    return UnknownPart(type=part_type if isinstance(part_type, str) else "", **extra)


# ---------------------------------------------------------------------------
# Tool invocations
# ---------------------------------------------------------------------------


class ToolInvocation(BaseModel):
    """Execution record of a tool call, as stored alongside the calling turn."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    tool_call_id: str = Field(alias="toolCallId")
    state: str
    tool_name: str | None = Field(default=None, alias="toolName")
    args: Any = None
    result: Any = None

    @property
    def has_result(self) -> bool:
        return self.state == "result"


# ---------------------------------------------------------------------------
# Turn
# ---------------------------------------------------------------------------


class Turn(BaseModel):
    """A single role-tagged entry of the transcript."""

    model_config = {"populate_by_name": True}

    role: Role
    content: str | list[ContentPart] = Field(default_factory=lambda: list[ContentPart]())
    tool_invocations: list[ToolInvocation] | None = Field(default=None, alias="toolInvocations")
    metadata: dict[str, Any] = {}

    @field_validator("content", mode="before")
    @classmethod
    def _parse_content(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [parse_part(item) for item in value]
        return value

    @property
    def parts(self) -> list[ContentPart]:
        """Content as a list of parts (a plain string is one text part)."""
        if isinstance(self.content, str):
            return [TextPart(text=self.content)]
        return list(self.content)

    @property
    def text(self) -> str:
        """Concatenated text of all text parts."""
        if isinstance(self.content, str):
            return self.content
        return "".join(part.text for part in self.content if isinstance(part, TextPart))

    @property
    def tool_calls(self) -> list[ToolCallPart]:
        return [part for part in self.parts if isinstance(part, ToolCallPart)]

    @classmethod
    def system(cls, text: str) -> "Turn":
        """Create a system turn."""
        return cls(role="system", content=text)

    @classmethod
    def user(cls, text: str) -> "Turn":
        """Create a user turn."""
        return cls(role="user", content=text)

    @classmethod
    def assistant(
        cls,
        text: str = "",
        tool_calls: list[ToolCallPart] | None = None,
        tool_invocations: list[ToolInvocation] | None = None,
        **metadata: Any,
    ) -> "Turn":
        """Create an assistant turn, optionally carrying tool calls and their results."""
        if not tool_calls:
            return cls(
                role="assistant",
                content=text,
                tool_invocations=tool_invocations,
                metadata=metadata,
            )
        content: list[ContentPart] = [TextPart(text=text)] if text else []
        content.extend(tool_calls)
        return cls(
            role="assistant",
            content=content,
            tool_invocations=tool_invocations,
            metadata=metadata,
        )


# ---------------------------------------------------------------------------
# Transcript: ordered container of turns
# ---------------------------------------------------------------------------


class Transcript(BaseModel):
    """An ordered sequence of turns forming a conversation."""

    turns: list[Turn] = []

    @classmethod
    def from_records(cls, records: list[dict[str, Any]]) -> "Transcript":
        """Validate raw turn records (camelCase, as stored by the chat front-end)."""
        return cls(turns=[Turn.model_validate(record) for record in records])

    def append(self, turn: Turn) -> None:
        """Append a turn to the transcript."""
        self.turns.append(turn)

    @property
    def system_turns(self) -> list[Turn]:
        return [t for t in self.turns if t.role == "system"]

    @property
    def non_system_turns(self) -> list[Turn]:
        return [t for t in self.turns if t.role != "system"]

    def __len__(self) -> int:
        return len(self.turns)

    def __iter__(self):  # type: ignore[override]
        return iter(self.turns)
