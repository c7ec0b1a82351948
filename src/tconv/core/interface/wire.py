"""Wire model: the Converse request fragment produced by conversion.

Every content block is a single-key object naming its kind (``text``,
``toolUse``, ``toolResult``). Serialize with :meth:`ConversionResult.to_wire`
so the camelCase aliases are used.
"""

import json
from typing import Any, Literal

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Content blocks
# ---------------------------------------------------------------------------


class WireText(BaseModel):
    """``{"text": ...}``"""

    text: str


class ToolUseBlock(BaseModel):
    model_config = {"populate_by_name": True}

    tool_use_id: str = Field(alias="toolUseId")
    name: str
    input: Any = None


class WireToolUse(BaseModel):
    """``{"toolUse": {"toolUseId", "name", "input"}}``"""

    model_config = {"populate_by_name": True}

    tool_use: ToolUseBlock = Field(alias="toolUse")

    @classmethod
    def create(cls, tool_use_id: str, name: str, input: Any) -> "WireToolUse":
        return cls(tool_use=ToolUseBlock(tool_use_id=tool_use_id, name=name, input=input))


class ToolResultBlock(BaseModel):
    model_config = {"populate_by_name": True}

    tool_use_id: str = Field(alias="toolUseId")
    content: list[WireText] = []


class WireToolResult(BaseModel):
    """``{"toolResult": {"toolUseId", "content": [{"text"}]}}``"""

    model_config = {"populate_by_name": True}

    tool_result: ToolResultBlock = Field(alias="toolResult")

    @classmethod
    def from_value(cls, tool_use_id: str, value: Any) -> "WireToolResult":
        """Wrap a tool's return value as a single JSON text block."""
        text = serialize_result(value)
        return cls(tool_result=ToolResultBlock(tool_use_id=tool_use_id, content=[WireText(text=text)]))


WireContentPart = WireText | WireToolUse | WireToolResult


def serialize_result(value: Any) -> str:
    """Compact JSON encoding of a tool result."""
    return json.dumps(value, separators=(",", ":"), default=str)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class WireMessage(BaseModel):
    """One message of the provider's strictly alternating conversation."""

    role: Literal["user", "assistant"]
    content: list[WireContentPart] = []

    @classmethod
    def text(cls, role: Literal["user", "assistant"], text: str) -> "WireMessage":
        """Create a message holding a single text block."""
        parts: list[WireContentPart] = [WireText(text=text)]
        return cls(role=role, content=parts)


class ConversionResult(BaseModel):
    """Output of a conversion: the system prompt and the message list."""

    system: str | None = None
    messages: list[WireMessage] = []

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready payload with provider field names."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
