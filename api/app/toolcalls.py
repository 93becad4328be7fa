import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ToolFunction(BaseModel):
    name: Optional[str] = None
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def parse_arguments(cls, v):
        # Some assistants send arguments as a JSON-encoded string.
        if isinstance(v, str):
            try:
                v = json.loads(v)
            except ValueError:
                return {}
        if not isinstance(v, dict):
            return {}
        return v


class ToolCall(BaseModel):
    id: Optional[str] = None
    function: ToolFunction = Field(default_factory=ToolFunction)

    @field_validator("function", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return v if v is not None else {}


class ToolCallMessage(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    tool_calls: list[ToolCall] = Field(default_factory=list, alias="toolCalls")

    @field_validator("tool_calls", mode="before")
    @classmethod
    def none_to_list(cls, v):
        return v if v is not None else []


class ToolCallEnvelope(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: ToolCallMessage = Field(default_factory=ToolCallMessage)

    @field_validator("message", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return v if v is not None else {}

    @property
    def tool_call(self) -> ToolCall:
        if self.message.tool_calls:
            return self.message.tool_calls[0]
        return ToolCall()

    @property
    def tool_call_id(self) -> Optional[str]:
        return self.tool_call.id

    @property
    def arguments(self) -> dict[str, Any]:
        return self.tool_call.function.arguments


def str_arg(args: dict[str, Any], key: str) -> Optional[str]:
    value = args.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def tool_result(tool_call_id: Optional[str], result: dict[str, Any]) -> dict[str, Any]:
    return {"results": [{"toolCallId": tool_call_id, "result": result}]}
