"""Request models for the Ollama chat endpoint."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ollama_request.encoding import KeyedContainer, dumps, dumps_bytes, encode_object
from ollama_request.errors import DecodingError
from ollama_request.json_value import JSONValue
from ollama_request.options import CompletionOptions

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """Sender of a chat message."""

    SYSTEM = "system"
    ASSISTANT = "assistant"
    USER = "user"
    TOOL = "tool"

    @classmethod
    def decode(cls, value: Any) -> Role:
        """Return the role for a wire tag; unknown tags are an error."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise DecodingError(f"unknown role {value!r}") from exc


def _optional_json(value: Any) -> JSONValue | None:
    return None if value is None else JSONValue.from_python(value)


class Function(BaseModel):
    """Name and arguments of a tool invocation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    arguments: JSONValue | None = None

    @field_validator("arguments", mode="before")
    @classmethod
    def _coerce_arguments(cls, value: Any) -> JSONValue | None:
        return _optional_json(value)

    def encode_to(self, container: KeyedContainer) -> None:
        container.encode("name", self.name)
        container.encode_if_present("arguments", self.arguments)


class ToolCall(BaseModel):
    """A model-emitted call to an external function."""

    model_config = ConfigDict(frozen=True)

    function: Function | None = None

    def encode_to(self, container: KeyedContainer) -> None:
        container.encode_if_present("function", self.function)


class Message(BaseModel):
    """Single chat turn.

    Role/field combinations (for example ``tool_name`` outside of a tool
    message) are not checked here; the API decides what it accepts.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    tool_name: str | None = None
    thinking: str | None = None
    # base64-encoded image data
    images: tuple[str, ...] | None = None
    tool_calls: tuple[ToolCall, ...] | None = None

    @field_validator("role", mode="before")
    @classmethod
    def _decode_role(cls, value: Any) -> Role:
        return Role.decode(value)

    def encode_to(self, container: KeyedContainer) -> None:
        container.encode("role", self.role)
        container.encode("content", self.content)
        container.encode_if_present("tool_name", self.tool_name)
        container.encode_if_present("thinking", self.thinking)
        container.encode_if_present("images", self.images)
        container.encode_if_present("tool_calls", self.tool_calls)


class ChatRequestData(BaseModel):
    """Body of a ``/api/chat`` request.

    Everything except ``options`` is fixed at construction. ``options`` may be
    assigned later; its fields are written at the top level of the encoded
    object, next to ``model`` and ``messages``. An options key that collides
    with a fixed key raises DuplicateKeyError when encoding.

    ``model`` and ``messages`` are expected to be non-empty but are not
    validated.
    """

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    model: str = Field(frozen=True)
    messages: tuple[Message, ...] = Field(frozen=True)
    tools: tuple[JSONValue, ...] | None = Field(default=None, frozen=True)
    # JSON schema for the response; also say "return as JSON" in the prompt
    format: JSONValue | None = Field(default=None, frozen=True)
    think: JSONValue | None = Field(default=None, frozen=True)
    stream: bool = Field(default=True, frozen=True)
    options: CompletionOptions | None = None

    @field_validator("tools", mode="before")
    @classmethod
    def _coerce_tools(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return tuple(JSONValue.from_python(tool) for tool in value)
        return value

    @field_validator("format", "think", mode="before")
    @classmethod
    def _coerce_json(cls, value: Any) -> JSONValue | None:
        return _optional_json(value)

    def encode_to(self, container: KeyedContainer) -> None:
        container.encode("stream", self.stream)
        container.encode("model", self.model)
        container.encode("messages", self.messages)
        container.encode_if_present("tools", self.tools)
        container.encode_if_present("format", self.format)
        container.encode_if_present("think", self.think)
        options = self.options
        if options is not None:
            options.encode_to(container)

    def to_dict(self) -> dict[str, Any]:
        """Return the request body as an ordered dict."""
        return encode_object(self)

    def to_json(self) -> str:
        """Return the request body as compact JSON text."""
        logger.debug("Encoding chat request for model %s (%d messages)", self.model, len(self.messages))
        return dumps(self)

    def to_bytes(self) -> bytes:
        """Return the UTF-8 request body handed to the transport."""
        return dumps_bytes(self)
