"""Generation options merged into the top level of a chat request."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ollama_request.encoding import KeyedContainer
from ollama_request.json_value import JSONValue


class CompletionOptions(BaseModel):
    """Model parameters such as temperature or top_p.

    Unknown keyword arguments are kept and written as extra keys, so
    parameters newer than this class can still be sent.
    """

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    mirostat: int | None = Field(default=None, ge=0, le=2)
    mirostat_eta: float | None = None
    mirostat_tau: float | None = None
    num_ctx: int | None = None
    repeat_last_n: int | None = None
    repeat_penalty: float | None = None
    temperature: float | None = None
    seed: int | None = None
    stop: str | list[str] | None = None
    tfs_z: float | None = None
    num_predict: int | None = None
    top_k: int | None = None
    top_p: float | None = None
    min_p: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce_extras(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {
            key: value if key in cls.model_fields else JSONValue.from_python(value)
            for key, value in data.items()
        }

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in type(self).model_fields and not name.startswith("_"):
            value = JSONValue.from_python(value)
        super().__setattr__(name, value)

    def keys(self) -> list[str]:
        """Keys this bundle writes, in output order."""
        container = KeyedContainer()
        self.encode_to(container)
        return container.keys()

    def encode_to(self, container: KeyedContainer) -> None:
        """Append every set option into ``container`` without nesting."""
        for name in type(self).model_fields:
            container.encode_if_present(name, getattr(self, name))
        for key, value in (self.model_extra or {}).items():
            container.encode(key, value)
