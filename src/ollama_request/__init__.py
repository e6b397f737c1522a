"""Request body models and encoder for the Ollama chat API."""

from .encoding import Encodable, KeyedContainer, dumps, dumps_bytes, encode_object
from .errors import DecodingError, DuplicateKeyError, EncodingError, OllamaRequestError
from .json_value import JSONArray, JSONBool, JSONNull, JSONNumber, JSONObject, JSONString, JSONValue
from .options import CompletionOptions
from .types import ChatRequestData, Function, Message, Role, ToolCall

__all__ = [
    "ChatRequestData",
    "Message",
    "Role",
    "ToolCall",
    "Function",
    "CompletionOptions",
    "JSONValue",
    "JSONNull",
    "JSONBool",
    "JSONNumber",
    "JSONString",
    "JSONArray",
    "JSONObject",
    "Encodable",
    "KeyedContainer",
    "encode_object",
    "dumps",
    "dumps_bytes",
    "OllamaRequestError",
    "DecodingError",
    "EncodingError",
    "DuplicateKeyError",
]
