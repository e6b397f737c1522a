"""Package specific exception hierarchy."""


class OllamaRequestError(Exception):
    """Base exception for ollama_request package."""


class DecodingError(OllamaRequestError):
    """Raised when untyped input cannot be turned into a request value."""

    def __init__(self, message: str, path: str = "$") -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class EncodingError(OllamaRequestError, ValueError):
    """Raised when a value cannot be written as JSON."""


class DuplicateKeyError(EncodingError):
    """Raised when one JSON object would receive the same key twice."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Duplicate key '{key}' in JSON object.")
        self.key = key
