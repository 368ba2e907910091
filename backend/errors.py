"""Error taxonomy for the chat assistant pipeline."""
from typing import Optional


class AssistantError(Exception):
    """Base class for failures raised inside the assistant pipeline."""


class ProviderError(AssistantError):
    """Language-generation call failed or returned unusable output."""


class UnsafeQuery(AssistantError):
    """Generated text is not a pure read query."""

    def __init__(self, query: str, message: Optional[str] = None):
        self.query = query
        super().__init__(message or "Generated query is not read-only")


class QueryError(AssistantError):
    """Query execution failed against the store."""

    def __init__(self, query: str, message: str):
        self.query = query
        super().__init__(message)
