"""Pydantic schemas for the chatbot API and pipeline."""
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """One conversation turn. Frozen once created."""
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant", "system"]
    content: str


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    conversation_history: list[ChatMessage] = Field(default_factory=list, alias="conversationHistory")


class ChatResponse(BaseModel):
    success: bool = True
    response: str
    timestamp: str


class QueryResult(BaseModel):
    success: bool
    rows: Optional[list[dict[str, Any]]] = None
    error: Optional[str] = None
    query: str
    truncated: bool = False


class HealthResponse(BaseModel):
    success: bool = True
    status: str
    configured: bool
    timestamp: str
