"""GET /api/chatbot/health — reports whether the provider credential is set."""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.deps import get_llm
from integrations.anthropic_client import AnthropicClient
from models.chat import HealthResponse

router = APIRouter(prefix="/chatbot")


@router.get("/health", response_model=HealthResponse)
def health_check(llm: AnthropicClient = Depends(get_llm)):
    return HealthResponse(
        status="Chatbot service is running",
        configured=llm.is_configured(),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
