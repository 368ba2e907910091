"""
Chat agent — keyword routing and the per-message pipeline:
classify → generate SQL → guard → execute → compose.
Each call is self-contained; history is passed in and never stored.
"""
import logging
from typing import Optional, Sequence

from config import settings
from core.answer_composer import compose_answer, compose_general
from core.db_connector import QueryExecutor
from errors import ProviderError, UnsafeQuery
from core.sql_generator import generate_sql
from integrations.anthropic_client import AnthropicClient
from models.chat import ChatMessage

logger = logging.getLogger(__name__)

# Any of these as a substring of the lower-cased message routes it to the store
_DATA_KEYWORDS = (
    "agent", "listing", "property", "commission", "profit", "volume",
    "sales", "transaction", "active", "pending", "sold", "price",
    "how many", "show me", "what is", "total", "average", "top",
    "performance", "analytics", "market", "team",
)

FALLBACK_MESSAGE = (
    "I apologize, but I encountered an error while processing your request. "
    "Please try again or rephrase your question."
)
UNSAFE_QUERY_MESSAGE = (
    "I can only answer questions that read existing data, and I couldn't build a safe query "
    "for that one. Please try rephrasing your question."
)


def needs_data(message: str) -> bool:
    lowered = message.lower()
    return any(kw in lowered for kw in _DATA_KEYWORDS)


def recent_history(history: Sequence[ChatMessage], window: Optional[int] = None) -> list[ChatMessage]:
    """Last `window` turns; older ones are dropped."""
    window = settings.HISTORY_WINDOW if window is None else window
    if window <= 0:
        return []
    return list(history)[-window:]


def process_message(
    message: str,
    history: Sequence[ChatMessage],
    llm: AnthropicClient,
    executor: QueryExecutor,
) -> str:
    """Main chat handler. Always returns display text, never raises."""
    try:
        window = recent_history(history)
        data = needs_data(message)
        logger.info("Needs data: %s for message: %s", data, message[:80])

        if not data:
            return compose_general(message, window, llm)

        sql = generate_sql(message, window, llm)
        result = executor.execute(sql)
        logger.info("Query result: %s", "success" if result.success else f"error: {result.error}")
        return compose_answer(message, result, window, llm)
    except UnsafeQuery:
        # already audit-logged by the guard
        return UNSAFE_QUERY_MESSAGE
    except ProviderError as e:
        logger.warning("Provider failure while processing message: %s", e)
        return FALLBACK_MESSAGE
    except Exception:
        logger.exception("Unexpected error processing message")
        return FALLBACK_MESSAGE
