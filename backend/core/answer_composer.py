"""
Answer composer — turns query results into the user-facing reply.
Never raises: provider failures become fixed fallback strings.
"""
import json
import logging
from typing import Sequence

from errors import ProviderError
from integrations.anthropic_client import AnthropicClient
from models.chat import ChatMessage, QueryResult
from prompts.chat_prompts import ANSWER_SYSTEM_PROMPT, GENERAL_SYSTEM_PROMPT, answer_user_prompt

logger = logging.getLogger(__name__)

ANSWER_MAX_TOKENS = 500
ANSWER_TEMPERATURE = 0.3
GENERAL_MAX_TOKENS = 300
GENERAL_TEMPERATURE = 0.5

ANSWER_FALLBACK = "I encountered an error while processing your request. Please try again."
GENERAL_FALLBACK = "I'm here to help you with questions about your real estate data. What would you like to know?"
NO_DATA_CONTEXT = "No data found for this query."


def build_data_context(result: QueryResult) -> str:
    if not result.success:
        return f"Database error: {result.error}"
    if not result.rows:
        return NO_DATA_CONTEXT
    context = f"Query results: {json.dumps(result.rows, indent=2, default=str)}"
    if result.truncated:
        context += f"\n(Only the first {len(result.rows)} rows are shown.)"
    return context


def compose_answer(
    question: str,
    result: QueryResult,
    history: Sequence[ChatMessage],
    llm: AnthropicClient,
) -> str:
    user_msg = answer_user_prompt.format(
        question=question,
        data_context=build_data_context(result),
    )
    messages = list(history) + [ChatMessage(role="user", content=user_msg)]
    try:
        return llm.generate(
            ANSWER_SYSTEM_PROMPT,
            messages,
            max_tokens=ANSWER_MAX_TOKENS,
            temperature=ANSWER_TEMPERATURE,
        )
    except ProviderError as e:
        logger.warning("Error generating response: %s", e)
        return ANSWER_FALLBACK


def compose_general(
    question: str,
    history: Sequence[ChatMessage],
    llm: AnthropicClient,
) -> str:
    """Answer a message that needs no data access."""
    messages = list(history) + [ChatMessage(role="user", content=question)]
    try:
        return llm.generate(
            GENERAL_SYSTEM_PROMPT,
            messages,
            max_tokens=GENERAL_MAX_TOKENS,
            temperature=GENERAL_TEMPERATURE,
        )
    except ProviderError as e:
        logger.warning("Error handling general question: %s", e)
        return GENERAL_FALLBACK
