"""
SQL generator — turns a question plus recent history into one read-only query.
The provider's text is trusted for nothing: it is trimmed and then must pass
the read-only guard before anyone may execute it.
"""
import logging
from typing import Sequence

from errors import ProviderError
from core.query_guard import ensure_read_only
from core.schema_catalog import LISTING_STATUSES, format_column_notes, format_schema_text
from integrations.anthropic_client import AnthropicClient
from models.chat import ChatMessage
from prompts.chat_prompts import sql_question_prompt, sql_system_prompt

logger = logging.getLogger(__name__)

SQL_MAX_TOKENS = 200
SQL_TEMPERATURE = 0.0


def build_sql_system_prompt() -> str:
    return sql_system_prompt.format(
        schema_text=format_schema_text(),
        column_notes=format_column_notes(),
        statuses=", ".join(f"'{s}'" for s in LISTING_STATUSES),
    )


def generate_sql(
    question: str,
    history: Sequence[ChatMessage],
    llm: AnthropicClient,
) -> str:
    """
    Raises ProviderError when generation fails or comes back empty,
    UnsafeQuery when the text is not a pure SELECT.
    """
    messages = list(history) + [
        ChatMessage(role="user", content=sql_question_prompt.format(question=question)),
    ]
    sql = llm.generate(
        build_sql_system_prompt(),
        messages,
        max_tokens=SQL_MAX_TOKENS,
        temperature=SQL_TEMPERATURE,
    ).strip()
    if not sql:
        raise ProviderError("Provider returned an empty query")
    logger.info("Generated SQL: %s", sql)
    return ensure_read_only(sql)
