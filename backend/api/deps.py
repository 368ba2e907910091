"""FastAPI dependencies for the provider client and the query executor."""
from functools import lru_cache

from core.db_connector import QueryExecutor, create_read_only_engine
from integrations.anthropic_client import AnthropicClient


@lru_cache(maxsize=1)
def get_executor() -> QueryExecutor:
    # one read-only engine shared by every request
    return QueryExecutor(create_read_only_engine())


def get_llm() -> AnthropicClient:
    return AnthropicClient.from_settings()
