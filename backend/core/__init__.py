from errors import AssistantError, ProviderError, UnsafeQuery, QueryError  # noqa: F401
from core.query_guard import is_read_only, ensure_read_only  # noqa: F401
from core.schema_catalog import schema_info, introspect_schema  # noqa: F401
from core.db_connector import QueryExecutor, create_read_only_engine  # noqa: F401
from core.sql_generator import generate_sql  # noqa: F401
from core.answer_composer import compose_answer, compose_general  # noqa: F401
from core.chat_agent import needs_data, process_message  # noqa: F401
