from models.table import TableMetadata, ColumnMetadata  # noqa: F401
from models.chat import ChatMessage, ChatRequest, ChatResponse, QueryResult, HealthResponse  # noqa: F401
