"""/api/chatbot — natural language questions over the listings store."""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.deps import get_executor, get_llm
from config import settings
from core.chat_agent import process_message
from core.db_connector import QueryExecutor
from core.schema_catalog import introspect_schema, schema_info
from integrations.anthropic_client import AnthropicClient
from models.chat import ChatRequest, ChatResponse

router = APIRouter(prefix="/chatbot")
logger = logging.getLogger(__name__)


def _bad_request(detail: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": detail})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies get the same 400 shape as other input errors."""
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "invalid value")
    return _bad_request(f"Invalid request: {field}: {msg}" if field else f"Invalid request: {msg}")


@router.post("/message", response_model=ChatResponse)
def post_message(
    req: ChatRequest,
    llm: AnthropicClient = Depends(get_llm),
    executor: QueryExecutor = Depends(get_executor),
):
    if not req.message.strip():
        return _bad_request("Message is required and must be a non-empty string")
    if len(req.message) > settings.MAX_MESSAGE_LENGTH:
        return _bad_request(
            f"Message is too long. Please keep it under {settings.MAX_MESSAGE_LENGTH} characters."
        )

    response = process_message(req.message, req.conversation_history, llm, executor)
    return ChatResponse(
        response=response,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/schema")
def get_schema(live: bool = False, executor: QueryExecutor = Depends(get_executor)):
    """Queryable tables and columns. `live=true` reflects the store instead (debug)."""
    if not live:
        return {"success": True, "schema": schema_info()}
    try:
        tables = introspect_schema(executor.engine)
    except Exception as e:
        logger.exception("Error getting schema info")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": f"Failed to retrieve schema information: {e}"},
        )
    return {"success": True, "schema": {t.table_name: [c.model_dump() for c in t.columns] for t in tables}}
