import pytest
from pydantic import ValidationError

from models.chat import ChatMessage, ChatRequest, QueryResult
from models.table import TableMetadata, ColumnMetadata


def test_chat_request_accepts_camel_case_history():
    req = ChatRequest.model_validate({
        "message": "How many listings?",
        "conversationHistory": [{"role": "user", "content": "hi"}],
    })
    assert req.conversation_history == [ChatMessage(role="user", content="hi")]


def test_chat_request_history_defaults_empty():
    assert ChatRequest(message="hi").conversation_history == []


def test_chat_message_rejects_unknown_role():
    with pytest.raises(ValidationError):
        ChatMessage(role="tool", content="x")


def test_chat_message_is_frozen():
    msg = ChatMessage(role="user", content="x")
    with pytest.raises(ValidationError):
        msg.content = "y"


def test_query_result_defaults():
    res = QueryResult(success=False, error="boom", query="SELECT 1")
    assert res.rows is None
    assert res.truncated is False


def test_table_metadata_column_names():
    table = TableMetadata(
        table_name="listings",
        columns=[ColumnMetadata(name="id", data_type="INTEGER"), ColumnMetadata(name="status", data_type="TEXT")],
    )
    assert table.column_names == ["id", "status"]
