import os
import sys
import sqlite3
import tempfile

# Add the parent directory (backend) to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

LISTINGS_DDL = """
CREATE TABLE listings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    status TEXT NOT NULL CHECK(status IN ('Active', 'Pending', 'Sold')) DEFAULT 'Active',
    transaction_type TEXT NOT NULL DEFAULT 'Resale',
    primary_agent TEXT NOT NULL,
    address TEXT NOT NULL,
    listing_price INTEGER NOT NULL DEFAULT 0,
    gross_commission INTEGER NOT NULL DEFAULT 0,
    team TEXT NOT NULL DEFAULT '',
    gross_profit INTEGER NOT NULL DEFAULT 0,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
)"""

PORTAL_DDL = """
CREATE TABLE portal_data (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    units_active INTEGER NOT NULL DEFAULT 0,
    volume_closed INTEGER NOT NULL DEFAULT 0
)"""


def _seed_store(path):
    conn = sqlite3.connect(path)
    cur = conn.cursor()
    cur.execute(LISTINGS_DDL)
    cur.execute(PORTAL_DDL)
    rows = (
        [("Active", "A", 400000)] * 3
        + [("Active", "B", 550000)] * 5
        + [("Sold", "A", 300000)] * 2
    )
    for i, (status, agent, price) in enumerate(rows):
        cur.execute(
            "INSERT INTO listings (status, primary_agent, address, listing_price, team) VALUES (?, ?, ?, ?, ?)",
            (status, agent, f"{100 + i} Burnet Rd Austin, TX 78757", price, "CDS DESIGN"),
        )
    cur.execute("INSERT INTO portal_data (units_active, volume_closed) VALUES (8, 19740000)")
    conn.commit()
    conn.close()


# The app reads settings at import time, so point it at a seeded store first
_fd, STORE_PATH = tempfile.mkstemp(suffix=".db")
os.close(_fd)
_seed_store(STORE_PATH)
os.environ["DATABASE_PATH"] = STORE_PATH
os.environ["ANTHROPIC_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_executor, get_llm
from core.db_connector import QueryExecutor, create_read_only_engine
from errors import ProviderError
from main import app


class StubLLM:
    """Deterministic stand-in for AnthropicClient.

    `replies` is consumed in order; an Exception instance in it is raised instead.
    """

    def __init__(self, replies=None, configured=True):
        self.replies = list(replies or [])
        self.configured = configured
        self.calls = []

    def is_configured(self):
        return self.configured

    def generate(self, system, messages, max_tokens, temperature):
        self.calls.append({
            "system": system,
            "messages": list(messages),
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        if not self.replies:
            raise ProviderError("no stub reply left")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class SpyExecutor:
    """Wraps a real executor and counts calls."""

    def __init__(self, inner):
        self.inner = inner
        self.engine = inner.engine
        self.queries = []

    def execute(self, sql):
        self.queries.append(sql)
        return self.inner.execute(sql)


@pytest.fixture(scope="session")
def store_path():
    yield STORE_PATH


@pytest.fixture
def engine(store_path):
    eng = create_read_only_engine(store_path)
    yield eng
    eng.dispose()


@pytest.fixture
def executor(engine):
    return QueryExecutor(engine)


@pytest.fixture
def spy_executor(executor):
    return SpyExecutor(executor)


@pytest.fixture
def stub_llm():
    return StubLLM()


@pytest.fixture
def client(stub_llm, spy_executor):
    app.dependency_overrides[get_llm] = lambda: stub_llm
    app.dependency_overrides[get_executor] = lambda: spy_executor
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def pytest_sessionfinish(session, exitstatus):
    get_executor().engine.dispose()
    if os.path.exists(STORE_PATH):
        os.remove(STORE_PATH)
