"""
ClarityNOW Assistant — natural language questions over real-estate data.
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api import chat, health
from api.deps import get_executor
from config import settings
from core.db_connector import check_connection

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("claritynow")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("ClarityNOW assistant starting up…")
    if not settings.is_llm_configured:
        logger.warning("ANTHROPIC_API_KEY is not set; chat replies will use fallback text")
    if not check_connection(get_executor().engine):
        logger.warning("Store at %s is not reachable; data questions will fail", settings.DATABASE_PATH)
    yield
    get_executor().engine.dispose()
    logger.info("ClarityNOW assistant shutting down.")


# ── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="ClarityNOW Assistant",
    description="Read-only natural language querying of listings and portal metrics.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ──────────────────────────────────────────────────────────────────────
origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(health.router, prefix="/api")
app.include_router(chat.router,   prefix="/api")
app.add_exception_handler(RequestValidationError, chat.validation_error_handler)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.API_HOST, port=settings.API_PORT)
