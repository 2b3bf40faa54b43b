# api/app/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.app.middleware.auth import RequestLoggingMiddleware
from api.app.routes import agent, conversations, health, recommendations, saved_items, webhook
from db.engine import dispose_engine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Engine is created lazily on first request; release its pool on shutdown
    await dispose_engine()
    logger.info("Database engine disposed")


app = FastAPI(
    title="Student Travel API",
    description="Voice-agent conversation ingestion and travel recommendations",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(webhook.router, prefix="/api")
app.include_router(agent.router, prefix="/api")
app.include_router(recommendations.router, prefix="/api")
app.include_router(conversations.router, prefix="/api")
app.include_router(saved_items.router, prefix="/api")
