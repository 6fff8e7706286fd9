"""Shopdesk API service entrypoint."""

import logging
import os

from fastapi import FastAPI

from services.api.app.db.init_db import init_db
from services.api.app.routers.actions import router as actions_router
from services.api.app.routers.audit import router as audit_router
from services.api.app.routers.chat import router as chat_router

logging.basicConfig(
    level=os.getenv("SHOPDESK_LOG_LEVEL", "INFO").strip().upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Shopdesk API")

app.include_router(chat_router)
app.include_router(actions_router)
app.include_router(audit_router)


@app.on_event("startup")
def _startup() -> None:
    init_db()


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
