"""
Consulta — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from consulta.config import SHEET_URL, configure_logging
from consulta.data.store import Repository
from consulta.api.router_meta import router as meta_router
from consulta.api.router_clients import router as clients_router
from consulta.api.router_agencies import router as agencies_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load every sheet at startup."""
    configure_logging()
    repository: Repository = app.state.repository

    if app.state.load_on_startup:
        logger.info("Feed = %s", SHEET_URL)
        summary = repository.load_all()
        if summary.ok:
            logger.info("Consulta ready — %d clients, %d accounts, %d agencies",
                        summary.counts.get("clients", 0),
                        summary.counts.get("accounts", 0),
                        summary.counts.get("agencies", 0))
        else:
            logger.warning("Consulta started with failed sheets: %s — POST /api/reload to retry",
                           ", ".join(sorted(summary.errors)))
    yield


def create_app(repository: Optional[Repository] = None, load_on_startup: bool = True) -> FastAPI:
    app = FastAPI(
        title="Consulta API",
        description="Bank clients, accounts and agencies from the published spreadsheet",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.repository = repository or Repository()
    app.state.load_on_startup = load_on_startup

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(clients_router)
    app.include_router(agencies_router)

    return app


app = create_app()
