from __future__ import annotations

import logging
import os
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router

logger = logging.getLogger(__name__)


def _cors_origins() -> List[str]:
    # Comma separated; "*" when unset.
    raw = (os.environ.get("ROOKIE_DRAFT_CORS_ORIGINS") or "*").strip()
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def create_app() -> FastAPI:
    application = FastAPI(title="Rookie Draft Lottery")

    origins = _cors_origins()
    application.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(api_router)

    logger.info("create_app: cors_origins=%s", origins)
    return application


app = create_app()
