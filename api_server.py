from __future__ import annotations  # FastAPI server exposing the practice session engine

import logging
import os
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import reset_workspaces, router
from config import default_config, load_config


logger = logging.getLogger(__name__)

CONFIG_PATH = Path(os.getenv("PRACTICE_CONFIG", Path(__file__).resolve().parent / "app_config.json"))


def _load_app_config():
    if CONFIG_PATH.exists():
        logger.info("Loading route configuration from %s", CONFIG_PATH)
        return load_config(CONFIG_PATH)
    return default_config()


app = FastAPI(title="Practice Session API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"]
)
app.include_router(router)
reset_workspaces(config=_load_app_config())


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
