from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from api.intake import router as intake_router, set_risk_scorer
from infrastructure.config import get_scoring_url
from infrastructure.intake.providers.factory import create_risk_scorer

# Load .env (default environment variables)
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Reported by /version; set per deployment
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:  # pragma: no cover
    """Application lifecycle manager.

    Creates the risk scorer from the environment, enters its async context
    for the life of the server and hands it to the intake router.
    """
    logger = _logging.getLogger("startup")

    scorer = create_risk_scorer()
    logger.info(
        "lifespan.startup",
        extra={
            "scorer": type(scorer).__name__,
            "scoring_url": get_scoring_url(),
        },
    )

    async with scorer as initialized_scorer:  # type: ignore[attr-defined]
        set_risk_scorer(initialized_scorer)
        logger.info("lifespan.ready", extra={"status": "serving"})
        yield
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        set_risk_scorer(None)


app = FastAPI(
    title="PCOS Risk Intake",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


app.include_router(intake_router)
