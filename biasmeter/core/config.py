"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
from typing import List

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


def _origins() -> List[str]:
    raw = os.getenv("BIASMETER_CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    app_name: str = "BiasMeter AI API"
    service_name: str = "BiasMeter AI API"
    version: str = "1.0.0"
    cors_allow_origins: List[str] = field(default_factory=_origins)
    session_secret: str = os.getenv("BIASMETER_SESSION_SECRET", "biasmeter-dev-secret")
    session_max_age: int = int(os.getenv("BIASMETER_SESSION_MAX_AGE", "1800"))
    static_dir: str = os.getenv("BIASMETER_STATIC_DIR", str(STATIC_DIR))
    log_level: str = os.getenv("BIASMETER_LOG_LEVEL", "INFO")


settings = Settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
