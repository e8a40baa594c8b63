"""Environment-driven settings for Genre Generator."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parents[1]

# Load .env from project root
load_dotenv(BASE_DIR / ".env")

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_PORT = 3000
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None
    openai_model: str
    openai_timeout: float
    cors_origins: tuple[str, ...]
    static_dir: Path
    host: str
    port: int
    log_level: str


def _split_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


def load_settings() -> Settings:
    """Read settings from the process environment."""

    static_dir = Path(os.getenv("STATIC_DIR", "public"))
    if not static_dir.is_absolute():
        static_dir = BASE_DIR / static_dir

    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
        openai_timeout=float(os.getenv("OPENAI_TIMEOUT", "30")),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
        static_dir=static_dir,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
