from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _split_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


@dataclass(frozen=True)
class AppConfig:
    port: int = 5000
    host: str = "0.0.0.0"
    mongo_uri: str = "mongodb://localhost:27017"
    db_name: str = "foodLoversDB"
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = field(default=("*",))
    server_selection_timeout_ms: int = 5000


def load_config() -> AppConfig:
    """Build an ``AppConfig`` from the current process environment."""
    return AppConfig(
        port=int(os.getenv("PORT", "5000")),
        host=os.getenv("HOST", "0.0.0.0"),
        mongo_uri=os.getenv("MONGO_URI", "mongodb://localhost:27017"),
        db_name=os.getenv("DB_NAME", "foodLoversDB"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
        server_selection_timeout_ms=int(os.getenv("MONGO_TIMEOUT_MS", "5000")),
    )


DEFAULT_CONFIG = load_config()
