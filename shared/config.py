import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: Optional[str] = None) -> str:
    val = os.getenv(name, default)
    if val is None or val.strip() == "":
        raise RuntimeError(f"Missing required environment variable: {name}")
    return val.strip()


def _parse_origins(raw: str) -> list[str]:
    raw = (raw or "").strip()
    if not raw or raw == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./feedback.db"
    bcrypt_rounds: int = 10
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"


def load_settings() -> Settings:
    rounds = int(_get_env("BCRYPT_ROUNDS", "10"))
    if not 4 <= rounds <= 31:
        # bcrypt.gensalt refuses anything outside this range
        raise RuntimeError("BCRYPT_ROUNDS must be between 4 and 31")

    return Settings(
        database_url=_get_env("DATABASE_URL", "sqlite:///./feedback.db"),
        bcrypt_rounds=rounds,
        cors_origins=tuple(_parse_origins(os.getenv("CORS_ORIGINS", "*"))),
        log_level=_get_env("LOG_LEVEL", "INFO").upper(),
    )
