import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from core.errors import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# .env next to the project, then whatever the process already has
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_PORT = 3000
SERVICE_NAME = "ai-prompt-creator"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    gemini_api_key: str
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    generation_model: str = DEFAULT_MODEL
    rate_limit_points: int = 10  # requests per window per client
    rate_limit_duration: int = 1  # window length in seconds
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    app_env: str = "development"
    static_dir: Path = PROJECT_ROOT / "static"

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


def get_settings() -> Settings:
    """Read settings from the environment.

    Raises ConfigError when the Gemini credential is missing or a numeric
    variable cannot be parsed; the server refuses to start in that case.
    """
    api_key = os.getenv("GEMINI_API_KEY", "").strip()
    if not api_key:
        raise ConfigError("GEMINI_API_KEY is not set")

    try:
        port = int(os.getenv("PORT", DEFAULT_PORT))
        points = int(os.getenv("RATE_LIMIT_POINTS", 10))
        duration = int(os.getenv("RATE_LIMIT_DURATION", 1))
    except ValueError as e:
        raise ConfigError(f"Invalid numeric setting: {e}") from e

    return Settings(
        gemini_api_key=api_key,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        generation_model=os.getenv("GENERATION_MODEL", DEFAULT_MODEL),
        rate_limit_points=points,
        rate_limit_duration=duration,
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")) or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_dir=os.getenv("LOG_DIR") or None,
        app_env=os.getenv("APP_ENV", "development"),
        static_dir=Path(os.getenv("STATIC_DIR", str(PROJECT_ROOT / "static"))),
    )
