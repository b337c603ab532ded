"""
Pho Huong Viet Order API — Configuration
All settings are read from environment variables (or .env file) once at startup.
"""
from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    # ── Service ──────────────────────────────────────────────
    SERVICE_NAME: str = "pho-order-api"
    SERVICE_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"

    # ── CORS ──────────────────────────────────────────────────
    ALLOWED_ORIGIN: str = "*"

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGIN.split(",") if o.strip()] or ["*"]

    # ── Order notification webhook ────────────────────────────
    WEBHOOK_URL: str = ""
    WEBHOOK_SECRET: str = ""
    WEBHOOK_TIMEOUT_SECONDS: float = 8.0

    # ── Static site ───────────────────────────────────────────
    PUBLIC_DIR: Path = PROJECT_ROOT / "public"
    RESTAURANT_API_URL: str = ""

    @property
    def api_base_url(self) -> str:
        return f"{self.RESTAURANT_API_URL.rstrip('/')}/api"

    # ── Observability ─────────────────────────────────────────
    METRICS_ENABLED: bool = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()
