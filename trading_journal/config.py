"""Application configuration via environment variables."""

from pathlib import Path
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    database_url: str = "sqlite://"  # private in-memory DB; a restart discards everything
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Webhook
    webhook_secret: str = ""  # empty: any non-empty auth_token is accepted
    enable_test_webhook: bool = True

    # Dashboard
    static_dir: Path = PROJECT_ROOT / "public"

    model_config = {"env_prefix": "TJ_", "env_file": ".env"}


settings = Settings()
