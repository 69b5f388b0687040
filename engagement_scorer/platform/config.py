from pydantic_settings import BaseSettings
from typing import List, Optional

from ..components.scoring.rules import MAX_MESSAGE_CHARS


class Settings(BaseSettings):
    # Deployment environment ("production" redacts error details)
    DEPLOYMENT_ENV: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # "json" or "text"

    # Scoring
    MAX_MESSAGE_CHARS: int = MAX_MESSAGE_CHARS
    # Run the four dimension analyzers on a thread pool instead of in sequence.
    SCORING_PARALLEL_DIMENSIONS: bool = False

    # CORS: comma-separated origins
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:3001"
    # Optional regex for additional allowed CORS origins
    CORS_ALLOW_ORIGIN_REGEX: Optional[str] = None

    # Sentry
    SENTRY_DSN: Optional[str] = None

    @property
    def is_production(self) -> bool:
        return (self.DEPLOYMENT_ENV or "").strip().lower() == "production"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in (self.CORS_ORIGINS or "").split(",") if o.strip()]

    model_config = {
        "env_file": ".env",
        "extra": "ignore",
    }


settings = Settings()
