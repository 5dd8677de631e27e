# messenger/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _split_origins(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Oleg Messenger API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # All REST routes are mounted under this prefix (the web client calls /api/...)
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # CORS origins for frontend, "*" unless narrowed through the environment
    CORS_ORIGINS: list[str] = _split_origins(os.getenv("CORS_ORIGINS", "*"))

    # Secret key for signing access tokens (use a strong secret in production)
    jwt_secret: str = os.getenv("JWT_SECRET", "oleg-messenger-secret-key")

    # Simulated contact replies land after a random delay in [min, max) milliseconds
    reply_delay_min_ms: int = int(os.getenv("REPLY_DELAY_MIN_MS", "1000"))
    reply_delay_max_ms: int = int(os.getenv("REPLY_DELAY_MAX_MS", "3000"))

settings = Settings()  # Instantiate configuration
