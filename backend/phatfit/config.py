# phatfit/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

DEFAULT_JWT_SECRET = "dev-secret"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


def _env_minutes(name: str) -> int | None:
    # Unset, empty or non-positive means tokens never expire
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        minutes = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be a whole number of minutes, got {raw!r}") from None
    return minutes if minutes > 0 else None


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Phat & Fit API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # CORS origins for frontend ("*" allows any origin)
    CORS_ORIGINS: list[str] = _env_list("CORS_ORIGINS", "*")

    # Database (Tortoise ORM connection URL)
    database_url: str = os.getenv("DATABASE_URL", "sqlite://phatfit.sqlite3")
    # Create missing tables on startup; use Aerich migrations instead when disabled
    generate_schemas: bool = _env_flag("DB_GENERATE_SCHEMAS", "true")

    # Token settings
    # ⚠️ The default secret is for local development only, startup refuses it when ENV=prod
    jwt_secret: str = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)
    # None keeps issued tokens valid indefinitely
    access_token_expire_minutes: int | None = _env_minutes("ACCESS_TOKEN_EXPIRE_MINUTES")

settings = Settings()  # Instantiate configuration
