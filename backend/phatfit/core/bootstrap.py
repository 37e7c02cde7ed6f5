# phatfit/core/bootstrap.py
"""
Bootstrap module for application initialization.
Handles startup checks that must pass before the API accepts requests.
"""
import logging

from phatfit.config import DEFAULT_JWT_SECRET, Settings

logger = logging.getLogger("uvicorn.error")

PRODUCTION_ENVS = {"prod", "production"}

def ensure_secure_secret(settings: Settings) -> None:
    """
    Refuse to run in production with the built-in development token secret.

    Anyone who knows the default secret can mint a token for any user id, so:
      - ENV=prod/production and JWT_SECRET unset (or left at the default) -> RuntimeError
      - any other environment -> warning only, to keep local development easy
    """
    insecure = not settings.jwt_secret or settings.jwt_secret == DEFAULT_JWT_SECRET
    if not insecure:
        return
    if settings.env.lower() in PRODUCTION_ENVS:
        raise RuntimeError("JWT_SECRET must be set to a non-default value when ENV=prod")
    logger.warning("[bootstrap] Using the default JWT_SECRET (env=%s); set JWT_SECRET before deploying.", settings.env)
