# phatfit/api/deps.py
import logging

from fastapi import Depends, Header, Request
from phatfit.core.errors import AuthError
from phatfit.core.security import TokenService
from phatfit.models.user import User
from phatfit.services.credential_store import UserStore

logger = logging.getLogger("uvicorn.error")

def get_store(request: Request) -> UserStore:
    """FastAPI dependency returning the store handle created by ``create_app``."""
    return request.app.state.store

def get_token_service(request: Request) -> TokenService:
    """FastAPI dependency returning the token service created by ``create_app``."""
    return request.app.state.tokens

def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None

async def get_current_user(
    authorization: str | None = Header(default=None),
    store: UserStore = Depends(get_store),
    tokens: TokenService = Depends(get_token_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user.

    Resolves ``Authorization: Bearer <token>`` to a loaded user:
    1. Extract the bearer token from the header
    2. Verify the token signature and read its subject
    3. Load the subject user from the store

    Raises:
        AuthError (401): For a missing/malformed header, an invalid token, or a
            token whose user no longer exists. All three produce the same
            response so callers cannot tell which check failed.
        StoreError (500): If the store itself fails during the lookup

    Usage:
        @router.get("/protected")
        async def protected_route(user: User = Depends(get_current_user)):
            return {"user_id": str(user.id)}
    """
    token = _bearer_token(authorization)
    if not token:
        logger.info("[auth] rejected request: missing or malformed Authorization header")
        raise AuthError()

    try:
        user_id = tokens.verify(token)
    except AuthError:
        logger.info("[auth] rejected request: invalid token")
        raise

    user = await store.find_by_id(user_id)
    if not user:
        logger.info("[auth] rejected request: token subject %s not found", user_id)
        raise AuthError()
    return user
