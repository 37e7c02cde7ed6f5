# phatfit/api/routers/auth.py
import logging

from fastapi import APIRouter, Depends, status
from phatfit.api.deps import get_current_user, get_store, get_token_service
from phatfit.core.errors import AuthError
from phatfit.core.security import TokenService, hash_password, verify_password
from phatfit.models.user import User
from phatfit.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserOut,
    VerifyTokenResponse,
)
from phatfit.services.credential_store import UserStore

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["auth"])

def user_out(user: User) -> UserOut:
    """Public view of a user: everything except the password hash."""
    return UserOut(id=str(user.id), email=user.email, name=user.name, records=user.records or [])

@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    response_model_exclude_none=True,
)
async def register(
    body: RegisterRequest,
    store: UserStore = Depends(get_store),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Register a new user account.

    Hashes the password, creates the user with an empty record history and
    issues a token so the client is signed in straight away.

    Returns:
        AuthResponse: ``{"user": {...}, "token": "..."}`` with status 201

    Raises:
        ValidationError (400): Missing/empty fields, or DUPLICATE_EMAIL when the
            email is already registered (the existing user is left untouched)
    """
    user = await store.create_user(body.email, hash_password(body.password), body.name)
    logger.info("[auth] registered user id=%s", user.id)
    return AuthResponse(user=user_out(user), token=tokens.issue(str(user.id)))

@router.post("/login", response_model=AuthResponse, response_model_exclude_none=True)
async def login(
    body: LoginRequest,
    store: UserStore = Depends(get_store),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Authenticate user and issue a fresh token.

    An unknown email and a wrong password produce the same response, so the
    caller cannot probe which accounts exist.

    Raises:
        ValidationError (400): If email or password is missing
        AuthError (401): AUTH_INVALID_CREDENTIALS for bad credentials
    """
    user = await store.find_by_email(body.email)
    if not user or not verify_password(body.password, user.password_hash):
        logger.info("[auth] failed login attempt")
        raise AuthError("Invalid email or password", "AUTH_INVALID_CREDENTIALS")
    logger.info("[auth] user id=%s logged in", user.id)
    return AuthResponse(user=user_out(user), token=tokens.issue(str(user.id)))

@router.get("/verify-token", response_model=VerifyTokenResponse, response_model_exclude_none=True)
async def verify_token(user: User = Depends(get_current_user)):
    """
    Confirm that the presented token is still valid.

    Clients call this on start-up to rehydrate a stored session; it returns
    the public view of the token's own user.
    """
    return VerifyTokenResponse(user=user_out(user))
