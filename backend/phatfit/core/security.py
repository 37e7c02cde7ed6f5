# phatfit/core/security.py
"""
Security module for authentication.
Handles password hashing and issuing/verifying the bearer tokens that carry a user's identity.
"""
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext

from phatfit.core.errors import AuthError

# Password hashing context
# Argon2 is a modern, salted, memory-hard password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (salt included, safe to store in database)
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Returns False (instead of raising) when the stored hash is not recognised,
    so a corrupt row looks like any other wrong password to the caller.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


class TokenService:
    """
    Issues and verifies signed bearer tokens.

    Tokens are HS256 JWTs whose ``sub`` claim is the user id. With
    ``expire_minutes=None`` no ``exp`` claim is written, so a token stays valid
    for as long as the secret is unchanged; there is no revocation list.

    The service is stateless: verifying a token never touches the database and
    does not check that the user still exists (the auth gate does that).
    """

    def __init__(self, secret: str, expire_minutes: int | None = None):
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self.expire_minutes = expire_minutes

    def issue(self, user_id: str) -> str:
        """
        Create a token asserting ``user_id`` as subject.

        Token payload includes:
            - sub: Subject (user ID)
            - iat: Issued at timestamp
            - exp: Expiration timestamp (only when an expiry policy is configured)
        """
        now = dt.datetime.now(dt.timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
        }
        if self.expire_minutes:
            payload["exp"] = now + dt.timedelta(minutes=self.expire_minutes)
        return jwt.encode(payload, self._secret, algorithm=JWT_ALG)

    def verify(self, token: str) -> str:
        """
        Validate a token and return its subject user id.

        Raises:
            AuthError: If the token is malformed, signed with another secret,
                expired, or carries no subject
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[JWT_ALG])
        except jwt.InvalidTokenError as exc:
            raise AuthError() from exc
        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise AuthError()
        return user_id
