"""
Application errors.

Every failure a request can hit is raised as one of these and converted to an
HTTP response by the handlers registered in ``register_exception_handlers``.

Hierarchy:
    PhatFitError (500)
       ├── ValidationError (400)   ← missing/duplicate input
       ├── AuthError (401)         ← missing/invalid token, unknown user, bad credentials
       ├── NotFoundError (404)     ← unknown resource
       └── StoreError (500/400)    ← backing-store failure (400 when writing)

Response body:
    {"error": {"code": "AUTH_REQUIRED", "message": "Please authenticate."}}
"""
import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("uvicorn.error")


class PhatFitError(Exception):
    """
    Base class for application errors.

    Attributes:
        message: Short human-readable message (safe to return to clients)
        status_code: HTTP status code
        error_code: Machine-readable error code
    """

    status_code = 500
    error_code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.message = message
        if error_code:
            self.error_code = error_code
        if status_code:
            self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.error_code, "message": self.message}}


class ValidationError(PhatFitError):
    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Validation failed", error_code: Optional[str] = None) -> None:
        super().__init__(message, error_code)


class DuplicateEmailError(ValidationError):
    """Raised when registering an email that already belongs to a user."""

    def __init__(self) -> None:
        super().__init__("Email already registered", "DUPLICATE_EMAIL")


class AuthError(PhatFitError):
    status_code = 401
    error_code = "AUTH_REQUIRED"

    def __init__(self, message: str = "Please authenticate.", error_code: Optional[str] = None) -> None:
        super().__init__(message, error_code)


class NotFoundError(PhatFitError):
    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str = "Resource") -> None:
        super().__init__(f"{resource} not found")


class StoreError(PhatFitError):
    """
    Backing-store failure.

    Reads surface as 500; writes surface as 400 because the rejected payload
    is the most likely cause from the client's point of view.
    """

    error_code = "STORE_ERROR"

    def __init__(self, message: str = "Storage operation failed", *, on_write: bool = False) -> None:
        super().__init__(message, status_code=400 if on_write else 500)
        self.on_write = on_write


def _field_path(loc: tuple) -> str:
    # Drop the "body" prefix; a location with no field name (e.g. unparseable JSON) yields ""
    parts = loc[1:]
    if not any(isinstance(p, str) for p in parts):
        return ""
    return ".".join(str(p) for p in parts)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register handlers that normalise every error into the JSON error body.

    Internal details (driver exceptions, tracebacks) are logged, never returned.
    """

    @app.exception_handler(PhatFitError)
    async def phatfit_error_handler(request: Request, exc: PhatFitError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("[error] %s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.error_code)
        else:
            logger.info("[error] %s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.error_code)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # FastAPI answers 422 by default; the API contract uses 400 for bad input
        fields = sorted({_field_path(err.get("loc", ())) for err in exc.errors()} - {""})
        message = "Invalid or missing fields: " + ", ".join(fields) if fields else "Invalid request body"
        return JSONResponse(status_code=400, content=ValidationError(message).to_dict())

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("[error] unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content=PhatFitError().to_dict())
