# phatfit/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from phatfit.config import Settings, settings as default_settings
from phatfit.core.bootstrap import ensure_secure_secret
from phatfit.core.errors import register_exception_handlers
from phatfit.core.security import TokenService
from phatfit.services.credential_store import UserStore

from phatfit.api.routers import auth, records

logger = logging.getLogger("uvicorn.error")

def create_app(
    settings: Settings | None = None,
    store: UserStore | None = None,
    tokens: TokenService | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    The store handle and token service are created here (or injected, e.g. by
    tests) and attached to ``app.state``; request handlers reach them through
    the dependencies in ``phatfit.api.deps``. The store is opened on startup and
    closed on shutdown by the lifespan handler.
    """
    settings = settings or default_settings
    ensure_secure_secret(settings)
    store = store or UserStore(settings.database_url, generate_schemas=settings.generate_schemas)
    tokens = tokens or TokenService(settings.jwt_secret, settings.access_token_expire_minutes)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await app.state.store.open()
        logger.info("[startup] %s ready (env=%s, token expiry=%s)",
                    settings.APP_NAME, settings.env,
                    f"{tokens.expire_minutes} min" if tokens.expire_minutes else "none")
        yield
        await app.state.store.close()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.tokens = tokens

    # CORS (bearer tokens only, no cookies)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # REST
    app.include_router(auth.router, prefix="/api")
    app.include_router(records.router, prefix="/api")

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app

app = create_app()
