import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from gateway.config import Settings, settings as default_settings
from gateway.database.supabase_client import ClientFactory, create_request_client
from gateway.modules.auth import routes as auth_routes
from gateway.modules.profiles import routes as profiles_routes
from gateway.modules.admin import routes as admin_routes
from gateway.modules.categories import routes as categories_routes
from gateway.modules.materials import routes as materials_routes
from gateway.modules.storage import routes as storage_routes
from gateway.modules.bans import routes as bans_routes
from gateway.modules.visits import routes as visits_routes

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


def create_app(
    settings: Settings = default_settings,
    client_factory: ClientFactory = create_request_client,
) -> FastAPI:
    """
    Build the HTTP bridge page scripts talk to.

    No Supabase session lives on the server: every request builds its own
    gateway from ``client_factory`` and the caller's bearer token.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup")
        if not settings.is_configured:
            logger.warning("Supabase is not configured; every operation will report it")
        yield
        logger.info("Application shutdown")

    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.client_factory = client_factory
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        if settings.is_production:
            return JSONResponse(status_code=500, content={"detail": "Internal server error"})
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for module_routes in (
        auth_routes,
        profiles_routes,
        admin_routes,
        categories_routes,
        materials_routes,
        storage_routes,
        bans_routes,
        visits_routes,
    ):
        app.include_router(module_routes.router, prefix="/api/v1")

    @app.get("/health")
    @limiter.exempt
    async def health():
        return {"status": "healthy"}

    @app.get("/ready")
    @limiter.exempt
    async def ready():
        """Reports whether the Supabase URL and key are set."""
        return {"status": "ready", "supabase_configured": settings.is_configured}

    return app


app = create_app()
