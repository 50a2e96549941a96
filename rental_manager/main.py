import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from rental_manager.core.bootstrap import bootstrap
from rental_manager.core.config import settings
from rental_manager.core.database import close_db
from rental_manager.core.errors import register_exception_handlers
from rental_manager.routers import admin, auth, dashboard, expenses, health, invoices, properties, tenants

logging.basicConfig(
    level=getattr(logging, settings.api_log_level.upper()),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ─── Security headers middleware ───────────────────────────────────────────────
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        if settings.environment == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    await bootstrap()
    logger.info("Rental Manager API listening on %s:%s", settings.api_host, settings.api_port)
    yield
    await close_db()


app = FastAPI(
    title="Rental Manager API",
    version="1.0.0",
    docs_url="/docs" if settings.environment == "development" else None,
    redoc_url=None,
    lifespan=lifespan,
)
register_exception_handlers(app)
app.add_middleware(SecurityHeadersMiddleware)

# ─── CORS ──────────────────────────────────────
# One allowed origin: the landlord dashboard front end.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origin],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept", "Origin"],
)

# ─── Routers ──────────────────────────────────
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(admin.router)
app.include_router(properties.router)
app.include_router(tenants.router)
app.include_router(invoices.router)
app.include_router(expenses.router)
app.include_router(dashboard.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rental_manager.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.api_log_level,
    )
