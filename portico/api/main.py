"""
Portico API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           PORTICO API                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                    Middleware Stack                          │          │
│   │  ┌─────────────────────────────────────────────────────┐    │          │
│   │  │ CORS Middleware                                      │    │          │
│   │  │ Request Log Context                                  │    │          │
│   │  │ Error Handler                                        │    │          │
│   │  └─────────────────────────────────────────────────────┘    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                       Routers                                │          │
│   │  ┌────────┐ ┌──────────┐ ┌──────────┐ ┌─────────────┐ ┌─────────┐    │
│   │  │ Health │ │ Clusters │ │ Contacts │ │ Connections │ │ Network │    │
│   │  └────────┘ └──────────┘ └──────────┘ └─────────────┘ └─────────┘    │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                Dependencies (Injected)                       │          │
│   │  ┌──────────────┐ ┌──────────┐                              │          │
│   │  │ NetworkStore │ │ Services │                              │          │
│   │  └──────────────┘ └──────────┘                              │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. create_application() builds the NetworkStore (seeded per settings)
   and attaches it to app.state.store
2. Application starts → lifespan startup (logging only)
3. Application serves requests
4. Application stops → lifespan shutdown
5. Store contents are dropped (nothing is persisted)

Usage:
======
    # Run with uvicorn
    uvicorn portico.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically (tests pass their own store)
    from portico.api.main import create_application
    app = create_application(store=NetworkStore(seed_defaults=False))
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from portico.config.settings import settings
from portico.shared.db import close_store, init_store
from portico.shared.db.store import NetworkStore
from portico.shared.core.logging import clear_log_context, log_context, logger
from portico.api.middleware import setup_exception_handlers
from portico.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Log the store that was attached by create_application()

    Shutdown:
    - Drop store contents
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Portico API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        clusters=app.state.store.clusters.count(),
    )

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Portico API")

    close_store(app.state.store)

    logger.info("Portico API shutdown complete")


def create_application(store: Optional[NetworkStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Store to serve; a fresh one from init_store() when omitted

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Attaches the NetworkStore
    3. Adds middleware (CORS)
    4. Sets up exception handlers
    5. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Contact network manager: clusters, contacts and their graph",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        # Use lifespan for startup/shutdown
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # STATE
    # ═══════════════════════════════════════════════════════════════════════════

    app.state.store = store if store is not None else init_store()

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    # CORS Middleware - Must be added first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        clear_log_context()
        log_context(request_method=request.method, request_path=request.url.path)
        response = await call_next(request)
        logger.debug("Request handled", status_code=response.status_code)
        return response

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
