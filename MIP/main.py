from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Core imports
from packages.mip_core.config import MIPConfig
from packages.mip_core.errors import MIPBaseError
from packages.mip_core.logging import get_logger, setup_logging
from packages.mip_auth.repository import MemoryUserRepository
from packages.mip_service.concurrency import ConcurrencyManager

# API Routers
from MIP.api.auth import router as auth_router
from MIP.api.dependencies import build_session_store
from MIP.api.error_handler import mip_exception_handler
from MIP.api.health import router as health_router
from MIP.api.interviews import router as interviews_router

logger = get_logger("MIP.main")


def create_app(config: MIPConfig | None = None) -> FastAPI:
    config = config or MIPConfig.load()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        setup_logging(config.LOG_DIR)
        logger.info(f"Starting {config.PROJECT_NAME} v{config.VERSION} (session store: {config.SESSION_STORE_BACKEND})...")

        yield

        # Shutdown
        logger.info("Server shutting down...")

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None
    )

    # Per-app state read by MIP.api.dependencies
    app.state.config = config
    app.state.session_store = build_session_store(config)
    app.state.user_repository = MemoryUserRepository()
    app.state.concurrency_manager = ConcurrencyManager()

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.CLIENT_ORIGIN],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MIPBaseError, mip_exception_handler)

    # Routers
    app.include_router(health_router, prefix="", tags=["Status"])
    app.include_router(auth_router, prefix="/api")
    app.include_router(interviews_router, prefix="/api")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("MIP.main:app", host="0.0.0.0", port=8000, reload=True)
