from contextlib import asynccontextmanager
from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from errorstore.api.exception_handlers import register_exception_handlers
from errorstore.api.v1.router import api_router
from errorstore.core.config import settings
from errorstore.core.logging import configure_logging
from errorstore.services.registry import ErrorRegistry, build_registry


@asynccontextmanager
async def standalone_lifespan(app: FastAPI):
    """Logging setup for the module-level app only; hosts keep their own."""
    configure_logging(settings.log_level)
    yield


def create_app(registry: ErrorRegistry | None = None, lifespan=None) -> FastAPI:
    """Build a FastAPI app serving ``registry`` (a baseline-only one by default)."""
    app = FastAPI(lifespan=lifespan)
    app.state.error_registry = registry if registry is not None else build_registry()

    if settings.frontend_url:
        parsed = urlparse(settings.frontend_url)
        origin = f"{parsed.scheme}://{parsed.netloc}"
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[origin],
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app(lifespan=standalone_lifespan)
