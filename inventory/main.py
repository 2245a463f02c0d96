import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from inventory.api.deps import build_item_store
from inventory.api.router import api_router
from inventory.core.config import Settings, get_settings
from inventory.core.logging_config import configure_logging
from inventory.services.catalog import CatalogService
from inventory.services.errors import StorageUnavailable

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    store = build_item_store(settings)
    catalog = CatalogService(store)
    try:
        store.initialize()
        if settings.seed_demo_data:
            catalog.seed_demo_items()
    except StorageUnavailable as exc:
        # Reads degrade to an empty catalog; writes will report the failure
        logger.warning("Item store not ready: %s", exc)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        store.close()
        logger.info("Item store closed")

    application = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
    application.state.catalog = catalog
    application.include_router(api_router, prefix="/api")

    @application.get("/health", tags=["health"])
    def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return application
