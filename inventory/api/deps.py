from pathlib import Path

from fastapi import Request

from inventory.core.config import Settings
from inventory.db.session import build_engine, build_session_factory
from inventory.services.catalog import CatalogService
from inventory.services.item_store import DocumentItemStore, ItemStore, JsonFileItemStore


def build_item_store(settings: Settings) -> ItemStore:
    """Construct the configured store backend."""

    if settings.storage_backend == "file":
        return JsonFileItemStore(Path(settings.storage_file))

    engine = build_engine(settings.database_url)
    return DocumentItemStore(build_session_factory(engine), record_name=settings.store_record_name)


def get_catalog_service(request: Request) -> CatalogService:
    """Return the catalog service created at application startup."""

    return request.app.state.catalog
