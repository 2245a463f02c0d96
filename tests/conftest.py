from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from inventory.core.config import Settings
from inventory.db.session import build_engine, build_session_factory
from inventory.main import create_app
from inventory.services.item_store import DocumentItemStore, JsonFileItemStore


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'inventory.db'}",
        storage_file=str(tmp_path / "storage" / "inventory_products.json"),
    )


@pytest.fixture
def document_store(settings: Settings) -> DocumentItemStore:
    engine = build_engine(settings.database_url)
    store = DocumentItemStore(build_session_factory(engine))
    store.initialize()
    yield store
    store.close()


@pytest.fixture
def file_store(settings: Settings) -> JsonFileItemStore:
    store = JsonFileItemStore(Path(settings.storage_file))
    store.initialize()
    return store


@pytest.fixture
def client(settings: Settings) -> TestClient:
    with TestClient(create_app(settings)) as test_client:
        yield test_client
