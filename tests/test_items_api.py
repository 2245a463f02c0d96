from fastapi.testclient import TestClient

from inventory.core.config import Settings
from inventory.main import create_app
from inventory.services.demo_data import CATEGORIES, COLORS, DEMO_ITEMS
from inventory.services.item_store import DocumentItemStore

IMAGE = "data:image/jpeg;base64,/9j/4AAQSkZJRg"


def _create(client: TestClient, name: str, **fields) -> dict:
    response = client.post("/api/items/", json={"name": name, "image": IMAGE, **fields})
    assert response.status_code == 201, response.text
    return response.json()


def test_health_check(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_item_returns_stamped_record(client: TestClient) -> None:
    data = _create(client, "Wireless Headphones", brand="TechBrand", pricePerPiece=99.99)

    assert data["id"]
    assert data["createdAt"]
    assert data["name"] == "Wireless Headphones"
    assert data["brand"] == "TechBrand"
    assert data["pricePerPiece"] == 99.99
    assert data["pricePerWeight"] == 0

    fetched = client.get(f"/api/items/{data['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == data


def test_create_item_without_image_names_the_field(client: TestClient) -> None:
    response = client.post("/api/items/", json={"name": "Mug"})

    assert response.status_code == 422
    assert response.json()["detail"] == {"field": "image", "reason": "is required"}
    assert client.get("/api/items/").json() == []


def test_list_items_applies_search_filters_and_sort(client: TestClient) -> None:
    _create(client, "Red Mug", category="Home", pricePerPiece=5)
    _create(client, "Blue Mug", category="Home", pricePerPiece=15)
    _create(client, "Red Shirt", category="Clothing", pricePerPiece=20)

    response = client.get(
        "/api/items/",
        params={"q": "mug", "category": "Home", "sort": "pricePerPiece", "direction": "descending"},
    )

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Blue Mug", "Red Mug"]


def test_list_items_ignores_blank_filters(client: TestClient) -> None:
    _create(client, "Red Mug", category="Home", pricePerPiece=5)
    _create(client, "Red Shirt", category="Clothing", pricePerPiece=20)

    response = client.get(
        "/api/items/",
        params={"q": "", "category": "", "brand": "", "min_price": "", "max_price": "10"},
    )

    assert [item["name"] for item in response.json()] == ["Red Mug"]


def test_update_item_merges_fields(client: TestClient) -> None:
    created = _create(client, "Red Mug", brand="Acme", pricePerPiece=5)

    response = client.patch(f"/api/items/{created['id']}", json={"pricePerPiece": 6.5, "id": "other"})

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == created["id"]
    assert data["createdAt"] == created["createdAt"]
    assert data["brand"] == "Acme"
    assert data["pricePerPiece"] == 6.5


def test_update_missing_item_returns_404(client: TestClient) -> None:
    response = client.patch("/api/items/does-not-exist", json={"name": "x"})

    assert response.status_code == 404


def test_delete_item_twice_returns_404_second_time(client: TestClient) -> None:
    created = _create(client, "Red Mug")

    first = client.delete(f"/api/items/{created['id']}")
    second = client.delete(f"/api/items/{created['id']}")

    assert first.status_code == 204
    assert second.status_code == 404
    assert client.get(f"/api/items/{created['id']}").status_code == 404


def test_stats_and_clear(client: TestClient) -> None:
    _create(client, "Red Mug")
    _create(client, "Blue Mug")

    stats = client.get("/api/items/stats").json()
    assert stats["totalItems"] == 2
    assert stats["storageSize"].endswith(" KB")

    assert client.delete("/api/items/").status_code == 204
    assert client.get("/api/items/").json() == []
    assert client.get("/api/items/stats").json()["totalItems"] == 0


def test_options_lists_categories_and_colors(client: TestClient) -> None:
    response = client.get("/api/items/options")

    assert response.status_code == 200
    assert response.json() == {"categories": CATEGORIES, "colors": COLORS}


def test_demo_items_seeded_on_startup_when_enabled(settings: Settings) -> None:
    seeded_settings = settings.model_copy(update={"seed_demo_data": True})

    with TestClient(create_app(seeded_settings)) as client:
        names = [item["name"] for item in client.get("/api/items/", params={"sort": "name"}).json()]

    assert names == sorted(draft.name for draft in DEMO_ITEMS)

    # a second start over the same database keeps the existing catalog
    with TestClient(create_app(seeded_settings)) as client:
        assert len(client.get("/api/items/").json()) == len(DEMO_ITEMS)


def test_file_backend_serves_the_same_api(settings: Settings) -> None:
    file_settings = settings.model_copy(update={"storage_backend": "file"})

    with TestClient(create_app(file_settings)) as client:
        created = _create(client, "Red Mug")
        assert client.get("/api/items/").json() == [created]


def test_shutdown_closes_item_store(settings: Settings, monkeypatch) -> None:
    closed: list[str] = []
    monkeypatch.setattr(DocumentItemStore, "close", lambda self: closed.append(self._record_name))

    with TestClient(create_app(settings)) as client:
        _create(client, "Red Mug")
        assert closed == []

    assert closed == [settings.store_record_name]
