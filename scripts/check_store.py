"""Utility script to report on the configured item store."""

from inventory.api.deps import build_item_store
from inventory.core.config import get_settings
from inventory.services.catalog import CatalogService


def main() -> None:
    """Load the catalog once and print its size."""

    settings = get_settings()
    store = build_item_store(settings)
    store.initialize()
    store.load_all()
    stats = CatalogService(store).stats()
    print(f"Item store ({settings.storage_backend}) readable: {stats.total_items} items, {stats.storage_size}.")


if __name__ == "__main__":
    main()
