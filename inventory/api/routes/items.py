from fastapi import APIRouter, Depends, HTTPException, Query, status

from inventory.api.deps import get_catalog_service
from inventory.schemas.item import CatalogOptions, Item, ItemDraft, ItemUpdate, PredicateSet, SortDirection, StorageStats
from inventory.services.catalog import CatalogService
from inventory.services.demo_data import CATEGORIES, COLORS
from inventory.services.errors import NotFound, StorageUnavailable, ValidationError

router = APIRouter(prefix="/items", tags=["items"])


def _storage_error(exc: StorageUnavailable) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=f"Storage unavailable: {exc.reason}")


def _validation_error(exc: ValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail={"field": exc.field, "reason": exc.reason})


@router.get("/", response_model=list[Item])
def list_items(
    q: str | None = None,
    category: str | None = None,
    color: str | None = None,
    brand: str | None = None,
    min_price: str | None = None,
    max_price: str | None = None,
    sort: str | None = Query(default=None, description="Field to order by, e.g. pricePerPiece"),
    direction: str = Query(default=SortDirection.ASCENDING.value),
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[Item]:
    """Return items matching the search text and filters in the requested order."""

    predicates = PredicateSet(
        category=category,
        color=color,
        brand=brand,
        min_price=min_price,
        max_price=max_price,
    )
    return catalog.query(q, predicates, sort, direction)


@router.post("/", response_model=Item, status_code=status.HTTP_201_CREATED)
def create_item(draft: ItemDraft, catalog: CatalogService = Depends(get_catalog_service)) -> Item:
    """Capture a new item; name and image are required."""

    try:
        return catalog.add(draft)
    except ValidationError as exc:
        raise _validation_error(exc) from exc
    except StorageUnavailable as exc:
        raise _storage_error(exc) from exc


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
def clear_items(catalog: CatalogService = Depends(get_catalog_service)) -> None:
    """Remove every item from the catalog."""

    try:
        catalog.clear()
    except StorageUnavailable as exc:
        raise _storage_error(exc) from exc


@router.get("/stats", response_model=StorageStats)
def storage_stats(catalog: CatalogService = Depends(get_catalog_service)) -> StorageStats:
    return catalog.stats()


@router.get("/options", response_model=CatalogOptions)
def catalog_options() -> CatalogOptions:
    """Suggested categories and colors for item forms."""

    return CatalogOptions(categories=CATEGORIES, colors=COLORS)


@router.get("/{item_id}", response_model=Item)
def get_item(item_id: str, catalog: CatalogService = Depends(get_catalog_service)) -> Item:
    """Retrieve a single item by identifier."""

    try:
        return catalog.get(item_id)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found") from exc


@router.patch("/{item_id}", response_model=Item)
def update_item(item_id: str, patch: ItemUpdate, catalog: CatalogService = Depends(get_catalog_service)) -> Item:
    """Merge the supplied fields over an existing item."""

    try:
        return catalog.update(item_id, patch)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found") from exc
    except ValidationError as exc:
        raise _validation_error(exc) from exc
    except StorageUnavailable as exc:
        raise _storage_error(exc) from exc


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(item_id: str, catalog: CatalogService = Depends(get_catalog_service)) -> None:
    """Delete an item if it exists."""

    try:
        catalog.remove(item_id)
    except NotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found") from exc
    except StorageUnavailable as exc:
        raise _storage_error(exc) from exc
