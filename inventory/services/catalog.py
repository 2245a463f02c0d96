"""Catalog orchestration: identity, validation and serialized mutations.

Each mutation is a read-modify-write over the whole collection, so mutations
are serialized behind a single lock. Reads take one snapshot of the
collection and degrade to an empty catalog when the store cannot be read.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Collection, Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as SchemaError

from inventory.schemas.item import Item, ItemDraft, ItemUpdate, PredicateSet, SortDirection, StorageStats
from inventory.services import query_engine
from inventory.services.demo_data import DEMO_ITEMS
from inventory.services.errors import NotFound, StorageUnavailable, ValidationError
from inventory.services.item_store import ItemStore

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("name", "image")
NON_NULLABLE_FIELDS = frozenset({"name", "image", "price_per_piece", "price_per_weight"})


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _schema_error(exc: SchemaError) -> ValidationError:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "item"
    return ValidationError(field, error["msg"])


def _as_draft(draft: ItemDraft | Mapping[str, Any]) -> ItemDraft:
    if isinstance(draft, ItemDraft):
        return draft
    try:
        return ItemDraft.model_validate(dict(draft))
    except SchemaError as exc:
        raise _schema_error(exc) from exc


def _as_patch(patch: ItemUpdate | Mapping[str, Any]) -> ItemUpdate:
    if isinstance(patch, ItemUpdate):
        return patch
    try:
        return ItemUpdate.model_validate(dict(patch))
    except SchemaError as exc:
        raise _schema_error(exc) from exc


class CatalogService:
    """Sole entry point for reading and mutating the catalog."""

    def __init__(self, store: ItemStore, clock: Callable[[], datetime] | None = None) -> None:
        self._store = store
        self._clock = clock or _utc_now
        self._lock = threading.Lock()
        self._last_issued_id = 0

    def add(self, draft: ItemDraft | Mapping[str, Any]) -> Item:
        """Validate, stamp identity and creation time, then persist."""

        fields = _as_draft(draft)
        for field in REQUIRED_TEXT_FIELDS:
            if not getattr(fields, field).strip():
                raise ValidationError(field, "is required")

        with self._lock:
            items = self._store.load_all()
            created_at = self._clock()
            item_id = self._next_id(created_at, {existing.id for existing in items})
            item = Item(id=item_id, created_at=created_at, **fields.model_dump())
            items.append(item)
            self._store.save_all(items)

        logger.info("Added item %s (%s)", item.id, item.name)
        return item

    def update(self, item_id: str, patch: ItemUpdate | Mapping[str, Any]) -> Item:
        """Shallow-merge ``patch`` over the stored record.

        Fields the patch does not set are kept. ``id`` and ``created_at``
        are never changed.
        """

        changes = _as_patch(patch).model_dump(exclude_unset=True)
        for field in NON_NULLABLE_FIELDS:
            if field in changes and changes[field] is None:
                del changes[field]
        for field in REQUIRED_TEXT_FIELDS:
            if field in changes and not changes[field].strip():
                raise ValidationError(field, "must not be blank")

        with self._lock:
            items = self._store.load_all()
            index = self._index_of(items, item_id)
            existing = items[index]
            merged = existing.model_dump() | changes | {"id": existing.id, "created_at": existing.created_at}
            updated = Item.model_validate(merged)
            items[index] = updated
            self._store.save_all(items)

        logger.info("Updated item %s fields=%s", item_id, sorted(changes))
        return updated

    def remove(self, item_id: str) -> None:
        with self._lock:
            items = self._store.load_all()
            remaining = [item for item in items if item.id != item_id]
            if len(remaining) == len(items):
                raise NotFound(item_id)
            self._store.save_all(remaining)

        logger.info("Removed item %s", item_id)

    def list(self) -> list[Item]:
        """Return the current collection in storage order."""

        return self._snapshot()

    def get(self, item_id: str) -> Item:
        items = self._snapshot()
        return items[self._index_of(items, item_id)]

    def query(
        self,
        text: str | None = None,
        predicates: PredicateSet | Mapping[str, Any] | None = None,
        sort_key: str | None = None,
        direction: SortDirection | str = SortDirection.ASCENDING,
    ) -> list[Item]:
        """Run the search/filter/sort pipeline over one snapshot."""

        return query_engine.pipeline(self._snapshot(), text, predicates, sort_key, direction)

    def clear(self) -> None:
        with self._lock:
            self._store.save_all([])
        logger.info("Cleared catalog")

    def stats(self) -> StorageStats:
        total = len(self._snapshot())
        try:
            size = self._store.size_estimate()
        except StorageUnavailable as exc:
            logger.warning("Could not estimate storage size: %s", exc)
            size = 0
        return StorageStats(total_items=total, storage_size=f"{size / 1024:.2f} KB")

    def seed_demo_items(self) -> list[Item]:
        """Persist the demo products when the catalog is empty."""

        with self._lock:
            items = self._store.load_all()
            if items:
                return []
            seeded: list[Item] = []
            for draft in DEMO_ITEMS:
                created_at = self._clock()
                item_id = self._next_id(created_at, {item.id for item in seeded})
                seeded.append(Item(id=item_id, created_at=created_at, **draft.model_dump()))
            self._store.save_all(seeded)

        logger.info("Seeded %d demo items", len(seeded))
        return seeded

    def _snapshot(self) -> list[Item]:
        try:
            return self._store.load_all()
        except StorageUnavailable as exc:
            logger.warning("Catalog unreadable, treating as empty: %s", exc)
            return []

    def _next_id(self, now: datetime, taken: Collection[str]) -> str:
        # Millisecond timestamps, bumped so ids stay unique and increasing
        candidate = max(int(now.timestamp() * 1000), self._last_issued_id + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last_issued_id = candidate
        return str(candidate)

    @staticmethod
    def _index_of(items: Sequence[Item], item_id: str) -> int:
        for index, item in enumerate(items):
            if item.id == item_id:
                return index
        raise NotFound(item_id)
