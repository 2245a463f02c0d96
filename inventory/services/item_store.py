"""Whole-collection persistence for catalog items.

Every store reads and writes the complete item collection as a single JSON
array. Writes replace the stored array in one step so a reader never sees a
partially written collection. Stores fail fast and never retry; deciding what
to do about a failure is up to the caller.
"""

from __future__ import annotations

import logging
import tempfile
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from inventory.db.base_class import Base
from inventory.models.record import StoredRecord
from inventory.schemas.item import Item
from inventory.services.errors import StorageUnavailable

logger = logging.getLogger(__name__)

DEFAULT_RECORD_NAME = "inventory_products"

_ITEM_LIST = TypeAdapter(list[Item])


def serialize_items(items: Sequence[Item]) -> bytes:
    """Encode items as the persisted JSON array (camelCase keys, no nulls)."""

    try:
        return _ITEM_LIST.dump_json(list(items), by_alias=True, exclude_none=True)
    except PydanticSerializationError as exc:
        raise StorageUnavailable(f"Could not serialize items: {exc}") from exc


def deserialize_items(payload: str | bytes) -> list[Item]:
    try:
        return _ITEM_LIST.validate_json(payload)
    except ValueError as exc:
        raise StorageUnavailable(f"Stored items are corrupt: {exc}") from exc


class ItemStore(ABC):
    """Durable all-or-nothing storage of the entire item collection."""

    def initialize(self) -> None:
        """Prepare the backing medium. Safe to call more than once."""

    @abstractmethod
    def load_all(self) -> list[Item]:
        """Return the persisted collection, or an empty list on first run."""

    @abstractmethod
    def save_all(self, items: Sequence[Item]) -> None:
        """Overwrite the persisted collection with ``items``."""

    @abstractmethod
    def size_estimate(self) -> int:
        """Approximate size in bytes of the persisted collection."""

    def close(self) -> None:
        """Release connections or handles held by the store."""


class DocumentItemStore(ItemStore):
    """Keeps the collection as one named row in the ``stored_records`` table."""

    def __init__(self, session_factory: sessionmaker[Session], record_name: str = DEFAULT_RECORD_NAME) -> None:
        self._session_factory = session_factory
        self._record_name = record_name

    def initialize(self) -> None:
        try:
            with self._session_factory() as session:
                Base.metadata.create_all(session.get_bind())
        except SQLAlchemyError as exc:
            raise StorageUnavailable(f"Could not prepare database: {exc}") from exc

    def load_all(self) -> list[Item]:
        payload = self._read_payload()
        if payload is None:
            return []
        return deserialize_items(payload)

    def save_all(self, items: Sequence[Item]) -> None:
        payload = serialize_items(items).decode("utf-8")
        try:
            with self._session_factory() as session, session.begin():
                record = session.get(StoredRecord, self._record_name)
                if record is None:
                    session.add(StoredRecord(name=self._record_name, payload=payload))
                else:
                    record.payload = payload
        except SQLAlchemyError as exc:
            raise StorageUnavailable(f"Could not write items: {exc}") from exc
        logger.debug("Saved %d items to record %s", len(items), self._record_name)

    def size_estimate(self) -> int:
        payload = self._read_payload()
        return len(payload.encode("utf-8")) if payload else 0

    def _read_payload(self) -> str | None:
        try:
            with self._session_factory() as session:
                record = session.get(StoredRecord, self._record_name)
                return record.payload if record is not None else None
        except SQLAlchemyError as exc:
            raise StorageUnavailable(f"Could not read items: {exc}") from exc

    def close(self) -> None:
        with self._session_factory() as session:
            session.get_bind().dispose()
        logger.debug("Disposed engine for record %s", self._record_name)


class JsonFileItemStore(ItemStore):
    """Keeps the collection as a JSON array in a single file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def initialize(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageUnavailable(f"Could not create {self._path.parent}: {exc}") from exc

    def load_all(self) -> list[Item]:
        if not self._path.exists():
            return []
        try:
            payload = self._path.read_bytes()
        except OSError as exc:
            raise StorageUnavailable(f"Could not read {self._path}: {exc}") from exc
        return deserialize_items(payload)

    def save_all(self, items: Sequence[Item]) -> None:
        payload = serialize_items(items)
        tmp_path: Path | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(delete=False, dir=self._path.parent, suffix=".tmp") as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(payload)
            tmp_path.replace(self._path)
        except OSError as exc:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StorageUnavailable(f"Could not write {self._path}: {exc}") from exc
        logger.debug("Saved %d items to %s", len(items), self._path)

    def size_estimate(self) -> int:
        try:
            return self._path.stat().st_size
        except FileNotFoundError:
            return 0
        except OSError as exc:
            raise StorageUnavailable(f"Could not stat {self._path}: {exc}") from exc
