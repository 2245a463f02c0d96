from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Item(BaseModel):
    """A single catalog record as persisted and returned to clients."""

    id: str
    name: str
    color: str | None = None
    weight: str | None = None
    size: str | None = None
    brand: str | None = None
    category: str | None = None
    price_per_piece: float = Field(default=0, ge=0)
    price_per_weight: float = Field(default=0, ge=0)
    image: str
    notes: str | None = None
    created_at: datetime

    model_config = CAMEL_CASE


class ItemDraft(BaseModel):
    """Fields supplied when capturing a new item.

    ``name`` and ``image`` default to empty so the catalog can report which
    required field is missing instead of failing schema parsing.
    """

    name: str = ""
    color: str | None = None
    weight: str | None = None
    size: str | None = None
    brand: str | None = None
    category: str | None = None
    price_per_piece: float = Field(default=0, ge=0)
    price_per_weight: float = Field(default=0, ge=0)
    image: str = ""
    notes: str | None = None

    model_config = CAMEL_CASE


class ItemUpdate(BaseModel):
    name: str | None = None
    color: str | None = None
    weight: str | None = None
    size: str | None = None
    brand: str | None = None
    category: str | None = None
    price_per_piece: float | None = Field(default=None, ge=0)
    price_per_weight: float | None = Field(default=None, ge=0)
    image: str | None = None
    notes: str | None = None

    model_config = CAMEL_CASE


class PredicateSet(BaseModel):
    """Optional constraints applied conjunctively by the query engine."""

    category: str | None = None
    color: str | None = None
    brand: str | None = None
    min_price: float | None = None
    max_price: float | None = None

    model_config = CAMEL_CASE

    @field_validator("category", "color", "brand", mode="before")
    @classmethod
    def blank_or_non_text_means_unset(cls, value: object) -> str | None:
        if not isinstance(value, str) or not value.strip():
            return None
        return value

    @field_validator("min_price", "max_price", mode="before")
    @classmethod
    def unparseable_price_means_unset(cls, value: object) -> object:
        if value is None:
            return None
        try:
            return float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def _missing_(cls, value: object) -> "SortDirection | None":
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in {"asc", "ascending"}:
                return cls.ASCENDING
            if lowered in {"desc", "descending"}:
                return cls.DESCENDING
        return None


class StorageStats(BaseModel):
    total_items: int
    storage_size: str

    model_config = CAMEL_CASE


class CatalogOptions(BaseModel):
    categories: list[str]
    colors: list[str]
