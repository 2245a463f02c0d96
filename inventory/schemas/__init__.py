from inventory.schemas.item import (
	CatalogOptions,
	Item,
	ItemDraft,
	ItemUpdate,
	PredicateSet,
	SortDirection,
	StorageStats,
)

__all__ = [
	"CatalogOptions",
	"Item",
	"ItemDraft",
	"ItemUpdate",
	"PredicateSet",
	"SortDirection",
	"StorageStats",
]
