class CatalogError(Exception):
    """Base class for catalog failures surfaced to callers."""


class ValidationError(CatalogError):
    """A required item field is missing or blank."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class NotFound(CatalogError):
    def __init__(self, item_id: str) -> None:
        super().__init__(f"Item {item_id!r} not found")
        self.item_id = item_id


class StorageUnavailable(CatalogError):
    """The backing store could not be read or written."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
