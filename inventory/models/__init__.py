from inventory.models.record import StoredRecord

__all__ = ["StoredRecord"]
