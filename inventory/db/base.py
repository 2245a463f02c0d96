# Import models so Base.metadata is populated for Alembic autogenerate.
from inventory.db.base_class import Base
from inventory.models.record import StoredRecord

__all__ = ["Base", "StoredRecord"]
