"""InventoryItem Model — declaration of the externally owned inventario table.

Invariants:
    - Read-only: the API never inserts, updates or deletes through this model
    - Column names here are the sortable-field allow-list for GET /items

Design Decisions:
    - Declared even though queries are raw SELECT *: one place names the columns,
      and tests build the schema from Base.metadata
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from joyas_api.db.base import Base


class InventoryItem(Base):
    __tablename__ = "inventario"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nombre: Mapped[str] = mapped_column(String(50))
    categoria: Mapped[str] = mapped_column(String(50), index=True)
    metal: Mapped[str] = mapped_column(String(50), index=True)
    precio: Mapped[int] = mapped_column(Integer, index=True)
    stock: Mapped[int] = mapped_column(Integer, default=0)


INVENTORY_TABLE = InventoryItem.__tablename__
SORTABLE_FIELDS = frozenset(InventoryItem.__table__.columns.keys())
