"""
Roster API - Catalog SQLAlchemy Models
=======================================

What:  ORM model for the read-only `foods` table.
Note:  The `orders` table is read as an opaque row set and has no model;
       its schema belongs to whoever owns that table.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class FoodItem(Base):
    __tablename__ = "foods"

    item_id: Mapped[str] = mapped_column("ITEM_ID", String(20), primary_key=True)
    item_name: Mapped[str] = mapped_column("ITEM_NAME", String(50), nullable=False)
    item_unit: Mapped[str] = mapped_column("ITEM_UNIT", String(10), nullable=False)
    company_id: Mapped[str] = mapped_column("COMPANY_ID", String(20), nullable=False)

    def __repr__(self) -> str:
        return f"<FoodItem(item_id='{self.item_id}', item_name='{self.item_name}')>"
