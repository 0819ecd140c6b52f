"""
Item model - a furniture listing.
"""

from datetime import datetime

from sqlalchemy import String, Text, DateTime, Float, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from sellfurniture.db.base import Base, new_id


class Item(Base):
    """Item entity. Used for REST create/list, count and search."""

    __tablename__ = "items"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # Legacy listings stored their label here; never written now, still searched
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[float] = mapped_column(Float, nullable=False)
    retail_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    # Not a foreign key: existence of the location is never checked
    location_id: Mapped[str | None] = mapped_column(String(32), nullable=True, index=True)
    created_by: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    instructions: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, title={self.title})>"
