"""
Catalog API - Product SQLAlchemy Model
======================================

What:  ORM model representing the `products` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by ProductRepository for CRUD operations and by Alembic.

Table Design:
    - UUID primary key, generated in Python at insert; never reused
    - name: unique (uq_products_name), stored trimmed
    - price: non-negative float; stock: non-negative integer
      (both enforced by the validation rules before any write)
    - created_at: UTC, set once at insert, never updated
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from catalog.database import Base

UNIQUE_NAME_CONSTRAINT = "uq_products_name"


class Product(Base):
    """
    A catalog product.

    Lifecycle:
        1. Created by ProductService.create (validated, then inserted)
        2. Partially updated by ProductService.update
        3. Deleted by ProductService.delete; its id is never handed out again
    """

    __tablename__ = "products"

    # Generic Uuid: native UUID on PostgreSQL, CHAR(32) on SQLite
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    price: Mapped[float] = mapped_column(Float, nullable=False)

    stock: Mapped[int] = mapped_column(Integer, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        UniqueConstraint("name", name=UNIQUE_NAME_CONSTRAINT),
        Index("idx_products_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}', price={self.price}, stock={self.stock})>"
