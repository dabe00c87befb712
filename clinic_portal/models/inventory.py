import uuid
from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from clinic_portal.models.base import InventoryBase


class MovementType(str, PyEnum):
    IN = "IN"
    OUT = "OUT"


class Supplier(InventoryBase):
    __tablename__ = "suppliers"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    clinic_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_person: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )


class Product(InventoryBase):
    """
    A consumable or retail item stocked by a clinic.

    current_stock is stored on the row; StockMovement is the ledger it is
    checked against (see clinic_portal.seed.ledger).
    """

    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint("clinic_id", "code", name="uq_products_clinic_code"),
    )

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    clinic_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    code: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    unit: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        doc="e.g., box, piece, bottle",
    )
    unit_price: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    current_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    min_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    max_stock: Mapped[int | None] = mapped_column(Integer, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=datetime.utcnow,
    )


class ProductSupplier(InventoryBase):
    __tablename__ = "product_suppliers"
    __table_args__ = (
        UniqueConstraint("product_id", "supplier_id", name="uq_product_suppliers_pair"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    product_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
    )
    supplier_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("suppliers.id", ondelete="CASCADE"),
        nullable=False,
    )
    is_preferred: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    supplier_product_code: Mapped[str | None] = mapped_column(String(100), nullable=True)


class StockMovement(InventoryBase):
    """
    Append-only stock ledger entry. Rows are never updated or deleted.
    """

    __tablename__ = "stock_movements"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    clinic_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    product_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("products.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    type: Mapped[MovementType] = mapped_column(
        Enum(MovementType, name="stock_movement_type_enum"),
        nullable=False,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    reason: Mapped[str | None] = mapped_column(String(255), nullable=True)
    performed_by: Mapped[str] = mapped_column(String(100), nullable=False)
    performed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )


TABLES = [
    Supplier.__table__,
    Product.__table__,
    ProductSupplier.__table__,
    StockMovement.__table__,
]
