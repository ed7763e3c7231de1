"""SQLAlchemy models for product catalog.

Defines Category, Product and ProductVariant tables for persistent storage.
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.value_objects import Price
from app.infrastructure.database import Base


class Category(Base):
    """Product category.

    Attributes:
        id: Surrogate key, also used by the listing category filter.
        code: Unique category code (e.g., "clothing").
        name: Display name.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, code={self.code})>"


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Surrogate key; listing order follows it.
        code: Unique product code (e.g., "PROD001").
        price: Exact decimal price.
        category_id: Optional owning category.
        category: Loaded Category, or None.
        variants: Variants ordered by id.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=True,
        index=True,
    )

    # Relationships
    category: Mapped["Category | None"] = relationship("Category")
    variants: Mapped[list["ProductVariant"]] = relationship(
        "ProductVariant",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductVariant.id",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, code={self.code}, price={self.price})>"

    @property
    def price_value(self) -> Price:
        """Price as a value object."""
        return Price.of(self.price)


class ProductVariant(Base):
    """Purchasable configuration of a product (size, colour, ...).

    A zero price means the variant has no price of its own.

    Attributes:
        id: Surrogate key.
        product_id: Parent product ID.
        name: Variant name (e.g., "Variant A").
        sku: Stock keeping unit.
        price: Own price, or zero when inherited from the product.
    """

    __tablename__ = "product_variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    sku: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=Decimal("0"))

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="variants")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductVariant(id={self.id}, sku={self.sku})>"

    @property
    def price_value(self) -> Price:
        """Own price as a value object (unset when zero)."""
        return Price.of(self.price)
