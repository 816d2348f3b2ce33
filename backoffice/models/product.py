"""
Product and Category models
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Table, Index
from sqlalchemy import DECIMAL
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from backoffice.utils.database import Base


product_categories = Table(
    "product_categories",
    Base.metadata,
    Column("product_id", Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
    mysql_charset="utf8mb4",
)


class Category(Base):
    __tablename__ = "categories"
    __table_args__ = {"mysql_charset": "utf8mb4"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    products = relationship(
        "Product", secondary=product_categories, back_populates="categories", passive_deletes=True
    )

    def __repr__(self):
        return f"<Category(id={self.id}, name={self.name})>"


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        Index("idx_products_price", "price"),
        {"mysql_charset": "utf8mb4"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    sku = Column(String(64), unique=True, nullable=False)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    price = Column(DECIMAL(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    categories = relationship(
        "Category", secondary=product_categories, back_populates="products", passive_deletes=True
    )
    # Ordered products cannot be deleted; enforced by the foreign key
    order_items = relationship("OrderItem", back_populates="product", passive_deletes="all")
    reviews = relationship(
        "Review", back_populates="product", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Product(id={self.id}, sku={self.sku}, price={self.price})>"
