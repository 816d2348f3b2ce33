"""
Order and OrderItem models
"""
import enum

from sqlalchemy import Column, Integer, DateTime, DECIMAL, ForeignKey, Enum, CheckConstraint, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from backoffice.utils.database import Base


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


def enum_values(enum_cls):
    """Persist enum members by value rather than by name"""
    return [member.value for member in enum_cls]


class Order(Base):
    __tablename__ = "orders"
    __table_args__ = (
        Index("idx_orders_customer_id", "customer_id"),
        {"mysql_charset": "utf8mb4"},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False)
    status = Column(
        Enum(OrderStatus, name="order_status", values_callable=enum_values, create_constraint=True),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    # Not kept in sync with order_items; see backoffice.utils.orders.update_order_totals
    total_amount = Column(DECIMAL(12, 2), nullable=False, default=0)
    shipping_address_id = Column(Integer, ForeignKey("addresses.id", ondelete="SET NULL"))
    billing_address_id = Column(Integer, ForeignKey("addresses.id", ondelete="SET NULL"))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    customer = relationship("Customer", back_populates="orders")
    shipping_address = relationship("Address", foreign_keys=[shipping_address_id])
    billing_address = relationship("Address", foreign_keys=[billing_address_id])
    items = relationship(
        "OrderItem", back_populates="order", cascade="all, delete-orphan", passive_deletes=True
    )
    payments = relationship(
        "Payment", back_populates="order", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Order(id={self.id}, total={self.total_amount}, status={self.status})>"


class OrderItem(Base):
    __tablename__ = "order_items"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
        Index("idx_order_items_product_id", "product_id"),
        {"mysql_charset": "utf8mb4"},
    )

    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="RESTRICT"), primary_key=True)
    quantity = Column(Integer, nullable=False, default=1)
    unit_price = Column(DECIMAL(10, 2), nullable=False)

    # Relationships
    order = relationship("Order", back_populates="items")
    product = relationship("Product", back_populates="order_items")

    def __repr__(self):
        return f"<OrderItem(order_id={self.order_id}, product_id={self.product_id}, quantity={self.quantity})>"
