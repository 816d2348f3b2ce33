"""
Payment model
"""
import enum

from sqlalchemy import Column, Integer, DateTime, DECIMAL, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from backoffice.utils.database import Base
from backoffice.models.order import enum_values


class PaymentMethod(str, enum.Enum):
    CARD = "card"
    PAYPAL = "paypal"
    BANK_TRANSFER = "bank_transfer"
    CASH_ON_DELIVERY = "cash_on_delivery"


class Payment(Base):
    __tablename__ = "payments"
    __table_args__ = {"mysql_charset": "utf8mb4"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    amount = Column(DECIMAL(12, 2), nullable=False)
    method = Column(
        Enum(PaymentMethod, name="payment_method", values_callable=enum_values, create_constraint=True),
        nullable=False,
    )
    paid_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    order = relationship("Order", back_populates="payments")

    def __repr__(self):
        return f"<Payment(id={self.id}, order_id={self.order_id}, amount={self.amount}, method={self.method})>"
