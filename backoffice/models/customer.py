"""
Customer and Address models
"""
from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from backoffice.utils.database import Base


class Customer(Base):
    __tablename__ = "customers"
    __table_args__ = {"mysql_charset": "utf8mb4"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(30))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    addresses = relationship(
        "Address", back_populates="customer", cascade="all, delete-orphan", passive_deletes=True
    )
    # Orders block deletion of their customer; the database raises, the ORM stays out of it
    orders = relationship("Order", back_populates="customer", passive_deletes="all")
    reviews = relationship("Review", back_populates="customer", passive_deletes=True)

    def __repr__(self):
        return f"<Customer(id={self.id}, email={self.email})>"


class Address(Base):
    __tablename__ = "addresses"
    __table_args__ = {"mysql_charset": "utf8mb4"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )
    line1 = Column(String(255), nullable=False)
    line2 = Column(String(255))
    city = Column(String(100), nullable=False)
    state = Column(String(100))
    postal_code = Column(String(20))
    country = Column(String(100), nullable=False)
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    customer = relationship("Customer", back_populates="addresses")

    def __repr__(self):
        return f"<Address(id={self.id}, customer_id={self.customer_id}, city={self.city})>"
