"""
SQLAlchemy models for the e-commerce back-office
"""

# Import all models to make them available when importing from models
from .customer import Customer, Address
from .product import Product, Category, product_categories
from .order import Order, OrderItem, OrderStatus
from .payment import Payment, PaymentMethod
from .review import Review
from .user import User, UserRole

__all__ = [
    "Customer",
    "Address",
    "Product",
    "Category",
    "product_categories",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Payment",
    "PaymentMethod",
    "Review",
    "User",
    "UserRole",
]
