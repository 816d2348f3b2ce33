"""
Canonical seed rows for a fresh back-office database

3 customers with one address each, 3 categories, 5 products with 6 category
links, and one order with two items whose total is then derived from the items.
"""
import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backoffice.models import Customer, Address, Category, Product, Order, OrderItem, OrderStatus
from backoffice.utils.orders import update_order_totals

logger = logging.getLogger(__name__)

CUSTOMERS = [
    ("Alice Johnson", "alice@example.com", "+1-555-0101"),
    ("Bob Smith", "bob@example.com", "+1-555-0102"),
    ("Carol Williams", "carol@example.com", "+1-555-0103"),
]

# (customer email, line1, city, postal code, country)
ADDRESSES = [
    ("alice@example.com", "12 Market Street", "San Francisco", "94103", "USA"),
    ("bob@example.com", "450 King Street West", "Toronto", "M5V 1K4", "Canada"),
    ("carol@example.com", "8 Baker Street", "London", "W1U 3BW", "United Kingdom"),
]

CATEGORIES = [
    ("Electronics", "Computers, phones and gadgets"),
    ("Accessories", "Peripherals and add-ons"),
    ("Books", "Printed and digital books"),
]

# (sku, name, price, stock)
PRODUCTS = [
    ("LAP-0001", "Laptop Pro 14", Decimal("1200.00"), 15),
    ("MOU-0001", "Wireless Mouse", Decimal("25.00"), 200),
    ("KEY-0001", "Mechanical Keyboard", Decimal("80.00"), 60),
    ("BOK-0001", "Learning SQL", Decimal("45.00"), 40),
    ("HDP-0001", "Noise Cancelling Headphones", Decimal("150.00"), 30),
]

# (sku, category name)
PRODUCT_CATEGORIES = [
    ("LAP-0001", "Electronics"),
    ("MOU-0001", "Electronics"),
    ("MOU-0001", "Accessories"),
    ("KEY-0001", "Accessories"),
    ("BOK-0001", "Books"),
    ("HDP-0001", "Electronics"),
]

SEED_ORDER_CUSTOMER = "alice@example.com"

# (sku, quantity, unit price)
SEED_ORDER_ITEMS = [
    ("LAP-0001", 2, Decimal("1200.00")),
    ("MOU-0001", 1, Decimal("25.00")),
]


def seed_database(db: Session):
    """
    Insert the seed rows and derive the seeded order's total.

    Does nothing if customers already exist. Returns the seeded order, or None
    when skipped.
    """
    if db.query(Customer).count():
        logger.info("Customers already present, skipping seed data")
        return None

    try:
        customers = {}
        for name, email, phone in CUSTOMERS:
            customers[email] = Customer(name=name, email=email, phone=phone)
            db.add(customers[email])

        addresses = {}
        for email, line1, city, postal_code, country in ADDRESSES:
            addresses[email] = Address(
                customer=customers[email],
                line1=line1,
                city=city,
                postal_code=postal_code,
                country=country,
                is_default=True,
            )
            db.add(addresses[email])

        categories = {name: Category(name=name, description=description) for name, description in CATEGORIES}
        db.add_all(categories.values())

        products = {}
        for sku, name, price, stock in PRODUCTS:
            products[sku] = Product(sku=sku, name=name, price=price, stock=stock)
            db.add(products[sku])

        for sku, category_name in PRODUCT_CATEGORIES:
            products[sku].categories.append(categories[category_name])

        address = addresses[SEED_ORDER_CUSTOMER]
        order = Order(
            customer=customers[SEED_ORDER_CUSTOMER],
            status=OrderStatus.PENDING,
            total_amount=Decimal("0.00"),
            shipping_address=address,
            billing_address=address,
        )
        for sku, quantity, unit_price in SEED_ORDER_ITEMS:
            order.items.append(OrderItem(product=products[sku], quantity=quantity, unit_price=unit_price))
        db.add(order)
        db.flush()

        update_order_totals(db, [order.id])
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Error inserting seed data: {e}")
        db.rollback()
        raise

    logger.info(
        f"Seeded {len(CUSTOMERS)} customers, {len(ADDRESSES)} addresses, {len(CATEGORIES)} categories, "
        f"{len(PRODUCTS)} products, {len(PRODUCT_CATEGORIES)} product-category links, "
        f"1 order with {len(SEED_ORDER_ITEMS)} items"
    )
    return order
