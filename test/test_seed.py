from decimal import Decimal

from sqlalchemy import select, func

from backoffice.models import (
    Customer,
    Address,
    Category,
    Product,
    Order,
    OrderItem,
    OrderStatus,
    product_categories,
)
from backoffice.seed import seed_database


def count(db, target):
    return db.execute(select(func.count()).select_from(target)).scalar_one()


def test_seed_row_counts(seeded_db):
    assert count(seeded_db, Customer) == 3
    assert count(seeded_db, Address) == 3
    assert count(seeded_db, Category) == 3
    assert count(seeded_db, Product) == 5
    assert count(seeded_db, product_categories) == 6
    assert count(seeded_db, Order) == 1
    assert count(seeded_db, OrderItem) == 2


def test_seed_order_total_is_derived_from_items(seeded_db):
    order = seeded_db.get(Order, 1)
    assert order.customer_id == 1
    assert order.status == OrderStatus.PENDING
    assert order.total_amount == Decimal("2425.00")


def test_seed_order_items(seeded_db):
    items = seeded_db.query(OrderItem).order_by(OrderItem.product_id).all()
    assert [(i.product_id, i.quantity, i.unit_price) for i in items] == [
        (1, 2, Decimal("1200.00")),
        (2, 1, Decimal("25.00")),
    ]


def test_seed_order_uses_customer_address(seeded_db):
    order = seeded_db.get(Order, 1)
    assert order.shipping_address_id == order.billing_address_id
    assert order.shipping_address.customer_id == order.customer_id


def test_seed_product_categories(seeded_db):
    mouse = seeded_db.query(Product).filter(Product.sku == "MOU-0001").one()
    assert sorted(c.name for c in mouse.categories) == ["Accessories", "Electronics"]


def test_seed_is_skipped_when_customers_exist(seeded_db):
    assert seed_database(seeded_db) is None
    assert count(seeded_db, Customer) == 3
