import pytest
from sqlalchemy import inspect

from backoffice.utils.schema import create_database, create_database_sql, render_schema_sql

TABLES = {
    "customers",
    "addresses",
    "products",
    "categories",
    "product_categories",
    "orders",
    "order_items",
    "payments",
    "reviews",
    "users",
}


def test_tables_created(engine):
    assert set(inspect(engine).get_table_names()) == TABLES


def test_declared_indexes(engine):
    inspector = inspect(engine)

    def indexes(table):
        return [(i["name"], i["column_names"]) for i in inspector.get_indexes(table)]

    assert indexes("products") == [("idx_products_price", ["price"])]
    assert indexes("orders") == [("idx_orders_customer_id", ["customer_id"])]
    assert indexes("order_items") == [("idx_order_items_product_id", ["product_id"])]


def test_foreign_key_actions(engine):
    inspector = inspect(engine)

    def actions(table):
        return {
            (fk["referred_table"], tuple(fk["constrained_columns"])): fk["options"].get("ondelete")
            for fk in inspector.get_foreign_keys(table)
        }

    assert actions("addresses") == {("customers", ("customer_id",)): "CASCADE"}
    assert actions("orders") == {
        ("customers", ("customer_id",)): "RESTRICT",
        ("addresses", ("shipping_address_id",)): "SET NULL",
        ("addresses", ("billing_address_id",)): "SET NULL",
    }
    assert actions("order_items") == {
        ("orders", ("order_id",)): "CASCADE",
        ("products", ("product_id",)): "RESTRICT",
    }
    assert actions("payments") == {("orders", ("order_id",)): "CASCADE"}
    assert actions("reviews") == {
        ("products", ("product_id",)): "CASCADE",
        ("customers", ("customer_id",)): "SET NULL",
    }
    assert actions("product_categories") == {
        ("products", ("product_id",)): "CASCADE",
        ("categories", ("category_id",)): "CASCADE",
    }


def test_order_items_composite_primary_key(engine):
    pk = inspect(engine).get_pk_constraint("order_items")
    assert pk["constrained_columns"] == ["order_id", "product_id"]


def test_create_database_sql_postgresql():
    assert create_database_sql("postgresql", "ecommerce") == "CREATE DATABASE ecommerce ENCODING 'UTF8'"


def test_create_database_sql_mysql():
    assert create_database_sql("mysql", "ecommerce") == (
        "CREATE DATABASE IF NOT EXISTS ecommerce CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
    )


def test_create_database_sql_unsupported_dialect():
    with pytest.raises(ValueError):
        create_database_sql("sqlite", "ecommerce")


def test_create_database_is_noop_on_sqlite():
    assert create_database("sqlite://") is False


def test_render_schema_sql_postgresql():
    ddl = render_schema_sql("postgresql")
    assert "order_status" in ddl
    assert "ON DELETE RESTRICT" in ddl
    assert "ON DELETE SET NULL" in ddl
    assert "CREATE INDEX idx_products_price ON products (price)" in ddl


def test_render_schema_sql_mysql_declares_charset():
    ddl = render_schema_sql("mysql")
    assert "CHARSET=utf8mb4" in ddl
    assert "ENUM('pending','paid','shipped','cancelled','refunded')" in ddl


def test_render_schema_sql_sqlite_checks():
    ddl = render_schema_sql("sqlite")
    assert "CHECK (quantity > 0)" in ddl
    assert "CHECK (rating BETWEEN 1 AND 5)" in ddl


def test_render_schema_sql_unknown_dialect():
    with pytest.raises(ValueError):
        render_schema_sql("oracle")


def test_address_foreign_key_follows_customer_key_changes(engine):
    (fk,) = inspect(engine).get_foreign_keys("addresses")
    assert fk["options"].get("onupdate") == "CASCADE"


@pytest.mark.parametrize(
    "dialect_name, expected",
    [
        ("postgresql", "CREATE DATABASE \"Shop-DB\" ENCODING 'UTF8'"),
        ("mysql", "CREATE DATABASE IF NOT EXISTS `Shop-DB` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"),
    ],
)
def test_create_database_sql_quotes_name(dialect_name, expected):
    assert create_database_sql(dialect_name, "Shop-DB") == expected
