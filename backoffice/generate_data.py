"""
Demo data generation script
This script fills the back-office tables with random but consistent data:
- Categories and products (with category links)
- Customers and their addresses
- Orders with items and payments
- Product reviews

For the small fixed dataset used in tests and demos, use backoffice.seed instead.
"""
import logging
import random
from decimal import Decimal

from faker import Faker
from sqlalchemy.exc import SQLAlchemyError

from backoffice.config import LOG_LEVEL
from backoffice.utils.database import SessionLocal
from backoffice.models import (
    Customer,
    Address,
    Category,
    Product,
    Order,
    OrderItem,
    OrderStatus,
    Payment,
    PaymentMethod,
    Review,
)
from backoffice.utils.orders import update_order_totals

logger = logging.getLogger(__name__)

fake = Faker("en_US")

CATEGORY_DATA = [
    ("Electronics", "Devices and technology accessories"),
    ("Fashion", "Clothing, shoes and fashion accessories"),
    ("Books", "Books and learning material"),
    ("Home & Living", "Household goods and interior decoration"),
    ("Sports", "Sports equipment and training wear"),
    ("Beauty", "Cosmetics and personal care"),
    ("Food & Drink", "Groceries and beverages"),
    ("Automotive", "Car and motorbike parts and accessories"),
    ("Toys", "Educational toys and games"),
    ("Health", "Health care products"),
]

# Product templates by category: (name, description, min price, max price)
PRODUCT_TEMPLATES = {
    "Electronics": [
        ("Gaming Laptop", "High performance gaming laptop", 900, 2500),
        ("Smartphone", "Unlocked smartphone", 200, 1200),
        ("Bluetooth Headphones", "Wireless over-ear headphones", 30, 300),
        ("Tablet", "10 inch tablet", 150, 800),
        ("Smartwatch", "Fitness smartwatch", 80, 450),
    ],
    "Fashion": [
        ("T-Shirt", "Cotton t-shirt", 10, 40),
        ("Jeans", "Slim fit jeans", 25, 90),
        ("Sneakers", "Everyday sneakers", 40, 180),
        ("Handbag", "Leather handbag", 50, 300),
    ],
    "Books": [
        ("Programming Book", "From basics to advanced programming", 20, 70),
        ("Novel", "Bestselling novel", 8, 30),
        ("Business Book", "Business and entrepreneurship", 15, 45),
        ("Cookbook", "Easy recipes", 12, 40),
    ],
    "Sports": [
        ("Running Shoes", "Lightweight running shoes", 60, 200),
        ("Football", "Official size football", 15, 60),
        ("Dumbbells", "Adjustable dumbbell set", 40, 250),
    ],
}

BRAND_PREFIXES = ["Sony", "Samsung", "Apple", "LG", "Xiaomi", "Adidas", "Nike", "Zara", "Penguin"]

EMAIL_DOMAINS = ["@gmail.com", "@yahoo.com", "@hotmail.com", "@outlook.com"]

# Statuses for which the order has been paid at some point
PAID_STATUSES = (OrderStatus.PAID, OrderStatus.SHIPPED, OrderStatus.REFUNDED)


class DataGenerator:
    def __init__(self, db=None):
        self.db = db or SessionLocal()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.db.close()

    def _commit(self, what: str, rows: list) -> list:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error creating {what}: {e}")
            self.db.rollback()
            raise
        logger.info(f"Created {len(rows)} {what}")
        return rows

    def generate_categories(self, count: int = 10):
        """Generate product categories"""
        categories = []
        for name, description in CATEGORY_DATA[:count]:
            category = Category(name=name, description=description)
            categories.append(category)
            self.db.add(category)
        return self._commit("categories", categories)

    def generate_products(self, count: int = 100):
        """Generate products linked to one or two existing categories"""
        categories = self.db.query(Category).all()
        if not categories:
            logger.warning("No categories found. Please generate categories first.")
            return []

        products = []
        for _ in range(count):
            linked = random.sample(categories, min(len(categories), random.randint(1, 2)))
            category_name = linked[0].name

            if category_name in PRODUCT_TEMPLATES:
                base_name, description, min_price, max_price = random.choice(PRODUCT_TEMPLATES[category_name])
                name = f"{random.choice(BRAND_PREFIXES)} {base_name}"
            else:
                # Generic product for categories without templates
                name = f"{fake.word().title()} {category_name}"
                description = f"Quality {category_name.lower()} product"
                min_price, max_price = 5, 500

            price = Decimal(random.randint(min_price * 100, max_price * 100)) / 100
            sku = f"{category_name[:3].upper()}-{fake.unique.random_number(digits=6, fix_len=True)}"

            product = Product(
                sku=sku,
                name=name,
                description=description,
                price=price,
                stock=random.randint(0, 100),
                categories=linked,
            )
            products.append(product)
            self.db.add(product)
        return self._commit("products", products)

    def generate_customers(self, count: int = 50):
        """Generate customers, each with one or two addresses"""
        customers = []
        for _ in range(count):
            first_name = fake.first_name()
            last_name = fake.last_name()
            email = f"{fake.unique.user_name()}{random.choice(EMAIL_DOMAINS)}"

            customer = Customer(
                name=f"{first_name} {last_name}",
                email=email,
                phone=fake.phone_number()[:30],
            )
            for index in range(random.randint(1, 2)):
                customer.addresses.append(
                    Address(
                        line1=fake.street_address(),
                        line2=fake.secondary_address() if random.random() < 0.3 else None,
                        city=fake.city(),
                        state=fake.state_abbr(),
                        postal_code=fake.postcode(),
                        country="USA",
                        is_default=index == 0,
                    )
                )
            customers.append(customer)
            self.db.add(customer)
        return self._commit("customers", customers)

    def generate_orders(self, count: int = 100):
        """Generate orders of 1-3 distinct products, with payments for paid orders"""
        customers = self.db.query(Customer).all()
        products = self.db.query(Product).all()
        if not customers or not products:
            logger.warning("Customers and products are required before generating orders.")
            return []

        orders = []
        for _ in range(count):
            customer = random.choice(customers)
            address = random.choice(customer.addresses) if customer.addresses else None
            order = Order(
                customer=customer,
                status=random.choice(list(OrderStatus)),
                shipping_address=address,
                billing_address=address,
            )
            for product in random.sample(products, min(len(products), random.randint(1, 3))):
                order.items.append(
                    OrderItem(product=product, quantity=random.randint(1, 3), unit_price=product.price)
                )
            if order.status in PAID_STATUSES:
                amount = sum(item.quantity * item.unit_price for item in order.items)
                order.payments.append(Payment(amount=amount, method=random.choice(list(PaymentMethod))))
            orders.append(order)
            self.db.add(order)

        try:
            self.db.flush()
            update_order_totals(self.db, [order.id for order in orders])
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return self._commit("orders", orders)

    def generate_reviews(self, count: int = 100, anonymous_ratio: float = 0.1):
        """Generate product reviews; a share of them without a customer"""
        customers = self.db.query(Customer).all()
        products = self.db.query(Product).all()
        if not products:
            logger.warning("No products found. Please generate products first.")
            return []

        reviews = []
        for _ in range(count):
            customer = None
            if customers and random.random() >= anonymous_ratio:
                customer = random.choice(customers)
            review = Review(
                product=random.choice(products),
                customer=customer,
                rating=random.randint(1, 5),
                comment=fake.sentence(nb_words=12),
            )
            reviews.append(review)
            self.db.add(review)
        return self._commit("reviews", reviews)

    def clear_all_data(self):
        """Clear all generated data from database"""
        logger.info("Clearing all data...")
        try:
            # Orders first: they block deletion of customers and products
            self.db.query(Order).delete()
            self.db.query(Review).delete()
            self.db.query(Product).delete()
            self.db.query(Category).delete()
            self.db.query(Customer).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error clearing data: {e}")
            self.db.rollback()
            raise
        logger.info("All data cleared")

    def generate_all(self, categories=10, products=100, customers=50, orders=100, reviews=100):
        """Generate a complete demo dataset"""
        self.clear_all_data()

        generated = {
            "categories": self.generate_categories(categories),
            "products": self.generate_products(products),
            "customers": self.generate_customers(customers),
            "orders": self.generate_orders(orders),
            "reviews": self.generate_reviews(reviews),
        }
        for name, rows in generated.items():
            logger.info(f"{name.title()}: {len(rows)}")
        return generated


def main(argv=None):
    """Main function to run data generation"""
    import argparse

    parser = argparse.ArgumentParser(description="Generate demo data for the e-commerce back-office")
    parser.add_argument("--categories", type=int, default=10, help="Number of categories to generate")
    parser.add_argument("--products", type=int, default=100, help="Number of products to generate")
    parser.add_argument("--customers", type=int, default=50, help="Number of customers to generate")
    parser.add_argument("--orders", type=int, default=100, help="Number of orders to generate")
    parser.add_argument("--reviews", type=int, default=100, help="Number of reviews to generate")
    parser.add_argument("--clear", action="store_true", help="Clear all existing data")

    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL)

    with DataGenerator() as generator:
        if args.clear:
            generator.clear_all_data()
        else:
            generator.generate_all(
                categories=args.categories,
                products=args.products,
                customers=args.customers,
                orders=args.orders,
                reviews=args.reviews,
            )


if __name__ == "__main__":
    main()
