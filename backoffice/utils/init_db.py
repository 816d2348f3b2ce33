"""
Database management script
Creates the database and its tables, loads seed data, dumps DDL and adds back-office users
"""
import logging

from backoffice.config import LOG_LEVEL
from backoffice.models import UserRole
from backoffice.seed import seed_database
from backoffice.utils.database import create_tables, drop_tables, SessionLocal
from backoffice.utils.schema import create_database, render_schema_sql
from backoffice.utils.security import create_user

logger = logging.getLogger(__name__)


def init_database():
    """Initialize the database by creating all tables"""
    logger.info("Creating database tables...")
    create_tables()
    logger.info("Database tables created successfully")


def reset_database():
    """Reset the database by dropping and recreating all tables"""
    logger.info("Dropping existing tables...")
    drop_tables()
    logger.info("Creating new tables...")
    create_tables()
    logger.info("Database reset successfully")


def load_seed_data():
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()


def add_user(username: str, password: str, role: str):
    db = SessionLocal()
    try:
        create_user(db, username, password, role)
    finally:
        db.close()


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Database management script")
    parser.add_argument("--create-database", action="store_true", help="Create the database itself")
    parser.add_argument("--init", action="store_true", help="Initialize database")
    parser.add_argument("--reset", action="store_true", help="Reset database")
    parser.add_argument("--seed", action="store_true", help="Insert seed data")
    parser.add_argument(
        "--sql", choices=["postgresql", "mysql", "sqlite"], help="Print the schema DDL for a dialect and exit"
    )
    parser.add_argument("--create-user", metavar="USERNAME", help="Create a back-office user")
    parser.add_argument("--password", help="Password for --create-user")
    parser.add_argument(
        "--role", choices=[role.value for role in UserRole], default=UserRole.SUPPORT.value, help="Role for --create-user"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL)

    if args.sql:
        print(render_schema_sql(args.sql))
        return

    if args.create_user and not args.password:
        parser.error("--create-user requires --password")

    if args.create_database:
        create_database()
    if args.reset:
        reset_database()
    elif args.init:
        init_database()
    if args.seed:
        load_seed_data()
    if args.create_user:
        add_user(args.create_user, args.password, args.role)


if __name__ == "__main__":
    main()
