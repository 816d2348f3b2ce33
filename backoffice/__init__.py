"""
E-commerce back-office schema: SQLAlchemy models, seed data and database tooling
"""

__version__ = "1.0.0"
