#!/usr/bin/env python3
"""Simple database initialization script.

Creates all database tables using SQLAlchemy models.
Run this from the repository root:
    python init_db_simple.py
"""

import sys

from sqlalchemy.exc import SQLAlchemyError

from apps.api.database import Base, engine
from apps.api.models import Customer, SurveyResponse  # noqa: F401  registers tables


def init_db() -> list[str]:
    """Create every mapped table and return their names."""
    Base.metadata.create_all(bind=engine)
    return sorted(Base.metadata.tables)


if __name__ == "__main__":
    print("Initializing survey database...")
    print(f"Database URL: {engine.url.render_as_string(hide_password=True)}")

    try:
        tables = init_db()
    except SQLAlchemyError as e:
        print(f"Error creating tables: {e}")
        sys.exit(1)

    print("Created tables:")
    for table_name in tables:
        print(f"  - {table_name}")
