"""Initialize the configured database - creates all tables."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gireach.config import settings
from gireach.database import create_all_tables, create_db_engine


def init_db():
    if not settings.DATABASE_URL:
        print("DATABASE_URL is not set; the file backend needs no schema.")
        return
    print("Creating all database tables...")
    create_all_tables(create_db_engine(settings.DATABASE_URL))
    print("Database initialized successfully.")


if __name__ == "__main__":
    init_db()
