"""
Database initialization script.

Run this script to create the SQLite database and its tables.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.db.init_db import init_db
from app.db.session import DATABASE_URL

if __name__ == "__main__":
    print("=" * 50)
    print("Health Balance Database Initialization")
    print("=" * 50)
    print(f"Database: {DATABASE_URL}")
    print()

    try:
        init_db()
        print("=" * 50)
        print("SUCCESS: Database initialized!")
        print("=" * 50)
        sys.exit(0)

    except Exception as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)
