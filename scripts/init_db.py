"""
Database initialization script.

Creates the adaptive-coach tables on the database configured in ``.env``.

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.core.logging import configure_logging
from app.db.init_db import init_db

logger = logging.getLogger("scripts.init_db")

if __name__ == "__main__":
    configure_logging()
    print("=" * 50)
    print("Adaptive Coach Database Initialization")
    print("=" * 50)

    try:
        tables = init_db()
    except Exception:
        logger.exception("Database initialization failed")
        sys.exit(1)

    print(f"SUCCESS: {len(tables)} tables ready")
    sys.exit(0)
