"""
Database initialization script.

Creates the BlogHub tables directly (use Alembic for managed databases).

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

from sqlalchemy.exc import SQLAlchemyError

from bloghub.core.config import settings
from bloghub.core.logging import configure_logging
from bloghub.db.init_db import init_db

logger = logging.getLogger("bloghub.init_db")

if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    try:
        init_db()
    except SQLAlchemyError:
        logger.exception("Database initialization failed")
        sys.exit(1)
    sys.exit(0)
