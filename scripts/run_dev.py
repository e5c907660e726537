"""
Development server launcher.

Loads .env file and runs FastAPI with uvicorn in reload mode. The frontend
dev server expects the API on port 5001.

Usage:
    python scripts/run_dev.py
"""

import logging
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

logger = logging.getLogger("bloghub.dev")

if __name__ == "__main__":
    from bloghub.core.logging import configure_logging

    configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    port = int(os.getenv("PORT", "5001"))
    logger.info("Starting BlogHub API on http://localhost:%d (docs at /docs)", port)

    uvicorn.run("bloghub.main:app", host="0.0.0.0", port=port, reload=True, log_level="info")
