"""
Development server launcher.

Loads the .env file and runs the API with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--port 8000] [--no-reload]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file before settings are read
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Adaptive Coach API locally")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()

    print("=" * 60)
    print(f"{settings.PROJECT_NAME} {settings.VERSION} - development server")
    print("=" * 60)
    print(f"API:  http://localhost:{args.port}")
    print(f"Docs: http://localhost:{args.port}/docs")
    print(f"DB:   {settings.DATABASE_URL.split('@')[-1]}")
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
        log_level=settings.LOG_LEVEL.lower(),
    )
