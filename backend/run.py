#!/usr/bin/env python3
"""
Run script for the Wanderlust Travel backend.

    python run.py                 # serve on $HOST:$PORT (default 0.0.0.0:8000)
    python run.py --seed          # load the sample catalog first
"""

import argparse
import logging
import os

import uvicorn

from app.core.config import settings


def parse_args():
    parser = argparse.ArgumentParser(description="Wanderlust Travel API server")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", 8000)))
    parser.add_argument("--seed", action="store_true", help="create sample data before serving")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()

    if args.seed:
        from seed_data import create_sample_data

        logging.basicConfig(level=settings.log_level)
        create_sample_data()

    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
        access_log=True,
        use_colors=True
    )
