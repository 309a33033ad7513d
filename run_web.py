#!/usr/bin/env python3
"""
Run the internal job board web API.

This script starts the FastAPI server with uvicorn.

Usage:
    python run_web.py
    python run_web.py --port 8000
    python run_web.py --db board.db
    python run_web.py --fetch-errors surface
    python run_web.py --reload  # Enable auto-reload for development
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Run Internal Job Board API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_web.py
  python run_web.py --port 8000
  python run_web.py --db board.db
  python run_web.py --host 0.0.0.0 --port 8000
  python run_web.py --reload
        """
    )

    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run on (default: 8000)"
    )

    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)"
    )

    parser.add_argument(
        "--db",
        default=os.getenv("DB_PATH", "job_board.db"),
        help="Database path (default: job_board.db)"
    )

    parser.add_argument(
        "--fetch-errors",
        choices=["silent", "surface"],
        default=os.getenv("JOBBOARD_FETCH_ERRORS", "silent"),
        help="How failed job listings are reported (default: silent)"
    )

    parser.add_argument(
        "--resync",
        choices=["full", "incremental"],
        default=os.getenv("JOBBOARD_RESYNC", "full"),
        help="Cache refresh after mutations (default: full)"
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development (watch for file changes)"
    )

    args = parser.parse_args()

    # Settings are read from the environment by the app
    os.environ["DB_PATH"] = str(Path(args.db).absolute())
    os.environ["JOBBOARD_FETCH_ERRORS"] = args.fetch_errors
    os.environ["JOBBOARD_RESYNC"] = args.resync

    log_level = os.getenv("JOBBOARD_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    print("=" * 60)
    print("Internal Job Board")
    print("=" * 60)
    print(f"Database: {Path(args.db).absolute()}")
    print(f"Server: http://{args.host}:{args.port}")
    print(f"API Docs: http://{args.host}:{args.port}/api/docs")
    print(f"Fetch errors: {args.fetch_errors}  Resync: {args.resync}")
    print("=" * 60)
    print()

    try:
        uvicorn.run(
            "job_board.api.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=log_level.lower()
        )
    except KeyboardInterrupt:
        print("\nShutting down server...")
    except Exception as e:
        print(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
