#!/usr/bin/env python3
"""
Load job postings from a YAML file into the job board store.

The file is either a plain list of postings or a mapping with a
``jobs:`` list. Each posting carries the form fields (``title``,
``department``, ``location``, ``description``, ``type`` and optionally
``salaryRange``) and may set ``status`` to seed closed or archived
postings.

Usage examples::

    python -m job_board.cli.seed_jobs --file jobs.yaml
    python -m job_board.cli.seed_jobs --file jobs.yaml --db data/board.db --reset
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Tuple

import yaml

from job_board.db import Database
from job_board.forms import DEFAULT_JOB_TYPE
from job_board.models import JobInput, JobStatus

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed job postings from a YAML file")
    parser.add_argument("--file", default="jobs.yaml", help="Path to YAML file")
    parser.add_argument("--db", default=os.getenv("DB_PATH", "job_board.db"),
                        help="SQLite DB path (default: $DB_PATH or job_board.db)")
    parser.add_argument("--reset", action="store_true", help="Clear existing jobs before seeding")
    return parser.parse_args(argv)


def load_postings(path: Path) -> List[dict]:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    if isinstance(data, dict):
        data = data.get("jobs") or []
    if not isinstance(data, list):
        raise ValueError(f"Expected a YAML list of jobs, got {type(data).__name__}")
    return data


def to_job_input(entry: dict) -> Tuple[JobInput, JobStatus]:
    """Convert one YAML entry; raises ValueError on missing fields."""
    missing = [
        f for f in ("title", "department", "location", "description")
        if not str(entry.get(f) or "").strip()
    ]
    if missing:
        raise ValueError(f"Missing required field(s): {', '.join(missing)}")
    # A missing or blank type falls back to the form default.
    job_type = str(entry.get("type") or "").strip() or DEFAULT_JOB_TYPE
    job_input = JobInput.from_dict({**entry, "type": job_type})
    status = JobStatus(str(entry.get("status", JobStatus.OPEN.value)).upper())
    return job_input, status


def seed(db: Database, postings: List[dict], reset: bool = False) -> Tuple[int, int]:
    """Insert postings in file order. Returns (created, skipped)."""
    if reset:
        db.clear_jobs()
    created = skipped = 0
    for index, entry in enumerate(postings, start=1):
        try:
            job_input, status = to_job_input(entry)
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning("Skipping entry %d: %s", index, e)
            skipped += 1
            continue
        db.create_job(job_input, status=status)
        created += 1
    return created, skipped


def main(argv=None) -> None:
    logging.basicConfig(level=os.getenv("JOBBOARD_LOG_LEVEL", "INFO").upper())
    args = parse_args(argv)
    path = Path(args.file)
    if not path.exists():
        print(f"File not found: {path}")
        sys.exit(1)
    postings = load_postings(path)
    with Database(Path(args.db)) as db:
        created, skipped = seed(db, postings, reset=args.reset)
    print(f"Seeded {created} job(s) into {args.db} (skipped={skipped}).")


if __name__ == "__main__":
    main()
