#!/usr/bin/env python3
"""
Store Metadata Backfill

Sets is60MinDelivery, hasStorePickup and location coordinates on stores that
are missing them. Existing values are never overwritten.

Usage:
    python scripts/seed_store_metadata.py
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.store_backfill import seed_store_metadata
from offers_ops.utils.job_runner import build_parser, run_job


def backfill(mongo, args) -> int:
    updated = seed_store_metadata(mongo)
    print(f"Updated {updated} stores with metadata")
    return 0


def main(argv=None) -> int:
    parser = build_parser('Fill missing delivery flags and coordinates on stores')
    return run_job('Store Metadata Backfill', backfill, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
