#!/usr/bin/env python3
"""
Exclusive Zone Backfill

Tags known offers with their exclusive zone and eligibility requirement.

Usage:
    python scripts/fix_exclusive_zones.py
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.offer_backfill import fix_exclusive_zones
from offers_ops.utils.job_runner import build_parser, run_job


def backfill(mongo, args) -> int:
    zone_counts = fix_exclusive_zones(mongo)
    print(f"\nTotal offers with exclusiveZone: {sum(zone_counts.values())}")
    for zone, count in zone_counts.items():
        print(f"  {zone}: {count}")
    return 0


def main(argv=None) -> int:
    parser = build_parser('Tag offers with their exclusive zone')
    return run_job('Exclusive Zone Backfill', backfill, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
