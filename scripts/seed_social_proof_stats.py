#!/usr/bin/env python3
"""
Social Proof Stats Seeding Script

Creates one social proof stat per main category. Top hashtags come from the
category's embedded trendingHashtags, so run the metadata migration first.

Usage:
    python scripts/seed_social_proof_stats.py [--clear]
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.category_seeding import seed_social_proof_stats
from offers_ops.utils.job_runner import build_parser, run_job


def seed(mongo, args) -> int:
    seeded = seed_social_proof_stats(mongo, clear=args.clear)
    print(f"Seeded {seeded} Social Proof Stats")
    return 0


def main(argv=None) -> int:
    parser = build_parser(
        'Seed social proof stats for the main categories',
        clear_help='Delete existing social proof stats before seeding',
    )
    return run_job('Social Proof Stats Seeder', seed, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
