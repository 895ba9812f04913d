#!/usr/bin/env python3
"""
Category Metadata Seeding Script

Inserts legacy vibe, occasion and hashtag rows for the main categories. Run
migrate_category_metadata.py afterwards to embed them on the categories.

Usage:
    python scripts/seed_category_metadata.py [--clear]
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.category_seeding import seed_category_metadata
from offers_ops.utils.job_runner import build_parser, run_job
from offers_ops.utils.report import print_count_table, print_section


def seed(mongo, args) -> int:
    counts = seed_category_metadata(mongo, clear=args.clear)
    print_section('Summary')
    print_count_table({label.title(): count for label, count in counts.items()}, heading='Data Type')
    print(f"\nTotal: {sum(counts.values())} items seeded")
    return 0


def main(argv=None) -> int:
    parser = build_parser(
        'Seed legacy category metadata rows',
        clear_help='Delete existing legacy rows for the main categories before seeding',
    )
    return run_job('Category Metadata Seeder', seed, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
