#!/usr/bin/env python3
"""
Discovery Data Seeding Script

Seeds search history, today's nearby activity and BNPL-enabled stores so the
discovery readiness checks can pass.

Usage:
    python scripts/seed_discovery_data.py [--clear]
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.discovery_seeding import seed_discovery_data
from offers_ops.utils.job_runner import build_parser, run_job
from offers_ops.utils.report import print_count_table, print_section


def seed(mongo, args) -> int:
    counts = seed_discovery_data(mongo, clear=args.clear)
    print_section('Summary')
    print_count_table(counts)
    return 0


def main(argv=None) -> int:
    parser = build_parser(
        'Seed discovery data',
        clear_help='Delete search history and nearby activity before seeding',
    )
    return run_job('Discovery Data Seeder', seed, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
