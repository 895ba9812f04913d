#!/usr/bin/env python3
"""
Exclusive Offers Seeding Script

Usage:
    python scripts/seed_exclusive_offers.py [--clear]
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.offer_seeding import seed_exclusive_offers
from offers_ops.utils.job_runner import build_parser, run_job


def seed(mongo, args) -> int:
    seeded = seed_exclusive_offers(mongo, clear=args.clear)
    print(f"Seeded {seeded} Exclusive Offers")
    return 0


def main(argv=None) -> int:
    parser = build_parser(
        'Seed exclusive audience offers',
        clear_help='Delete existing exclusive offers before seeding',
    )
    return run_job('Exclusive Offers Seeder', seed, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
