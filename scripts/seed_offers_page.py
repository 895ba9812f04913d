#!/usr/bin/env python3
"""
Offers Page Seeding Script

Seeds flash sales (lightning deals), their promo coupons and friend
redemptions. Flash sales and coupons are linked to stores found by name.

Usage:
    python scripts/seed_offers_page.py [--clear]
"""
import os
import sys
import time

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.offer_seeding import seed_offers_page
from offers_ops.utils.job_runner import build_parser, run_job
from offers_ops.utils.report import print_count_table, print_section


def seed(mongo, args) -> int:
    start_time = time.time()
    print(f"Mode: {'Clear & Seed' if args.clear else 'Seed Only'}")

    counts = seed_offers_page(mongo, clear=args.clear)
    if not counts:
        return 0

    print_section('Seeding Complete')
    print_count_table(counts)
    print(f"\nTotal documents seeded: {sum(counts.values())}")
    print(f"Duration: {time.time() - start_time:.2f}s")
    return 0


def main(argv=None) -> int:
    parser = build_parser(
        'Seed offers page data',
        clear_help='Delete existing flash sales, promo coupons and friend redemptions before seeding',
    )
    return run_job('Offers Page Seeder', seed, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
