#!/usr/bin/env python3
"""
Mall Brand & Category Seeding Script

Creates any missing mall categories and brands, then refreshes each
category's brand count. Existing brands are left untouched unless --clear.

Usage:
    python scripts/seed_mall_brands.py [--clear]
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.offer_seeding import seed_mall_brands
from offers_ops.utils.job_runner import build_parser, run_job
from offers_ops.utils.report import print_section


def seed(mongo, args) -> int:
    counts = seed_mall_brands(mongo, clear=args.clear)
    print_section('Seeding Complete')
    print('Final counts:')
    print(f"  - Categories: {counts['categories']}")
    print(f"  - Total Brands: {counts['brands']}")
    print(f"  - Featured Brands: {counts['featured']}")
    print(f"  - Created this run: {counts['created']}")
    return 0


def main(argv=None) -> int:
    parser = build_parser(
        'Seed mall categories and brands',
        clear_help='Delete the seeded brands before recreating them',
    )
    return run_job('MallBrand & MallCategory Seeder', seed, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
