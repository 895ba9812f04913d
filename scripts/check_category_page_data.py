#!/usr/bin/env python3
"""
Category Page Data Check

Read-only report of the embedded metadata and social proof stats behind the
main category pages. Exits 1 when a main category is missing.

Usage:
    python scripts/check_category_page_data.py
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.category_seeding import check_category_page_data
from offers_ops.utils.job_runner import build_parser, run_job
from offers_ops.utils.report import print_section


def check(mongo, args) -> int:
    result = check_category_page_data(mongo)

    print_section('CATEGORIES')
    for row in result['rows']:
        if not row['exists']:
            print(f"✗ {row['slug']}: missing")
            continue
        proof = 'yes' if row['socialProof'] else 'no'
        print(
            f"{'✓' if row['vibes'] and row['occasions'] and row['hashtags'] else '⚠'} {row['slug']}: "
            f"{row['vibes']} vibes, {row['occasions']} occasions, {row['hashtags']} hashtags, social proof: {proof}"
        )

    print_section('ISSUES')
    for issue in result['issues']:
        print(f"  - {issue}")
    if not result['issues']:
        print('  none')

    return 1 if result['missing'] else 0


def main(argv=None) -> int:
    parser = build_parser('Check category page data')
    return run_job('Category Page Data Check', check, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
