#!/usr/bin/env python3
"""
Flash Sale Window Refresh

Restarts every active flash-sale offer: start now, end in --hours hours.

Usage:
    python scripts/refresh_flash_sales.py [--hours 24]
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.offer_backfill import refresh_flash_sales
from offers_ops.utils.job_runner import build_parser, run_job


def refresh(mongo, args) -> int:
    updated = refresh_flash_sales(mongo, hours=args.hours)
    print(f"\nUpdated {updated} flash sale offers")
    return 0


def main(argv=None) -> int:
    parser = build_parser('Restart the window of active flash-sale offers')
    parser.add_argument('--hours', type=int, default=24, help='Length of the new window in hours')
    return run_job('Flash Sale Window Refresh', refresh, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
