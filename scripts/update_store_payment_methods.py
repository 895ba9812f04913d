#!/usr/bin/env python3
"""
Store Payment Methods Backfill

Adds the default payment methods to every store. Run this before seeding BNPL
stores.

Usage:
    python scripts/update_store_payment_methods.py
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.store_backfill import update_store_payment_methods
from offers_ops.utils.job_runner import build_parser, run_job


def backfill(mongo, args) -> int:
    summary = update_store_payment_methods(mongo)
    covered, total = summary['covered'], summary['total']

    print('\n📊 Summary:')
    print(f"   Total stores: {total}")
    print(f"   Stores with payment methods: {covered}")
    if total:
        print(f"   Coverage: {covered / total * 100:.1f}%")

    if covered == total:
        print('\n✅ SUCCESS: All stores now have payment methods!')
    else:
        print(f"\n⚠️  WARNING: {total - covered} stores still missing payment methods")
    return 0


def main(argv=None) -> int:
    parser = build_parser('Add default payment methods to all stores')
    return run_job('Store Payment Methods Backfill', backfill, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
