#!/usr/bin/env python3
"""
Category Metadata Migration Script

Moves rows from categoryvibes, categoryoccasions and categoryhashtags onto the
vibes, occasions and trendingHashtags arrays of their category. Safe to re-run:
the arrays are replaced, legacy rows are kept.

Usage:
    python scripts/migrate_category_metadata.py
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.category_metadata import migrate_category_metadata
from offers_ops.utils.job_runner import build_parser, run_job
from offers_ops.utils.report import print_consolidation_report


def migrate(mongo, args) -> int:
    report = migrate_category_metadata(mongo)
    print_consolidation_report(report)
    return report.exit_code


def main(argv=None) -> int:
    parser = build_parser('Move legacy category metadata onto category documents')
    return run_job('Category Metadata Migration', migrate, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
