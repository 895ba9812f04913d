#!/usr/bin/env python3
"""
Discovery Data Validation Script

Read-only readiness checks for the discovery UI. Exits 1 when any check fails;
warnings alone still exit 0.

Usage:
    python scripts/validate_discovery_data.py
"""
import os
import sys

# Add parent directory to path to import offers_ops modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from offers_ops.services.discovery_validation import validate_discovery_data
from offers_ops.utils.job_runner import build_parser, run_job
from offers_ops.utils.report import STATUS_ICONS, print_validation_report


def validate(mongo, args) -> int:
    report = validate_discovery_data(mongo)
    for index, result in enumerate(report.checks, start=1):
        print(f"\n🔍 Check {index}: {result.name}...")
        print(f"   {STATUS_ICONS[result.status]} {result.message}")
    print_validation_report(report)
    return report.exit_code


def main(argv=None) -> int:
    parser = build_parser('Validate that seeded data meets discovery UI requirements')
    return run_job('Discovery Data Validation', validate, parser, argv)


if __name__ == '__main__':
    sys.exit(main())
