"""Console report formatting shared by the maintenance jobs"""
from typing import Dict

from offers_ops.models.mongodb_schemas import CheckStatus, ConsolidationReport, ValidationReport

STATUS_ICONS = {
    CheckStatus.PASS: "✅",
    CheckStatus.WARNING: "⚠️ ",
    CheckStatus.FAIL: "❌",
}


def print_banner(title: str, width: int = 60):
    print("=" * width)
    print(title)
    print("=" * width)


def print_section(title: str):
    print(f"\n━━━ {title} ━━━\n")


def print_count_table(counts: Dict[str, int], heading: str = "Collection"):
    """Print a two-column box table of name/count pairs"""
    name_width = max([len(heading)] + [len(name) for name in counts]) + 2
    print(f"┌{'─' * name_width}┬───────┐")
    print(f"│ {heading.ljust(name_width - 1)}│ Count │")
    print(f"├{'─' * name_width}┼───────┤")
    for name, count in counts.items():
        print(f"│ {name.ljust(name_width - 1)}│ {str(count).rjust(5)} │")
    print(f"└{'─' * name_width}┴───────┘")


def print_validation_report(report: ValidationReport):
    print()
    print_banner("📊 VALIDATION SUMMARY")

    for result in report.checks:
        print(f"{STATUS_ICONS[result.status]} {result.status.value.upper().ljust(7)} - {result.name}")
        print(f"   {result.message}")
        if result.progress is not None:
            print(f"   Progress: {result.measured}/{result.target} ({result.progress}%)")
        print()

    print("=" * 60)
    print(f"Total Checks: {len(report.checks)}")
    print(f"✅ Passed: {report.passed}")
    print(f"⚠️  Warnings: {report.warnings}")
    print(f"❌ Failed: {report.failed}")
    print("=" * 60)

    if report.failed:
        print("\n❌ Some validation checks failed. Please review and fix issues.")
    elif report.warnings:
        print("\n⚠️  Some checks have warnings, but discovery UI should work.")
    else:
        print("\n🎉 All validation checks passed! Discovery UI is ready to use.")


def print_consolidation_report(report: ConsolidationReport):
    print_section("Summary")
    print_count_table(
        {
            "Categories Migrated": len(report.migrated),
            "Categories Skipped": len(report.skipped),
            "Categories Failed": len(report.errors),
            "Vibes": sum(m.vibes for m in report.migrated),
            "Occasions": sum(m.occasions for m in report.migrated),
            "Hashtags": sum(m.hashtags for m in report.migrated),
        },
        heading="Data Type",
    )
    for category_id, error in report.errors.items():
        print(f"  ✗ {category_id}: {error}")
    print(f"\nMigration complete: {len(report.migrated)} migrated, {len(report.skipped)} skipped")
