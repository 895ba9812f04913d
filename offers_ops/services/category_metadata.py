"""
Category metadata consolidation

Moves rows from the legacy categoryvibes, categoryoccasions and
categoryhashtags collections onto embedded arrays of their owning category:

    categoryvibes      -> categories.vibes
    categoryoccasions  -> categories.occasions
    categoryhashtags   -> categories.trendingHashtags

Each category is migrated independently. Legacy rows are left in place so the
job can be re-run; the embedded arrays are replaced, never merged.
"""
import logging
from typing import Any, Dict, List, Optional, Type

import pymongo
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from offers_ops.infra.mongo import MongoDBClient
from offers_ops.models.mongodb_schemas import (
    CategoryHashtagRow,
    CategoryMigration,
    CategoryOccasionRow,
    CategoryVibeRow,
    ConsolidationReport,
    EmbeddedHashtag,
    EmbeddedOccasion,
    EmbeddedVibe,
    LegacyMetadataRow,
)
from offers_ops.utils.logging_utils import log_db_operation, log_error_with_context

logger = logging.getLogger(__name__)

ACTIVE_SORT = [("sortOrder", pymongo.ASCENDING), ("_id", pymongo.ASCENDING)]


def _row_order(row: LegacyMetadataRow):
    # Missing sortOrder was defaulted to 0; _id breaks ties
    return (row.sort_order, str(row.row_id))


def fetch_active_rows(collection, slug: str, row_model: Type[LegacyMetadataRow]) -> List[LegacyMetadataRow]:
    """
    Load and validate the active legacy rows for one category slug.

    Raises:
        ValidationError: a row is missing a required field or carries a bad value
    """
    docs = collection.find({"categorySlug": slug, "isActive": True}).sort(ACTIVE_SORT)
    rows = [row_model.model_validate(doc) for doc in docs]
    return sorted(rows, key=_row_order)


def project_vibes(rows: List[CategoryVibeRow]) -> List[Dict[str, Any]]:
    vibes = []
    for r in rows:
        fields = {"id": r.id, "name": r.name, "icon": r.icon, "color": r.color}
        # description stays absent unless the legacy row carries it
        if "description" in r.model_fields_set:
            fields["description"] = r.description
        vibes.append(EmbeddedVibe(**fields).model_dump(exclude_unset=True))
    return vibes


def project_occasions(rows: List[CategoryOccasionRow]) -> List[Dict[str, Any]]:
    return [
        EmbeddedOccasion(
            id=r.id, name=r.name, icon=r.icon, color=r.color, tag=r.tag, discount=r.discount
        ).model_dump()
        for r in rows
    ]


def project_hashtags(rows: List[CategoryHashtagRow]) -> List[Dict[str, Any]]:
    return [
        EmbeddedHashtag(
            id=r.id, tag=r.tag, count=r.count, color=r.color, trending=r.trending
        ).model_dump()
        for r in rows
    ]


def build_embedded_metadata(mongo: MongoDBClient, slug: str) -> Dict[str, List[Dict[str, Any]]]:
    """Return the three embedded arrays for a category, in display order"""
    vibes = fetch_active_rows(mongo.category_vibes, slug, CategoryVibeRow)
    occasions = fetch_active_rows(mongo.category_occasions, slug, CategoryOccasionRow)
    hashtags = fetch_active_rows(mongo.category_hashtags, slug, CategoryHashtagRow)

    return {
        "vibes": project_vibes(vibes),
        "occasions": project_occasions(occasions),
        "trendingHashtags": project_hashtags(hashtags),
    }


def migrate_category(mongo: MongoDBClient, category: Dict[str, Any]) -> Optional[CategoryMigration]:
    """
    Migrate one category's legacy metadata onto the category document.

    Returns:
        Item counts written, or None when the category had no active rows
        and was left untouched.
    """
    slug = category["slug"]
    embedded = build_embedded_metadata(mongo, slug)

    if not any(embedded.values()):
        return None

    mongo.categories.update_one({"_id": category["_id"]}, {"$set": embedded})

    return CategoryMigration(
        slug=slug,
        vibes=len(embedded["vibes"]),
        occasions=len(embedded["occasions"]),
        hashtags=len(embedded["trendingHashtags"]),
    )


def migrate_category_metadata(mongo: MongoDBClient) -> ConsolidationReport:
    """Migrate every category, isolating failures per category"""
    report = ConsolidationReport()

    categories = list(mongo.categories.find({}, {"_id": 1, "slug": 1}))
    log_db_operation(logger, "find", "categories", result_count=len(categories))
    print(f"Found {len(categories)} categories to migrate")

    for category in categories:
        slug = category.get("slug")
        if not slug:
            report.errors[str(category.get("_id"))] = "category has no slug"
            print(f"  ✗ Category {category.get('_id')} has no slug")
            continue

        try:
            migration = migrate_category(mongo, category)
        except (ValidationError, PyMongoError) as e:
            log_error_with_context(logger, e, "category_migration_failed", {"slug": slug})
            report.errors[str(category["_id"])] = f"{slug}: {e}"
            print(f"  ✗ Failed {slug}: {e}")
            continue

        if migration is None:
            report.skipped.append(slug)
            logger.warning(f"No active legacy metadata for category {slug}")
            print(f"  ⚠ Skipped {slug}: No metadata found")
        else:
            report.migrated.append(migration)
            print(
                f"  ✓ Migrated {slug}: {migration.vibes} vibes, "
                f"{migration.occasions} occasions, {migration.hashtags} hashtags"
            )

    return report
