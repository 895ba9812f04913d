"""Seeding and inspection of category page data"""
import logging
import random
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from faker import Faker

from offers_ops.infra.mongo import MongoDBClient
from offers_ops.seeds.category_metadata_seeds import (
    HASHTAGS_BY_CATEGORY,
    MAIN_CATEGORY_SLUGS,
    OCCASIONS_BY_CATEGORY,
    VIBES_BY_CATEGORY,
)
from offers_ops.seeds.offer_seeds import DEFAULT_TOP_HASHTAGS
from offers_ops.utils.logging_utils import log_db_operation
from offers_ops.utils.mongo_helpers import clear_collection, insert_batch

logger = logging.getLogger(__name__)

RECENT_BUYER_AVATARS = ["👩", "👨", "👩‍🦱", "🧔"]
RECENT_BUYER_ITEMS = ["Blue Dress", "Running Shoes", "Skincare Set", "Laptop Bag", "Coffee Maker"]


def main_categories_by_slug(mongo: MongoDBClient) -> Dict[str, Dict[str, Any]]:
    categories = mongo.categories.find({"slug": {"$in": MAIN_CATEGORY_SLUGS}})
    return {category["slug"]: category for category in categories}


def build_legacy_rows(
    category_id: Any,
    slug: str,
    items: List[Dict[str, Any]],
    now: datetime,
) -> List[Dict[str, Any]]:
    """Legacy rows for one category; sortOrder follows the literal order"""
    return [
        {
            **item,
            "category": category_id,
            "categorySlug": slug,
            "sortOrder": index,
            "isActive": True,
            "createdAt": now,
            "updatedAt": now,
        }
        for index, item in enumerate(items)
    ]


def seed_category_metadata(mongo: MongoDBClient, clear: bool = False) -> Dict[str, int]:
    """
    Seed legacy vibe, occasion and hashtag rows for the main categories.

    Without --clear, a category that already has rows in a collection is left
    alone so repeated runs do not duplicate rows.
    """
    sources = [
        (mongo.category_vibes, VIBES_BY_CATEGORY, "vibes"),
        (mongo.category_occasions, OCCASIONS_BY_CATEGORY, "occasions"),
        (mongo.category_hashtags, HASHTAGS_BY_CATEGORY, "hashtags"),
    ]

    categories = main_categories_by_slug(mongo)
    log_db_operation(logger, "find", "categories", result_count=len(categories))
    if not categories:
        raise ValueError("No main categories found, seed categories before their metadata")
    print(f"Found {len(categories)}/{len(MAIN_CATEGORY_SLUGS)} main categories")

    if clear:
        for collection, _, _ in sources:
            clear_collection(collection, {"categorySlug": {"$in": MAIN_CATEGORY_SLUGS}})

    now = datetime.now(timezone.utc)
    counts = {label: 0 for _, _, label in sources}

    for collection, data, label in sources:
        for slug, items in data.items():
            category = categories.get(slug)
            if category is None:
                logger.warning(f"Category {slug} not found, skipping {label}")
                print(f"  ⚠ Skipping {label} for {slug}: category not found")
                continue

            if not clear and collection.count_documents({"categorySlug": slug}) > 0:
                print(f"  {slug} already has {label}, skipping")
                continue

            rows = build_legacy_rows(category["_id"], slug, items, now)
            insert_batch(collection, rows)
            counts[label] += len(rows)

    return counts


def build_recent_buyers(fake: Faker, rng: random.Random, count: int = 4) -> List[Dict[str, str]]:
    buyers = []
    minutes = 0
    for _ in range(count):
        minutes += rng.randint(2, 5)
        buyers.append({
            "name": f"{fake.first_name()} {fake.last_name()[0]}.",
            "avatar": rng.choice(RECENT_BUYER_AVATARS),
            "item": rng.choice(RECENT_BUYER_ITEMS),
            "timeAgo": f"{minutes} mins ago",
        })
    return buyers


def seed_social_proof_stats(mongo: MongoDBClient, clear: bool = False, seed: int = 42) -> int:
    """Replace social proof stats for every main category present"""
    if not clear and mongo.social_proof_stats.count_documents({}) > 0:
        print("WARNING: Social proof stats already exist. Use --clear to delete and recreate.")
        return 0

    fake = Faker("en_IN")
    fake.seed_instance(seed)
    rng = random.Random(seed)

    categories = main_categories_by_slug(mongo)
    if not categories:
        raise ValueError("No main categories found, seed categories before social proof stats")

    clear_collection(mongo.social_proof_stats)

    now = datetime.now(timezone.utc)
    stats = []
    for category in categories.values():
        top_hashtags = [h["tag"] for h in (category.get("trendingHashtags") or [])[:3]]
        stats.append({
            "category": category["_id"],
            "shoppedToday": rng.randint(1000, 5000),
            "totalEarned": rng.randint(20000, 100000),
            "topHashtags": top_hashtags or list(DEFAULT_TOP_HASHTAGS),
            "recentBuyers": build_recent_buyers(fake, rng),
            "createdAt": now,
            "updatedAt": now,
        })

    return len(insert_batch(mongo.social_proof_stats, stats))


def check_category_page_data(mongo: MongoDBClient) -> Dict[str, Any]:
    """
    Inspect each main category for embedded metadata and social proof stats.

    Returns:
        {"rows": [...per slug...], "issues": [...], "missing": int}
    """
    categories = main_categories_by_slug(mongo)
    rows: List[Dict[str, Any]] = []
    issues: List[str] = []

    for slug in MAIN_CATEGORY_SLUGS:
        category: Optional[Dict[str, Any]] = categories.get(slug)
        if category is None:
            issues.append(f"Missing category: {slug}")
            rows.append({"slug": slug, "exists": False})
            continue

        row = {
            "slug": slug,
            "exists": True,
            "vibes": len(category.get("vibes") or []),
            "occasions": len(category.get("occasions") or []),
            "hashtags": len(category.get("trendingHashtags") or []),
            "socialProof": mongo.social_proof_stats.count_documents({"category": category["_id"]}) > 0,
        }
        for field in ("vibes", "occasions", "hashtags"):
            if row[field] == 0:
                issues.append(f"{slug} has no {field}")
        if not row["socialProof"]:
            issues.append(f"{slug} has no social proof stats")
        rows.append(row)

    return {
        "rows": rows,
        "issues": issues,
        "missing": sum(1 for row in rows if not row["exists"]),
    }
