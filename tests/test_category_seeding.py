"""Unit tests for category page seeders and the page data check"""
import random
from datetime import datetime, timezone

import pytest
from faker import Faker

from offers_ops.seeds.category_metadata_seeds import MAIN_CATEGORY_SLUGS, VIBES_BY_CATEGORY
from offers_ops.services.category_metadata import migrate_category_metadata
from offers_ops.services.category_seeding import (
    build_legacy_rows,
    build_recent_buyers,
    check_category_page_data,
    seed_category_metadata,
    seed_social_proof_stats,
)


def add_main_categories(mongo, slugs=MAIN_CATEGORY_SLUGS):
    for slug in slugs:
        mongo.categories.insert_one({"_id": f"cat-{slug}", "slug": slug, "isActive": True})


def test_build_legacy_rows_numbers_sort_order():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    rows = build_legacy_rows("cat-1", "fashion", VIBES_BY_CATEGORY["fashion"], now)

    assert [r["sortOrder"] for r in rows] == list(range(len(rows)))
    assert all(r["categorySlug"] == "fashion" and r["isActive"] for r in rows)
    assert rows[0]["category"] == "cat-1"


def test_seed_category_metadata_skips_missing_categories(fake_mongo):
    add_main_categories(fake_mongo, ["fashion"])

    counts = seed_category_metadata(fake_mongo)

    assert counts["vibes"] == len(VIBES_BY_CATEGORY["fashion"])
    assert fake_mongo.category_vibes.count_documents({"categorySlug": "food-dining"}) == 0


def test_seed_category_metadata_does_not_duplicate(fake_mongo):
    add_main_categories(fake_mongo)
    seed_category_metadata(fake_mongo)
    before = fake_mongo.category_vibes.count_documents({})

    counts = seed_category_metadata(fake_mongo)

    assert counts == {"vibes": 0, "occasions": 0, "hashtags": 0}
    assert fake_mongo.category_vibes.count_documents({}) == before


def test_seed_category_metadata_clear_recreates(fake_mongo):
    add_main_categories(fake_mongo)
    seed_category_metadata(fake_mongo)
    before = fake_mongo.category_hashtags.count_documents({})

    counts = seed_category_metadata(fake_mongo, clear=True)

    assert counts["hashtags"] == before
    assert fake_mongo.category_hashtags.count_documents({}) == before


def test_seeded_rows_migrate_in_literal_order(fake_mongo):
    add_main_categories(fake_mongo)
    seed_category_metadata(fake_mongo)

    migrate_category_metadata(fake_mongo)

    fashion = fake_mongo.categories.find_one({"slug": "fashion"})
    assert [v["id"] for v in fashion["vibes"]] == [v["id"] for v in VIBES_BY_CATEGORY["fashion"]]


def test_build_recent_buyers_is_seeded():
    def buyers():
        fake = Faker("en_IN")
        fake.seed_instance(7)
        return build_recent_buyers(fake, random.Random(7))

    first = buyers()
    assert first == buyers()
    assert len(first) == 4
    assert first[0]["timeAgo"].endswith("mins ago")


def test_seed_social_proof_stats_uses_embedded_hashtags(fake_mongo):
    add_main_categories(fake_mongo, ["fashion", "fitness-sports"])
    fake_mongo.categories.update_one(
        {"_id": "cat-fashion"},
        {"$set": {"trendingHashtags": [{"tag": t} for t in ["#OOTD", "#Street", "#Ethnic", "#Extra"]]}},
    )

    seeded = seed_social_proof_stats(fake_mongo)

    assert seeded == 2
    fashion = fake_mongo.social_proof_stats.find_one({"category": "cat-fashion"})
    assert fashion["topHashtags"] == ["#OOTD", "#Street", "#Ethnic"]
    sports = fake_mongo.social_proof_stats.find_one({"category": "cat-fitness-sports"})
    assert sports["topHashtags"]


def test_seed_social_proof_stats_requires_clear_when_present(fake_mongo):
    add_main_categories(fake_mongo, ["fashion"])
    fake_mongo.social_proof_stats.insert_one({"category": "cat-fashion"})

    assert seed_social_proof_stats(fake_mongo) == 0
    assert seed_social_proof_stats(fake_mongo, clear=True) == 1
    assert fake_mongo.social_proof_stats.count_documents({}) == 1


def test_check_category_page_data_reports_gaps(fake_mongo):
    add_main_categories(fake_mongo, ["fashion"])
    fake_mongo.categories.update_one(
        {"_id": "cat-fashion"},
        {"$set": {"vibes": [{"id": "a"}], "occasions": [{"id": "b"}], "trendingHashtags": []}},
    )

    result = check_category_page_data(fake_mongo)

    fashion = next(r for r in result["rows"] if r["slug"] == "fashion")
    assert fashion["vibes"] == 1
    assert fashion["hashtags"] == 0
    assert "fashion has no hashtags" in result["issues"]
    assert "fashion has no social proof stats" in result["issues"]
    assert result["missing"] == len(MAIN_CATEGORY_SLUGS) - 1


def test_seeders_require_main_categories(fake_mongo):
    with pytest.raises(ValueError, match="No main categories found"):
        seed_category_metadata(fake_mongo)
    with pytest.raises(ValueError, match="No main categories found"):
        seed_social_proof_stats(fake_mongo)
