"""Unit tests for the category metadata consolidation"""
import pytest
from pydantic import ValidationError

from offers_ops.models.mongodb_schemas import CategoryVibeRow
from offers_ops.services.category_metadata import (
    fetch_active_rows,
    migrate_category_metadata,
)


@pytest.fixture
def food_dining(fake_mongo, vibe_row):
    fake_mongo.categories.insert_one({"_id": "cat-food", "slug": "food-dining", "name": "Food & Dining"})
    fake_mongo.category_vibes.insert_many([
        vibe_row("food-dining", "fine-dining", sort_order=2),
        vibe_row("food-dining", "romantic", sort_order=1),
    ])
    fake_mongo.category_occasions.insert_one({
        "id": "date-night", "name": "Date Night", "icon": "💕", "color": "#EC4899",
        "tag": "Popular", "discount": 20,
        "categorySlug": "food-dining", "sortOrder": 0, "isActive": True,
    })
    fake_mongo.category_hashtags.insert_one({
        "id": "foodie", "tag": "#Foodie", "count": 1200, "color": "#F97316", "trending": True,
        "categorySlug": "food-dining", "sortOrder": 0, "isActive": True,
    })
    return fake_mongo


def test_embedded_vibes_follow_sort_order(food_dining):
    """Test rows are embedded in ascending sortOrder"""
    report = migrate_category_metadata(food_dining)

    category = food_dining.categories.find_one({"slug": "food-dining"})
    assert [v["id"] for v in category["vibes"]] == ["romantic", "fine-dining"]
    assert report.migrated[0].slug == "food-dining"
    assert report.migrated[0].vibes == 2
    assert report.exit_code == 0


def test_embedded_items_drop_bookkeeping_fields(food_dining):
    """Test only display fields are copied onto the category"""
    migrate_category_metadata(food_dining)

    category = food_dining.categories.find_one({"slug": "food-dining"})
    assert set(category["vibes"][0]) == {"id", "name", "icon", "color", "description"}
    assert category["occasions"] == [{
        "id": "date-night", "name": "Date Night", "icon": "💕", "color": "#EC4899",
        "tag": "Popular", "discount": 20.0,
    }]
    assert category["trendingHashtags"] == [{
        "id": "foodie", "tag": "#Foodie", "count": 1200, "color": "#F97316", "trending": True,
    }]


def test_inactive_rows_are_not_embedded(food_dining, vibe_row):
    food_dining.category_vibes.insert_one(vibe_row("food-dining", "retired", sort_order=0, isActive=False))

    migrate_category_metadata(food_dining)

    category = food_dining.categories.find_one({"slug": "food-dining"})
    assert "retired" not in [v["id"] for v in category["vibes"]]


def test_category_without_rows_is_skipped_untouched(food_dining):
    """Test a category with no active rows is reported and left alone"""
    food_dining.categories.insert_one({"_id": "cat-pets", "slug": "pets"})

    report = migrate_category_metadata(food_dining)

    assert report.skipped == ["pets"]
    pets = food_dining.categories.find_one({"slug": "pets"})
    assert "vibes" not in pets
    assert "occasions" not in pets
    assert "trendingHashtags" not in pets
    assert ("cat-pets" not in [q["_id"] for q, _ in food_dining.categories.update_calls])


def test_partial_metadata_writes_all_three_arrays(fake_mongo, vibe_row):
    fake_mongo.categories.insert_one({"_id": "cat-fashion", "slug": "fashion"})
    fake_mongo.category_vibes.insert_one(vibe_row("fashion", "street-style"))

    report = migrate_category_metadata(fake_mongo)

    category = fake_mongo.categories.find_one({"slug": "fashion"})
    assert len(category["vibes"]) == 1
    assert category["occasions"] == []
    assert category["trendingHashtags"] == []
    assert report.migrated[0].occasions == 0


def test_rerun_replaces_rather_than_appends(food_dining):
    """Test running the migration twice leaves the same embedded arrays"""
    migrate_category_metadata(food_dining)
    first = food_dining.categories.find_one({"slug": "food-dining"})

    report = migrate_category_metadata(food_dining)
    second = food_dining.categories.find_one({"slug": "food-dining"})

    assert second == first
    assert len(second["vibes"]) == 2
    assert report.exit_code == 0


def test_write_failure_is_isolated_to_one_category(food_dining, vibe_row):
    """Test a failed update is recorded and later categories still migrate"""
    food_dining.categories.insert_one({"_id": "cat-fashion", "slug": "fashion"})
    food_dining.category_vibes.insert_one(vibe_row("fashion", "street-style"))
    food_dining.categories.fail_update_for.add("cat-food")

    report = migrate_category_metadata(food_dining)

    assert report.errors["cat-food"].startswith("food-dining: ")
    assert [m.slug for m in report.migrated] == ["fashion"]
    assert report.exit_code == 1
    assert "vibes" not in food_dining.categories.find_one({"slug": "food-dining"})


def test_malformed_row_fails_only_its_category(food_dining, vibe_row):
    food_dining.categories.insert_one({"_id": "cat-beauty", "slug": "beauty-wellness"})
    food_dining.category_vibes.insert_one(vibe_row("beauty-wellness", "glow", color="orange"))

    report = migrate_category_metadata(food_dining)

    assert report.errors["cat-beauty"].startswith("beauty-wellness: ")
    assert [m.slug for m in report.migrated] == ["food-dining"]


def test_category_without_slug_is_an_error(fake_mongo):
    fake_mongo.categories.insert_one({"_id": "cat-orphan", "name": "Orphan"})

    report = migrate_category_metadata(fake_mongo)

    assert report.errors == {"cat-orphan": "category has no slug"}


def test_missing_sort_order_sorts_first_with_id_tiebreak(fake_mongo, vibe_row):
    """Test a row without sortOrder is treated as 0 and ties use _id"""
    fake_mongo.category_vibes.insert_many([
        vibe_row("grocery-essentials", "organic", sort_order=1, _id="b"),
        vibe_row("grocery-essentials", "bulk", sort_order=None, _id="c"),
        vibe_row("grocery-essentials", "fresh", sort_order=0, _id="a"),
    ])

    rows = fetch_active_rows(fake_mongo.category_vibes, "grocery-essentials", CategoryVibeRow)

    assert [r.id for r in rows] == ["fresh", "bulk", "organic"]
    assert rows[1].sort_order == 0


def test_row_without_category_slug_is_rejected():
    with pytest.raises(ValidationError):
        CategoryVibeRow.model_validate({"id": "x", "name": "X", "icon": "x", "color": "#FFF"})


def test_fractional_sort_order_is_accepted(fake_mongo, vibe_row):
    """Test non-integer sortOrder values migrate in ascending order"""
    fake_mongo.categories.insert_one({"_id": "cat-food", "slug": "food-dining"})
    fake_mongo.category_vibes.insert_many([
        vibe_row("food-dining", "fine-dining", sort_order=2),
        vibe_row("food-dining", "romantic", sort_order=1.5),
    ])

    report = migrate_category_metadata(fake_mongo)

    assert report.errors == {}
    category = fake_mongo.categories.find_one({"slug": "food-dining"})
    assert [v["id"] for v in category["vibes"]] == ["romantic", "fine-dining"]


def test_vibe_without_description_omits_the_field(fake_mongo, vibe_row):
    fake_mongo.categories.insert_one({"_id": "cat-fashion", "slug": "fashion"})
    row = vibe_row("fashion", "street-style")
    del row["description"]
    fake_mongo.category_vibes.insert_one(row)
    fake_mongo.category_occasions.insert_one({
        "id": "wedding", "name": "Wedding", "icon": "💍", "color": "#EC4899", "discount": 10,
        "categorySlug": "fashion", "sortOrder": 0, "isActive": True,
    })

    migrate_category_metadata(fake_mongo)

    category = fake_mongo.categories.find_one({"slug": "fashion"})
    assert "description" not in category["vibes"][0]
    assert category["occasions"][0]["tag"] is None


def test_duplicate_slug_failures_are_each_recorded(fake_mongo, vibe_row):
    """Test two failing categories sharing a slug both appear in the report"""
    fake_mongo.categories.insert_many([
        {"_id": "cat-x1", "slug": "x"},
        {"_id": "cat-x2", "slug": "x"},
    ])
    fake_mongo.category_vibes.insert_one(vibe_row("x", "only"))
    fake_mongo.categories.fail_update_for.update({"cat-x1", "cat-x2"})

    report = migrate_category_metadata(fake_mongo)

    assert set(report.errors) == {"cat-x1", "cat-x2"}
    assert report.exit_code == 1


def test_category_with_only_inactive_rows_is_skipped_untouched(fake_mongo, vibe_row):
    """Test a category whose legacy rows are all inactive is left as it was"""
    fake_mongo.categories.insert_one({"_id": "cat-home", "slug": "home-services", "name": "Home Services"})
    fake_mongo.category_vibes.insert_one(vibe_row("home-services", "cleaning", isActive=False))
    fake_mongo.category_hashtags.insert_one({
        "id": "homecare", "tag": "#HomeCare", "count": 5, "color": "#3B82F6",
        "categorySlug": "home-services", "sortOrder": 0, "isActive": False,
    })
    before = fake_mongo.categories.find_one({"slug": "home-services"})

    report = migrate_category_metadata(fake_mongo)

    assert report.skipped == ["home-services"]
    assert report.migrated == []
    assert fake_mongo.categories.find_one({"slug": "home-services"}) == before
    assert fake_mongo.categories.update_calls == []
