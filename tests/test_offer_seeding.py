"""Unit tests for offers page, exclusive offer and mall brand seeders"""
import random
from datetime import datetime, timedelta, timezone

from offers_ops.models.mongodb_schemas import FlashSaleStatus, TargetAudience
from offers_ops.seeds.mall_seeds import MALL_BRANDS, MALL_CATEGORIES
from offers_ops.seeds.offer_seeds import EXCLUSIVE_OFFERS, FLASH_SALE_DEALS, FRIEND_REDEMPTIONS, PROMO_COUPONS
from offers_ops.services.offer_seeding import (
    build_coupons,
    build_flash_sales,
    build_friend_redemptions,
    build_mall_brand,
    seed_exclusive_offers,
    seed_mall_brands,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def test_build_flash_sales_links_found_stores():
    sales = build_flash_sales({"dominos": "store-dominos"}, NOW)

    assert len(sales) == len(FLASH_SALE_DEALS)
    pizza = sales[0]
    assert pizza["stores"] == ["store-dominos"]
    assert pizza["endTime"] == NOW + timedelta(hours=FLASH_SALE_DEALS[0]["hours"])
    assert "store" not in pizza and "hours" not in pizza
    assert all(sale["stores"] == [] for sale in sales[1:])


def test_build_coupons_sets_validity_and_creator():
    coupons = build_coupons({}, "admin", NOW)

    assert len(coupons) == len(PROMO_COUPONS)
    assert coupons[0]["createdBy"] == "admin"
    assert coupons[0]["validTo"] == NOW + timedelta(days=PROMO_COUPONS[0]["valid_days"])
    assert "valid_days" not in coupons[0]


def test_build_friend_redemptions_fills_missing_ids():
    redemptions = build_friend_redemptions(["u0", "u1"], ["o0"], NOW)

    assert len(redemptions) == len(FRIEND_REDEMPTIONS)
    assert all(r["userId"] == "u0" for r in redemptions)
    assert redemptions[0]["friendId"] == "u1"
    assert redemptions[0]["offerId"] == "o0"
    assert redemptions[1]["friendId"] is not None
    assert redemptions[0]["redeemedAt"] == NOW - timedelta(hours=FRIEND_REDEMPTIONS[0]["hours_ago"])


def test_seed_exclusive_offers_links_active_categories(fake_mongo):
    fake_mongo.categories.insert_many([{"_id": f"c{i}", "isActive": True} for i in range(13)])

    seeded = seed_exclusive_offers(fake_mongo, now=NOW)

    assert seeded == len(EXCLUSIVE_OFFERS)
    offer = fake_mongo.exclusive_offers.find_one({})
    assert len(offer["categories"]) == 11
    assert offer["validTo"] == NOW + timedelta(days=365)


def test_seed_exclusive_offers_guarded_without_clear(fake_mongo):
    fake_mongo.exclusive_offers.insert_one({"title": "existing"})

    assert seed_exclusive_offers(fake_mongo, now=NOW) == 0
    assert fake_mongo.exclusive_offers.count_documents({}) == 1


def test_build_mall_brand_derives_flags():
    apple = next(b for b in MALL_BRANDS if b["slug"] == "apple")
    zara = next(b for b in MALL_BRANDS if b["slug"] == "zara")

    apple_doc = build_mall_brand(apple, "cat-electronics", random.Random(1))
    zara_doc = build_mall_brand(zara, "cat-fashion", random.Random(1))

    assert apple_doc["isLuxury"] is True
    assert apple_doc["isNewArrival"] is False
    assert zara_doc["isNewArrival"] is True
    assert "categorySlug" not in apple_doc
    assert 4.0 <= apple_doc["ratings"]["average"] <= 4.8


def test_seed_mall_brands_is_idempotent(fake_mongo):
    first = seed_mall_brands(fake_mongo)
    second = seed_mall_brands(fake_mongo)

    assert first["created"] == len(MALL_BRANDS)
    assert second["created"] == 0
    assert second["brands"] == len(MALL_BRANDS)
    assert second["categories"] == len(MALL_CATEGORIES)
    fashion = fake_mongo.mall_categories.find_one({"slug": "fashion"})
    assert fashion["brandCount"] == 2


def test_seed_statuses_and_audiences_use_enum_values():
    assert {deal["status"] for deal in FLASH_SALE_DEALS} <= {s.value for s in FlashSaleStatus}
    assert {offer["targetAudience"] for offer in EXCLUSIVE_OFFERS} == {a.value for a in TargetAudience}
