"""Seeders for offers page, exclusive offers and mall brands"""
import logging
import random
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId

from offers_ops.infra.mongo import MongoDBClient
from offers_ops.models.mongodb_schemas import BrandTier
from offers_ops.seeds.mall_seeds import MALL_BRANDS, MALL_CATEGORIES
from offers_ops.seeds.offer_seeds import (
    ADMIN_USER,
    EXCLUSIVE_OFFERS,
    FLASH_SALE_DEALS,
    FRIEND_REDEMPTIONS,
    PROMO_COUPON_CODES,
    PROMO_COUPONS,
    SAMPLE_USERS,
    STORE_NAME_FRAGMENTS,
)
from offers_ops.utils.logging_utils import log_db_operation
from offers_ops.utils.mongo_helpers import clear_collection, insert_batch

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# Exclusive offers
# ============================================================================

def seed_exclusive_offers(mongo: MongoDBClient, clear: bool = False, now: Optional[datetime] = None) -> int:
    """Replace exclusive offers, linking each to up to 11 active categories"""
    now = now or _utcnow()

    if not clear and mongo.exclusive_offers.count_documents({}) > 0:
        print("WARNING: Exclusive offers already exist. Use --clear to delete and recreate.")
        return 0
    clear_collection(mongo.exclusive_offers)

    category_ids = [c["_id"] for c in mongo.categories.find({"isActive": True}, {"_id": 1}).limit(11)]
    log_db_operation(logger, "find", "categories", result_count=len(category_ids))

    offers = [
        {
            **offer,
            "categories": category_ids,
            "validFrom": now,
            "validTo": now + timedelta(days=365),
            "isActive": True,
            "sortOrder": 0,
        }
        for offer in EXCLUSIVE_OFFERS
    ]
    return len(insert_batch(mongo.exclusive_offers, offers))


# ============================================================================
# Mall categories and brands
# ============================================================================

def ensure_mall_categories(mongo: MongoDBClient) -> Dict[str, ObjectId]:
    """Return slug -> _id for mall categories, creating any that are missing"""
    category_map = {c["slug"]: c["_id"] for c in mongo.mall_categories.find({}, {"slug": 1})}
    print(f"Found {len(category_map)} existing categories")

    for category in MALL_CATEGORIES:
        if category["slug"] in category_map:
            continue
        result = mongo.mall_categories.insert_one({**category, "isActive": True, "brandCount": 0})
        category_map[category["slug"]] = result.inserted_id
        print(f"  Created category: {category['name']} ({result.inserted_id})")

    return category_map


def build_mall_brand(brand: Dict[str, Any], category_id: ObjectId, rng: random.Random) -> Dict[str, Any]:
    fields = {k: v for k, v in brand.items() if k != "categorySlug"}
    return {
        **fields,
        "banner": [],
        "mallCategory": category_id,
        "isActive": True,
        "isFeatured": True,
        "isLuxury": brand["tier"] == BrandTier.LUXURY.value,
        "isNewArrival": "new" in brand["badges"],
        "ratings": {
            "average": round(4.0 + rng.random() * 0.8, 1),
            "count": 100 + rng.randint(0, 499),
            "successRate": round(95 + rng.random() * 5, 1),
            "distribution": {"5": 60, "4": 25, "3": 10, "2": 3, "1": 2},
        },
        "analytics": {
            "views": 0,
            "clicks": 0,
            "purchases": 0,
            "totalCashbackGiven": 0,
            "conversionRate": 0,
        },
    }


def seed_mall_brands(mongo: MongoDBClient, clear: bool = False, seed: int = 42) -> Dict[str, int]:
    """
    Ensure mall categories and brands exist and refresh brand counts.

    A brand whose category is not seeded is skipped with a warning.
    """
    rng = random.Random(seed)
    if clear:
        clear_collection(mongo.mall_brands, {"slug": {"$in": [b["slug"] for b in MALL_BRANDS]}})

    category_map = ensure_mall_categories(mongo)
    existing_slugs = set(mongo.mall_brands.distinct("slug"))
    created = 0

    for brand in MALL_BRANDS:
        if brand["slug"] in existing_slugs:
            print(f"  Brand exists: {brand['name']}")
            continue

        category_id = category_map.get(brand["categorySlug"])
        if category_id is None:
            logger.warning(f"Skipping brand {brand['slug']}: category {brand['categorySlug']} not found")
            print(f"  Skipping {brand['name']}: Category '{brand['categorySlug']}' not found")
            continue

        result = mongo.mall_brands.insert_one(build_mall_brand(brand, category_id, rng))
        created += 1
        print(f"  Created brand: {brand['name']} ({result.inserted_id}) - {brand['tier']}")

    for slug, category_id in category_map.items():
        brand_count = mongo.mall_brands.count_documents({"mallCategory": category_id, "isActive": True})
        mongo.mall_categories.update_one({"_id": category_id}, {"$set": {"brandCount": brand_count}})
        print(f"  {slug}: {brand_count} brands")

    return {
        "categories": mongo.mall_categories.count_documents({}),
        "brands": mongo.mall_brands.count_documents({}),
        "featured": mongo.mall_brands.count_documents({"isFeatured": True, "isActive": True}),
        "created": created,
    }


# ============================================================================
# Offers page: flash sales, promo coupons, friend redemptions
# ============================================================================

def find_store_ids(mongo: MongoDBClient) -> Dict[str, ObjectId]:
    """Map store keys to _id by case-insensitive name match"""
    pattern = "|".join(re.escape(fragment) for fragment in STORE_NAME_FRAGMENTS.values())
    stores = mongo.stores.find({"name": {"$regex": pattern, "$options": "i"}}, {"name": 1})

    store_map: Dict[str, ObjectId] = {}
    for store in stores:
        name = store.get("name", "").lower()
        for key, fragment in STORE_NAME_FRAGMENTS.items():
            if fragment in name and key not in store_map:
                store_map[key] = store["_id"]

    print(f"Found stores: {sorted(store_map)}")
    return store_map


def get_or_create_admin_user(mongo: MongoDBClient) -> ObjectId:
    admin = mongo.users.find_one({"email": ADMIN_USER["email"]}, {"_id": 1})
    if admin:
        return admin["_id"]
    return mongo.users.insert_one(dict(ADMIN_USER)).inserted_id


def get_sample_user_ids(mongo: MongoDBClient) -> List[ObjectId]:
    users = list(mongo.users.find({}, {"_id": 1}).limit(5))
    if users:
        return [u["_id"] for u in users]
    return list(mongo.users.insert_many([dict(u) for u in SAMPLE_USERS]).inserted_ids)


def build_flash_sales(store_map: Dict[str, ObjectId], now: datetime) -> List[Dict[str, Any]]:
    flash_sales = []
    for deal in FLASH_SALE_DEALS:
        fields = {k: v for k, v in deal.items() if k not in ("store", "hours")}
        store_id = store_map.get(deal["store"])
        flash_sales.append({
            **fields,
            "startTime": now,
            "endTime": now + timedelta(hours=deal["hours"]),
            "products": [],
            "stores": [store_id] if store_id else [],
            "enabled": True,
            "minimumPurchase": 0,
            "notifyOnStart": True,
            "notifyOnEndingSoon": True,
            "notifyOnLowStock": True,
        })
    return flash_sales


def build_coupons(store_map: Dict[str, ObjectId], admin_id: ObjectId, now: datetime) -> List[Dict[str, Any]]:
    coupons = []
    for coupon in PROMO_COUPONS:
        fields = {k: v for k, v in coupon.items() if k not in ("store", "valid_days")}
        store_id = store_map.get(coupon["store"])
        coupons.append({
            **fields,
            "discountType": "PERCENTAGE",
            "discountValue": 33,
            "minOrderValue": 0,
            "validFrom": now,
            "validTo": now + timedelta(days=coupon["valid_days"]),
            "applicableTo": {
                "categories": [],
                "products": [],
                "stores": [store_id] if store_id else [],
                "userTiers": ["all"],
            },
            "autoApply": False,
            "autoApplyPriority": 0,
            "status": "active",
            "createdBy": admin_id,
            "isNewlyAdded": True,
        })
    return coupons


def build_friend_redemptions(
    user_ids: List[ObjectId],
    offer_ids: List[ObjectId],
    now: datetime,
) -> List[Dict[str, Any]]:
    """Redemptions by the first user's friends; placeholder ids fill any gaps"""
    owner_id = user_ids[0] if user_ids else ObjectId()
    fallback_offer_id = ObjectId()

    redemptions = []
    for index, redemption in enumerate(FRIEND_REDEMPTIONS):
        fields = {k: v for k, v in redemption.items() if k != "hours_ago"}
        friend_index = index + 1
        redemptions.append({
            **fields,
            "userId": owner_id,
            "friendId": user_ids[friend_index] if friend_index < len(user_ids) else ObjectId(),
            "offerId": offer_ids[index] if index < len(offer_ids) else fallback_offer_id,
            "redeemedAt": now - timedelta(hours=redemption["hours_ago"]),
            "isVisible": True,
        })
    return redemptions


def seed_offers_page(mongo: MongoDBClient, clear: bool = False, now: Optional[datetime] = None) -> Dict[str, int]:
    """Replace flash sales, promo coupons and friend redemptions"""
    now = now or _utcnow()

    if not clear and mongo.flash_sales.count_documents({}) > 0:
        print("WARNING: Flash sales already exist. Use --clear to delete and recreate.")
        return {}

    store_map = find_store_ids(mongo)
    missing = sorted(set(STORE_NAME_FRAGMENTS) - set(store_map))
    if missing:
        logger.warning(f"Stores not found for offers page seeds: {missing}")

    admin_id = get_or_create_admin_user(mongo)
    user_ids = get_sample_user_ids(mongo)
    offer_ids = [o["_id"] for o in mongo.offers.find({}, {"_id": 1}).limit(4)]

    print("\n📦 Seeding Flash Sales...")
    clear_collection(mongo.flash_sales)
    flash_sales = insert_batch(mongo.flash_sales, build_flash_sales(store_map, now))

    print("\n🎟️ Seeding Coupons (Promo Codes)...")
    clear_collection(mongo.coupons, {"couponCode": {"$in": PROMO_COUPON_CODES}})
    coupons = insert_batch(mongo.coupons, build_coupons(store_map, admin_id, now))

    print("\n👥 Seeding Friend Redemptions...")
    clear_collection(mongo.friend_redemptions)
    redemptions = insert_batch(mongo.friend_redemptions, build_friend_redemptions(user_ids, offer_ids, now))

    return {
        "Flash Sales": len(flash_sales),
        "Promo Coupons": len(coupons),
        "Friend Redemptions": len(redemptions),
    }
