"""Seed data backing the discovery readiness checks"""
import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from faker import Faker

from offers_ops.infra.mongo import MongoDBClient
from offers_ops.services.store_backfill import CITY_COORDINATES
from offers_ops.utils.mongo_helpers import clear_collection, insert_batch

logger = logging.getLogger(__name__)

SEARCH_QUERIES = [
    "biryani", "pizza near me", "coffee", "running shoes", "skincare",
    "gym membership", "salon", "grocery delivery", "headphones", "movie tickets",
    "spa", "sushi", "kurta", "protein powder", "yoga classes",
    "home cleaning", "laptop bag", "birthday cake", "flights to goa", "credit card offers",
]

ACTIVITY_TYPES = ["purchase", "cashback_earned", "review", "check_in"]

BNPL_STORE_COUNT = 25


def build_search_history(fake: Faker, rng: random.Random, count: int, now: datetime) -> List[Dict]:
    entries = []
    for _ in range(count):
        entries.append({
            "query": rng.choice(SEARCH_QUERIES),
            "userId": fake.uuid4(),
            "resultCount": rng.randint(0, 120),
            "city": rng.choice(list(CITY_COORDINATES)),
            "createdAt": now - timedelta(minutes=rng.randint(0, 7 * 24 * 60)),
        })
    return entries


def build_nearby_activity(fake: Faker, rng: random.Random, per_city: int, now: datetime) -> List[Dict]:
    activities = []
    for city, (lng, lat) in CITY_COORDINATES.items():
        for _ in range(per_city):
            activities.append({
                "city": city,
                "period": "today",
                "type": rng.choice(ACTIVITY_TYPES),
                "userName": f"{fake.first_name()} {fake.last_name()[0]}.",
                "amount": rng.randint(50, 2500),
                "location": {"type": "Point", "coordinates": [lng, lat]},
                "createdAt": now - timedelta(minutes=rng.randint(0, 12 * 60)),
            })
    return activities


def enable_bnpl_stores(mongo: MongoDBClient, limit: int = BNPL_STORE_COUNT) -> int:
    """Turn on pay-later for the first active stores by _id"""
    store_ids = [s["_id"] for s in mongo.stores.find({"isActive": True}, {"_id": 1}).sort("_id", 1).limit(limit)]
    if not store_ids:
        logger.warning("No active stores found, BNPL not enabled anywhere")
        return 0

    result = mongo.stores.update_many(
        {"_id": {"$in": store_ids}},
        {
            "$set": {"paymentSettings.acceptPayLater": True},
            "$addToSet": {"operationalInfo.paymentMethods": "bnpl"},
        },
    )
    return result.modified_count


def seed_discovery_data(
    mongo: MongoDBClient,
    clear: bool = False,
    seed: int = 42,
    now: Optional[datetime] = None,
) -> Dict[str, int]:
    """Seed search history, today's nearby activity and BNPL stores"""
    fake = Faker("en_IN")
    fake.seed_instance(seed)
    rng = random.Random(seed)
    now = now or datetime.now(timezone.utc)

    if clear:
        clear_collection(mongo.search_histories)
        clear_collection(mongo.nearby_activities)

    counts = {"Search History": 0, "Nearby Activity": 0}

    if mongo.search_histories.count_documents({}) == 0:
        counts["Search History"] = len(
            insert_batch(mongo.search_histories, build_search_history(fake, rng, 60, now))
        )
    else:
        print("  search_histories already seeded, use --clear to recreate")

    if mongo.nearby_activities.count_documents({"period": "today"}) == 0:
        counts["Nearby Activity"] = len(
            insert_batch(mongo.nearby_activities, build_nearby_activity(fake, rng, 3, now))
        )
    else:
        print("  nearby_activities already seeded, use --clear to recreate")

    counts["BNPL Stores"] = enable_bnpl_stores(mongo)
    return counts
