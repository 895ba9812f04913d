"""Backfills for fields the discovery UI expects on store documents"""
import logging
import random
from typing import Any, Dict, List, Optional, Tuple

from offers_ops.infra.mongo import MongoDBClient
from offers_ops.utils.logging_utils import log_db_operation

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_METHODS = ["upi", "card", "wallet", "cash"]

# [longitude, latitude]
CITY_COORDINATES: Dict[str, Tuple[float, float]] = {
    "mumbai": (72.8777, 19.0760),
    "delhi": (77.2090, 28.6139),
    "bangalore": (77.5946, 12.9716),
    "hyderabad": (78.4867, 17.3850),
    "chennai": (80.2707, 13.0827),
    "kolkata": (88.3639, 22.5726),
    "pune": (73.8567, 18.5204),
    "ahmedabad": (72.5714, 23.0225),
}

DEFAULT_CITY = "mumbai"


def update_store_payment_methods(mongo: MongoDBClient) -> Dict[str, int]:
    """
    Give every store the default payment methods.

    Stores with no list get the defaults; stores with a list get any missing
    defaults added. Returns modified counts and final coverage.
    """
    missing = mongo.stores.update_many(
        {
            "$or": [
                {"operationalInfo.paymentMethods": {"$exists": False}},
                {"operationalInfo.paymentMethods": {"$eq": []}},
                {"operationalInfo.paymentMethods": None},
            ]
        },
        {"$set": {"operationalInfo.paymentMethods": DEFAULT_PAYMENT_METHODS}},
    )
    print(f"  Updated {missing.modified_count} stores with default payment methods")

    enhanced = mongo.stores.update_many(
        {"operationalInfo.paymentMethods": {"$exists": True, "$ne": []}},
        {"$addToSet": {"operationalInfo.paymentMethods": {"$each": DEFAULT_PAYMENT_METHODS}}},
    )
    print(f"  Enhanced {enhanced.modified_count} stores with additional payment methods")

    covered = mongo.stores.count_documents(
        {"operationalInfo.paymentMethods": {"$exists": True, "$ne": []}}
    )
    total = mongo.stores.count_documents({})
    log_db_operation(logger, "update_many", "stores", result_count=covered)

    return {
        "defaulted": missing.modified_count,
        "enhanced": enhanced.modified_count,
        "covered": covered,
        "total": total,
    }


def coordinates_near(city: Optional[str], rng: random.Random) -> List[float]:
    """Random [lng, lat] within a few km of the city centre, Mumbai when unknown"""
    key = (city or "").lower()
    if key in CITY_COORDINATES:
        lng, lat = CITY_COORDINATES[key]
        spread = 0.05
    else:
        lng, lat = CITY_COORDINATES[DEFAULT_CITY]
        spread = 0.1
    return [
        lng + (rng.random() - 0.5) * spread,
        lat + (rng.random() - 0.5) * spread,
    ]


def store_metadata_updates(store: Dict[str, Any], rng: random.Random) -> Dict[str, Any]:
    """Fields to $set on a store, empty when nothing is missing"""
    updates: Dict[str, Any] = {}

    if "is60MinDelivery" not in store:
        updates["is60MinDelivery"] = rng.random() > 0.4

    if "hasStorePickup" not in store:
        updates["hasStorePickup"] = rng.random() > 0.3

    location = store.get("location") or {}
    coordinates = location.get("coordinates") or []
    if len(coordinates) < 2:
        updates["location.coordinates"] = coordinates_near(location.get("city"), rng)

    return updates


def seed_store_metadata(mongo: MongoDBClient, rng: Optional[random.Random] = None) -> int:
    """Fill delivery flags and coordinates on stores missing them"""
    rng = rng or random.Random(42)
    updated = 0

    for store in mongo.stores.find({}, {"is60MinDelivery": 1, "hasStorePickup": 1, "location": 1}):
        updates = store_metadata_updates(store, rng)
        if updates:
            mongo.stores.update_one({"_id": store["_id"]}, {"$set": updates})
            updated += 1

    log_db_operation(logger, "update_one", "stores", result_count=updated, expected=False)
    return updated
