"""Unit tests for store backfills"""
import random
from types import SimpleNamespace
from unittest.mock import MagicMock

from offers_ops.services.store_backfill import (
    CITY_COORDINATES,
    DEFAULT_PAYMENT_METHODS,
    coordinates_near,
    seed_store_metadata,
    store_metadata_updates,
    update_store_payment_methods,
)


def test_update_store_payment_methods_sets_then_extends():
    mongo = MagicMock()
    mongo.stores.update_many.side_effect = [
        SimpleNamespace(modified_count=3),
        SimpleNamespace(modified_count=7),
    ]
    mongo.stores.count_documents.side_effect = [10, 10]

    result = update_store_payment_methods(mongo)

    assert result == {"defaulted": 3, "enhanced": 7, "covered": 10, "total": 10}
    set_call, add_call = mongo.stores.update_many.call_args_list
    assert set_call.args[1] == {"$set": {"operationalInfo.paymentMethods": DEFAULT_PAYMENT_METHODS}}
    assert add_call.args[1] == {
        "$addToSet": {"operationalInfo.paymentMethods": {"$each": DEFAULT_PAYMENT_METHODS}}
    }


def test_coordinates_near_known_city_stays_close():
    lng, lat = coordinates_near("Pune", random.Random(1))
    centre_lng, centre_lat = CITY_COORDINATES["pune"]

    assert abs(lng - centre_lng) <= 0.025
    assert abs(lat - centre_lat) <= 0.025


def test_coordinates_near_unknown_city_falls_back_to_mumbai():
    lng, lat = coordinates_near(None, random.Random(1))
    centre_lng, centre_lat = CITY_COORDINATES["mumbai"]

    assert abs(lng - centre_lng) <= 0.05
    assert abs(lat - centre_lat) <= 0.05


def test_store_metadata_updates_leaves_complete_store_alone():
    store = {
        "_id": "s1",
        "is60MinDelivery": False,
        "hasStorePickup": True,
        "location": {"city": "Delhi", "coordinates": [77.2, 28.6]},
    }
    assert store_metadata_updates(store, random.Random(0)) == {}


def test_store_metadata_updates_fills_missing_fields():
    updates = store_metadata_updates({"_id": "s1", "location": {"city": "Chennai"}}, random.Random(0))

    assert set(updates) == {"is60MinDelivery", "hasStorePickup", "location.coordinates"}
    assert len(updates["location.coordinates"]) == 2


def test_seed_store_metadata_only_touches_incomplete_stores(fake_mongo):
    fake_mongo.stores.insert_many([
        {"_id": "done", "is60MinDelivery": True, "hasStorePickup": True,
         "location": {"city": "Pune", "coordinates": [73.8, 18.5]}},
        {"_id": "todo", "location": {"city": "Pune"}},
    ])

    updated = seed_store_metadata(fake_mongo, random.Random(3))

    assert updated == 1
    todo = fake_mongo.stores.find_one({"_id": "todo"})
    assert len(todo["location"]["coordinates"]) == 2
    assert todo["location"]["city"] == "Pune"
    assert [q["_id"] for q, _ in fake_mongo.stores.update_calls] == ["todo"]
