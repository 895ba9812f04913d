"""Backfills on the offers collection"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from offers_ops.infra.mongo import MongoDBClient
from offers_ops.models.mongodb_schemas import ExclusiveZone

logger = logging.getLogger(__name__)

# Offer title -> exclusive zone
ZONE_BY_OFFER_TITLE: Dict[str, ExclusiveZone] = {
    "Student Tech Discount": ExclusiveZone.STUDENT,
    "Student Food Festival": ExclusiveZone.STUDENT,
    "Campus Coffee Deal": ExclusiveZone.STUDENT,
    "Student Entertainment Pass": ExclusiveZone.STUDENT,
    "Student Book Store": ExclusiveZone.STUDENT,
    "Corporate Lunch Deal": ExclusiveZone.CORPORATE,
    "Office Supplies Discount": ExclusiveZone.CORPORATE,
    "Team Outing Package": ExclusiveZone.CORPORATE,
    "Employee Wellness": ExclusiveZone.CORPORATE,
    "Women's Fashion Sale": ExclusiveZone.WOMEN,
    "Beauty & Skincare": ExclusiveZone.WOMEN,
    "Spa & Wellness Day": ExclusiveZone.WOMEN,
    "Women's Safety Essentials": ExclusiveZone.WOMEN,
    "Defence Personnel Special": ExclusiveZone.DEFENCE,
    "Armed Forces Grocery Deal": ExclusiveZone.DEFENCE,
    "Healthcare Heroes Discount": ExclusiveZone.HEALTHCARE,
    "Night Shift Special": ExclusiveZone.HEALTHCARE,
    "Senior Citizen Special": ExclusiveZone.SENIOR,
    "Senior Grocery Savings": ExclusiveZone.SENIOR,
}

ELIGIBILITY_BY_ZONE: Dict[ExclusiveZone, str] = {
    ExclusiveZone.STUDENT: "Valid student ID required",
    ExclusiveZone.CORPORATE: "Corporate email verification required",
    ExclusiveZone.WOMEN: "Women users only",
    ExclusiveZone.DEFENCE: "Valid Military ID required",
    ExclusiveZone.HEALTHCARE: "Valid Hospital ID required",
    ExclusiveZone.SENIOR: "Age 60+ verification required",
}


def fix_exclusive_zones(mongo: MongoDBClient) -> Dict[str, int]:
    """Tag known offers with their exclusive zone; returns per-zone counts"""
    for title, zone in ZONE_BY_OFFER_TITLE.items():
        result = mongo.offers.update_one(
            {"title": title},
            {"$set": {
                "exclusiveZone": zone.value,
                "eligibilityRequirement": ELIGIBILITY_BY_ZONE[zone],
            }},
        )
        if result.matched_count > 0:
            print(f"  Updated: {title} -> {zone.value}")
        else:
            logger.warning(f"Offer not found for exclusive zone tagging: {title}")

    return {zone.value: mongo.offers.count_documents({"exclusiveZone": zone.value}) for zone in ExclusiveZone}


def refresh_flash_sales(mongo: MongoDBClient, now: Optional[datetime] = None, hours: int = 24) -> int:
    """Restart every active flash-sale offer's window at now for the given hours"""
    start = now or datetime.now(timezone.utc)
    end = start + timedelta(hours=hours)

    result = mongo.offers.update_many(
        {"metadata.flashSale.isActive": True},
        {"$set": {
            "metadata.flashSale.startTime": start,
            "metadata.flashSale.endTime": end,
            "status": "active",
        }},
    )
    print(f"  Window: {start.isoformat()} -> {end.isoformat()}")
    return result.modified_count
