"""
Discovery data readiness checks

Read-only checks run against seeded collections to decide whether the
discovery UI has enough data to render. Each check measures one count and
classifies it against fixed thresholds.
"""
import logging
import math
from typing import Callable, List

from offers_ops.infra.mongo import MongoDBClient
from offers_ops.models.mongodb_schemas import CheckResult, CheckStatus, ValidationReport
from offers_ops.utils.logging_utils import log_db_operation

logger = logging.getLogger(__name__)

BNPL_PAYMENT_METHODS = ["bnpl", "installment", "pay-later", "paylater"]

HAS_PAYMENT_METHODS = {"operationalInfo.paymentMethods": {"$exists": True, "$ne": []}}


# ============================================================================
# Classification
# ============================================================================

def classify_at_least(measured: int, pass_at: int, warn_at: int) -> CheckStatus:
    """Pass at or above pass_at, warn at or above warn_at, otherwise fail"""
    if measured >= pass_at:
        return CheckStatus.PASS
    if measured >= warn_at:
        return CheckStatus.WARNING
    return CheckStatus.FAIL


def classify_exists(measured: int) -> CheckStatus:
    return CheckStatus.PASS if measured > 0 else CheckStatus.FAIL


def classify_coverage(measured: int, total: int, pass_ratio: float, warn_ratio: float) -> CheckStatus:
    """Classify a covered/total share against ratio thresholds"""
    return classify_at_least(measured, total * pass_ratio, total * warn_ratio)


# ============================================================================
# Checks
# ============================================================================

def check_payment_methods(mongo: MongoDBClient) -> CheckResult:
    covered = mongo.stores.count_documents(HAS_PAYMENT_METHODS)
    total = mongo.stores.count_documents({})

    if covered == total:
        status = CheckStatus.PASS
    elif covered > total * 0.9:
        status = CheckStatus.WARNING
    else:
        status = CheckStatus.FAIL

    return CheckResult(
        name="Store Payment Methods",
        status=status,
        message=f"{covered}/{total} stores have payment methods",
        measured=covered,
        target=total,
    )


def check_bnpl_stores(mongo: MongoDBClient) -> CheckResult:
    count = mongo.stores.count_documents({
        "$or": [
            {"operationalInfo.paymentMethods": {"$in": BNPL_PAYMENT_METHODS}},
            {"paymentSettings.acceptPayLater": True},
        ],
        "isActive": True,
    })
    return CheckResult(
        name="BNPL Stores",
        status=classify_at_least(count, pass_at=20, warn_at=10),
        message=f"{count} stores have BNPL enabled",
        measured=count,
        target=20,
    )


def check_search_history(mongo: MongoDBClient) -> CheckResult:
    count = mongo.search_histories.count_documents({})
    unique_queries = mongo.search_histories.distinct("query")
    return CheckResult(
        name="Search History",
        status=classify_at_least(count, pass_at=50, warn_at=20),
        message=f"{count} entries, {len(unique_queries)} unique queries",
        measured=count,
        target=50,
    )


def check_nearby_activity(mongo: MongoDBClient) -> CheckResult:
    today = {"period": "today"}
    count = mongo.nearby_activities.count_documents(today)
    cities = mongo.nearby_activities.distinct("city", today)
    return CheckResult(
        name="Nearby Activity",
        status=classify_exists(count),
        message=f"{count} entries for today, {len(cities)} cities",
        measured=count,
        target=1,
    )


def check_cashback_stores(mongo: MongoDBClient) -> CheckResult:
    count = mongo.stores.count_documents({
        "offers.cashback": {"$exists": True, "$gte": 10},
        "isActive": True,
    })
    return CheckResult(
        name="Stores with Cashback",
        status=classify_at_least(count, pass_at=50, warn_at=20),
        message=f"{count} stores with cashback >= 10%",
        measured=count,
        target=50,
    )


def check_store_locations(mongo: MongoDBClient) -> CheckResult:
    located = mongo.stores.count_documents({
        "location.coordinates": {"$exists": True, "$ne": None},
        "isActive": True,
    })
    total = mongo.stores.count_documents({})
    return CheckResult(
        name="Stores with Location",
        status=classify_coverage(located, total, pass_ratio=0.9, warn_ratio=0.7),
        message=f"{located}/{total} stores have location coordinates",
        measured=located,
        target=math.floor(total * 0.9),
    )


DISCOVERY_CHECKS: List[Callable[[MongoDBClient], CheckResult]] = [
    check_payment_methods,
    check_bnpl_stores,
    check_search_history,
    check_nearby_activity,
    check_cashback_stores,
    check_store_locations,
]


def validate_discovery_data(mongo: MongoDBClient) -> ValidationReport:
    """Run every discovery check in order"""
    report = ValidationReport()
    for check in DISCOVERY_CHECKS:
        result = check(mongo)
        log_db_operation(logger, "readiness_check", result.name, result_count=result.measured)
        report.checks.append(result)
    return report
