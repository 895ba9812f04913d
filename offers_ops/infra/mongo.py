"""MongoDB client handle for maintenance jobs"""
import logging
import re
from contextlib import contextmanager
from typing import Iterator, Optional

import pymongo
from pymongo.errors import PyMongoError

from offers_ops.infra.config import settings

logger = logging.getLogger(__name__)


def mask_mongodb_uri(uri: str) -> str:
    """Hide credentials in a connection string before printing it"""
    return re.sub(r"//[^@/]*@", "//***@", uri)


class MongoDBClient:
    """Synchronous MongoDB client scoped to a single job run"""

    def __init__(self, uri: Optional[str] = None, db_name: Optional[str] = None):
        self.uri = uri or settings.mongodb_uri
        self.db_name = db_name or settings.mongodb_db_name
        self.client = pymongo.MongoClient(
            self.uri,
            serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
            connectTimeoutMS=5000,
        )
        self.db = self.client[self.db_name]

        # Category page collections
        self.categories = self.db.categories
        self.category_vibes = self.db.categoryvibes
        self.category_occasions = self.db.categoryoccasions
        self.category_hashtags = self.db.categoryhashtags
        self.social_proof_stats = self.db.socialproofstats

        # Store and offer collections
        self.stores = self.db.stores
        self.offers = self.db.offers
        self.exclusive_offers = self.db.exclusiveoffers
        self.flash_sales = self.db.flashsales
        self.coupons = self.db.coupons
        self.friend_redemptions = self.db.friendredemptions
        self.mall_categories = self.db.mallcategories
        self.mall_brands = self.db.mallbrands
        self.users = self.db.users

        # Discovery collections
        self.search_histories = self.db.search_histories
        self.nearby_activities = self.db.nearby_activities

    def close(self):
        """Close MongoDB connection"""
        self.client.close()

    def ping(self):
        """Check MongoDB connection, raising ConnectionFailure when unreachable"""
        self.client.admin.command("ping")


@contextmanager
def mongodb_session(uri: Optional[str] = None, db_name: Optional[str] = None) -> Iterator[MongoDBClient]:
    """
    Open a verified connection for the duration of a job.

    The client is closed on every exit path, including a failed ping.
    """
    mongo = MongoDBClient(uri, db_name)
    try:
        try:
            mongo.ping()
        except PyMongoError:
            logger.error("MongoDB ping failed for %s", mask_mongodb_uri(mongo.uri))
            raise
        yield mongo
    finally:
        mongo.close()
