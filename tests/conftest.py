"""Pytest configuration and fixtures"""
import copy
import itertools
from types import SimpleNamespace

import pytest
from dotenv import load_dotenv

# Load test environment variables
load_dotenv(".env.test", override=False)


_MISSING = object()


def _get_path(doc, path):
    value = doc
    for part in path.split("."):
        if not isinstance(value, dict) or part not in value:
            return _MISSING
        value = value[part]
    return value


def _set_path(doc, path, value):
    parts = path.split(".")
    for part in parts[:-1]:
        doc = doc.setdefault(part, {})
    doc[parts[-1]] = value


def _matches(doc, query):
    """Equality, $in and $exists filters, enough for the jobs under test"""
    for key, expected in query.items():
        value = _get_path(doc, key)
        if isinstance(expected, dict) and any(k.startswith("$") for k in expected):
            for op, operand in expected.items():
                if op == "$in":
                    if value is _MISSING or value not in operand:
                        return False
                elif op == "$exists":
                    if (value is not _MISSING) != operand:
                        return False
                else:
                    raise NotImplementedError(op)
        elif value is _MISSING or value != expected:
            return False
    return True


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key_or_list, direction=1):
        keys = key_or_list if isinstance(key_or_list, list) else [(key_or_list, direction)]
        for key, direction in reversed(keys):
            # Missing values sort first ascending, as in MongoDB
            self._docs.sort(
                key=lambda d, k=key: (d.get(k) is not None, d.get(k) if d.get(k) is not None else 0),
                reverse=direction < 0,
            )
        return self

    def limit(self, n):
        self._docs = self._docs[:n]
        return self

    def __iter__(self):
        return iter(self._docs)


class FakeCollection:
    """In-memory stand-in for a pymongo Collection"""

    _ids = itertools.count(1)

    def __init__(self, name, docs=None):
        self.name = name
        self.docs = []
        self.fail_update_for = set()
        self.update_calls = []
        if docs:
            self.insert_many(docs)

    def find(self, query=None, projection=None):
        return FakeCursor([copy.deepcopy(d) for d in self.docs if _matches(d, query or {})])

    def find_one(self, query=None, projection=None):
        return next(iter(self.find(query, projection)), None)

    def count_documents(self, query):
        return sum(1 for d in self.docs if _matches(d, query))

    def distinct(self, key, query=None):
        values = []
        for doc in self.docs:
            value = doc.get(key)
            if _matches(doc, query or {}) and value is not None and value not in values:
                values.append(value)
        return values

    def insert_one(self, doc):
        doc = copy.deepcopy(doc)
        doc.setdefault("_id", f"id{next(self._ids):04d}")
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    def insert_many(self, docs):
        return SimpleNamespace(inserted_ids=[self.insert_one(d).inserted_id for d in docs])

    def update_one(self, query, update):
        from pymongo.errors import OperationFailure

        self.update_calls.append((query, update))
        if query.get("_id") in self.fail_update_for:
            raise OperationFailure("simulated write failure")

        for doc in self.docs:
            if _matches(doc, query):
                for path, value in update.get("$set", {}).items():
                    _set_path(doc, path, copy.deepcopy(value))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    def delete_many(self, query):
        keep = [d for d in self.docs if not _matches(d, query)]
        deleted = len(self.docs) - len(keep)
        self.docs = keep
        return SimpleNamespace(deleted_count=deleted)


class FakeMongo:
    """Collection attributes mirroring MongoDBClient, created on first access"""

    db_name = "test"

    def __getattr__(self, name):
        collection = FakeCollection(name)
        setattr(self, name, collection)
        return collection


@pytest.fixture
def fake_mongo():
    return FakeMongo()


@pytest.fixture
def vibe_row():
    def make(slug, vibe_id, sort_order=0, **overrides):
        row = {
            "id": vibe_id,
            "name": vibe_id.title(),
            "icon": "🍽️",
            "color": "#F97316",
            "description": f"{vibe_id} vibe",
            "category": f"cat-{slug}",
            "categorySlug": slug,
            "sortOrder": sort_order,
            "isActive": True,
            "createdAt": "2024-01-01",
            "updatedAt": "2024-01-01",
        }
        row.update(overrides)
        return row
    return make
