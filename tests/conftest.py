"""
Pytest fixtures shared by the service tests
"""

import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument

from docstore import DocumentStore
from item_service.main import app as item_app
from item_service.main import get_store as get_item_store
from item_service.models import Item
from order_service.main import app as order_app
from order_service.main import get_store as get_order_store
from order_service.models import Order, OrderPatch


class InMemoryCollection:
    """Collection double covering the calls DocumentStore makes.

    Filters are plain equality on top-level fields.
    """

    def __init__(self):
        self.docs = []

    @staticmethod
    def _matches(doc, flt):
        return all(doc.get(k) == v for k, v in flt.items())

    def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, flt=None):
        return [copy.deepcopy(d) for d in self.docs if self._matches(d, flt or {})]

    def find_one(self, flt):
        found = self.find(flt)
        return found[0] if found else None

    def find_one_and_update(self, flt, update, return_document=ReturnDocument.BEFORE):
        for doc in self.docs:
            if self._matches(doc, flt):
                before = copy.deepcopy(doc)
                doc.update(update.get("$set", {}))
                return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before
        return None

    def find_one_and_delete(self, flt):
        for i, doc in enumerate(self.docs):
            if self._matches(doc, flt):
                return self.docs.pop(i)
        return None


@pytest.fixture
def item_store():
    return DocumentStore(InMemoryCollection(), Item, Item)


@pytest.fixture
def order_store():
    return DocumentStore(InMemoryCollection(), Order, OrderPatch)


@pytest.fixture
def item_client(item_store):
    """item-service client backed by an in-memory collection"""
    item_app.dependency_overrides[get_item_store] = lambda: item_store
    yield TestClient(item_app)
    item_app.dependency_overrides.clear()


@pytest.fixture
def order_client(order_store):
    """order-service client backed by an in-memory collection"""
    order_app.dependency_overrides[get_order_store] = lambda: order_store
    yield TestClient(order_app)
    order_app.dependency_overrides.clear()


@pytest.fixture
def missing_id():
    """A well-formed id that no document has"""
    return str(ObjectId())


@pytest.fixture
def sample_item():
    return {"name": "Pen", "description": "Blue pen", "price": 1.5}


@pytest.fixture
def sample_order():
    return {"productName": "Pen", "quantity": 3, "totalPrice": 4.5}
