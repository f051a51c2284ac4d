"""
Shared fixtures: an in-memory document source and a small shop database.
"""

import datetime

import pytest
from bson import ObjectId

from tests.fakes import InMemoryDocumentSource

@pytest.fixture
def shop_collections():
    user_id = ObjectId()
    product_id = ObjectId()
    created = datetime.datetime(2024, 3, 10, 12, 0)
    return {
        "users": [
            {
                "_id": user_id,
                "email": "john@example.com",
                "name": "John Doe",
                "age": 35,
                "address": {"street": "123 Main St", "city": "Seoul"},
                "createdAt": created,
                "tags": ["vip"],
            },
        ],
        "products": [
            {"_id": product_id, "name": "Laptop Pro", "price": 1299.99, "stock": 50, "specs": {"cpu": "i7"}},
        ],
        "orders": [
            {
                "_id": ObjectId(),
                "userId": user_id,
                "status": "pending",
                "items": [{"productId": product_id, "quantity": 1}],
                "total": 1299.99,
                "createdAt": created,
            },
        ],
        "categories": [
            {"_id": ObjectId(), "name": "Electronics", "productIds": [product_id]},
        ],
        "reviews": [
            {"_id": ObjectId(), "user_id": user_id, "product_id": product_id, "rating": 5},
        ],
        "audit_logs": [],
    }

@pytest.fixture
def shop_source(shop_collections):
    return InMemoryDocumentSource(shop_collections)

@pytest.fixture
def users_orders_source():
    user_id = ObjectId()
    return InMemoryDocumentSource({
        "users": [{"_id": user_id, "email": "jane@example.com"}],
        "orders": [{"_id": ObjectId(), "userId": user_id, "status": "shipped"}],
    })
