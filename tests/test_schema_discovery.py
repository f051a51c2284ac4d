"""
Tests for sampling collections and running the whole inference pipeline.
"""

import pytest

from schema.schema_discovery import SchemaDiscoverer, SchemaDiscoveryError
from schema.types import Schema, TypeTag
from tests.fakes import BrokenDocumentSource, InMemoryDocumentSource

def test_analyze_collection_respects_limit(shop_source):
    discoverer = SchemaDiscoverer(shop_source)
    
    discoverer.analyze_collection("users", limit=10)
    
    assert shop_source.sample_calls == [("users", 10)]

def test_sample_limit_bounds_the_schema():
    source = InMemoryDocumentSource({"events": [{"a": 1}, {"b": 1}, {"c": 1}]})
    
    schema = SchemaDiscoverer(source).analyze_collection("events", limit=2)
    
    assert schema.paths == ["a", "b"]

def test_empty_collection_gives_empty_schema(shop_source):
    schema = SchemaDiscoverer(shop_source).analyze_collection("audit_logs", limit=10)
    
    assert schema == Schema()

def test_discover_all_collections(shop_source):
    schemas, relationships = SchemaDiscoverer(shop_source).discover(limit=10)
    
    assert list(schemas) == ["users", "products", "orders", "categories", "reviews", "audit_logs"]
    assert schemas["audit_logs"].fields == []
    assert schemas["users"].get("createdAt").type is TypeTag.DATE
    assert len(relationships) == 5

def test_empty_request_means_all_collections(shop_source):
    schemas, _ = SchemaDiscoverer(shop_source).discover(collections=[], limit=10)
    
    assert len(schemas) == 6

def test_requested_subset_limits_targets(shop_source):
    schemas, relationships = SchemaDiscoverer(shop_source).discover(collections=["orders", "users"], limit=10)
    
    assert list(schemas) == ["orders", "users"]
    assert [(r.source_field, r.target_collection) for r in relationships] == [("userId", "users")]

def test_sequential_failure_aborts():
    source = InMemoryDocumentSource({"users": [{"a": 1}], "orders": [{"b": 1}]}, failing=["orders"])
    
    with pytest.raises(SchemaDiscoveryError, match="orders"):
        SchemaDiscoverer(source).discover(limit=10)

def test_fan_out_degrades_failed_collection():
    source = InMemoryDocumentSource(
        {"users": [{"_id": 1, "a": 1}], "orders": [{"b": 1}], "carts": [{"c": 1}]},
        failing=["orders"]
    )
    
    schemas, _ = SchemaDiscoverer(source, max_workers=4).discover(limit=10)
    
    assert list(schemas) == ["users", "orders", "carts"]
    assert schemas["orders"] == Schema()
    assert schemas["users"].paths == ["_id", "a"]
    assert schemas["carts"].paths == ["c"]

def test_listing_failure_raises():
    with pytest.raises(SchemaDiscoveryError):
        SchemaDiscoverer(BrokenDocumentSource()).discover()
