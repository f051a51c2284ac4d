"""
Tests for single-document analysis.
"""

import datetime

from bson import ObjectId

from schema.document_analyzer import analyze_document
from schema.types import FieldDescriptor, TypeTag

def test_flat_document():
    fields = analyze_document({"_id": ObjectId(), "email": "a@b.c", "age": 3, "active": True})
    
    assert list(fields) == ["_id", "email", "age", "active"]
    assert fields["email"] == FieldDescriptor(path="email", type=TypeTag.STRING)
    assert fields["age"].type is TypeTag.NUMBER
    assert fields["active"].type is TypeTag.BOOLEAN

def test_primary_key_is_always_a_required_object_id():
    fields = analyze_document({"_id": "custom-string-key"})
    
    assert fields["_id"] == FieldDescriptor(path="_id", type=TypeTag.OBJECT_ID, required=True)

def test_only_id_keys_are_required():
    fields = analyze_document({"_id": 1, "name": "x", "parent": {"_id": ObjectId(), "label": "y"}})
    
    assert [path for path, f in fields.items() if f.required] == ["_id", "parent._id"]

def test_nested_id_is_a_required_object_id():
    fields = analyze_document({"_id": ObjectId(), "items": [{"_id": "sku-1", "qty": 1}], "meta": {"_id": "abc"}})
    
    assert fields["items[]._id"] == FieldDescriptor(path="items[]._id", type=TypeTag.OBJECT_ID, required=True)
    assert fields["meta._id"] == FieldDescriptor(path="meta._id", type=TypeTag.OBJECT_ID, required=True)
    assert fields["items[].qty"].type is TypeTag.NUMBER

def test_nested_objects_use_dotted_paths():
    fields = analyze_document({"address": {"city": "Seoul", "geo": {"lat": 1.5}}})
    
    assert list(fields) == ["address", "address.city", "address.geo", "address.geo.lat"]
    assert fields["address"].type is TypeTag.OBJECT
    assert fields["address.geo.lat"].type is TypeTag.NUMBER

def test_array_of_scalars_records_item_type():
    fields = analyze_document({"tags": ["a", "b"]})
    
    assert fields["tags"] == FieldDescriptor(path="tags", type=TypeTag.ARRAY, item_type=TypeTag.STRING)
    assert list(fields) == ["tags"]

def test_empty_array_has_no_item_type():
    fields = analyze_document({"tags": []})
    
    assert fields["tags"].type is TypeTag.ARRAY
    assert fields["tags"].item_type is None
    assert "items" not in fields["tags"].to_dict()

def test_array_of_objects_descends_into_first_element_only():
    fields = analyze_document({
        "items": [{"productId": ObjectId(), "qty": 1}, {"discount": 0.1}]
    })
    
    assert fields["items"].item_type is TypeTag.OBJECT
    assert list(fields) == ["items", "items[].productId", "items[].qty"]
    assert fields["items[].productId"].type is TypeTag.OBJECT_ID

def test_nested_arrays_inside_array_items():
    fields = analyze_document({"orders": [{"lines": [{"sku": "x"}]}]})
    
    assert "orders[].lines[].sku" in fields

def test_array_of_arrays_is_not_descended():
    fields = analyze_document({"matrix": [[1, 2], [3, 4]]})
    
    assert fields["matrix"].item_type is TypeTag.ARRAY
    assert list(fields) == ["matrix"]

def test_null_and_date_values():
    fields = analyze_document({"deletedAt": None, "createdAt": datetime.datetime(2024, 1, 1)})
    
    assert fields["deletedAt"].type is TypeTag.NULL
    assert fields["createdAt"].type is TypeTag.DATE

def test_prefix_is_prepended():
    fields = analyze_document({"city": "Busan"}, prefix="address")
    
    assert list(fields) == ["address.city"]

def test_depth_limit_stops_descent():
    document = {"a": {"b": {"c": {"d": 1}}}}
    
    fields = analyze_document(document, max_depth=1)
    
    assert list(fields) == ["a", "a.b"]
    assert fields["a.b"].type is TypeTag.OBJECT

def test_deeply_nested_document_does_not_overflow():
    document = {}
    node = document
    for _ in range(5000):
        node["child"] = {}
        node = node["child"]
    
    fields = analyze_document(document, max_depth=10)
    
    assert len(fields) == 11

def test_to_dict_wire_shape():
    fields = analyze_document({"_id": ObjectId(), "ids": [ObjectId()]})
    
    assert fields["_id"].to_dict() == {"name": "_id", "type": "objectId", "required": True}
    assert fields["ids"].to_dict() == {
        "name": "ids", "type": "array", "required": False, "items": {"type": "objectId"}
    }
