"""
User model parsing tests
"""

import pytest
from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError

from pizzagoland.models.user import User, parse_object_id


def test_defaults_and_unknown_fields():
    user = User.model_validate_json('{"name": "Rosalina", "extra": true}')
    assert user == User(id=None, name="Rosalina", age=0)


@pytest.mark.parametrize("raw_id", ["", None])
def test_empty_id_counts_as_absent(raw_id):
    user = User.model_validate({"id": raw_id, "name": "x"})
    assert user.id is None
    assert "_id" not in user.to_document()


def test_id_round_trips_to_object_id():
    object_id = ObjectId()
    user = User.model_validate({"id": str(object_id), "name": "x", "age": 3})
    assert user.to_document() == {"_id": object_id, "name": "x", "age": 3}
    assert user.update_fields() == {"name": "x", "age": 3}


@pytest.mark.parametrize("payload", [
    '{"age": "5"}',
    '{"age": 5.5}',
    '{"age": true}',
    '{"name": ["a"]}',
    '{"id": 123}',
    '{"id": "short"}',
    '{"id": "  aaaaaaaaaaaaaaaaaaaaaa"}',
    '{"age": 9223372036854775808}',
    '{"age": -9223372036854775809}',
    "null",
])
def test_type_errors_rejected(payload):
    with pytest.raises(ValidationError):
        User.model_validate_json(payload)


def test_from_document():
    object_id = ObjectId()
    user = User.from_document({"_id": object_id, "name": "Pauline"})
    assert user.model_dump() == {"id": str(object_id), "name": "Pauline", "age": 0}


def test_parse_object_id():
    assert parse_object_id("507f1f77bcf86cd799439011") == ObjectId("507f1f77bcf86cd799439011")
    with pytest.raises(InvalidId):
        parse_object_id("507f1f77")
    with pytest.raises(InvalidId):
        parse_object_id(None)
    with pytest.raises(InvalidId):
        parse_object_id(" " + "a" * 23)


def test_age_accepts_int64_limits():
    assert User.model_validate_json('{"age": 9223372036854775807}').age == 2 ** 63 - 1
    assert User.model_validate_json('{"age": -9223372036854775808}').age == -(2 ** 63)
