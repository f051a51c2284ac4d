"""
Classification of single BSON values into structural type tags.
"""

import datetime
import numbers
from collections.abc import Mapping
from typing import Any

from bson import ObjectId
from bson.datetime_ms import DatetimeMS
from bson.decimal128 import Decimal128
from bson.timestamp import Timestamp

from schema.types import TypeTag

DATE_TYPES = (datetime.datetime, datetime.date, DatetimeMS, Timestamp)
ARRAY_TYPES = (list, tuple)

def classify_value(value: Any) -> TypeTag:
    """
    Return the type tag of a value. Never raises.

    Specialised types are checked before the generic ones they could be
    mistaken for; anything unrecognised ends up as a string.
    """
    if value is None:
        return TypeTag.NULL
    if isinstance(value, ObjectId):
        return TypeTag.OBJECT_ID
    if isinstance(value, DATE_TYPES):
        return TypeTag.DATE
    if isinstance(value, ARRAY_TYPES):
        return TypeTag.ARRAY
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    return _primitive_kind(value)

def _primitive_kind(value: Any) -> TypeTag:
    # bool is an int subclass
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, (numbers.Number, Decimal128)):
        return TypeTag.NUMBER
    return TypeTag.STRING
