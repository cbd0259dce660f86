"""
Runtime classification of values for the cleaner.

Every value is exactly one of:
- PRIMITIVE: None, UNDEFINED, MISSING, strings, numbers (including Decimal
  and Fraction). Subject to the built-in removal rules.
- SEQUENCE: lists. Cleaned element by element.
- RECORD: dicts and instances that carry their own fields (dataclasses,
  pydantic models, plain objects with a __dict__). Cleaned field by field.
- OPAQUE: everything else. Returned by reference, never traversed.
"""

import array
import datetime
import re
import types
from collections.abc import Iterator, Mapping
from dataclasses import fields, is_dataclass
from decimal import Decimal
from enum import Enum, auto
from fractions import Fraction
from typing import Any

from pydantic import BaseModel

from .sentinels import MISSING, UNDEFINED


class Kind(Enum):
    """What the cleaner does with a value."""

    PRIMITIVE = auto()
    SEQUENCE = auto()
    RECORD = auto()
    OPAQUE = auto()


PRIMITIVE_TYPES = (str, int, float, complex, Decimal, Fraction)

# Checked before record detection, so instances of these are never walked
OPAQUE_TYPES = (
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    set,
    frozenset,
    tuple,
    range,
    re.Pattern,
    bytes,
    bytearray,
    memoryview,
    array.array,
    BaseException,
    Enum,
    type,
    types.ModuleType,
)


def is_primitive(value: Any) -> bool:
    return value is None or value is UNDEFINED or value is MISSING or isinstance(
        value, PRIMITIVE_TYPES
    )


def classify(value: Any) -> Kind:
    """
    Classify a value.

    Examples:
        classify(None)                   # Kind.PRIMITIVE
        classify([1, 2])                 # Kind.SEQUENCE
        classify({"a": 1})               # Kind.RECORD
        classify(datetime.date.today())  # Kind.OPAQUE
    """
    # Fast path for JSON-shaped data
    cls = type(value)
    if cls is dict:
        return Kind.RECORD
    if cls is list:
        return Kind.SEQUENCE

    if is_primitive(value):
        return Kind.PRIMITIVE
    if isinstance(value, list):
        return Kind.SEQUENCE
    if isinstance(value, dict):
        return Kind.RECORD
    if isinstance(value, OPAQUE_TYPES) or isinstance(value, Mapping):
        return Kind.OPAQUE
    if callable(value):
        return Kind.OPAQUE
    if isinstance(value, BaseModel) or is_dataclass(value):
        return Kind.RECORD
    if hasattr(value, "__dict__"):
        return Kind.RECORD
    return Kind.OPAQUE


def is_plain_record(value: Any) -> bool:
    """
    True for an exact dict.

    Plain records may be returned by reference when nothing changed;
    any other record is rebuilt as a plain dict in copy mode.
    """
    return type(value) is dict


def record_items(record: Any) -> Iterator[tuple[Any, Any]]:
    """Yield a record's own fields as (key, value) pairs, in order."""
    if isinstance(record, dict):
        yield from record.items()
    elif isinstance(record, BaseModel):
        # Declared fields first, then extras
        yield from record
    elif hasattr(record, "__dict__"):
        yield from vars(record).items()
    elif is_dataclass(record):
        # Slotted dataclass; deleted fields are simply unset
        for field in fields(record):
            value = getattr(record, field.name, MISSING)
            if value is not MISSING:
                yield field.name, value


def has_fields(record: Any) -> bool:
    """Check whether a record has at least one field left."""
    if isinstance(record, dict):
        return len(record) > 0
    return next(record_items(record), None) is not None
