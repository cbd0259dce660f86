"""Tests for value classification and the removal rules."""

import array
import datetime
import re
import types
from collections import OrderedDict, defaultdict
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import MappingProxyType, SimpleNamespace

import pytest
from pydantic import BaseModel

from cleana import MISSING, UNDEFINED, Config, Kind, classify
from cleana.classify import has_fields, is_plain_record, record_items
from cleana.predicate import is_excluded, should_remove_primitive


class Status(Enum):
    ACTIVE = "active"


@dataclass
class Point:
    x: int
    y: int = 0


@dataclass(slots=True)
class SlotPoint:
    x: int


class Model(BaseModel):
    name: str
    tags: list[str] = []


class Plain:
    def __init__(self):
        self.value = 1


class Slotted:
    __slots__ = ("value",)

    def __init__(self):
        self.value = 1


class TestClassify:
    @pytest.mark.parametrize(
        "value",
        [None, UNDEFINED, MISSING, "", "x", 0, True, 1.5, float("nan"), 1j,
         Decimal("1.5"), Fraction(1, 3), 10**40],
    )
    def test_primitives(self, value):
        assert classify(value) is Kind.PRIMITIVE

    @pytest.mark.parametrize("value", [[], [1, None], type("Tags", (list,), {})()])
    def test_sequences(self, value):
        assert classify(value) is Kind.SEQUENCE

    @pytest.mark.parametrize(
        "value",
        [
            {},
            OrderedDict(a=1),
            defaultdict(list),
            Point(1),
            SlotPoint(1),
            Model(name="n"),
            Plain(),
            SimpleNamespace(a=1),
        ],
    )
    def test_records(self, value):
        assert classify(value) is Kind.RECORD

    @pytest.mark.parametrize(
        "value",
        [
            datetime.datetime(2024, 1, 1),
            datetime.date(2024, 1, 1),
            datetime.time(12, 0),
            datetime.timedelta(days=1),
            datetime.timezone.utc,
            set(),
            frozenset({1}),
            (1, 2),
            range(3),
            re.compile("x"),
            b"",
            bytearray(b"x"),
            memoryview(b"x"),
            array.array("b", [1]),
            ValueError("x"),
            Status.ACTIVE,
            len,
            lambda: None,
            Plain,
            MappingProxyType({}),
            Slotted(),
            types.ModuleType("settings"),
            object(),
        ],
    )
    def test_opaque(self, value):
        assert classify(value) is Kind.OPAQUE


class TestRecordHelpers:
    def test_plain_record(self):
        assert is_plain_record({})
        assert not is_plain_record(OrderedDict())
        assert not is_plain_record(Plain())

    def test_record_items(self):
        assert list(record_items({"a": 1})) == [("a", 1)]
        assert list(record_items(Point(1, 2))) == [("x", 1), ("y", 2)]
        assert list(record_items(SlotPoint(3))) == [("x", 3)]
        assert list(record_items(Model(name="n"))) == [("name", "n"), ("tags", [])]
        assert list(record_items(Plain())) == [("value", 1)]

    def test_has_fields(self):
        assert not has_fields({})
        assert has_fields({"a": None})
        assert has_fields(Plain())
        assert not has_fields(SimpleNamespace())


class TestRemovalRules:
    @pytest.mark.parametrize(
        "value, field",
        [
            (None, "clean_null"),
            (UNDEFINED, "clean_undefined"),
            ("", "clean_string"),
            (float("nan"), "clean_nan"),
        ],
    )
    def test_each_rule_follows_its_toggle(self, value, field):
        assert should_remove_primitive(value, Config())
        assert not should_remove_primitive(value, Config(**{field: False}))

    @pytest.mark.parametrize(
        "value", [0, 0.0, -0.0, False, "0", " ", float("inf"), Decimal("NaN"), 10**40]
    )
    def test_kept_by_default(self, value):
        assert not should_remove_primitive(value, Config())

    def test_missing_is_always_removed(self):
        config = Config(clean_null=False, clean_undefined=False, clean_string=False)
        assert should_remove_primitive(MISSING, config)

    def test_exclusion_needs_candidates(self):
        assert not is_excluded(None, Config())

    def test_exclusion_by_identity_and_strict_equality(self):
        marker = object()
        config = Config(remove_values=(marker, "x", 1))
        assert is_excluded(marker, config)
        assert is_excluded("x", config)
        assert is_excluded(1, config)
        assert not is_excluded(True, config)
        assert not is_excluded(1.0, config)

    def test_exclusion_by_deep_equality(self):
        config = Config(remove_values=({"k": [1, 2]}, float("nan")))
        assert is_excluded({"k": [1, 2]}, config)
        assert is_excluded(float("nan"), config)
        assert not is_excluded({"k": [1]}, config)
