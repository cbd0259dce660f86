"""Tests for the @cleaner decorator and cleaning_context() with clean()."""

import pytest

from cleana import clean, cleaner, cleaning_context


class TestCleanerDecorator:
    def test_without_arguments(self):
        @cleaner
        def build(user):
            return {"id": user["id"], "email": user.get("email"), "tags": []}

        assert build({"id": "u-1"}) == {"id": "u-1"}

    def test_with_options(self):
        @cleaner(clean_null=False, remove_keys=["password"])
        def build(user):
            return {"id": user["id"], "email": None, "password": user["password"]}

        assert build({"id": "u-1", "password": "hunter2"}) == {
            "id": "u-1",
            "email": None,
        }

    def test_camel_case_options(self):
        @cleaner(cleanString=False)
        def build():
            return {"name": "", "nick": None}

        assert build() == {"name": ""}

    def test_preserves_metadata(self):
        @cleaner
        def build_payload():
            """Build the payload."""
            return {}

        assert build_payload.__name__ == "build_payload"
        assert build_payload.__doc__ == "Build the payload."

    def test_passes_arguments_through(self):
        @cleaner
        def merge(a, b, *, extra=None):
            return {"a": a, "b": b, "extra": extra}

        assert merge(1, None, extra="x") == {"a": 1, "extra": "x"}

    def test_composable(self):
        @cleaner(clean_record=False)
        def outer():
            return {"inner": inner()}

        @cleaner
        def inner():
            return {"a": None}

        assert outer() == {"inner": {}}

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            cleaner(42)  # type: ignore[arg-type]


class TestContextWithClean:
    def test_context_defaults(self):
        with cleaning_context(clean_null=False):
            assert clean({"a": None, "b": ""}) == {"a": None}
        assert clean({"a": None, "b": ""}) == {}

    def test_context_applies_to_decorated_functions(self):
        @cleaner
        def build():
            return {"a": None, "secret": 1, "b": 2}

        with cleaning_context(remove_keys=["secret"]):
            assert build() == {"b": 2}
        assert build() == {"secret": 1, "b": 2}

    def test_decorator_options_beat_context(self):
        @cleaner(clean_null=True)
        def build():
            return {"a": None}

        with cleaning_context(clean_null=False):
            assert build() == {}
