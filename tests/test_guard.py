"""Tests for the guard decorator."""

from __future__ import annotations

import pytest

from validate_arguments import ArgumentValidationError, Schema, guard


@guard(name="string", retries={"isa": "natural", "optional": True})
def connect(name, retries=None):
    return name, retries


class TestGuard:
    def test_valid_call_runs(self):
        assert connect("db") == ("db", None)
        assert connect("db", retries=3) == ("db", 3)

    def test_invalid_call_raises(self):
        with pytest.raises(ArgumentValidationError) as exc_info:
            connect("db", retries=-1)
        assert str(exc_info.value) == 'named argument retries is not a "natural"'
        assert exc_info.value.errors == ["retries"]

    def test_missing_argument_message(self):
        with pytest.raises(ArgumentValidationError, match="missing named argument name"):
            connect(None)

    def test_body_not_run_on_failure(self):
        calls = []

        @guard({"n": "whole"})
        def record(n):
            calls.append(n)

        with pytest.raises(ArgumentValidationError):
            record(1.5)
        assert calls == []

    def test_positional_call_bound_to_names(self):
        @guard({"a": "string", "b": "whole"})
        def f(a, b):
            return a * b

        assert f("x", 3) == "xxx"
        with pytest.raises(ArgumentValidationError):
            f(3, "x")

    def test_defaults_are_validated(self):
        @guard(level="natural")
        def f(level=-1):
            return level

        with pytest.raises(ArgumentValidationError):
            f()
        assert f(2) == 2

    def test_keywords_override_mapping(self):
        @guard({"a": "string"}, a="whole")
        def f(a):
            return a

        assert f(1) == 1

    def test_accepts_schema_object(self):
        @guard(Schema({"path": "string"}))
        def f(path):
            return path

        assert f("/tmp") == "/tmp"

    def test_self_is_ignored(self):
        class Service:
            @guard(host="string")
            def start(self, host):
                return host

        assert Service().start("localhost") == "localhost"

    def test_bad_call_signature_still_type_error(self):
        with pytest.raises(TypeError):
            connect()

    def test_wraps_metadata(self):
        assert connect.__name__ == "connect"

    def test_empty_schema_always_fails(self):
        @guard()
        def f():
            return 1

        with pytest.raises(ArgumentValidationError, match="missing validation spec"):
            f()


class TestGuardAsync:
    @pytest.mark.asyncio
    async def test_async_function(self):
        @guard(url="string")
        async def fetch(url):
            return url.upper()

        assert await fetch("a") == "A"
        with pytest.raises(ArgumentValidationError):
            await fetch(1)
