"""Tests for string coercion, StringResolver and DefaultResolver."""

import re

import pytest

from src.engine.value.string import DefaultResolver, StringResolver, parse_string


class TestParseString:
    """Tests for parse_string."""

    def test_unsupported_types_use_default(self):
        """Test non-scalar values fall back to the default."""
        assert parse_string({}) is None
        assert parse_string(None) is None
        assert parse_string({}, {"default": "1"}) == "1"
        assert parse_string(lambda: "", {"default": "1"}) == "1"

    def test_scalars(self):
        """Test scalars render as text."""
        assert parse_string("1") == "1"
        assert parse_string(1) == "1"
        assert parse_string(1.1) == "1.1"
        assert parse_string(True) == "true"
        assert parse_string(False) == "false"

    def test_default_if_empty(self):
        """Test the empty string replacement."""
        assert parse_string("") == ""
        assert parse_string("", {"defaultIfEmpty": "boo"}) == "boo"

    def test_match(self):
        """Test first match extraction with string and compiled patterns."""
        assert parse_string("foo bar foo", {"match": "foo"}) == "foo"
        assert parse_string("foo bar foo", {"match": re.compile("foo")}) == "foo"
        assert parse_string("price: 42 EUR", {"match": r"\d+"}) == "42"
        assert parse_string("bar bar bar", {"match": "foo"}) is None
        assert parse_string("bar bar bar", {"match": "foo", "defaultIfNoMatch": "foooo"}) == "foooo"


class TestStringResolvers:
    """Tests for StringResolver and DefaultResolver."""

    def test_string_resolver_match(self):
        """Test that StringResolver requires string: true."""
        resolver = StringResolver()
        assert resolver.match({"selector": "h1"}) is False
        assert resolver.match({"selector": "h1", "string": False}) is False
        assert resolver.match({"selector": "h1", "string": True}) is True

    def test_default_resolver_match(self):
        """Test that DefaultResolver takes any value schema unless opted out."""
        resolver = DefaultResolver()
        assert resolver.match("h1") is True
        assert resolver.match(["h1"]) is True
        assert resolver.match({"selector": "h1", "number": True}) is True
        assert resolver.match({"selector": "h1", "string": False}) is False
        assert resolver.match({"selector": {"title": "h1"}}) is False

    @pytest.mark.parametrize("resolver_class", [DefaultResolver, StringResolver])
    @pytest.mark.asyncio
    async def test_resolve(self, resolver_class, load_document):
        """Test text extraction and missing elements."""
        resolver = resolver_class()
        schema = {"selector": "h1", "string": True}
        assert await resolver.resolve(load_document("<h1>Hello World</h1>"), schema) == "Hello World"
        assert await resolver.resolve(load_document(""), schema) is None

    @pytest.mark.parametrize("resolver_class", [DefaultResolver, StringResolver])
    @pytest.mark.asyncio
    async def test_defaults(self, resolver_class, load_document):
        """Test default and defaultIfEmpty."""
        resolver = resolver_class()
        assert await resolver.resolve(
            load_document(""), {"selector": "h1", "string": True, "default": "empty"}
        ) == "empty"
        assert await resolver.resolve(
            load_document("<h1></h1>"), {"selector": "h1", "string": True, "defaultIfEmpty": "empty"}
        ) == "empty"

    @pytest.mark.asyncio
    async def test_match_option(self, load_document):
        """Test match and defaultIfNoMatch during resolution."""
        node = load_document("<h1>Hello World</h1>")
        resolver = StringResolver()
        base = {"selector": "h1", "string": True}
        assert await resolver.resolve(node, {**base, "match": "Halu", "defaultIfNoMatch": "empty"}) == "empty"
        assert await resolver.resolve(node, {**base, "match": "Halu"}) is None
        assert await resolver.resolve(node, {**base, "match": "Hello"}) == "Hello"

    @pytest.mark.asyncio
    async def test_trim(self, load_document):
        """Test that surrounding whitespace is stripped unless trim is False."""
        node = load_document("<h1>  padded  </h1>")
        resolver = DefaultResolver()
        assert await resolver.resolve(node, "h1") == "padded"
        assert await resolver.resolve(node, {"selector": "h1", "trim": False}) == "  padded  "
