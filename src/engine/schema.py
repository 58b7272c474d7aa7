"""Helpers for building selector schemas without nesting dictionaries.

Each helper takes the selector, then either a scope (string or list) or an
options dictionary, and returns a plain schema dictionary:

    schema = obj({
        "title": "h1",
        "price": number(".price"),
        "tags": string(["a.tag"], {"transforms": ["lowercase"]}),
    }, scope=["article"])
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

SimpleSelector = str | list[str]
ScopeOrOptions = SimpleSelector | Mapping[str, Any] | None


def extract_scope(option: ScopeOrOptions) -> tuple[Any, dict[str, Any]]:
    """Split the second helper argument into (scope, options).

    A string or list of strings is a scope; a mapping is an options
    dictionary whose ``scope`` key, if any, is used as the scope.
    """
    if option is None or option == "":
        return "", {}

    if isinstance(option, (list, tuple)):
        return (list(option) if option and option[0] else []), {}

    if not isinstance(option, Mapping):
        return option, {}

    scope = option.get("scope")
    return ("" if scope is None else scope), dict(option)


def _build(selector: Any, opts: ScopeOrOptions, **defaults: Any) -> dict[str, Any]:
    scope, options = extract_scope(opts)
    return {"selector": selector, "scope": scope, **defaults, **options}


def obj(selector: Mapping[str, Any], opts: ScopeOrOptions = None) -> dict[str, Any]:
    """Object schema."""
    return _build(dict(selector), opts)


def flat(selector: Mapping[str, Any], opts: ScopeOrOptions = None) -> dict[str, Any]:
    """Object schema whose keys are merged into the parent object."""
    return _build(dict(selector), opts, flat=True)


def string(selector: SimpleSelector, opts: ScopeOrOptions = None, default: str | None = None) -> dict[str, Any]:
    """String schema."""
    return _build(selector, opts, string=True, default=default)


def match(
    regex: Any,
    selector: SimpleSelector,
    opts: ScopeOrOptions = None,
    default: str | None = None,
) -> dict[str, Any]:
    """String schema keeping only the first match of ``regex``."""
    return _build(
        selector, opts, string=True, match=regex, default=default, defaultIfNoMatch=default
    )


def number(selector: SimpleSelector, opts: ScopeOrOptions = None, default: float | None = None) -> dict[str, Any]:
    """Number schema."""
    return _build(selector, opts, number=True, default=default)


def integer(selector: SimpleSelector, opts: ScopeOrOptions = None, default: int | None = None) -> dict[str, Any]:
    """Number schema rounded to an integer."""
    return _build(selector, opts, number=True, int=True, default=default)


def boolean(
    selector: SimpleSelector,
    opts: ScopeOrOptions = None,
    truthy: str | list[str] | None = None,
    falsy: str | list[str] | None = None,
) -> dict[str, Any]:
    """Boolean schema."""
    return _build(selector, opts, boolean=True, truthy=truthy, falsy=falsy)


def date(
    selector: SimpleSelector,
    opts: ScopeOrOptions = None,
    parse: str | list[str] | None = None,
    format: str | None = None,
    default: Any = None,
) -> dict[str, Any]:
    """Date schema."""
    return _build(selector, opts, date=True, parse=parse, format=format, default=default)
