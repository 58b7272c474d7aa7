"""Selector-string grammar and transform pipeline utilities.

A selector string has the shape ``<query>[@<attribute>][| transform]*``
where each transform is ``name`` or ``name: arg1 arg2 "quoted arg"``.
"""

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

TransformFunction = Callable[..., Any]

# "|" followed by "=" belongs to an attribute selector such as [lang|=en]
_PIPE_SPLIT = re.compile(r"\s*\|(?!=)\s*")
_SELECTOR_AND_ATTRIBUTE = re.compile(r"^([^@]*)(?:@\s*([\w\-:]+))?$")
_ARGUMENT_TOKEN = re.compile(r'"((?:[^"\\]|\\.)*)"|\'((?:[^\'\\]|\\.)*)\'|(\S+)')
_ESCAPED_QUOTE = re.compile(r"\\([\"'])")


@dataclass(frozen=True)
class ParsedSelector:
    """Result of parsing a selector string."""

    selector: str | None = None
    attribute: str | None = None
    transforms: list[str] = field(default_factory=list)


def parse_selector_string(raw: str) -> ParsedSelector:
    """Split a selector string into query, attribute and transform specs.

    Args:
        raw: Selector string, e.g. ``"a.title @ href | lowercase"``

    Returns:
        ParsedSelector. ``selector`` is None when the query part is empty,
        ``attribute`` is None when no ``@`` is present.
    """
    transforms = _PIPE_SPLIT.split(raw)
    head = transforms.pop(0).strip()
    if not head:
        return ParsedSelector(transforms=transforms)

    match = _SELECTOR_AND_ATTRIBUTE.match(head)
    if not match:
        return ParsedSelector(transforms=transforms)

    selector = match.group(1).strip()
    return ParsedSelector(
        selector=selector or None,
        attribute=match.group(2),
        transforms=transforms,
    )


def parse_transform_spec(spec: str) -> tuple[str, list[str]]:
    """Parse ``name: arg1 "arg 2"`` into a name and its arguments.

    Arguments are whitespace separated; single or double quotes group
    arguments containing spaces. Arguments are always strings.
    """
    name, _, rest = spec.partition(":")
    args: list[str] = []
    for match in _ARGUMENT_TOKEN.finditer(rest):
        double_quoted, single_quoted, bare = match.groups()
        if bare is not None:
            args.append(bare)
        else:
            quoted = double_quoted if double_quoted is not None else single_quoted
            args.append(_ESCAPED_QUOTE.sub(r"\1", quoted))
    return name.strip(), args


def _bind(transform: TransformFunction, args: list[str]) -> TransformFunction:
    def bound(value: Any) -> Any:
        return transform(value, *args)

    bound.__name__ = getattr(transform, "__name__", "transform")
    return bound


def build_transform_list(
    raw: list[TransformFunction | str] | tuple | None,
    registry: Mapping[str, TransformFunction],
) -> list[TransformFunction]:
    """Resolve inline functions and named transforms into an ordered chain.

    Unknown names are dropped without error so that schemas can reference
    transforms a given registry does not provide.

    Args:
        raw: Mixed list of callables and transform specs
        registry: Named transforms available for lookup

    Returns:
        Callables taking a single value, in source order
    """
    result: list[TransformFunction] = []
    for item in wrap_array(raw):
        if callable(item):
            result.append(item)
            continue
        if not isinstance(item, str):
            continue
        name, args = parse_transform_spec(item)
        transform = registry.get(name)
        if transform is None:
            logger.debug(f"Ignoring unknown transform: {name}")
            continue
        result.append(_bind(transform, args))
    return result


async def apply_transforms(value: Any, transforms: list[TransformFunction]) -> Any:
    """Run transforms left to right, awaiting any awaitable result."""
    for transform in transforms:
        value = transform(value)
        if inspect.isawaitable(value):
            value = await value
    return value


def wrap_array(value: Any) -> list:
    """Return lists unchanged, wrap other values, map None to []."""
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value] if value is not None else []


def is_object(value: Any) -> bool:
    """Check for a plain key/value mapping."""
    return isinstance(value, dict)


def render_scalar(value: Any) -> str:
    """Render a scalar the way scraped text represents it.

    Booleans become ``true``/``false`` and integral floats drop ``.0``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(render_scalar(item) for item in value)
    return str(value)
