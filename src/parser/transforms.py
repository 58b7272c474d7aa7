"""Built-in transforms.

Every transform takes the current value first, followed by the string
arguments written after ``name:`` in a selector, e.g.
``"h1 | replace: foo bar | uppercase"``. Most transforms apply to each
item of a list and to each value of a dictionary.
"""

from __future__ import annotations

import json as _json
import re
from collections.abc import Callable
from typing import Any

from ..engine.common import TransformFunction, is_object, render_scalar

_REGEX_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


def _each(value: Any, transform: Callable[[Any], Any]) -> Any:
    if isinstance(value, list):
        return [transform(item) for item in value]
    if is_object(value):
        return {key: transform(item) for key, item in value.items()}
    return transform(value)


def _compile(pattern: str, flags: str = "") -> re.Pattern:
    compiled_flags = 0
    for flag in flags:
        compiled_flags |= _REGEX_FLAGS.get(flag, 0)
    return re.compile(pattern, compiled_flags)


_REPLACEMENT_TOKEN = re.compile(r"\$(\$|&|`|'|\d{1,2})")


def _expand(template: str, found: re.Match) -> str:
    """Expand ``$&``, ``$$``, group references ``$1`` to ``$99`` and the prefix/suffix tokens.

    Everything else, backslashes included, is inserted as written.
    """
    groups = found.re.groups

    def token(ref: re.Match) -> str:
        name = ref.group(1)
        if name == "$":
            return "$"
        if name == "&":
            return found.group(0)
        if name == "`":
            return found.string[:found.start()]
        if name == "'":
            return found.string[found.end():]
        if len(name) == 2 and 0 < int(name) <= groups:
            return found.group(int(name)) or ""
        # "$12" with fewer than 12 groups is group 1 followed by "2"
        first = int(name[0])
        if 0 < first <= groups:
            return (found.group(first) or "") + name[1:]
        return ref.group(0)

    return _REPLACEMENT_TOKEN.sub(token, template)


def replace(value: Any, pattern: Any, replacement: Any = "") -> Any:
    """Replace every regex match in strings; other values are replaced on equality.

    A non-string pattern is matched literally against its text form, so
    ``replace("true", True, False)`` gives ``"false"``. The replacement
    may refer to the match with ``$&`` and to groups with ``$1``.
    """
    regex = pattern if isinstance(pattern, str) else re.escape(render_scalar(pattern))
    text = replacement if isinstance(replacement, str) else render_scalar(replacement)

    def apply(item: Any) -> Any:
        if not isinstance(item, str):
            return replacement if item == pattern else item
        return re.sub(regex, lambda found: _expand(text, found), item)

    return _each(value, apply)


def match(value: Any, pattern: str, flags: str = "", default: Any = None) -> Any:
    """Keep the first regex match of strings, or ``default``."""
    def apply(item: Any) -> Any:
        if not isinstance(item, str):
            return item
        found = _compile(pattern, flags).search(item)
        return found.group(0) if found else default

    return _each(value, apply)


def match_all(value: Any, pattern: str, flags: str = "") -> Any:
    """All non-empty regex matches of strings, as a list."""
    def apply(item: Any) -> Any:
        if not isinstance(item, str):
            return item
        return [found.group(0) for found in _compile(pattern, flags).finditer(item) if found.group(0)]

    return _each(value, apply)


def split(value: Any, pattern: str = ",", flags: str = "") -> Any:
    """Split strings on a regex."""
    def apply(item: Any) -> Any:
        if not isinstance(item, str):
            return item
        return _compile(pattern, flags).split(item)

    return _each(value, apply)


def join(value: Any, separator: str = ",") -> Any:
    """Join a list, or the values of a dictionary, into a string."""
    if value is None:
        return None
    if isinstance(value, list):
        return separator.join(render_scalar(item) for item in value)
    if is_object(value):
        return separator.join(render_scalar(item) for item in value.values())
    return value


def default(value: Any, fallback: Any, mode: str | None = None, *values_to_default: Any) -> Any:
    """Replace None, listed values, and (by mode) blank/empty/falsy values.

    Modes: ``blank`` (whitespace-only strings), ``empty`` (``""``),
    ``falsy`` (any falsy value).
    """
    if value is None:
        return fallback

    def apply(item: Any) -> Any:
        if item is None or item in values_to_default:
            return fallback
        if mode == "falsy" and not item:
            return fallback
        if isinstance(item, str):
            if mode == "empty" and item == "":
                return fallback
            if mode == "blank" and item.strip() == "":
                return fallback
        return item

    return _each(value, apply)


def empty(value: Any, mode: str | None = "blank", *values_to_default: Any) -> Any:
    """Like ``def`` but falls back to an empty string."""
    return default(value, "", mode, *values_to_default)


def to_string(value: Any) -> str | None:
    """Render the whole value as one string."""
    if value is None:
        return None
    return render_scalar(value)


def stringify(value: Any) -> Any:
    """Render each item of a list or dictionary as a string."""
    if value is None:
        return None
    return _each(value, render_scalar)


def to_json(value: Any) -> str | None:
    """Serialize to compact JSON."""
    if value is None:
        return None
    return _json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def delete(value: Any, value_to_match: Any) -> Any:
    """Remove matching list items or dictionary entries; None for a matching scalar."""
    if value is None:
        return None
    if isinstance(value, list):
        return [item for item in value if item != value_to_match]
    if is_object(value):
        return {key: item for key, item in value.items() if item != value_to_match}
    return None if value == value_to_match else value


def wrap(value: Any, key: str | None = None) -> Any:
    """Wrap into a list, or into ``{key: value}`` when a key is given."""
    if key:
        return {key: value}
    return [value]


def flatten(value: Any, depth: int | str = 1) -> Any:
    """Flatten nested lists up to ``depth`` levels."""
    if not isinstance(value, list):
        return value
    depth = int(depth)
    result: list = []
    for item in value:
        if isinstance(item, list) and depth > 0:
            result.extend(flatten(item, depth - 1))
        else:
            result.append(item)
    return result


def unique(value: Any) -> Any:
    """Remove duplicate list items, keeping first occurrences."""
    if not isinstance(value, list):
        return value
    result: list = []
    for item in value:
        if item not in result:
            result.append(item)
    return result


def lowercase(value: Any) -> Any:
    return _each(value, lambda item: item.lower() if isinstance(item, str) else item)


def uppercase(value: Any) -> Any:
    return _each(value, lambda item: item.upper() if isinstance(item, str) else item)


def title(value: Any) -> Any:
    """Upper-case the first letter of each space separated word."""
    def apply(item: Any) -> Any:
        if not isinstance(item, str):
            return item
        return " ".join(word[:1].upper() + word[1:].lower() for word in item.split(" "))

    return _each(value, apply)


TRANSFORMS: dict[str, TransformFunction] = {
    "replace": replace,
    "match": match,
    "matchAll": match_all,
    "split": split,
    "join": join,
    "empty": empty,
    "def": default,
    "toString": to_string,
    "str": stringify,
    "json": to_json,
    "del": delete,
    "wrap": wrap,
    "flat": flatten,
    "unique": unique,
    "lowercase": lowercase,
    "uppercase": uppercase,
    "title": title,
}
