"""Immutable resolution context built from a raw selector schema."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any

from .common import wrap_array


class SchemaKind(str, Enum):
    """Shape of a schema, decided once during normalization."""
    VALUE = "value"
    OBJECT = "object"
    UNSUPPORTED = "unsupported"


def _kind_of(selector: Any) -> SchemaKind:
    if isinstance(selector, Mapping):
        return SchemaKind.OBJECT
    if selector is None or isinstance(selector, str):
        return SchemaKind.VALUE
    if isinstance(selector, (list, tuple)):
        if not selector or selector[0] is None or isinstance(selector[0], str):
            return SchemaKind.VALUE
    return SchemaKind.UNSUPPORTED


@dataclass(frozen=True)
class ResolutionContext:
    """Normalized view of one schema for one resolution call.

    Never mutated. Per-field variants are derived with ``inherit`` which
    returns a new instance.

    Attributes:
        selector: Selector string, list of selector strings, or field map
        kind: Schema shape
        scope: Optional scope query (string or list)
        trim: Explicit trim flag, None when unset
        transforms: Per-value transforms (callables or specs)
        arr_transforms: Transforms applied to select-all result lists
        obj_transforms: Transforms applied to assembled objects
        flat: Merge this object's keys into its parent
        options: The raw schema mapping (type flags and type options)
    """

    selector: Any
    kind: SchemaKind
    scope: Any = None
    trim: bool | None = None
    transforms: tuple = ()
    arr_transforms: tuple = ()
    obj_transforms: tuple = ()
    flat: bool = False
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def of(cls, schema: Any) -> "ResolutionContext":
        """Normalize a bare selector or schema mapping into a context."""
        if isinstance(schema, ResolutionContext):
            return schema
        if not isinstance(schema, Mapping):
            schema = {"selector": schema}

        selector = schema.get("selector")
        return cls(
            selector=selector,
            kind=_kind_of(selector),
            scope=schema.get("scope"),
            trim=schema.get("trim"),
            transforms=tuple(wrap_array(schema.get("transforms"))),
            arr_transforms=tuple(wrap_array(schema.get("arrTransforms"))),
            obj_transforms=tuple(wrap_array(schema.get("objTransforms"))),
            flat=bool(schema.get("flat", False)),
            options=MappingProxyType(dict(schema)),
        )

    @property
    def is_select_all(self) -> bool:
        """A list selector selects every match instead of the first."""
        return isinstance(self.selector, (list, tuple))

    @property
    def active_selector(self) -> Any:
        """The selector in use; only element 0 of a list is consulted."""
        if self.is_select_all:
            return self.selector[0] if self.selector else None
        return self.selector

    def flag(self, name: str) -> Any:
        """Read a type flag or option from the raw schema."""
        return self.options.get(name)

    def inherit(self, parent: "ResolutionContext") -> "ResolutionContext":
        """Derive the context a field resolves with inside ``parent``.

        The field keeps its own trim flag when set, and the parent's
        transforms run after the field's own.
        """
        changes: dict[str, Any] = {}
        if parent.trim is not None and self.trim is None:
            changes["trim"] = parent.trim
        if parent.transforms:
            changes["transforms"] = self.transforms + parent.transforms
        if parent.arr_transforms:
            changes["arr_transforms"] = self.arr_transforms + parent.arr_transforms
        return replace(self, **changes) if changes else self
