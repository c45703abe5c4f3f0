"""Pure mutations of a Forest snapshot.

Each function takes a snapshot and returns a new one; the input is never
modified. Paths follow the convention in `paths.py`.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional, Sequence

from .errors import InvalidAttribute, InvalidKind
from .fields import Field, FieldKind, Forest, new_field, parse_kind
from .paths import field_at, replace_children, split_parent

MUTABLE_ATTRIBUTES = ('name', 'kind')


def add_field(forest: Forest, path: Optional[Sequence[int]] = None, field: Optional[Field] = None) -> Forest:
    """Append a field (a fresh empty one by default) to the children at `path`."""
    if field is None:
        field = new_field()
    return replace_children(forest, path, lambda siblings: siblings + (field,))


def remove_field(forest: Forest, path: Sequence[int]) -> Forest:
    parent, idx = split_parent(path)
    # Resolve first so an out-of-range index fails instead of slicing to a no-op.
    _check_index(forest, parent, idx)
    return replace_children(forest, parent, lambda siblings: siblings[:idx] + siblings[idx + 1:])


def update_field(forest: Forest, path: Sequence[int], key: str, value: Any) -> Forest:
    """Set `name` or `kind` on the field at `path`.

    Switching the kind to nested keeps existing children (or starts with
    none); switching away from nested discards the subtree.
    """
    if key not in MUTABLE_ATTRIBUTES:
        raise InvalidAttribute(key, path)

    parent, idx = split_parent(path)
    _check_index(forest, parent, idx)

    if key == 'name':
        name = '' if value is None else str(value)
        return replace_children(forest, parent, lambda siblings: _swap(siblings, idx, lambda f: replace(f, name=name)))

    try:
        kind = parse_kind(value)
    except InvalidKind as e:
        raise InvalidKind(value, parent + (idx,)) from e

    def retype(f: Field) -> Field:
        if kind is FieldKind.NESTED:
            children = f.children if f.children is not None else ()
        else:
            children = None
        return replace(f, kind=kind, children=children)

    return replace_children(forest, parent, lambda siblings: _swap(siblings, idx, retype))


def _check_index(forest: Forest, parent, idx: int) -> None:
    field_at(forest, tuple(parent) + (idx,))


def _swap(siblings: Forest, idx: int, fn) -> Forest:
    return siblings[:idx] + (fn(siblings[idx]),) + siblings[idx + 1:]
