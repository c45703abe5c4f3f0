from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from .errors import SchemaBuilderError
from .fields import FieldKind, Forest
from .paths import iter_paths
from .store import AddField, FieldTreeStore, Operation, RemoveField, UpdateField

HandlerResult = Tuple[Forest, str, str]


def summarize_fields(fields: Optional[Forest]) -> str:
    entries = iter_paths(tuple(fields or ()))
    if not entries:
        return "No fields yet."
    counts = {kind: 0 for kind in FieldKind}
    for _, field in entries:
        counts[field.kind] += 1
    unnamed = sum(1 for _, field in entries if not field.name)
    parts = ", ".join(f"{counts[kind]} {kind.value}" for kind in FieldKind)
    text = f"{len(entries)} field(s): {parts}."
    if unnamed:
        text += f" {unnamed} unnamed field(s) hidden from preview."
    return text


def _dispatch(fields: Optional[Forest], operation: Operation, indent: int) -> HandlerResult:
    store = FieldTreeStore(fields)
    try:
        store.dispatch(operation)
    except SchemaBuilderError as e:
        return store.snapshot, store.preview_json(indent), f"Error: {str(e)}"
    return store.snapshot, store.preview_json(indent), summarize_fields(store.snapshot)


def add_field_handler(path: Sequence[int], fields: Optional[Forest], indent: int = 2) -> HandlerResult:
    return _dispatch(fields, AddField(tuple(path)), indent)


def remove_field_handler(path: Sequence[int], fields: Optional[Forest], indent: int = 2) -> HandlerResult:
    return _dispatch(fields, RemoveField(tuple(path)), indent)


def rename_field_handler(path: Sequence[int], name: Any, fields: Optional[Forest], indent: int = 2) -> HandlerResult:
    return _dispatch(fields, UpdateField(tuple(path), 'name', name), indent)


def change_kind_handler(path: Sequence[int], kind: Any, fields: Optional[Forest], indent: int = 2) -> HandlerResult:
    return _dispatch(fields, UpdateField(tuple(path), 'kind', kind), indent)


def clear_fields_handler(indent: int = 2) -> HandlerResult:
    store = FieldTreeStore()
    return store.snapshot, store.preview_json(indent), summarize_fields(store.snapshot)


def field_component_key(prefix: str, field_id: str) -> str:
    """Key that keeps a rendered component attached to its field across re-renders."""
    return f"{prefix}-{field_id}"
