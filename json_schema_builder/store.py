"""Field tree store: the single owner of the current Forest snapshot.

Mutations arrive as operation objects through `FieldTreeStore.dispatch`.
A successful dispatch swaps in a brand-new snapshot and recomputes the
preview before returning; a failed one raises and leaves both untouched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from .errors import SchemaBuilderError
from .fields import Forest
from .paths import format_path, normalize_path
from .preview import preview_json, project
from .tree_ops import add_field, remove_field, update_field

logger = logging.getLogger(__name__)

Listener = Callable[[Forest, Dict[str, Any]], None]


@dataclass(frozen=True)
class AddField:
    path: Tuple[int, ...] = ()

    def apply(self, forest: Forest) -> Forest:
        return add_field(forest, self.path)


@dataclass(frozen=True)
class RemoveField:
    path: Tuple[int, ...]

    def apply(self, forest: Forest) -> Forest:
        return remove_field(forest, self.path)


@dataclass(frozen=True)
class UpdateField:
    path: Tuple[int, ...]
    key: str
    value: Any

    def apply(self, forest: Forest) -> Forest:
        return update_field(forest, self.path, self.key, self.value)


Operation = Union[AddField, RemoveField, UpdateField]


class FieldTreeStore:
    def __init__(self, initial: Optional[Sequence] = None):
        self._snapshot: Forest = tuple(initial or ())
        self._preview: Dict[str, Any] = project(self._snapshot)
        self._listeners: List[Listener] = []

    @property
    def snapshot(self) -> Forest:
        return self._snapshot

    @property
    def preview(self) -> Dict[str, Any]:
        return self._preview

    def current_snapshot(self) -> Forest:
        return self._snapshot

    def current_preview(self) -> Dict[str, Any]:
        return self._preview

    def preview_json(self, indent: int = 2) -> str:
        return preview_json(self._preview, indent=indent)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run with (snapshot, preview) after each commit.

        Returns a function that removes the callback again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, operation: Operation) -> Forest:
        if not isinstance(operation, (AddField, RemoveField, UpdateField)):
            raise TypeError(f"Unsupported operation: {operation!r}")

        try:
            snapshot = operation.apply(self._snapshot)
        except SchemaBuilderError as e:
            logger.info(f"Rejected {type(operation).__name__}: {e}")
            raise

        preview = project(snapshot)
        self._snapshot = snapshot
        self._preview = preview
        logger.debug(
            f"{type(operation).__name__} at [{format_path(normalize_path(operation.path))}] "
            f"committed ({len(snapshot)} root field(s))"
        )

        for listener in list(self._listeners):
            listener(snapshot, preview)
        return snapshot

    def add_field(self, path: Sequence[int] = ()) -> Forest:
        return self.dispatch(AddField(tuple(path)))

    def remove_field(self, path: Sequence[int]) -> Forest:
        return self.dispatch(RemoveField(tuple(path)))

    def update_field(self, path: Sequence[int], key: str, value: Any) -> Forest:
        return self.dispatch(UpdateField(tuple(path), key, value))
