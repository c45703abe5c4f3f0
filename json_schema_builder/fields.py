from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

from .errors import InvalidKind


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    NESTED = "nested"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def parse_kind(value: Any) -> FieldKind:
    """Coerce a dropdown value or label into a FieldKind.

    Matching is case-insensitive against both the value ('number') and the
    label ('Number').
    """
    if isinstance(value, FieldKind):
        return value
    if isinstance(value, str):
        needle = value.strip().lower()
        for kind in FieldKind:
            if needle == kind.value:
                return kind
    raise InvalidKind(value)


def generate_id() -> str:
    return uuid4().hex[:7]


@dataclass(frozen=True)
class Field:
    """One node of the schema tree.

    `children` is a tuple when the kind is nested and None otherwise.
    """
    id: str
    name: str = ""
    kind: FieldKind = FieldKind.STRING
    children: Optional[Tuple["Field", ...]] = None

    def __post_init__(self):
        if not isinstance(self.kind, FieldKind):
            object.__setattr__(self, "kind", parse_kind(self.kind))
        if (self.kind is FieldKind.NESTED) != (self.children is not None):
            raise ValueError(
                f"Field {self.id!r}: children must be present exactly when kind is nested "
                f"(kind={self.kind.value}, children={'set' if self.children is not None else 'None'})"
            )

    @property
    def is_nested(self) -> bool:
        return self.kind is FieldKind.NESTED

    def to_dict(self, include_id: bool = True) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if include_id:
            out['id'] = self.id
        out['name'] = self.name
        out['kind'] = self.kind.value
        if self.children is not None:
            out['children'] = [child.to_dict(include_id) for child in self.children]
        return out


Forest = Tuple[Field, ...]


def new_field() -> Field:
    return Field(id=generate_id())


def forest_to_dicts(forest: Forest, include_id: bool = True) -> List[Dict[str, Any]]:
    return [f.to_dict(include_id) for f in forest]
