from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Sequence, Union

from .fields import Field, FieldKind, Forest


def project(forest: Sequence[Field]) -> Dict[str, Any]:
    """Mirror the forest as a plain nested mapping of name -> type label.

    Leaf fields map to "String" or "Number"; nested fields map to the
    projection of their children. Fields with an empty name are skipped
    together with their subtree. Duplicate sibling names collapse, the last
    one wins.
    """
    out: Dict[str, Any] = {}
    for field in forest:
        if not field.name:
            continue
        if field.kind is FieldKind.NESTED:
            out[field.name] = project(field.children or ())
        else:
            out[field.name] = field.kind.label
    return out


def preview_json(source: Union[Mapping[str, Any], Forest], indent: int = 2) -> str:
    """Serialize a preview (or a forest, projected first) as indented JSON text."""
    if not isinstance(source, Mapping):
        source = project(source)
    return json.dumps(source, indent=indent, ensure_ascii=False)
