from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import InvalidPath, PathNotFound
from .fields import Field, Forest

Path = Tuple[int, ...]


def normalize_path(path: Optional[Sequence[int]]) -> Path:
    """Return the path as a tuple of non-negative ints.

    `None` is the root path. Entries that can never address a node
    (negative numbers, bools, non-integers) raise PathNotFound.
    """
    if path is None:
        return ()
    if isinstance(path, (str, bytes)):
        raise PathNotFound(f"Path must be a sequence of indices, got {path!r}.")

    out: List[int] = []
    for idx in path:
        if isinstance(idx, bool) or not isinstance(idx, int) or idx < 0:
            raise PathNotFound(f"Invalid index {idx!r} in path {list(path)!r}.", out)
        out.append(idx)
    return tuple(out)


def format_path(path: Sequence[int]) -> str:
    """Dotted text form of a path, e.g. (0, 2, 1) -> '0.2.1'. The root is ''."""
    return '.'.join(str(i) for i in path)


def parse_path(text: Optional[str]) -> Path:
    if text is None:
        return ()
    text = text.strip()
    if not text:
        return ()

    parts: List[int] = []
    for segment in text.split('.'):
        if not (segment.isascii() and segment.isdigit()):
            raise PathNotFound(f"Malformed path segment {segment!r} in {text!r}.", parts)
        parts.append(int(segment))
    return tuple(parts)


def split_parent(path: Sequence[int]) -> Tuple[Path, int]:
    path = normalize_path(path)
    if not path:
        raise InvalidPath("A field path is required; the root cannot be removed or updated.", path)
    return path[:-1], path[-1]


def _child(siblings: Sequence[Field], idx: int, path: Path, depth: int) -> Field:
    if idx >= len(siblings):
        raise PathNotFound(
            f"No field at path [{format_path(path[:depth + 1])}] "
            f"(index {idx} out of range, {len(siblings)} field(s) at this level).",
            path,
        )
    return siblings[idx]


def children_at(forest: Forest, path: Optional[Sequence[int]]) -> Forest:
    """Return the children sequence addressed by `path` (the forest for the root)."""
    path = normalize_path(path)
    current = forest
    for depth, idx in enumerate(path):
        node = _child(current, idx, path, depth)
        if node.children is None:
            raise PathNotFound(
                f"Field at path [{format_path(path[:depth + 1])}] is a {node.kind.value} field and has no children.",
                path,
            )
        current = node.children
    return current


def field_at(forest: Forest, path: Sequence[int]) -> Field:
    parent, idx = split_parent(path)
    siblings = children_at(forest, parent)
    return _child(siblings, idx, parent + (idx,), len(parent))


def replace_children(forest: Forest, path: Optional[Sequence[int]], fn: Callable[[Forest], Forest]) -> Forest:
    """Rebuild the forest with `fn` applied to the children sequence at `path`.

    Every node on the root-to-target chain is copied; untouched siblings are
    shared with the input. The input forest is never mutated.
    """
    path = normalize_path(path)

    def rebuild(siblings: Forest, depth: int) -> Forest:
        if depth == len(path):
            return tuple(fn(siblings))
        idx = path[depth]
        node = _child(siblings, idx, path, depth)
        if node.children is None:
            raise PathNotFound(
                f"Field at path [{format_path(path[:depth + 1])}] is a {node.kind.value} field and has no children.",
                path,
            )
        replaced = replace(node, children=rebuild(node.children, depth + 1))
        return siblings[:idx] + (replaced,) + siblings[idx + 1:]

    return rebuild(tuple(forest), 0)


def iter_paths(forest: Forest, prefix: Path = ()) -> List[Tuple[Path, Field]]:
    """Depth-first list of (path, field) pairs for every field in the forest."""
    out: List[Tuple[Path, Field]] = []
    for i, node in enumerate(forest):
        cur = prefix + (i,)
        out.append((cur, node))
        if node.children:
            out.extend(iter_paths(node.children, cur))
    return out
