"""Optional-path traversal over loosely-typed nested objects.

Host objects arrive as decoded JSON (dicts and lists), as attribute-bearing
objects, or as any mix of the two. A path is walked one segment at a time:

    - Mapping        -> key lookup
    - list / tuple   -> integer index (numeric segments only)
    - anything else  -> attribute lookup

A missing step ends the walk with "absent" instead of raising.

Usage::

    from molmeta.core.paths import resolve

    model = resolve(structure, (
        "cell.obj.data.state.models.0",
        "cell.obj.data.models.0",
        "cell.obj.data",
    ))
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional, Union

PathLike = Union[str, tuple, Callable[[Any], Any]]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def _split(path: str | tuple) -> tuple:
    if isinstance(path, str):
        return tuple(p for p in path.split(".") if p)
    return tuple(path)


def _step(obj: Any, segment: Any) -> Any:
    if obj is None or obj is MISSING:
        return MISSING
    if isinstance(obj, Mapping):
        if segment in obj:
            return obj[segment]
        return MISSING
    if isinstance(obj, (list, tuple)):
        try:
            idx = int(segment)
        except (TypeError, ValueError):
            return MISSING
        if -len(obj) <= idx < len(obj):
            return obj[idx]
        return MISSING
    if isinstance(obj, (str, bytes)) or not isinstance(segment, str):
        return MISSING
    return getattr(obj, segment, MISSING)


def get_path(root: Any, path: str | tuple) -> Any:
    """Walk a single path; return None when any step is missing."""
    node = root
    for segment in _split(path):
        node = _step(node, segment)
        if node is MISSING:
            return None
    return node


def _evaluate(root: Any, candidate: PathLike) -> Any:
    if callable(candidate):
        return candidate(root)
    return get_path(root, candidate)


def resolve(root: Any, candidates: Iterable[PathLike]) -> Optional[Any]:
    """Return the first candidate that resolves to a non-None value.

    Candidates are evaluated lazily, in order. Each one is a dotted path
    string, a tuple of segments, or an accessor ``f(root) -> value | None``.
    """
    for candidate in candidates:
        value = _evaluate(root, candidate)
        if value is not None and value is not MISSING:
            return value
    return None


def first_not_none(*values: Any) -> Optional[Any]:
    for v in values:
        if v is not None and v is not MISSING:
            return v
    return None
