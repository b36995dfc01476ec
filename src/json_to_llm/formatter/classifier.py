"""Classification of arrays for compact single-line rendering."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ArrayKind(str, Enum):
    """How an array is rendered."""

    STRING = "StringArray"
    NUMBER = "NumberArray"
    BOOLEAN = "BooleanArray"
    GENERIC = "Array"

    @property
    def is_typed(self) -> bool:
        return self is not ArrayKind.GENERIC


def _primitive_kind(item: Any) -> ArrayKind | None:
    if isinstance(item, str):
        return ArrayKind.STRING
    if isinstance(item, bool):
        return ArrayKind.BOOLEAN
    if isinstance(item, (int, float)):
        return ArrayKind.NUMBER
    return None


def classify_array(items: list[Any], ignore_falsy: bool = True) -> ArrayKind:
    """Decide whether an array can be rendered as a typed one-liner.

    Args:
        items: Normalized array elements.
        ignore_falsy: When True, None elements are skipped; otherwise
            their presence forces the generic form.

    Returns:
        The typed kind when every surviving element shares one primitive
        kind, ArrayKind.GENERIC otherwise.

    Examples:
        >>> classify_array(["a", None, "b"])
        <ArrayKind.STRING: 'StringArray'>
        >>> classify_array(["a", None, "b"], ignore_falsy=False)
        <ArrayKind.GENERIC: 'Array'>
        >>> classify_array([1, True])
        <ArrayKind.GENERIC: 'Array'>
    """
    kinds: set[ArrayKind] = set()
    for item in items:
        if item is None:
            if not ignore_falsy:
                return ArrayKind.GENERIC
            continue
        kind = _primitive_kind(item)
        if kind is None:
            return ArrayKind.GENERIC
        kinds.add(kind)
        if len(kinds) > 1:
            return ArrayKind.GENERIC

    if len(kinds) != 1:
        return ArrayKind.GENERIC
    return next(iter(kinds))
