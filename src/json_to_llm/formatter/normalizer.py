"""Projection of arbitrary Python values onto plain JSON-shaped data.

The normalizer is the single authoritative canonicalization step: only
data a JSON encoder could represent survives. Callables, classes and
modules are dropped, private attributes are skipped, and container types
with no JSON counterpart (sets, weak containers, patterns, exceptions,
futures, iterators) collapse to empty objects.

Cycles are detected with a branch-scoped set of ancestor ids, so a value
shared by two sibling branches is normalized twice rather than being
reported as circular.
"""

from __future__ import annotations

import array
import dataclasses
import functools
import inspect
import ipaddress
import math
import numbers
import re
import uuid
import weakref
from asyncio import Future as AsyncFuture
from collections.abc import Awaitable, Iterator, Mapping, Sequence, Set
from concurrent.futures import Future as ThreadFuture
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from types import ModuleType
from typing import Any, Union
from urllib.parse import DefragResult, ParseResult, SplitResult

from pydantic import AnyUrl, BaseModel
from pydantic_core import MultiHostUrl, Url

from json_to_llm.formatter.primitives import format_number

NormalizedValue = Union[
    None, bool, int, float, str, list["NormalizedValue"], dict[str, "NormalizedValue"]
]

_STRING_FORM_TYPES = (
    uuid.UUID,
    PurePath,
    AnyUrl,
    Url,
    MultiHostUrl,
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
    ipaddress.IPv4Interface,
    ipaddress.IPv6Interface,
)

_URL_RESULT_TYPES = (SplitResult, ParseResult, DefragResult)

_BYTES_TYPES = (bytes, bytearray, memoryview, array.array)

_OPAQUE_TYPES = (
    Set,
    weakref.WeakSet,
    weakref.WeakKeyDictionary,
    weakref.WeakValueDictionary,
    re.Pattern,
    BaseException,
    AsyncFuture,
    ThreadFuture,
    Awaitable,
    Iterator,
)

# Marker for values that vanish from objects and become null inside arrays.
_OMIT = object()


class NormalizationError(Exception):
    """Base class for values that cannot be projected onto JSON data."""

    def diagnostic(self) -> str:
        """One-line bracketed message shown in place of the formatted body."""
        return f"[Error: {self}]"


class CircularStructureError(NormalizationError):
    """The value transitively contains itself."""

    def __init__(self) -> None:
        super().__init__("Circular structure detected")

    def diagnostic(self) -> str:
        return "[Error: Circular structure detected - cannot serialize to JSON]"


class UnsupportedTypeError(NormalizationError):
    """A value has no JSON projection at all."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Cannot serialize {kind} to JSON")


class GenericSerializationError(NormalizationError):
    """Any other failure while normalizing; keeps the underlying message."""

    def diagnostic(self) -> str:
        return f"[Error: JSON serialization failed - {self}]"


def _is_omitted(value: Any) -> bool:
    return (
        inspect.isroutine(value)
        or inspect.isclass(value)
        or isinstance(value, (ModuleType, functools.partial))
    )


def _describe(value: Any) -> str:
    if inspect.isclass(value):
        return "class"
    if isinstance(value, ModuleType):
        return "module"
    if _is_omitted(value):
        return "function"
    return type(value).__name__


def _normalize_float(value: float) -> float | None:
    if not math.isfinite(value):
        return None
    if value == 0:
        return 0.0
    return value


def _isoformat(value: datetime) -> str:
    if value.tzinfo is not None and value.utcoffset() is not None:
        utc = value.astimezone(timezone.utc).replace(tzinfo=None)
        return utc.isoformat(timespec="milliseconds") + "Z"
    return value.isoformat()


def _object_key(key: Any) -> str:
    """Stringify a mapping key the way json.dumps does."""
    if isinstance(key, str):
        return str.__str__(key)
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, numbers.Integral):
        return format_number(int(key))
    if isinstance(key, float):
        return format_number(key)
    msg = f"keys must be str, int, float, bool or None, not {type(key).__name__}"
    raise GenericSerializationError(msg)


def _public_attributes(value: Any) -> list[tuple[str, Any]]:
    """Collect public instance attributes from __dict__ and __slots__."""
    attributes: dict[str, Any] = {}

    for klass in reversed(type(value).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name.startswith("_"):
                continue
            try:
                attributes[name] = getattr(value, name)
            except AttributeError:
                continue

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, Mapping):
        for name, item in instance_dict.items():
            if isinstance(name, str) and not name.startswith("_"):
                attributes[name] = item

    return list(attributes.items())


class _Frame:
    """A composite node whose children are still being normalized."""

    __slots__ = ("node", "out", "items")

    def __init__(self, node: Any, out: dict[str, Any] | list[Any], items: Iterator[Any]) -> None:
        self.node = node
        self.out = out
        self.items = items

    def add(self, key: Any, value: Any) -> None:
        if isinstance(self.out, list):
            self.out.append(None if value is _OMIT else value)
        elif value is not _OMIT:
            self.out[_object_key(key)] = value


_DONE = object()


class _Normalizer:
    """Single-use walker mapping host values to NormalizedValue trees.

    Composite nodes are expanded on an explicit stack, so input depth is
    bounded by memory rather than by the interpreter's recursion limit.
    Each node's id stays in the ancestor set until its last child is done.
    """

    def __init__(self) -> None:
        self._path: set[int] = set()

    def run(self, data: Any) -> NormalizedValue:
        root = self._open(data)
        if root is _OMIT:
            raise UnsupportedTypeError(_describe(data))
        if not isinstance(root, _Frame):
            return root

        try:
            stack = [root]
            while stack:
                frame = stack[-1]
                entry = next(frame.items, _DONE)
                if entry is _DONE:
                    stack.pop()
                    if frame.node is not None:
                        self._path.discard(id(frame.node))
                    continue

                key, item = entry
                child = self._open(item)
                if isinstance(child, _Frame):
                    frame.add(key, child.out)
                    stack.append(child)
                else:
                    frame.add(key, child)
        finally:
            self._path.clear()

        return root.out

    def _enter(self, node: Any, out: dict[str, Any] | list[Any], items: Iterator[Any]) -> _Frame:
        key = id(node)
        if key in self._path:
            raise CircularStructureError()
        self._path.add(key)
        return _Frame(node, out, items)

    def _open(self, value: Any) -> Any:
        """Return a finished value for leaves, or a _Frame for composites."""
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, Enum):
            return self._open(value.value)
        if isinstance(value, str):
            return str.__str__(value)
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, (float, Decimal, numbers.Real)):
            return _normalize_float(float(value))
        if isinstance(value, numbers.Complex):
            raise UnsupportedTypeError(type(value).__name__)

        if isinstance(value, datetime):
            return _isoformat(value)
        if isinstance(value, (date, time)):
            return value.isoformat()
        if isinstance(value, _URL_RESULT_TYPES):
            return value.geturl()
        if isinstance(value, _STRING_FORM_TYPES):
            return str(value)

        if _is_omitted(value):
            return _OMIT
        if isinstance(value, _BYTES_TYPES):
            # Byte buffers become objects keyed by decimal index
            items = value.tolist() if isinstance(value, (memoryview, array.array)) else list(value)
            return _Frame(None, {}, enumerate(items))
        if isinstance(value, _OPAQUE_TYPES):
            return {}

        if dataclasses.is_dataclass(value):
            fields = (
                (field.name, getattr(value, field.name))
                for field in dataclasses.fields(value)
                if not field.name.startswith("_")
            )
            return self._enter(value, {}, fields)
        if isinstance(value, BaseModel):
            return self._enter(value, {}, iter(value))
        if isinstance(value, Mapping):
            return self._enter(value, {}, iter(value.items()))
        if isinstance(value, Sequence):
            return self._enter(value, [], ((None, item) for item in value))

        return self._enter(value, {}, iter(_public_attributes(value)))


def normalize(data: Any) -> NormalizedValue:
    """Project an arbitrary value onto JSON-representable data.

    Args:
        data: Any Python value.

    Returns:
        A fresh, acyclic tree of None/bool/int/float/str/list/dict.

    Raises:
        CircularStructureError: If the value transitively contains itself.
        UnsupportedTypeError: If the value (or a nested complex number)
            has no projection.
        GenericSerializationError: For any other failure, such as an
            unsupported key type or an attribute getter that raises.
    """
    try:
        return _Normalizer().run(data)
    except NormalizationError:
        raise
    except Exception as e:
        raise GenericSerializationError(str(e)) from e
