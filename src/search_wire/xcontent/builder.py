"""Structured document builder.

Documents are trees of objects, arrays, and scalars. Objects keep their
entries as ordered ``(key, value)`` pairs so a key may appear several times at
the same level; the bool filter relies on this to emit one entry per clause in
insertion order. JSON output is streamed pair by pair so duplicates survive,
with orjson encoding keys and scalars.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import logging
from types import MappingProxyType
from typing import Any, Self

import orjson

from search_wire.errors import RenderFailure


logger = logging.getLogger(__name__)

Params = Mapping[str, str]

EMPTY_PARAMS: Params = MappingProxyType({})

_UNSET: Any = object()


def param_as_bool(params: Params, key: str, default: bool = False) -> bool:
    """Read a boolean flag from render params ("true"/"false", case-insensitive)."""
    raw = params.get(key)
    if raw is None:
        return default
    return str(raw).strip().lower() in {"true", "1", "yes", "on"}


class DocumentObject:
    """Ordered object node whose keys may repeat."""

    __slots__ = ("_pairs",)

    def __init__(self, pairs: list[tuple[str, Any]] | None = None) -> None:
        self._pairs: list[tuple[str, Any]] = list(pairs or [])

    def add(self, key: str, value: Any) -> None:
        self._pairs.append((key, value))

    def pairs(self) -> list[tuple[str, Any]]:
        return list(self._pairs)

    def keys(self) -> list[str]:
        return [key for key, _ in self._pairs]

    def get_all(self, key: str) -> list[Any]:
        return [value for entry_key, value in self._pairs if entry_key == key]

    def get(self, key: str, default: Any = None) -> Any:
        """Return the first value stored under ``key``."""
        for entry_key, value in self._pairs:
            if entry_key == key:
                return value
        return default

    def has_duplicate_keys(self) -> bool:
        keys = self.keys()
        return len(keys) != len(set(keys))

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain dicts, grouping repeated keys into lists.

        Values sharing a key keep their relative insertion order, but the
        interleaving between different keys is lost, so the result is not
        label-exact. A warning is logged whenever grouping happens.
        """
        grouped: dict[str, list[Any]] = {}
        for key, value in self._pairs:
            grouped.setdefault(key, []).append(_to_python(value))

        duplicates = sorted(key for key, values in grouped.items() if len(values) > 1)
        if duplicates:
            logger.warning(
                "Grouped repeated keys %s into lists; entry order across keys is not preserved",
                duplicates,
            )
        return {key: values[0] if len(values) == 1 else values for key, values in grouped.items()}

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentObject):
            return NotImplemented
        return self._pairs == other._pairs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DocumentObject({self._pairs!r})"


def _to_python(node: Any) -> Any:
    if isinstance(node, DocumentObject):
        return node.to_dict()
    if isinstance(node, list):
        return [_to_python(item) for item in node]
    return node


def _coerce(value: Any) -> Any:
    """Turn mappings and sequences passed as values into document nodes."""
    if isinstance(value, DocumentObject):
        return value
    if isinstance(value, Mapping):
        return DocumentObject([(str(key), _coerce(item)) for key, item in value.items()])
    if isinstance(value, (list, tuple)):
        return [_coerce(item) for item in value]
    return value


class DocumentBuilder:
    """Incremental builder for a single structured document.

    ``field(name)`` without a value leaves a pending name that the next
    ``start_object``/``start_array``/``value`` call consumes, which is how
    nested renderables attach themselves under a key chosen by their parent.
    """

    def __init__(self) -> None:
        self._stack: list[DocumentObject | list[Any]] = []
        self._pending: str | None = None
        self._root: Any = _UNSET

    def start_object(self, name: str | None = None) -> Self:
        if name is not None:
            self.field(name)
        node = DocumentObject()
        self._attach(node)
        self._stack.append(node)
        return self

    def end_object(self) -> Self:
        if not self._stack or not isinstance(self._stack[-1], DocumentObject):
            raise RenderFailure("end_object() without a matching start_object()")
        if self._pending is not None:
            raise RenderFailure(f"field '{self._pending}' was never given a value")
        self._stack.pop()
        return self

    def start_array(self, name: str | None = None) -> Self:
        if name is not None:
            self.field(name)
        node: list[Any] = []
        self._attach(node)
        self._stack.append(node)
        return self

    def end_array(self) -> Self:
        if not self._stack or not isinstance(self._stack[-1], list):
            raise RenderFailure("end_array() without a matching start_array()")
        self._stack.pop()
        return self

    def field(self, name: str, value: Any = _UNSET) -> Self:
        if not self._stack or not isinstance(self._stack[-1], DocumentObject):
            raise RenderFailure(f"field '{name}' must be written inside an object")
        if self._pending is not None:
            raise RenderFailure(f"field '{self._pending}' was never given a value")
        self._pending = name
        if value is not _UNSET:
            self.value(value)
        return self

    def value(self, value: Any) -> Self:
        self._attach(_coerce(value))
        return self

    def _attach(self, node: Any) -> None:
        if not self._stack:
            if self._root is not _UNSET:
                raise RenderFailure("document already has a root value")
            self._root = node
            return

        parent = self._stack[-1]
        if isinstance(parent, DocumentObject):
            if self._pending is None:
                raise RenderFailure("values inside an object need a field name")
            parent.add(self._pending, node)
            self._pending = None
        else:
            parent.append(node)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def build(self) -> Any:
        """Return the finished root node."""
        if self._stack:
            raise RenderFailure(f"document has {len(self._stack)} unclosed container(s)")
        if self._root is _UNSET:
            raise RenderFailure("document is empty")
        return self._root

    def to_json(self, *, pretty: bool = False) -> bytes:
        return dumps(self.build(), pretty=pretty)


def dumps(node: Any, *, pretty: bool = False) -> bytes:
    """Serialize a document node to JSON bytes, keeping repeated keys."""
    chunks: list[bytes] = []
    _write_node(node, chunks, pretty, 0)
    return b"".join(chunks)


def _write_node(node: Any, chunks: list[bytes], pretty: bool, depth: int) -> None:
    if isinstance(node, DocumentObject):
        entries = node.pairs()
        if not entries:
            chunks.append(b"{}")
            return
        chunks.append(b"{")
        for idx, (key, value) in enumerate(entries):
            if idx:
                chunks.append(b",")
            if pretty:
                chunks.append(b"\n" + b"  " * (depth + 1))
            chunks.append(_encode_scalar(key))
            chunks.append(b": " if pretty else b":")
            _write_node(value, chunks, pretty, depth + 1)
        if pretty:
            chunks.append(b"\n" + b"  " * depth)
        chunks.append(b"}")
        return

    if isinstance(node, list):
        if not node:
            chunks.append(b"[]")
            return
        chunks.append(b"[")
        for idx, item in enumerate(node):
            if idx:
                chunks.append(b",")
            if pretty:
                chunks.append(b"\n" + b"  " * (depth + 1))
            _write_node(item, chunks, pretty, depth + 1)
        if pretty:
            chunks.append(b"\n" + b"  " * depth)
        chunks.append(b"]")
        return

    chunks.append(_encode_scalar(node))


def _encode_scalar(value: Any) -> bytes:
    try:
        return orjson.dumps(value)
    except orjson.JSONEncodeError as exc:
        raise RenderFailure(f"cannot encode {type(value).__name__} value: {exc}") from exc
