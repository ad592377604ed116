"""Binary stream primitives for the request wire format.

Encoding rules:
- boolean: one byte, 0 or 1
- vint: unsigned 32-bit integer in 7-bit groups, low group first, high bit
  set on every byte except the last (at most 5 bytes)
- int: 4 bytes, big-endian, signed
- string: vint byte length followed by UTF-8 bytes
- optional string: boolean presence flag, then a string when present
"""

from __future__ import annotations

import io
import struct
from typing import TYPE_CHECKING, BinaryIO, Protocol, TypeVar

from search_wire.errors import MalformedStream


if TYPE_CHECKING:
    from collections.abc import Sequence


DEFAULT_MAX_STRING_BYTES = 10 * 1024 * 1024
DEFAULT_MAX_ARRAY_SIZE = 65536

_VINT_MAX = 0xFFFFFFFF
_VINT_MAX_BYTES = 5
_INT = struct.Struct(">i")

T = TypeVar("T", bound="Streamable")


class Streamable(Protocol):
    """Protocol implemented by values that travel over the wire."""

    def write_to(self, out: StreamOutput) -> None:  # pragma: no cover - interface definition
        ...

    @classmethod
    def read_from(cls: type[T], stream: StreamInput) -> T:  # pragma: no cover - interface definition
        ...


class StreamInput:
    """Reads wire primitives from bytes or a binary file-like object.

    Every short read or corrupt value raises ``MalformedStream``; errors from
    the underlying source are chained onto it.
    """

    def __init__(
        self,
        source: bytes | bytearray | memoryview | BinaryIO,
        *,
        max_string_bytes: int = DEFAULT_MAX_STRING_BYTES,
        max_array_size: int = DEFAULT_MAX_ARRAY_SIZE,
    ) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._source: BinaryIO = io.BytesIO(bytes(source))
        else:
            self._source = source
        self.max_string_bytes = max_string_bytes
        self.max_array_size = max_array_size

    def read_bytes(self, length: int) -> bytes:
        if length < 0:
            raise MalformedStream(f"negative read length: {length}")
        try:
            data = self._source.read(length)
        except (OSError, ValueError) as exc:
            raise MalformedStream(f"failed reading {length} bytes: {exc}") from exc
        if data is None or len(data) < length:
            got = 0 if data is None else len(data)
            raise MalformedStream(f"unexpected end of stream: wanted {length} bytes, got {got}")
        return data

    def read_byte(self) -> int:
        return self.read_bytes(1)[0]

    def read_boolean(self) -> bool:
        value = self.read_byte()
        if value == 0:
            return False
        if value == 1:
            return True
        raise MalformedStream(f"invalid boolean byte: {value:#04x}")

    def read_vint(self) -> int:
        result = 0
        for index in range(_VINT_MAX_BYTES):
            byte = self.read_byte()
            if index == _VINT_MAX_BYTES - 1 and byte & 0xF0:
                raise MalformedStream(f"corrupt vint: final byte {byte:#04x} overflows 32 bits")
            result |= (byte & 0x7F) << (7 * index)
            if not byte & 0x80:
                return result
        raise MalformedStream("corrupt vint: too many continuation bytes")  # pragma: no cover - loop always returns

    def read_int(self) -> int:
        return _INT.unpack(self.read_bytes(_INT.size))[0]

    def read_string(self) -> str:
        length = self.read_vint()
        if length > self.max_string_bytes:
            raise MalformedStream(f"string length {length} exceeds limit {self.max_string_bytes}")
        raw = self.read_bytes(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedStream(f"invalid UTF-8 in string: {exc}") from exc

    def read_optional_string(self) -> str | None:
        if self.read_boolean():
            return self.read_string()
        return None

    def read_array_size(self) -> int:
        size = self.read_vint()
        if size > self.max_array_size:
            raise MalformedStream(f"array size {size} exceeds limit {self.max_array_size}")
        return size

    def read_string_list(self) -> list[str]:
        size = self.read_array_size()
        return [self.read_string() for _ in range(size)]

    def remaining(self) -> int | None:
        """Bytes left in a seekable source, or None when the source cannot tell."""
        try:
            if not self._source.seekable():
                return None
            position = self._source.tell()
            end = self._source.seek(0, io.SEEK_END)
            self._source.seek(position)
        except (OSError, ValueError):
            return None
        return end - position


class StreamOutput:
    """Writes wire primitives to a binary sink (an in-memory buffer by default)."""

    def __init__(self, sink: BinaryIO | None = None) -> None:
        self._sink: BinaryIO = sink if sink is not None else io.BytesIO()

    def write_bytes(self, data: bytes) -> None:
        self._sink.write(data)

    def write_byte(self, value: int) -> None:
        self.write_bytes(bytes((value,)))

    def write_boolean(self, value: bool) -> None:
        self.write_byte(1 if value else 0)

    def write_vint(self, value: int) -> None:
        if value < 0 or value > _VINT_MAX:
            raise ValueError(f"vint out of range: {value}")
        encoded = bytearray()
        while value & ~0x7F:
            encoded.append((value & 0x7F) | 0x80)
            value >>= 7
        encoded.append(value)
        self.write_bytes(bytes(encoded))

    def write_int(self, value: int) -> None:
        try:
            self.write_bytes(_INT.pack(value))
        except struct.error as exc:
            raise ValueError(f"int out of range: {value}") from exc

    def write_string(self, value: str) -> None:
        raw = value.encode("utf-8")
        self.write_vint(len(raw))
        self.write_bytes(raw)

    def write_optional_string(self, value: str | None) -> None:
        if value is None:
            self.write_boolean(False)
        else:
            self.write_boolean(True)
            self.write_string(value)

    def write_string_list(self, values: Sequence[str] | None) -> None:
        """Write a count-prefixed list; None is written as an empty list."""
        if values is None:
            self.write_vint(0)
            return
        self.write_vint(len(values))
        for value in values:
            self.write_string(value)

    def getvalue(self) -> bytes:
        """Return everything written so far when backed by an in-memory buffer."""
        if not isinstance(self._sink, io.BytesIO):
            raise TypeError("getvalue() is only available for in-memory streams")
        return self._sink.getvalue()
