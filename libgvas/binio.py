"""libgvas.binio

Little-endian cursor reader/writer plus the Unreal FString codec.

FString layout:
  int32 length
    > 0 : ASCII/UTF-8 bytes (length - 1) + 1 NUL byte
    < 0 : UTF-16LE code units (-length - 1) + 1 NUL unit
    = 0 : empty string, nothing follows
"""

from __future__ import annotations

import io
import logging
import struct

from .errors import InvalidString, InvalidValue, UnexpectedEof
from .model import Guid

log = logging.getLogger(__name__)

# Sanity bound on FString lengths, in either direction.
MAX_STRING_LENGTH = 131072
_I32_MIN = -(2**31)


class Bin:
    __slots__ = ("data", "ofs")

    def __init__(self, data: bytes):
        self.data = data
        self.ofs = 0

    def tell(self) -> int:
        return self.ofs

    def seek(self, ofs: int) -> None:
        self.ofs = ofs

    @property
    def remaining(self) -> int:
        return len(self.data) - self.ofs

    def read(self, n: int) -> bytes:
        b = self.data[self.ofs : self.ofs + n]
        if n < 0 or len(b) != n:
            raise UnexpectedEof(self.ofs, n)
        self.ofs += n
        return bytes(b)

    def _unpack(self, fmt: str, n: int):
        return struct.unpack(fmt, self.read(n))[0]

    def u8(self) -> int:
        return self.read(1)[0]

    def s8(self) -> int:
        return self._unpack("<b", 1)

    def u16(self) -> int:
        return self._unpack("<H", 2)

    def s16(self) -> int:
        return self._unpack("<h", 2)

    def u32(self) -> int:
        return self._unpack("<I", 4)

    def s32(self) -> int:
        return self._unpack("<i", 4)

    def u64(self) -> int:
        return self._unpack("<Q", 8)

    def s64(self) -> int:
        return self._unpack("<q", 8)

    def f32(self) -> float:
        return self._unpack("<f", 4)

    def f64(self) -> float:
        return self._unpack("<d", 8)

    def guid(self) -> Guid:
        return Guid(self.read(16))

    def fstring(self) -> str:
        start = self.ofs
        n = self.s32()
        if n == _I32_MIN or not -MAX_STRING_LENGTH <= n <= MAX_STRING_LENGTH:
            raise InvalidString(n, start)
        if n == 0:
            return ""

        if n < 0:
            raw = self.read(-n * 2 - 2)
            try:
                s = raw.decode("utf-16-le")
            except UnicodeDecodeError as e:
                raise InvalidString(n, start) from e
            self.read(2)
            return s

        raw = self.read(n - 1)
        self.read(1)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            log.warning("Undecodable UTF-8 string at offset %d, substituting 'None'", start)
            return "None"


class BinWriter:
    """Seekable writer; lengths are reserved, then patched once the body is known."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()

    def tell(self) -> int:
        return self._buffer.tell()

    def seek(self, ofs: int) -> None:
        self._buffer.seek(ofs)

    def to_bytes(self) -> bytes:
        return self._buffer.getvalue()

    def write(self, data: bytes) -> None:
        self._buffer.write(data)

    def u8(self, v: int) -> None:
        self._buffer.write(struct.pack("<B", v))

    def s8(self, v: int) -> None:
        self._buffer.write(struct.pack("<b", v))

    def u16(self, v: int) -> None:
        self._buffer.write(struct.pack("<H", v))

    def s16(self, v: int) -> None:
        self._buffer.write(struct.pack("<h", v))

    def u32(self, v: int) -> None:
        self._buffer.write(struct.pack("<I", v))

    def s32(self, v: int) -> None:
        self._buffer.write(struct.pack("<i", v))

    def u64(self, v: int) -> None:
        self._buffer.write(struct.pack("<Q", v))

    def s64(self, v: int) -> None:
        self._buffer.write(struct.pack("<q", v))

    def _float(self, fmt: str, v: float) -> None:
        try:
            self._buffer.write(struct.pack(fmt, v))
        except (struct.error, OverflowError) as e:
            raise InvalidValue(f"Cannot write {v!r} as a float: {e}") from e

    def f32(self, v: float) -> None:
        self._float("<f", v)

    def f64(self, v: float) -> None:
        self._float("<d", v)

    def guid(self, g: Guid) -> None:
        self._buffer.write(g.raw)

    def fstring(self, s: str) -> None:
        if s.isascii():
            self.s32(len(s) + 1)
            self._buffer.write(s.encode("ascii"))
            self._buffer.write(b"\x00")
            return

        try:
            units = s.encode("utf-16-le")
        except UnicodeEncodeError as e:
            raise InvalidValue(f"String is not representable as UTF-16: {s!r}") from e
        self.s32(-(len(units) // 2 + 1))
        self._buffer.write(units)
        self._buffer.write(b"\x00\x00")

    def patch_u64(self, at: int, value: int) -> None:
        """Overwrite a reserved u64 at `at`, then return to the end of the written data."""
        end = self.tell()
        self.seek(at)
        self.u64(value)
        self.seek(end)
