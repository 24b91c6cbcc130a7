"""libgvas.struct_types

Fixed-layout value structs that appear as StructProperty payloads.

A StructProperty whose type name is registered here is decoded with the
registered reader; every other type name is decoded as a nested property list.
Callers can plug in more layouts with `register_struct_type`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, NamedTuple, Optional

from .binio import Bin, BinWriter
from .model import FloatValueEq, Guid


@dataclass(frozen=True, eq=False)
class Vector(FloatValueEq):
    x: float
    y: float
    z: float

    @classmethod
    def read(cls, b: Bin) -> "Vector":
        return cls(b.f32(), b.f32(), b.f32())

    def write(self, w: BinWriter) -> None:
        w.f32(self.x)
        w.f32(self.y)
        w.f32(self.z)


@dataclass(frozen=True, eq=False)
class Vector2D(FloatValueEq):
    x: float
    y: float

    @classmethod
    def read(cls, b: Bin) -> "Vector2D":
        return cls(b.f32(), b.f32())

    def write(self, w: BinWriter) -> None:
        w.f32(self.x)
        w.f32(self.y)


@dataclass(frozen=True, eq=False)
class Rotator(FloatValueEq):
    pitch: float
    yaw: float
    roll: float

    @classmethod
    def read(cls, b: Bin) -> "Rotator":
        return cls(b.f32(), b.f32(), b.f32())

    def write(self, w: BinWriter) -> None:
        w.f32(self.pitch)
        w.f32(self.yaw)
        w.f32(self.roll)


@dataclass(frozen=True, eq=False)
class Quat(FloatValueEq):
    x: float
    y: float
    z: float
    w: float

    @classmethod
    def read(cls, b: Bin) -> "Quat":
        return cls(b.f32(), b.f32(), b.f32(), b.f32())

    def write(self, w: BinWriter) -> None:
        w.f32(self.x)
        w.f32(self.y)
        w.f32(self.z)
        w.f32(self.w)


@dataclass(frozen=True, eq=False)
class LinearColor(FloatValueEq):
    r: float
    g: float
    b: float
    a: float

    @classmethod
    def read(cls, b: Bin) -> "LinearColor":
        return cls(b.f32(), b.f32(), b.f32(), b.f32())

    def write(self, w: BinWriter) -> None:
        w.f32(self.r)
        w.f32(self.g)
        w.f32(self.b)
        w.f32(self.a)


@dataclass(frozen=True)
class Color:
    # Stored BGRA on disk.
    b: int
    g: int
    r: int
    a: int

    @classmethod
    def read(cls, b: Bin) -> "Color":
        return cls(b.u8(), b.u8(), b.u8(), b.u8())

    def write(self, w: BinWriter) -> None:
        w.u8(self.b)
        w.u8(self.g)
        w.u8(self.r)
        w.u8(self.a)


@dataclass(frozen=True)
class IntPoint:
    x: int
    y: int

    @classmethod
    def read(cls, b: Bin) -> "IntPoint":
        return cls(b.s32(), b.s32())

    def write(self, w: BinWriter) -> None:
        w.s32(self.x)
        w.s32(self.y)


@dataclass(frozen=True)
class DateTime:
    """Ticks of 100ns since 0001-01-01."""

    ticks: int

    @classmethod
    def read(cls, b: Bin) -> "DateTime":
        return cls(b.u64())

    def write(self, w: BinWriter) -> None:
        w.u64(self.ticks)


@dataclass(frozen=True)
class Timespan:
    ticks: int

    @classmethod
    def read(cls, b: Bin) -> "Timespan":
        return cls(b.s64())

    def write(self, w: BinWriter) -> None:
        w.s64(self.ticks)


class StructType(NamedTuple):
    value_type: type
    read: Callable[[Bin], Any]
    write: Callable[[BinWriter, Any], None]


def _layout(cls: type) -> StructType:
    return StructType(cls, cls.read, lambda w, v: v.write(w))


STRUCT_TYPES: Dict[str, StructType] = {
    "Vector": _layout(Vector),
    "Vector2D": _layout(Vector2D),
    "Rotator": _layout(Rotator),
    "Quat": _layout(Quat),
    "LinearColor": _layout(LinearColor),
    "Color": _layout(Color),
    "IntPoint": _layout(IntPoint),
    "DateTime": _layout(DateTime),
    "Timespan": _layout(Timespan),
    "Guid": StructType(Guid, lambda b: b.guid(), lambda w, v: w.guid(v)),
}


def register_struct_type(name: str, value_type: type, read=None, write=None) -> None:
    """Register a fixed-layout struct.

    Without explicit callables, `value_type` must provide `read(b)` as a
    classmethod and `write(w)` as a method, like the built-ins above.
    """
    if read is None and write is None:
        STRUCT_TYPES[name] = _layout(value_type)
    elif read is None or write is None:
        raise ValueError("register_struct_type needs both read and write, or neither")
    else:
        STRUCT_TYPES[name] = StructType(value_type, read, write)


def lookup_struct_type(name: str) -> Optional[StructType]:
    return STRUCT_TYPES.get(name)
