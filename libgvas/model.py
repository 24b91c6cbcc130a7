from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from .properties import Property


# -----------------------------
# High-level, stable DTOs used by summarize_gvas
# -----------------------------

@dataclass
class GvasPropertyInfo:
    name: str
    property_type: str
    value: str

@dataclass
class GvasSummary:
    path: str
    file_size: int
    engine_version: str
    save_game_class_name: str
    custom_version_count: int
    properties: List[GvasPropertyInfo]


# -----------------------------
# Low-level model shared by reader and writer
# -----------------------------

_NAN = object()


def _nan_key(v):
    if isinstance(v, float) and math.isnan(v):
        return _NAN
    return v


class FloatValueEq:
    """Field-wise equality and hashing for dataclasses holding floats.

    NaN compares equal to NaN, so a decoded value equals its own re-decode.
    Subclasses are declared with `@dataclass(eq=False)`.
    """

    def _eq_key(self):
        return tuple(_nan_key(getattr(self, f.name)) for f in fields(self))

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._eq_key() == other._eq_key()

    def __hash__(self):
        return hash((self.__class__, self._eq_key()))


@dataclass(frozen=True)
class Guid:
    """16 raw bytes, kept in file order."""

    raw: bytes = bytes(16)

    def __post_init__(self) -> None:
        if len(self.raw) != 16:
            raise ValueError(f"Guid needs 16 bytes, got {len(self.raw)}")

    def __str__(self) -> str:
        h = self.raw.hex().upper()
        return f"{h[0:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:32]}"


@dataclass
class FEngineVersion:
    major: int
    minor: int
    patch: int
    change_list: int
    branch: str

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}-{self.change_list}+{self.branch}"


@dataclass
class FCustomVersion:
    key: Guid
    version: int


@dataclass
class GvasHeader:
    file_type_tag: int
    save_game_file_version: int
    package_file_ue4_version: int
    engine_version: FEngineVersion
    custom_version_format: int
    custom_versions: List[FCustomVersion] = field(default_factory=list)
    save_game_class_name: str = ""


@dataclass
class GvasFile:
    header: GvasHeader
    # Insertion order is the on-disk order; encode writes it back unchanged.
    properties: Dict[str, "Property"] = field(default_factory=dict)

    def get(self, name: str) -> Optional["Property"]:
        return self.properties.get(name)
