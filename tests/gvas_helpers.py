"""Builders shared by the test modules."""

from __future__ import annotations

import struct

from libgvas.binio import Bin, BinWriter
from libgvas.hints import HintStack
from libgvas.model import FCustomVersion, FEngineVersion, GvasFile, GvasHeader, Guid
from libgvas.properties import read_property
from libgvas.reader import GVAS_MAGIC

GUID_A = Guid(bytes(range(16)))
GUID_B = Guid(bytes(range(16, 32)))


def make_header(class_name: str = "/Script/Game.SaveGame") -> GvasHeader:
    return GvasHeader(
        file_type_tag=GVAS_MAGIC,
        save_game_file_version=2,
        package_file_ue4_version=522,
        engine_version=FEngineVersion(4, 27, 2, 18319896, "++UE4+Release-4.27"),
        custom_version_format=3,
        custom_versions=[FCustomVersion(GUID_A, 7), FCustomVersion(GUID_B, 42)],
        save_game_class_name=class_name,
    )


def make_file(properties: dict) -> GvasFile:
    return GvasFile(header=make_header(), properties=dict(properties))


def encode_prop(prop, include_header: bool = True) -> bytes:
    w = BinWriter()
    prop.write(w, include_header)
    return w.to_bytes()


def decode_prop(data: bytes, hints=None, root: str = "Root"):
    """Decode bytes produced by encode_prop(prop, True)."""
    b = Bin(data)
    hs = HintStack(hints)
    property_type = b.fstring()
    with hs.scope(root):
        prop = read_property(b, hs, property_type, True)
    assert b.tell() == len(data)
    return prop


def fstring(s: str) -> bytes:
    w = BinWriter()
    w.fstring(s)
    return w.to_bytes()


def u64(v: int) -> bytes:
    return struct.pack("<Q", v)


def s32(v: int) -> bytes:
    return struct.pack("<i", v)
