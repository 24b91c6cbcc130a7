"""libgvas.reader

GVAS save-file reader.

Layout:
  header   (see _parse_header)
  properties:
    FString name, FString type, property with header
    ... until the name "None"
  int32 0  (padding, ignored on read)

Structs nested in array/set/map elements carry no type name. When one is
reached without a matching hint, decoding stops with MissingHint, whose path is
the key to add to the hint map, e.g.

    hints = {"UnLockedMissionParameters.MapProperty.Key.StructProperty": "Guid"}
    gvas = read_gvas("save.sav", hints)
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .binio import Bin
from .errors import InvalidCount
from .hints import HintStack
from .model import FCustomVersion, FEngineVersion, GvasFile, GvasHeader
from .properties import read_property_list

log = logging.getLogger(__name__)

GVAS_MAGIC = 0x53415647  # b"GVAS" read as little-endian int32


def _parse_engine_version(b: Bin) -> FEngineVersion:
    major = b.u16()
    minor = b.u16()
    patch = b.u16()
    change_list = b.u32()
    branch = b.fstring()
    return FEngineVersion(major, minor, patch, change_list, branch)


def _parse_header(b: Bin) -> GvasHeader:
    file_type_tag = b.s32()
    if file_type_tag != GVAS_MAGIC:
        log.warning("File type tag 0x%08X is not 'GVAS'", file_type_tag & 0xFFFFFFFF)

    save_game_file_version = b.s32()
    package_file_ue4_version = b.s32()
    engine_version = _parse_engine_version(b)
    custom_version_format = b.s32()

    pos = b.tell()
    count = b.s32()
    # 20 bytes per entry
    if count < 0 or count * 20 > b.remaining:
        raise InvalidCount(count, pos)
    custom_versions = [FCustomVersion(b.guid(), b.s32()) for _ in range(count)]

    save_game_class_name = b.fstring()

    return GvasHeader(
        file_type_tag=file_type_tag,
        save_game_file_version=save_game_file_version,
        package_file_ue4_version=package_file_ue4_version,
        engine_version=engine_version,
        custom_version_format=custom_version_format,
        custom_versions=custom_versions,
        save_game_class_name=save_game_class_name,
    )


def decode_gvas(data: bytes, hints: Optional[Mapping[str, str]] = None) -> GvasFile:
    b = Bin(data)
    header = _parse_header(b)
    log.debug(
        "GVAS header: engine %s, class %s, %d custom versions",
        header.engine_version,
        header.save_game_class_name,
        len(header.custom_versions),
    )

    properties = {}
    for name, prop in read_property_list(b, HintStack(hints)):
        if name in properties:
            log.warning("Duplicate top-level property '%s'; keeping the last one", name)
        properties[name] = prop

    return GvasFile(header=header, properties=properties)


def read_gvas(path: str, hints: Optional[Mapping[str, str]] = None) -> GvasFile:
    with open(path, "rb") as f:
        data = f.read()
    return decode_gvas(data, hints)
