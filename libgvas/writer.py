"""libgvas.writer

GVAS save-file writer; the mirror of libgvas.reader.

Properties are written in the GvasFile's dict order, so an unmodified decode
re-encodes byte-for-byte. Container and struct lengths are recomputed from what
is actually written, so edited files stay self-consistent.
"""

from __future__ import annotations

from .binio import BinWriter
from .model import FEngineVersion, GvasFile, GvasHeader
from .properties import write_property_list


def _write_engine_version(w: BinWriter, ev: FEngineVersion) -> None:
    w.u16(ev.major)
    w.u16(ev.minor)
    w.u16(ev.patch)
    w.u32(ev.change_list)
    w.fstring(ev.branch)


def _write_header(w: BinWriter, header: GvasHeader) -> None:
    w.s32(header.file_type_tag)
    w.s32(header.save_game_file_version)
    w.s32(header.package_file_ue4_version)
    _write_engine_version(w, header.engine_version)
    w.s32(header.custom_version_format)
    w.s32(len(header.custom_versions))
    for cv in header.custom_versions:
        w.guid(cv.key)
        w.s32(cv.version)
    w.fstring(header.save_game_class_name)


def encode_gvas(gvas: GvasFile) -> bytes:
    w = BinWriter()
    _write_header(w, gvas.header)
    write_property_list(w, gvas.properties.items())
    w.s32(0)  # padding
    return w.to_bytes()


def write_gvas(gvas: GvasFile, out_path: str) -> None:
    """Write a GvasFile back to disk."""

    data = encode_gvas(gvas)
    with open(out_path, "wb") as f:
        f.write(data)
