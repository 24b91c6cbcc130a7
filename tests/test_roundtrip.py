import logging

import pytest

from gvas_helpers import GUID_A, fstring, make_file, make_header, s32, u64
from libgvas import (
    FEngineVersion,
    GvasError,
    MissingHint,
    UnexpectedEof,
    decode,
    encode,
    read_gvas,
    write_gvas,
)
from libgvas.binio import BinWriter
from libgvas.properties import (
    ArrayProperty,
    BoolProperty,
    ByteProperty,
    DoubleProperty,
    EnumProperty,
    FloatProperty,
    Int64Property,
    IntProperty,
    MapProperty,
    SetProperty,
    StrProperty,
    StructProperty,
    UnknownProperty,
    custom_struct,
)
from libgvas.struct_types import DateTime, Rotator, Vector
from libgvas.writer import _write_header

HINTS = {
    "Seasons.MapProperty.Key.StructProperty": "Guid",
    "Seasons.MapProperty.Value.StructProperty": "SeasonData",
}


def _sample_file():
    season = custom_struct("SeasonData", [("Rank", IntProperty(3)), ("Finished", BoolProperty(True))])
    return make_file(
        {
            "PlayerName": StrProperty("Ada Lovelace"),
            "Title": StrProperty("Grande Dame de l'Analyse"),
            "Level": IntProperty(42),
            "Experience": Int64Property(2**40),
            "Gamma": FloatProperty(2.25),
            "Precise": DoubleProperty(0.1),
            "HardMode": BoolProperty(False),
            "Difficulty": EnumProperty("EDifficulty::Hard", "EDifficulty"),
            "Faction": ByteProperty("EFaction::Blue", "EFaction"),
            "LastSave": StructProperty("DateTime", DateTime(638412345678901234)),
            "Spawn": custom_struct(
                "SpawnPoint",
                [
                    ("Location", StructProperty("Vector", Vector(10.0, -20.0, 30.5))),
                    ("Rotation", StructProperty("Rotator", Rotator(0.0, 90.0, 0.0))),
                ],
            ),
            "Waypoints": ArrayProperty.of_structs(
                "Waypoints",
                "Vector",
                [StructProperty("Vector", Vector(float(i), 0.0, 0.0)) for i in range(4)],
            ),
            "Scores": ArrayProperty("IntProperty", tuple(IntProperty(i * i) for i in range(6))),
            "Tags": SetProperty("StrProperty", (StrProperty("brave"), StrProperty("quick"))),
            "Seasons": MapProperty(
                "StructProperty",
                "StructProperty",
                ((StructProperty("Guid", GUID_A), season),),
            ),
            "Notes": UnknownProperty("TextProperty", b"\x00\x00\x00\x00\xff" + fstring("hi")),
        }
    )


def test_decode_encode_decode_is_stable():
    gvas = _sample_file()
    data = encode(gvas)

    decoded = decode(data, HINTS)
    assert decoded.header == gvas.header
    assert decoded.properties == gvas.properties

    assert encode(decoded) == data
    assert decode(encode(decoded), HINTS).properties == decoded.properties


def test_property_order_is_preserved():
    gvas = _sample_file()
    decoded = decode(encode(gvas), HINTS)
    assert list(decoded.properties) == list(gvas.properties)


def test_file_ends_with_sentinel_and_padding():
    data = encode(make_file({"Level": IntProperty(1)}))
    assert data.endswith(fstring("None") + b"\x00\x00\x00\x00")


def test_header_roundtrip_with_utf16_branch():
    gvas = make_file({})
    gvas.header.engine_version = FEngineVersion(5, 1, 0, 0, "++UE5+Release-5.1 – hotfix")
    decoded = decode(encode(gvas))
    assert decoded.header == gvas.header
    assert decoded.properties == {}


def test_missing_hint_reports_path_then_succeeds():
    data = encode(_sample_file())

    with pytest.raises(MissingHint) as exc:
        decode(data)
    assert exc.value.path == "Seasons.MapProperty.Key.StructProperty"
    assert exc.value.property_type == "StructProperty"
    assert 0 < exc.value.position < len(data)

    assert decode(data, HINTS).properties == _sample_file().properties


def test_unknown_property_bytes_pass_through():
    w = BinWriter()
    _write_header(w, make_header())
    prefix = w.to_bytes()

    raw = b"\x02\x00\x00\x00\x01" + fstring("Key") + fstring("Localized")
    unknown = fstring("Greeting") + fstring("TextProperty") + u64(len(raw)) + b"\x00" + raw
    level = fstring("Level") + fstring("IntProperty") + u64(4) + b"\x00" + s32(9)
    data = prefix + unknown + level + fstring("None") + s32(0)

    gvas = decode(data)
    assert gvas.properties["Greeting"] == UnknownProperty("TextProperty", raw)
    assert gvas.properties["Level"] == IntProperty(9)
    assert encode(gvas) == data


def test_mutation_is_reencoded_with_fresh_lengths():
    gvas = _sample_file()
    gvas.properties["PlayerName"] = StrProperty("A much longer player name than before")
    gvas.properties["Scores"] = ArrayProperty("IntProperty", (IntProperty(1),))

    decoded = decode(encode(gvas), HINTS)
    assert decoded.properties["PlayerName"] == StrProperty("A much longer player name than before")
    assert decoded.properties["Scores"] == ArrayProperty("IntProperty", (IntProperty(1),))


def test_nan_floats_survive_reencode():
    nan = float("nan")
    first = decode(encode(make_file({"Gamma": FloatProperty(nan), "Precise": DoubleProperty(nan)})))
    second = decode(encode(first))
    assert second.properties == first.properties


def test_unencodable_value_is_a_gvas_error():
    with pytest.raises(GvasError):
        encode(make_file({"Gamma": FloatProperty(1e300)}))


def test_properties_after_uneven_unknown_array_still_decode():
    names = ArrayProperty(
        "NameProperty",
        (UnknownProperty("NameProperty", fstring("A")), UnknownProperty("NameProperty", fstring("BB"))),
    )
    gvas = make_file({"Names": names, "Level": IntProperty(9)})
    data = encode(gvas)

    decoded = decode(data)
    assert decoded.properties == gvas.properties
    assert encode(decoded) == data


def test_truncated_file_fails():
    data = encode(_sample_file())
    with pytest.raises(UnexpectedEof):
        decode(data[:-6], HINTS)


def test_foreign_file_tag_is_logged(caplog):
    gvas = make_file({"Level": IntProperty(1)})
    gvas.header.file_type_tag = 0x12345678
    with caplog.at_level(logging.WARNING):
        decoded = decode(encode(gvas))
    assert decoded.header.file_type_tag == 0x12345678
    assert "not 'GVAS'" in caplog.text


def test_read_and_write_files(tmp_path):
    gvas = _sample_file()
    path = tmp_path / "Slot1.sav"
    write_gvas(gvas, str(path))

    loaded = read_gvas(str(path), HINTS)
    assert loaded.properties == gvas.properties
    assert path.read_bytes() == encode(loaded)
