import json

import pytest

from gvas_helpers import GUID_A, make_file
from gvascli.main import build_parser, load_hints, main
from libgvas import encode
from libgvas.properties import IntProperty, SetProperty, StrProperty, StructProperty


@pytest.fixture
def sav(tmp_path):
    path = tmp_path / "Slot1.sav"
    path.write_bytes(encode(make_file({"PlayerName": StrProperty("Ada"), "Level": IntProperty(7)})))
    return path


@pytest.fixture
def hinted_sav(tmp_path):
    path = tmp_path / "Unlocks.sav"
    prop = SetProperty("StructProperty", (StructProperty("Guid", GUID_A),))
    path.write_bytes(encode(make_file({"Unlocked": prop})))
    return path


def test_summary_lists_properties(sav, capsys):
    assert main(["summary", str(sav)]) == 0
    out = capsys.readouterr().out
    assert "PlayerName" in out
    assert "IntProperty" in out
    assert "/Script/Game.SaveGame" in out


def test_verify_roundtrip_writes_identical_copy(sav, tmp_path, capsys):
    out_path = tmp_path / "copy.sav"
    assert main(["verify-roundtrip", str(sav), "--out", str(out_path)]) == 0
    assert out_path.read_bytes() == sav.read_bytes()
    assert "IDENTICAL" in capsys.readouterr().out


def test_verify_roundtrip_default_output_name(sav):
    assert main(["verify-roundtrip", str(sav)]) == 0
    assert sav.with_name(sav.name + ".roundtrip.sav").exists()


def test_missing_file(tmp_path):
    assert main(["verify-roundtrip", str(tmp_path / "nope.sav")]) == 2


def test_missing_hint_then_hints_file(hinted_sav, tmp_path, capsys):
    assert main(["summary", str(hinted_sav)]) == 1
    assert "Unlocked.SetProperty.StructProperty" in capsys.readouterr().out

    hints = tmp_path / "hints.json"
    hints.write_text(json.dumps({"Unlocked.SetProperty.StructProperty": "Guid"}))
    assert main(["summary", str(hinted_sav), "--hints", str(hints)]) == 0


def test_bad_hints_file(tmp_path):
    hints = tmp_path / "hints.json"
    hints.write_text(json.dumps(["not", "a", "map"]))
    with pytest.raises(SystemExit):
        load_hints(str(hints))


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
