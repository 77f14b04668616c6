#!/usr/bin/env python3
import json
from unittest.mock import MagicMock

import pytest

from mvplugins.base.errors import MapDataError
from mvplugins.maps import ShadowEraserHook, erase_shadows, load_map, looks_like_map
from mvplugins.maps.cli import main as cli_main


def make_map(width=2, height=3, layers=6):
    cells = width * height
    data = []
    for layer in range(layers):
        data.extend([layer + 1] * cells)
    return {"width": width, "height": height, "data": data, "events": []}


def test_erase_clears_only_shadow_layer():
    game_map = make_map()
    assert erase_shadows(game_map) == 6
    data = game_map["data"]
    assert data[:24] == [1] * 6 + [2] * 6 + [3] * 6 + [4] * 6
    assert data[24:30] == [0] * 6
    assert data[30:] == [6] * 6
    assert len(data) == 36


def test_erase_uses_offsets_from_the_end():
    game_map = make_map(width=1, height=2, layers=3)
    erase_shadows(game_map)
    assert game_map["data"] == [1, 1, 0, 0, 3, 3]


def test_empty_map_is_noop():
    game_map = {"width": 0, "height": 5, "data": [7, 7]}
    assert erase_shadows(game_map) == 0
    assert game_map["data"] == [7, 7]


def test_malformed_maps_raise():
    with pytest.raises(MapDataError):
        erase_shadows({"width": 2, "data": []})
    with pytest.raises(MapDataError):
        erase_shadows({"width": 2, "height": 2, "data": [1, 2, 3]})


def test_immutable_data_raises_map_error():
    game_map = {"width": 1, "height": 1, "data": (1, 2, 3)}
    with pytest.raises(MapDataError):
        erase_shadows(game_map)
    assert game_map["data"] == (1, 2, 3)
    with pytest.raises(MapDataError):
        erase_shadows({"width": 1, "height": 1, "data": "abc"})


def test_looks_like_map():
    assert looks_like_map(make_map())
    assert not looks_like_map([{"id": 1}])
    assert not looks_like_map({"width": 1, "height": 1})


def test_hook_erases_maps_and_always_chains():
    previous = MagicMock(return_value="done")
    hook = ShadowEraserHook(previous)
    game_map = make_map(1, 1)
    assert hook(game_map) == "done"
    assert game_map["data"][4] == 0
    previous.assert_called_once_with(game_map)

    actors = [None, {"id": 1, "name": "Harold"}]
    hook(actors)
    previous.assert_called_with(actors)
    assert actors[1] == {"id": 1, "name": "Harold"}


def test_hook_with_custom_predicate():
    current = make_map(1, 1)
    other = make_map(1, 1)
    hook = ShadowEraserHook(is_map=lambda obj: obj is current)
    assert hook(other) is None
    assert other["data"][4] == 5
    hook(current)
    assert current["data"][4] == 0


def test_load_map(tmp_path):
    path = tmp_path / "Map001.json"
    path.write_text(json.dumps(make_map(1, 1)), encoding="utf-8")
    assert load_map(str(path))["data"] == [1, 2, 3, 4, 0, 6]
    assert load_map(str(path), erase=False)["data"][4] == 5

    not_map = tmp_path / "Actors.json"
    not_map.write_text("[null]", encoding="utf-8")
    with pytest.raises(MapDataError):
        load_map(str(not_map))


def test_cli_rewrites_in_place(tmp_path):
    path = tmp_path / "Map002.json"
    path.write_text(json.dumps(make_map(1, 1)), encoding="utf-8")
    assert cli_main([str(path)]) == 0
    assert json.loads(path.read_text(encoding="utf-8"))["data"] == [1, 2, 3, 4, 0, 6]


def test_cli_output_dir_and_dry_run(tmp_path):
    path = tmp_path / "Map003.json"
    original = json.dumps(make_map(1, 1))
    path.write_text(original, encoding="utf-8")

    assert cli_main([str(path), "--dry-run"]) == 0
    assert path.read_text(encoding="utf-8") == original

    out_dir = tmp_path / "out"
    assert cli_main([str(path), "--output-dir", str(out_dir)]) == 0
    assert path.read_text(encoding="utf-8") == original
    assert json.loads((out_dir / "Map003.json").read_text(encoding="utf-8"))["data"][4] == 0


def test_cli_reports_failures(tmp_path):
    bad = tmp_path / "Map004.json"
    bad.write_text('{"width": 3, "height": 3, "data": [1]}', encoding="utf-8")
    assert cli_main([str(bad), str(tmp_path / "missing.json")]) == 1
