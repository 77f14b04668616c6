#!/usr/bin/env python3
import math

import pytest

from mvplugins.base.config import PluginConfig
from mvplugins.base.errors import MissingParameterError, UnknownBooleanError, UnknownParserError
from mvplugins.base.plugin import Plugin, MISSING
from mvplugins.utils.color import Color


def make_plugin(**params):
    return Plugin("Test", parameters=params)


def test_missing_parameter_with_default_is_not_converted():
    plugin = make_plugin()
    assert plugin.parameter("x", "Int", 5) == 5
    assert plugin.parameter("label", "Int", "five") == "five"
    assert plugin.parameter("nothing", "Bool", None) is None


def test_missing_required_parameter_fails():
    plugin = make_plugin()
    with pytest.raises(MissingParameterError) as info:
        plugin.parameter("Speed", "Int")
    assert info.value.parameter == "Speed"
    assert "Required param: Speed" in str(info.value)
    assert isinstance(info.value, KeyError)


def test_typed_parameters():
    plugin = make_plugin(Flag="YES", Count="12.7", Ratio="0.25", Title=7, Tint="0xFF")
    assert plugin.parameter("Flag", "Bool") is True
    assert plugin.param_int("Count") == 12
    assert plugin.param_float("Ratio") == 0.25
    assert plugin.param_string("Title") == "7"
    assert plugin.param_color("Tint") == Color(255, 0, 0)


def test_bad_boolean_raises():
    plugin = make_plugin(Flag="maybe")
    with pytest.raises(UnknownBooleanError):
        plugin.param_bool("Flag")


def test_untyped_parameter_is_raw():
    plugin = make_plugin(Raw=" 12 ")
    assert plugin.parameter("Raw") == " 12 "


def test_parameters_are_parsed_once():
    raw = {"Count": "3"}
    plugin = Plugin("Test", parameters=raw)
    first = plugin.param_int("Count")
    raw["Count"] = "99"
    assert plugin.param_int("Count") == first == 3
    # cached value wins even when asked for another type
    assert plugin.parameter("Count", "String") == 3


def test_default_is_cached_too():
    raw = {}
    plugin = Plugin("Test", parameters=raw)
    assert plugin.param_int("Late", 1) == 1
    raw["Late"] = "2"
    assert plugin.param_int("Late") == 1


def test_non_numeric_int_parameter_is_nan():
    plugin = make_plugin(Count="lots")
    assert math.isnan(plugin.param_int("Count"))


def test_unknown_type_fails():
    plugin = make_plugin(When="today")
    with pytest.raises(UnknownParserError):
        plugin.parameter("When", "Date")


def test_callable_type():
    plugin = make_plugin(Words="a b c")
    assert plugin.parameter("Words", str.split) == ["a", "b", "c"]


def parse_css_color(value):
    value = value.lstrip("#")
    return Color(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


class CssPlugin(Plugin):
    parsers = {"Color": parse_css_color, "Words": str.split}


def test_plugin_parsers_shadow_global_ones():
    plugin = CssPlugin("Css", parameters={"Tint": "#102030", "Tags": "x y", "N": "4"})
    assert plugin.param_color("Tint") == Color(0x10, 0x20, 0x30)
    assert plugin.parameter("Tags", "Words") == ["x", "y"]
    assert plugin.param_int("N") == 4
    # other plugins still use the global rule
    assert Plugin("Other", parameters={"Tint": "255"}).param_color("Tint") == Color(255, 0, 0)


def test_base_parser_table_is_read_only():
    with pytest.raises(TypeError):
        Plugin.parsers["Color"] = parse_css_color
    assert "Color" not in Plugin.parsers
    assert Plugin("Plain", parameters={"Tint": "255"}).param_color("Tint") == Color(255, 0, 0)


def test_parse_does_not_cache():
    plugin = CssPlugin("Css", parameters={})
    assert plugin.parse("#000000", "Color") == Color(0, 0, 0)
    assert plugin._parsed == {}


def test_missing_marker_repr():
    assert repr(MISSING) == "MISSING"


def test_parameters_read_lazily_from_config():
    config = PluginConfig.from_entries([
        {"name": "Test", "status": True, "parameters": {"Speed": "4"}},
    ])
    plugin = Plugin("Test", config=config)
    assert plugin.param_int("Speed") == 4
    assert plugin.parameters() == {"Speed": "4"}


def test_plugin_without_source_has_no_parameters():
    assert Plugin("Bare").parameters() == {}


def test_plugin_needs_a_name():
    with pytest.raises(ValueError):
        Plugin("")
