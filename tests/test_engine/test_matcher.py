"""Tests for renderer matching over enhanced renderers."""

from __future__ import annotations

import asyncio
import math

from symbology.engine.enhancer import enhance_renderer
from symbology.engine.matcher import (
    get_graphic_icon,
    get_graphic_symbol,
    parse_numeric,
    search_renderer,
    unique_value_key,
)
from symbology.models.legend import LegendEntry
from symbology.models.renderers import parse_renderer
from symbology.svg.canvas import EMPTY_ICON
from tests.conftest import CLASS_BREAKS_RENDERER, SIMPLE_RENDERER, UNIQUE_VALUE_RENDERER, make_icon


def _enhanced(renderer_json: dict):
    """Enhance with stand-in icons named after each label."""
    renderer = parse_renderer(renderer_json)
    labels = []
    if renderer.type == "simple":
        labels.append(renderer.label)
    else:
        infos = renderer.unique_value_infos if renderer.type == "uniqueValue" else renderer.class_break_infos
        labels.extend(info.label for info in infos)
        if renderer.default_label:
            labels.append(renderer.default_label)
    legend = [LegendEntry(label=label, icon=make_icon(label)) for label in labels]
    return asyncio.run(enhance_renderer(renderer, legend))


def _marker(icon) -> str:
    return icon.svg.split("<desc>")[1].split("</desc>")[0]


# ---------------------------------------------------------------------------
# Unique value
# ---------------------------------------------------------------------------


class TestUniqueValue:
    def test_single_field_match(self):
        renderer = _enhanced(UNIQUE_VALUE_RENDERER)
        assert _marker(get_graphic_icon({"TYPE": "School"}, renderer)) == "Schools"
        assert get_graphic_symbol({"TYPE": "School"}, renderer).style == "esriSMSCircle"

    def test_no_match_uses_default(self):
        renderer = _enhanced(UNIQUE_VALUE_RENDERER)
        assert _marker(get_graphic_icon({"TYPE": "Hospital"}, renderer)) == "Other"
        assert get_graphic_symbol({"TYPE": "Hospital"}, renderer).style == "esriSMSSquare"

    def test_two_field_key(self):
        renderer = parse_renderer({"type": "uniqueValue", "field1": "A", "field2": "B"})
        assert unique_value_key({"A": "a", "B": "b"}, renderer) == "a, b"

    def test_three_field_key(self):
        renderer = parse_renderer({"type": "uniqueValue", "field1": "A", "field2": "B", "field3": "C"})
        assert unique_value_key({"A": "a", "B": "b", "C": "c"}, renderer) == "a, b, c"

    def test_field3_ignored_without_field2(self):
        renderer = parse_renderer({"type": "uniqueValue", "field1": "A", "field3": "C"})
        assert unique_value_key({"A": "a", "C": "c"}, renderer) == "a"

    def test_null_attributes_become_empty(self):
        renderer = parse_renderer({"type": "uniqueValue", "field1": "A", "field2": "B"})
        assert unique_value_key({"A": None, "B": None}, renderer) == ", "
        assert unique_value_key({}, renderer) == ", "

    def test_numeric_values_compare_as_strings(self):
        renderer = _enhanced({
            "type": "uniqueValue",
            "field1": "CODE",
            "uniqueValueInfos": [{"value": 5, "label": "Five", "symbol": {"type": "esriSMS"}}],
        })
        assert _marker(get_graphic_icon({"CODE": 5}, renderer)) == "Five"
        assert _marker(get_graphic_icon({"CODE": 5.0}, renderer)) == "Five"
        assert _marker(get_graphic_icon({"CODE": "5"}, renderer)) == "Five"

    def test_null_branch_matches_null_attribute(self):
        renderer = _enhanced({
            "type": "uniqueValue",
            "field1": "TYPE",
            "uniqueValueInfos": [{"value": "", "label": "Unknown", "symbol": {"type": "esriSMS"}}],
        })
        assert _marker(get_graphic_icon({"TYPE": None}, renderer)) == "Unknown"

    def test_no_match_without_default_is_empty(self):
        renderer = _enhanced({
            "type": "uniqueValue",
            "field1": "TYPE",
            "uniqueValueInfos": [{"value": "A", "label": "A", "symbol": {"type": "esriSMS"}}],
        })
        result = search_renderer({"TYPE": "B"}, renderer)
        assert result.icon is EMPTY_ICON
        assert result.symbol is None


# ---------------------------------------------------------------------------
# Class breaks
# ---------------------------------------------------------------------------


class TestClassBreaks:
    def test_below_min_value_uses_default(self):
        renderer = _enhanced(CLASS_BREAKS_RENDERER)
        assert _marker(get_graphic_icon({"POP": 10 - 0.0001}, renderer)) == "Out of range"

    def test_min_value_is_first_branch(self):
        renderer = _enhanced(CLASS_BREAKS_RENDERER)
        assert _marker(get_graphic_icon({"POP": 10}, renderer)) == "Small"

    def test_upper_bound_is_inclusive(self):
        renderer = _enhanced(CLASS_BREAKS_RENDERER)
        assert _marker(get_graphic_icon({"POP": 100}, renderer)) == "Small"
        assert _marker(get_graphic_icon({"POP": 100.5}, renderer)) == "Medium"
        assert _marker(get_graphic_icon({"POP": 1000}, renderer)) == "Medium"

    def test_above_last_break_uses_default(self):
        renderer = _enhanced(CLASS_BREAKS_RENDERER)
        assert _marker(get_graphic_icon({"POP": 10000.1}, renderer)) == "Out of range"

    def test_numeric_prefix_strings(self):
        renderer = _enhanced(CLASS_BREAKS_RENDERER)
        assert _marker(get_graphic_icon({"POP": "250 people"}, renderer)) == "Medium"

    def test_unparseable_value_uses_default(self):
        renderer = _enhanced(CLASS_BREAKS_RENDERER)
        assert _marker(get_graphic_icon({"POP": "n/a"}, renderer)) == "Out of range"
        assert _marker(get_graphic_icon({}, renderer)) == "Out of range"

    def test_missing_min_value_is_unbounded(self):
        renderer_json = {**CLASS_BREAKS_RENDERER, "minValue": None}
        renderer = _enhanced(renderer_json)
        assert _marker(get_graphic_icon({"POP": -500}, renderer)) == "Small"

    def test_default_without_label_is_empty(self):
        renderer_json = {k: v for k, v in CLASS_BREAKS_RENDERER.items() if k != "defaultLabel"}
        renderer = _enhanced(renderer_json)
        result = search_renderer({"POP": 5}, renderer)
        assert result.icon is EMPTY_ICON
        assert result.symbol.style == "esriSMSX"


class TestParseNumeric:
    def test_numbers_pass_through(self):
        assert parse_numeric(3) == 3.0
        assert parse_numeric(2.5) == 2.5

    def test_leading_float(self):
        assert parse_numeric("12.5 km") == 12.5
        assert parse_numeric("  -3e2x") == -300.0

    def test_nan_cases(self):
        assert math.isnan(parse_numeric(None))
        assert math.isnan(parse_numeric("abc"))
        assert math.isnan(parse_numeric(True))


# ---------------------------------------------------------------------------
# Simple and unsupported
# ---------------------------------------------------------------------------


def test_simple_renderer_always_matches():
    renderer = _enhanced(SIMPLE_RENDERER)
    assert _marker(get_graphic_icon({"anything": 1}, renderer)) == "Roads"
    assert get_graphic_symbol({}, renderer).type == "esriSLS"


def test_unsupported_renderer_is_empty():
    renderer = parse_renderer({"type": "heatmap"})
    result = search_renderer({"a": 1}, renderer)
    assert result.icon is EMPTY_ICON
    assert result.symbol is None


def test_unenhanced_renderer_is_empty():
    renderer = parse_renderer(UNIQUE_VALUE_RENDERER)
    result = search_renderer({"TYPE": "Park"}, renderer)
    assert result.icon is EMPTY_ICON
    assert result.symbol.type == "esriSFS"
