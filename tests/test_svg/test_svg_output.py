"""Tests for SVG serialization, drawing surfaces and style conversion."""

from __future__ import annotations

import pytest

from symbology.svg.canvas import DrawingSurface, SurfaceReleasedError, drawing_surface, empty_icon
from symbology.svg.serializer import format_number, serialize_svg
from symbology.svg.shapes import CONTAINER_CENTER, bbox_size, fit_scale, marker_shapes, rectangle, transform_attr
from symbology.svg.style import dash_array, make_stroke, parse_esri_colour


# ---------------------------------------------------------------------------
# Serializer
# ---------------------------------------------------------------------------


class TestSerializer:
    def test_root_attributes(self):
        svg = serialize_svg([], 32, 32, (0, 0, 32, 32))
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        assert 'xmlns:xlink="http://www.w3.org/1999/xlink"' in svg
        assert 'viewBox="0 0 32 32"' in svg
        assert svg.endswith("/>")

    def test_nested_defs(self):
        defs = [{"tag": "pattern", "id": "p", "children": [{"tag": "line", "x1": 0}]}]
        svg = serialize_svg([{"tag": "rect", "fill": "url(#p)"}], 32, 32, (0, 0, 32, 32), defs=defs)
        assert '<defs><pattern id="p"><line x1="0"/></pattern></defs><rect fill="url(#p)"/>' in svg

    def test_none_attributes_skipped(self):
        svg = serialize_svg([{"tag": "circle", "r": 4, "transform": None}], 32, 32, (0, 0, 32, 32))
        assert '<circle r="4"/>' in svg

    def test_attribute_values_escaped(self):
        svg = serialize_svg([{"tag": "text", "font-family": 'A "B"', "text": "x & y"}], 32, 32, (0, 0, 32, 32))
        assert 'font-family="A &quot;B&quot;"' in svg
        assert ">x &amp; y</text>" in svg

    def test_format_number(self):
        assert format_number(4.0) == "4"
        assert format_number(5.3333333) == "5.333"
        assert format_number(0.5) == "0.5"
        assert format_number(-16) == "-16"


# ---------------------------------------------------------------------------
# Drawing surface
# ---------------------------------------------------------------------------


class TestDrawingSurface:
    def test_released_after_block(self):
        with drawing_surface() as surface:
            surface.add({"tag": "rect"})
        assert surface.released
        assert surface.elements == []

    def test_released_when_drawing_raises(self):
        with pytest.raises(RuntimeError):
            with drawing_surface() as surface:
                surface.add({"tag": "rect"})
                raise RuntimeError("drawing failed")
        assert surface.released

    def test_released_surface_rejects_use(self):
        surface = DrawingSurface()
        surface.release()
        with pytest.raises(SurfaceReleasedError):
            surface.add({"tag": "rect"})
        with pytest.raises(SurfaceReleasedError):
            surface.to_icon()

    def test_pattern_references(self):
        with drawing_surface() as surface:
            first = surface.add_pattern(5, 5, [])
            second = surface.add_pattern(5, 5, [])
            icon = surface.to_icon()
        assert first != second
        assert first.startswith("url(#SymbologyPattern")
        assert icon.svg.count("<pattern") == 2
        # patterns are definitions, not drawn elements
        assert icon.is_empty

    def test_view_box(self):
        with drawing_surface(view_box=(0, 0, 0, 0)) as surface:
            surface.set_view_box(0, 0, 64, 48)
            icon = surface.to_icon()
        assert icon.view_box == (0, 0, 64, 48)
        assert 'width="32" height="32" viewBox="0 0 64 48"' in icon.svg

    def test_empty_icon(self):
        icon = empty_icon()
        assert icon.is_empty
        assert icon.width == 32
        assert icon.height == 32


# ---------------------------------------------------------------------------
# Geometry and style
# ---------------------------------------------------------------------------


class TestShapes:
    def test_path_markers_sized_and_centred(self):
        for style in ("esriSMSCross", "esriSMSX", "esriSMSTriangle", "esriSMSDiamond", "esriSMSSquare"):
            shape = marker_shapes.get(style)(10)
            width, height = bbox_size(shape.geometry)
            assert width == pytest.approx(10), style
            xmin, xmax, ymin, ymax = shape.geometry.bbox()
            assert (xmin + xmax) / 2 == pytest.approx(CONTAINER_CENTER), style
            assert (ymin + ymax) / 2 == pytest.approx(CONTAINER_CENTER), style

    def test_zero_size_circle(self):
        shape = marker_shapes.get("esriSMSCircle")(0)
        assert shape.geometry is None
        assert fit_scale(shape.geometry, 24) == 1.0

    def test_fit_scale_never_enlarges(self):
        assert fit_scale(rectangle(0, 0, 4, 4), 24) == 1.0
        assert fit_scale(rectangle(0, 0, 48, 12), 24) == pytest.approx(0.5)

    def test_transform_attr(self):
        assert transform_attr(0, 1.0) is None
        assert transform_attr(30, 1.0) == "rotate(30 16 16)"
        assert transform_attr(0, 0.5) == "translate(16 16) scale(0.5) translate(-16 -16)"


class TestStyle:
    def test_parse_colour(self):
        colour = parse_esri_colour([255, 0, 0, 51])
        assert colour.colour == "rgb(255,0,0)"
        assert colour.opacity == pytest.approx(0.2)

    def test_parse_colour_rounds_fractional_channels(self):
        colour = parse_esri_colour([0.4, 112.5, 254.6, 127.5])
        assert colour.colour == "rgb(0,112,255)"
        assert colour.opacity == pytest.approx(0.5)

    def test_parse_colour_without_alpha(self):
        assert parse_esri_colour([1, 2, 3]).opacity == 1

    def test_missing_colour_is_transparent_black(self):
        colour = parse_esri_colour(None)
        assert colour.colour == "rgb(0, 0, 0)"
        assert colour.opacity == 0

    def test_dash_array(self):
        assert dash_array("esriSLSDashDot") == "5.333,4,1.333,4"
        assert dash_array("esriSLSNull") == "none"
        assert dash_array(None) == "none"

    def test_make_stroke_ignores_none(self):
        stroke = make_stroke(color="#f00", width=None, linecap="round")
        assert stroke.color == "#f00"
        assert stroke.width == 1
        assert stroke.attrs()["stroke-linecap"] == "round"
        assert stroke.attrs()["stroke-linejoin"] == "miter"
