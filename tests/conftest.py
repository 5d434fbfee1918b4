"""Shared test fixtures."""

from __future__ import annotations

import base64
import io

from PIL import Image

from symbology.models.icon import IconImage


def make_png(width: int = 10, height: int = 6, colour: tuple[int, int, int, int] = (200, 30, 30, 255)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGBA", (width, height), colour).save(buf, format="PNG")
    return buf.getvalue()


def png_b64(width: int = 10, height: int = 6) -> str:
    return base64.b64encode(make_png(width, height)).decode("ascii")


def make_icon(marker: str) -> IconImage:
    """A stand-in icon whose markup is easy to tell apart in assertions."""
    return IconImage(svg=f"<svg><desc>{marker}</desc></svg>", element_count=1)


# Sample renderers in server JSON form

SOLID_OUTLINE = {"type": "esriSLS", "style": "esriSLSSolid", "color": [0, 0, 0, 255], "width": 1}

SIMPLE_RENDERER = {
    "type": "simple",
    "label": "Roads",
    "description": "",
    "symbol": {"type": "esriSLS", "style": "esriSLSDash", "color": [255, 0, 0, 255], "width": 2},
}

UNIQUE_VALUE_RENDERER = {
    "type": "uniqueValue",
    "field1": "TYPE",
    "defaultLabel": "Other",
    "defaultSymbol": {
        "type": "esriSMS",
        "style": "esriSMSSquare",
        "color": [128, 128, 128, 255],
        "size": 8,
        "outline": SOLID_OUTLINE,
    },
    "uniqueValueInfos": [
        {
            "value": "Park",
            "label": "Parks",
            "symbol": {"type": "esriSFS", "style": "esriSFSSolid", "color": [0, 128, 0, 255], "outline": SOLID_OUTLINE},
        },
        {
            "value": "School",
            "label": "Schools",
            "symbol": {"type": "esriSMS", "style": "esriSMSCircle", "color": [0, 0, 255, 255], "size": 10},
        },
    ],
}

CLASS_BREAKS_RENDERER = {
    "type": "classBreaks",
    "field": "POP",
    "minValue": 10,
    "defaultSymbol": {"type": "esriSMS", "style": "esriSMSX", "color": [0, 0, 0, 255], "size": 6},
    "defaultLabel": "Out of range",
    "classBreakInfos": [
        {
            "classMaxValue": 100,
            "label": "Small",
            "symbol": {"type": "esriSMS", "style": "esriSMSCircle", "color": [255, 255, 0, 255], "size": 6},
        },
        {
            "classMaxValue": 1000,
            "label": "Medium",
            "symbol": {"type": "esriSMS", "style": "esriSMSCircle", "color": [255, 128, 0, 255], "size": 12},
        },
        {
            "classMaxValue": 10000,
            "label": "Large",
            "symbol": {"type": "esriSMS", "style": "esriSMSCircle", "color": [255, 0, 0, 255], "size": 18},
        },
    ],
}


def server_legend() -> dict:
    """Map server legend response with two sub-layers."""
    return {
        "layers": [
            {
                "layerId": 0,
                "layerName": "Stations",
                "legend": [
                    {"label": "Active", "imageData": png_b64(10, 6), "contentType": "image/png"},
                    {"label": "Retired", "imageData": png_b64(12, 12), "contentType": "image/png"},
                ],
            },
            {
                "layerId": 3,
                "layerName": "Elevation",
                "legend": [
                    {"label": "High", "imageData": png_b64(20, 20), "contentType": "image/png"},
                ],
            },
        ]
    }

