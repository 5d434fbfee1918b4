"""Symbology engine: rasterizing, legend building, enhancement and matching."""
