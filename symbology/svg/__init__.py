"""SVG drawing surface, primitives and serialization."""
