"""Build-time generation of platform app icons from a single SVG logo."""
