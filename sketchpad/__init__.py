"""A small raster paint program: drawing sheet, palette, tools and a printf-style formatter."""

__version__ = "0.1.0"