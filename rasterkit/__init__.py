"""2D raster graphics algorithms: lines, circles, shapes, fills, transformations, clipping and curves."""

__version__ = "0.1.0"

__all__ = ["circle", "clipping", "curves", "fill", "lines", "shapes", "transform"]