"""Classic 2D raster algorithms: lines, circles, clipping, viewport mapping and scene rendering."""

__version__ = "0.1.0"
__all__ = ["lines", "circle", "clipping", "scenes"]