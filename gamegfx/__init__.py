"""2D game graphics helpers: geometry, screen scaling, atlas packing and bitmap-font text layout."""

__version__ = "0.1.0"

__all__ = [
    "bmfont",
    "geometry",
    "packer",
    "scaling",
    "textcache",
]