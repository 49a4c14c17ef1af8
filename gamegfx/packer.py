"""A shelf-packing texture atlas for RGBA data."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _Shelf:
    current_x: int
    start_y: int
    height: int


class ShelfPacker:
    """Packs RGBA images into an in-memory atlas using a naive shelf algorithm."""

    PADDING = 1

    def __init__(self, texture_width: int, texture_height: int) -> None:
        self._shelves: list[_Shelf] = []
        self._allocate(texture_width, texture_height)

    def _allocate(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("texture dimensions must not be negative")
        self._width = width
        self._height = height
        self._pixels = bytearray(width * height * 4)
        self._shelves.clear()
        self._next_y = self.PADDING

    @property
    def texture_width(self) -> int:
        return self._width

    @property
    def texture_height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def data(self) -> bytes:
        """A copy of the atlas' RGBA pixel data."""
        return bytes(self._pixels)

    def resize(self, texture_width: int, texture_height: int) -> None:
        """Replace the atlas with an empty one of the given size, dropping all shelves."""
        self._allocate(texture_width, texture_height)

    def insert(self, data: bytes, width: int, height: int) -> tuple[int, int] | None:
        """Place RGBA data in the atlas and return its position, or None if it will not fit.

        Raises ValueError if ``data`` is too short to fill the region.
        """
        needed = width * height * 4
        if len(data) < needed:
            raise ValueError(
                f"not enough data: expected {needed} bytes, got {len(data)}"
            )
        position = self._find_space(width, height)
        if position is not None:
            self._write(position[0], position[1], width, height, data)
        return position

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the RGBA value of the atlas pixel at (x, y)."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) is outside the atlas")
        start = (y * self._width + x) * 4
        r, g, b, a = self._pixels[start:start + 4]
        return r, g, b, a

    def _write(self, x: int, y: int, width: int, height: int, data: bytes) -> None:
        if x < 0 or y < 0 or x + width > self._width or y + height > self._height:
            raise ValueError("region lies outside the atlas")
        row_bytes = width * 4
        for row in range(height):
            src = row * row_bytes
            dst = ((y + row) * self._width + x) * 4
            self._pixels[dst:dst + row_bytes] = data[src:src + row_bytes]

    def _find_space(self, width: int, height: int) -> tuple[int, int] | None:
        for shelf in self._shelves:
            if shelf.height >= height and self._width - shelf.current_x - self.PADDING >= width:
                position = (shelf.current_x, shelf.start_y)
                shelf.current_x += width + self.PADDING
                return position

        if self._next_y + height < self._height:
            position = (self.PADDING, self._next_y)
            self._shelves.append(
                _Shelf(
                    current_x=width + self.PADDING * 2,
                    start_y=self._next_y,
                    height=height,
                )
            )
            self._next_y += height + self.PADDING
            return position

        return None