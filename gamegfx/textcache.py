"""Laying out text and caching rasterized glyphs in a texture atlas."""

from __future__ import annotations

import math
import unicodedata
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator

from gamegfx.geometry import Rectangle, Vec2
from gamegfx.packer import ShelfPacker

_MANDATORY_BREAKS = frozenset("\n\r\x0b\x0c\x85\u2028\u2029")
_SPACES = frozenset(" \t")
_ZERO_WIDTH_SPACE = "\u200b"


@dataclass(frozen=True)
class RasterizedGlyph:
    """A rasterized glyph: RGBA data plus bounds relative to the cursor on the baseline."""

    bounds: Rectangle
    data: bytes


@dataclass(frozen=True)
class TextQuad:
    """One glyph of laid-out text: where it is drawn and where it sits in the atlas."""

    position: Vec2
    region: Rectangle

    def bounds(self) -> Rectangle:
        """The area the glyph covers, relative to the text's origin."""
        return Rectangle(
            self.position.x, self.position.y, self.region.width, self.region.height
        )


@dataclass
class TextGeometry:
    """The quads that render a piece of text, and their combined bounds."""

    quads: list[TextQuad] = field(default_factory=list)
    bounds: Rectangle | None = None
    resize_count: int = 0


class Rasterizer(ABC):
    """Something that can rasterize characters and report font metrics."""

    @abstractmethod
    def rasterize(self, glyph: str, position: Vec2) -> RasterizedGlyph | None:
        """Rasterize a character; the position may be used for subpixel rendering."""

    @abstractmethod
    def advance(self, glyph: str) -> float:
        """The horizontal advance of a character."""

    @abstractmethod
    def line_height(self) -> float:
        """The height of a line of text."""

    @abstractmethod
    def ascent(self) -> float:
        """The ascent of the font."""

    @abstractmethod
    def kerning(self, previous: str, current: str) -> float:
        """The kerning to apply between two characters."""


def _break_positions(text: str) -> Iterator[tuple[int, bool]]:
    last = len(text)
    for index, ch in enumerate(text):
        following = text[index + 1] if index + 1 < last else None
        if ch in _MANDATORY_BREAKS:
            if ch == "\r" and following == "\n":
                continue
            yield index + 1, True
            continue
        if following is None or following in _MANDATORY_BREAKS:
            continue
        if ch in _SPACES and following not in _SPACES:
            yield index + 1, False
        elif ch == _ZERO_WIDTH_SPACE:
            yield index + 1, False
        elif (
            ch == "-"
            and index > 0
            and text[index - 1].isalpha()
            and following.isalpha()
        ):
            yield index + 1, False
    if text and text[-1] not in _MANDATORY_BREAKS:
        yield last, True


def line_breaks(text: str) -> Iterator[tuple[str, bool]]:
    """Split text at line break opportunities.

    Yields ``(segment, hard_break)`` pairs; each segment keeps its trailing
    whitespace or newline, and the segments joined give back the text.
    """
    start = 0
    for offset, hard in _break_positions(text):
        yield text[start:offset], hard
        start = offset


def _round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _subpixel(value: float) -> int:
    fraction = value - math.trunc(value)
    return max(0, int(_round(fraction * 10.0)))


def _is_control(ch: str) -> bool:
    return unicodedata.category(ch) == "Cc"


class _OutOfSpace(Exception):
    """The atlas has no room left for a glyph."""


class FontCache:
    """Renders text using a texture atlas of rasterized glyphs, growing it as needed."""

    def __init__(
        self,
        rasterizer: Rasterizer,
        texture_width: int = 128,
        texture_height: int = 128,
    ) -> None:
        self._rasterizer = rasterizer
        self._packer = ShelfPacker(texture_width, texture_height)
        self._glyphs: dict[tuple[str, int, int], TextQuad | None] = {}
        self._resize_count = 0

    @property
    def rasterizer(self) -> Rasterizer:
        return self._rasterizer

    @property
    def packer(self) -> ShelfPacker:
        """The atlas holding the cached glyphs."""
        return self._packer

    @property
    def resize_count(self) -> int:
        """How many times the atlas has been resized; stale geometry has a lower count."""
        return self._resize_count

    def render(self, text: str, max_width: float | None = None) -> TextGeometry:
        """Lay out ``text``, wrapping at ``max_width`` if given, growing the atlas if full."""
        while True:
            try:
                return self._try_render(text, max_width)
            except _OutOfSpace:
                self._resize()

    def measure_word(self, word: str) -> float:
        """The width of a word, not counting trailing whitespace."""
        width = 0.0
        last: str | None = None
        for ch in word.rstrip():
            width += self._rasterizer.advance(ch)
            if last is not None:
                width += self._rasterizer.kerning(last, ch)
            last = ch
        return width

    def _try_render(self, text: str, max_width: float | None) -> TextGeometry:
        rasterizer = self._rasterizer
        line_height = _round(rasterizer.line_height())

        quads: list[TextQuad] = []
        x = 0.0
        y = _round(rasterizer.ascent())
        last_glyph: str | None = None
        bounds: Rectangle | None = None
        words_on_line = 0

        for word, _ in line_breaks(text):
            # Only wrap after the first word on a line, so an overlong word
            # does not push an empty line before it.
            if (
                max_width is not None
                and words_on_line > 0
                and x + self.measure_word(word) > max_width
            ):
                x = 0.0
                y += line_height
                last_glyph = None
                words_on_line = 0

            words_on_line += 1

            for ch in word:
                if _is_control(ch):
                    if ch == "\n":
                        x = 0.0
                        y += line_height
                        last_glyph = None
                        words_on_line = 0
                    continue

                if last_glyph is not None:
                    x += rasterizer.kerning(last_glyph, ch)

                quad = self._rasterize_char(ch, Vec2(x, y))
                if quad is not None:
                    quad_bounds = quad.bounds()
                    bounds = quad_bounds if bounds is None else quad_bounds.combine(bounds)
                    quads.append(quad)

                x += rasterizer.advance(ch)
                last_glyph = ch

        return TextGeometry(quads=quads, bounds=bounds, resize_count=self._resize_count)

    def _rasterize_char(self, ch: str, position: Vec2) -> TextQuad | None:
        key = (ch, _subpixel(position.x), _subpixel(position.y))
        if key in self._glyphs:
            cached = self._glyphs[key]
        else:
            glyph = self._rasterizer.rasterize(ch, position)
            cached = None if glyph is None else self._add_to_atlas(glyph)
            self._glyphs[key] = cached

        if cached is None:
            return None
        return TextQuad(position=cached.position + position, region=cached.region)

    def _add_to_atlas(self, glyph: RasterizedGlyph) -> TextQuad:
        bounds = glyph.bounds
        placed = self._packer.insert(glyph.data, int(bounds.width), int(bounds.height))
        if placed is None:
            raise _OutOfSpace
        atlas_x, atlas_y = placed
        return TextQuad(
            position=Vec2(bounds.x, bounds.y),
            region=Rectangle(float(atlas_x), float(atlas_y), bounds.width, bounds.height),
        )

    def _resize(self) -> None:
        width, height = self._packer.size
        self._packer.resize(width * 2, height * 2)
        self._glyphs.clear()
        self._resize_count += 1