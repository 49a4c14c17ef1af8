"""Fonts in the AngelCode BMFont text format."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Union

from gamegfx.geometry import Rectangle, Vec2
from gamegfx.textcache import RasterizedGlyph, Rasterizer

PathLike = Union[str, Path]

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")
_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class InvalidFontError(ValueError):
    """Raised when a font definition is invalid or incomplete."""


@dataclass(frozen=True)
class PageImage:
    """Decoded RGBA8 pixel data for one page of a font."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        needed = self.width * self.height * 4
        if len(self.data) < needed:
            raise ValueError(
                f"not enough data: expected {needed} bytes, got {len(self.data)}"
            )
        object.__setattr__(self, "data", bytes(self.data[:needed]))

    def region(self, rect: Rectangle) -> PageImage:
        """Return a copy of the pixels inside ``rect``."""
        x, y = int(rect.x), int(rect.y)
        width, height = int(rect.width), int(rect.height)
        if (
            x < 0
            or y < 0
            or width < 0
            or height < 0
            or x + width > self.width
            or y + height > self.height
        ):
            raise ValueError(f"region {rect!r} lies outside the image")
        row_bytes = width * 4
        rows = (
            self.data[((y + row) * self.width + x) * 4:][:row_bytes]
            for row in range(height)
        )
        return PageImage(width, height, b"".join(rows))


@dataclass(frozen=True)
class BmFontGlyph:
    """Placement and metrics of one character in a BMFont."""

    x: int
    y: int
    width: int
    height: int
    x_offset: int
    y_offset: int
    x_advance: int
    page: int


def parse_tag(line: str) -> tuple[str, str]:
    """Split a line into its tag and the rest of the line (with leading spaces kept)."""
    trimmed = line.lstrip()
    end = trimmed.find(" ")
    if end == -1:
        end = len(trimmed)
    return trimmed[:end], trimmed[end:]


def parse_attributes(text: str) -> dict[str, str]:
    """Parse ``key=value`` pairs; values may be quoted with double quotes."""
    remaining = text.lstrip()
    attributes: dict[str, str] = {}

    while remaining:
        key_end = remaining.find("=")
        if key_end == -1:
            raise InvalidFontError(f"attribute without '=': {remaining!r}")
        key = remaining[:key_end]
        remaining = remaining[key_end + 1:]

        if remaining.startswith('"'):
            remaining = remaining[1:]
            value_end = remaining.find('"')
            if value_end == -1:
                raise InvalidFontError(f"unterminated string for attribute {key!r}")
            attributes[key] = remaining[:value_end]
            remaining = remaining[value_end + 1:].lstrip()
        else:
            value_end = remaining.find(" ")
            if value_end == -1:
                value_end = len(remaining)
            attributes[key] = remaining[:value_end]
            remaining = remaining[value_end:].lstrip()

    return attributes


def _get(attributes: Mapping[str, str], key: str) -> str:
    try:
        return attributes[key]
    except KeyError:
        raise InvalidFontError(f"missing attribute {key!r}") from None


def _unsigned(attributes: Mapping[str, str], key: str) -> int:
    value = _get(attributes, key)
    if not _UNSIGNED.fullmatch(value) or int(value) > _U32_MAX:
        raise InvalidFontError(f"attribute {key!r} is not an unsigned integer: {value!r}")
    return int(value)


def _signed(attributes: Mapping[str, str], key: str) -> int:
    value = _get(attributes, key)
    if not _SIGNED.fullmatch(value) or not _I32_MIN <= int(value) <= _I32_MAX:
        raise InvalidFontError(f"attribute {key!r} is not an integer: {value!r}")
    return int(value)


def _lines(text: str):
    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


class BmFontRasterizer(Rasterizer):
    """Provides glyphs and metrics from a BMFont text definition.

    Pages given in ``pages`` take precedence over the files named in the font.
    Other pages are loaded by calling ``load_image`` with the file's path
    inside ``image_dir``.
    """

    def __init__(
        self,
        font: str,
        pages: Mapping[int, PageImage] | None = None,
        image_dir: PathLike | None = None,
        load_image: Callable[[Path], PageImage] | None = None,
    ) -> None:
        self._pages: dict[int, PageImage] = dict(pages or {})
        self._glyphs: dict[int, BmFontGlyph] = {}
        self._kerning: dict[tuple[int, int], int] = {}
        line_height: int | None = None
        base: int | None = None

        for line in _lines(font):
            tag, rest = parse_tag(line)

            if tag == "common":
                attributes = parse_attributes(rest)
                line_height = _unsigned(attributes, "lineHeight")
                base = _unsigned(attributes, "base")

            elif tag == "page":
                attributes = parse_attributes(rest)
                page_id = _unsigned(attributes, "id")
                if page_id not in self._pages:
                    file = _get(attributes, "file")
                    if image_dir is None or load_image is None:
                        raise InvalidFontError(f"no image available for page {page_id}")
                    self._pages[page_id] = load_image(Path(image_dir) / file)

            elif tag == "char":
                attributes = parse_attributes(rest)
                char_id = _unsigned(attributes, "id")
                self._glyphs[char_id] = BmFontGlyph(
                    x=_unsigned(attributes, "x"),
                    y=_unsigned(attributes, "y"),
                    width=_unsigned(attributes, "width"),
                    height=_unsigned(attributes, "height"),
                    x_offset=_signed(attributes, "xoffset"),
                    y_offset=_signed(attributes, "yoffset"),
                    x_advance=_signed(attributes, "xadvance"),
                    page=_unsigned(attributes, "page"),
                )

            elif tag == "kerning":
                attributes = parse_attributes(rest)
                first = _unsigned(attributes, "first")
                second = _unsigned(attributes, "second")
                self._kerning[(first, second)] = _signed(attributes, "amount")

        if line_height is None or base is None:
            raise InvalidFontError("font has no 'common' line")
        self._line_height = line_height
        self._base = base

    @property
    def glyphs(self) -> Mapping[int, BmFontGlyph]:
        return dict(self._glyphs)

    @property
    def pages(self) -> Mapping[int, PageImage]:
        return dict(self._pages)

    def rasterize(self, glyph: str, position: Vec2) -> RasterizedGlyph | None:
        bmglyph = self._glyphs.get(ord(glyph))
        if bmglyph is None:
            return None
        page = self._pages.get(bmglyph.page)
        if page is None:
            return None
        region = page.region(
            Rectangle(bmglyph.x, bmglyph.y, bmglyph.width, bmglyph.height)
        )
        # Offsets are made relative to the cursor on the baseline, rather
        # than to the top of the cell.
        return RasterizedGlyph(
            bounds=Rectangle(
                float(bmglyph.x_offset),
                float(-(self._base - bmglyph.y_offset)),
                float(bmglyph.width),
                float(bmglyph.height),
            ),
            data=region.data,
        )

    def advance(self, glyph: str) -> float:
        bmglyph = self._glyphs.get(ord(glyph))
        return float(bmglyph.x_advance) if bmglyph is not None else 0.0

    def line_height(self) -> float:
        return float(self._line_height)

    def ascent(self) -> float:
        return float(self._base)

    def kerning(self, previous: str, current: str) -> float:
        return float(self._kerning.get((ord(previous), ord(current)), 0))