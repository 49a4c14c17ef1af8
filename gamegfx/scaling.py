"""Scaling a fixed-size screen to fit inside a differently sized window."""

from __future__ import annotations

import math
from enum import Enum, auto

from gamegfx.geometry import Rectangle, Vec2

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class ScalingMode(Enum):
    """Algorithms that can be used to scale the game's screen."""

    FIXED = auto()
    """Native resolution, no scaling; letterboxed if larger, cropped if smaller."""

    STRETCH = auto()
    """Fill the window, ignoring the original aspect ratio."""

    SHOW_ALL = auto()
    """As large as possible while keeping the aspect ratio; may letterbox."""

    SHOW_ALL_PIXEL_PERFECT = auto()
    """Like SHOW_ALL, but only scales by whole numbers."""

    CROP = auto()
    """Fill the window while keeping the aspect ratio; may be cropped."""

    CROP_PIXEL_PERFECT = auto()
    """Like CROP, but only scales by whole numbers."""


def _fdiv(numerator: float, denominator: float) -> float:
    """Divide following IEEE rules instead of raising on a zero divisor."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _idiv(numerator: int, denominator: int) -> int:
    """Integer division truncating towards zero."""
    if denominator == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _fceil(value: float) -> float:
    return float(math.ceil(value)) if math.isfinite(value) else value


def _to_i32(value: float) -> int:
    """Convert a float to a 32-bit integer, truncating and saturating."""
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


def get_screen_rect(
    mode: ScalingMode,
    inner_width: int,
    inner_height: int,
    outer_width: int,
    outer_height: int,
) -> Rectangle:
    """Return where a screen of the inner size is drawn to fit the outer size."""
    f_inner_width = float(inner_width)
    f_inner_height = float(inner_height)
    f_outer_width = float(outer_width)
    f_outer_height = float(outer_height)

    internal_aspect_ratio = _fdiv(f_inner_width, f_inner_height)
    screen_aspect_ratio = _fdiv(f_outer_width, f_outer_height)
    wider_than_screen = internal_aspect_ratio > screen_aspect_ratio

    if mode is ScalingMode.FIXED:
        screen_x = _idiv(outer_width - inner_width, 2)
        screen_y = _idiv(outer_height - inner_height, 2)
        return Rectangle(
            float(screen_x), float(screen_y), float(inner_width), float(inner_height)
        )

    if mode is ScalingMode.STRETCH:
        return Rectangle(0.0, 0.0, float(outer_width), float(outer_height))

    if mode in (ScalingMode.SHOW_ALL, ScalingMode.CROP):
        if mode is ScalingMode.SHOW_ALL:
            if wider_than_screen:
                scale_factor = _fdiv(f_outer_width, f_inner_width)
            else:
                scale_factor = _fdiv(f_outer_height, f_inner_height)
        else:
            scale_factor = max(
                _fdiv(f_outer_width, f_inner_width),
                _fdiv(f_outer_height, f_inner_height),
            )
        screen_width = _fceil(f_inner_width * scale_factor)
        screen_height = _fceil(f_inner_height * scale_factor)
        screen_x = _fceil((f_outer_width - screen_width) / 2.0)
        screen_y = _fceil((f_outer_height - screen_height) / 2.0)
        return Rectangle(screen_x, screen_y, screen_width, screen_height)

    if mode is ScalingMode.SHOW_ALL_PIXEL_PERFECT:
        if wider_than_screen:
            scale = _idiv(outer_width, inner_width)
        else:
            scale = _idiv(outer_height, inner_height)
    elif mode is ScalingMode.CROP_PIXEL_PERFECT:
        if wider_than_screen:
            ratio = _fdiv(f_outer_height, f_inner_height)
        else:
            ratio = _fdiv(f_outer_width, f_inner_width)
        scale = _to_i32(_fceil(ratio))
    else:
        raise ValueError(f"unknown scaling mode: {mode!r}")

    if scale == 0:
        scale = 1

    screen_width = inner_width * scale
    screen_height = inner_height * scale
    screen_x = _idiv(outer_width - screen_width, 2)
    screen_y = _idiv(outer_height - screen_height, 2)
    return Rectangle(
        float(screen_x), float(screen_y), float(screen_width), float(screen_height)
    )


def _project(window_pos: float, rect_pos: float, rect_size: float, real_size: float) -> float:
    return _fdiv(real_size * (window_pos - rect_pos), rect_size)


def _unproject(screen_pos: float, rect_pos: float, rect_size: float, real_size: float) -> float:
    return rect_pos + _fdiv(rect_size * screen_pos, real_size)


class ScreenScaler:
    """Keeps track of how a fixed-size screen is scaled to fit an outer area."""

    def __init__(
        self,
        inner_width: int,
        inner_height: int,
        outer_width: int,
        outer_height: int,
        mode: ScalingMode,
    ) -> None:
        self._inner_width = inner_width
        self._inner_height = inner_height
        self._outer_width = outer_width
        self._outer_height = outer_height
        self._mode = mode
        self._screen_rect = self._compute_rect()

    def __repr__(self) -> str:
        return (
            f"ScreenScaler(inner=({self._inner_width}, {self._inner_height}), "
            f"outer=({self._outer_width}, {self._outer_height}), mode={self._mode})"
        )

    def _compute_rect(self) -> Rectangle:
        return get_screen_rect(
            self._mode,
            self._inner_width,
            self._inner_height,
            self._outer_width,
            self._outer_height,
        )

    @property
    def inner_size(self) -> tuple[int, int]:
        return self._inner_width, self._inner_height

    @property
    def outer_size(self) -> tuple[int, int]:
        return self._outer_width, self._outer_height

    @property
    def mode(self) -> ScalingMode:
        return self._mode

    @property
    def screen_rect(self) -> Rectangle:
        """The area of the outer space that the scaled screen occupies."""
        return self._screen_rect

    def set_outer_size(self, outer_width: int, outer_height: int) -> None:
        """Update the size of the area that the screen is scaled to fit within."""
        if outer_width != self._outer_width or outer_height != self._outer_height:
            self._outer_width = outer_width
            self._outer_height = outer_height
            self._screen_rect = self._compute_rect()

    def set_mode(self, mode: ScalingMode) -> None:
        """Change the scaling mode and recalculate the screen rectangle."""
        self._mode = mode
        self._screen_rect = self._compute_rect()

    def project(self, position: Vec2) -> Vec2:
        """Convert a point from window co-ordinates to scaled screen co-ordinates."""
        rect = self._screen_rect
        return Vec2(
            _project(position.x, rect.x, rect.width, float(self._inner_width)),
            _project(position.y, rect.y, rect.height, float(self._inner_height)),
        )

    def unproject(self, position: Vec2) -> Vec2:
        """Convert a point from scaled screen co-ordinates to window co-ordinates."""
        rect = self._screen_rect
        return Vec2(
            _unproject(position.x, rect.x, rect.width, float(self._inner_width)),
            _unproject(position.y, rect.y, rect.height, float(self._inner_height)),
        )