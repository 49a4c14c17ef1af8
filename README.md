# gamegfx

Pure-Python building blocks for 2D game rendering. The package works without
any graphics API. It supplies the geometry and the layout logic:

- `gamegfx.geometry`: `Vec2` and `Rectangle`. `Vec2` supports arithmetic,
  `rotate_z` and `map`. `Rectangle` has intersection and containment tests,
  `combine`, edge and corner accessors, and infinite `row`/`column`
  iterators for slicing spritesheets.
- `gamegfx.scaling`: `ScalingMode`, `get_screen_rect` and `ScreenScaler`.
  These fit a fixed-size game screen into an outer area of any size. They
  also convert points between window and screen co-ordinates.
- `gamegfx.packer`: `ShelfPacker`, an in-memory RGBA texture atlas filled
  by a shelf-packing algorithm.
- `gamegfx.textcache`: `Rasterizer`, the interface for glyph sources, and
  `FontCache`, which handles text layout. `FontCache` wraps words at a
  maximum width and applies kerning. It caches glyphs in a `ShelfPacker`
  and doubles the atlas when the atlas fills. `line_breaks` splits text at
  line break opportunities.
- `gamegfx.bmfont`: a parser (`parse_tag`, `parse_attributes`) for
  AngelCode BMFont text-format files. It also provides `BmFontRasterizer`,
  which serves glyphs from a font's page images (`PageImage`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

To slice a spritesheet:

```python
from itertools import islice
from gamegfx.geometry import Rectangle

frames = list(islice(Rectangle.row(0.0, 0.0, 16.0, 16.0), 3))
# frames[1] == Rectangle(16.0, 0.0, 16.0, 16.0)
```

To scale a 320x180 screen into a 1280x800 window:

```python
from gamegfx.geometry import Vec2
from gamegfx.scaling import ScalingMode, ScreenScaler, get_screen_rect

rect = get_screen_rect(ScalingMode.SHOW_ALL_PIXEL_PERFECT, 320, 180, 1280, 800)
# rect == Rectangle(0.0, 40.0, 1280.0, 720.0)

scaler = ScreenScaler(320, 180, 1280, 800, ScalingMode.SHOW_ALL_PIXEL_PERFECT)
scaler.project(Vec2(640.0, 400.0))  # -> Vec2(160.0, 90.0)
```

To lay out text with a BMFont:

```python
from gamegfx.bmfont import BmFontRasterizer, PageImage
from gamegfx.textcache import FontCache

font = """common lineHeight=10 base=8
page id=0 file="font.png"
char id=65 x=0 y=0 width=2 height=2 xoffset=0 yoffset=1 xadvance=3 page=0
"""

rasterizer = BmFontRasterizer(font, pages={0: PageImage(2, 2, bytes(16))})
cache = FontCache(rasterizer)
geometry = cache.render("AA")
# two quads, at (0, 1) and (3, 1); geometry.bounds == Rectangle(0.0, 1.0, 5.0, 2.0)
```

`FontCache.render` takes an optional `max_width` for word wrapping.

A page that is not passed in `pages` is loaded by
`BmFontRasterizer(..., image_dir=..., load_image=...)`. It calls
`load_image` with the page file's path inside `image_dir`, and that call
must return a `PageImage`.

## What this package does not do

- It draws nothing. There is no window, no GPU texture and no draw call.
  `ShelfPacker` keeps its atlas as plain bytes, and `FontCache` returns
  quads that your renderer has to draw.
- It does not decode image files. You supply page images for BMFont as
  decoded RGBA8 data, either directly or through a `load_image` callable.
- It reads only the BMFont text format. The binary format is not
  supported, and there is no TrueType/OpenType rasterizer.