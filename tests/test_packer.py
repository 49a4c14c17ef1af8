import pytest

from gamegfx.packer import ShelfPacker

P = ShelfPacker.PADDING


def solid(width, height, rgba):
    return bytes(rgba) * (width * height)


def overlaps(a, b):
    (ax, ay, aw, ah), (bx, by, bw, bh) = a, b
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


def test_first_insert_is_at_padding():
    packer = ShelfPacker(32, 32)
    assert packer.insert(solid(4, 4, (1, 2, 3, 4)), 4, 4) == (P, P)


def test_second_insert_shares_shelf():
    packer = ShelfPacker(32, 32)
    packer.insert(solid(4, 4, (0, 0, 0, 0)), 4, 4)
    assert packer.insert(solid(4, 4, (0, 0, 0, 0)), 4, 4) == (4 + 2 * P, P)


def test_taller_glyph_opens_new_shelf():
    packer = ShelfPacker(32, 32)
    packer.insert(solid(4, 4, (0, 0, 0, 0)), 4, 4)
    assert packer.insert(solid(4, 6, (0, 0, 0, 0)), 4, 6) == (P, P + 4 + P)


def test_pixels_round_trip():
    packer = ShelfPacker(16, 16)
    color = (10, 20, 30, 40)
    x, y = packer.insert(solid(3, 2, color), 3, 2)
    for dy in range(2):
        for dx in range(3):
            assert packer.pixel(x + dx, y + dy) == color
    assert packer.pixel(0, 0) == (0, 0, 0, 0)


def test_placements_never_overlap_and_stay_in_bounds():
    packer = ShelfPacker(64, 64)
    placed = []
    sizes = [(5, 7), (3, 3), (8, 2), (6, 7), (4, 9), (2, 2)] * 6
    for w, h in sizes:
        pos = packer.insert(solid(w, h, (255, 255, 255, 255)), w, h)
        if pos is None:
            continue
        rect = (pos[0], pos[1], w, h)
        assert pos[0] + w <= packer.texture_width
        assert pos[1] + h <= packer.texture_height
        assert all(not overlaps(rect, other) for other in placed)
        placed.append(rect)
    assert placed


def test_returns_none_when_full():
    packer = ShelfPacker(8, 8)
    results = [packer.insert(solid(4, 4, (1, 1, 1, 1)), 4, 4) for _ in range(4)]
    assert results[0] is not None
    assert results[-1] is None


def test_resize_clears_atlas():
    packer = ShelfPacker(8, 8)
    packer.insert(solid(4, 4, (9, 9, 9, 9)), 4, 4)
    packer.resize(16, 16)
    assert packer.size == (16, 16)
    assert packer.data == bytes(16 * 16 * 4)
    assert packer.insert(solid(4, 4, (9, 9, 9, 9)), 4, 4) == (P, P)


def test_not_enough_data_raises():
    packer = ShelfPacker(16, 16)
    with pytest.raises(ValueError):
        packer.insert(bytes(10), 2, 2)


def test_extra_data_is_truncated():
    packer = ShelfPacker(16, 16)
    x, y = packer.insert(solid(2, 2, (5, 6, 7, 8)) + b"\xff" * 12, 2, 2)
    assert packer.pixel(x + 2, y) == (0, 0, 0, 0)
    assert packer.pixel(x + 1, y + 1) == (5, 6, 7, 8)


def test_pixel_out_of_bounds():
    packer = ShelfPacker(4, 4)
    with pytest.raises(IndexError):
        packer.pixel(4, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ShelfPacker(-1, 4)