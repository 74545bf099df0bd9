"""Tests for bounds, fill/outline rasterization and corner repair."""

from __future__ import annotations

import base64

import numpy as np
import pytest

from crateshape.core import Direction, Edge, GeometryError, Offset, Shape
from crateshape.render import (
    FOREGROUND,
    PixelBuffer,
    RenderConfig,
    compute_bounds,
    find_corner_gaps,
    rasterize_fill,
    rasterize_outline,
    render_sprites,
    repair_inner_corners,
)
from crateshape.render.corner_repair import _shifted
from tests.conftest import BAR_2X1, BAR_3X1, ELL, PLUS, RING, SINGLE, SQUARE_2X2


ALL_SHAPES = [SINGLE, BAR_2X1, BAR_3X1, ELL, SQUARE_2X2, PLUS, RING]


def _outline(shape: Shape, config: RenderConfig, repair: bool = True):
    bounds = compute_bounds(shape.offsets, config.cell_size)
    return rasterize_outline(shape.boundary_edges, bounds, config, repair_corners=repair)


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------

class TestBounds:
    def test_pivot_for_centered_bar(self):
        bounds = compute_bounds(BAR_3X1, cell_size=8)
        assert bounds.pivot[0] == pytest.approx(1 / 3)
        assert bounds.pivot[1] == 0
        assert bounds.size == (24, 8)
        assert bounds.min == Offset(-1, 0)
        assert bounds.max == Offset(1, 0)

    def test_minimal_box_away_from_origin(self):
        bounds = compute_bounds([(2, 3)], cell_size=8)
        assert bounds.size == (8, 8)
        assert bounds.pivot == (-2.0, -3.0)

    def test_negative_reach(self):
        bounds = compute_bounds([(0, 0), (0, -1), (-1, -1)], cell_size=4)
        assert bounds.size == (8, 8)
        assert bounds.pivot == (0.5, 0.5)
        assert bounds.cell_origin(Offset(0, 0), 4) == (4, 4)

    def test_empty_offsets(self):
        with pytest.raises(GeometryError):
            compute_bounds([], cell_size=8)


class TestRenderConfig:
    @pytest.mark.parametrize(
        "cell_size,border_size",
        [(0, 1), (8, 0), (4, 5), (-8, 1), (8, 3), (4, 2), (2, 1)],
    )
    def test_rejects_degenerate(self, cell_size, border_size):
        with pytest.raises(GeometryError):
            RenderConfig(cell_size=cell_size, border_size=border_size)

    def test_accepts_three_borders_per_cell(self):
        cfg = RenderConfig(cell_size=3, border_size=1)
        assert (cfg.cell_size, cfg.border_size) == (3, 1)


# ---------------------------------------------------------------------------
# Fill
# ---------------------------------------------------------------------------

class TestFill:
    @pytest.mark.parametrize("offsets", ALL_SHAPES)
    def test_foreground_count_matches_cells(self, offsets, config, thick_config):
        shape = Shape(offsets)
        for cfg in (config, thick_config):
            bounds = compute_bounds(shape.offsets, cfg.cell_size)
            buffer = rasterize_fill(shape.offsets, bounds, cfg)
            assert buffer.foreground_count() == len(offsets) * cfg.cell_size**2

    def test_starts_transparent(self, ell, config):
        bounds = compute_bounds(ell.offsets, config.cell_size)
        buffer = rasterize_fill(ell.offsets, bounds, config)
        # Cell (1, 1) is not part of the shape
        assert not buffer.pixels[8:16, 8:16].any()
        assert np.all(buffer.pixels[12, 4] == FOREGROUND)


# ---------------------------------------------------------------------------
# Outline
# ---------------------------------------------------------------------------

class TestOutline:
    def test_single_cell_ring(self, single, config):
        buffer, repaired = _outline(single, config)
        mask = buffer.foreground_mask()
        assert mask.sum() == 8 * 8 - 6 * 6
        assert repaired == 0
        assert not mask[1:7, 1:7].any()

    def test_no_strip_on_suppressed_seam(self, bar, config):
        buffer, _ = _outline(bar, config)
        mask = buffer.foreground_mask()
        assert mask.sum() == 16 * 8 - 14 * 6
        assert not mask[3, 7] and not mask[3, 8]

    def test_strip_orientation(self, config):
        bounds = compute_bounds(SINGLE, config.cell_size)
        up, _ = rasterize_outline([Edge((0, 0), Direction.UP)], bounds, config, repair_corners=False)
        left, _ = rasterize_outline([Edge((0, 0), Direction.LEFT)], bounds, config, repair_corners=False)
        assert up.foreground_mask()[7, :].all()
        assert up.foreground_count() == 8
        assert left.foreground_mask()[:, 0].all()
        assert left.foreground_count() == 8

    def test_buffers_share_size_and_pivot(self, ell, config):
        sprites = render_sprites(ell, config)
        assert sprites.background.size == sprites.borders.size == sprites.bounds.size
        assert sprites.background.pivot == sprites.borders.pivot == sprites.bounds.pivot
        assert sprites.background.name == "background"
        assert sprites.borders.name == "borders"


# ---------------------------------------------------------------------------
# Corner repair
# ---------------------------------------------------------------------------

class TestCornerRepair:
    def test_shifted_reads_outside_as_empty(self):
        mask = np.array([[True, False], [False, False]])
        assert _shifted(mask, 1, 0).tolist() == [[False, False], [False, False]]
        assert _shifted(mask, -1, 0).tolist() == [[False, True], [False, False]]
        assert _shifted(mask, 0, -1).tolist() == [[False, False], [True, False]]
        assert not _shifted(mask, 5, 0).any()

    def test_ell_notch_filled(self, ell, config):
        raw, _ = _outline(ell, config, repair=False)
        assert not raw.foreground_mask()[7, 7]
        repaired_buf, repaired = _outline(ell, config)
        assert repaired == 1
        assert repaired_buf.foreground_mask()[7, 7]

    def test_thick_border_fills_whole_notch(self, ell, thick_config):
        buffer, repaired = _outline(ell, thick_config)
        assert repaired == 4
        assert buffer.foreground_mask()[10:12, 10:12].all()
        # Cell (1, 1) is outside the shape and stays empty
        assert not buffer.foreground_mask()[12:24, 12:24].any()

    def test_ring_has_four_concave_corners(self, config):
        _, repaired = _outline(Shape(RING), config)
        assert repaired == 4

    @pytest.mark.parametrize("offsets", [SINGLE, BAR_2X1, BAR_3X1, SQUARE_2X2])
    def test_convex_shapes_untouched(self, offsets, config, thick_config):
        for cfg in (config, thick_config):
            _, repaired = _outline(Shape(offsets), cfg)
            assert repaired == 0

    @pytest.mark.parametrize("offsets", ALL_SHAPES)
    def test_no_spontaneous_fill(self, offsets, thick_config):
        raw, _ = _outline(Shape(offsets), thick_config, repair=False)
        mask = raw.foreground_mask()
        gaps = find_corner_gaps(mask, thick_config.border_size)
        b = thick_config.border_size
        h, w = mask.shape
        for y, x in zip(*np.nonzero(gaps)):
            neighbours = [(y, x + b), (y, x - b), (y + b, x), (y - b, x)]
            assert any(0 <= ny < h and 0 <= nx < w and mask[ny, nx] for ny, nx in neighbours)

    def test_decisions_use_pre_pass_state(self, ell, config):
        raw, _ = _outline(ell, config, repair=False)
        expected = raw.foreground_mask() | find_corner_gaps(raw.foreground_mask(), config.border_size)
        repair_inner_corners(raw, config.border_size)
        assert np.array_equal(raw.foreground_mask(), expected)

    @pytest.mark.parametrize("offsets", ALL_SHAPES)
    @pytest.mark.parametrize("cell_size,border_size", [(8, 1), (12, 2), (3, 1), (16, 1)])
    def test_borders_stay_inside_fill(self, offsets, cell_size, border_size):
        sprites = render_sprites(Shape(offsets), RenderConfig(cell_size=cell_size, border_size=border_size))
        outside = sprites.borders.foreground_mask() & ~sprites.background.foreground_mask()
        assert not outside.any()


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

class TestPixelBuffer:
    def test_image_is_top_down(self, ell, config):
        sprites = render_sprites(ell, config)
        image = sprites.background.to_image()
        assert image.size == (16, 16)
        assert image.mode == "RGBA"
        # Top-right quadrant of the image is the empty cell (1, 1)
        assert image.getpixel((12, 2)) == (0, 0, 0, 0)
        assert image.getpixel((12, 14)) == (255, 255, 255, 255)

    def test_png_base64(self, single, config):
        buffer = render_sprites(single, config).borders
        raw = base64.b64decode(buffer.to_png_base64())
        assert raw.startswith(b"\x89PNG")

    def test_blank(self, config):
        bounds = compute_bounds(BAR_2X1, config.cell_size)
        buffer = PixelBuffer.blank(bounds)
        assert buffer.size == (16, 8)
        assert buffer.foreground_count() == 0
