"""
crateshape sprite preview
Builds a few crates, rasterizes them and prints the masks as text.
Writes PNGs next to this script.
"""
from pathlib import Path

from crateshape.core import Direction, Edge, EdgeClass, Shape
from crateshape.render import RenderConfig, render_sprites
from crateshape.utils.preview import fill_percentage, mask_to_halfblock, mask_to_text

OUT_DIR = Path(__file__).parent

SHAPES = {
    "single": Shape([(0, 0)]),
    "bar": Shape([(-1, 0), (0, 0), (1, 0)]),
    "ell": Shape([(0, 0), (1, 0), (0, 1)]),
    "tee_sticky": Shape(
        [(0, 0), (-1, 0), (1, 0), (0, 1)],
        overrides=[Edge((0, 1), Direction.UP, EdgeClass.STICKY)],
    ),
}

config = RenderConfig(cell_size=8, border_size=1)

for name, shape in SHAPES.items():
    sprites = render_sprites(shape, config)
    borders = sprites.borders.foreground_mask()

    print("=" * 60)
    print(f"{name}: {len(shape)} cells, {len(shape.boundary_edges)} boundary edges")
    print(f"size {sprites.bounds.size}, pivot {sprites.bounds.pivot}")
    print(f"outline fill {fill_percentage(borders):.1f}%, {sprites.repaired} corner pixels repaired")
    print("=" * 60)
    print(mask_to_text(borders))
    print()
    print(mask_to_halfblock(sprites.background.foreground_mask()))
    print()

    sprites.background.to_image().save(OUT_DIR / f"{name}_background.png")
    sprites.borders.to_image().save(OUT_DIR / f"{name}_borders.png")
