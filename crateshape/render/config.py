"""Render configuration: pixel geometry for sprite generation."""

from __future__ import annotations

from dataclasses import dataclass

from crateshape.core.errors import GeometryError


@dataclass(frozen=True)
class RenderConfig:
    """Pixel sizes used by the rasterizer."""

    # Side of one grid cell in pixels
    cell_size: int = 16
    # Outline thickness in pixels
    border_size: int = 1

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise GeometryError(f"cell_size must be positive, got {self.cell_size}")
        if self.border_size <= 0:
            raise GeometryError(f"border_size must be positive, got {self.border_size}")
        # Corner repair looks 2 × border_size into the neighbouring cell; it must
        # not reach the strip on that cell's far side.
        if 3 * self.border_size > self.cell_size:
            raise GeometryError(
                f"cell_size ({self.cell_size}) must be at least 3 × border_size ({self.border_size})"
            )

    @classmethod
    def from_settings(cls) -> RenderConfig:
        from crateshape.config import settings

        return cls(cell_size=settings.cell_size, border_size=settings.border_size)
