"""crateshape: boundary classification and sprite rasterization for grid crates."""

__version__ = "0.1.0"
