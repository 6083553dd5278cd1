"""Frontier detection, clustering and region tagging on occupancy grids."""

__version__ = "0.1.0"
__all__ = ["grid", "frontiers", "markers", "clustering", "regions"]