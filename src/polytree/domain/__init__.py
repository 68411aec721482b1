"""Domain models for polytree.

This module contains the geometric value types and the immutable tree node
variants. All models are frozen dataclasses, safe to share between threads.

Key classes:
- Point: A 2D point
- BBox: An axis-aligned bounding box
- Leaf, Full, Branch: Tree node variants
- Cell: Empty / full sentinel for branch grid cells
"""

from polytree.domain.contour import (
    BBox,
    Contour,
    ContourLike,
    Point,
    PointLike,
    as_bbox,
    as_contour,
    as_point,
    close_contour,
)
from polytree.domain.tree import Branch, Cell, Full, Leaf, TreeNode, grid_cell

__all__: list[str] = [
    # Core types
    "Point",
    "BBox",
    "Contour",
    "ContourLike",
    "PointLike",
    # Tree nodes
    "Cell",
    "Leaf",
    "Full",
    "Branch",
    "TreeNode",
    "grid_cell",
    # Normalization
    "as_point",
    "as_contour",
    "as_bbox",
    "close_contour",
]
