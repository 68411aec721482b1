"""Tree node types for the polygon index.

A tree is a tagged union of three immutable node variants:
- Leaf: a handful of contour fragments tested directly
- Full: a region known to lie entirely inside the polygon set
- Branch: a uniform grid of cells over the node's bounding box

Branch cells are either a sentinel (Cell.EMPTY / Cell.FULL) or a nested node.
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from polytree.domain.contour import BBox, Contour


class Cell(IntEnum):
    """Sentinel for a grid cell that needs no further testing.

    The value is the containment result for any point inside the cell.
    """

    EMPTY = 0
    FULL = 1


@dataclass(frozen=True, slots=True)
class Leaf:
    """Contour fragments small enough for a direct point-in-polygon test.

    Attributes:
        contours: Closed contours held by this leaf
        bbox: Bounding box of all contours
    """

    contours: tuple[Contour, ...]
    bbox: BBox

    @property
    def point_count(self) -> int:
        return sum(len(c) for c in self.contours)


@dataclass(frozen=True, slots=True)
class Full:
    """A node whose whole bounding box is inside the polygon set."""

    bbox: BBox


@dataclass(frozen=True, slots=True)
class Branch:
    """A uniform x_parts by y_parts grid over bbox.

    Attributes:
        bbox: Bounding box covered by the grid
        x_parts: Number of columns
        y_parts: Number of rows
        x_size: Column width
        y_size: Row height
        cells: cells[i][j] for column i and row j
    """

    bbox: BBox
    x_parts: int
    y_parts: int
    x_size: float
    y_size: float
    cells: tuple[tuple["Cell | TreeNode", ...], ...]

    def cell_index(self, x: float, y: float) -> tuple[int, int]:
        """Map a coordinate to its (column, row), clamped to the grid.

        Points on the max edges of bbox fall into the last column / row.
        """
        i = math.floor((x - self.bbox.xmin) / self.x_size)
        j = math.floor((y - self.bbox.ymin) / self.y_size)
        return (
            min(max(i, 0), self.x_parts - 1),
            min(max(j, 0), self.y_parts - 1),
        )

    def cell_bbox(self, i: int, j: int, margin: float = 0.0) -> BBox:
        """Extent of cell (i, j), optionally inflated by margin cell sizes."""
        return grid_cell(self.bbox, self.x_size, self.y_size, i, j, margin)

    def iter_cells(self):
        """Yield (i, j, cell) for every grid cell."""
        for i, column in enumerate(self.cells):
            for j, cell in enumerate(column):
                yield i, j, cell


TreeNode = Union[Leaf, Full, Branch]


def grid_cell(
    bbox: BBox, x_size: float, y_size: float, i: int, j: int, margin: float = 0.0
) -> BBox:
    """Extent of grid cell (i, j) over bbox.

    Args:
        bbox: Box the grid is laid over
        x_size: Column width
        y_size: Row height
        i: Column index
        j: Row index
        margin: Inflation on every side, as a fraction of the cell size

    Returns:
        The cell rectangle
    """
    return BBox(
        bbox.xmin + (i - margin) * x_size,
        bbox.ymin + (j - margin) * y_size,
        bbox.xmin + (i + 1 + margin) * x_size,
        bbox.ymin + (j + 1 + margin) * y_size,
    )


def node_count(node: "Cell | TreeNode") -> int:
    """Number of nodes in a subtree; sentinel cells are not counted."""
    if isinstance(node, Branch):
        return 1 + sum(node_count(cell) for _, _, cell in node.iter_cells())
    if isinstance(node, (Leaf, Full)):
        return 1
    return 0


def leaf_count(node: "Cell | TreeNode") -> int:
    """Number of Leaf nodes in a subtree."""
    if isinstance(node, Branch):
        return sum(leaf_count(cell) for _, _, cell in node.iter_cells())
    return 1 if isinstance(node, Leaf) else 0


def max_depth(node: "Cell | TreeNode") -> int:
    """Number of Branch levels above the deepest node of a subtree."""
    if isinstance(node, Branch):
        return 1 + max(max_depth(cell) for _, _, cell in node.iter_cells())
    return 0
