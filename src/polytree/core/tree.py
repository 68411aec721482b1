"""Query engine over a built polygon tree.

A PolygonTree wraps the root node produced by the builder. All queries are
read-only and walk at most one root-to-leaf path, so a tree can be shared by
any number of threads once built.
"""

from polytree.config import TreeConfig
from polytree.core.geometry import OUTSIDE, _contains_point, polygon_bbox
from polytree.domain import BBox, Branch, Cell, ContourLike, Full, Leaf, TreeNode, as_bbox, as_point
from polytree.domain import tree as nodes
from polytree.utils import BuildStats


class PolygonTree:
    """Spatial index answering point-in-polygon-set queries.

    Build instances with ``polytree.build``; the constructor only wraps an
    existing root node.

    Example:
        tree = build([(0, 0), (2, 0), (0, 2)])
        tree.contains((0.5, 0.5))        # 1
        tree.contains_points((0, 0), (9, 9))  # None
    """

    def __init__(
        self,
        root: TreeNode,
        config: TreeConfig | None = None,
        stats: BuildStats | None = None,
    ) -> None:
        self._root = root
        self._config = config or TreeConfig()
        self._stats = stats or BuildStats()

    @property
    def root(self) -> TreeNode:
        """Root node of the tree."""
        return self._root

    @property
    def config(self) -> TreeConfig:
        """Configuration the tree was built with."""
        return self._config

    @property
    def stats(self) -> BuildStats:
        """Statistics recorded while building the tree."""
        return self._stats

    def bbox(self) -> BBox:
        """Bounding box of the whole polygon set."""
        return self._root.bbox

    def contains(self, point: object) -> int:
        """Check if a point is inside the polygon set.

        Args:
            point: Point or (x, y) pair

        Returns:
            1 if inside, -1 if on a boundary, 0 if outside

        Raises:
            InvalidArgumentError: If point is not a pair of numbers
        """
        p = as_point(point)
        x, y = p.x, p.y
        node: TreeNode = self._root

        while True:
            if not node.bbox.contains_point(x, y):
                return OUTSIDE

            if isinstance(node, Full):
                return int(Cell.FULL)

            if isinstance(node, Leaf):
                for contour in node.contours:
                    result = _contains_point(x, y, contour)
                    if result:
                        return result
                return OUTSIDE

            i, j = node.cell_index(x, y)
            cell = node.cells[i][j]
            if isinstance(cell, Cell):
                return int(cell)
            node = cell

    def contains_points(self, *points: object) -> int | None:
        """Check if points are inside the polygon set.

        Boundary points count as inside.

        Returns:
            1 if all points are inside, 0 if all are outside, None if they
            disagree or no points were given
        """
        result: int | None = None
        for point in points:
            isin = abs(self.contains(point))
            if result is None:
                result = isin
            elif isin != result:
                return None
        return result

    def contains_bbox_rough(self, *bbox: object) -> int | None:
        """Cheaply check if a box is inside the polygon set.

        Accepts a BBox, a 4-item sequence, or 4 numbers xmin, ymin, xmax, ymax.
        A definite answer is always correct; when the box crosses a cell
        seam or reaches a leaf the answer is None and the caller has to test
        exactly.

        Returns:
            1 if the box is inside, 0 if outside, None if undecided

        Raises:
            InvalidArgumentError: If the box is not 4 numbers
        """
        box = as_bbox(bbox[0] if len(bbox) == 1 else bbox)
        node: TreeNode = self._root

        while True:
            if not node.bbox.intersects(box):
                return OUTSIDE

            if not node.bbox.strictly_contains(box):
                return None

            if isinstance(node, Full):
                return int(Cell.FULL)

            if not isinstance(node, Branch):
                return None

            low = node.cell_index(box.xmin, box.ymin)
            high = node.cell_index(box.xmax, box.ymax)
            if low != high:
                return None

            cell = node.cells[low[0]][low[1]]
            if isinstance(cell, Cell):
                return int(cell)
            node = cell

    def contains_polygon_rough(self, polygon: ContourLike) -> int | None:
        """Cheaply check if a polygon is inside, judged by its bounding box.

        Returns:
            1 if inside, 0 if outside, None if undecided
        """
        return self.contains_bbox_rough(polygon_bbox(polygon))

    def depth(self) -> int:
        """Number of branch levels."""
        return nodes.max_depth(self._root)

    def node_count(self) -> int:
        """Total number of nodes (sentinel cells excluded)."""
        return nodes.node_count(self._root)

    def leaf_count(self) -> int:
        """Number of leaf nodes."""
        return nodes.leaf_count(self._root)

    def __repr__(self) -> str:
        return (
            f"PolygonTree(bbox={self.bbox().to_tuple()}, "
            f"root={type(self._root).__name__})"
        )
