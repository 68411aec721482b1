"""Tree construction by recursive grid slicing.

The builder turns a polygon set into a tree of nodes:

1. Small polygon sets (at most ``leaf_threshold`` points) become a Leaf.
2. A lone axis-aligned rectangle becomes a Full node.
3. Anything larger is covered by a uniform grid sized to the data. Each grid
   cell is clipped against the polygon set and becomes an empty or full
   sentinel, or a subtree built from the clipped fragments.

Cell rectangles are inflated by ``seam_epsilon`` of the cell size before
clipping, so fragments of neighbouring cells overlap slightly and a point on
a shared seam is covered by whichever cell it is mapped to.
"""

import math
import time
from collections.abc import Sequence
from functools import reduce

from polytree.config import TreeConfig
from polytree.core.clipping import Clipper, ShapelyClipper
from polytree.core.geometry import _contour_bbox
from polytree.core.tree import PolygonTree
from polytree.domain import (
    BBox,
    Branch,
    Cell,
    Contour,
    Full,
    Leaf,
    TreeNode,
    as_contour,
    close_contour,
    grid_cell,
)
from polytree.exceptions import EmptyInputError
from polytree.io import is_file_source, read_poly_file
from polytree.utils import BuildLogger


class TreeBuilder:
    """Builds immutable PolygonTree instances.

    Example:
        builder = TreeBuilder(TreeConfig(leaf_threshold=32))
        tree = builder.build(Path("boundary.poly"), [(0, 0), (5, 0), (5, 5)])
    """

    def __init__(
        self,
        config: TreeConfig | None = None,
        clipper: Clipper | None = None,
        logger: BuildLogger | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            config: Construction parameters (defaults if None)
            clipper: Polygon clipping backend (shapely if None)
            logger: Build event logger
        """
        self.config = config or TreeConfig()
        self.clipper = clipper or ShapelyClipper()
        self.logger = logger or BuildLogger()

    def build(self, *sources: object) -> PolygonTree:
        """Build a tree from contours and/or boundary files.

        Args:
            *sources: Contours (sequences of points), paths to .poly files,
                or open text streams of .poly content

        Returns:
            The built tree

        Raises:
            EmptyInputError: If no contours result from the sources
            InvalidArgumentError: If a contour is malformed
            PolyFileError: If a boundary file cannot be read
        """
        contours = self.load_contours(sources)
        if not contours:
            raise EmptyInputError()

        self.logger.log_build_start(
            contour_count=len(contours),
            point_count=sum(len(c) for c in contours),
            start_time=time.time(),
        )
        root = self.build_node(contours)
        self.logger.log_build_complete(end_time=time.time())

        return PolygonTree(root, config=self.config, stats=self.logger.stats)

    def load_contours(self, sources: Sequence[object]) -> list[Contour]:
        """Resolve sources to a list of closed contours."""
        contours: list[Contour] = []
        for source in sources:
            if is_file_source(source):
                contours.extend(close_contour(c) for c in read_poly_file(source))  # type: ignore[arg-type]
            else:
                contours.append(close_contour(as_contour(source, min_points=3)))
        return contours

    def build_node(self, contours: Sequence[Contour], depth: int = 0) -> TreeNode:
        """Build the node covering a set of closed contours."""
        bbox = reduce(BBox.union, (_contour_bbox(c) for c in contours))
        nrpoints = sum(len(c) for c in contours)

        if nrpoints == 5 and _is_rectangle(contours[0]):
            self.logger.log_full(depth)
            return Full(bbox)

        if nrpoints <= self.config.leaf_threshold:
            return self._leaf(contours, bbox, depth, reason="small")

        if bbox.width == 0 or bbox.height == 0:
            return self._leaf(contours, bbox, depth, reason="degenerate")

        if depth >= self.config.max_depth:
            return self._leaf(contours, bbox, depth, reason="max_depth")

        return self._split(contours, bbox, nrpoints, depth)

    def _leaf(self, contours: Sequence[Contour], bbox: BBox, depth: int, reason: str) -> Leaf:
        leaf = Leaf(tuple(contours), bbox)
        self.logger.log_leaf(depth, leaf.point_count, reason=reason)
        return leaf

    def _grid_shape(self, bbox: BBox, nrpoints: int) -> tuple[int, int]:
        xy_ratio = bbox.width / bbox.height
        nparts = self.config.target_parts(nrpoints)

        x_parts = max(1, math.ceil(math.sqrt(nparts * xy_ratio)))
        y_parts = max(1, math.ceil(math.sqrt(nparts / xy_ratio)))

        # a single cell would reproduce its parent
        if x_parts * y_parts == 1:
            if xy_ratio >= 1:
                x_parts = 2
            else:
                y_parts = 2

        return x_parts, y_parts

    def _split(
        self, contours: Sequence[Contour], bbox: BBox, nrpoints: int, depth: int
    ) -> Branch:
        x_parts, y_parts = self._grid_shape(bbox, nrpoints)
        x_size = bbox.width / x_parts
        y_size = bbox.height / y_parts
        eps = self.config.seam_epsilon

        self.logger.log_branch(depth, x_parts, y_parts, nrpoints)

        columns = []
        for i in range(x_parts):
            column: list[Cell | TreeNode] = []
            for j in range(y_parts):
                clip = grid_cell(bbox, x_size, y_size, i, j, margin=eps)
                corners = clip.corners()
                parts = self.clipper.intersect(contours, corners)

                if not parts:
                    self.logger.log_cell(depth, i, j, 0, state="empty")
                    column.append(Cell.EMPTY)
                elif len(parts) == 1 and len(parts[0]) == 4 and set(parts[0]) == set(corners):
                    self.logger.log_cell(depth, i, j, 1, state="full")
                    column.append(Cell.FULL)
                else:
                    self.logger.log_cell(depth, i, j, len(parts), state="split")
                    column.append(
                        self.build_node([close_contour(p) for p in parts], depth + 1)
                    )
            columns.append(tuple(column))

        return Branch(
            bbox=bbox,
            x_parts=x_parts,
            y_parts=y_parts,
            x_size=x_size,
            y_size=y_size,
            cells=tuple(columns),
        )


def _is_rectangle(contour: Contour) -> bool:
    """A closed quadrilateral with two distinct x and two distinct y values."""
    return len({p.x for p in contour}) == 2 and len({p.y for p in contour}) == 2


def build(
    *sources: object,
    config: TreeConfig | None = None,
    clipper: Clipper | None = None,
    **overrides: object,
) -> PolygonTree:
    """Build a polygon tree.

    Args:
        *sources: Contours, .poly file paths, or open .poly text streams
        config: Construction parameters
        clipper: Polygon clipping backend
        **overrides: TreeConfig fields overriding config (e.g. leaf_threshold=32)

    Returns:
        The built tree

    Example:
        >>> tree = build([(0, 0), (2, 0), (0, 2)])
        >>> tree.contains((0.5, 0.5))
        1
    """
    if overrides:
        base = config.model_dump() if config is not None else {}
        config = TreeConfig(**{**base, **overrides})
    return TreeBuilder(config=config, clipper=clipper).build(*sources)
