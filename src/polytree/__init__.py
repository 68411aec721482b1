"""polytree - Fast point-in-polygon checks against large polygons.

polytree pre-builds a spatial index over a set of polygon contours by slicing
them recursively into a grid, so that each query only tests a handful of
edges instead of ray casting against every edge of the polygon.

Example:
    >>> import polytree
    >>> tree = polytree.build([(0, 0), (2, 0), (0, 2)])
    >>> tree.contains((0.5, 0.5))
    1
    >>> tree.contains((1, 1))
    -1

Boundary files in .poly format can be passed to ``build`` as paths.
"""

__version__ = "0.1.0"

from polytree.config import TreeConfig
from polytree.core import (
    PolygonTree,
    TreeBuilder,
    bbox_union,
    build,
    polygon_bbox,
    polygon_centroid,
    polygon_contains_point,
)
from polytree.domain import BBox, Branch, Cell, Full, Leaf, Point
from polytree.exceptions import (
    ClippingError,
    EmptyInputError,
    InvalidArgumentError,
    PolyFileError,
    PolyTreeError,
)
from polytree.io import read_poly_file

__all__ = [
    "BBox",
    "Branch",
    "Cell",
    "ClippingError",
    "EmptyInputError",
    "Full",
    "InvalidArgumentError",
    "Leaf",
    "Point",
    "PolyFileError",
    "PolyTreeError",
    "PolygonTree",
    "TreeBuilder",
    "TreeConfig",
    "__version__",
    "bbox_union",
    "build",
    "polygon_bbox",
    "polygon_centroid",
    "polygon_contains_point",
    "read_poly_file",
]
