"""Core algorithms for polytree.

This module contains:

- Geometry primitives (bbox union, point-in-polygon, centroid)
- Polygon clipping backends used during construction
- The tree builder (recursive grid slicing)
- The query engine (exact and rough containment)

Key functions:
- bbox_union: Union of two boxes or points
- polygon_bbox: Bounding box of a contour
- polygon_contains_point: Tri-state ray casting test
- polygon_centroid: Area-weighted centroid
- build: Build a PolygonTree from contours or boundary files

Key classes:
- TreeBuilder: Builds trees with a given configuration and clipper
- PolygonTree: Immutable index answering containment queries
- ShapelyClipper: Default clipping backend
"""

from polytree.core.builder import TreeBuilder, build
from polytree.core.clipping import Clipper, ShapelyClipper
from polytree.core.geometry import (
    BOUNDARY,
    INSIDE,
    OUTSIDE,
    bbox_union,
    polygon_bbox,
    polygon_centroid,
    polygon_contains_point,
)
from polytree.core.tree import PolygonTree

__all__ = [
    # Result values
    "BOUNDARY",
    "INSIDE",
    "OUTSIDE",
    # Clipping
    "Clipper",
    "ShapelyClipper",
    # Tree
    "PolygonTree",
    "TreeBuilder",
    "build",
    # Geometry functions
    "bbox_union",
    "polygon_bbox",
    "polygon_centroid",
    "polygon_contains_point",
]
