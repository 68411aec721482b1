"""Geometric primitives shared by the tree builder and query engine.

This module provides:
- Bounding box union and reduction over a contour
- Exact tri-state point-in-polygon testing (ray casting)
- Area-weighted polygon centroid (triangle fan)

All functions are pure and stateless. Public functions accept plain
coordinate pairs as well as Point objects; the underscored helpers work on
already-normalized contours and are used on the query hot path.
"""

from functools import reduce

from polytree.domain import BBox, Contour, ContourLike, Point, PointLike, as_contour, as_point
from polytree.exceptions import InvalidArgumentError

BOUNDARY = -1
OUTSIDE = 0
INSIDE = 1


def _as_bbox_operand(value: "BBox | Point") -> BBox:
    if isinstance(value, BBox):
        return value
    return BBox.from_point(as_point(value))


def bbox_union(a: "BBox | PointLike", b: "BBox | PointLike | None" = None) -> BBox:
    """United bounding box of two boxes and/or points.

    Args:
        a: First box (or point, treated as a zero-size box)
        b: Second box or point; None leaves a unchanged

    Returns:
        Componentwise min of the mins and max of the maxes

    Examples:
        >>> bbox_union(BBox(0, 0, 1, 1), BBox(2, -1, 3, 0))
        BBox(xmin=0, ymin=-1, xmax=3, ymax=1)
    """
    first = _as_bbox_operand(a)
    if b is None:
        return first
    return first.union(_as_bbox_operand(b))


def polygon_bbox(contour: ContourLike) -> BBox:
    """Tightest axis-aligned box containing every vertex of a contour.

    Raises:
        InvalidArgumentError: If the contour is empty or malformed
    """
    points = as_contour(contour)
    if not points:
        raise InvalidArgumentError(contour, "polygon should have at least 1 point")
    return _contour_bbox(points)


def _contour_bbox(points: Contour) -> BBox:
    return reduce(bbox_union, points[1:], BBox.from_point(points[0]))


def polygon_contains_point(point: PointLike, contour: ContourLike) -> int:
    """Test if a contour contains a point, detecting the boundary.

    Casts a horizontal ray from the point to the right and counts crossings
    with the contour edges, walking them in order and wrapping from the last
    vertex to the first. Comparisons are exact: a point on an edge or vertex
    is reported only when it coincides with it precisely.

    Args:
        point: The point to test
        contour: Contour vertices; a repeated closing vertex is allowed

    Returns:
        -1 if the point lies on the boundary, 1 if inside, 0 if outside

    Examples:
        >>> triangle = [(0, 0), (2, 0), (0, 2)]
        >>> polygon_contains_point((0.5, 0.5), triangle)
        1
        >>> polygon_contains_point((1, 1), triangle)
        -1
    """
    p = as_point(point)
    return _contains_point(p.x, p.y, as_contour(contour))


def _contains_point(x: float, y: float, contour: Contour) -> int:
    if not contour:
        return OUTSIDE

    prev = contour[-1]
    px, py = prev.x, prev.y
    inside = OUTSIDE

    for vertex in contour:
        nx, ny = vertex.x, vertex.y

        if py == ny:
            # horizontal edge on the ray
            if y == py and (x >= px or x >= nx) and (x <= px or x <= nx):
                return BOUNDARY
        elif not (
            (y < py and y < ny)
            or (y > py and y > ny)
            or (x > px and x > nx)
        ):
            xx = (y - py) * (nx - px) / (ny - py) + px
            if x == xx:
                return BOUNDARY
            # half-open rule: an edge touching the ray at its lower end is not counted
            if not (y <= py and y <= ny) and (px == nx or x < xx):
                inside = 1 - inside

        px, py = nx, ny

    return inside


def polygon_centroid(contour: ContourLike) -> Point:
    """Area-weighted centroid of a contour.

    Splits the contour into a fan of triangles from its first vertex and
    averages their centroids weighted by signed area. Degenerate contours
    (zero total area, e.g. collinear points or a single segment) fall back
    to the center of their bounding box.

    Args:
        contour: Contour vertices

    Returns:
        Centroid point

    Examples:
        >>> polygon_centroid([(0, 0), (3, 0), (0, 3)])
        Point(x=1.0, y=1.0)
        >>> polygon_centroid([(0, 0), (2, 4)])
        Point(x=1.0, y=2.0)
    """
    points = as_contour(contour, min_points=1)
    origin = points[0]

    sum_x = 0.0
    sum_y = 0.0
    total = 0.0

    for a, b in zip(points[1:-1], points[2:]):
        cx = (origin.x + a.x + b.x) / 3
        cy = (origin.y + a.y + b.y) / 3

        # twice the signed triangle area
        cross = (a.x - origin.x) * (b.y - origin.y) - (b.x - origin.x) * (a.y - origin.y)

        sum_x += cx * cross
        sum_y += cy * cross
        total += cross

    if total == 0:
        return _contour_bbox(points).center()

    return Point(sum_x / total, sum_y / total)
