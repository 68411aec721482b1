"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout polytree:
- Point: A 2D point
- BBox: An axis-aligned bounding box
- Contour: A closed ring of points (tuple of Point)

Callers may pass plain coordinate pairs everywhere a Point is expected; the
``as_*`` helpers normalize such input and reject anything malformed.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from numbers import Real

from polytree.exceptions import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


Contour = tuple[Point, ...]
PointLike = Point | Sequence[float]
ContourLike = Sequence[PointLike]


@dataclass(frozen=True, slots=True)
class BBox:
    """An axis-aligned bounding box.

    Attributes:
        xmin: Minimum x coordinate
        ymin: Minimum y coordinate
        xmax: Maximum x coordinate
        ymax: Maximum y coordinate
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self) -> None:
        if self.xmin > self.xmax or self.ymin > self.ymax:
            raise InvalidArgumentError(
                self.to_tuple(), "xmin must not exceed xmax and ymin must not exceed ymax"
            )

    @property
    def width(self) -> float:
        """Extent along the x axis."""
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        """Extent along the y axis."""
        return self.ymax - self.ymin

    def center(self) -> Point:
        """Midpoint of the box."""
        return Point((self.xmin + self.xmax) / 2, (self.ymin + self.ymax) / 2)

    def union(self, other: "BBox | None") -> "BBox":
        """Componentwise min of the mins and max of the maxes.

        Unioning with None returns this box unchanged.
        """
        if other is None:
            return self
        return BBox(
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def contains_point(self, x: float, y: float) -> bool:
        """Check if (x, y) lies within the box, edges included."""
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax

    def intersects(self, other: "BBox") -> bool:
        """Check if the two boxes share at least one point."""
        return not (
            other.xmax < self.xmin
            or other.xmin > self.xmax
            or other.ymax < self.ymin
            or other.ymin > self.ymax
        )

    def strictly_contains(self, other: "BBox") -> bool:
        """Check if other lies inside this box without touching its edges."""
        return (
            other.xmin > self.xmin
            and other.xmax < self.xmax
            and other.ymin > self.ymin
            and other.ymax < self.ymax
        )

    def corners(self) -> Contour:
        """Corner points in counter-clockwise order, starting at (xmin, ymin)."""
        return (
            Point(self.xmin, self.ymin),
            Point(self.xmax, self.ymin),
            Point(self.xmax, self.ymax),
            Point(self.xmin, self.ymax),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (xmin, ymin, xmax, ymax) tuple."""
        return (self.xmin, self.ymin, self.xmax, self.ymax)

    @classmethod
    def from_point(cls, point: Point) -> "BBox":
        """Zero-size box around a single point."""
        return cls(point.x, point.y, point.x, point.y)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def as_point(value: object) -> Point:
    """Normalize a Point or an (x, y) pair to a Point.

    Raises:
        InvalidArgumentError: If value is not a pair of real numbers
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidArgumentError(value, "point should be a sequence of two numbers")
    if len(value) != 2 or not all(_is_number(c) for c in value):
        raise InvalidArgumentError(value, "point should be a sequence of two numbers")
    return Point(float(value[0]), float(value[1]))


def as_contour(value: object, min_points: int = 1) -> Contour:
    """Normalize a sequence of points to a Contour.

    Args:
        value: Sequence of Points or coordinate pairs
        min_points: Minimum number of points required

    Raises:
        InvalidArgumentError: If value is not a sequence of points, or too short
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise InvalidArgumentError(value, "polygon should be a sequence of points")
    points = tuple(as_point(p) for p in value)
    if len(points) < min_points:
        raise InvalidArgumentError(
            value, f"polygon should have at least {min_points} points, got {len(points)}"
        )
    return points


def as_bbox(value: object) -> BBox:
    """Normalize a BBox or a 4-number sequence to a BBox.

    Raises:
        InvalidArgumentError: If value is not exactly 4 numbers xmin, ymin, xmax, ymax
    """
    if isinstance(value, BBox):
        return value
    if (
        isinstance(value, (str, bytes))
        or not isinstance(value, Sequence)
        or len(value) != 4
        or not all(_is_number(c) for c in value)
    ):
        raise InvalidArgumentError(value, "box should be 4 values xmin, ymin, xmax, ymax")
    return BBox(*(float(c) for c in value))


def close_contour(points: Contour) -> Contour:
    """Return the contour with its first point appended if it is open."""
    if points and points[0] != points[-1]:
        return (*points, points[0])
    return points
