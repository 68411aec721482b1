"""Polygon clipping backends used while building the tree.

The builder only needs one boolean operation: intersect a set of contours
with a rectangle. It talks to a Clipper, so any backend exposing
``intersect`` can be injected; ShapelyClipper is the default.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Protocol

from shapely.errors import GEOSException
from shapely.geometry import GeometryCollection, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.validation import make_valid

from polytree.domain import Contour, Point
from polytree.exceptions import ClippingError

logger = logging.getLogger(__name__)


class Clipper(Protocol):
    """Boolean intersection of simple, hole-free contours."""

    def intersect(self, contours: Sequence[Contour], clip: Contour) -> list[Contour]:
        """Intersect a polygon set with a clip contour.

        Args:
            contours: Closed outer contours
            clip: Clip contour (a rectangle when called by the builder)

        Returns:
            Resulting contours as open rings (closing vertex not repeated);
            empty if nothing overlaps
        """
        ...


def _iter_polygons(geometry: BaseGeometry) -> Iterator[Polygon]:
    """Yield the areal parts of an intersection result."""
    if geometry.is_empty:
        return
    if isinstance(geometry, Polygon):
        yield geometry
    elif isinstance(geometry, (MultiPolygon, GeometryCollection)):
        for part in geometry.geoms:
            yield from _iter_polygons(part)
    # points and lines where the clip only touches the polygon have no area


def _to_contour(coords: Iterable[tuple[float, ...]]) -> Contour:
    points = tuple(Point(float(c[0]), float(c[1])) for c in coords)
    if len(points) > 1 and points[0] == points[-1]:
        points = points[:-1]
    return points


class ShapelyClipper:
    """Clipper backed by shapely (GEOS).

    Each contour is intersected with the clip polygon separately; contours
    that are not valid simple polygons are repaired with make_valid first.
    Inner rings in the result are dropped, matching the outer-only model.
    """

    def intersect(self, contours: Sequence[Contour], clip: Contour) -> list[Contour]:
        clip_polygon = Polygon([p.to_tuple() for p in clip])
        result: list[Contour] = []

        try:
            for contour in contours:
                if len(set(contour)) < 3:
                    continue
                polygon = Polygon([p.to_tuple() for p in contour])
                if not polygon.is_valid:
                    polygon = make_valid(polygon)
                for part in _iter_polygons(polygon.intersection(clip_polygon)):
                    ring = _to_contour(part.exterior.coords)
                    if len(ring) >= 3:
                        result.append(ring)
        except GEOSException as e:
            raise ClippingError(str(e)) from e

        logger.debug("Clipped %d contours into %d parts", len(contours), len(result))
        return result
