"""Unit tests for PolygonTree queries.

Tests cover:
- Exact containment through leaves, full nodes and sentinel cells
- Agreement between tree queries and direct ray casting
- Multi-point queries
- Rough bounding box and polygon checks
"""

import math

import pytest

from polytree import build
from polytree.core.geometry import polygon_contains_point
from polytree.core.tree import PolygonTree
from polytree.domain import BBox, Branch, Cell, Full, Leaf, Point
from polytree.exceptions import InvalidArgumentError


def regular_polygon(n, radius):
    return [
        (radius * math.cos(2 * math.pi * k / n), radius * math.sin(2 * math.pi * k / n))
        for k in range(n)
    ]


def star(n, outer, inner):
    """Star with n spikes, alternating outer and inner radius."""
    points = []
    for k in range(2 * n):
        r = outer if k % 2 == 0 else inner
        angle = math.pi * k / n
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


def subdivided_rect(xmin, ymin, xmax, ymax, steps):
    """Axis-aligned rectangle whose edges are split into `steps` segments each."""
    dx = (xmax - xmin) / steps
    dy = (ymax - ymin) / steps
    return (
        [(xmin + k * dx, ymin) for k in range(steps)]
        + [(xmax, ymin + k * dy) for k in range(steps)]
        + [(xmax - k * dx, ymax) for k in range(steps)]
        + [(xmin, ymax - k * dy) for k in range(steps)]
    )


def subdivided_square(size, steps):
    return subdivided_rect(0.0, 0.0, size, size, steps)


def sample_grid(bbox, steps):
    """Points spread over and around a box, offset away from round values."""
    pad_x = bbox.width * 0.1
    pad_y = bbox.height * 0.1
    for a in range(steps):
        for b in range(steps):
            x = bbox.xmin - pad_x + (a + 0.371) * (bbox.width + 2 * pad_x) / steps
            y = bbox.ymin - pad_y + (b + 0.293) * (bbox.height + 2 * pad_y) / steps
            yield (x, y)


@pytest.fixture(scope="module")
def square_tree():
    """10x10 square with finely subdivided edges, sliced 3x3."""
    return build(subdivided_square(10, 50))


@pytest.fixture(scope="module")
def star_contour():
    return star(100, 10, 6)


@pytest.fixture(scope="module")
def star_tree(star_contour):
    return build(star_contour)


def hand_built_tree():
    """2x2 branch over (0, 0, 4, 4) with one cell of each kind."""
    triangle = (Point(2, 0), Point(4, 0), Point(2, 2), Point(2, 0))
    leaf = Leaf(contours=(triangle,), bbox=BBox(2, 0, 4, 2))
    full = Full(BBox(2, 2, 4, 4))
    root = Branch(
        bbox=BBox(0, 0, 4, 4),
        x_parts=2,
        y_parts=2,
        x_size=2.0,
        y_size=2.0,
        cells=((Cell.FULL, Cell.EMPTY), (leaf, full)),
    )
    return PolygonTree(root)


class TestContains:
    """Tests for exact point containment."""

    def test_triangle(self):
        """Inside, outside and boundary on a leaf-only tree."""
        tree = build([[0, 0], [2, 0], [0, 2]])
        assert tree.contains((0.5, 0.5)) == 1
        assert tree.contains((1.5, 1.5)) == 0
        assert tree.contains((1, 1)) == -1
        assert tree.contains((0, 0)) == -1
        assert tree.contains((8, 8)) == 0

    def test_accepts_point_objects(self):
        """Point instances work like pairs."""
        tree = build([[0, 0], [2, 0], [0, 2]])
        assert tree.contains(Point(0.5, 0.5)) == 1

    def test_sentinel_cells(self):
        """Sentinel cells answer directly."""
        tree = hand_built_tree()
        assert tree.contains((1, 1)) == 1
        assert tree.contains((1, 3)) == 0
        assert tree.contains((3, 3)) == 1

    def test_leaf_cell(self):
        """Leaf cells ray cast against their contours."""
        tree = hand_built_tree()
        assert tree.contains((2.5, 0.5)) == 1
        assert tree.contains((3.5, 1.5)) == 0
        assert tree.contains((3, 1)) == -1

    def test_outside_root_bbox(self):
        """Points outside the root box are outside without descending."""
        tree = hand_built_tree()
        assert tree.contains((5, 5)) == 0
        assert tree.contains((-0.1, 1)) == 0

    def test_node_bbox_rejects_first(self):
        """A node's own box is checked before its contents."""
        # leaf box covers only part of its cell
        big = (Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(0, 0))
        leaf = Leaf(contours=(big,), bbox=BBox(2, 0, 3, 1))
        root = Branch(
            bbox=BBox(0, 0, 4, 4),
            x_parts=2,
            y_parts=2,
            x_size=2.0,
            y_size=2.0,
            cells=((Cell.EMPTY, Cell.EMPTY), (leaf, Cell.EMPTY)),
        )
        tree = PolygonTree(root)
        assert tree.contains((2.5, 0.5)) == 1
        assert tree.contains((3.5, 0.5)) == 0

    def test_full_node(self):
        """Rectangles answer inside everywhere in their box, edges included."""
        tree = build([[0, 0], [10, 0], [10, 5], [0, 5]])
        assert tree.contains((5, 2.5)) == 1
        assert tree.contains((0, 0)) == 1
        assert tree.contains((10.5, 2)) == 0

    def test_vertex_of_sliced_polygon(self):
        """Original vertices stay on the boundary after slicing."""
        tree = build(regular_polygon(32, 10))
        assert isinstance(tree.root, Branch)
        assert tree.contains((10, 0)) == -1

    def test_interior_full_cell(self, square_tree):
        """Points in the fully covered middle cell are inside."""
        assert square_tree.contains((5, 5)) == 1
        assert square_tree.contains((3.5, 6.5)) == 1

    def test_square_edges(self, square_tree):
        """Seams and outer edges of the sliced square."""
        assert square_tree.contains((10 / 3, 10 / 3)) == 1
        assert square_tree.contains((1, 1)) == 1
        assert square_tree.contains((11, 5)) == 0

    def test_malformed_point(self, square_tree):
        """Malformed points are rejected."""
        with pytest.raises(InvalidArgumentError):
            square_tree.contains((1, 2, 3))
        with pytest.raises(InvalidArgumentError):
            square_tree.contains("1,2")


class TestLeafEquivalence:
    """The tree answers exactly like ray casting against the whole polygon."""

    def test_regular_polygon(self):
        """32-gon over a sample grid."""
        contour = regular_polygon(32, 10)
        tree = build(contour)
        for point in sample_grid(tree.bbox(), 30):
            assert tree.contains(point) == polygon_contains_point(point, contour), point

    def test_star(self, star_tree, star_contour):
        """Deeply sliced star over a sample grid."""
        assert star_tree.depth() >= 1
        for point in sample_grid(star_tree.bbox(), 40):
            assert star_tree.contains(point) == polygon_contains_point(
                point, star_contour
            ), point

    def test_star_with_small_leaves(self, star_contour):
        """Same answers with a small leaf threshold."""
        tree = build(star_contour, leaf_threshold=8)
        for point in sample_grid(tree.bbox(), 25):
            assert tree.contains(point) == polygon_contains_point(point, star_contour), point

    def test_disjoint_contours(self):
        """Each contour of a polygon set counts."""
        left = regular_polygon(24, 3)
        right = [(x + 10, y) for x, y in regular_polygon(24, 3)]
        tree = build(left, right)
        assert tree.contains((0, 0)) == 1
        assert tree.contains((10, 0)) == 1
        assert tree.contains((5, 0)) == 0
        for point in sample_grid(tree.bbox(), 20):
            expected = polygon_contains_point(point, left) or polygon_contains_point(
                point, right
            )
            assert tree.contains(point) == expected, point


class TestBoundaryEquivalence:
    """Points exactly on edges, vertices and cell seams."""

    def test_star_vertices(self, star_tree, star_contour):
        """Every vertex of the sliced star is on the boundary."""
        for vertex in star_contour:
            assert star_tree.contains(vertex) == polygon_contains_point(
                vertex, star_contour
            ), vertex

    def test_square_edges_and_seams(self, square_tree):
        """Outer edges and seam lines of the 3x3 square."""
        contour = subdivided_square(10, 50)
        seams = [10 / 3, 20 / 3]
        coords = [0.0, 1.3, 5.0, 8.9, 10.0, *seams]
        points = []
        for t in coords:
            points += [(t, 0.0), (10.0, t), (t, 10.0), (0.0, t)]
        for s in seams:
            for t in coords:
                points += [(s, t), (t, s)]
        for point in points:
            assert square_tree.contains(point) == polygon_contains_point(point, contour), point

    def test_edge_on_seam(self):
        """An edge lying on a seam stays visible from the cell that owns the seam."""
        rect = subdivided_rect(0, 0, 5, 10, 6)
        triangle = [(9, 9), (10, 9), (10, 10)]
        tree = build(rect, triangle)
        root = tree.root
        assert isinstance(root, Branch)
        assert (root.x_parts, root.y_parts) == (2, 2)
        assert root.x_size == 5.0

        for y in [0.5, 2, 4, 6, 7.5, 9.5]:
            assert polygon_contains_point((5, y), rect) == -1
            assert tree.contains((5, y)) == -1, y
        assert tree.contains_bbox_rough(5, 1, 6, 2) is None
        assert tree.contains_bbox_rough(4, 1, 6, 2) is None


class TestContainsPoints:
    """Tests for multi-point queries."""

    @pytest.fixture
    def tree(self):
        return build([[0, 0], [2, 0], [0, 2]])

    def test_all_inside(self, tree):
        """Agreeing inside points give 1."""
        assert tree.contains_points((0.5, 0.5), (0.2, 0.2)) == 1

    def test_all_outside(self, tree):
        """Agreeing outside points give 0."""
        assert tree.contains_points((5, 5), (6, 6)) == 0

    def test_disagreement(self, tree):
        """Mixed points give None."""
        assert tree.contains_points((0.5, 0.5), (5, 5)) is None

    def test_boundary_counts_as_inside(self, tree):
        """Boundary points agree with inside points."""
        assert tree.contains_points((1, 1), (0.5, 0.5)) == 1
        assert tree.contains_points((0, 0)) == 1

    def test_no_points(self, tree):
        """Nothing to check gives None."""
        assert tree.contains_points() is None

    def test_stops_at_first_disagreement(self, tree):
        """Points after a disagreement are not evaluated."""
        assert tree.contains_points((0.5, 0.5), (5, 5), "not a point") is None

    def test_malformed_point(self, tree):
        """A malformed point before any disagreement raises."""
        with pytest.raises(InvalidArgumentError):
            tree.contains_points((0.5, 0.5), (1, 2, 3))


class TestRoughChecks:
    """Tests for bounding box and polygon rough checks."""

    def test_box_in_full_cell(self, square_tree):
        """A box inside the full middle cell is inside."""
        assert square_tree.contains_bbox_rough(4, 4, 6, 6) == 1

    def test_box_outside(self, square_tree):
        """A box missing the root box is outside."""
        assert square_tree.contains_bbox_rough(20, 20, 30, 30) == 0

    def test_box_covering_root(self, square_tree):
        """A box reaching past the root box is undecided."""
        assert square_tree.contains_bbox_rough(-1, -1, 11, 11) is None

    def test_box_across_seam(self, square_tree):
        """A box spanning several cells is undecided."""
        assert square_tree.contains_bbox_rough(1, 4, 9, 6) is None

    def test_box_argument_forms(self, square_tree):
        """Four numbers, a sequence and a BBox are equivalent."""
        assert square_tree.contains_bbox_rough((4, 4, 6, 6)) == 1
        assert square_tree.contains_bbox_rough([4, 4, 6, 6]) == 1
        assert square_tree.contains_bbox_rough(BBox(4, 4, 6, 6)) == 1

    def test_malformed_box(self, square_tree):
        """Boxes must be four numbers."""
        with pytest.raises(InvalidArgumentError):
            square_tree.contains_bbox_rough(1, 2, 3)
        with pytest.raises(InvalidArgumentError):
            square_tree.contains_bbox_rough((1, 2, 3))

    def test_sentinel_cells(self):
        """Sentinels decide boxes inside a single cell."""
        tree = hand_built_tree()
        assert tree.contains_bbox_rough(0.5, 0.5, 1.5, 1.5) == 1
        assert tree.contains_bbox_rough(0.5, 2.5, 1.5, 3.5) == 0
        assert tree.contains_bbox_rough(2.5, 2.5, 3.5, 3.5) == 1
        assert tree.contains_bbox_rough(2.5, 0.5, 3, 1) is None

    def test_leaf_is_undecided(self):
        """Leaves never decide a box."""
        tree = build([[0, 0], [2, 0], [0, 2]])
        assert tree.contains_bbox_rough(0.1, 0.1, 0.2, 0.2) is None

    def test_full_root(self):
        """A rectangle tree decides boxes strictly inside it."""
        tree = build([[0, 0], [10, 0], [10, 5], [0, 5]])
        assert tree.contains_bbox_rough(1, 1, 2, 2) == 1
        assert tree.contains_bbox_rough(0, 1, 2, 2) is None

    def test_polygon_rough(self, square_tree):
        """Polygons are judged by their bounding box."""
        assert square_tree.contains_polygon_rough([(4, 4), (6, 4), (5, 6)]) == 1
        assert square_tree.contains_polygon_rough([(20, 20), (30, 20), (25, 30)]) == 0
        assert square_tree.contains_polygon_rough([(1, 4), (9, 4), (5, 6)]) is None

    def test_rough_is_sound(self, star_tree, star_contour):
        """Definite rough answers agree with exact checks inside the box."""
        decided = 0
        bbox = star_tree.bbox()
        size = bbox.width / 40
        for cx, cy in sample_grid(bbox, 30):
            box = (cx - size, cy - size, cx + size, cy + size)
            result = star_tree.contains_bbox_rough(box)
            if result is None:
                continue
            decided += 1
            samples = [
                (box[0], box[1]),
                (box[2], box[1]),
                (box[2], box[3]),
                (box[0], box[3]),
                (cx, cy),
            ]
            for point in samples:
                assert abs(polygon_contains_point(point, star_contour)) == result, (box, point)
        assert decided > 0


class TestIntrospection:
    """Tests for tree shape helpers."""

    def test_counts(self):
        """Counts of the hand-built tree."""
        tree = hand_built_tree()
        assert tree.depth() == 1
        assert tree.node_count() == 3
        assert tree.leaf_count() == 1

    def test_repr(self):
        """Repr names the root type and box."""
        tree = build([[0, 0], [2, 0], [0, 2]])
        assert repr(tree) == "PolygonTree(bbox=(0.0, 0.0, 2.0, 2.0), root=Leaf)"
