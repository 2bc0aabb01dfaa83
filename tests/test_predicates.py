import numpy as np
import pytest

from cg2d import Edge, Pt, Tri, distance, is_degenerate, orientation, point_in_triangle
from cg2d.geom import as_point, bounding_box
from cg2d.predicates import opposite_sides, same_sign


def test_orientation_sign_and_zero():
    a, b = Pt(0, 0), Pt(10, 0)
    assert orientation(a, b, Pt(5, 5)) == 50
    assert orientation(a, b, Pt(5, -5)) == -50
    assert orientation(a, b, Pt(5, 0)) == 0
    assert orientation(a, b, Pt(-7, 0)) == 0


def test_orientation_is_exact_for_huge_coordinates():
    big = 10**12
    assert orientation(Pt(0, 0), Pt(big, big), Pt(big + 1, big + 1)) == 0
    assert orientation(Pt(0, 0), Pt(big, 0), Pt(0, 1)) == big


def test_distance_truncates():
    assert distance(Pt(0, 0), Pt(3, 4)) == 5
    assert distance(Pt(0, 0), Pt(1, 1)) == 1
    assert distance(Pt(0, 0), Pt(10, 10)) == 14
    assert distance(Pt(4, 4), Pt(4, 4)) == 0


def test_sign_helpers():
    assert same_sign(0, -3) and same_sign(0, 3) and same_sign(2, 5)
    assert not same_sign(-1, 1)
    assert opposite_sides(-1, 1)
    assert not opposite_sides(0, 1)
    assert not opposite_sides(0, 0)


def test_point_in_triangle_counts_boundary_as_inside():
    t = Tri(Pt(0, 0), Pt(10, 0), Pt(0, 10))
    assert point_in_triangle(Pt(1, 1), t)
    assert point_in_triangle(Pt(5, 5), t)       # на гіпотенузі
    assert point_in_triangle(Pt(0, 0), t)       # вершина
    assert not point_in_triangle(Pt(6, 6), t)
    assert not point_in_triangle(Pt(-1, 2), t)


def test_point_on_edge_extension_is_outside():
    t = Tri(Pt(0, 0), Pt(10, 0), Pt(0, 10))
    assert not point_in_triangle(Pt(20, 0), t)


def test_orientation_of_triangle_ignores_vertex_order():
    t1 = Tri(Pt(0, 0), Pt(10, 0), Pt(0, 10))
    t2 = Tri(Pt(0, 10), Pt(10, 0), Pt(0, 0))
    assert point_in_triangle(Pt(2, 3), t1) and point_in_triangle(Pt(2, 3), t2)


def test_degenerate_triangles():
    assert is_degenerate(Tri(Pt(0, 0), Pt(5, 0), Pt(10, 0)))
    assert is_degenerate(Tri(Pt(0, 0), Pt(0, 0), Pt(1, 1)))
    assert not is_degenerate(Tri(Pt(0, 0), Pt(5, 1), Pt(10, 0)))


def test_edges_and_triangles_are_unordered_values():
    a, b, c = Pt(0, 0), Pt(1, 0), Pt(0, 1)
    assert Edge(a, b) == Edge(b, a)
    assert hash(Edge(a, b)) == hash(Edge(b, a))
    assert Tri(a, b, c) == Tri(c, a, b)
    assert len({Tri(a, b, c), Tri(b, c, a)}) == 1
    assert Pt(1, 0) == b and Pt(1, 0) is not b


def test_as_point_coercion():
    assert as_point((3, 4)) == Pt(3, 4)
    assert as_point(np.array([3, 4])) == Pt(3, 4)
    assert type(as_point(np.array([3, 4])).x) is int
    with pytest.raises(TypeError):
        as_point((1.5, 2))
    with pytest.raises(ValueError):
        as_point((1, 2, 3))


def test_bounding_box():
    assert bounding_box([Pt(3, 4), Pt(-1, 9), Pt(5, 0)]) == (-1, 0, 5, 9)
    with pytest.raises(ValueError):
        bounding_box([])
