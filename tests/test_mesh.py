import pytest

from cg2d import ConvexHull2D, Pt, Tri, TriMesh, clean_mesh, distance, is_degenerate, shared_edge, triangulate
from cg2d.mesh import try_flip

from conftest import doubled_area, tri_doubled_area


def kite():
    # довга спільна діагональ (0,5)-(20,5), коротка альтернатива (10,0)-(10,10)
    t1 = Tri(Pt(0, 5), Pt(20, 5), Pt(10, 10))
    t2 = Tri(Pt(0, 5), Pt(20, 5), Pt(10, 0))
    return t1, t2


def test_shared_edge_detection():
    t1, t2 = kite()
    assert shared_edge(t1, t2) == (Pt(0, 5), Pt(20, 5), Pt(10, 10), Pt(10, 0))
    assert shared_edge(t1, Tri(Pt(0, 5), Pt(-3, 0), Pt(-3, 9))) is None


def test_self_pair_is_a_noop():
    t1, _ = kite()
    assert shared_edge(t1, t1) is None
    assert shared_edge(t1, Tri(t1.p3, t1.p1, t1.p2)) is None
    assert clean_mesh([t1]) == ([t1], 0)
    assert clean_mesh([t1, t1])[1] == 0


def test_shorter_diagonal_is_flipped():
    t1, t2 = kite()
    tris, flips = clean_mesh([t1, t2])
    assert flips == 1
    assert tris == [
        Tri(Pt(0, 5), Pt(10, 10), Pt(10, 0)),
        Tri(Pt(20, 5), Pt(10, 10), Pt(10, 0)),
    ]


def test_longer_diagonal_is_kept():
    t1 = Tri(Pt(10, 0), Pt(10, 10), Pt(0, 5))
    t2 = Tri(Pt(10, 0), Pt(10, 10), Pt(20, 5))
    assert try_flip(t1, t2) is None
    assert clean_mesh([t1, t2]) == ([t1, t2], 0)


def test_equal_diagonals_are_kept():
    t1 = Tri(Pt(0, 0), Pt(10, 10), Pt(0, 10))
    t2 = Tri(Pt(0, 0), Pt(10, 10), Pt(10, 0))
    assert clean_mesh([t1, t2])[1] == 0


def test_non_convex_quad_is_not_flipped():
    # новa діагональ коротша, але чотирикутник увігнутий біля (10,0)
    t1 = Tri(Pt(0, 0), Pt(10, 0), Pt(12, 3))
    t2 = Tri(Pt(0, 0), Pt(10, 0), Pt(12, -1))
    assert distance(Pt(12, 3), Pt(12, -1)) < distance(Pt(0, 0), Pt(10, 0))
    assert try_flip(t1, t2) is None


def test_collinear_alternative_is_not_flipped(square_points):
    tris = triangulate(square_points, (5, 4))
    cleaned, flips = clean_mesh(tris)
    assert flips == 0
    assert cleaned == tris


def test_flip_count_accumulates_on_mesh():
    mesh = TriMesh(kite())
    assert mesh.clean() == 1
    assert mesh.clean() == 0
    assert mesh.flips == 1


def test_flips_only_shorten_and_keep_area(random_points):
    hull = ConvexHull2D(random_points)
    tris = triangulate(random_points, (100, 100))
    before = sum(distance(e.p1, e.p2) for e in TriMesh(tris).edges())
    cleaned, flips = clean_mesh(tris)
    after = sum(distance(e.p1, e.p2) for e in TriMesh(cleaned).edges())
    assert len(cleaned) == len(tris)
    assert not any(is_degenerate(t) for t in cleaned)
    assert sum(tri_doubled_area(t) for t in cleaned) == doubled_area(hull.edges())
    if flips:
        assert after < before
    else:
        assert after == before


def test_passes_until_stable(random_points):
    tris = triangulate(random_points, (100, 100))
    cleaned, _ = clean_mesh(tris, passes=None)
    assert clean_mesh(cleaned)[1] == 0
    report = TriMesh(cleaned).validate()
    assert report["degenerate"] == []
    assert report["duplicates"] == []
    assert report["over_shared_edges"] == []


def test_single_pass_is_the_default(random_points):
    tris = triangulate(random_points, (100, 100))
    one = clean_mesh(tris)
    also_one = clean_mesh(tris, passes=1)
    assert one == also_one


def test_invalid_passes():
    with pytest.raises(ValueError):
        clean_mesh(list(kite()), passes=0)


def test_edges_are_unique():
    t1, t2 = kite()
    edges = TriMesh([t1, t2]).edges()
    assert len(edges) == 5
