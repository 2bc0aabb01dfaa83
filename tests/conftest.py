import numpy as np
import pytest

from cg2d import Pt, orientation, unique_points


def doubled_area(edges):
    """Подвоєна площа многокутника, заданого ребрами в порядку обходу."""
    return abs(sum(e.p1.x * e.p2.y - e.p2.x * e.p1.y for e in edges))


def tri_doubled_area(t):
    return abs(orientation(t.p1, t.p2, t.p3))


@pytest.fixture
def square_points():
    return [Pt(0, 0), Pt(10, 0), Pt(10, 10), Pt(0, 10), Pt(5, 5)]


@pytest.fixture
def random_points():
    # явні крайні точки по x, щоб зерна QuickHull були вершинами оболонки
    rng = np.random.default_rng(7)
    raw = rng.integers(1, 200, size=(80, 2))
    return unique_points([(0, 100), (201, 100)] + [tuple(row) for row in raw])
