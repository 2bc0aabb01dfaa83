from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .geom import Edge, Pt, PointLike, Tri, as_point, unique_points
from .hull import build_convex_hull
from .mesh import clean_mesh
from .predicates import is_degenerate
from .triangulation import triangulate


@dataclass
class PipelineResult:
    points: List[Pt]
    hull: List[Edge]
    triangles: List[Tri]
    flips: int


def _load_scipy():
    try:
        import numpy as np
        from scipy import spatial
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy', але SciPy не встановлено. "
            "Встанови scipy або використай backend='internal'."
        ) from e
    return np, spatial


def triangulate_points(
    points: Iterable[PointLike],
    center: PointLike,
    backend: str = "internal",
    split_rule: str = "centroid",
    passes: Optional[int] = 1,
) -> PipelineResult:
    """
    Повний пайплайн:
      - прибирає дублікати точок;
      - будує опуклу оболонку (QuickHull);
      - тріангулює: "internal" — якір + трисекція, "scipy" — Delaunay з SciPy (еталон для порівнянь);
      - прибирає сітку заміною діагоналей.
    """
    pts: List[Pt] = unique_points(points)
    hull = build_convex_hull(pts)

    name = backend.lower()
    if name == "internal":
        tris = triangulate(pts, as_point(center), split_rule)
    elif name == "scipy":
        tris = _scipy_triangles(pts)
    else:
        raise ValueError(f"Невідомий backend: {backend}")

    tris, flips = clean_mesh(tris, passes)
    return PipelineResult(points=pts, hull=hull, triangles=tris, flips=flips)


def _scipy_triangles(pts: List[Pt]) -> List[Tri]:
    if len(pts) < 3:
        return []
    np, spatial = _load_scipy()
    arr = np.array([(p.x, p.y) for p in pts], dtype=float)
    try:
        dela = spatial.Delaunay(arr)
    except spatial.QhullError:  # колінеарний набір
        return []
    out: List[Tri] = []
    for a, b, c in dela.simplices:
        t = Tri(pts[int(a)], pts[int(b)], pts[int(c)])
        if not is_degenerate(t):
            out.append(t)
    return out


def reference_hull(points: Iterable[PointLike]) -> List[Pt]:
    """Вершини оболонки від scipy.spatial.ConvexHull (для перехресної перевірки)."""
    pts = unique_points(points)
    if len(pts) < 3:
        return []
    np, spatial = _load_scipy()
    arr = np.array([(p.x, p.y) for p in pts], dtype=float)
    hull = spatial.ConvexHull(arr)
    return [pts[int(i)] for i in hull.vertices]
