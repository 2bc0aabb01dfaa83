from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .geom import Edge, Pt, PointLike, as_points
from .hull import ConvexHull2D
from .predicates import distance, on_line

log = logging.getLogger(__name__)


@dataclass
class PeelResult:
    """
    Результат пошарового «лущення» оболонок.
    edges     — усі ребра всіх шарів разом;
    remaining — скільки точок лишилось (< 3) після останнього шару;
    layers    — ребра кожного шару окремо.
    Розпаковується як (edges, remaining).
    """
    edges: List[Edge] = field(default_factory=list)
    remaining: int = 0
    layers: List[List[Edge]] = field(default_factory=list)

    def __iter__(self):
        yield self.edges; yield self.remaining


def peel(points: Iterable[PointLike]) -> PeelResult:
    """
    Поки лишилось >= 3 точок: оболонка поточного набору, видалення всіх точок,
    що лежать точно на прямій будь-якого ребра оболонки, і повтор.
    """
    pts: List[Pt] = as_points(points)
    res = PeelResult()
    while len(pts) > 2:
        hull = ConvexHull2D(pts)
        layer = hull.edges()
        if not layer:
            # усі точки на одній вертикалі: оболонки немає, прибираємо їх разом
            log.debug("peel: %d vertical collinear points dropped", len(pts))
            pts = []
            break
        # hull.edges_list, а не layer: для колінеарного набору обидва напрями дають ту саму пряму
        pts = [p for p in pts
               if not any(on_line(e.p1, e.p2, p) for e in hull.edges_list)]
        res.layers.append(layer)
        res.edges.extend(layer)
        log.debug("peel: layer %d with %d edges, %d points left", len(res.layers), len(layer), len(pts))
    res.remaining = len(pts)
    return res


def gather_cluster(points: List[Pt], target: int) -> List[Pt]:
    """
    Кластер навколо першої точки: радіус росте на 1 за раунд, у кожному раунді
    додаються (в порядку набору) точки на відстані рівно radius, поки не набереться target.
    Зупиняємось, коли radius перевищує найбільшу відстань до зерна.
    """
    if not points:
        return []
    seed = points[0]
    cluster = [seed]
    reach = max(distance(seed, p) for p in points)
    radius = 1
    while len(cluster) < target and radius <= reach:
        for p in points:
            if len(cluster) >= target:
                break
            if distance(seed, p) == radius:
                cluster.append(p)
        radius += 1
    if len(cluster) < target:
        log.warning("cluster around %s: only %d of %d points available", seed, len(cluster), target)
    else:
        log.debug("cluster around %s: %d points within radius %d", seed, len(cluster), radius - 1)
    return cluster


def cluster_peel(points: Iterable[PointLike], cluster_count: int) -> List[Edge]:
    """
    Ділить набір на cluster_count кластерів по len(points) // cluster_count точок
    (пошук найближчих сусідів нарощуванням радіуса) і лущить кожен окремо.
    Точки, що не потрапили в жоден кластер, не обробляються.
    """
    if cluster_count < 1:
        raise ValueError("cluster_count must be >= 1")
    pts: List[Pt] = as_points(points)
    target = len(pts) // cluster_count
    edges: List[Edge] = []
    for i in range(cluster_count):
        if not pts:
            break
        cluster = gather_cluster(pts, target)
        edges.extend(peel(cluster).edges)
        members = set(cluster)
        pts = [p for p in pts if p not in members]
        log.debug("cluster %d/%d: %d points, %d left", i + 1, cluster_count, len(cluster), len(pts))
    return edges
