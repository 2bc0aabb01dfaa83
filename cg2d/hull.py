from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple

from .geom import Edge, Pt, PointLike, as_points
from .predicates import orientation

log = logging.getLogger(__name__)


class ConvexHull2D:
    """
    QuickHull на цілих координатах.

    Вхід: список точок (Pt або пари (x, y)); менше 3 точок — порожня оболонка, без помилки.
    Вихід: self.edges_list — ребра межі в порядку обходу рекурсії
    (split(min, max), потім split(max, min)).

    Колінеарні точки всередині ребра не стають вершинами оболонки,
    ребра колінеарних ланцюжків не зливаються.
    """

    def __init__(self, points: Iterable[PointLike]):
        self.P: List[Pt] = as_points(points)
        self.edges_list: List[Edge] = []
        self.seeds: Optional[Tuple[Pt, Pt]] = None

        if len(self.P) < 3:
            return

        lo, hi = self._extreme_points()
        self.seeds = (lo, hi)
        if lo == hi:
            # усі точки на одній вертикалі — мінімум і максимум x збігаються
            log.debug("hull: all %d points share x=%d, no edges", len(self.P), lo.x)
            return

        log.debug("hull: %d points, seeds %s -> %s", len(self.P), lo, hi)
        self._split(lo, hi)
        self._split(hi, lo)

    # ---------------- Публічний API ----------------
    def edges(self) -> List[Edge]:
        """Ребра оболонки без повторів (порядок першої появи)."""
        out: List[Edge] = []
        seen = set()
        for e in self.edges_list:
            if e not in seen:
                seen.add(e)
                out.append(e)
        return out

    def vertices(self) -> List[Pt]:
        """Різні кінці ребер у порядку появи."""
        out: dict[Pt, None] = {}
        for e in self.edges_list:
            out.setdefault(e.p1, None)
            out.setdefault(e.p2, None)
        return list(out)

    def is_vertex(self, p: Pt) -> bool:
        return any(p == e.p1 or p == e.p2 for e in self.edges_list)

    def contains(self, p: Pt) -> bool:
        """
        p всередині оболонки або на її межі (точно).
        Для кожного ребра (p1, p2) точки оболонки мають orientation <= 0.
        """
        if not self.edges_list:
            return False
        verts = self.vertices()
        if len(verts) < 3:
            a, b = verts[0], verts[-1]
            if orientation(a, b, p) != 0:
                return False
            return (min(a.x, b.x) <= p.x <= max(a.x, b.x)
                    and min(a.y, b.y) <= p.y <= max(a.y, b.y))
        return all(orientation(e.p1, e.p2, p) <= 0 for e in self.edges_list)

    # ---------------- Внутрішні методи ----------------
    def _extreme_points(self) -> Tuple[Pt, Pt]:
        """Точки з мінімальним і максимальним x; при рівності — перша знайдена."""
        lo = hi = self.P[0]
        for p in self.P[1:]:
            if p.x < lo.x:
                lo = p
            if p.x > hi.x:
                hi = p
        return lo, hi

    def _farthest(self, p1: Pt, p2: Pt) -> Optional[Pt]:
        """Точка з найбільшою строго додатною orientation щодо p1p2 (перша при рівності)."""
        best: Optional[Pt] = None
        best_d = 0
        for p in self.P:
            if p == p1 or p == p2:
                continue
            d = orientation(p1, p2, p)
            if d > best_d:
                best_d = d
                best = p
        return best

    def _split(self, p1: Pt, p2: Pt) -> None:
        """
        Рекурсія QuickHull через явний стек задач (p1, p2).
        Праву половину кладемо першою, тож порядок ребер як у рекурсивній версії.
        """
        stack = [(p1, p2)]
        while stack:
            a, b = stack.pop()
            pmax = self._farthest(a, b)
            if pmax is None:
                self.edges_list.append(Edge(a, b))
                continue
            stack.append((pmax, b))
            stack.append((a, pmax))

    # ---------------- Діагностика ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - жодна точка не лежить строго зовні оболонки;
          - кожна вершина має рівно два інцидентні ребра (замкнений контур).
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        edges = self.edges()
        outside = [p for p in self.P if edges and not self.contains(p)]

        degree: dict[Pt, int] = {}
        for e in edges:
            degree[e.p1] = degree.get(e.p1, 0) + 1
            degree[e.p2] = degree.get(e.p2, 0) + 1
        # відрізок (колінеарний набір) — окремий випадок: кінці мають степінь 1
        open_vs = [] if len(degree) < 3 else [p for p, k in degree.items() if k != 2]

        return {
            "edges": len(edges),
            "vertices": len(degree),
            "outside_points": outside,
            "open_vertices": open_vs,
        }


def build_convex_hull(points: Iterable[PointLike]) -> List[Edge]:
    """Ребра опуклої оболонки; менше 3 точок -> []."""
    return ConvexHull2D(points).edges()
