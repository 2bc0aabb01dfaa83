from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from .geom import Edge, Pt, PointLike, Tri, as_point, as_points, bounding_box, in_box
from .hull import ConvexHull2D
from .predicates import distance, is_degenerate, point_in_triangle

log = logging.getLogger(__name__)

SPLIT_RULES = ("centroid", "every")


class Triangulator:
    """
    Тріангуляція опуклої оболонки трисекцією.

    1) QuickHull -> ребра межі;
    2) якір: найближча до center точка, що не є кінцем ребра оболонки
       (якщо такої немає — перший кінець першого ребра, без перевірки колінеарності);
    3) віяло трикутників (e.p1, e.p2, якір) для кожного ребра;
    4) trisect: трикутник, що містить точку набору, ділиться на три по цій точці.

    split_rule:
      "centroid" — одна точка на трикутник, найближча до його центроїда
                   (трикутники не перекриваються);
      "every"    — трисекція для КОЖНОЇ знайденої точки,
                   покриття може перекриватися, кількість росте комбінаторно.
    Вироджені (колінеарні) трикутники ніколи не потрапляють у результат.
    """

    def __init__(self, points: Iterable[PointLike], center: PointLike, split_rule: str = "centroid"):
        if split_rule not in SPLIT_RULES:
            raise ValueError(f"Невідоме правило поділу: {split_rule!r}")
        self.P: List[Pt] = as_points(points)
        self.center: Pt = as_point(center)
        self.split_rule = split_rule

        self.hull_edges: List[Edge] = []
        self.anchor: Optional[Pt] = None
        self.fell_back = False
        self.tris: List[Tri] = []

    # ---------------- Публічний API ----------------
    def run(self) -> List[Tri]:
        self.tris = []
        if len(self.P) < 3:
            return self.tris

        hull = ConvexHull2D(self.P)
        self.hull_edges = hull.edges_list[:]
        if not self.hull_edges:
            # вертикальний колінеарний набір — нема площі
            return self.tris

        self.anchor = self._pick_anchor(hull)
        for e in self.hull_edges:
            self._trisect(Tri(e.p1, e.p2, self.anchor))

        log.debug("triangulate: %d points -> %d triangles (anchor %s, rule %s)",
                  len(self.P), len(self.tris), self.anchor, self.split_rule)
        return self.tris

    # ---------------- Внутрішні методи ----------------
    def _pick_anchor(self, hull: ConvexHull2D) -> Pt:
        best: Optional[Pt] = None
        best_d = 0
        for p in self.P:
            if hull.is_vertex(p):
                continue
            d = distance(p, self.center)
            if best is None or d < best_d:
                best = p
                best_d = d
        if best is None:
            best = self.hull_edges[0].p1
            self.fell_back = True
            log.warning("triangulate: no interior point, anchoring at hull vertex %s", best)
        return best

    def _interior_points(self, t: Tri) -> List[Pt]:
        """Точки набору (не вершини t) в bbox t, що лежать у t або на його межі."""
        box = bounding_box(t.vertices())
        return [p for p in self.P
                if p not in t and in_box(p, box) and point_in_triangle(p, t)]

    @staticmethod
    def _nearest_to_centroid(t: Tri, candidates: List[Pt]) -> Pt:
        # центроїд * 3, щоб лишитися в цілих
        sx = t.p1.x + t.p2.x + t.p3.x
        sy = t.p1.y + t.p2.y + t.p3.y
        best = candidates[0]
        best_d = (3*best.x - sx)**2 + (3*best.y - sy)**2
        for p in candidates[1:]:
            d = (3*p.x - sx)**2 + (3*p.y - sy)**2
            if d < best_d:
                best, best_d = p, d
        return best

    def _trisect(self, t: Tri) -> None:
        """
        Рекурсивна трисекція через явний стек; порядок виводу як у рекурсії в глибину.
        """
        stack = [t]
        while stack:
            cur = stack.pop()
            if is_degenerate(cur):
                continue
            found = self._interior_points(cur)
            if not found:
                self.tris.append(cur)
                continue
            if self.split_rule == "centroid":
                found = [self._nearest_to_centroid(cur, found)]
            # стек LIFO: кладемо у зворотному порядку
            subs: List[Tri] = []
            for p in found:
                subs.append(Tri(cur.p1, cur.p2, p))
                subs.append(Tri(cur.p2, cur.p3, p))
                subs.append(Tri(cur.p3, cur.p1, p))
            stack.extend(reversed(subs))


def triangulate(points: Iterable[PointLike], center: PointLike, split_rule: str = "centroid") -> List[Tri]:
    """Трикутники, що покривають оболонку; вхідний список не змінюється."""
    return Triangulator(points, center, split_rule).run()
