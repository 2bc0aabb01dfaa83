# cg2d/mesh.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .geom import Edge, Pt, Tri
from .predicates import distance, is_degenerate, opposite_sides, orientation

log = logging.getLogger(__name__)

# (a, b, apex1, apex2): спільне ребро a-b, apex1 — третя вершина t1, apex2 — третя вершина t2
SharedEdge = Tuple[Pt, Pt, Pt, Pt]


def shared_edge(t1: Tri, t2: Tri) -> Optional[SharedEdge]:
    """
    Спільне ребро двох трикутників, якщо вони мають РІВНО дві спільні вершини.
    Порівняння трикутника з самим собою (або з дублікатом) дає три спільні вершини -> None.
    """
    shared = [v for v in t1.vertices() if v in t2]
    if len(shared) != 2:
        return None
    a, b = shared
    apex1 = next(v for v in t1.vertices() if v not in shared)
    apex2 = next(v for v in t2.vertices() if v != a and v != b)
    return a, b, apex1, apex2


def try_flip(t1: Tri, t2: Tri) -> Optional[Tuple[Tri, Tri]]:
    """
    Заміна діагоналі чотирикутника t1 ∪ t2 на іншу, якщо:
      - кінці старої діагоналі лежать строго по різні боки нової (чотирикутник опуклий);
      - нова діагональ строго коротша за стару.
    Повертає нову пару (a, apex1, apex2), (b, apex1, apex2) або None.
    """
    se = shared_edge(t1, t2)
    if se is None:
        return None
    a, b, apex1, apex2 = se
    if not opposite_sides(orientation(apex1, apex2, a), orientation(apex1, apex2, b)):
        return None
    if not distance(apex1, apex2) < distance(a, b):
        return None
    return Tri(a, apex1, apex2), Tri(b, apex1, apex2)


class TriMesh:
    """
    Плоска трикутна сітка як простий список Tri (без топології сусідств).
      - tris: поточні трикутники;
      - flips: скільки замін діагоналей виконано за весь час життя сітки.
    """
    def __init__(self, triangles: Iterable[Tri]):
        self.tris: List[Tri] = list(triangles)
        self.flips = 0

    # ---------- прибирання ----------
    def clean_pass(self) -> int:
        """
        Один повний прохід по всіх впорядкованих парах (i, j), включно з i == j.
        Пара читається з поточного списку, тож t1 після заміни бере участь далі вже новим.
        """
        flips = 0
        n = len(self.tris)
        for i in range(n):
            for j in range(n):
                res = try_flip(self.tris[i], self.tris[j])
                if res is None:
                    continue
                old = (self.tris[i], self.tris[j])
                self.tris[i], self.tris[j] = res
                flips += 1
                log.debug("flip %s | %s -> %s | %s", old[0], old[1], res[0], res[1])
        self.flips += flips
        return flips

    def clean(self, passes: Optional[int] = 1) -> int:
        """
        passes=1    — рівно один прохід;
        passes=k    — не більше k проходів (зупинка, якщо прохід нічого не змінив);
        passes=None — до стабілізації. Сума довжин діагоналей строго спадає, тож цикл скінченний.
        """
        if passes is not None and passes < 1:
            raise ValueError("passes must be >= 1 or None")
        total = 0
        done = 0
        while passes is None or done < passes:
            k = self.clean_pass()
            total += k
            done += 1
            if k == 0:
                break
        log.debug("clean: %d flips over %d pass(es), %d triangles", total, done, len(self.tris))
        return total

    # ---------- корисні операції ----------
    def edges(self) -> List[Edge]:
        """Усі різні ребра сітки в порядку першої появи."""
        out: Dict[Edge, None] = {}
        for t in self.tris:
            for e in t.edges():
                out.setdefault(e, None)
        return list(out)

    def edge_use(self) -> Dict[Edge, int]:
        count: Dict[Edge, int] = {}
        for t in self.tris:
            for e in t.edges():
                count[e] = count.get(e, 0) + 1
        return count

    # ---------- валідація сітки ----------
    def validate(self) -> dict:
        """
        Швидка перевірка:
          - вироджені трикутники (колінеарні або з повтором вершин);
          - дублікати трикутників;
          - ребра, що належать більш ніж двом трикутникам (перекриття).
        """
        degenerate = [t for t in self.tris if is_degenerate(t)]
        seen: Dict[Tri, int] = {}
        for t in self.tris:
            seen[t] = seen.get(t, 0) + 1
        duplicates = [t for t, k in seen.items() if k > 1]
        over_shared = [e for e, k in self.edge_use().items() if k > 2]
        return {
            "triangles": len(self.tris),
            "degenerate": degenerate,
            "duplicates": duplicates,
            "over_shared_edges": over_shared,
        }


def clean_mesh(triangles: Iterable[Tri], passes: Optional[int] = 1) -> Tuple[List[Tri], int]:
    """Прибирання сітки; повертає (трикутники, кількість замін)."""
    mesh = TriMesh(triangles)
    flips = mesh.clean(passes)
    return mesh.tris, flips
