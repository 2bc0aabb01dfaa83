from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .geom import Edge, Pt, PointLike, Tri, as_point, as_points
from .hull import build_convex_hull
from .mesh import TriMesh
from .peel import cluster_peel, peel
from .triangulation import Triangulator

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Report:
    """Підсумок однієї операції для зовнішнього коду (консоль, статус-бар)."""
    points: int
    triangles: int = 0
    flips: int = 0
    edges: int = 0


@dataclass
class Session:
    """
    Стан одного вікна: розмір області, поточні точки та похідні результати.
    Передається явно; модуль не тримає глобального стану.

    Похідні edges/tris перебудовуються з нуля кожною операцією.
    """
    width: int
    height: int
    points: List[Pt] = field(default_factory=list)
    cluster_count: int = 5
    split_rule: str = "centroid"
    edges: List[Edge] = field(default_factory=list)
    tris: List[Tri] = field(default_factory=list)
    last_report: Optional[Report] = None

    def __post_init__(self):
        self.points = as_points(self.points)

    @property
    def center(self) -> Pt:
        return Pt(self.width // 2, self.height // 2)

    # ---------- точки ----------
    def set_points(self, points: Iterable[PointLike]) -> None:
        self.points = as_points(points)
        self._clear_derived()

    def add_point(self, p: PointLike) -> bool:
        """Ручне додавання точки; дублікат ігнорується (False)."""
        p = as_point(p)
        if p in self.points:
            return False
        self.points.append(p)
        self._clear_derived()
        return True

    def _clear_derived(self) -> None:
        self.edges = []
        self.tris = []

    # ---------- операції ----------
    def convex_hull(self) -> List[Edge]:
        self.edges = build_convex_hull(self.points)
        self._report(Report(points=len(self.points), edges=len(self.edges)))
        return self.edges

    def triangulation(self) -> Report:
        """
        Оболонка -> тріангуляція -> очищення точок і ребер -> прибирання сітки.
        Менше 3 точок — нічого не змінюється.
        """
        n = len(self.points)
        if n < 3:
            return self._report(Report(points=n))

        tr = Triangulator(self.points, self.center, self.split_rule)
        tris = tr.run()
        # трикутники вже пораховані — тепер можна звільнити вхід
        self.points = []
        self.edges = []

        mesh = TriMesh(tris)
        flips = mesh.clean()
        self.tris = mesh.tris
        return self._report(Report(points=n, triangles=len(self.tris), flips=flips))

    def cleanup(self) -> int:
        """Ще один прохід прибирання по поточних трикутниках."""
        mesh = TriMesh(self.tris)
        flips = mesh.clean()
        self.tris = mesh.tris
        self._report(Report(points=len(self.points), triangles=len(self.tris), flips=flips))
        return flips

    def hull_peel(self) -> List[Edge]:
        n = len(self.points)
        res = peel(self.points)
        self.edges = res.edges
        self.points = []
        self._report(Report(points=n, edges=len(self.edges)))
        return self.edges

    def cluster_peel(self) -> List[Edge]:
        n = len(self.points)
        self.edges = cluster_peel(self.points, self.cluster_count)
        self.points = []
        self._report(Report(points=n, edges=len(self.edges)))
        return self.edges

    def _report(self, report: Report) -> Report:
        self.last_report = report
        log.info("points=%d triangles=%d flips=%d edges=%d",
                 report.points, report.triangles, report.flips, report.edges)
        return report
