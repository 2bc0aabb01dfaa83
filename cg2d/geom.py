from __future__ import annotations
from dataclasses import dataclass, field
from numbers import Integral
from typing import Iterable, List, Tuple, Union

@dataclass(frozen=True)
class Pt:
    x: int
    y: int
    def __iter__(self):
        yield self.x; yield self.y

PointLike = Union[Pt, Tuple[int, int]]


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Неорієнтоване ребро: Edge(a, b) == Edge(b, a).
    p1, p2 зберігають порядок побудови (для виводу), але не впливають на рівність.
    """
    p1: Pt
    p2: Pt

    def key(self) -> frozenset:
        return frozenset((self.p1, self.p2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def __iter__(self):
        yield self.p1; yield self.p2


@dataclass(frozen=True, eq=False)
class Tri:
    """
    Трикутник як невпорядкована трійка вершин.
    Рівність і хеш — за множиною вершин; p1, p2, p3 лишаються в порядку побудови.
    """
    p1: Pt
    p2: Pt
    p3: Pt
    _key: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_key", frozenset((self.p1, self.p2, self.p3)))

    def vertices(self) -> Tuple[Pt, Pt, Pt]:
        return (self.p1, self.p2, self.p3)

    def edges(self) -> Tuple[Edge, Edge, Edge]:
        return (Edge(self.p1, self.p2), Edge(self.p2, self.p3), Edge(self.p3, self.p1))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tri):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __contains__(self, p: object) -> bool:
        return p in self._key

    def __iter__(self):
        yield self.p1; yield self.p2; yield self.p3


def as_point(p: PointLike) -> Pt:
    """Pt або пара (x, y) цілих -> Pt. Нецілі координати — TypeError."""
    if isinstance(p, Pt):
        return p
    try:
        x, y = p
    except (TypeError, ValueError) as e:
        raise ValueError(f"Очікується пара (x, y), отримано: {p!r}") from e
    if not isinstance(x, Integral) or not isinstance(y, Integral):
        raise TypeError(f"Координати мають бути цілими: {p!r}")
    return Pt(int(x), int(y))

def as_points(points: Iterable[PointLike]) -> List[Pt]:
    return [as_point(p) for p in points]

def unique_points(points: Iterable[PointLike]) -> list[Pt]:
    """
    Дедуплікація зі збереженням порядку першої появи.
    Координати цілі, тож порівнюємо точно, без квантування.
    """
    seen: dict[Pt, None] = {}
    for p in points:
        seen.setdefault(as_point(p), None)
    return list(seen)

def bounding_box(points: Iterable[Pt]) -> Tuple[int, int, int, int]:
    """(xmin, ymin, xmax, ymax) для непорожнього набору точок."""
    it = iter(points)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("empty set") from None
    xmin = xmax = first.x
    ymin = ymax = first.y
    for p in it:
        if p.x < xmin: xmin = p.x
        elif p.x > xmax: xmax = p.x
        if p.y < ymin: ymin = p.y
        elif p.y > ymax: ymax = p.y
    return xmin, ymin, xmax, ymax

def in_box(p: Pt, box: Tuple[int, int, int, int]) -> bool:
    xmin, ymin, xmax, ymax = box
    return xmin <= p.x <= xmax and ymin <= p.y <= ymax
