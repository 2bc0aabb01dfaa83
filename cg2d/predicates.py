# cg2d/predicates.py
from __future__ import annotations
from math import isqrt

from .geom import Pt, Tri

def orientation(p1: Pt, p2: Pt, p3: Pt) -> int:
    """
    Масштабована знакова відстань p3 від прямої p1p2:
      (p1.y-p2.y)*p3.x + (p2.x-p1.x)*p3.y + (p1.x*p2.y - p1.y*p2.x).
    >0 та <0 — протилежні півплощини, 0 — точка на прямій.
    Цілі Python не переповнюються, тож результат точний для будь-яких координат.
    """
    a = p1.y - p2.y
    b = p2.x - p1.x
    c = p1.x * p2.y - p1.y * p2.x
    return a * p3.x + b * p3.y + c

def on_line(p1: Pt, p2: Pt, p: Pt) -> bool:
    return orientation(p1, p2, p) == 0

def distance(p1: Pt, p2: Pt) -> int:
    """Евклідова відстань, обрізана до цілого (floor від кореня)."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return isqrt(dx*dx + dy*dy)

def same_sign(a: int, b: int) -> bool:
    # нуль «погоджується» з будь-яким знаком
    return (a >= 0 and b >= 0) or (a <= 0 and b <= 0)

def opposite_sides(a: int, b: int) -> bool:
    """Строго протилежні знаки (жоден не нуль)."""
    return (a > 0 and b < 0) or (a < 0 and b > 0)

def point_in_triangle(p: Pt, t: Tri) -> bool:
    """
    p всередині t або на його межі.
    Орієнтації p щодо (p1,p2), (p2,p3), (p3,p1) не мають строгої розбіжності знаків.
    """
    d1 = orientation(t.p1, t.p2, p)
    d2 = orientation(t.p2, t.p3, p)
    if opposite_sides(d1, d2):
        return False
    d3 = orientation(t.p3, t.p1, p)
    if opposite_sides(d1, d3) or opposite_sides(d2, d3):
        return False
    return True

def is_degenerate(t: Tri) -> bool:
    """Вершини не попарно різні або колінеарні."""
    if len({t.p1, t.p2, t.p3}) != 3:
        return True
    return orientation(t.p1, t.p2, t.p3) == 0
