# examples/main.py
from __future__ import annotations

import logging
import random

from cg2d.session import Session


def generate_random_points(n: int, w: int, h: int, margin: int = 10):
    """
    n різних випадкових точок у вікні w x h (з відступом від країв).
    Вибірка без повторень, тож дедуплікація не потрібна.
    """
    xs = range(1, w - margin + 1)
    ys = range(1, h - margin + 1)
    n = min(n, len(xs) * len(ys))
    cells = random.sample(range(len(xs) * len(ys)), n)
    return [(xs[c // len(ys)], ys[c % len(ys)]) for c in cells]


def generate_lattice(n: int, step: int = 5, offset: int = 0):
    """Решітка n x n з кроком step."""
    return [(offset + i * step, offset + j * step) for i in range(n) for j in range(n)]


def parse_points_from_text(text: str):
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y (цілі).
    """
    points = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті строки і коментарі
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Рядок {lineno}: очікується 2 числа, отримано: {len(parts)}")
        try:
            x, y = map(int, parts)
        except ValueError:
            raise ValueError(f"Рядок {lineno}: не вдалось прочитати числа '{line}'")
        points.append((x, y))
    return points


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    # --- 1) Вікно 1000 x 800, випадкові точки ---
    session = Session(1000, 800)
    session.set_points(generate_random_points(100, session.width, session.height))
    report = session.triangulation()
    print("Triangles cleaned up:", report.flips)
    print("Number of points:", report.points)
    print("Number of triangles created:", report.triangles)

    # --- 2) Решітка ---
    session.set_points(generate_lattice(10))
    report = session.triangulation()
    print("Lattice:", report)

    # --- 3) Ручне введення + пошарове лущення ---
    text = """
    # x y
    100 100
    300 100
    300 300
    100 300
    200 180
    180 220
    220 220
    """
    for p in parse_points_from_text(text):
        session.add_point(p)
    edges = session.hull_peel()
    print(f"Peel completed with {session.last_report.points} points and {len(edges)} edges.")

    # --- 4) Кластери ---
    session.set_points(generate_random_points(100, session.width, session.height))
    session.cluster_count = 5
    edges = session.cluster_peel()
    print(f"Cluster peel: {len(edges)} edges.")


if __name__ == "__main__":
    main()
