# examples/plot.py
from __future__ import annotations

import matplotlib
matplotlib.use("Agg")
from matplotlib.figure import Figure

from cg2d.session import Session

from main import generate_random_points


def draw(session: Session, path: str) -> None:
    """
    Малює точки, ребра і трикутники поточного стану сесії у файл.
    """
    fig = Figure(figsize=(session.width / 100, session.height / 100))
    ax = fig.add_subplot(111)

    if session.points:
        ax.scatter([p.x for p in session.points], [p.y for p in session.points], s=4, color="black")

    for e in session.edges:
        ax.plot([e.p1.x, e.p2.x], [e.p1.y, e.p2.y], linewidth=0.8)

    for t in session.tris:
        xs = [t.p1.x, t.p2.x, t.p3.x, t.p1.x]
        ys = [t.p1.y, t.p2.y, t.p3.y, t.p1.y]
        ax.plot(xs, ys, linewidth=0.5, color="tab:blue")

    ax.set_xlim(0, session.width)
    ax.set_ylim(0, session.height)
    ax.set_aspect("equal")
    ax.set_title(str(session.last_report) if session.last_report else "")
    fig.savefig(path, dpi=100)


if __name__ == "__main__":
    s = Session(1000, 800)
    s.set_points(generate_random_points(200, s.width, s.height))
    s.triangulation()
    draw(s, "triangulation.png")

    s.set_points(generate_random_points(200, s.width, s.height))
    s.hull_peel()
    draw(s, "peel.png")
    print("Wrote triangulation.png, peel.png")
