from cg2d.geom import unique_points
from cg2d.hull import ConvexHull2D

if __name__ == "__main__":
    raw = [
        (0, 0), (10, 0), (10, 10), (0, 10),
        (5, 5), (2, 8), (8, 3), (5, 0), (5, 5),
    ]
    pts = unique_points(raw)
    hull = ConvexHull2D(pts)

    for e in hull.edges():
        print(f"{tuple(e.p1)} -> {tuple(e.p2)}")
    print("VALIDATION:", hull.validate())
