# examples/demo_pipeline.py
from cg2d.pipeline import triangulate_points

if __name__ == "__main__":
    square = [
        (0, 0), (10, 0), (10, 10), (0, 10),
        (5, 5), (2, 8), (8, 3), (3, 3),
    ]

    res = triangulate_points(square, center=(5, 4), backend="internal")  # або "scipy"
    print("Vertices:", len(res.points))
    print("Hull edges:", len(res.hull))
    print("Triangles:", len(res.triangles))
    print("Flips:", res.flips)
