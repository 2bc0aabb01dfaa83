"""
cg2d — маленька бібліотека плоскої обчислювальної геометрії на цілих координатах.
Зараз: QuickHull, тріангуляція трисекцією, прибирання сітки заміною діагоналей,
пошарове «лущення» оболонок (також по кластерах).
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, Edge, Tri, unique_points, bounding_box
from cg2d.predicates import orientation, distance, point_in_triangle, is_degenerate
from cg2d.hull import ConvexHull2D, build_convex_hull
from cg2d.triangulation import Triangulator, triangulate
from cg2d.mesh import TriMesh, clean_mesh, shared_edge
from cg2d.peel import PeelResult, peel, cluster_peel, gather_cluster
from cg2d.session import Session, Report

__all__ = [
    "Pt", "Edge", "Tri", "unique_points", "bounding_box",
    "orientation", "distance", "point_in_triangle", "is_degenerate",
    "ConvexHull2D", "build_convex_hull",
    "Triangulator", "triangulate",
    "TriMesh", "clean_mesh", "shared_edge",
    "PeelResult", "peel", "cluster_peel", "gather_cluster",
    "Session", "Report", "__version__",
]
