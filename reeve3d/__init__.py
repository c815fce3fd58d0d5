"""
reeve3d: класифікація точок відносно тетраедра (Interior / Boundary / Outside)
і підрахунок точок решітки для тетраедрів Ріва (формула Ріва, поліном Ерхарта).
"""

__version__ = "0.1.0"

from reeve3d.geom import Pt, EPS, centroid
from reeve3d.predicates import (
    orient3d, plane_normal, orient_inward, signed_distance,
    point_on_segment, point_in_triangle, point_at_vertex, TriangleHit,
)
from reeve3d.tetra import Location, Face, Tetrahedron, classify_point
from reeve3d.lattice import (
    LatticeCount, LatticePoint, reeve_tetrahedron, lattice_points, sweep, count_lattice,
)
from reeve3d.formulas import reeve_volume, ehrhart_reeve, reeve_report
from reeve3d.logging_config import setup_logging

__all__ = [
    "Pt", "EPS", "centroid",
    "orient3d", "plane_normal", "orient_inward", "signed_distance",
    "point_on_segment", "point_in_triangle", "point_at_vertex", "TriangleHit",
    "Location", "Face", "Tetrahedron", "classify_point",
    "LatticeCount", "LatticePoint", "reeve_tetrahedron", "lattice_points",
    "sweep", "count_lattice",
    "reeve_volume", "ehrhart_reeve", "reeve_report",
    "setup_logging", "__version__",
]
