# reeve3d/tetra.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .geom import Pt, EPS, add, centroid, norm, scale, sub
from .predicates import (
    orient3d, plane_normal, orient_inward, signed_distance,
    point_in_triangle, point_on_segment, point_at_vertex,
)


class Location(str, Enum):
    INTERIOR = "Interior"
    BOUNDARY = "Boundary"
    OUTSIDE = "Outside"


@dataclass(frozen=True)
class Face:
    """
    Грань тетраедра.
    v: три вершини трикутника (у порядку ABC, ABD, ACD, BCD).
    normal: одинична нормаль опорної площини.
    origin: точка на площині, від якої міряється відстань.
    """
    v: Tuple[Pt, Pt, Pt]
    normal: Pt
    origin: Pt


def build_faces(a: Pt, b: Pt, c: Pt, d: Pt, eps: float = EPS) -> List[Face]:
    """Чотири грані з нормалями, зорієнтованими всередину (до центроїда)."""
    O = centroid((a, b, c, d))
    faces = []
    for tri, origin in (((a, b, c), a), ((a, b, d), a), ((a, c, d), a), ((b, c, d), b)):
        n = orient_inward(plane_normal(*tri), origin, O, eps)
        faces.append(Face(tri, n, origin))
    return faces


def classify_point(p: Pt, a: Pt, b: Pt, c: Pt, d: Pt, eps: float = EPS) -> Location:
    """
    Де лежить точка p відносно тетраедра (a,b,c,d): всередині, на межі чи зовні.

    Для копланарних вершин результат не визначений, але функція не падає.
    """
    faces = build_faces(a, b, c, d, eps)

    touched: List[Face] = []
    for face in faces:
        dist = signed_distance(p, face.normal, face.origin)
        if dist < -eps:
            return Location.OUTSIDE
        if abs(dist) < eps:
            touched.append(face)

    if not touched:
        return Location.INTERIOR

    # точка в площині грані: чи вона в самому трикутнику
    for face in touched:
        if point_in_triangle(p, *face.v, eps=eps).inside:
            return Location.BOUNDARY

    # запасний ланцюжок для похибок біля ребер/вершин: спершу ребра, потім вершини
    for u, v in ((a, b), (a, c), (b, c), (a, d), (b, d), (c, d)):
        if point_on_segment(p, u, v, eps):
            return Location.BOUNDARY
    for v in (a, b, c, d):
        if point_at_vertex(p, v, eps):
            return Location.BOUNDARY

    return Location.OUTSIDE


@dataclass(frozen=True)
class Tetrahedron:
    a: Pt
    b: Pt
    c: Pt
    d: Pt

    @classmethod
    def from_tuples(cls, *vs) -> "Tetrahedron":
        if len(vs) != 4:
            raise ValueError("Need exactly 4 vertices")
        return cls(*(Pt(float(x), float(y), float(z)) for x, y, z in vs))

    def vertices(self) -> Tuple[Pt, Pt, Pt, Pt]:
        return (self.a, self.b, self.c, self.d)

    def faces(self, eps: float = EPS) -> List[Face]:
        return build_faces(self.a, self.b, self.c, self.d, eps)

    def edges(self) -> List[Tuple[Pt, Pt]]:
        a, b, c, d = self.vertices()
        return [(a, b), (a, c), (b, c), (a, d), (b, d), (c, d)]

    def centroid(self) -> Pt:
        return centroid(self.vertices())

    def volume(self) -> float:
        return abs(orient3d(*self.vertices())) / 6.0

    def is_degenerate(self, eps: float = EPS) -> bool:
        """|orient3d| порівнюємо з кубом найдовшого ребра, тож результат не залежить від масштабу."""
        longest = max(norm(sub(v, u)) for u, v in self.edges())
        return abs(orient3d(*self.vertices())) <= eps * longest**3

    def bbox(self) -> Tuple[Pt, Pt]:
        vs = self.vertices()
        lo = Pt(min(p.x for p in vs), min(p.y for p in vs), min(p.z for p in vs))
        hi = Pt(max(p.x for p in vs), max(p.y for p in vs), max(p.z for p in vs))
        return lo, hi

    def translated(self, v: Pt) -> "Tetrahedron":
        return Tetrahedron(*(add(p, v) for p in self.vertices()))

    def scaled(self, k: float) -> "Tetrahedron":
        return Tetrahedron(*(scale(p, k) for p in self.vertices()))

    def classify(self, p: Pt, eps: float = EPS) -> Location:
        return classify_point(p, self.a, self.b, self.c, self.d, eps)

    def to_off(self) -> str:
        """Експорт чотирьох граней у формат OFF."""
        lines = ["OFF", "4 4 0"]
        for p in self.vertices():
            lines.append(f"{p.x} {p.y} {p.z}")
        for a, b, c in ((0, 1, 2), (0, 1, 3), (0, 2, 3), (1, 2, 3)):
            lines.append(f"3 {a} {b} {c}")
        return "\n".join(lines)
