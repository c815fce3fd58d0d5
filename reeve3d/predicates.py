# reeve3d/predicates.py
from __future__ import annotations
from dataclasses import dataclass
from math import isfinite
from .geom import Pt, sub, cross, dot, norm, neg, scale, dist2, EPS, ORIGIN

def orient3d(a: Pt, b: Pt, c: Pt, d: Pt) -> float:
    ab = sub(b, a)
    ac = sub(c, a)
    ad = sub(d, a)
    return dot(cross(ab, ac), ad)

def plane_normal(a: Pt, b: Pt, c: Pt) -> Pt:
    """Одинична нормаль площини (a,b,c); для колінеарної трійки нульовий вектор."""
    n = cross(sub(b, a), sub(c, a))
    length = norm(n)
    if length == 0.0:
        return ORIGIN
    return scale(n, 1.0 / length)

def orient_inward(normal: Pt, origin: Pt, inner: Pt, eps: float = EPS) -> Pt:
    """
    Повертає нормаль, що дивиться в бік внутрішньої точки `inner`.
    Вхідний вектор не змінюється, за потреби створюється новий, протилежний.
    """
    if dot(normal, sub(inner, origin)) < -eps:
        return neg(normal)
    return normal

def signed_distance(p: Pt, normal: Pt, origin: Pt) -> float:
    return dot(normal, sub(p, origin))

def point_on_segment(p: Pt, a: Pt, b: Pt, eps: float = EPS) -> bool:
    ab = sub(b, a)
    ap = sub(p, a)
    c = cross(ab, ap)
    if dot(c, c) > eps:
        return False  # не колінеарні
    t = dot(ab, ap)
    return -eps <= t <= dot(ab, ab) + eps

@dataclass(frozen=True)
class TriangleHit:
    inside: bool
    on_edge: bool

MISS = TriangleHit(False, False)

def point_in_triangle(p: Pt, a: Pt, b: Pt, c: Pt, eps: float = EPS) -> TriangleHit:
    """
    Барицентричний тест «точка в трикутнику (a,b,c)» для точки, що вже лежить
    у його площині. Вироджений трикутник (нульова площа) завжди дає MISS.
    """
    v0 = sub(c, a)
    v1 = sub(b, a)
    v2 = sub(p, a)

    dot00 = dot(v0, v0)
    dot01 = dot(v0, v1)
    dot02 = dot(v0, v2)
    dot11 = dot(v1, v1)
    dot12 = dot(v1, v2)

    denom = dot00 * dot11 - dot01 * dot01
    if denom == 0.0 or not isfinite(denom):
        return MISS
    inv = 1.0 / denom
    if not isfinite(inv):
        return MISS

    u = (dot11 * dot02 - dot01 * dot12) * inv
    v = (dot00 * dot12 - dot01 * dot02) * inv

    inside = u >= -eps and v >= -eps and u + v <= 1 + eps
    on_edge = inside and (abs(u) < eps or abs(v) < eps or abs(u + v - 1) < eps)
    return TriangleHit(inside, on_edge)

def point_at_vertex(p: Pt, v: Pt, eps: float = EPS) -> bool:
    return dist2(p, v) < eps * eps
