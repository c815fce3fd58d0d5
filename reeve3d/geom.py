from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from typing import Iterable

EPS = 1e-9  # єдиний допуск; координати зазвичай цілі або напівцілі

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    z: float
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

ORIGIN = Pt(0.0, 0.0, 0.0)

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y, a.z - b.z)

def add(a: Pt, b: Pt) -> Pt:
    return Pt(a.x + b.x, a.y + b.y, a.z + b.z)

def scale(a: Pt, k: float) -> Pt:
    return Pt(a.x*k, a.y*k, a.z*k)

def neg(a: Pt) -> Pt:
    return Pt(-a.x, -a.y, -a.z)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y + a.z*b.z

def cross(a: Pt, b: Pt) -> Pt:
    return Pt(a.y*b.z - a.z*b.y,
              a.z*b.x - a.x*b.z,
              a.x*b.y - a.y*b.x)

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def dist2(a: Pt, b: Pt) -> float:
    d = sub(a, b)
    return dot(d, d)

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = zs = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; zs += p.z; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv, zs*inv)
