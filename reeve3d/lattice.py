# reeve3d/lattice.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from math import ceil, floor
from typing import Iterator, List, Tuple

from .geom import Pt, EPS
from .tetra import Location, Tetrahedron, classify_point

logger = logging.getLogger(__name__)

DEFAULT_MARGIN = 1.5  # наскільки розширюємо bbox навколо тетраедра
BACKENDS = ("python", "numpy", "scipy")


@dataclass(frozen=True)
class LatticePoint:
    """
    Точка решітки Z_n з класифікацією.
    coarse: True, якщо всі координати цілі (точка з Z1 всередині дрібнішої решітки).
    """
    point: Pt
    location: Location
    coarse: bool = True


@dataclass(frozen=True)
class LatticeCount:
    interior: int = 0
    boundary: int = 0
    outside: int = 0

    @property
    def closed(self) -> int:
        return self.interior + self.boundary

    @classmethod
    def tally(cls, points: List[LatticePoint]) -> "LatticeCount":
        i = b = o = 0
        for lp in points:
            if lp.location is Location.INTERIOR:
                i += 1
            elif lp.location is Location.BOUNDARY:
                b += 1
            else:
                o += 1
        return cls(i, b, o)


def reeve_tetrahedron(r: float, t: int = 1) -> Tetrahedron:
    """T_r = conv{(0,0,0), (1,0,0), (0,1,0), (1,1,r)}, розтягнутий у t разів."""
    if r <= 0:
        raise ValueError(f"r must be positive, got {r}")
    if t < 1 or int(t) != t:
        raise ValueError(f"t must be a positive integer, got {t}")
    t = float(t)
    return Tetrahedron(
        Pt(0.0, 0.0, 0.0),
        Pt(t, 0.0, 0.0),
        Pt(0.0, t, 0.0),
        Pt(t, t, t * r),
    )


def _index_range(lo: float, hi: float, n: int) -> range:
    return range(floor(lo * n), ceil(hi * n) + 1)


def _grid_ranges(lo: Pt, hi: Pt, n: int) -> Tuple[range, range, range]:
    if n < 1 or int(n) != n:
        raise ValueError(f"lattice denominator must be a positive integer, got {n}")
    n = int(n)
    return _index_range(lo.x, hi.x, n), _index_range(lo.y, hi.y, n), _index_range(lo.z, hi.z, n)


def lattice_points(lo: Pt, hi: Pt, n: int = 1) -> Iterator[Tuple[Pt, bool]]:
    """
    Точки решітки Z_n (координати k/n) у боксі [lo, hi] разом із прапорцем «ціла точка».
    Ітеруємо по цілих k, щоб координати були точними (для n=2 без похибки).
    """
    rx, ry, rz = _grid_ranges(lo, hi, n)
    for kx in rx:
        for ky in ry:
            for kz in rz:
                coarse = kx % n == 0 and ky % n == 0 and kz % n == 0
                yield Pt(kx / n, ky / n, kz / n), coarse


def _sweep_box(tet: Tetrahedron, margin: float) -> Tuple[Pt, Pt]:
    lo, hi = tet.bbox()
    return (Pt(lo.x - margin, lo.y - margin, lo.z - margin),
            Pt(hi.x + margin, hi.y + margin, hi.z + margin))


def sweep(
    tet: Tetrahedron,
    n: int = 1,
    margin: float = DEFAULT_MARGIN,
    backend: str = "python",
    eps: float = EPS,
) -> List[LatticePoint]:
    """
    Класифікує всі точки Z_n у розширеному bbox тетраедра.

    backend:
      python: скалярний класифікатор для кожної точки;
      numpy:  векторизовані півпростори, скалярний тест лише для точок біля граней;
      scipy:  префільтр через Qhull (Delaunay.find_simplex), далі скалярний тест.
    Результати всіх бекендів збігаються з python.
    """
    lo, hi = _sweep_box(tet, margin)
    backend = backend.lower()
    if backend == "python":
        a, b, c, d = tet.vertices()
        out = [LatticePoint(p, classify_point(p, a, b, c, d, eps), coarse)
               for p, coarse in lattice_points(lo, hi, n)]
    elif backend == "numpy":
        out = _sweep_numpy(tet, lo, hi, n, eps)
    elif backend == "scipy":
        out = _sweep_scipy(tet, lo, hi, n, eps)
    else:
        raise ValueError(f"Невідомий backend: {backend}, очікується один із {BACKENDS}")

    if logger.isEnabledFor(logging.DEBUG):
        cnt = LatticeCount.tally(out)
        logger.debug("sweep Z%d [%s]: %d points, I=%d B=%d",
                     n, backend, len(out), cnt.interior, cnt.boundary)
    return out


def count_lattice(
    tet: Tetrahedron,
    n: int = 1,
    margin: float = DEFAULT_MARGIN,
    backend: str = "python",
    eps: float = EPS,
) -> LatticeCount:
    return LatticeCount.tally(sweep(tet, n, margin, backend, eps))


def _grid_array(lo: Pt, hi: Pt, n: int):
    import numpy as np

    rx, ry, rz = _grid_ranges(lo, hi, n)
    n = int(n)
    kx, ky, kz = np.meshgrid(
        np.arange(rx.start, rx.stop),
        np.arange(ry.start, ry.stop),
        np.arange(rz.start, rz.stop),
        indexing="ij",
    )
    K = np.stack([kx.ravel(), ky.ravel(), kz.ravel()], axis=1)
    coarse = np.all(K % n == 0, axis=1)
    return K / n, coarse


def _finish(tet, P, coarse, decided, eps) -> List[LatticePoint]:
    """Невирішені точки (decided[i] is None) доводимо скалярним класифікатором."""
    a, b, c, d = tet.vertices()
    out: List[LatticePoint] = []
    undecided = 0
    for row, is_coarse, loc in zip(P.tolist(), coarse.tolist(), decided):
        p = Pt(*row)
        if loc is None:
            undecided += 1
            loc = classify_point(p, a, b, c, d, eps)
        out.append(LatticePoint(p, loc, is_coarse))
    logger.debug("scalar fallback for %d of %d points", undecided, len(out))
    return out


def _sweep_numpy(tet: Tetrahedron, lo: Pt, hi: Pt, n: int, eps: float) -> List[LatticePoint]:
    try:
        import numpy as np
    except ImportError as e:
        raise RuntimeError(
            "backend='numpy', але NumPy не встановлено. "
            "Встанови numpy або використай backend='python'."
        ) from e

    P, coarse = _grid_array(lo, hi, n)
    faces = tet.faces(eps)
    N = np.array([tuple(f.normal) for f in faces], dtype=float)   # (4, 3)
    O = np.array([tuple(f.origin) for f in faces], dtype=float)   # (4, 3)
    D = np.stack([(P - O[k]) @ N[k] for k in range(4)], axis=1)   # (m, 4)

    # подвійний допуск: рішення тут збігаються зі скалярним тестом,
    # усе, що ближче до граней, іде в класифікатор
    out_mask = np.any(D < -2 * eps, axis=1)
    in_mask = np.all(D > 2 * eps, axis=1)
    decided = [
        Location.OUTSIDE if o else Location.INTERIOR if i else None
        for o, i in zip(out_mask.tolist(), in_mask.tolist())
    ]
    return _finish(tet, P, coarse, decided, eps)


def _sweep_scipy(tet: Tetrahedron, lo: Pt, hi: Pt, n: int, eps: float) -> List[LatticePoint]:
    try:
        import numpy as np
        from scipy.spatial import Delaunay
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy', але SciPy не встановлено. "
            "Встанови scipy або використай інший backend."
        ) from e

    if tet.is_degenerate(eps):
        # Qhull не будує симплекс із копланарних точок
        logger.warning("degenerate tetrahedron, falling back to python backend")
        a, b, c, d = tet.vertices()
        return [LatticePoint(p, classify_point(p, a, b, c, d, eps), coarse)
                for p, coarse in lattice_points(lo, hi, n)]

    P, coarse = _grid_array(lo, hi, n)
    verts = np.array([tuple(p) for p in tet.vertices()], dtype=float)
    simplex = Delaunay(verts).find_simplex(P, tol=eps)
    decided = [None if s >= 0 else Location.OUTSIDE for s in simplex.tolist()]
    return _finish(tet, P, coarse, decided, eps)
