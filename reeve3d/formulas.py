"""
Замкнені формули, з якими звіряються підрахунки точок решітки:
  - формула Ріва для n=2 (об'єм через точки Z1 і Z2);
  - поліном Ерхарта для тетраедра Ріва T_r.
"""
from __future__ import annotations
import logging

from .lattice import LatticeCount, count_lattice, reeve_tetrahedron

logger = logging.getLogger(__name__)


def reeve_volume(z1: LatticeCount, z2: LatticeCount) -> float:
    """
    12V = 2*I2 + B2 - 2*(2*I1 + B1).
    z2: підрахунок по всій решітці Z2 (цілі точки теж входять).
    """
    twelve_v = 2 * z2.interior + z2.boundary - 2 * (2 * z1.interior + z1.boundary)
    return twelve_v / 12.0


def ehrhart_reeve(r, t):
    """
    L(T_r, t) = r/6 t^3 + t^2 + (2 - r/6) t + 1.
    Для цілих r, t рахуємо точно: r*(t^3 - t) ділиться на 6.
    """
    if isinstance(r, int) and isinstance(t, int):
        return (r * (t**3 - t)) // 6 + t * t + 2 * t + 1
    value = (r / 6) * t**3 + t**2 + (2 - r / 6) * t + 1
    return round(value)


def reeve_report(r, t: int = 1, backend: str = "python") -> dict:
    """
    Діагностика для T_r:
      - z1 / z2: підрахунки I, B для решіток Z1 і Z2;
      - reeve_volume vs volume (= r/6);
      - ehrhart vs lattice_count для розтягу t*T_r.
    """
    tet = reeve_tetrahedron(r)
    z1 = count_lattice(tet, 1, backend=backend)
    z2 = count_lattice(tet, 2, backend=backend)
    volume = tet.volume()
    rv = reeve_volume(z1, z2)

    dilated = reeve_tetrahedron(r, t)
    counted = count_lattice(dilated, 1, backend=backend).closed
    predicted = ehrhart_reeve(r, t)

    report = {
        "r": r,
        "t": t,
        "z1": {"interior": z1.interior, "boundary": z1.boundary},
        "z2": {"interior": z2.interior, "boundary": z2.boundary},
        "reeve_volume": rv,
        "volume": volume,
        "volume_match": abs(rv - volume) < 1e-9,
        "ehrhart": predicted,
        "lattice_count": counted,
        "ehrhart_match": counted == predicted,
    }
    if not (report["volume_match"] and report["ehrhart_match"]):
        logger.warning("formula mismatch for r=%s t=%s: %s", r, t, report)
    return report
