# examples/main.py
from __future__ import annotations

import logging

from reeve3d.formulas import reeve_report
from reeve3d.lattice import reeve_tetrahedron
from reeve3d.logging_config import setup_logging


def print_row(report: dict) -> None:
    z1, z2 = report["z1"], report["z2"]
    ok = "OK" if report["volume_match"] and report["ehrhart_match"] else "MISMATCH"
    print(
        f"r={report['r']:>3}  "
        f"I1={z1['interior']:<3} B1={z1['boundary']:<3} "
        f"I2={z2['interior']:<3} B2={z2['boundary']:<3} "
        f"V(Reeve)={report['reeve_volume']:.4f} V={report['volume']:.4f}  "
        f"L(T_r,{report['t']})={report['ehrhart']:<5} counted={report['lattice_count']:<5} {ok}"
    )


def main():
    setup_logging(logging.INFO)

    # --- 1) Параметри ---
    r_max = 10
    t = 3
    backend = "numpy"  # або "python" / "scipy"

    # --- 2) Таблиця для r = 1..r_max ---
    for r in range(1, r_max + 1):
        print_row(reeve_report(r, t, backend=backend))

    # --- 3) Експорт T_r у OFF ---
    tet = reeve_tetrahedron(r_max)
    with open("reeve.off", "w", encoding="utf-8") as f:
        f.write(tet.to_off())
    print(f"Wrote reeve.off (T_{r_max}); можна глянути в MeshLab/ParaView.")


if __name__ == "__main__":
    main()
