# examples/gui.py
from __future__ import annotations

import tkinter as tk
from tkinter import ttk, messagebox

import logging

from reeve3d.formulas import ehrhart_reeve, reeve_volume
from reeve3d.lattice import LatticeCount, count_lattice, reeve_tetrahedron, sweep
from reeve3d.logging_config import setup_logging
from reeve3d.tetra import Location

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'

BACKEND = "numpy"

COLORS = {
    # (ціла точка, місце) -> колір
    (True, Location.BOUNDARY): "red",
    (True, Location.INTERIOR): "blue",
    (False, Location.BOUNDARY): "#20b2aa",
    (False, Location.INTERIOR): "#20b2aa",
}


class ReeveApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Reeve tetrahedra")
        self.geometry("820x720")

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()
        self.refresh()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Параметри ---
        params = ttk.LabelFrame(main, text="Параметри")
        params.pack(fill="x", pady=5)

        self.r_var = tk.IntVar(value=1)
        self.t_var = tk.IntVar(value=1)

        ttk.Label(params, text="Висота r:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        tk.Scale(params, from_=1, to=20, orient="horizontal", variable=self.r_var,
                 command=lambda _: self.refresh()).grid(row=0, column=1, sticky="we", padx=5)

        ttk.Label(params, text="Розтяг t:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        tk.Scale(params, from_=1, to=5, orient="horizontal", variable=self.t_var,
                 command=lambda _: self.refresh()).grid(row=1, column=1, sticky="we", padx=5)
        params.columnconfigure(1, weight=1)

        # --- Решітка ---
        self.lattice_n = tk.IntVar(value=1)
        lattice_frame = ttk.LabelFrame(main, text="Решітка")
        lattice_frame.pack(fill="x", pady=5)
        for col, (text, n) in enumerate((("Z1 (цілі точки)", 1), ("Z2 (напівцілі точки)", 2))):
            ttk.Radiobutton(
                lattice_frame, text=text, variable=self.lattice_n, value=n,
                command=self.refresh,
            ).grid(row=0, column=col, sticky="w", padx=5, pady=2)

        self.show_outside = tk.BooleanVar(value=False)
        ttk.Checkbutton(
            lattice_frame, text="Показувати зовнішні точки",
            variable=self.show_outside, command=self.refresh,
        ).grid(row=0, column=2, sticky="w", padx=5, pady=2)

        # --- Результати ---
        result_frame = ttk.LabelFrame(main, text="Результати")
        result_frame.pack(fill="x", pady=5)

        self.counts_var = tk.StringVar(value="—")
        self.reeve_var = tk.StringVar(value="—")
        self.ehrhart_var = tk.StringVar(value="—")

        ttk.Label(result_frame, text="Точки (I / B):").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.counts_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Формула Ріва:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.reeve_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(result_frame, text="Поліном Ерхарта:").grid(row=2, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.ehrhart_var).grid(row=2, column=1, sticky="w", padx=5, pady=2)

        # --- Фрейм для 3D-графіка ---
        plot_frame = ttk.LabelFrame(main, text="3D візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111, projection="3d")
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    def update_plot(self, tet, points):
        """
        Перемалювати тетраедр (ребра) і класифіковані точки решітки.
        """
        self.ax.clear()

        for pa, pb in tet.edges():
            self.ax.plot([pa.x, pb.x], [pa.y, pb.y], [pa.z, pb.z], color="black", linewidth=1.0)

        show_outside = self.show_outside.get()
        groups = {}
        for lp in points:
            if lp.location is Location.OUTSIDE:
                if not show_outside:
                    continue
                color = "lightgray"
            else:
                color = COLORS[(lp.coarse, lp.location)]
            groups.setdefault(color, []).append(lp.point)

        for color, pts in groups.items():
            size = 4 if color == "lightgray" else 20
            self.ax.scatter([p.x for p in pts], [p.y for p in pts], [p.z for p in pts],
                            color=color, s=size, depthshade=False)

        # однакові масштаби
        lo, hi = tet.bbox()
        max_range = max(hi.x - lo.x, hi.y - lo.y, hi.z - lo.z) or 1.0
        mx, my, mz = 0.5 * (lo.x + hi.x), 0.5 * (lo.y + hi.y), 0.5 * (lo.z + hi.z)
        self.ax.set_xlim(mx - max_range / 2, mx + max_range / 2)
        self.ax.set_ylim(my - max_range / 2, my + max_range / 2)
        self.ax.set_zlim(mz - max_range / 2, mz + max_range / 2)

        self.ax.set_xlabel("X")
        self.ax.set_ylabel("Y")
        self.ax.set_zlabel("Z")
        self.ax.set_title(f"T_{self.r_var.get()} (t={self.t_var.get()})")

        self.canvas.draw()

    def refresh(self):
        r = self.r_var.get()
        t = self.t_var.get()
        n = self.lattice_n.get()

        try:
            tet = reeve_tetrahedron(r, t)
            points = sweep(tet, n, backend=BACKEND)
            shown = LatticeCount.tally(points)

            base = reeve_tetrahedron(r)
            z1 = count_lattice(base, 1, backend=BACKEND)
            z2 = count_lattice(base, 2, backend=BACKEND)
            counted = shown.closed if n == 1 else count_lattice(tet, 1, backend=BACKEND).closed
        except (ValueError, RuntimeError) as e:
            messagebox.showerror("Помилка виконання", str(e))
            return

        self.update_plot(tet, points)

        self.counts_var.set(f"{shown.interior} / {shown.boundary}")
        self.reeve_var.set(f"V = {reeve_volume(z1, z2):.4f}  (r/6 = {base.volume():.4f})")
        predicted = ehrhart_reeve(r, t)
        match = "Так" if predicted == counted else "Ні"
        self.ehrhart_var.set(f"L(T_{r}, {t}) = {predicted}, пораховано {counted}: {match}")


if __name__ == "__main__":
    setup_logging(logging.INFO)
    app = ReeveApp()
    app.mainloop()
