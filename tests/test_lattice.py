import pytest

from reeve3d.geom import Pt
from reeve3d.lattice import (
    LatticeCount, LatticePoint, count_lattice, lattice_points, reeve_tetrahedron, sweep,
)
from reeve3d.tetra import Location


class TestLatticePoints:

    def test_integer_grid(self):
        pts = list(lattice_points(Pt(0, 0, 0), Pt(1, 1, 1), 1))
        assert len(pts) == 8
        assert all(coarse for _, coarse in pts)

    def test_half_integer_grid(self):
        pts = list(lattice_points(Pt(0, 0, 0), Pt(1, 1, 1), 2))
        assert len(pts) == 27
        assert sum(1 for _, coarse in pts if coarse) == 8
        assert (Pt(0.5, 0.5, 0.5), False) in pts

    def test_fractional_bounds_are_widened(self):
        pts = list(lattice_points(Pt(-1.5, 0, 0), Pt(0, 0, 0), 1))
        assert [p.x for p, _ in pts] == [-2.0, -1.0, 0.0]

    @pytest.mark.parametrize("n", [0, -1, 1.5])
    def test_bad_denominator(self, n):
        with pytest.raises(ValueError):
            list(lattice_points(Pt(0, 0, 0), Pt(1, 1, 1), n))


class TestReeveTetrahedron:

    def test_vertices(self):
        tet = reeve_tetrahedron(2, 3)
        assert tet.vertices() == (Pt(0, 0, 0), Pt(3, 0, 0), Pt(0, 3, 0), Pt(3, 3, 6))

    @pytest.mark.parametrize("r,t", [(0, 1), (-2, 1), (1, 0), (1, 1.5)])
    def test_bad_parameters(self, r, t):
        with pytest.raises(ValueError):
            reeve_tetrahedron(r, t)


class TestSweep:

    def test_z1_counts(self, reeve):
        cnt = count_lattice(reeve, 1)
        assert (cnt.interior, cnt.boundary) == (0, 4)

    def test_z2_counts(self, reeve):
        r = int(reeve.d.z)
        cnt = count_lattice(reeve, 2)
        assert cnt.interior == r - 1
        assert cnt.boundary == 10

    def test_sweep_covers_margin(self):
        tet = reeve_tetrahedron(1)
        pts = sweep(tet, 1, margin=1.5)
        xs = sorted({lp.point.x for lp in pts})
        assert xs == [-2.0, -1.0, 0.0, 1.0, 2.0, 3.0]
        assert len(pts) == 6 * 6 * 6

    def test_coarse_flags(self):
        pts = sweep(reeve_tetrahedron(1), 2)
        for lp in pts:
            assert lp.coarse == all(float(c).is_integer() for c in lp.point)

    @pytest.mark.parametrize("n", [1, 2])
    def test_numpy_matches_python(self, reeve, n):
        pytest.importorskip("numpy")
        assert sweep(reeve, n, backend="numpy") == sweep(reeve, n, backend="python")

    @pytest.mark.parametrize("n", [1, 2])
    def test_scipy_matches_python(self, reeve, n):
        pytest.importorskip("scipy")
        assert sweep(reeve, n, backend="scipy") == sweep(reeve, n, backend="python")

    def test_backend_name_is_case_insensitive(self):
        pytest.importorskip("numpy")
        tet = reeve_tetrahedron(2)
        assert count_lattice(tet, 1, backend="NumPy") == count_lattice(tet, 1)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="python"):
            sweep(reeve_tetrahedron(1), backend="cuda")


class TestLatticeCount:

    def test_tally_and_closed(self):
        pts = [
            LatticePoint(Pt(0, 0, 0), Location.BOUNDARY),
            LatticePoint(Pt(0.5, 0.5, 1), Location.INTERIOR, coarse=False),
            LatticePoint(Pt(5, 5, 5), Location.OUTSIDE),
            LatticePoint(Pt(1, 0, 0), Location.BOUNDARY),
        ]
        cnt = LatticeCount.tally(pts)
        assert cnt == LatticeCount(interior=1, boundary=2, outside=1)
        assert cnt.closed == 3

    def test_empty(self):
        assert LatticeCount.tally([]).closed == 0
