"""Tests for revsurflib.surfaces package (interface, tessellator, SurfaceMesh)."""

import numpy as np
import numpy.testing as npt
import pytest


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def unit_sphere_curve():
    from revsurflib.curves import NumericalCurve
    from revsurflib.profiles import solve_profile
    profile = solve_profile('spindle', 1.0, steps=200)
    return NumericalCurve(profile.points)


@pytest.fixture
def revolved_sphere(unit_sphere_curve):
    from revsurflib.surfaces import SurfaceOfRevolution
    return SurfaceOfRevolution(unit_sphere_curve)


@pytest.fixture
def plane():
    from revsurflib.surfaces import FunctionSurface
    return FunctionSurface(lambda u, v: (u, v, 0.0), (0.0, 2.0, 0.0, 1.0))


def grid_params(domain, U, V):
    """Parameter values in the order the tessellator visits them."""
    return [
        (domain.u_min + (domain.u_max - domain.u_min) * (j / U),
         domain.v_min + (domain.v_max - domain.v_min) * (i / V))
        for i in range(V + 1) for j in range(U + 1)
    ]


# ---------------------------------------------------------------------------
# Parametric surface interface
# ---------------------------------------------------------------------------

class TestInterface:
    def test_domain_helpers(self):
        from revsurflib.surfaces import Domain
        d = Domain(0.0, 1.0, -1.0, 1.0)
        assert d.is_finite()
        assert not Domain(0.0, np.inf, 0.0, 1.0).is_finite()
        assert d.replace_bounds(u_max=0.5) == Domain(0.0, 0.5, -1.0, 1.0)

    def test_function_surface_flags(self, plane):
        from revsurflib.surfaces import FunctionSurface
        assert not plane.has_analytic_normal
        with pytest.raises(NotImplementedError):
            plane.normal(0.0, 0.0)
        with_normal = FunctionSurface(lambda u, v: (u, v, 0.0), (0, 1, 0, 1),
                                      normal_fn=lambda u, v: (0.0, 0.0, 1.0))
        assert with_normal.has_analytic_normal
        npt.assert_array_equal(with_normal.normal(0.2, 0.3), [0.0, 0.0, 1.0])

    def test_function_surface_requires_callable(self):
        from revsurflib.surfaces import FunctionSurface
        with pytest.raises(TypeError):
            FunctionSurface("not a function", (0, 1, 0, 1))

    def test_abstract_surface(self):
        from revsurflib.surfaces import ParametricSurface
        with pytest.raises(TypeError):
            ParametricSurface()

    def test_sphere_normals_are_radial(self):
        from revsurflib.surfaces import SphereSurface
        s = SphereSurface(2.0)
        for u, v in [(0.1, 0.2), (3.0, 1.5), (5.5, 2.9)]:
            p = s.evaluate(u, v)
            npt.assert_allclose(np.linalg.norm(p), 2.0)
            npt.assert_allclose(s.normal(u, v), p / 2.0, atol=1e-15)
        assert s.gaussian_curvature() == 0.25

    def test_catenoid_normal_orthogonal_to_tangents(self):
        from revsurflib.surfaces import CatenoidSurface
        c = CatenoidSurface(a=0.7, length=3.0)
        u, v, h = 1.1, 0.4, 1e-6
        du = (c.evaluate(u + h, v) - c.evaluate(u - h, v)) / (2 * h)
        dv = (c.evaluate(u, v + h) - c.evaluate(u, v - h)) / (2 * h)
        n = c.normal(u, v)
        npt.assert_allclose(np.linalg.norm(n), 1.0)
        npt.assert_allclose([n @ du, n @ dv], 0.0, atol=1e-8)
        # same orientation as du x dv
        assert n @ np.cross(du, dv) > 0.0

    def test_revolution_point(self, revolved_sphere, unit_sphere_curve):
        p = unit_sphere_curve.evaluate(0.3)
        q = revolved_sphere.evaluate(np.pi / 2, 0.3)
        npt.assert_allclose(q, [0.0, p[1], -p[0]], atol=1e-15)
        d = revolved_sphere.domain()
        assert (d.u_min, d.u_max, d.v_min, d.v_max) == (0.0, 2 * np.pi, 0.0, 1.0)
        assert not revolved_sphere.has_analytic_normal


# ---------------------------------------------------------------------------
# Tessellator
# ---------------------------------------------------------------------------

class TestBuildGeometry:
    @pytest.mark.parametrize('U, V', [(1, 1), (3, 2), (16, 9), (96, 48)])
    def test_counts(self, revolved_sphere, U, V):
        from revsurflib.surfaces import build_geometry
        mesh = build_geometry(revolved_sphere, u_segments=U, v_segments=V)
        n = (U + 1) * (V + 1)
        assert mesh.vertex_count == n
        assert mesh.positions.shape == (3 * n,)
        assert mesh.normals.shape == (3 * n,)
        assert mesh.uvs.shape == (2 * n,)
        assert mesh.indices.shape == (6 * U * V,)
        assert mesh.indices.dtype == np.uint32
        assert mesh.triangle_count == 2 * U * V
        assert mesh.indices.max() == n - 1

    def test_grid_indices_pattern(self):
        from revsurflib.surfaces import grid_indices
        npt.assert_array_equal(grid_indices(1, 1), [0, 1, 2, 2, 1, 3])
        idx = grid_indices(2, 1).reshape(-1, 3)
        npt.assert_array_equal(idx[2], [1, 2, 4])

    def test_uvs(self, plane):
        from revsurflib.surfaces import build_geometry
        mesh = build_geometry(plane, u_segments=4, v_segments=2)
        uv = mesh.uvs.reshape(-1, 2)
        npt.assert_array_equal(uv[0], [0.0, 0.0])
        npt.assert_array_equal(uv[4], [1.0, 0.0])
        npt.assert_array_equal(uv[-1], [1.0, 1.0])
        assert uv.min() == 0.0 and uv.max() == 1.0

    def test_row_major_layout(self, plane):
        from revsurflib.surfaces import build_geometry
        mesh = build_geometry(plane, u_segments=4, v_segments=2)
        verts = mesh.vertices
        # the inner loop runs over u
        npt.assert_allclose(verts[:5, 0], [0.0, 0.5, 1.0, 1.5, 2.0])
        npt.assert_allclose(verts[:5, 1], 0.0)
        npt.assert_allclose(verts[5:10, 1], 0.5)

    def test_unit_normals(self, revolved_sphere):
        from revsurflib.surfaces import build_geometry
        mesh = build_geometry(revolved_sphere, u_segments=32, v_segments=16)
        npt.assert_allclose(np.linalg.norm(mesh.vertex_normals, axis=1), 1.0,
                            rtol=1e-12)

    def test_averaged_normals_point_outward(self, revolved_sphere):
        from revsurflib.surfaces import build_geometry
        mesh = build_geometry(revolved_sphere, u_segments=48, v_segments=24)
        centre = np.array([0.0, 1.0, 0.0])
        radial = mesh.vertices - centre
        radial /= np.linalg.norm(radial, axis=1, keepdims=True)
        cosines = np.sum(radial * mesh.vertex_normals, axis=1)
        assert cosines.min() > 0.99

    def test_face_winding_matches_normals(self, revolved_sphere):
        from revsurflib.surfaces import build_geometry
        mesh = build_geometry(revolved_sphere, u_segments=24, v_segments=12)
        fn = mesh.face_normals()
        nondegenerate = np.linalg.norm(fn, axis=1) > 1e-12
        vn = mesh.vertex_normals[mesh.faces[:, 0]]
        assert np.all(np.sum(fn * vn, axis=1)[nondegenerate] > 0.0)

    def test_pole_and_seam_normals(self, revolved_sphere):
        from revsurflib.surfaces import build_geometry
        U, V = 32, 16
        mesh = build_geometry(revolved_sphere, u_segments=U, v_segments=V)
        n = mesh.vertex_normals.reshape(V + 1, U + 1, 3)
        npt.assert_allclose(n[0], np.tile([0.0, -1.0, 0.0], (U + 1, 1)), atol=1e-6)
        npt.assert_allclose(n[-1], np.tile([0.0, 1.0, 0.0], (U + 1, 1)), atol=1e-6)
        # u = 0 and u = 2 pi columns are welded
        npt.assert_allclose(n[:, 0], n[:, -1], atol=1e-12)

    def test_area_close_to_sphere(self, revolved_sphere):
        from revsurflib.surfaces import build_geometry
        mesh = build_geometry(revolved_sphere, u_segments=96, v_segments=48)
        npt.assert_allclose(mesh.area(), 4 * np.pi, rtol=5e-3)

    def test_analytic_normals_used_exactly(self):
        from revsurflib.surfaces import SphereSurface, build_geometry
        sphere = SphereSurface(1.5)
        U, V = 12, 7
        mesh = build_geometry(sphere, u_segments=U, v_segments=V)
        expected = np.array([sphere.normal(u, v)
                             for u, v in grid_params(sphere.domain(), U, V)])
        npt.assert_array_equal(mesh.vertex_normals, expected)

    def test_analytic_normals_not_averaged(self):
        from revsurflib.surfaces import FunctionSurface, build_geometry
        # deliberately not the geometric normal of the plane
        tilted = np.array([0.6, 0.0, 0.8])
        surface = FunctionSurface(lambda u, v: (u, v, 0.0), (0, 1, 0, 1),
                                  normal_fn=lambda u, v: tilted)
        mesh = build_geometry(surface, u_segments=3, v_segments=3)
        npt.assert_array_equal(mesh.vertex_normals, np.tile(tilted, (16, 1)))

    def test_averaged_matches_analytic_catenoid(self):
        from revsurflib.surfaces import (CatenoidSurface, FunctionSurface,
                                         build_geometry)
        cat = CatenoidSurface(a=1.0, length=2.0)
        plain = FunctionSurface(cat.evaluate, cat.domain())
        U, V = 64, 32
        exact = build_geometry(cat, u_segments=U, v_segments=V)
        approx = build_geometry(plain, u_segments=U, v_segments=V)
        ne = exact.vertex_normals.reshape(V + 1, U + 1, 3)[1:-1]
        na = approx.vertex_normals.reshape(V + 1, U + 1, 3)[1:-1]
        npt.assert_allclose(na, ne, atol=1e-2)
        npt.assert_array_equal(exact.positions, approx.positions)

    def test_domain_override(self, revolved_sphere):
        from revsurflib.surfaces import build_geometry
        mesh = build_geometry(revolved_sphere, u_segments=8, v_segments=4,
                              u_max=np.pi)
        # half turn: the last column lies in the -x half plane
        verts = mesh.vertices.reshape(5, 9, 3)
        assert np.all(verts[1:-1, -1, 0] < 0.0)
        npt.assert_allclose(verts[1:-1, -1, 2], 0.0, atol=1e-12)

    def test_deterministic(self, revolved_sphere):
        from revsurflib.surfaces import build_geometry
        a = build_geometry(revolved_sphere, u_segments=40, v_segments=20)
        b = build_geometry(revolved_sphere, u_segments=40, v_segments=20)
        assert a.equals(b)
        assert a.positions is not b.positions

    def test_compute_vertex_normals_single_triangle(self):
        from revsurflib.surfaces import compute_vertex_normals
        verts = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]
        n = compute_vertex_normals(verts, [[0, 1, 2]])
        npt.assert_allclose(n, np.tile([0.0, 0.0, 1.0], (3, 1)))

    def test_degenerate_surface_zero_normals(self, caplog):
        from revsurflib.surfaces import FunctionSurface, build_geometry
        point = FunctionSurface(lambda u, v: (0.0, 0.0, 0.0), (0, 1, 0, 1))
        with caplog.at_level('WARNING'):
            mesh = build_geometry(point, u_segments=2, v_segments=2)
        npt.assert_array_equal(mesh.normals, 0.0)
        assert 'degenerate' in caplog.text


class TestBuildGeometryErrors:
    def test_missing_evaluate(self):
        from revsurflib.surfaces import build_geometry

        class NoEvaluate:
            def domain(self):
                return (0, 1, 0, 1)

        with pytest.raises(TypeError, match='evaluate'):
            build_geometry(NoEvaluate())

    def test_missing_domain(self):
        from revsurflib.surfaces import build_geometry

        class NoDomain:
            def evaluate(self, u, v):
                return (u, v, 0.0)

        with pytest.raises(TypeError, match='domain'):
            build_geometry(NoDomain())

    def test_not_a_surface(self):
        from revsurflib.surfaces import build_geometry
        with pytest.raises(TypeError):
            build_geometry(42)

    def test_infinite_domain(self):
        from revsurflib.surfaces import FunctionSurface, build_geometry
        s = FunctionSurface(lambda u, v: (u, v, 0.0), (0.0, np.inf, 0.0, 1.0))
        with pytest.raises(ValueError, match='finite'):
            build_geometry(s)

    def test_nan_override(self, plane):
        from revsurflib.surfaces import build_geometry
        with pytest.raises(ValueError):
            build_geometry(plane, v_max=np.nan)

    @pytest.mark.parametrize('U, V', [(0, 4), (4, 0), (-1, 2)])
    def test_bad_segments(self, plane, U, V):
        from revsurflib.surfaces import build_geometry
        with pytest.raises(ValueError, match='segment'):
            build_geometry(plane, u_segments=U, v_segments=V)

    def test_duck_typed_surface(self):
        from revsurflib.surfaces import build_geometry

        class Patch:
            def evaluate(self, u, v):
                return np.array([u, u * v, v])

            def domain(self):
                return (0.0, 1.0, 0.0, 1.0)

        mesh = build_geometry(Patch(), u_segments=2, v_segments=2)
        assert mesh.vertex_count == 9


# ---------------------------------------------------------------------------
# SurfaceMesh
# ---------------------------------------------------------------------------

class TestSurfaceMesh:
    def test_builds_on_construction(self, revolved_sphere):
        from revsurflib.surfaces import SurfaceMesh
        sm = SurfaceMesh(revolved_sphere, u_segments=10, v_segments=5)
        assert sm.geometry.vertex_count == 66
        assert sm.geometry.u_segments == 10

    def test_rebuild_after_curve_update(self, unit_sphere_curve, revolved_sphere):
        from revsurflib.profiles import solve_profile
        from revsurflib.surfaces import SurfaceMesh
        sm = SurfaceMesh(revolved_sphere, u_segments=16, v_segments=8)
        before = sm.geometry.copy()

        unit_sphere_curve.update_points(solve_profile('spindle', 0.5).points)
        # buffers are not patched until rebuild()
        assert sm.geometry.equals(before)
        rebuilt = sm.rebuild()
        assert rebuilt is sm.geometry
        assert not rebuilt.equals(before)
        assert rebuilt.vertex_count == before.vertex_count
        npt.assert_array_equal(rebuilt.indices, before.indices)
        assert np.abs(rebuilt.vertices[:, 0]).max() <= 0.5 + 1e-6

    def test_rebuild_is_deterministic(self, revolved_sphere):
        from revsurflib.surfaces import SurfaceMesh
        sm = SurfaceMesh(revolved_sphere, u_segments=12, v_segments=6)
        first = sm.geometry
        assert sm.rebuild().equals(first)
