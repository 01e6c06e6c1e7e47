"""Tests for revsurflib.models (parameters and RevolutionModel)."""

import numpy as np
import numpy.testing as npt
import pytest


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def small_params():
    from revsurflib.models import ModelParams, ProfileParams, MeshParams
    return ModelParams(
        profile=ProfileParams(case='spindle', a=0.5, steps=100),
        mesh=MeshParams(u_segments=12, v_segments=8),
    )


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------

class TestParams:
    def test_defaults(self):
        from revsurflib.models import ProfileParams, CurveParams, MeshParams
        from revsurflib.profiles import CurvatureCase
        p = ProfileParams()
        assert p.case is CurvatureCase.SPINDLE
        assert p.a == 0.5
        assert p.steps == 200
        assert p.method == 'quadrature'
        assert CurveParams().curve_type == 'centripetal'
        assert MeshParams().u_segments == 32

    def test_case_string_coerced(self):
        from revsurflib.models import ProfileParams
        from revsurflib.profiles import CurvatureCase
        assert ProfileParams(case='pseudosphere', a=0.25).case is CurvatureCase.PSEUDOSPHERE

    @pytest.mark.parametrize('kwargs', [
        dict(case='spindle', a=1.5),
        dict(case='pseudosphere', a=1.0),
        dict(case='trumpet', a=0.0),
        dict(case='trumpet', a=0.5, steps=0),
        dict(case='cylinder', a=0.5),
    ])
    def test_invalid_profile_params(self, kwargs):
        from revsurflib.models import ProfileParams
        with pytest.raises(ValueError):
            ProfileParams(**kwargs)

    def test_invalid_mesh_params(self):
        from revsurflib.models import MeshParams
        with pytest.raises(ValueError, match='segment'):
            MeshParams(u_segments=0)

    @pytest.mark.parametrize('case, steps, recenter, flip', [
        ('spindle', 400, True, False),
        ('trumpet', 200, False, False),
        ('pseudosphere', 200, True, True),
    ])
    def test_case_presets(self, case, steps, recenter, flip):
        from revsurflib.models import ModelParams
        params = ModelParams.for_case(case, a=0.25)
        assert params.profile.steps == steps
        assert params.profile.recenter is recenter
        assert params.profile.flip is flip
        assert params.curve.curve_type == 'catmullrom'
        assert params.curve.tension == 0.5
        assert (params.mesh.u_segments, params.mesh.v_segments) == (96, 48)

    def test_preset_overrides(self):
        from revsurflib.models import ModelParams, MeshParams
        params = ModelParams.for_case('spindle', a=0.5, steps=50,
                                      mesh=MeshParams(4, 4))
        assert params.profile.steps == 50
        assert params.mesh.u_segments == 4

    def test_with_a(self, small_params):
        updated = small_params.with_a(0.8)
        assert updated.profile.a == 0.8
        assert small_params.profile.a == 0.5
        with pytest.raises(ValueError):
            small_params.with_a(2.0)


# ---------------------------------------------------------------------------
# RevolutionModel
# ---------------------------------------------------------------------------

class TestRevolutionModel:
    def test_pipeline(self, small_params):
        from revsurflib.models import RevolutionModel
        model = RevolutionModel(small_params)
        assert len(model.profile) == 101
        assert model.surface.curve is model.curve
        assert model.mesh.surface is model.surface
        assert model.geometry.vertex_count == 13 * 9
        # recentred: tips at +/- half the height
        npt.assert_allclose(model.profile.h[0], -model.profile.h[-1])

    def test_default_params(self):
        from revsurflib.models import RevolutionModel
        model = RevolutionModel()
        assert model.a == 0.5
        assert model.geometry.u_segments == 32

    def test_set_a_updates_in_place(self, small_params):
        from revsurflib.models import RevolutionModel
        model = RevolutionModel(small_params)
        curve = model.curve
        before = model.geometry.copy()
        geometry = model.set_a(0.9)
        assert model.curve is curve
        assert geometry is model.geometry
        assert model.a == 0.9
        assert model.profile.a == 0.9
        assert not geometry.equals(before)
        npt.assert_allclose(np.abs(geometry.vertices[:, 0]).max(), 0.9, rtol=1e-3)

    def test_set_a_crosses_into_barrel(self, small_params):
        from revsurflib.models import RevolutionModel
        from revsurflib.profiles import CurvatureCase
        model = RevolutionModel(small_params)
        model.set_a(1.5)
        assert model.case is CurvatureCase.BARREL
        model.set_a(0.3)
        assert model.case is CurvatureCase.SPINDLE

    def test_set_a_rejects_invalid_and_keeps_state(self):
        from revsurflib.models import RevolutionModel, ModelParams, MeshParams
        model = RevolutionModel(ModelParams.for_case(
            'pseudosphere', a=0.25, mesh=MeshParams(8, 4)))
        before = model.geometry.copy()
        with pytest.raises(ValueError):
            model.set_a(1.5)
        assert model.a == 0.25
        assert model.geometry.equals(before)

    def test_matches_direct_pipeline(self):
        from revsurflib.models import RevolutionModel, ModelParams, MeshParams
        from revsurflib.curves import NumericalCurve
        from revsurflib.profiles import solve_profile
        from revsurflib.surfaces import SurfaceOfRevolution, build_geometry
        model = RevolutionModel(ModelParams.for_case(
            'trumpet', a=0.5, mesh=MeshParams(16, 8)))
        profile = solve_profile('trumpet', 0.5, steps=200)
        curve = NumericalCurve(profile.points, curve_type='catmullrom', tension=0.5)
        direct = build_geometry(SurfaceOfRevolution(curve), 16, 8)
        assert model.geometry.equals(direct)

    def test_flipped_pseudosphere_normals_outward(self):
        from revsurflib.models import RevolutionModel, ModelParams, MeshParams
        model = RevolutionModel(ModelParams.for_case(
            'pseudosphere', a=0.25, mesh=MeshParams(32, 16)))
        h = model.profile.h
        assert np.all(np.diff(h) >= 0.0)
        # the rim is at the bottom
        assert model.profile.r[0] > model.profile.r[-1]
        g = model.geometry
        verts = g.vertices.reshape(17, 33, 3)[1:-1]
        normals = g.vertex_normals.reshape(17, 33, 3)[1:-1]
        radial = np.sum(verts[..., [0, 2]] * normals[..., [0, 2]], axis=-1)
        assert np.all(radial > 0.0)

    def test_sweep(self, small_params):
        from revsurflib.models import RevolutionModel
        model = RevolutionModel(small_params)
        seen = []
        frames = model.sweep([0.2, 0.6, 1.0],
                             callback=lambda m, a: seen.append((a, m.a)))
        assert len(frames) == 3
        assert seen == [(0.2, 0.2), (0.6, 0.6), (1.0, 1.0)]
        # frames are independent copies
        assert frames[-1].equals(model.geometry)
        assert frames[-1].positions is not model.geometry.positions
        assert not frames[0].equals(frames[1])

    def test_ode_method(self):
        from revsurflib.models import (RevolutionModel, ModelParams, ProfileParams,
                                       MeshParams)
        params = ModelParams(profile=ProfileParams(case='spindle', a=0.5, steps=400,
                                                   method='ode', stepper='rk4'),
                             mesh=MeshParams(8, 8))
        quad = RevolutionModel(ModelParams(profile=ProfileParams(case='spindle', a=0.5,
                                                                 steps=400),
                                           mesh=MeshParams(8, 8)))
        npt.assert_allclose(RevolutionModel(params).geometry.positions,
                            quad.geometry.positions, atol=1e-4)
