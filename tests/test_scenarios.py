import numpy as np
import pytest

from maccormack.config import PRESETS, SimulationConfig
from maccormack.physics import PrimitiveState
from maccormack.scenarios import (
    Scenario,
    available_scenarios,
    bow_shock,
    circle_boundary,
    colliding_flows,
    collapse,
    get_scenario,
    homogeneous_cooling,
    kelvin_helmholtz,
    kelvin_helmholtz_bands,
    no_boundary,
    sod_shock_tube,
)


@pytest.fixture
def small():
    return SimulationConfig(nx=16, ny=16)


def test_sod_states(small):
    sc = sod_shock_tube(small)
    assert np.unique(sc.state.rho[:, :8]).tolist() == [1.0]
    assert np.unique(sc.state.p[:, :8]).tolist() == [1.0]
    assert np.unique(sc.state.rho[:, 8:]).tolist() == [0.125]
    assert np.unique(sc.state.p[:, 8:]).tolist() == [0.1]
    assert np.unique(sc.state.u).tolist() == [0.0]
    assert np.unique(sc.internal_boundary).tolist() == [0.0]


def test_colliding_flows_antisymmetric(small):
    sc = colliding_flows(small)
    u = sc.state.u
    assert np.all(u[:, :8] > 0)
    assert np.allclose(u[:, :8], -u[:, 8:])
    assert np.all(sc.state.rho == 1.0)


def test_kelvin_helmholtz_bands_layout(small):
    sc = kelvin_helmholtz_bands(small)
    assert np.all(sc.state.rho[4] == 1.0)
    assert np.all(sc.state.rho[5:12] == 0.5)
    assert np.all(sc.state.u[5:12] == -0.25)
    assert np.all(sc.state.u[0] == 0.25)
    quiet = [j for j in range(16) if j not in (4, 12)]
    assert np.all(sc.state.v[quiet] == 0.0)
    assert np.any(sc.state.v[4] != 0.0)
    assert np.allclose(sc.state.v[4], sc.state.v[12])


def test_kelvin_helmholtz_density_layers(small):
    sc = kelvin_helmholtz(small)
    assert np.all(sc.state.rho[:8] == 0.1)
    assert np.all(sc.state.rho[8:] == 1.0)
    assert np.allclose(sc.state.u[:8], -sc.state.u[8:])
    assert np.allclose(sc.state.v[0], sc.state.v[15])


def test_bow_shock_has_cylinder(small):
    sc = bow_shock(small)
    assert sc.internal_boundary[8, 8] == 1.0
    assert sc.internal_boundary[0, 0] == 0.0
    assert np.all(sc.state.by == 1.0)
    assert np.all(sc.state.u > 0)


def test_collapse_peak_at_centre(small):
    sc = collapse(small)
    assert np.all(sc.state.p == 10.0)
    assert np.all(sc.state.rho > 1.0)
    assert int(np.argmax(sc.state.rho[0])) == 8
    assert np.all(sc.state.u == 0.0)


def test_cooling_uniform(small):
    sc = homogeneous_cooling(small)
    assert np.all(sc.state.p == 10.0)
    assert np.all(sc.state.rho == 1.0)
    assert sc.name == "cooling"


def test_no_boundary_shape():
    cfg = SimulationConfig(nx=5, ny=4)
    mask = no_boundary(cfg)
    assert mask.shape == (4, 5)
    assert mask.sum() == 0.0


def test_circle_boundary_zero_radius(small):
    assert circle_boundary(small, (0.5, 0.5), 0.0).sum() == 0.0


def test_circle_boundary_symmetric(small):
    mask = circle_boundary(small, (0.5, 0.5), 0.3)
    inner = mask[1:, 1:]
    assert np.array_equal(inner, inner.T)
    assert np.array_equal(inner, inner[::-1, ::-1])


def test_circle_boundary_negative_radius(small):
    with pytest.raises(ValueError):
        circle_boundary(small, (0.5, 0.5), -1.0)


def test_available_matches_presets():
    assert set(available_scenarios()) == set(PRESETS)


def test_get_scenario_uses_preset():
    sc = get_scenario("sod")
    assert sc.config == PRESETS["sod"]
    assert sc.state.shape == (4, 256)


def test_get_scenario_unknown():
    with pytest.raises(ValueError):
        get_scenario("nonexistent")


def test_scenario_shape_mismatch(small):
    with pytest.raises(ValueError):
        Scenario("bad", small, PrimitiveState.uniform(3, 3), np.zeros((16, 16)))
    with pytest.raises(ValueError):
        Scenario("bad", small, PrimitiveState.uniform(16, 16), np.zeros((2, 2)))