import math

import numpy as np
import pytest

from maccormack.config import CoolingForm, CoolingLaw
from maccormack.physics import (
    PrimitiveState,
    conserved_from_primitive,
    max_signal_speed,
    primitive_from_conserved,
    radiative_source,
    x_flux,
    y_flux,
)


def _random_state(seed=0, shape=(5, 7)):
    rng = np.random.default_rng(seed)
    return PrimitiveState(
        rho=rng.uniform(0.5, 2.0, shape),
        u=rng.uniform(-1.0, 1.0, shape),
        v=rng.uniform(-1.0, 1.0, shape),
        p=rng.uniform(0.5, 2.0, shape),
        bx=rng.uniform(-1.0, 1.0, shape),
        by=rng.uniform(-1.0, 1.0, shape),
    )


def test_uniform_state_fields():
    state = PrimitiveState.uniform(4, 6)
    fields = state.fields()
    assert list(fields) == ["rho", "u", "v", "p", "Bx", "By"]
    assert state.shape == (4, 6)
    assert np.all(fields["rho"] == 1.0)
    assert np.all(fields["p"] == 1.0)
    assert np.all(fields["u"] == 0.0)
    assert np.all(fields["By"] == 0.0)


def test_mismatched_shapes_raise():
    with pytest.raises(ValueError):
        PrimitiveState(
            rho=np.ones((2, 2)), u=np.ones((2, 3)), v=np.ones((2, 2)),
            p=np.ones((2, 2)), bx=np.ones((2, 2)), by=np.ones((2, 2)),
        )


@pytest.mark.parametrize("gamma,mu0", [(1.4, 1.0), (1.666667, 2.0)])
def test_conserved_round_trip(gamma, mu0):
    state = _random_state()
    conserved = conserved_from_primitive(state, gamma, mu0)
    assert conserved.shape == (6, 5, 7)
    back = primitive_from_conserved(conserved, gamma, mu0)
    for name, original in state.fields().items():
        np.testing.assert_allclose(back.fields()[name], original, rtol=1e-12, atol=1e-12)


def test_conserved_density_and_momentum():
    state = _random_state(seed=3)
    conserved = conserved_from_primitive(state, 1.4, 1.0)
    np.testing.assert_allclose(conserved[0], state.rho)
    np.testing.assert_allclose(conserved[1] / conserved[0], state.u)
    np.testing.assert_allclose(conserved[5], state.by)


def test_primitive_from_conserved_rejects_wrong_shape():
    with pytest.raises(ValueError):
        primitive_from_conserved(np.ones((4, 3, 3)), 1.4, 1.0)


def test_static_state_fluxes_carry_only_pressure():
    state = PrimitiveState.uniform(3, 3)
    fx = x_flux(state, 1.4, 1.0)
    fy = y_flux(state, 1.4, 1.0)
    np.testing.assert_allclose(fx[1], state.p)
    np.testing.assert_allclose(fy[2], state.p)
    for idx in (0, 2, 3, 4, 5):
        assert np.all(fx[idx] == 0.0)
    for idx in (0, 1, 3, 4, 5):
        assert np.all(fy[idx] == 0.0)


def test_flux_symmetry_under_axis_swap():
    state = _random_state(seed=7)
    swapped = PrimitiveState(
        rho=state.rho, u=state.v, v=state.u, p=state.p, bx=state.by, by=state.bx
    )
    fx = x_flux(state, 1.666667, 1.0)
    fy = y_flux(swapped, 1.666667, 1.0)
    np.testing.assert_allclose(fy[0], fx[0])
    np.testing.assert_allclose(fy[2], fx[1])
    np.testing.assert_allclose(fy[1], fx[2])
    np.testing.assert_allclose(fy[3], fx[3])
    np.testing.assert_allclose(fy[5], fx[4])
    np.testing.assert_allclose(fy[4], fx[5])


def test_max_signal_speed_static_gas_is_sound_speed():
    state = PrimitiveState.uniform(3, 4)
    assert max_signal_speed(state, 1.4) == pytest.approx(math.sqrt(1.4))


def test_max_signal_speed_picks_flow_when_faster():
    state = PrimitiveState.uniform(3, 4)
    state.u[1, 2] = 3.0
    state.v[1, 2] = 4.0
    assert max_signal_speed(state, 1.4) == pytest.approx(5.0)


def test_max_signal_speed_bounds_every_cell():
    state = _random_state(seed=11)
    speed = max_signal_speed(state, 1.666667)
    flow = np.sqrt(state.u ** 2 + state.v ** 2)
    sound = np.sqrt(1.666667 * state.p / state.rho)
    assert float(flow.max()) <= speed + 1e-12
    assert float(sound.max()) <= speed + 1e-12
    attained = np.isclose(flow, speed).any() or np.isclose(sound, speed).any()
    assert attained is True or attained == np.True_


def test_radiative_source_disabled_is_zero():
    assert radiative_source(2.0, 3.0, CoolingLaw()) == 0.0
    assert radiative_source(2.0, 3.0, None) == 0.0


def test_radiative_source_product_form_at_unit_state():
    law = CoolingLaw(amplitude=-0.1, alpha=2.0, beta=0.5, enabled=True)
    assert radiative_source(1.0, 1.0, law) == pytest.approx(law.amplitude)


def test_radiative_source_sum_form_at_unit_state():
    law = CoolingLaw(amplitude=-1.0, alpha=1.0, beta=0.5, form=CoolingForm.SUM, enabled=True)
    assert radiative_source(1.0, 1.0, law) == pytest.approx(law.amplitude + 1.0)


def test_radiative_source_cools_more_in_denser_gas():
    law = CoolingLaw(amplitude=-2.0, alpha=2.0, beta=0.5, enabled=True)
    density = np.array([[1.0, 2.0, 4.0]])
    pressure = np.full((1, 3), 10.0)
    result = radiative_source(density, pressure, law)
    assert result.shape == (1, 3)
    assert np.all(result < 0.0)
    assert result[0, 0] > result[0, 1] > result[0, 2]