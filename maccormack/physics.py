"""Ideal MHD state conversions, fluxes and source terms on a 2-D grid."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from maccormack.config import CoolingForm, CoolingLaw

NVAR = 6
"""Number of conserved variables: rho, rho*u, rho*v, E, Bx, By."""

FIELD_NAMES = ("rho", "u", "v", "p", "Bx", "By")


@dataclass
class PrimitiveState:
    """Primitive variables, each an array of shape (ny, nx)."""

    rho: np.ndarray
    u: np.ndarray
    v: np.ndarray
    p: np.ndarray
    bx: np.ndarray
    by: np.ndarray

    def __post_init__(self) -> None:
        arrays = [np.array(a, dtype=float) for a in
                  (self.rho, self.u, self.v, self.p, self.bx, self.by)]
        shape = arrays[0].shape
        if len(shape) != 2:
            raise ValueError("state fields must be two-dimensional")
        if any(a.shape != shape for a in arrays):
            raise ValueError("all state fields must have the same shape")
        self.rho, self.u, self.v, self.p, self.bx, self.by = arrays

    @property
    def shape(self) -> tuple[int, int]:
        return self.rho.shape

    @classmethod
    def uniform(cls, ny: int, nx: int) -> "PrimitiveState":
        """Gas at rest with unit density and pressure and no magnetic field."""
        if ny < 1 or nx < 1:
            raise ValueError("grid dimensions must be positive")
        zeros = np.zeros((ny, nx))
        return cls(
            rho=np.ones((ny, nx)),
            u=zeros.copy(),
            v=zeros.copy(),
            p=np.ones((ny, nx)),
            bx=zeros.copy(),
            by=zeros.copy(),
        )

    def fields(self) -> dict[str, np.ndarray]:
        """Fields keyed by their output names, in output order."""
        return dict(zip(FIELD_NAMES, (self.rho, self.u, self.v, self.p, self.bx, self.by)))


def _magnetic_pressure_terms(state: PrimitiveState) -> np.ndarray:
    return state.bx * state.bx + state.by * state.by


def conserved_from_primitive(state: PrimitiveState, gamma: float, mu0: float) -> np.ndarray:
    """Stack of conserved variables with shape (6, ny, nx)."""
    kinetic = 0.5 * state.rho * (state.u * state.u + state.v * state.v)
    energy = state.p / (gamma - 1.0) + kinetic + 0.5 / mu0 * _magnetic_pressure_terms(state)
    return np.stack([
        state.rho,
        state.rho * state.u,
        state.rho * state.v,
        energy,
        state.bx,
        state.by,
    ])


def primitive_from_conserved(conserved: np.ndarray, gamma: float, mu0: float) -> PrimitiveState:
    """Recover primitive variables from a (6, ny, nx) conserved stack."""
    conserved = np.asarray(conserved, dtype=float)
    if conserved.ndim != 3 or conserved.shape[0] != NVAR:
        raise ValueError(f"expected an array of shape ({NVAR}, ny, nx)")
    rho = conserved[0].copy()
    bx = conserved[4].copy()
    by = conserved[5].copy()
    with np.errstate(divide="ignore", invalid="ignore"):
        u = conserved[1] / conserved[0]
        v = conserved[2] / conserved[0]
    p = (conserved[3] - 0.5 * rho * (u * u + v * v) - 0.5 / mu0 * (bx * bx + by * by)) * (gamma - 1.0)
    return PrimitiveState(rho=rho, u=u, v=v, p=p, bx=bx, by=by)


def _enthalpy_like(state: PrimitiveState, gamma: float, mu0: float) -> np.ndarray:
    return (
        state.p / (gamma - 1.0)
        + state.p
        + 0.5 * state.rho * (state.u * state.u + state.v * state.v)
        + _magnetic_pressure_terms(state) / mu0
    )


def x_flux(state: PrimitiveState, gamma: float, mu0: float) -> np.ndarray:
    """Fluxes of the conserved variables in the x direction, shape (6, ny, nx)."""
    rho, u, v, p, bx, by = state.rho, state.u, state.v, state.p, state.bx, state.by
    b2 = _magnetic_pressure_terms(state)
    u_dot_b = u * bx + v * by
    return np.stack([
        rho * u,
        rho * u * u + p + 0.5 * b2 / mu0 - bx * bx / mu0,
        rho * v * u - by * bx / mu0,
        u * _enthalpy_like(state, gamma, mu0) - bx * u_dot_b / mu0,
        np.zeros_like(rho),
        u * by - bx * v,
    ])


def y_flux(state: PrimitiveState, gamma: float, mu0: float) -> np.ndarray:
    """Fluxes of the conserved variables in the y direction, shape (6, ny, nx)."""
    rho, u, v, p, bx, by = state.rho, state.u, state.v, state.p, state.bx, state.by
    b2 = _magnetic_pressure_terms(state)
    u_dot_b = u * bx + v * by
    return np.stack([
        rho * v,
        rho * u * v - bx * by / mu0,
        rho * v * v + p + 0.5 * b2 / mu0 - by * by / mu0,
        v * _enthalpy_like(state, gamma, mu0) - by * u_dot_b / mu0,
        -u * by + bx * v,
        np.zeros_like(rho),
    ])


def max_signal_speed(state: PrimitiveState, gamma: float) -> float:
    """Largest sound speed or flow speed on the grid; cells giving NaN are ignored."""
    with np.errstate(divide="ignore", invalid="ignore"):
        sound = np.sqrt(gamma * state.p / state.rho)
        flow = np.sqrt(state.u * state.u + state.v * state.v)
    combined = np.fmax(sound, flow)
    finite = combined[~np.isnan(combined)]
    return float(finite.max(initial=0.0))


def radiative_source(density, pressure, law: CoolingLaw | None):
    """Energy source from radiative cooling; zero when the law is absent or disabled."""
    density = np.asarray(density, dtype=float)
    pressure = np.asarray(pressure, dtype=float)
    if law is None or not law.enabled:
        result = np.zeros(np.broadcast(density, pressure).shape)
    else:
        with np.errstate(divide="ignore", invalid="ignore"):
            temperature = pressure / density
            density_term = law.amplitude * density * np.power(density, law.alpha)
            temperature_term = np.power(temperature, law.beta)
        if law.form is CoolingForm.PRODUCT:
            result = density_term * temperature_term
        else:
            result = density_term + temperature_term
    if np.ndim(result) == 0:
        return float(result)
    return result