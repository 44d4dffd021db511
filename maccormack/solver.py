"""Two-step MacCormack integrator for the ideal MHD equations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from maccormack.config import SimulationConfig
from maccormack.physics import (
    NVAR,
    PrimitiveState,
    conserved_from_primitive,
    max_signal_speed,
    primitive_from_conserved,
    radiative_source,
    x_flux,
    y_flux,
)

_ENERGY = 3
_SOLID_ZEROED = (1, 2, 4, 5)
"""Conserved components forced to zero inside solid cells: momenta and field."""


@dataclass(frozen=True)
class StepInfo:
    """Summary of one completed time step."""

    step: int
    time: float
    dt: float
    max_speed: float


def apply_outflow_boundaries(conserved: np.ndarray) -> np.ndarray:
    """Copy the first interior row and column onto each edge, in place.

    Left and right edges are filled first, then bottom and top, so the
    corners take the value of the nearest interior corner cell.
    """
    if conserved.ndim != 3 or conserved.shape[1] < 3 or conserved.shape[2] < 3:
        raise ValueError("expected an array of shape (nvar, ny, nx) with ny, nx >= 3")
    conserved[:, :, 0] = conserved[:, :, 1]
    conserved[:, :, -1] = conserved[:, :, -2]
    conserved[:, 0, :] = conserved[:, 1, :]
    conserved[:, -1, :] = conserved[:, -2, :]
    return conserved


def _second_difference(field: np.ndarray) -> np.ndarray:
    """Sum of the x and y discrete Laplacian stencils over interior cells."""
    centre = field[:, 1:-1, 1:-1]
    along_x = field[:, 1:-1, 2:] + field[:, 1:-1, :-2] - 2 * centre
    along_y = field[:, 2:, 1:-1] + field[:, :-2, 1:-1] - 2 * centre
    return along_x + along_y


class MacCormackSolver:
    """Advances a primitive state with a predictor-corrector MacCormack scheme."""

    def __init__(self, config: SimulationConfig, state: PrimitiveState,
                 internal_boundary=None) -> None:
        expected = (config.ny, config.nx)
        if state.shape != expected:
            raise ValueError(f"state shape {state.shape} does not match grid {expected}")
        if internal_boundary is None:
            mask = np.zeros(expected)
        else:
            mask = np.array(internal_boundary, dtype=float)
            if mask.shape != expected:
                raise ValueError(f"boundary shape {mask.shape} does not match grid {expected}")
        self._config = config
        self._solid = mask[1:-1, 1:-1] == 1.0
        self._conserved = conserved_from_primitive(state, config.gamma, config.mu0)
        if not config.magnetic:
            self._conserved[4:] = 0.0
        self._predicted = np.ones((NVAR, config.ny, config.nx))
        self._primitive = primitive_from_conserved(self._conserved, config.gamma, config.mu0)
        speed = max_signal_speed(self._primitive, config.gamma)
        if not speed > 0.0:
            raise ValueError("the initial state has no positive signal speed")
        self._max_speed = speed
        self._dt = config.cfl * config.dx / speed
        self._time = 0.0
        self._step = 0

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def state(self) -> PrimitiveState:
        """A copy of the current primitive variables."""
        return PrimitiveState(
            rho=self._primitive.rho.copy(),
            u=self._primitive.u.copy(),
            v=self._primitive.v.copy(),
            p=self._primitive.p.copy(),
            bx=self._primitive.bx.copy(),
            by=self._primitive.by.copy(),
        )

    @property
    def time(self) -> float:
        return self._time

    @property
    def dt(self) -> float:
        """Time step the next call to step() will use."""
        return self._dt

    @property
    def step_count(self) -> int:
        return self._step

    @property
    def max_speed(self) -> float:
        return self._max_speed

    def _source(self, state: PrimitiveState) -> np.ndarray:
        ny, nx = state.shape
        source = np.zeros((NVAR, ny - 2, nx - 2))
        source[_ENERGY] = radiative_source(
            state.rho[1:-1, 1:-1], state.p[1:-1, 1:-1], self._config.cooling
        )
        return source

    def _store_interior(self, target: np.ndarray, update: np.ndarray) -> None:
        interior = target[:, 1:-1, 1:-1]
        fluid = ~self._solid
        interior[:, fluid] = update[:, fluid]
        for component in _SOLID_ZEROED:
            interior[component][self._solid] = 0.0

    def step(self) -> StepInfo:
        """Advance one time step and return its summary."""
        cfg = self._config
        dt, dx, nu = self._dt, cfg.dx, cfg.viscosity
        ratio = dt / dx
        U = self._conserved
        state = self._primitive

        fx = x_flux(state, cfg.gamma, cfg.mu0)
        fy = y_flux(state, cfg.gamma, cfg.mu0)
        centre_fx = fx[:, 1:-1, 1:-1]
        centre_fy = fy[:, 1:-1, 1:-1]
        predicted = (
            U[:, 1:-1, 1:-1]
            - ratio * (fx[:, 1:-1, 2:] - centre_fx)
            - ratio * (fy[:, 2:, 1:-1] - centre_fy)
            + nu * _second_difference(U)
            + self._source(state) * dt
        )
        self._store_interior(self._predicted, predicted)
        apply_outflow_boundaries(self._predicted)
        Up = self._predicted
        predicted_state = primitive_from_conserved(Up, cfg.gamma, cfg.mu0)

        fxp = x_flux(predicted_state, cfg.gamma, cfg.mu0)
        fyp = y_flux(predicted_state, cfg.gamma, cfg.mu0)
        centre_fxp = fxp[:, 1:-1, 1:-1]
        centre_fyp = fyp[:, 1:-1, 1:-1]
        corrected = (
            0.5 * (U[:, 1:-1, 1:-1] + Up[:, 1:-1, 1:-1])
            - 0.5 * ratio * (centre_fxp - fxp[:, 1:-1, :-2])
            - 0.5 * ratio * (centre_fyp - fyp[:, :-2, 1:-1])
            + nu * _second_difference(Up)
            + 0.5 * self._source(predicted_state) * dt
        )
        self._store_interior(U, corrected)
        apply_outflow_boundaries(U)
        self._primitive = primitive_from_conserved(U, cfg.gamma, cfg.mu0)

        speed = max_signal_speed(self._primitive, cfg.gamma)
        if not speed > 0.0:
            raise FloatingPointError("no positive signal speed left to set the time step")
        self._max_speed = speed
        self._dt = cfg.cfl * dx / speed
        self._time += self._dt
        self._step += 1
        return StepInfo(step=self._step, time=self._time, dt=self._dt, max_speed=speed)

    def steps(self) -> Iterator[StepInfo]:
        """Step until the configured end time is reached, yielding each summary."""
        while self._time < self._config.t_end:
            yield self.step()