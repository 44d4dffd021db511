"""Initial conditions and internal boundaries for the preset problems."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

from maccormack.config import PI, PRESETS, SimulationConfig
from maccormack.physics import PrimitiveState


@dataclass
class Scenario:
    """A configured problem: parameters, starting state and solid-body mask."""

    name: str
    config: SimulationConfig
    state: PrimitiveState
    internal_boundary: np.ndarray

    def __post_init__(self) -> None:
        self.internal_boundary = np.array(self.internal_boundary, dtype=float)
        expected = (self.config.ny, self.config.nx)
        if self.state.shape != expected:
            raise ValueError(f"state shape {self.state.shape} does not match grid {expected}")
        if self.internal_boundary.shape != expected:
            raise ValueError(
                f"boundary shape {self.internal_boundary.shape} does not match grid {expected}"
            )


def _coordinates(config: SimulationConfig) -> tuple[np.ndarray, np.ndarray]:
    """Cell positions x (columns) and y (rows) as broadcastable grids."""
    dx = config.dx
    x = np.arange(config.nx)[np.newaxis, :] * dx
    y = np.arange(config.ny)[:, np.newaxis] * dx
    return x, y


def _full(config: SimulationConfig, value: float) -> np.ndarray:
    return np.full((config.ny, config.nx), float(value))


def no_boundary(config: SimulationConfig) -> np.ndarray:
    """Mask with no solid cells."""
    return np.zeros((config.ny, config.nx))


def circle_boundary(config: SimulationConfig, center, radius: float) -> np.ndarray:
    """Mask that is 1 inside a circle of the given centre and radius, 0 elsewhere."""
    if radius < 0.0:
        raise ValueError("radius must not be negative")
    cx, cy = center
    x, y = _coordinates(config)
    inside = (x - cx) * (x - cx) + (y - cy) * (y - cy) < radius * radius
    return inside.astype(float)


def kelvin_helmholtz_bands(config: SimulationConfig) -> Scenario:
    """Shear layers at a quarter and three quarters of the height, seeded by a v kick."""
    ny, nx = config.ny, config.nx
    lower, upper = ny // 4, (ny * 3) // 4
    rows = np.arange(ny)[:, np.newaxis]
    cols = np.arange(nx)[np.newaxis, :]
    outer = (rows <= lower) | (rows >= upper)
    shape = (ny, nx)
    rho = np.where(outer, 1.0, 0.5) * np.ones(shape)
    u = np.where(outer, 0.25, -0.25) * np.ones(shape)
    p = _full(config, 1.0)
    kick = 0.2 * np.sin(2 * 3.141 / (nx // 4) * cols) * np.ones(shape)
    interface = ((rows == lower) | (rows == upper)) & np.ones(shape, dtype=bool)
    v = np.where(interface, kick, 0.0)
    zeros = np.zeros(shape)
    state = PrimitiveState(rho=rho, u=u, v=v, p=p, bx=zeros, by=zeros.copy())
    return Scenario("kelvin_helmholtz_bands", config, state, no_boundary(config))


def kelvin_helmholtz(config: SimulationConfig) -> Scenario:
    """Single shear layer at mid-height with a sinusoidal transverse velocity."""
    x, y = _coordinates(config)
    shape = (config.ny, config.nx)
    sound = math.sqrt(config.gamma * 1.0 / 1.0)
    lower = (y < 0.5) & np.ones(shape, dtype=bool)
    rho = np.where(lower, 0.1, 1.0)
    u = np.where(lower, 0.25 * sound, -0.25 * sound)
    v = 0.05 * np.sin(2 * PI / 0.25 * x) * np.ones(shape)
    zeros = np.zeros(shape)
    state = PrimitiveState(rho=rho, u=u, v=v, p=_full(config, 1.0), bx=zeros, by=zeros.copy())
    return Scenario("kelvin_helmholtz", config, state, no_boundary(config))


def colliding_flows(config: SimulationConfig) -> Scenario:
    """Two uniform streams moving towards each other at Mach 2.5."""
    shape = (config.ny, config.nx)
    cols = np.arange(config.nx)[np.newaxis, :] * np.ones(shape)
    speed = 2.5 * math.sqrt(config.gamma * 1.0 / 1.0)
    u = np.where(cols < config.nx * 0.5, speed, -speed)
    zeros = np.zeros(shape)
    state = PrimitiveState(
        rho=_full(config, 1.0), u=u, v=zeros, p=_full(config, 1.0),
        bx=zeros.copy(), by=zeros.copy(),
    )
    return Scenario("colliding_flows", config, state, no_boundary(config))


def sod_shock_tube(config: SimulationConfig) -> Scenario:
    """Sod's shock tube along x: a high-pressure left half and a low-pressure right half."""
    shape = (config.ny, config.nx)
    cols = np.arange(config.nx)[np.newaxis, :] * np.ones(shape)
    left = cols < config.nx * 0.5
    zeros = np.zeros(shape)
    state = PrimitiveState(
        rho=np.where(left, 1.0, 0.125),
        u=zeros,
        v=zeros.copy(),
        p=np.where(left, 1.0, 0.1),
        bx=zeros.copy(),
        by=zeros.copy(),
    )
    return Scenario("sod", config, state, no_boundary(config))


def bow_shock(config: SimulationConfig) -> Scenario:
    """Magnetised Mach 3 flow striking a solid cylinder at the domain centre."""
    phi = 5.0 / 180.0 * PI
    sound = math.sqrt(config.gamma * 1.0 / 1.0)
    shape = (config.ny, config.nx)
    state = PrimitiveState(
        rho=_full(config, 1.0),
        u=_full(config, 3.0 * sound * math.cos(phi)),
        v=_full(config, -0.0 * sound * math.sin(phi)),
        p=_full(config, 1.0),
        bx=np.zeros(shape),
        by=_full(config, 1.0),
    )
    boundary = circle_boundary(config, (0.5, 0.5), 0.15)
    return Scenario("bow_shock", config, state, boundary)


def collapse(config: SimulationConfig) -> Scenario:
    """Gaussian overdensity in a hot, static medium."""
    x, _ = _coordinates(config)
    shape = (config.ny, config.nx)
    rho = (1.0 + 3.0 * np.exp(-((x - 0.5) ** 2) / (2 * 0.15 ** 2))) * np.ones(shape)
    u = -0.0 * np.tanh((x - 0.5) / 0.15) * np.ones(shape)
    zeros = np.zeros(shape)
    state = PrimitiveState(
        rho=rho, u=u, v=zeros, p=_full(config, 10.0), bx=zeros.copy(), by=zeros.copy(),
    )
    return Scenario("collapse", config, state, no_boundary(config))


def homogeneous_cooling(config: SimulationConfig) -> Scenario:
    """Uniform static gas left to cool radiatively."""
    zeros = np.zeros((config.ny, config.nx))
    state = PrimitiveState(
        rho=_full(config, 1.0), u=zeros, v=zeros.copy(), p=_full(config, 10.0),
        bx=zeros.copy(), by=zeros.copy(),
    )
    return Scenario("cooling", config, state, no_boundary(config))


_BUILDERS: dict[str, Callable[[SimulationConfig], Scenario]] = {
    "kelvin_helmholtz_bands": kelvin_helmholtz_bands,
    "colliding_flows": colliding_flows,
    "kelvin_helmholtz": kelvin_helmholtz,
    "sod": sod_shock_tube,
    "bow_shock": bow_shock,
    "collapse": collapse,
    "cooling": homogeneous_cooling,
}


def available_scenarios() -> tuple[str, ...]:
    """Names accepted by get_scenario."""
    return tuple(_BUILDERS)


def get_scenario(name: str) -> Scenario:
    """Build the named scenario with its preset configuration."""
    try:
        builder = _BUILDERS[name]
    except KeyError:
        known = ", ".join(_BUILDERS)
        raise ValueError(f"unknown scenario {name!r}; choose one of: {known}") from None
    return builder(PRESETS[name])