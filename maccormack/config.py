"""Run parameters for the MacCormack solver and the preset configurations."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field

PI = 3.1415926
"""Value of pi used by the initial conditions and boundaries."""


class CoolingForm(enum.Enum):
    """How density and temperature combine in the radiative loss term."""

    PRODUCT = "product"
    """Q = A * rho * rho**alpha * T**beta"""
    SUM = "sum"
    """Q = A * rho * rho**alpha + T**beta"""


@dataclass(frozen=True)
class CoolingLaw:
    """Optically thin radiative source term for the energy equation."""

    amplitude: float = -2.0
    alpha: float = 2.0
    beta: float = 0.5
    form: CoolingForm = CoolingForm.PRODUCT
    enabled: bool = False


@dataclass(frozen=True)
class SimulationConfig:
    """Grid, time stepping and physical parameters of one run."""

    nx: int = 512
    ny: int = 8
    cfl: float = 0.2
    t_end: float = 0.5
    gamma: float = 1.666667
    visc_fac: float = 0.25
    gravity: float = 0.0
    print_every: int = 100
    mu0: float = 1.0
    magnetic: bool = True
    cooling: CoolingLaw = field(default_factory=CoolingLaw)

    def __post_init__(self) -> None:
        if self.nx < 3 or self.ny < 3:
            raise ValueError("the grid needs at least 3 cells in each direction")
        if self.cfl <= 0.0:
            raise ValueError("the CFL number must be positive")
        if self.t_end < 0.0:
            raise ValueError("the end time must not be negative")
        if self.gamma <= 1.0:
            raise ValueError("the adiabatic index must be greater than 1")
        if self.print_every < 1:
            raise ValueError("print_every must be at least 1")
        if self.mu0 <= 0.0:
            raise ValueError("mu0 must be positive")

    @property
    def dx(self) -> float:
        """Grid spacing; the domain is one unit wide."""
        return 1.0 / self.nx

    @property
    def viscosity(self) -> float:
        """Artificial viscosity coefficient."""
        return self.visc_fac * (1.0 - self.cfl * self.cfl) / 6.0

    def replace(self, **kwargs) -> "SimulationConfig":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **kwargs)


PRESETS: dict[str, SimulationConfig] = {
    "kelvin_helmholtz_bands": SimulationConfig(
        nx=512, ny=512, cfl=0.5, t_end=2.0, gamma=1.666667, visc_fac=0.01,
        print_every=100, magnetic=False,
        cooling=CoolingLaw(amplitude=-1.0, alpha=1.0, beta=0.5, form=CoolingForm.SUM),
    ),
    "colliding_flows": SimulationConfig(
        nx=512, ny=8, cfl=0.2, t_end=0.5, gamma=1.666667, visc_fac=0.25,
        print_every=100,
    ),
    "kelvin_helmholtz": SimulationConfig(
        nx=512, ny=512, cfl=0.33, t_end=2.0, gamma=1.666667, visc_fac=0.05,
        print_every=500,
    ),
    "sod": SimulationConfig(
        nx=256, ny=4, cfl=0.2, t_end=0.2, gamma=1.4, visc_fac=0.1,
        print_every=100,
    ),
    "bow_shock": SimulationConfig(
        nx=128, ny=128, cfl=0.2, t_end=0.5, gamma=1.666667, visc_fac=0.25,
        print_every=100,
    ),
    "collapse": SimulationConfig(
        nx=512, ny=32, cfl=0.25, t_end=2.0, gamma=1.666667, visc_fac=0.1,
        print_every=200, magnetic=False,
        cooling=CoolingLaw(amplitude=-0.1, alpha=2.0, beta=0.5, enabled=True),
    ),
    "cooling": SimulationConfig(
        nx=256, ny=256, cfl=0.25, t_end=2.0, gamma=1.666667, visc_fac=0.1,
        print_every=50, magnetic=False,
        cooling=CoolingLaw(amplitude=-2.0, alpha=2.0, beta=0.5, enabled=True),
    ),
}