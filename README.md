# maccormack

A small two-dimensional solver for the compressible Euler and ideal MHD
equations on a uniform grid of unit width. It uses the MacCormack
predictor-corrector scheme with artificial viscosity, zero-gradient outer
boundaries, optional solid cells inside the domain and an optional
radiative cooling term in the energy equation.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
maccormack SCENARIO [--output-dir DIR] [--t-end T] [--print-every N]
```

`SCENARIO` is one of `kelvin_helmholtz_bands`, `colliding_flows`,
`kelvin_helmholtz`, `sod`, `bow_shock`, `collapse` or `cooling`.
`--output-dir` defaults to `./output` and is created if missing;
`--t-end` and `--print-every` override the preset's end time and snapshot
interval.

A run writes, into the output directory:

- `bound-0.txt`, the solid-cell mask, and `<field>-0.txt` for the start state;
- `p_vs_t.txt`, one `time,pressure` line per step for the centre cell;
- `<field>-<step>.txt` every `print_every` steps, with a progress line on
  standard output;
- `<field>.txt` for the final state.

The fields are `u`, `v`, `rho` and `p`, plus `Bx` and `By` for magnetic
presets. Each file holds one grid row per line, values written as `%f`
followed by a space. The command exits with status 1 and a message on
standard error if the run fails (for example, when no positive signal
speed is left to set the time step).

## Library use

```python
from maccormack.scenarios import available_scenarios, get_scenario
from maccormack.solver import MacCormackSolver

print(available_scenarios())
scenario = get_scenario("sod")
solver = MacCormackSolver(scenario.config, scenario.state, scenario.internal_boundary)
for info in solver.steps():
    pass
print(solver.step_count, solver.time, solver.state.rho.shape)
```

The building blocks:

- `maccormack.config` — `SimulationConfig` (grid size, CFL number, end
  time, adiabatic index, viscosity factor, `mu0`, whether the magnetic
  field is evolved, snapshot interval and a `CoolingLaw`). Its `dx` and
  `viscosity` properties give the grid spacing and the artificial
  viscosity coefficient; `replace(...)` returns a changed copy. Invalid
  values raise `ValueError`. `CoolingLaw` combines density and
  temperature as a product or a sum (`CoolingForm`). `PRESETS` holds the
  configuration of each scenario.
- `maccormack.physics` — `PrimitiveState` (with `uniform(ny, nx)` and
  `fields()`), `conserved_from_primitive`, `primitive_from_conserved`,
  `x_flux`, `y_flux`, `max_signal_speed` and `radiative_source`.
- `maccormack.scenarios` — `Scenario` and the builders
  `kelvin_helmholtz_bands`, `kelvin_helmholtz`, `colliding_flows`,
  `sod_shock_tube`, `bow_shock`, `collapse` and `homogeneous_cooling`;
  masks from `no_boundary` and `circle_boundary`; `get_scenario(name)`
  builds a scenario with its preset configuration.
- `maccormack.solver` — `MacCormackSolver` with `step()`, returning a
  `StepInfo` (step, time, dt, max_speed), and `steps()`, which yields
  them until the end time is reached; `apply_outflow_boundaries` fills
  the edges of a conserved-variable stack in place.
- `maccormack.output` — `format_field`, `write_field`, `read_field` and
  `write_snapshot`.
- `maccormack.probes` — `TimeSeriesProbe` records one field at one cell
  (the centre by default) as `time,value` lines; `read_time_series`
  loads them back.
- `maccormack.cli` — `run_scenario` and `main`, behind the command above.

The time step is `cfl * dx / max_speed`, where the speed is the larger of
the sound speed and the flow speed over the whole grid.

## What it does not do

There is no plotting or visualisation of results, no restarting a run
from written field files, and no way to define a new scenario from the
command line; new problems are built in Python from a `SimulationConfig`,
a `PrimitiveState` and a boundary mask.