"""Command-line driver: run a preset scenario and write its output files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from maccormack.output import write_field, write_snapshot
from maccormack.probes import TimeSeriesProbe
from maccormack.scenarios import Scenario, available_scenarios, get_scenario
from maccormack.solver import MacCormackSolver

_HYDRO_FIELDS = ("u", "v", "rho", "p")
_MAGNETIC_FIELDS = ("Bx", "By")


def _snapshot_names(scenario: Scenario) -> tuple[str, ...]:
    if scenario.config.magnetic:
        return _HYDRO_FIELDS + _MAGNETIC_FIELDS
    return _HYDRO_FIELDS


def run_scenario(scenario: Scenario, output_dir="./output",
                 stream: TextIO | None = None) -> MacCormackSolver:
    """Run a scenario to its end time, writing fields and a pressure probe.

    Writes the boundary mask and starting fields with suffix 0, the pressure
    at the centre cell after every step to p_vs_t.txt, periodic snapshots
    every ``print_every`` steps and the final fields without a suffix.
    Returns the solver in its final state.
    """
    out = sys.stdout if stream is None else stream
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    names = _snapshot_names(scenario)
    config = scenario.config

    solver = MacCormackSolver(config, scenario.state, scenario.internal_boundary)
    write_field(scenario.internal_boundary, directory / "bound-0.txt")
    write_snapshot(solver.state, directory, 0, names)

    probe = TimeSeriesProbe(directory / "p_vs_t.txt", field="p")
    out.write("Running McMormick Scheme\n\n")
    for info in solver.steps():
        state = solver.state
        probe.record(info.time, state)
        if info.step % config.print_every == 0:
            out.write(
                f"t = {info.time:f}, step = {info.step} , "
                f"maxV = {info.max_speed:f}, dt = {info.dt:f}\n"
            )
            write_snapshot(state, directory, info.step, names)

    out.write(f"Simulation ended at step {solver.step_count} at time {solver.time:f} \n")
    write_snapshot(solver.state, directory, None, names)
    return solver


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maccormack",
        description="Run a preset MHD problem with the MacCormack scheme.",
    )
    parser.add_argument("scenario", choices=available_scenarios(),
                        help="name of the preset problem")
    parser.add_argument("--output-dir", default="./output",
                        help="directory for the field files (default: ./output)")
    parser.add_argument("--t-end", type=float, default=None,
                        help="override the end time of the preset")
    parser.add_argument("--print-every", type=int, default=None,
                        help="override the number of steps between snapshots")
    return parser


def main(argv=None) -> int:
    """Entry point of the command; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    scenario = get_scenario(args.scenario)
    changes = {}
    if args.t_end is not None:
        changes["t_end"] = args.t_end
    if args.print_every is not None:
        changes["print_every"] = args.print_every
    try:
        if changes:
            scenario = Scenario(
                scenario.name,
                scenario.config.replace(**changes),
                scenario.state,
                scenario.internal_boundary,
            )
        run_scenario(scenario, args.output_dir, sys.stdout)
    except (ValueError, FloatingPointError, OSError) as error:
        print(f"maccormack: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())