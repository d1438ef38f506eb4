"""Command-line temperature sweep comparing Monte Carlo with exact 2x2 results."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence, TextIO

from .simulation import analytic_2x2, run_mcmc_simulation
from .utils import rel_err

_SUMMARY_HEADER = (
    "T,"
    "eps_MC,eps_analytic,rel_err_eps,"
    "abs_m_MC,abs_m_analytic,rel_err_abs_m,"
    "Cv_MC,Cv_analytic,"
    "chi_MC,chi_analytic\n"
)
_TRAJECTORY_HEADER = "T,cycle,eps,mean_eps\n"
_SEED_STRIDE = 7919
_UINT_MASK = 0xFFFFFFFF

_EPILOG = """\
Example:
  %(prog)s results 20 2.25 2.35 50 100000 42 --enable-ordered-initial-state

  This example runs a simulation on a 20x20 lattice, sweeping temperatures
  from 2.25 to 2.35 in 50 steps, with 100,000 Monte Carlo cycles per run,
  using seed 42, and starting from an ordered initial state.
"""


@dataclass
class SweepRow:
    """Monte Carlo and exact observables at one temperature."""

    T: float
    eps_mc: float
    eps_analytic: float
    rel_err_eps: float
    abs_m_mc: float
    abs_m_analytic: float
    rel_err_abs_m: float
    cv_mc: float
    cv_analytic: float
    chi_mc: float
    chi_analytic: float
    eps_trajectory: list[float] = field(default_factory=list)
    mean_eps_trajectory: list[float] = field(default_factory=list)


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    """Argument parser for the sweep command."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Monte Carlo simulation of the two-dimensional Ising model.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file_name_prefix", help="Prefix for output files")
    parser.add_argument("L", type=int, help="Lattice size (integer)")
    parser.add_argument("T_min", type=float, help="Minimum temperature")
    parser.add_argument("T_max", type=float, help="Maximum temperature")
    parser.add_argument(
        "T_count", type=int, help="Number of temperature points (including endpoints)"
    )
    parser.add_argument("N_MC_CYCLES", type=int, help="Number of Monte Carlo cycles per run")
    parser.add_argument("base_seed", type=int, help="Random seed for reproducibility")
    parser.add_argument(
        "--enable-ordered-initial-state",
        dest="ordered",
        action="store_true",
        help="Start simulation from an ordered spin configuration",
    )
    parser.add_argument(
        "--enable-trajectory-mode",
        dest="trajectory_mode",
        action="store_true",
        help="Enable the plotting of trajectories per T",
    )
    parser.add_argument(
        "--set-burnin",
        dest="burn_in_cycles",
        type=int,
        default=0,
        metavar="CYCLES",
        help="Set the burnin cycle count (default=0)",
    )
    return parser


def temperature_values(T_min: float, T_max: float, T_count: int) -> list[float]:
    """Evenly spaced temperatures from T_min to T_max, endpoints included."""
    if T_count < 2:
        raise ValueError("at least two temperature points are required")
    dT = (T_max - T_min) / (T_count - 1)
    return [T_min + i * dT for i in range(T_count)]


def _relative_error(num: float, exact: float) -> float:
    return rel_err(num, exact) if abs(exact) > 0.0 else 0.0


def run_sweep(
    L: int,
    T_min: float,
    T_max: float,
    T_count: int,
    n_cycles: int,
    base_seed: int,
    ordered: bool = False,
    burn_in_cycles: int = 0,
) -> list[SweepRow]:
    """Simulate every temperature of the sweep and pair it with the exact 2x2 values."""
    rows = []
    for i, T in enumerate(temperature_values(T_min, T_max, T_count)):
        seed = (base_seed + i + _SEED_STRIDE * n_cycles) & _UINT_MASK
        exact = analytic_2x2(T)
        mc = run_mcmc_simulation(L, T, n_cycles, ordered, seed, burn_in_cycles)
        rows.append(
            SweepRow(
                T=T,
                eps_mc=mc.mean_eps,
                eps_analytic=exact.eps,
                rel_err_eps=_relative_error(mc.mean_eps, exact.eps),
                abs_m_mc=mc.mean_abs_m,
                abs_m_analytic=exact.abs_m,
                rel_err_abs_m=_relative_error(mc.mean_abs_m, exact.abs_m),
                cv_mc=mc.Cv_per_spin,
                cv_analytic=exact.Cv_per_spin,
                chi_mc=mc.chi_per_spin,
                chi_analytic=exact.chi_per_spin,
                eps_trajectory=mc.eps_trajectory,
                mean_eps_trajectory=mc.mean_eps_trajectory,
            )
        )
    return rows


def write_summary_csv(stream: TextIO, rows: Iterable[SweepRow]) -> None:
    """Write one line of observables per temperature in scientific notation."""
    stream.write(_SUMMARY_HEADER)
    for row in rows:
        values = (
            row.T,
            row.eps_mc,
            row.eps_analytic,
            row.rel_err_eps,
            row.abs_m_mc,
            row.abs_m_analytic,
            row.rel_err_abs_m,
            row.cv_mc,
            row.cv_analytic,
            row.chi_mc,
            row.chi_analytic,
        )
        stream.write(",".join(f"{value:.12e}" for value in values) + "\n")


def write_trajectory_csv(stream: TextIO, rows: Iterable[SweepRow]) -> None:
    """Write the per-cycle energy and running mean for every temperature."""
    stream.write(_TRAJECTORY_HEADER)
    for row in rows:
        for cycle, (eps, mean_eps) in enumerate(
            zip(row.eps_trajectory, row.mean_eps_trajectory)
        ):
            stream.write(f"{row.T:g},{cycle},{eps:g},{mean_eps:g}\n")


def _resolve_output_folder() -> Path | None:
    folder = Path("../output/") if Path("../output/").exists() else Path("output/")
    while not folder.exists():
        try:
            answer = input("Enter path to output folder: ")
        except EOFError:
            return None
        if answer:
            folder = Path(answer)
    return folder


def main(argv: Sequence[str] | None = None) -> int:
    """Run the temperature sweep and write the CSV output; return the exit status."""
    parser = build_parser("isingmc")
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 1 if exc.code else 0

    folder = _resolve_output_folder()
    if folder is None:
        print("no output folder given", file=sys.stderr)
        return 1

    if args.trajectory_mode:
        state = "ordered" if args.ordered else "unordered"
        file_name = f"{args.file_name_prefix}_{state}_{args.N_MC_CYCLES}.csv"
    else:
        file_name = f"{args.file_name_prefix}_{args.N_MC_CYCLES}.csv"

    t_start = time.perf_counter()
    try:
        rows = run_sweep(
            args.L,
            args.T_min,
            args.T_max,
            args.T_count,
            args.N_MC_CYCLES,
            args.base_seed,
            args.ordered,
            args.burn_in_cycles,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - t_start
    print(f"Simulation loop wall time (threads: 1) = {elapsed} s")

    with open(folder / file_name, "w", newline="") as stream:
        if args.trajectory_mode:
            write_trajectory_csv(stream, rows)
        else:
            write_summary_csv(stream, rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())