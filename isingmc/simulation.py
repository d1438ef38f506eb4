"""Monte Carlo sampling of the Ising model and exact 2x2 reference values."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .ising_model import IsingModel


@dataclass
class MCResults:
    """Ensemble averages from one Markov chain Monte Carlo run (J = k_B = 1)."""

    mean_eps: float
    mean_abs_m: float
    Cv_per_spin: float
    chi_per_spin: float
    eps_trajectory: list[float] = field(default_factory=list)
    mean_eps_trajectory: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class AnalyticObservables:
    """Exact observables of the periodic 2x2 lattice."""

    eps: float
    abs_m: float
    Cv_per_spin: float
    chi_per_spin: float


def run_mcmc_simulation(
    L: int,
    T: float,
    n_cycles: int,
    ordered: bool = False,
    seed: int | None = None,
    burn_in_cycles: int = 0,
) -> MCResults:
    """Run ``n_cycles`` Metropolis cycles of ``L * L`` attempted flips each.

    The first ``burn_in_cycles`` cycles are simulated but not measured.
    """
    if burn_in_cycles < 0:
        raise ValueError("burn-in cycle count must not be negative")
    n_measured = n_cycles - burn_in_cycles
    if n_measured <= 0:
        raise ValueError("at least one measured cycle is required after burn-in")

    model = IsingModel(L, T, ordered, seed)
    n_spins = model.N

    sum_eps = 0.0
    sum_eps2 = 0.0
    sum_abs_m = 0.0
    sum_m2 = 0.0
    eps_trajectory: list[float] = []
    mean_eps_trajectory: list[float] = []

    for cycle in range(n_cycles):
        for _ in range(n_spins):
            model.metropolis_update()

        if cycle < burn_in_cycles:
            continue

        eps = model.energy_per_spin()
        m = model.magnetization_per_spin()
        sum_eps += eps
        sum_eps2 += eps * eps
        sum_abs_m += abs(m)
        sum_m2 += m * m

        eps_trajectory.append(eps)
        mean_eps_trajectory.append(sum_eps / (cycle + 1))

    mean_eps = sum_eps / n_measured
    mean_abs_m = sum_abs_m / n_measured
    cv = n_spins / (T * T) * (sum_eps2 / n_measured - mean_eps * mean_eps)
    chi = n_spins / T * (sum_m2 / n_measured - mean_abs_m * mean_abs_m)

    return MCResults(mean_eps, mean_abs_m, cv, chi, eps_trajectory, mean_eps_trajectory)


def analytic_2x2(T: float) -> AnalyticObservables:
    """Closed-form observables of the 2x2 periodic Ising lattice at temperature T."""
    if T == 0:
        raise ValueError("temperature must be nonzero")
    k = 1.0 / T
    e8k = math.exp(8.0 * k)
    e_8k = math.exp(-8.0 * k)
    z = 4.0 * math.cosh(8.0 * k) + 12.0

    eps = -(4.0 / z) * (e8k - e_8k)
    abs_m = (2.0 / z) * (e8k + 2.0)

    mean_eps2 = (8.0 / z) * (e8k + e_8k)
    cv = 4.0 / (T * T) * (mean_eps2 - eps * eps)

    mean_m2 = (2.0 * e8k + 2.0) / z
    mean_abs_m = (2.0 * e8k + 4.0) / z
    chi = 4.0 / T * (mean_m2 - mean_abs_m * mean_abs_m)

    return AnalyticObservables(eps, abs_m, cv, chi)