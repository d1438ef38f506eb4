"""Two-dimensional square-lattice Ising model with Metropolis dynamics.

The Hamiltonian is ``E = -J * sum_<ij> s_i s_j`` over nearest neighbours on a
periodic ``L x L`` lattice with spins in ``{-1, +1}``. Units are chosen so that
``J = 1`` and ``k_B = 1``.
"""

from __future__ import annotations

import math
import random

_POSITIVE_DELTAS = (4, 8)


class IsingModel:
    """Periodic ``L x L`` Ising lattice updated by single-spin Metropolis moves."""

    def __init__(self, L: int, T: float, ordered: bool = False, seed: int | None = None) -> None:
        if L < 1:
            raise ValueError(f"lattice size must be positive, got {L}")
        self.L = L
        self.N = L * L
        self._rng = random.Random(seed)
        self._spins: list[list[int]] = [[1] * L for _ in range(L)]
        self._energy = 0
        self._magnetization = 0
        self._boltzmann: dict[int, float] = {}
        self.T = T
        self.beta = 0.0
        self.initialize(ordered)
        self.set_temperature(T)

    def initialize(self, ordered: bool = False) -> None:
        """Reset the spins (all +1 if ordered, else random) and recompute E and M."""
        if ordered:
            self._spins = [[1] * self.L for _ in range(self.L)]
        else:
            self._spins = [
                [2 * self._rng.randint(0, 1) - 1 for _ in range(self.L)]
                for _ in range(self.L)
            ]
        self._compute_total_magnetization()
        self._compute_total_energy()

    def set_temperature(self, T: float) -> None:
        """Set the temperature and recompute the Boltzmann acceptance weights."""
        if T == 0:
            raise ValueError("temperature must be nonzero")
        self.T = T
        self.beta = 1.0 / T
        self._boltzmann = {dE: math.exp(-self.beta * dE) for dE in _POSITIVE_DELTAS}

    def total_energy(self) -> float:
        """Current total energy E."""
        return float(self._energy)

    def energy_per_spin(self) -> float:
        """Energy per spin E / N."""
        return self._energy / self.N

    def magnetization(self) -> float:
        """Current total magnetisation M = sum of spins."""
        return float(self._magnetization)

    def magnetization_per_spin(self) -> float:
        """Magnetisation per spin M / N."""
        return self._magnetization / self.N

    def delta_energy(self, i: int, j: int) -> int:
        """Energy change from flipping the spin at (i, j); one of -8, -4, 0, 4, 8."""
        spins = self._spins
        neighbour_sum = (
            spins[self._pbc(i - 1)][j]
            + spins[self._pbc(i + 1)][j]
            + spins[i][self._pbc(j - 1)]
            + spins[i][self._pbc(j + 1)]
        )
        return 2 * spins[i][j] * neighbour_sum

    def metropolis_update(self) -> bool:
        """Propose one random spin flip; return True if it was accepted."""
        i = self._rng.randrange(self.L)
        j = self._rng.randrange(self.L)
        dE = self.delta_energy(i, j)
        if dE <= 0 or self._rng.random() < self._boltzmann[dE]:
            self._accept_flip(i, j, dE)
            return True
        return False

    def spins(self) -> tuple[tuple[int, ...], ...]:
        """Read-only snapshot of the spin configuration, indexed [row][column]."""
        return tuple(tuple(row) for row in self._spins)

    def _pbc(self, idx: int) -> int:
        return idx % self.L

    def _compute_total_magnetization(self) -> None:
        self._magnetization = sum(sum(row) for row in self._spins)

    def _compute_total_energy(self) -> None:
        # Counts each bond once via the right and down neighbours; for L = 2
        # this double-counts, matching the reference convention.
        spins = self._spins
        energy = 0
        for i, row in enumerate(spins):
            below = spins[self._pbc(i + 1)]
            for j, s in enumerate(row):
                energy -= s * (row[self._pbc(j + 1)] + below[j])
        self._energy = energy

    def _accept_flip(self, i: int, j: int, dE: int) -> None:
        old = self._spins[i][j]
        self._spins[i][j] = -old
        self._energy += dE
        self._magnetization -= 2 * old