# isingmc

This package runs Monte Carlo simulations of the two-dimensional Ising model
on a periodic L×L square lattice. It uses single-spin-flip Metropolis dynamics,
in units where J = 1 and k_B = 1.

For each temperature in a sweep it estimates:

- the mean energy per spin ⟨ε⟩
- the mean absolute magnetisation per spin ⟨|m|⟩
- the heat capacity per spin C_V / N
- the susceptibility per spin χ / N

It also computes the exact values for the 2×2 lattice. Use them as a reference
to check the simulation.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
isingmc <file_name_prefix> <L> <T_min> <T_max> <T_count> <N_MC_CYCLES> <base_seed> [options]
```

Options:

- `--enable-ordered-initial-state`: start every run with all spins set to +1.
- `--enable-trajectory-mode`: for each temperature, write the energy per spin and
  its running mean for every measured cycle. This replaces the summary table.
- `--set-burnin CYCLES`: simulate the first `CYCLES` cycles without measuring
  them. The default is 0.

Example:

```
isingmc results 20 2.25 2.35 50 100000 42 --enable-ordered-initial-state
```

This runs a 20×20 lattice at 50 evenly spaced temperatures from 2.25 to 2.35,
endpoints included. Each run has 100,000 cycles and starts from an ordered state.

### Seeds

Each temperature gets its own seed, computed as
`base_seed + i + 7919 * N_MC_CYCLES`, where `i` is the temperature index. The
seed is reduced to 32 bits.

### Output folder

The CSV file is written to `../output/` if that folder exists, otherwise to
`output/`. If neither exists, the command prompts for a folder path until it
gets one that exists. If input ends before that, the command exits with status 1.

### Output files

The mode decides the file name and the columns:

- **Summary mode** writes `<prefix>_<N_MC_CYCLES>.csv`, with one row per
  temperature and values in scientific notation with 12 digits:
  `T,eps_MC,eps_analytic,rel_err_eps,abs_m_MC,abs_m_analytic,rel_err_abs_m,Cv_MC,Cv_analytic,chi_MC,chi_analytic`.
  The relative errors are measured against the exact 2×2 values. When an exact
  value is zero, its relative error is written as 0.
- **Trajectory mode** writes `<prefix>_<ordered|unordered>_<N_MC_CYCLES>.csv`,
  with the columns `T,cycle,eps,mean_eps`.

After the sweep, the command prints the wall time of the simulation loop.

### Errors

The command exits with status 1 in these cases:

- `T_count` is less than 2.
- The burn-in is negative.
- The burn-in leaves no cycles to measure.
- The arguments cannot be parsed.

## Library use

```python
from isingmc.ising_model import IsingModel
from isingmc.simulation import run_mcmc_simulation, analytic_2x2
from isingmc.utils import rel_err

model = IsingModel(2, 1.0, True, 42)
accepted = model.metropolis_update()
print(model.energy_per_spin(), model.magnetization_per_spin())
print(model.spins())          # tuple of rows, entries ±1
print(model.delta_energy(0, 0))

results = run_mcmc_simulation(2, 1.0, 10_000, False, 7, 0)
exact = analytic_2x2(1.0)
print(results.mean_eps, exact.eps, rel_err(results.mean_eps, exact.eps))
```

The modules are:

- `isingmc.ising_model.IsingModel` is the lattice. It provides:
  - `initialize(ordered)`
  - `set_temperature(T)`
  - `total_energy()` and `energy_per_spin()`
  - `magnetization()` and `magnetization_per_spin()`
  - `delta_energy(i, j)`
  - `metropolis_update()`
  - `spins()`
- `isingmc.simulation` provides:
  - `run_mcmc_simulation`, which returns an `MCResults`.
  - `analytic_2x2`, which returns an `AnalyticObservables`.
- `isingmc.cli` provides:
  - `build_parser`
  - `temperature_values`
  - `run_sweep`, which returns a list of `SweepRow`.
  - `write_summary_csv`
  - `write_trajectory_csv`
  - `main`
- `isingmc.utils.rel_err` computes |num − exact| / |exact|. It raises
  `ValueError` when `exact` is zero.

## Limitations

- The temperatures in a sweep run one after another in a single process. They
  are not run in parallel.
- The package writes CSV files only. It does not produce plots.