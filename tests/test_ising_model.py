import pytest

from isingmc.ising_model import IsingModel


def _flat(model):
    return [s for row in model.spins() for s in row]


@pytest.mark.parametrize("L", [2, 3, 5, 10])
def test_ordered_state_energy_and_magnetization(L):
    model = IsingModel(L, 1.0, ordered=True, seed=1)
    n = L * L
    assert model.magnetization() == n
    assert model.magnetization_per_spin() == 1.0
    assert model.total_energy() == -2 * n
    assert model.energy_per_spin() == -2.0


def test_ordered_2x2_energy_per_spin_is_minus_two():
    model = IsingModel(2, 2.0, ordered=True, seed=0)
    assert model.energy_per_spin() == -2.0


def test_ordered_spins_all_up():
    model = IsingModel(4, 1.0, ordered=True, seed=3)
    assert set(_flat(model)) == {1}
    assert len(model.spins()) == 4
    assert all(len(row) == 4 for row in model.spins())


def test_delta_energy_ordered_is_maximal():
    model = IsingModel(4, 1.0, ordered=True, seed=3)
    assert all(model.delta_energy(i, j) == 8 for i in range(4) for j in range(4))


def test_random_spins_values_and_magnetization():
    model = IsingModel(8, 1.0, ordered=False, seed=42)
    flat = _flat(model)
    assert set(flat) <= {-1, 1}
    assert model.magnetization() == sum(flat)


def test_same_seed_reproducible():
    a = IsingModel(6, 2.3, seed=123)
    b = IsingModel(6, 2.3, seed=123)
    assert a.spins() == b.spins()
    results_a = [a.metropolis_update() for _ in range(500)]
    results_b = [b.metropolis_update() for _ in range(500)]
    assert results_a == results_b
    assert a.spins() == b.spins()
    assert a.total_energy() == b.total_energy()


def test_delta_energy_values_in_allowed_set():
    model = IsingModel(7, 2.0, seed=9)
    for _ in range(200):
        model.metropolis_update()
    values = {model.delta_energy(i, j) for i in range(7) for j in range(7)}
    assert values <= {-8, -4, 0, 4, 8}


def test_accepted_flip_updates_energy_by_delta():
    model = IsingModel(5, 2.5, seed=11)
    for _ in range(300):
        before = model.spins()
        deltas = {(i, j): model.delta_energy(i, j) for i in range(5) for j in range(5)}
        energy_before = model.total_energy()
        m_before = model.magnetization()
        accepted = model.metropolis_update()
        after = model.spins()
        changed = [
            (i, j) for i in range(5) for j in range(5) if before[i][j] != after[i][j]
        ]
        if accepted:
            assert len(changed) == 1
            (i, j) = changed[0]
            assert model.total_energy() - energy_before == deltas[(i, j)]
            assert model.magnetization() - m_before == -2 * before[i][j]
        else:
            assert changed == []
            assert model.total_energy() == energy_before


def test_magnetization_tracks_spins_after_updates():
    model = IsingModel(6, 3.0, seed=5)
    for _ in range(1000):
        model.metropolis_update()
    assert model.magnetization() == sum(_flat(model))
    assert model.magnetization_per_spin() == pytest.approx(sum(_flat(model)) / 36)


def test_energy_consistent_with_reinitialize_from_same_state():
    model = IsingModel(4, 2.0, seed=2)
    for _ in range(200):
        model.metropolis_update()
    assert model.energy_per_spin() * 16 == pytest.approx(model.total_energy())


def test_low_temperature_rejects_from_ordered_state():
    model = IsingModel(4, 0.01, ordered=True, seed=7)
    results = [model.metropolis_update() for _ in range(200)]
    assert not any(results)
    assert model.magnetization() == 16


def test_high_temperature_accepts_from_ordered_state():
    model = IsingModel(4, 1e9, ordered=True, seed=7)
    assert model.metropolis_update() is True
    assert model.magnetization() == 14


def test_set_temperature_changes_acceptance():
    model = IsingModel(4, 1e9, ordered=True, seed=8)
    model.set_temperature(0.01)
    assert model.T == 0.01
    assert not any(model.metropolis_update() for _ in range(100))


def test_initialize_resets_to_ordered():
    model = IsingModel(5, 2.0, seed=4)
    for _ in range(100):
        model.metropolis_update()
    model.initialize(ordered=True)
    assert set(_flat(model)) == {1}
    assert model.magnetization() == 25
    assert model.energy_per_spin() == -2.0


def test_spins_snapshot_is_immutable():
    model = IsingModel(3, 1.0, ordered=True, seed=0)
    snapshot = model.spins()
    with pytest.raises(TypeError):
        snapshot[0][0] = -1  # type: ignore[index]
    assert snapshot[0][0] == 1
    assert model.spins()[0][0] == 1
    assert model.magnetization() == 9


def test_invalid_lattice_size():
    with pytest.raises(ValueError):
        IsingModel(0, 1.0)


def test_zero_temperature_rejected():
    with pytest.raises(ValueError):
        IsingModel(3, 0.0)