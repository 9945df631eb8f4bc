from __future__ import annotations

import numpy as np
import pytest

from moneat.engine.selection import (
    LinearRankSelection,
    equal_distribution,
    linear_distribution,
    roulette_wheel,
    select_indices,
    select_rank_indices,
)
from moneat.foundation.exceptions import (
    ConfigurationError,
    ContractError,
    MalformedDistributionError,
    SelectionSizeError,
)


def test_linear_distribution_without_pressure_is_uniform() -> None:
    cum = linear_distribution(3, 1.0)
    np.testing.assert_allclose(cum, [1.0, 2.0 / 3.0, 1.0 / 3.0])
    np.testing.assert_allclose(cum, equal_distribution(3))


def test_linear_distribution_raw_probabilities() -> None:
    p = linear_distribution(4, 2.0, additive=False)
    # f1 = 0, f2 = 2 / 12
    np.testing.assert_allclose(p, [0.5, 1.0 / 3.0, 1.0 / 6.0, 0.0])
    assert p.sum() == pytest.approx(1.0)
    assert np.all(np.diff(p) <= 0.0)


def test_linear_distribution_cumulative_starts_at_one() -> None:
    cum = linear_distribution(10, 1.6)
    assert cum[0] == pytest.approx(1.0)
    assert np.all(np.diff(cum) < 0.0)


def test_linear_distribution_edge_cases() -> None:
    np.testing.assert_allclose(linear_distribution(1, 1.8), [1.0])
    with pytest.raises(ConfigurationError):
        linear_distribution(5, 2.5)
    with pytest.raises(ConfigurationError):
        linear_distribution(5, 0.5, bounds=(1.0, 1.5))
    with pytest.raises(MalformedDistributionError):
        equal_distribution(0)


def test_roulette_wheel_returns_valid_index() -> None:
    rng = np.random.default_rng(0)
    p = linear_distribution(6, 1.7, additive=False)
    draws = [roulette_wheel(p, rng) for _ in range(500)]
    assert all(0 <= d < 6 for d in draws)
    # the best rank is drawn more often than the worst
    assert draws.count(0) > draws.count(5)


def test_roulette_wheel_single_entry_and_malformed() -> None:
    rng = np.random.default_rng(1)
    assert roulette_wheel([1.0], rng) == 0
    assert roulette_wheel([0.0, 0.0], rng) == -1


def test_sus_returns_exact_amount_in_range() -> None:
    rng = np.random.default_rng(42)
    cum = linear_distribution(7, 1.5)
    for amount in (1, 3, 7, 20):
        idx = select_indices(cum, amount, rng)
        assert idx.shape == (amount,)
        assert np.all((idx >= 0) & (idx < 7))


def test_sus_is_proportional_for_uniform_distribution() -> None:
    rng = np.random.default_rng(5)
    idx = select_indices(equal_distribution(4), 8, rng)
    assert sorted(np.bincount(idx, minlength=4).tolist()) == [2, 2, 2, 2]


def test_sus_repeats_dominant_index() -> None:
    rng = np.random.default_rng(9)
    cum = np.array([1.0, 0.0, 0.0])
    assert select_indices(cum, 4, rng).tolist() == [0, 0, 0, 0]


def test_sus_rejects_malformed_distribution() -> None:
    with pytest.raises(MalformedDistributionError):
        select_indices([0.5, 0.25], 2)
    with pytest.raises(MalformedDistributionError):
        select_indices([], 2)
    assert select_indices([1.0], 0).size == 0


def test_select_rank_indices_offsets_range() -> None:
    rng = np.random.default_rng(2)
    idx = select_rank_indices(10, 14, 6, 1.5, rng)
    assert idx.shape == (6,)
    assert np.all((idx >= 10) & (idx <= 14))


def test_linear_rank_selection_callable() -> None:
    selection = LinearRankSelection(2.0, rng=np.random.default_rng(3))
    population = list(range(5))
    parents = selection(population, 10)
    assert parents.shape == (10,)
    assert np.all((parents >= 0) & (parents < 5))
    # the worst rank has zero probability at maximum pressure
    assert 4 not in parents.tolist()
    with pytest.raises(SelectionSizeError):
        selection([], 2)
    with pytest.raises(ConfigurationError):
        LinearRankSelection(3.0)


def test_negative_amount_is_a_contract_error() -> None:
    with pytest.raises(ContractError) as excinfo:
        select_indices(linear_distribution(4, 1.5), -1, np.random.default_rng(0))
    assert isinstance(excinfo.value, SelectionSizeError)
    assert excinfo.value.details == {"amount": -1, "pool_size": 4}
