"""
Rank-based selection over discrete probability distributions.

Distributions are indexed by rank: index 0 is the best solution, index k-1 the
worst. The cumulative ("additive") form is built by suffix summation, so entry
i holds the probability mass of ranks i..k-1 and entry 0 equals 1.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from moneat.foundation.exceptions import ConfigurationError, MalformedDistributionError, SelectionSizeError

DEFAULT_PRESSURE_BOUNDS: tuple[float, float] = (1.0, 2.0)
CUMULATIVE_TOLERANCE = 1e-9


def _suffix_sum(p: np.ndarray) -> np.ndarray:
    return np.cumsum(p[::-1])[::-1].copy()


def _check_steps(steps: int) -> int:
    steps = int(steps)
    if steps < 1:
        raise MalformedDistributionError(f"A distribution needs at least one step, got {steps}.")
    return steps


def linear_distribution(
    steps: int,
    selection_pressure: float,
    additive: bool = True,
    bounds: tuple[float, float] = DEFAULT_PRESSURE_BOUNDS,
) -> np.ndarray:
    """
    Linearly decreasing selection probabilities over ``steps`` ranks.

        p(i) = f1 + f2 * (n - (i + 1)),  f1 = (2 - s) / n,  f2 = 2 (s - 1) / (n (n - 1))

    Args:
        steps: Number of ranks n.
        selection_pressure: s; 1.0 yields the uniform distribution, 2.0 the steepest one.
        additive: Return the cumulative (suffix-summed) form.
        bounds: Admissible range of s.
    """
    steps = _check_steps(steps)
    lo, hi = bounds
    s = float(selection_pressure)
    if not lo <= s <= hi:
        raise ConfigurationError(
            f"Selection pressure must be in [{lo}, {hi}], got {s}.",
            details={"selection_pressure": s, "bounds": (lo, hi)},
        )

    if steps == 1:
        return np.ones(1, dtype=float)

    f1 = (2.0 - s) / steps
    f2 = (2.0 * (s - 1.0)) / (steps * (steps - 1))
    distribution = f1 + f2 * (steps - (np.arange(steps) + 1))

    return _suffix_sum(distribution) if additive else distribution


def equal_distribution(steps: int) -> np.ndarray:
    """Cumulative uniform distribution over ``steps`` ranks."""
    steps = _check_steps(steps)
    return _suffix_sum(np.full(steps, 1.0 / steps))


def roulette_wheel(distribution: Sequence[float] | np.ndarray, rng: np.random.Generator | None = None) -> int:
    """
    Draw one index from raw (non-cumulative) selection probabilities.

    The draw is consumed from the worst index downward; returns -1 if the
    probabilities do not cover the draw.
    """
    rng = rng or np.random.default_rng()
    value = rng.random()
    p = np.asarray(distribution, dtype=float)
    for index in range(p.shape[0] - 1, -1, -1):
        value -= p[index]
        if value <= 0.0:
            return index
    return -1


def select_indices(
    distribution: Sequence[float] | np.ndarray,
    amount: int,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """
    Stochastic universal sampling over a cumulative distribution.

    ``amount`` evenly spaced pointers with a random offset in ``[0, 1/amount)``
    sweep the cumulative curve from the worst index upward. Indices can repeat.
    """
    cum = np.asarray(distribution, dtype=float)
    amount = int(amount)
    if amount < 0:
        raise SelectionSizeError(f"amount must be non-negative, got {amount}.", amount=amount, pool_size=int(cum.size))
    if cum.ndim != 1 or cum.size == 0:
        raise MalformedDistributionError("Cumulative distribution must be a non-empty 1-D sequence.")
    if abs(cum[0] - 1.0) > CUMULATIVE_TOLERANCE:
        raise MalformedDistributionError(f"Cumulative distribution must start at 1.0, got {cum[0]}.")

    result = np.full(amount, -1, dtype=int)
    if amount == 0:
        return result

    rng = rng or np.random.default_rng()
    step = 1.0 / amount
    r = rng.random() * step
    current = 0

    for index in range(cum.size - 1, -1, -1):
        # Index 0 takes every remaining pointer; guards against rounding below 1.0.
        limit = cum[index] if index > 0 else max(cum[0], 1.0)
        while r <= limit:
            result[current] = index
            current += 1
            if current == amount:
                return result
            r += step

    return result


def select_rank_indices(
    low: int,
    high: int,
    amount: int,
    selection_pressure: float,
    rng: np.random.Generator | None = None,
    bounds: tuple[float, float] = DEFAULT_PRESSURE_BOUNDS,
) -> np.ndarray:
    """SUS over a linear rank distribution of the index range [low, high]."""
    steps = int(high) - int(low) + 1
    return select_indices(linear_distribution(steps, selection_pressure, bounds=bounds), amount, rng) + int(low)


class LinearRankSelection:
    """
    Parent selection for populations sorted best first.

    Builds the linear rank distribution once per population size and draws
    ``n_parents`` indices by stochastic universal sampling.
    """

    def __init__(
        self,
        selection_pressure: float = 1.5,
        rng: np.random.Generator | None = None,
        bounds: tuple[float, float] = DEFAULT_PRESSURE_BOUNDS,
    ) -> None:
        lo, hi = bounds
        if not lo <= selection_pressure <= hi:
            raise ConfigurationError(f"Selection pressure must be in [{lo}, {hi}], got {selection_pressure}.")
        self.selection_pressure = float(selection_pressure)
        self.bounds = (float(lo), float(hi))
        self.rng = rng or np.random.default_rng()
        self._cache: dict[int, np.ndarray] = {}

    def distribution(self, pop_size: int) -> np.ndarray:
        if pop_size not in self._cache:
            self._cache[pop_size] = linear_distribution(pop_size, self.selection_pressure, bounds=self.bounds)
        return self._cache[pop_size]

    def __call__(self, population: Sequence[object], n_parents: int) -> np.ndarray:
        pop_size = len(population)
        if pop_size == 0:
            raise SelectionSizeError("Cannot select parents from an empty population.", amount=n_parents, pool_size=0)
        return select_indices(self.distribution(pop_size), n_parents, self.rng)


__all__ = [
    "LinearRankSelection",
    "equal_distribution",
    "linear_distribution",
    "roulette_wheel",
    "select_indices",
    "select_rank_indices",
]
