"""
Uniform design by the Hammersley method.

Source: Berenguer, José A. Molinet, and Carlos A. Coello Coello. "Evolutionary
many-objective optimization based on Kuhn-Munkres' algorithm." EMO 2015.
"""

from __future__ import annotations

import numpy as np

from .base import WeightGenerator


def first_primes(k: int) -> list[int]:
    """The first ``k`` prime numbers."""
    primes: list[int] = []
    candidate = 2
    while len(primes) < k:
        if all(candidate % p for p in primes if p * p <= candidate):
            primes.append(candidate)
        candidate += 1
    return primes


def radical_inverse(i: int, base: int) -> float:
    """Van der Corput radical inverse of ``i`` in ``base``."""
    value = 0.0
    f = 1.0 / base
    while i > 0:
        value += f * (i % base)
        i //= base
        f /= base
    return value


def hammersley_design(count: int, dimension: int) -> np.ndarray:
    """``count`` design points in ``dimension - 1`` dimensions."""
    n_design = dimension - 1
    primes = first_primes(max(dimension - 2, 0))
    design = np.empty((count, n_design), dtype=float)
    for i in range(1, count + 1):
        if n_design > 0:
            design[i - 1, 0] = (2.0 * i - 1.0) / (2.0 * count)
        for j in range(1, n_design):
            design[i - 1, j] = radical_inverse(i, primes[j - 1])
    return design


def design_to_weights(design: np.ndarray) -> np.ndarray:
    """Map design points onto the unit simplex."""
    count, n_design = design.shape
    dimension = n_design + 1
    weights = np.empty((count, dimension), dtype=float)
    # Exponent of design coordinate k is 1 / (dimension - k - 1).
    powered = design ** (1.0 / (dimension - 1 - np.arange(n_design)))
    for k in range(dimension):
        w = 1.0 if k == n_design else 1.0 - powered[:, k]
        weights[:, k] = w * np.prod(powered[:, :k], axis=1)
    return weights


class HammersleyWeights(WeightGenerator):
    """Weight vectors from a Hammersley low-discrepancy design."""

    name = "hammersley"

    def generate(self, count: int, dimension: int) -> np.ndarray:
        return design_to_weights(hammersley_design(count, dimension))


__all__ = ["HammersleyWeights", "design_to_weights", "first_primes", "hammersley_design", "radical_inverse"]
