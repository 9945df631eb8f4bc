from __future__ import annotations

import numpy as np

from .base import WeightGenerator


class LatinHypercubeDesign:
    """
    Latin hypercube design in the unit cube of a given dimension.
    Every column places exactly one point in each of the ``n`` strata.
    """

    def __init__(self, dimension: int, rng: np.random.Generator | None = None) -> None:
        if dimension < 1:
            raise ValueError("dimension must be positive.")
        self.dimension = int(dimension)
        self.rng = rng or np.random.default_rng()

    def __call__(self, n_points: int) -> np.ndarray:
        n = int(n_points)
        samples = np.empty((n, self.dimension), dtype=float)
        for j in range(self.dimension):
            # Open strata (k + u) / n with u in (0, 1] keep every coordinate positive.
            strata = (np.arange(n, dtype=float) + 1.0 - self.rng.random(n)) / n
            self.rng.shuffle(strata)
            samples[:, j] = strata
        return samples


class LHDWeights(WeightGenerator):
    """Weight vectors from a Latin hypercube design, each row scaled onto the simplex."""

    name = "lhd"

    def __init__(self, seed: int | None = None) -> None:
        super().__init__()
        self.seed = seed

    def generate(self, count: int, dimension: int) -> np.ndarray:
        # One generator per request keeps the design reproducible for a seed.
        design = LatinHypercubeDesign(dimension, rng=np.random.default_rng(self.seed))(count)
        return design / design.sum(axis=1, keepdims=True)


__all__ = ["LHDWeights", "LatinHypercubeDesign"]
