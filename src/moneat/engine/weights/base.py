from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import numpy as np

_logger = logging.getLogger(__name__)


def assert_valid_weights(weights: np.ndarray, n_obj: int, tol: float = 1e-9) -> None:
    if weights.ndim != 2:
        raise ValueError("Weight matrix must be 2D.")
    if weights.shape[1] != n_obj:
        raise ValueError(f"Expected weight vectors with {n_obj} columns, got {weights.shape[1]}.")
    if np.any(weights < -tol):
        raise ValueError("Weight vectors must be non-negative.")
    if weights.shape[0] and np.any(np.abs(weights.sum(axis=1) - 1.0) > tol):
        raise ValueError("Each weight vector must sum to 1.")


class WeightGenerator(ABC):
    """
    Generates simplex weight vectors (e.g. for the R2 indicator) and caches one
    set per number of objectives for the lifetime of the instance.
    """

    name: str = ""

    def __init__(self) -> None:
        self._cache: dict[int, np.ndarray] = {}

    def get_weight_vectors(self, count: int, dimension: int) -> np.ndarray:
        """
        Return at least ``count`` weight vectors of length ``dimension``.

        A cached set that already holds ``count`` or more vectors is returned
        unchanged; otherwise a new set is generated and replaces it.
        """
        if count < 0 or dimension < 1:
            raise ValueError(f"Invalid weight request: count={count}, dimension={dimension}.")
        cached = self._cache.get(dimension)
        if cached is not None and cached.shape[0] >= count:
            return cached

        weights = np.asarray(self.generate(count, dimension), dtype=float)
        assert_valid_weights(weights, dimension)
        weights.setflags(write=False)
        self._cache[dimension] = weights
        _logger.debug("%s generated %d weight vectors for %d objectives", type(self).__name__, count, dimension)
        return weights

    def clear(self) -> None:
        self._cache.clear()

    def cached_dimensions(self) -> list[int]:
        return sorted(self._cache)

    @abstractmethod
    def generate(self, count: int, dimension: int) -> np.ndarray:
        """Create exactly ``count`` weight vectors of length ``dimension``."""


__all__ = ["WeightGenerator", "assert_valid_weights"]
