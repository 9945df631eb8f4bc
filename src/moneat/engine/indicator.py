"""
R2 indicator bound to a cached weight vector generator.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from moneat.foundation.exceptions import ConfigurationError
from moneat.foundation.genotype import Genotype, population_fitness
from moneat.foundation.metrics.r2 import r2_contributions, r2_value

from .weights import HammersleyWeights, WeightGenerator

_logger = logging.getLogger(__name__)


class R2Indicator:
    """
    R2 value and per-point contributions of an objective matrix.

    Weight vectors are requested from the generator for the number of
    objectives of each call, so one instance serves fronts of any dimension
    and reuses the generator's cache between calls.

    Examples:
        indicator = R2Indicator(num_weight_vectors=50)
        value = indicator.value(F)
        shares = indicator.contributions(F)
    """

    name = "R2 Indicator"
    name_short = "R2"

    def __init__(
        self,
        weight_generator: WeightGenerator | None = None,
        num_weight_vectors: int = 100,
        ref_point: Sequence[float] | np.ndarray | None = None,
    ) -> None:
        if num_weight_vectors < 1:
            raise ConfigurationError(f"num_weight_vectors must be at least 1, got {num_weight_vectors}.")
        self.weight_generator = weight_generator or HammersleyWeights()
        self.num_weight_vectors = int(num_weight_vectors)
        self.ref_point = None if ref_point is None else np.asarray(ref_point, dtype=float)

    def weights(self, n_obj: int) -> np.ndarray:
        return self.weight_generator.get_weight_vectors(self.num_weight_vectors, n_obj)

    def value(self, F: np.ndarray) -> float:
        F = np.asarray(F, dtype=float)
        result = r2_value(F, self.weights(F.shape[-1]), self.ref_point)
        _logger.debug("R2 of %d points: %.6g", F.shape[0], result)
        return result

    def contributions(self, F: np.ndarray) -> np.ndarray:
        F = np.asarray(F, dtype=float)
        return r2_contributions(F, self.weights(F.shape[-1]), self.ref_point)

    def population_value(self, population: Sequence[Genotype]) -> float:
        return self.value(population_fitness(population))

    def population_contributions(self, population: Sequence[Genotype]) -> np.ndarray:
        return self.contributions(population_fitness(population))

    def __call__(self, F: np.ndarray) -> float:
        return self.value(F)


__all__ = ["R2Indicator"]
