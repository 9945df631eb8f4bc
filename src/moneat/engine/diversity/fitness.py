from __future__ import annotations

from typing import Sequence

import numpy as np

from moneat.foundation.genotype import Genotype, population_fitness

from .base import DiversityMetric


class FitnessDiversity(DiversityMetric[Genotype]):
    """Objective-space diversity: one dimension per fitness component, values left as they are."""

    id = 1
    name = "Objective Space"
    name_short = "OS"

    def get_data(self, population: Sequence[Genotype]) -> list[np.ndarray]:
        F = population_fitness(population)
        return [F[:, k].copy() for k in range(F.shape[1])]


__all__ = ["FitnessDiversity"]
