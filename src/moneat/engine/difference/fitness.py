from __future__ import annotations

import numpy as np

from moneat.foundation.exceptions import FitnessDimensionError
from moneat.foundation.genotype import Genotype, require_fitness

from .base import DifferenceMetric


class FitnessDifference(DifferenceMetric[Genotype]):
    """Squared Euclidean distance of two genotypes in objective space."""

    name = "fitness"

    def difference(self, a: Genotype, b: Genotype) -> float:
        fa = require_fitness(a)
        fb = require_fitness(b)
        if fa.shape != fb.shape:
            raise FitnessDimensionError(fa.shape[0], fb.shape[0])
        diff = fa - fb
        return float(np.dot(diff, diff))


__all__ = ["FitnessDifference"]
