from __future__ import annotations

from collections import defaultdict
from typing import Sequence

import numpy as np

from moneat.foundation.genotype import NetworkGenotype

from .base import DiversityMetric


class NetworkDiversity(DiversityMetric[NetworkGenotype]):
    """Decision-space diversity of network genomes, one dimension per innovation id."""

    id = 0
    name = "Decision Space"
    name_short = "DS"

    def get_data(self, population: Sequence[NetworkGenotype]) -> list[np.ndarray]:
        weights: dict[int, list[float]] = defaultdict(list)
        for genome in population:
            for link in genome.links:
                weights[link.innovation_id].append(link.weight)

        data = []
        for key in sorted(weights):
            values = weights[key]
            # A singleton innovation still contributes some diversity.
            if len(values) == 1:
                values.append(self.neutral_element)

            arr = np.asarray(values, dtype=float)
            lo = arr.min()
            span = arr.max() - lo
            if span > 0.0:
                arr = (arr - lo) / span
            data.append(arr)
        return data


__all__ = ["NetworkDiversity"]
