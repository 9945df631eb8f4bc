from __future__ import annotations

import logging

from moneat.foundation.exceptions import ConfigurationError
from moneat.foundation.genotype import NetworkGenotype

from .alignment import GenomeAlignment, align
from .base import DifferenceMetric

_logger = logging.getLogger(__name__)


class NetworkDifference(DifferenceMetric[NetworkGenotype]):
    """
    Difference between two network genomes based on Stanley's compatibility distance.

    The structural term weights excess and disjoint genes and is normalized by
    the longer genome. The weight term averages the weight gap over common genes
    and is capped at ``c1_excess`` so it cannot outweigh the structural counts.
    The result is the mean of both terms.
    """

    name = "network"

    def __init__(self, c1_excess: float = 1.0, c2_disjoint: float = 1.0, c3_weight: float = 0.4) -> None:
        for label, value in (("c1_excess", c1_excess), ("c2_disjoint", c2_disjoint), ("c3_weight", c3_weight)):
            if value < 0.0:
                raise ConfigurationError(
                    f"Difference coefficient {label} must be non-negative, got {value}.",
                    details={label: value},
                )
        self.c1_excess = float(c1_excess)
        self.c2_disjoint = float(c2_disjoint)
        self.c3_weight = float(c3_weight)

    def score(self, alignment: GenomeAlignment) -> float:
        """Combine the alignment counts into one difference value."""
        if alignment.longest_genome > 0:
            structural = (
                self.c1_excess * alignment.num_excess + self.c2_disjoint * alignment.num_disjoint
            ) / alignment.longest_genome
        else:
            structural = 0.0

        if alignment.num_common > 0:
            weights = (self.c3_weight * alignment.weight_difference) / alignment.num_common
            weights = min(weights, self.c1_excess)
        else:
            weights = 0.0

        return (structural + weights) / 2.0

    def difference(self, a: NetworkGenotype, b: NetworkGenotype) -> float:
        alignment = align(a, b)
        value = self.score(alignment)
        _logger.debug("Difference %d<->%d: %s -> %.6f", a.id, b.id, alignment, value)
        return value

    def __repr__(self) -> str:
        return f"NetworkDifference(c1_excess={self.c1_excess}, c2_disjoint={self.c2_disjoint}, c3_weight={self.c3_weight})"


__all__ = ["NetworkDifference"]
