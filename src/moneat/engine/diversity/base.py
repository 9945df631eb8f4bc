"""
Diversity metric based on the moment of inertia.

Source: Morrison, Ronald W., and Kenneth A. De Jong. "Measurement of population
diversity." International Conference on Artificial Evolution. Springer, 2001.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar

import numpy as np

from moneat.foundation.genotype import Genotype

_logger = logging.getLogger(__name__)

G = TypeVar("G", bound=Genotype)


class DiversityMetric(ABC, Generic[G]):
    """
    Population diversity normalized against the first value measured by this instance.

    Subclasses project a population onto per-dimension value lists via
    ``get_data``; the base class reduces them to the moment of inertia.
    Two metrics are equal when their ``id`` matches.
    """

    id: int = -1
    name: str = ""
    name_short: str = ""
    neutral_element: float = 1.0

    def __init__(self) -> None:
        self.baseline = 1.0
        self.baseline_defined = False

    @abstractmethod
    def get_data(self, population: Sequence[G]) -> list[np.ndarray]:
        """Project the population onto one value array per dimension."""

    def copy(self) -> "DiversityMetric[G]":
        """Fresh instance of the same metric, without baseline."""
        return type(self)()

    def centroid(self, data: Sequence[np.ndarray]) -> np.ndarray:
        """Mean per dimension; single-value dimensions use the neutral element."""
        return np.array(
            [self.neutral_element if values.size == 1 else float(values.mean()) for values in data],
            dtype=float,
        )

    def raw_inertia(self, data: Sequence[np.ndarray]) -> float:
        """Sum of squared deviations from the centroid, divided by the number of dimensions."""
        centroid = self.centroid(data)
        total = 0.0
        for values, c in zip(data, centroid):
            diff = values - c
            total += float(np.dot(diff, diff))
        return total / len(data)

    def moment_of_inertia(self, data: Sequence[np.ndarray]) -> float:
        """
        Return the moment of inertia relative to the baseline.

        The first non-empty call defines the baseline and returns 1.0.
        """
        if len(data) == 0:
            return 0.0

        value = self.raw_inertia(data)

        if not self.baseline_defined:
            self.baseline = value
            self.baseline_defined = True
            _logger.debug("%s baseline set to %.6g", self.name_short, value)
            return 1.0

        if self.baseline == 0.0:
            return value
        return value / self.baseline

    def measure(self, population: Sequence[G]) -> float:
        """Diversity of a population; 0.0 for an empty one."""
        if len(population) == 0:
            return 0.0
        return self.moment_of_inertia(self.get_data(population))

    def __call__(self, population: Sequence[G]) -> float:
        return self.measure(population)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DiversityMetric) and other.id == self.id

    def __hash__(self) -> int:
        return self.id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, baseline_defined={self.baseline_defined})"


__all__ = ["DiversityMetric"]
