from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from moneat.foundation.genotype import Genotype

G = TypeVar("G", bound=Genotype)


class DifferenceMetric(ABC, Generic[G]):
    """A genotypic difference metric. Larger values mean more different genotypes."""

    name: str = "difference"

    @abstractmethod
    def difference(self, a: G, b: G) -> float:
        """Return the difference between two genotypes."""

    def __call__(self, a: G, b: G) -> float:
        return self.difference(a, b)


__all__ = ["DifferenceMetric"]
