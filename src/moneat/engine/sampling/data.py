"""
Accumulated evaluation samples of one genotype against its references.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from moneat.foundation.exceptions import FitnessDimensionError, SampleDataError


@dataclass(frozen=True)
class SampleVector:
    """Fitness vector observed for one genotype against one reference."""

    genotype_id: int
    reference_id: int
    objectives: tuple[float, ...]

    @classmethod
    def of(cls, genotype_id: int, reference_id: int, objectives: Sequence[float] | np.ndarray) -> "SampleVector":
        return cls(int(genotype_id), int(reference_id), tuple(float(v) for v in objectives))


@dataclass(frozen=True, eq=False)
class ObjectiveStatistics:
    """Descriptive statistics of one objective's samples."""

    values: np.ndarray

    @property
    def n(self) -> int:
        return int(self.values.shape[0])

    @property
    def mean(self) -> float:
        return float(self.values.mean())

    @property
    def min(self) -> float:
        return float(self.values.min())

    @property
    def max(self) -> float:
        return float(self.values.max())

    @property
    def std(self) -> float:
        """Sample standard deviation (Bessel-corrected); 0.0 for a single value."""
        if self.n < 2:
            return 0.0
        return float(self.values.std(ddof=1))

    def percentile(self, p: float) -> float:
        return float(np.percentile(self.values, p))

    @property
    def median(self) -> float:
        return self.percentile(50.0)


class SampleData:
    """
    All sample vectors recorded for one genotype, grouped by reference id.

    Samples are append-only. ``add`` may be called from several evaluation
    workers at once.
    """

    def __init__(self, genotype_id: int) -> None:
        self.genotype_id = int(genotype_id)
        self.num_objectives = -1
        self._samples: dict[int, list[SampleVector]] = {}
        self._lock = threading.Lock()

    def add(self, sample: SampleVector) -> None:
        with self._lock:
            if self.num_objectives == -1:
                self.num_objectives = len(sample.objectives)
            elif len(sample.objectives) != self.num_objectives:
                raise FitnessDimensionError(self.num_objectives, len(sample.objectives))
            self._samples.setdefault(sample.reference_id, []).append(sample)

    def record(self, reference_id: int, objectives: Sequence[float] | np.ndarray) -> SampleVector:
        """Shortcut creating and adding a SampleVector for this genotype."""
        sample = SampleVector.of(self.genotype_id, reference_id, objectives)
        self.add(sample)
        return sample

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()

    def known(self, reference_id: int) -> bool:
        """True if at least one sample was drawn against the reference."""
        with self._lock:
            return reference_id in self._samples

    def size(self, reference_id: int | None = None) -> int:
        """Number of samples for one reference, or over all references."""
        with self._lock:
            if reference_id is None:
                return sum(len(v) for v in self._samples.values())
            return len(self._samples.get(reference_id, ()))

    def is_empty(self, reference_id: int | None = None) -> bool:
        return self.size(reference_id) == 0

    @property
    def references(self) -> list[int]:
        with self._lock:
            return sorted(self._samples)

    def _matrix(self, reference_id: int | None) -> np.ndarray:
        with self._lock:
            if reference_id is None:
                rows = [s.objectives for v in self._samples.values() for s in v]
            else:
                rows = [s.objectives for s in self._samples.get(reference_id, ())]
        if not rows:
            raise SampleDataError(self.genotype_id, reference_id)
        return np.asarray(rows, dtype=float)

    def statistics(self, reference_id: int | None = None) -> list[ObjectiveStatistics]:
        """Per-objective statistics for one reference, or over all references."""
        matrix = self._matrix(reference_id)
        return [ObjectiveStatistics(matrix[:, k].copy()) for k in range(matrix.shape[1])]

    def standard_error(self, reference_id: int) -> float:
        """
        Largest per-objective standard deviation divided by sqrt(n).

        Returns 1.0 while no sample exists for the reference.
        """
        if self.is_empty(reference_id):
            return 1.0
        stats = self.statistics(reference_id)
        worst = max(s.std for s in stats)
        return worst / math.sqrt(stats[0].n)

    def __repr__(self) -> str:
        return f"SampleData(genotype_id={self.genotype_id}, references={self.references}, size={self.size()})"


__all__ = ["ObjectiveStatistics", "SampleData", "SampleVector"]
