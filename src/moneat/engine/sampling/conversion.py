"""
Reduce the samples of a genotype to the fitness vector used for ranking.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .data import SampleData


class SampleToFitnessConverter(ABC):
    """Converts SampleData (over all references) into a fitness vector."""

    name: str = ""

    @abstractmethod
    def convert(self, sample_data: SampleData) -> np.ndarray: ...

    def __call__(self, sample_data: SampleData) -> np.ndarray:
        return self.convert(sample_data)


class MeanSampleFitness(SampleToFitnessConverter):
    name = "mean"

    def convert(self, sample_data: SampleData) -> np.ndarray:
        return np.array([s.mean for s in sample_data.statistics()], dtype=float)


class MaxSampleFitness(SampleToFitnessConverter):
    """Worst observed value per objective (minimization)."""

    name = "max"

    def convert(self, sample_data: SampleData) -> np.ndarray:
        return np.array([s.max for s in sample_data.statistics()], dtype=float)


class MedianSampleFitness(SampleToFitnessConverter):
    name = "median"

    def convert(self, sample_data: SampleData) -> np.ndarray:
        return np.array([s.median for s in sample_data.statistics()], dtype=float)


__all__ = ["MaxSampleFitness", "MeanSampleFitness", "MedianSampleFitness", "SampleToFitnessConverter"]
