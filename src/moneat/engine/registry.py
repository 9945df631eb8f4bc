"""
Named variants of every configurable component family.
"""

from __future__ import annotations

from typing import Callable

from moneat.foundation.exceptions import UnknownComponentError
from moneat.foundation.registry import Registry

from .difference import DifferenceMetric, FitnessDifference, NetworkDifference
from .diversity import DiversityMetric, FitnessDiversity, NetworkDiversity
from .sampling import (
    MaxSampleFitness,
    MeanSampleFitness,
    MedianSampleFitness,
    NoNoiseSampling,
    SampleToFitnessConverter,
    SamplingStrategy,
    StandardErrorDynResampling,
)
from .weights import HammersleyWeights, LHDWeights, WeightGenerator

DIFFERENCE_METRICS: Registry[Callable[..., DifferenceMetric]] = Registry("difference metric")
DIVERSITY_METRICS: Registry[Callable[[], DiversityMetric]] = Registry("diversity metric")
SAMPLING_STRATEGIES: Registry[Callable[..., SamplingStrategy]] = Registry("sampling strategy")
WEIGHT_GENERATORS: Registry[Callable[..., WeightGenerator]] = Registry("weight generator")
FITNESS_CONVERTERS: Registry[Callable[[], SampleToFitnessConverter]] = Registry("fitness converter")

DIFFERENCE_METRICS.register("network", NetworkDifference)
DIFFERENCE_METRICS.register("fitness", FitnessDifference)

DIVERSITY_METRICS.register("decision_space", NetworkDiversity)
DIVERSITY_METRICS.register("objective_space", FitnessDiversity)

SAMPLING_STRATEGIES.register("no_noise", NoNoiseSampling)
SAMPLING_STRATEGIES.register("sedr", StandardErrorDynResampling)

WEIGHT_GENERATORS.register("hammersley", HammersleyWeights)
WEIGHT_GENERATORS.register("lhd", LHDWeights)

FITNESS_CONVERTERS.register("mean", MeanSampleFitness)
FITNESS_CONVERTERS.register("max", MaxSampleFitness)
FITNESS_CONVERTERS.register("median", MedianSampleFitness)


def diversity_metric_by_id(metric_id: int) -> DiversityMetric:
    """Create a diversity metric from its declared numeric id."""
    for key in DIVERSITY_METRICS.list():
        metric = DIVERSITY_METRICS.create(key)
        if metric.id == metric_id:
            return metric
    raise UnknownComponentError("diversity metric id", str(metric_id), DIVERSITY_METRICS.list())


__all__ = [
    "DIFFERENCE_METRICS",
    "DIVERSITY_METRICS",
    "FITNESS_CONVERTERS",
    "SAMPLING_STRATEGIES",
    "WEIGHT_GENERATORS",
    "diversity_metric_by_id",
]
