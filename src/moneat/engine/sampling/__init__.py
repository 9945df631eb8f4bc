from .conversion import MaxSampleFitness, MeanSampleFitness, MedianSampleFitness, SampleToFitnessConverter
from .data import ObjectiveStatistics, SampleData, SampleVector
from .strategy import NoNoiseSampling, SamplingStrategy, StandardErrorDynResampling

__all__ = [
    "MaxSampleFitness",
    "MeanSampleFitness",
    "MedianSampleFitness",
    "NoNoiseSampling",
    "ObjectiveStatistics",
    "SampleData",
    "SampleToFitnessConverter",
    "SampleVector",
    "SamplingStrategy",
    "StandardErrorDynResampling",
]
