"""
Foundation layer: data model, errors, logging, progress notification and
Pareto utilities shared by the engine components.
"""

from .exceptions import (
    ConfigurationError,
    ContractError,
    FitnessDimensionError,
    GenotypeOrderError,
    InvalidProgressError,
    MalformedDistributionError,
    MissingFitnessError,
    MONEATError,
    SampleDataError,
    SelectionSizeError,
    UnknownComponentError,
)
from .genotype import Genotype, Link, NetworkGenotype, RealVectorGenotype
from .observer import ProgressEvent, ProgressObserver, ProgressPublisher
from .registry import Registry

__all__ = [
    "ConfigurationError",
    "ContractError",
    "FitnessDimensionError",
    "Genotype",
    "GenotypeOrderError",
    "InvalidProgressError",
    "Link",
    "MalformedDistributionError",
    "MissingFitnessError",
    "MONEATError",
    "NetworkGenotype",
    "ProgressEvent",
    "ProgressObserver",
    "ProgressPublisher",
    "RealVectorGenotype",
    "Registry",
    "SampleDataError",
    "SelectionSizeError",
    "UnknownComponentError",
]
