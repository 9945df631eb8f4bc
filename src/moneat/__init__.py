from .engine.config import (
    CoreConfig,
    DifferenceConfig,
    SamplingConfig,
    SelectionConfig,
    WeightConfig,
    make_difference_metric,
    make_diversity_metric,
    make_fitness_converter,
    make_r2_indicator,
    make_sampling_strategy,
    make_selection,
    make_weight_generator,
)
from .engine.difference import FitnessDifference, GenomeAlignment, NetworkDifference, align
from .engine.diversity import DiversityMetric, FitnessDiversity, NetworkDiversity
from .engine.indicator import R2Indicator
from .engine.sampling import (
    MaxSampleFitness,
    MeanSampleFitness,
    MedianSampleFitness,
    NoNoiseSampling,
    SampleData,
    SampleVector,
    StandardErrorDynResampling,
)
from .engine.selection import (
    LinearRankSelection,
    equal_distribution,
    linear_distribution,
    roulette_wheel,
    select_indices,
    select_rank_indices,
)
from .engine.weights import HammersleyWeights, LHDWeights
from .foundation.genotype import Genotype, Link, NetworkGenotype, RealVectorGenotype
from .foundation.logging import configure_moneat_logging
from .foundation.metrics import (
    assign_ranks,
    crowding_distance,
    dominance_test,
    dominates,
    nondominated,
    r2_contributions,
    r2_value,
)
from .foundation.observer import ProgressEvent, ProgressPublisher

__version__ = "0.1.0"

__all__ = [
    "CoreConfig",
    "DifferenceConfig",
    "DiversityMetric",
    "FitnessDifference",
    "FitnessDiversity",
    "Genotype",
    "GenomeAlignment",
    "HammersleyWeights",
    "LHDWeights",
    "LinearRankSelection",
    "Link",
    "MaxSampleFitness",
    "MeanSampleFitness",
    "MedianSampleFitness",
    "NetworkDifference",
    "NetworkDiversity",
    "NetworkGenotype",
    "NoNoiseSampling",
    "ProgressEvent",
    "ProgressPublisher",
    "R2Indicator",
    "RealVectorGenotype",
    "SampleData",
    "SampleVector",
    "SamplingConfig",
    "SelectionConfig",
    "StandardErrorDynResampling",
    "WeightConfig",
    "align",
    "assign_ranks",
    "configure_moneat_logging",
    "crowding_distance",
    "dominance_test",
    "dominates",
    "equal_distribution",
    "linear_distribution",
    "make_difference_metric",
    "make_diversity_metric",
    "make_fitness_converter",
    "make_r2_indicator",
    "make_sampling_strategy",
    "make_selection",
    "make_weight_generator",
    "nondominated",
    "r2_contributions",
    "r2_value",
    "roulette_wheel",
    "select_indices",
    "select_rank_indices",
]
