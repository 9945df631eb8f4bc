from .base import WeightGenerator, assert_valid_weights
from .hammersley import HammersleyWeights
from .lhd import LatinHypercubeDesign, LHDWeights

__all__ = [
    "HammersleyWeights",
    "LHDWeights",
    "LatinHypercubeDesign",
    "WeightGenerator",
    "assert_valid_weights",
]
