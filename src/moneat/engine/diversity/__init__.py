from .base import DiversityMetric
from .fitness import FitnessDiversity
from .network import NetworkDiversity

__all__ = ["DiversityMetric", "FitnessDiversity", "NetworkDiversity"]
