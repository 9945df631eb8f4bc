"""
Difference metrics between two genotypes.

- alignment: linear-time gene alignment of network genomes
- network: Stanley's compatibility distance on top of the alignment
- fitness: squared Euclidean distance in objective space
"""

from .alignment import GenomeAlignment, align, align_links
from .base import DifferenceMetric
from .fitness import FitnessDifference
from .network import NetworkDifference

__all__ = [
    "DifferenceMetric",
    "FitnessDifference",
    "GenomeAlignment",
    "NetworkDifference",
    "align",
    "align_links",
]
