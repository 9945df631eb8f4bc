"""
Gene-by-gene alignment of two network genomes (Stanley, NEAT).

Source: Stanley, Kenneth Owen. Efficient evolution of neural networks through
complexification. Diss. 2004.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from moneat.foundation.genotype import Link, NetworkGenotype


@dataclass(frozen=True)
class GenomeAlignment:
    """Counts of common, disjoint and excess genes plus the summed weight gap of common genes."""

    longest_genome: int
    num_common: int
    num_disjoint: int
    num_excess: int
    weight_difference: float


def align_links(a: Sequence[Link], b: Sequence[Link]) -> GenomeAlignment:
    """
    Align two innovation-ordered link sequences in O(m + n).

    Equal innovation ids are common genes; an id present on one side only is
    disjoint while the other genome still has genes left, and excess once the
    other genome is exhausted.
    """
    size_a = len(a)
    size_b = len(b)

    i1 = 0
    i2 = 0
    num_common = 0
    num_disjoint = 0
    weight_difference = 0.0

    while i1 < size_a and i2 < size_b:
        id_a = a[i1].innovation_id
        id_b = b[i2].innovation_id
        if id_a == id_b:
            weight_difference += abs(a[i1].weight - b[i2].weight)
            num_common += 1
            i1 += 1
            i2 += 1
        else:
            num_disjoint += 1
            if id_a < id_b:
                i1 += 1
            else:
                i2 += 1

    num_excess = (size_a - i1) + (size_b - i2)

    return GenomeAlignment(
        longest_genome=max(size_a, size_b),
        num_common=num_common,
        num_disjoint=num_disjoint,
        num_excess=num_excess,
        weight_difference=weight_difference,
    )


def align(a: NetworkGenotype, b: NetworkGenotype) -> GenomeAlignment:
    return align_links(a.links, b.links)


__all__ = ["GenomeAlignment", "align", "align_links"]
