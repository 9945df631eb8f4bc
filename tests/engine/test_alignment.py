from __future__ import annotations

import numpy as np
import pytest

from moneat.engine.difference import FitnessDifference, NetworkDifference, align, align_links
from moneat.foundation.exceptions import ConfigurationError, FitnessDimensionError, MissingFitnessError
from moneat.foundation.genotype import Genotype, Link, NetworkGenotype


def _net(genotype_id: int, pairs) -> NetworkGenotype:
    return NetworkGenotype.from_pairs(genotype_id, pairs)


def test_alignment_reference_scenario() -> None:
    a = _net(1, [(1, 0.5), (2, 0.3), (4, 0.1)])
    b = _net(2, [(1, 0.4), (2, 0.3), (3, 0.9)])

    result = align(a, b)

    assert result.num_common == 2
    assert result.weight_difference == pytest.approx(0.1)
    assert result.num_disjoint == 1
    assert result.num_excess == 1
    assert result.longest_genome == 3


def test_alignment_with_itself() -> None:
    a = _net(1, [(1, 0.5), (3, -0.2), (7, 0.9), (8, 0.0)])
    result = align(a, a)
    assert result.num_common == 4
    assert result.num_disjoint == 0
    assert result.num_excess == 0
    assert result.weight_difference == 0.0


def test_alignment_empty_genome_is_all_excess() -> None:
    a = _net(1, [(1, 0.5), (2, 0.3)])
    empty = NetworkGenotype(2)
    for result in (align(a, empty), align(empty, a)):
        assert result.num_excess == 2
        assert result.num_common == 0
        assert result.num_disjoint == 0
        assert result.longest_genome == 2


def test_alignment_excess_is_tail_of_longer_range() -> None:
    result = align_links([Link(1, 0.0), Link(5, 0.0)], [Link(2, 0.0), Link(3, 0.0), Link(4, 0.0)])
    assert result.num_disjoint == 4
    assert result.num_excess == 1


def test_alignment_shared_last_gene_leaves_no_excess() -> None:
    # Excess genes are only those left after one genome runs out. Counting
    # longest - common instead would report 1 excess gene here.
    result = align_links([Link(1, 0.0), Link(3, 0.5)], [Link(2, 0.0), Link(3, 0.25)])
    assert result.num_common == 1
    assert result.num_disjoint == 2
    assert result.num_excess == 0
    assert result.longest_genome - result.num_common == 1
    assert result.weight_difference == pytest.approx(0.25)


def test_alignment_counts_cover_shorter_genome() -> None:
    rng = np.random.default_rng(11)
    for _ in range(30):
        ids_a = np.sort(rng.choice(40, size=rng.integers(0, 15), replace=False))
        ids_b = np.sort(rng.choice(40, size=rng.integers(0, 15), replace=False))
        a = [Link(int(i), float(rng.normal())) for i in ids_a]
        b = [Link(int(i), float(rng.normal())) for i in ids_b]
        r = align_links(a, b)
        assert r.num_common + r.num_disjoint + r.num_excess >= min(len(a), len(b))
        assert 2 * r.num_common + r.num_disjoint + r.num_excess == len(a) + len(b)


def test_network_difference_combines_terms() -> None:
    a = _net(1, [(1, 0.5), (2, 0.3), (4, 0.1)])
    b = _net(2, [(1, 0.4), (2, 0.3), (3, 0.9)])
    metric = NetworkDifference(c1_excess=1.0, c2_disjoint=1.0, c3_weight=0.4)
    structural = (1.0 * 1 + 1.0 * 1) / 3
    weights = 0.4 * 0.1 / 2
    assert metric(a, b) == pytest.approx((structural + weights) / 2)


def test_network_difference_caps_weight_term_at_c1() -> None:
    a = _net(1, [(1, 10.0)])
    b = _net(2, [(1, -10.0)])
    metric = NetworkDifference(c1_excess=0.5, c2_disjoint=1.0, c3_weight=1.0)
    assert metric.difference(a, b) == pytest.approx(0.25)


def test_network_difference_without_common_genes() -> None:
    a = _net(1, [(1, 1.0)])
    b = _net(2, [(2, 1.0)])
    metric = NetworkDifference()
    # one disjoint, one excess, no weight term
    assert metric.difference(a, b) == pytest.approx((1.0 + 1.0) / 1 / 2)
    assert metric.difference(NetworkGenotype(3), NetworkGenotype(4)) == 0.0


def test_network_difference_rejects_negative_coefficients() -> None:
    with pytest.raises(ConfigurationError):
        NetworkDifference(c1_excess=-1.0)


def test_fitness_difference_is_squared_distance() -> None:
    metric = FitnessDifference()
    a = Genotype(1, fitness=[0.0, 1.0])
    b = Genotype(2, fitness=[3.0, 5.0])
    assert metric(a, b) == pytest.approx(25.0)
    with pytest.raises(MissingFitnessError):
        metric(a, Genotype(3))
    with pytest.raises(FitnessDimensionError):
        metric(a, Genotype(4, fitness=[1.0]))
