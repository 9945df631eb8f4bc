from __future__ import annotations

import numpy as np
import pytest

from moneat.engine.weights import HammersleyWeights, LatinHypercubeDesign, LHDWeights
from moneat.engine.weights.hammersley import first_primes, hammersley_design, radical_inverse


def test_first_primes() -> None:
    assert first_primes(0) == []
    assert first_primes(6) == [2, 3, 5, 7, 11, 13]


def test_radical_inverse() -> None:
    assert radical_inverse(1, 2) == 0.5
    assert radical_inverse(3, 2) == 0.75
    assert radical_inverse(5, 3) == pytest.approx(2.0 / 3.0 + 1.0 / 9.0)


def test_hammersley_design_first_coordinate() -> None:
    design = hammersley_design(4, 3)
    np.testing.assert_allclose(design[:, 0], [1 / 8, 3 / 8, 5 / 8, 7 / 8])
    np.testing.assert_allclose(design[:, 1], [0.5, 0.25, 0.75, 0.125])


@pytest.mark.parametrize("generator", [HammersleyWeights(), LHDWeights(seed=7)])
@pytest.mark.parametrize("dimension", [1, 2, 3, 5])
def test_weights_lie_on_simplex(generator, dimension: int) -> None:
    generator.clear()
    weights = generator.get_weight_vectors(25, dimension)
    assert weights.shape == (25, dimension)
    assert np.all(weights >= 0.0)
    np.testing.assert_allclose(weights.sum(axis=1), 1.0, atol=1e-9)


def test_two_objective_hammersley_weights() -> None:
    weights = HammersleyWeights().get_weight_vectors(2, 2)
    np.testing.assert_allclose(weights, [[0.75, 0.25], [0.25, 0.75]])


def test_cache_hit_returns_same_array() -> None:
    generator = HammersleyWeights()
    first = generator.get_weight_vectors(10, 3)
    second = generator.get_weight_vectors(10, 3)
    assert second is first
    assert generator.get_weight_vectors(4, 3) is first
    with pytest.raises(ValueError):
        first[0, 0] = 1.0


def test_larger_request_regenerates() -> None:
    generator = HammersleyWeights()
    small = generator.get_weight_vectors(5, 3)
    large = generator.get_weight_vectors(12, 3)
    assert large is not small
    assert large.shape == (12, 3)
    assert generator.get_weight_vectors(12, 3) is large
    assert generator.cached_dimensions() == [3]


def test_lhd_weights_reproducible_for_seed() -> None:
    a = LHDWeights(seed=3).get_weight_vectors(8, 4)
    b = LHDWeights(seed=3).get_weight_vectors(8, 4)
    np.testing.assert_array_equal(a, b)


def test_latin_hypercube_strata() -> None:
    design = LatinHypercubeDesign(3, rng=np.random.default_rng(0))(10)
    assert design.shape == (10, 3)
    for j in range(3):
        strata = np.floor(design[:, j] * 10 - 1e-12).astype(int)
        assert sorted(strata.tolist()) == list(range(10))
