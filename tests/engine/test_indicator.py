from __future__ import annotations

import numpy as np
import pytest

from moneat.engine.indicator import R2Indicator
from moneat.engine.weights import HammersleyWeights, LHDWeights
from moneat.foundation.exceptions import ConfigurationError, MissingFitnessError
from moneat.foundation.genotype import Genotype

FRONT = np.array([[1.0, 3.0], [2.0, 2.0], [3.0, 1.0]])


def test_r2_indicator_uses_hammersley_weights() -> None:
    indicator = R2Indicator(num_weight_vectors=2)
    assert isinstance(indicator.weight_generator, HammersleyWeights)
    np.testing.assert_allclose(indicator.weights(2), [[0.75, 0.25], [0.25, 0.75]])
    assert indicator(FRONT) == pytest.approx(0.75)
    np.testing.assert_allclose(indicator.contributions(FRONT), [0.375, 0.0, 0.375])


def test_r2_indicator_reuses_cached_weights() -> None:
    generator = HammersleyWeights()
    indicator = R2Indicator(generator, num_weight_vectors=20)
    first = indicator.weights(3)
    indicator.value(np.random.default_rng(0).random((6, 3)))
    assert indicator.weights(3) is first
    assert generator.cached_dimensions() == [3]


def test_r2_indicator_reference_point() -> None:
    indicator = R2Indicator(num_weight_vectors=2, ref_point=[1.0, 1.0])
    assert indicator.value(FRONT) == pytest.approx(0.5)


def test_r2_indicator_on_population() -> None:
    population = [Genotype(i, fitness=f) for i, f in enumerate(FRONT)]
    indicator = R2Indicator(LHDWeights(seed=1), num_weight_vectors=16)
    assert indicator.population_value(population) == pytest.approx(indicator.value(FRONT))
    contributions = indicator.population_contributions(population)
    assert contributions.shape == (3,)
    assert np.all(contributions >= 0.0)
    with pytest.raises(MissingFitnessError):
        indicator.population_value([Genotype(0, fitness=[1.0, 1.0]), Genotype(1)])


def test_r2_indicator_rejects_empty_weight_set() -> None:
    with pytest.raises(ConfigurationError):
        R2Indicator(num_weight_vectors=0)
