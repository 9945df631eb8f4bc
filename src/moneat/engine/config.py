"""
Run-level configuration of the core components.

Each section is an immutable dataclass that can be serialized and rebuilt
from a plain dictionary. The ``make_*`` factories turn a section into the
configured component instance.

Examples:
    cfg = CoreConfig.from_dict({"sampling": {"strategy": "sedr", "min_samples": 2, "max_samples": 10}})
    publisher = ProgressPublisher()
    strategy = make_sampling_strategy(cfg.sampling, publisher)
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict

import numpy as np

from moneat.foundation.exceptions import ConfigurationError
from moneat.foundation.observer import ProgressPublisher

from .difference import DifferenceMetric
from .diversity import DiversityMetric
from .indicator import R2Indicator
from .registry import (
    DIFFERENCE_METRICS,
    DIVERSITY_METRICS,
    FITNESS_CONVERTERS,
    SAMPLING_STRATEGIES,
    WEIGHT_GENERATORS,
)
from .sampling import SampleToFitnessConverter, SamplingStrategy, StandardErrorDynResampling
from .selection import LinearRankSelection
from .weights import WeightGenerator


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"{cls.__name__} got unknown fields: {', '.join(unknown)}",
                suggestion=f"Valid fields: {', '.join(sorted(known))}",
            )
        return cls(**data)


@dataclass(frozen=True)
class DifferenceConfig(_SerializableConfig):
    metric: str = "network"
    c1_excess: float = 1.0
    c2_disjoint: float = 1.0
    c3_weight: float = 0.4


@dataclass(frozen=True)
class SelectionConfig(_SerializableConfig):
    selection_pressure: float = 1.5
    pressure_min: float = 1.0
    pressure_max: float = 2.0

    def __post_init__(self) -> None:
        if self.pressure_min > self.pressure_max:
            raise ConfigurationError(
                f"pressure_min ({self.pressure_min}) exceeds pressure_max ({self.pressure_max})."
            )
        if not self.pressure_min <= self.selection_pressure <= self.pressure_max:
            raise ConfigurationError(
                f"Selection pressure {self.selection_pressure} outside [{self.pressure_min}, {self.pressure_max}]."
            )


@dataclass(frozen=True)
class SamplingConfig(_SerializableConfig):
    strategy: str = "no_noise"
    min_samples: int = 1
    max_samples: int = 1
    alpha: float = 2.0
    seth_min: float = 0.0
    seth_max: float = 1.0 / 30.0
    converter: str = "mean"


@dataclass(frozen=True)
class WeightConfig(_SerializableConfig):
    generator: str = "hammersley"
    count: int = 100
    seed: int | None = None


@dataclass(frozen=True)
class CoreConfig(_SerializableConfig):
    difference: DifferenceConfig = field(default_factory=DifferenceConfig)
    diversity: str = "decision_space"
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    weights: WeightConfig = field(default_factory=WeightConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CoreConfig":
        sections = {
            "difference": DifferenceConfig,
            "selection": SelectionConfig,
            "sampling": SamplingConfig,
            "weights": WeightConfig,
        }
        unknown = sorted(set(data) - set(sections) - {"diversity"})
        if unknown:
            raise ConfigurationError(f"CoreConfig got unknown fields: {', '.join(unknown)}")
        kwargs: Dict[str, Any] = {}
        for key, section in sections.items():
            if key in data:
                value = data[key]
                kwargs[key] = value if isinstance(value, section) else section.from_dict(value)
        if "diversity" in data:
            kwargs["diversity"] = data["diversity"]
        return cls(**kwargs)


def make_difference_metric(cfg: DifferenceConfig) -> DifferenceMetric:
    if cfg.metric.lower() == "network":
        return DIFFERENCE_METRICS.create(
            cfg.metric,
            c1_excess=cfg.c1_excess,
            c2_disjoint=cfg.c2_disjoint,
            c3_weight=cfg.c3_weight,
        )
    return DIFFERENCE_METRICS.create(cfg.metric)


def make_diversity_metric(name: str) -> DiversityMetric:
    return DIVERSITY_METRICS.create(name)


def make_selection(cfg: SelectionConfig, rng: np.random.Generator | None = None) -> LinearRankSelection:
    return LinearRankSelection(
        cfg.selection_pressure,
        rng=rng,
        bounds=(cfg.pressure_min, cfg.pressure_max),
    )


def make_sampling_strategy(cfg: SamplingConfig, publisher: ProgressPublisher | None = None) -> SamplingStrategy:
    factory = SAMPLING_STRATEGIES.get(cfg.strategy)
    if factory is StandardErrorDynResampling:
        return StandardErrorDynResampling(
            publisher,
            cfg.min_samples,
            cfg.max_samples,
            alpha=cfg.alpha,
            seth_min=cfg.seth_min,
            seth_max=cfg.seth_max,
        )
    return factory()


def make_fitness_converter(cfg: SamplingConfig) -> SampleToFitnessConverter:
    return FITNESS_CONVERTERS.create(cfg.converter)


def make_weight_generator(cfg: WeightConfig) -> WeightGenerator:
    if cfg.generator.lower() == "lhd":
        return WEIGHT_GENERATORS.create(cfg.generator, seed=cfg.seed)
    return WEIGHT_GENERATORS.create(cfg.generator)


def make_r2_indicator(cfg: WeightConfig) -> R2Indicator:
    return R2Indicator(make_weight_generator(cfg), num_weight_vectors=cfg.count)


__all__ = [
    "CoreConfig",
    "DifferenceConfig",
    "SamplingConfig",
    "SelectionConfig",
    "WeightConfig",
    "make_difference_metric",
    "make_diversity_metric",
    "make_fitness_converter",
    "make_r2_indicator",
    "make_sampling_strategy",
    "make_selection",
    "make_weight_generator",
]
