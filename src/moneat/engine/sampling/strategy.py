"""
Sampling strategies deciding whether a genotype is evaluated once more
against a reference.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from moneat.foundation.exceptions import ConfigurationError, InvalidProgressError
from moneat.foundation.observer import ProgressEvent, ProgressPublisher

from .data import SampleData

_logger = logging.getLogger(__name__)


class SamplingStrategy(ABC):
    """Determines how many samples are drawn per genotype and reference."""

    name: str = ""

    @abstractmethod
    def can_sample(self, sample_data: SampleData, reference_id: int) -> bool:
        """True if another sample may be drawn for the genotype against the reference."""


class NoNoiseSampling(SamplingStrategy):
    """Noise-free evaluation: a single sample per genotype and reference."""

    name = "no_noise"

    def can_sample(self, sample_data: SampleData, reference_id: int) -> bool:
        return not sample_data.known(reference_id)


class StandardErrorDynResampling(SamplingStrategy):
    """
    Multi-objective Standard Error Dynamic Resampling (SEDR).

    Between ``min_samples`` and ``max_samples`` another sample is drawn while
    the largest per-objective standard error exceeds

        max_std_err = (1 - progress) ** alpha * (seth_max - seth_min) + seth_min

    so later generations demand tighter estimates. Progress arrives through the
    publisher the strategy subscribes to on construction.

    Based on: Siegmund, Florian, Amos H.C. Ng, and Kalyanmoy Deb. "Standard error
    dynamic resampling for preference-based evolutionary multi-objective
    optimization." (2016).
    """

    name = "sedr"

    def __init__(
        self,
        publisher: ProgressPublisher | None,
        min_samples: int,
        max_samples: int,
        *,
        alpha: float = 2.0,
        seth_min: float = 0.0,
        seth_max: float = 1.0 / 30.0,
    ) -> None:
        if min_samples < 1:
            raise ConfigurationError(f"min_samples must be at least 1, got {min_samples}.")
        if max_samples < min_samples:
            raise ConfigurationError(
                f"max_samples ({max_samples}) must not be smaller than min_samples ({min_samples}).",
                details={"min_samples": min_samples, "max_samples": max_samples},
            )
        if seth_max < seth_min:
            raise ConfigurationError(f"seth_max ({seth_max}) must not be smaller than seth_min ({seth_min}).")
        self.min_samples = int(min_samples)
        self.max_samples = int(max_samples)
        self.alpha = float(alpha)
        self.seth_min = float(seth_min)
        self.seth_max = float(seth_max)

        self._lock = threading.Lock()
        self._progress = 0.0
        self._max_std_err = self.threshold(0.0)

        self._publisher = publisher
        self._handler = publisher.subscribe(self.on_progress) if publisher is not None else None

    def threshold(self, progress: float) -> float:
        return (1.0 - progress) ** self.alpha * (self.seth_max - self.seth_min) + self.seth_min

    def on_progress(self, event: ProgressEvent) -> None:
        self.update_progress(event.progress)

    def update_progress(self, progress: float) -> None:
        progress = float(progress)
        if not 0.0 <= progress <= 1.0:
            raise InvalidProgressError(progress)
        value = self.threshold(progress)
        with self._lock:
            self._progress = progress
            self._max_std_err = value
        _logger.debug("SEDR threshold at progress %.4f: %.6g", progress, value)

    @property
    def progress(self) -> float:
        with self._lock:
            return self._progress

    @property
    def max_std_err(self) -> float:
        with self._lock:
            return self._max_std_err

    def snapshot(self) -> tuple[float, float]:
        """Progress and the threshold derived from it, read together."""
        with self._lock:
            return self._progress, self._max_std_err

    def can_sample(self, sample_data: SampleData, reference_id: int) -> bool:
        n = sample_data.size(reference_id)

        if n < self.min_samples:
            return True

        if n >= self.max_samples:
            return False

        return sample_data.standard_error(reference_id) > self.max_std_err

    def close(self) -> None:
        """Stop listening to progress notifications."""
        if self._publisher is not None and self._handler is not None:
            self._publisher.unsubscribe(self._handler)
            self._handler = None


__all__ = ["NoNoiseSampling", "SamplingStrategy", "StandardErrorDynResampling"]
