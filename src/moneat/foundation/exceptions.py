"""
MONEAT exception hierarchy.

Two families are distinguished:

- ConfigurationError: the caller set the core up with invalid values
  (unknown component names, out-of-range coefficients, inconsistent bounds).
- ContractError: the caller handed the core data that violates a documented
  precondition (missing or mismatched fitness vectors, malformed probability
  distributions, unordered genomes).

Degenerate inputs (empty populations, zero variance, no common genes) are not
errors; the affected operations return their documented fallback values.

Example:
    try:
        metric.measure(population)
    except MONEATError as e:
        print(f"Diversity failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MONEATError(Exception):
    """
    Base exception for all MONEAT errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MONEATError):
    """Raised when configuration is invalid or incomplete."""

    pass


class UnknownComponentError(ConfigurationError):
    """Raised when a metric, strategy or generator name is not registered."""

    def __init__(self, kind: str, name: str, available: list[str] | None = None) -> None:
        message = f"Unknown {kind} '{name}'."
        suggestion = f"Available {kind} names: {', '.join(available)}" if available else None
        super().__init__(message, suggestion, {"kind": kind, "name": name, "available": available or []})


# =============================================================================
# Contract Errors
# =============================================================================


class ContractError(MONEATError):
    """Raised when input data violates a precondition of a core operation."""

    pass


class MissingFitnessError(ContractError):
    """Raised when a fitness vector is required but not assigned yet."""

    def __init__(self, message: str = "Fitness vector is not set.", genotype_id: int | None = None) -> None:
        suggestion = "Evaluate the genotype before comparing or measuring it"
        super().__init__(message, suggestion, {"genotype_id": genotype_id})


class FitnessDimensionError(ContractError):
    """Raised when fitness vectors of one run differ in length."""

    def __init__(self, expected: int, actual: int) -> None:
        message = f"Fitness vector has {actual} objectives, expected {expected}."
        suggestion = "All fitness vectors within a population must share the same number of objectives"
        super().__init__(message, suggestion, {"expected": expected, "actual": actual})


class MalformedDistributionError(ContractError):
    """Raised when a probability distribution cannot be used for selection."""

    def __init__(self, message: str) -> None:
        suggestion = "Build distributions with linear_distribution() or equal_distribution()"
        super().__init__(message, suggestion)


class SelectionSizeError(ContractError):
    """Raised when a selection request has no candidates or a negative size."""

    def __init__(self, message: str, *, amount: int | None = None, pool_size: int | None = None) -> None:
        suggestion = "Select a non-negative number of parents from a non-empty population"
        super().__init__(message, suggestion, {"amount": amount, "pool_size": pool_size})


class GenotypeOrderError(ContractError):
    """Raised when network links are not sorted by innovation id."""

    def __init__(self, genotype_id: int, position: int) -> None:
        message = f"Links of genotype {genotype_id} are not in non-decreasing innovation order (position {position})."
        suggestion = "Insert links with NetworkGenotype.add_link() to keep the order"
        super().__init__(message, suggestion, {"genotype_id": genotype_id, "position": position})


class SampleDataError(ContractError):
    """Raised when statistics are requested from empty sample data."""

    def __init__(self, genotype_id: int, reference_id: int | None = None) -> None:
        if reference_id is None:
            message = f"Sample data is empty for genotype {genotype_id}."
        else:
            message = f"Sample data is empty for genotype {genotype_id} and reference {reference_id}."
        suggestion = "Add at least one SampleVector before requesting statistics"
        super().__init__(message, suggestion, {"genotype_id": genotype_id, "reference_id": reference_id})


class InvalidProgressError(ContractError):
    """Raised when a run progress value lies outside [0, 1]."""

    def __init__(self, progress: float) -> None:
        message = f"Progress must lie within [0, 1], got {progress}."
        suggestion = "Publish evaluations / max_evaluations"
        super().__init__(message, suggestion, {"progress": progress})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "MONEATError",
    # Configuration
    "ConfigurationError",
    "UnknownComponentError",
    # Contract
    "ContractError",
    "MissingFitnessError",
    "FitnessDimensionError",
    "MalformedDistributionError",
    "SelectionSizeError",
    "GenotypeOrderError",
    "SampleDataError",
    "InvalidProgressError",
]
