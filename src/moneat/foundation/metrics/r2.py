"""
R2 indicator over a set of weight vectors (Brockhoff et al.).

For every weight vector the best point of the front is the one with the
smallest weighted Chebyshev distance to the reference point. The R2 value is
the mean of these minima; smaller is better.

Contributions follow Kuenzel and Meyer-Nieberg, "Coping with opponents:
multi-objective evolutionary neural networks for fighting games" (2020): for
each weight vector only the best point contributes, by the gap between its
utility and the second best one.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..exceptions import ContractError, FitnessDimensionError


def _utilities(F: np.ndarray, weights: np.ndarray, ref_point: Sequence[float] | np.ndarray | None) -> np.ndarray:
    F = np.asarray(F, dtype=float)
    W = np.asarray(weights, dtype=float)
    if F.ndim != 2 or F.shape[0] == 0:
        raise ContractError(
            "R2 requires a non-empty (N, M) objective matrix.",
            suggestion="Stack the fitness vectors with population_fitness()",
        )
    n_obj = F.shape[1]
    if W.ndim != 2 or W.shape[0] == 0:
        raise ContractError("R2 requires a non-empty (L, M) weight matrix.")
    if W.shape[1] != n_obj:
        raise FitnessDimensionError(W.shape[1], n_obj)
    ref = np.zeros(n_obj) if ref_point is None else np.asarray(ref_point, dtype=float)
    if ref.shape != (n_obj,):
        raise FitnessDimensionError(n_obj, ref.shape[0] if ref.ndim else 0)

    # (L, N): weighted Chebyshev distance of every point for every weight vector
    return np.max(W[:, None, :] * np.abs(F[None, :, :] - ref), axis=2)


def r2_value(
    F: np.ndarray,
    weights: np.ndarray,
    ref_point: Sequence[float] | np.ndarray | None = None,
) -> float:
    """
    R2 value of a front.

    Args:
        F: objective matrix (N, M).
        weights: weight vectors (L, M).
        ref_point: reference point of length M, the origin if omitted.
    """
    U = _utilities(F, weights, ref_point)
    return float(U.min(axis=1).mean())


def r2_contributions(
    F: np.ndarray,
    weights: np.ndarray,
    ref_point: Sequence[float] | np.ndarray | None = None,
) -> np.ndarray:
    """
    Share of each point in the R2 value.

    For every weight vector the point with the smallest utility gains the
    difference to the second smallest one; ties go to the lower index and
    contribute nothing. The sums are divided by the number of weight vectors.
    """
    U = _utilities(F, weights, ref_point)
    n = U.shape[1]
    if n < 2:
        raise ContractError(
            "R2 contributions need at least two points.",
            suggestion="Use r2_value() for a single point",
            details={"size": n},
        )
    best = np.argmin(U, axis=1)
    two_smallest = np.partition(U, 1, axis=1)[:, :2]
    gaps = two_smallest[:, 1] - two_smallest[:, 0]
    contributions = np.bincount(best, weights=gaps, minlength=n)
    return contributions / U.shape[0]


__all__ = ["r2_contributions", "r2_value"]
