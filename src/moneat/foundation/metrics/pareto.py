from __future__ import annotations

from typing import Literal, Sequence, TypeVar, overload

import numpy as np

from ..exceptions import FitnessDimensionError, MissingFitnessError
from ..genotype import Genotype, population_fitness

G = TypeVar("G", bound=Genotype)


def dominance_test(a: Sequence[float] | np.ndarray | None, b: Sequence[float] | np.ndarray | None, start: int = 0) -> int:
    """
    Compare two fitness vectors under minimization.

    Args:
        a: The first vector.
        b: The second vector.
        start: First objective index to consider.

    Returns:
        -1 if a dominates b, 1 if b dominates a, 0 otherwise.
    """
    if a is None or b is None:
        raise MissingFitnessError("Dominance test requires two assigned fitness vectors.")
    fa = np.asarray(a, dtype=float)
    fb = np.asarray(b, dtype=float)
    if fa.shape != fb.shape:
        raise FitnessDimensionError(fa.shape[0] if fa.ndim else 0, fb.shape[0] if fb.ndim else 0)
    fa = fa[start:]
    fb = fb[start:]
    a_better = bool(np.any(fa < fb))
    b_better = bool(np.any(fa > fb))
    if a_better == b_better:
        return 0
    return -1 if a_better else 1


def dominates(a: Sequence[float] | np.ndarray | None, b: Sequence[float] | np.ndarray | None) -> bool:
    return dominance_test(a, b) == -1


def sort_nondominated(F: np.ndarray) -> tuple[list[list[int]], np.ndarray]:
    """
    Fast non-dominated sort (Deb et al., NSGA-II).

    Args:
        F: objective matrix (N, M).

    Returns:
      - fronts: list of index lists per front (0, 1, ...)
      - rank: array with the front index of each solution
    """
    F = np.asarray(F, dtype=float)
    N = F.shape[0]
    if N == 0:
        return [], np.empty(0, dtype=int)

    less_equal = F[:, None, :] <= F[None, :, :]
    strictly_less = F[:, None, :] < F[None, :, :]
    dom_matrix = np.logical_and(
        np.all(less_equal, axis=2),
        np.any(strictly_less, axis=2),
    )

    dominated_count = dom_matrix.sum(axis=0).astype(np.int64)
    rank = np.empty(N, dtype=int)
    fronts = []

    current = np.flatnonzero(dominated_count == 0)
    level = 0
    while current.size > 0:
        fronts.append(current.tolist())
        rank[current] = level
        dominated_count -= dom_matrix[current].sum(axis=0)
        dominated_count[current] = -1
        dom_matrix[current] = False
        level += 1
        current = np.flatnonzero(dominated_count == 0)

    return fronts, rank


def assign_ranks(population: Sequence[Genotype]) -> list[list[int]]:
    """
    Write the non-dominated front index of every genotype into ``rank``.

    Returns the fronts as index lists into ``population``.
    """
    F = population_fitness(population)
    fronts, rank = sort_nondominated(F)
    for genotype, r in zip(population, rank):
        genotype.rank = int(r)
    return fronts


def nondominated(population: Sequence[G], start: int = 0) -> list[G]:
    """
    Return the non-dominated subset of a population.

    Genotypes without fitness are ignored. Only objectives from ``start`` on are compared.
    """
    dominated = [g.fitness is None for g in population]
    n = len(population)
    for i in range(n):
        if dominated[i]:
            continue
        for j in range(i + 1, n):
            if dominated[j]:
                continue
            res = dominance_test(population[i].fitness, population[j].fitness, start)
            if res == 1:
                dominated[i] = True
                break
            if res == -1:
                dominated[j] = True
    return [g for g, d in zip(population, dominated) if not d]


@overload
def pareto_filter(F: np.ndarray | None, *, return_indices: Literal[False] = False) -> np.ndarray | None: ...


@overload
def pareto_filter(F: np.ndarray | None, *, return_indices: Literal[True]) -> tuple[np.ndarray, np.ndarray]: ...


def pareto_filter(F: np.ndarray | None, *, return_indices: bool = False) -> np.ndarray | tuple[np.ndarray, np.ndarray] | None:
    """
    Return the non-dominated subset of points (first Pareto front).

    Args:
        F: Objective values array (n_solutions, n_objectives) or None.
        return_indices: When True, also return indices of the front in F.
    """
    if F is None:
        if return_indices:
            return np.empty((0, 0)), np.array([], dtype=int)
        return None
    F = np.asarray(F)
    if F.size == 0 or F.ndim < 2:
        if return_indices:
            n = int(F.shape[0]) if F.ndim > 0 else 0
            return F, np.arange(n, dtype=int)
        return F
    fronts, _ = sort_nondominated(F)
    idx = np.asarray(fronts[0], dtype=int)
    front = F[idx]
    return (front, idx) if return_indices else front


__all__ = [
    "assign_ranks",
    "dominance_test",
    "dominates",
    "nondominated",
    "pareto_filter",
    "sort_nondominated",
]
