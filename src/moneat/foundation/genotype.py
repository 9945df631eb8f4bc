"""
Genotype data model shared by the core components.

Genotypes are created and bred by the caller. Once a fitness vector is
assigned for a generation, the core only reads them.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from .exceptions import FitnessDimensionError, GenotypeOrderError, MissingFitnessError


def as_fitness(values: Sequence[float] | np.ndarray | None) -> np.ndarray | None:
    """Convert a fitness sequence to a 1-D float array (None stays None)."""
    if values is None:
        return None
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"Fitness must be one-dimensional, got shape {arr.shape}.")
    return arr


def require_fitness(genotype: "Genotype") -> np.ndarray:
    if genotype.fitness is None:
        raise MissingFitnessError(f"Genotype {genotype.id} has no fitness assigned.", genotype.id)
    return genotype.fitness


def population_fitness(population: Sequence["Genotype"]) -> np.ndarray:
    """
    Stack the fitness vectors of a population into an (N, M) matrix.

    Raises MissingFitnessError or FitnessDimensionError on contract violations.
    """
    if len(population) == 0:
        return np.empty((0, 0), dtype=float)
    first = require_fitness(population[0])
    n_obj = first.shape[0]
    for genotype in population[1:]:
        f = require_fitness(genotype)
        if f.shape[0] != n_obj:
            raise FitnessDimensionError(n_obj, f.shape[0])
    return np.vstack([g.fitness for g in population])


@dataclass(frozen=True, order=True)
class Link:
    """A connection gene: innovation id of the structural feature and its weight."""

    innovation_id: int
    weight: float = 1.0

    def __str__(self) -> str:
        return f"#{self.innovation_id}, w: {self.weight}"


@dataclass(eq=False)
class Genotype:
    """
    Base genotype: identity, optional fitness vector and bookkeeping.

    rank: position in a rank ordering (lower is better), -1 when unranked.
    q_value: derived scalar quality, normalized to [0, 1] by the caller.
    attributes: named numeric values keyed by integer attribute id.
    """

    id: int
    fitness: np.ndarray | None = None
    rank: int = -1
    q_value: float = 0.0
    age: int = 0
    generation: int = -1
    attributes: dict[int, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fitness = as_fitness(self.fitness)

    def assign_fitness(self, values: Sequence[float] | np.ndarray) -> None:
        self.fitness = as_fitness(values)

    def set_attribute(self, key: int, value: float) -> None:
        self.attributes[key] = float(value)

    def get_attribute(self, key: int) -> float:
        """Return the attribute value, -1.0 when unknown."""
        return self.attributes.get(key, -1.0)

    def add_attribute(self, key: int, value: float) -> None:
        self.attributes[key] = self.attributes.get(key, 0.0) + float(value)

    def dominates(self, other: "Genotype") -> bool:
        """True if this genotype's fitness Pareto-dominates the other's."""
        from .metrics.pareto import dominance_test

        return dominance_test(require_fitness(self), require_fitness(other)) == -1

    @property
    def genome_size(self) -> int:
        return 0

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.id == self.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: "Genotype") -> bool:
        return self.q_value < other.q_value


@dataclass(eq=False)
class NetworkGenotype(Genotype):
    """Graph-encoded genome: link genes in non-decreasing innovation order."""

    links: list[Link] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.links = list(self.links)
        for pos in range(1, len(self.links)):
            if self.links[pos].innovation_id < self.links[pos - 1].innovation_id:
                raise GenotypeOrderError(self.id, pos)

    @classmethod
    def from_pairs(cls, genotype_id: int, pairs: Iterable[tuple[int, float]], **kwargs) -> "NetworkGenotype":
        """Build a genome from (innovation_id, weight) pairs given in any order."""
        links = sorted(Link(int(i), float(w)) for i, w in pairs)
        return cls(genotype_id, links=links, **kwargs)

    def add_link(self, link: Link) -> None:
        """Insert a link keeping the innovation order."""
        keys = [lk.innovation_id for lk in self.links]
        pos = bisect.bisect_right(keys, link.innovation_id)
        self.links.insert(pos, link)

    @property
    def innovation_ids(self) -> list[int]:
        return [lk.innovation_id for lk in self.links]

    @property
    def genome_size(self) -> int:
        return len(self.links)


@dataclass(eq=False)
class RealVectorGenotype(Genotype):
    """Parametric genome: fixed-length real vector."""

    genes: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=float))

    def __post_init__(self) -> None:
        super().__post_init__()
        self.genes = np.asarray(self.genes, dtype=float)

    @property
    def genome_size(self) -> int:
        return int(self.genes.shape[0])


__all__ = [
    "Genotype",
    "Link",
    "NetworkGenotype",
    "RealVectorGenotype",
    "as_fitness",
    "population_fitness",
    "require_fitness",
]
