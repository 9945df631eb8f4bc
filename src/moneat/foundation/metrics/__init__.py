from .crowding import crowding_distance
from .pareto import (
    assign_ranks,
    dominance_test,
    dominates,
    nondominated,
    pareto_filter,
    sort_nondominated,
)
from .r2 import r2_contributions, r2_value

__all__ = [
    "assign_ranks",
    "crowding_distance",
    "dominance_test",
    "dominates",
    "nondominated",
    "pareto_filter",
    "r2_contributions",
    "r2_value",
    "sort_nondominated",
]
