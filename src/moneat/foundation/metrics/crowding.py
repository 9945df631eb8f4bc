from __future__ import annotations

import numpy as np


def crowding_distance(F: np.ndarray) -> np.ndarray:
    """
    Crowding contribution of each point of a single front (Deb et al.).

    Boundary points receive +1 per objective instead of infinity so the values
    stay finite and comparable across fronts. Fronts with fewer than three
    points get 1.0 for every member.
    """
    F = np.asarray(F, dtype=float)
    n = F.shape[0]
    if n < 3:
        return np.ones(n, dtype=float)

    d = np.zeros(n, dtype=float)
    for m in range(F.shape[1]):
        order = np.argsort(F[:, m], kind="mergesort")
        sorted_vals = F[order, m]
        span = sorted_vals[-1] - sorted_vals[0]
        if np.isclose(span, 0.0):
            continue
        d[order[0]] += 1.0
        d[order[-1]] += 1.0
        d[order[1:-1]] += (sorted_vals[2:] - sorted_vals[:-2]) / span
    return d


__all__ = ["crowding_distance"]
