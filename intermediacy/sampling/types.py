"""Result container for Monte Carlo intermediacy estimates."""

from dataclasses import dataclass

import numpy as np


def standard_error(phi: np.ndarray | float, samples: int) -> np.ndarray:
    """Standard error sqrt(phi * (1 - phi) / samples) of an estimate."""
    phi = np.asarray(phi, dtype=np.float64)
    return np.sqrt(phi * (1.0 - phi) / samples)


@dataclass(frozen=True)
class IntermediacyEstimate:
    """Per-node hit counts of one estimation run at a single probability.

    Uses frozen=True but omits slots=True since numpy arrays don't interact
    well with __slots__.
    """

    probability: float  # edge retention probability
    samples: int  # number of trials
    hits: np.ndarray  # int64 array of shape (n,), trials marking each node

    @property
    def phi(self) -> np.ndarray:
        """Empirical intermediacy hits / samples, values in [0, 1]."""
        return self.hits / self.samples

    @property
    def standard_error(self) -> np.ndarray:
        """sqrt(phi * (1 - phi) / samples) per node."""
        return standard_error(self.phi, self.samples)
