"""Numeric vector representations.

Coordinates are addressed with a 1-based index through ``coordinate(d)``,
and exported as a float array through ``to_array()``.
"""

from abc import ABC, abstractmethod

import numpy as np

__all__ = ['NumberVector', 'DoubleVector']


class NumberVector(ABC):
    """Abstract fixed-dimensionality numeric vector."""

    @property
    @abstractmethod
    def dimensionality(self) -> int:
        """Number of coordinates."""

    @abstractmethod
    def coordinate(self, d: int) -> float:
        """Value of dimension ``d`` (1-based)."""

    def to_array(self) -> np.ndarray:
        """Copy of all coordinates as a float64 array."""
        return np.array([self.coordinate(d) for d in range(1, self.dimensionality + 1)], dtype=float)

    def _check_index(self, d: int) -> None:
        if not 1 <= d <= self.dimensionality:
            raise IndexError(f"Dimension {d} out of range 1..{self.dimensionality}")

    def __len__(self):
        return self.dimensionality

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return np.array_equal(self.to_array(), other.to_array())

    def __hash__(self):
        return hash((type(self), tuple(self.to_array())))

    def __str__(self):
        return " ".join(str(v) for v in self.to_array())


class DoubleVector(NumberVector):
    """Vector of float64 coordinates.

    Parameters
    ----------
    values : array-like
        1-D sequence of numbers. The values are copied.
    """

    def __init__(self, values):
        arr = np.array(values, dtype=float)
        if arr.ndim != 1:
            raise ValueError(f"DoubleVector needs 1-D values, got shape {arr.shape}")
        self._values = arr

    @property
    def dimensionality(self) -> int:
        return self._values.shape[0]

    def coordinate(self, d: int) -> float:
        self._check_index(d)
        return float(self._values[d - 1])

    def to_array(self) -> np.ndarray:
        return self._values.copy()

    def __repr__(self):
        return f"DoubleVector({self._values.tolist()})"
