from __future__ import annotations
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Anything with a magnitude at or below this is treated as zero.
EPSILON = 1e-8


@dataclass
class LinearSystem:
    """ `matrix @ solution = rhs`, with the solution filled in once known. """
    matrix: NDArray
    rhs: NDArray
    solution: NDArray | None = None


    @property
    def n_equations(self) -> int:
        return len(self.rhs)


    def __str__(self) -> str:
        lstr = f"{self.n_equations} equation(s), [matrix | rhs]:\n"
        lstr += f"{self.augmented()}\n"
        if self.solution is not None:
            lstr += f"solution: {self.solution}\n"
        return lstr


    def augmented(self) -> NDArray:
        """ `[matrix | rhs]` as a fresh float array. """
        return np.column_stack((self.matrix, self.rhs)).astype(np.float64)


    @classmethod
    def from_augmented(cls, data: ArrayLike) -> LinearSystem:
        augmented = as_augmented(data)
        return cls(matrix=augmented[:, :-1], rhs=augmented[:, -1])


def as_augmented(data: ArrayLike) -> NDArray:
    """
    Copies `data` into an owned `n x (n+1)` float64 array.

    Raises:
    - ValueError: if the data is not a finite, rectangular `n x (n+1)` matrix
      with `n >= 1`.
    """
    try:
        augmented = np.array(data, dtype=np.float64)
    except ValueError as err:
        raise ValueError(f"Augmented matrix must be rectangular: {err}") from err

    if augmented.ndim != 2:
        raise ValueError(
            f"Augmented matrix must be 2-D, got {augmented.ndim} dimension(s)."
        )
    n_equations, n_columns = augmented.shape
    if n_equations < 1:
        raise ValueError("Augmented matrix needs at least one equation.")
    if n_columns != n_equations + 1:
        raise ValueError(
            f"Expected {n_equations + 1} columns for {n_equations} equations,"
            f" got {n_columns}."
        )
    if not np.all(np.isfinite(augmented)):
        raise ValueError("Augmented matrix entries must be finite.")

    return augmented
