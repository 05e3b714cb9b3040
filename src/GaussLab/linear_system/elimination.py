""" Gaussian elimination with partial pivoting for a square system given as
an augmented matrix `[A | b]`.

The solve is split in two phases: forward elimination brings the owned
matrix to row-echelon form in place, and back substitution reads the
unknowns off from the last row upwards. Rows whose pivot vanishes (within
`epsilon`) are not an error; they show up during back substitution as
either a free unknown (`0 = 0`) or an unsatisfiable equation
(`0 = nonzero`). """

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from GaussLab.linear_system.results import (
    Classification, Inconsistent, Infinite, Unique
)
from GaussLab.linear_system.utils import EPSILON, as_augmented

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackSubstitution:
    """ Raw output of the back substitution pass. `solution` is None when an
    unsatisfiable row was met. """
    solution: NDArray | None
    free_variables: tuple[int, ...] = ()
    inconsistent_row: int | None = None


class GaussianElimination:

    def __init__(
        self,
        augmented: ArrayLike,
        epsilon: float = EPSILON,
        exact_zero_test: bool = False,
    ) -> None:
        """
        :param augmented: `n x (n+1)` matrix, the last column holds the
        right-hand side. The values are copied.
        :param epsilon: magnitudes at or below it count as zero
        :param exact_zero_test: classify as infinite whenever an unknown
        comes out as exactly 0.0, instead of tracking free unknowns
        """
        if epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {epsilon}.")

        self._matrix = as_augmented(augmented)
        self.epsilon = epsilon
        self.exact_zero_test = exact_zero_test
        self.n_equations, self.n_columns = self._matrix.shape
        self.n_unknowns = self.n_columns - 1
        self._result: Classification | None = None

    @classmethod
    def from_values(
        cls, n: int, values: Iterable[float], **kwargs: Any
    ) -> GaussianElimination:
        """ Build from `n*(n+1)` numbers listed row by row. """
        if n < 1:
            raise ValueError(f"Number of equations must be positive, got {n}.")
        flat = np.fromiter(values, dtype=np.float64)
        expected = n * (n + 1)
        if flat.size != expected:
            raise ValueError(
                f"Expected {expected} values for {n} equations,"
                f" got {flat.size}."
            )
        return cls(flat.reshape(n, n + 1), **kwargs)

    @property
    def matrix(self) -> NDArray:
        """ Read-only view of the owned matrix; in echelon form after
        `solve`. """
        view = self._matrix.view()
        view.flags.writeable = False
        return view

    def forward_elimination(self) -> NDArray:
        matrix = self._matrix
        for p in range(min(self.n_equations, self.n_unknowns)):
            # partial pivoting, ties go to the upper row
            max_row = p + int(np.argmax(np.abs(matrix[p:, p])))
            matrix[[p, max_row]] = matrix[[max_row, p]]

            if abs(matrix[p, p]) <= self.epsilon:
                LOG.debug("Column %d has no usable pivot, skipping.", p)
                continue

            self._pivot(p)

        return self.matrix

    def _pivot(self, p: int) -> None:
        matrix = self._matrix
        for i in range(p + 1, self.n_equations):
            alpha = matrix[i, p] / matrix[p, p]
            matrix[i, p:] -= alpha * matrix[p, p:]

    def back_substitution(self) -> BackSubstitution:
        """ Solves the pivot rows from the bottom up. Rows past the last
        unknown, which exist only when there are more equations than
        unknowns, are checked against their residual; construction never
        admits that shape, so that check is defensive. """
        matrix = self._matrix
        eps = self.epsilon
        rhs = self.n_unknowns
        solution = np.zeros(self.n_unknowns, dtype=np.float64)
        free_variables = []

        last = min(self.n_unknowns - 1, self.n_equations - 1)
        for i in range(last, -1, -1):
            total = matrix[i, i + 1:rhs] @ solution[i + 1:]
            residual = matrix[i, rhs] - total

            if abs(matrix[i, i]) > eps:
                solution[i] = residual / matrix[i, i]
            elif abs(residual) > eps:
                LOG.debug("Row %d reads 0 = %g.", i, residual)
                return BackSubstitution(
                    solution=None,
                    free_variables=tuple(sorted(free_variables)),
                    inconsistent_row=i,
                )
            else:
                free_variables.append(i)

        # rows past the last unknown only have to be satisfied
        for i in range(self.n_unknowns, self.n_equations):
            total = matrix[i, :rhs] @ solution
            if abs(matrix[i, rhs] - total) > eps:
                return BackSubstitution(
                    solution=None,
                    free_variables=tuple(sorted(free_variables)),
                    inconsistent_row=i,
                )

        return BackSubstitution(
            solution=solution,
            free_variables=tuple(sorted(free_variables)),
        )

    def classify(self, substitution: BackSubstitution) -> Classification:
        if substitution.solution is None:
            return Inconsistent(row=substitution.inconsistent_row)

        solution = substitution.solution
        if self.exact_zero_test:
            zeros = tuple(int(i) for i in np.flatnonzero(solution == 0.0))
            if zeros:
                return Infinite(free_variables=zeros)
        elif substitution.free_variables:
            return Infinite(free_variables=substitution.free_variables)

        return Unique(solution=solution)

    def solve(self) -> Classification:
        """ Eliminate, substitute, and classify. The matrix is reduced only
        on the first call; later calls return the same result. """
        if self._result is None:
            self.forward_elimination()
            self._result = self.classify(self.back_substitution())
            LOG.info(
                "Solved %d x %d system: %s.",
                self.n_equations, self.n_unknowns, self._result.kind,
            )
        return self._result


def solve_augmented(
    augmented: ArrayLike,
    epsilon: float = EPSILON,
    exact_zero_test: bool = False,
) -> Classification:
    return GaussianElimination(
        augmented, epsilon=epsilon, exact_zero_test=exact_zero_test
    ).solve()
