from GaussLab.linear_system.elimination import GaussianElimination
from GaussLab.linear_system.results import Unique
from GaussLab.linear_system.utils import EPSILON, LinearSystem
import numpy as np
from numpy.typing import NDArray


def gaussian_elimination(
    ls: LinearSystem,
    epsilon: float = EPSILON,
) -> NDArray:
    """
    Solves `ls.matrix @ solution = ls.rhs`. An expected solution already
    stored on `ls` must be matched; otherwise the new one is stored.

    Raises:
    - RuntimeError: if the system has no solution or infinitely many.
    """
    result = GaussianElimination(ls.augmented(), epsilon=epsilon).solve()
    if not isinstance(result, Unique):
        raise RuntimeError(
            f"Gaussian elimination found no unique solution ({result.kind})"
        )
    solution = np.array(result.solution)

    if ls.solution is None:
        ls.solution = solution
    else:
        assert np.allclose(ls.solution, solution), \
            "Gaussian elimination must match the expected solution"

    return solution
