""" Outcomes of solving a square linear system. Exactly one of the three
variants describes every solved system. """

from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Unique:
    solution: NDArray = field(compare=False)

    def __post_init__(self):
        # owned and frozen so that equality and hash cannot drift
        solution = np.array(self.solution, dtype=np.float64)
        solution.flags.writeable = False
        object.__setattr__(self, 'solution', solution)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unique):
            return NotImplemented
        return bool(np.array_equal(self.solution, other.solution))

    def __hash__(self) -> int:
        return hash(tuple(self.solution.tolist()))

    @property
    def kind(self) -> str:
        return "unique"


@dataclass(frozen=True)
class Infinite:
    # indices of the unknowns left free by back substitution
    free_variables: tuple[int, ...] = ()

    @property
    def kind(self) -> str:
        return "infinite"


@dataclass(frozen=True)
class Inconsistent:
    # first row found to read `0 = nonzero`
    row: int | None = None

    @property
    def kind(self) -> str:
        return "inconsistent"


Classification = Unique | Infinite | Inconsistent
