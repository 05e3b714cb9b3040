""" Reads a problem file: the number of equations `n` as the first token of
the first line (the rest of that line is ignored), followed by the
`n*(n+1)` entries of the augmented matrix, row by row, separated by any
whitespace. """

import logging
from pathlib import Path
from typing import TextIO

import numpy as np
from numpy.typing import NDArray

LOG = logging.getLogger(__name__)


def parse_augmented(text: str) -> NDArray:
    header, _, body = text.partition('\n')
    header_tokens = header.split()
    if not header_tokens:
        raise ValueError("Missing the number of equations on the first line.")

    try:
        n = int(header_tokens[0])
    except ValueError as err:
        raise ValueError(
            f"Number of equations must be an integer, got {header_tokens[0]!r}."
        ) from err
    if n < 1:
        raise ValueError(f"Number of equations must be positive, got {n}.")

    expected = n * (n + 1)
    tokens = body.split()
    if len(tokens) < expected:
        raise ValueError(
            f"Expected {expected} matrix entries for {n} equations,"
            f" found {len(tokens)}."
        )
    if len(tokens) > expected:
        LOG.warning(
            "Ignoring %d value(s) after the augmented matrix.",
            len(tokens) - expected,
        )

    values = []
    for token in tokens[:expected]:
        try:
            values.append(float(token))
        except ValueError as err:
            raise ValueError(f"Not a number: {token!r}.") from err

    return np.array(values, dtype=np.float64).reshape(n, n + 1)


def load_augmented(stream: TextIO) -> NDArray:
    return parse_augmented(stream.read())


def load_file(path: str | Path) -> NDArray:
    """
    :param path: the problem file
    :raises FileNotFoundError: if there is no such file
    :raises ValueError: if the file content is malformed
    """
    with open(path, encoding='utf-8') as stream:
        return load_augmented(stream)
