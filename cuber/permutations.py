"""
Slot permutations applied to the cube's cubelet list after a twist completes.

Every table is a numpy index array ``t`` of length 27 with
``new[i] = old[t[i]]``. Whole-cube turns move every slot; layer turns move
the eight non-origin slots of one Slice and leave the rest in place.
"""

from typing import Dict, List, Sequence

import numpy as np
import structlog

from .exceptions import PermutationError

logger = structlog.get_logger(__name__)

SLOTS = 27

_CUBE_TURNS = {
    "X": (6, 7, 8, 15, 16, 17, 24, 25, 26, 3, 4, 5, 12, 13, 14, 21, 22, 23, 0, 1, 2, 9, 10, 11, 18, 19, 20),
    "x": (18, 19, 20, 9, 10, 11, 0, 1, 2, 21, 22, 23, 12, 13, 14, 3, 4, 5, 24, 25, 26, 15, 16, 17, 6, 7, 8),
    "Y": (2, 11, 20, 5, 14, 23, 8, 17, 26, 1, 10, 19, 4, 13, 22, 7, 16, 25, 0, 9, 18, 3, 12, 21, 6, 15, 24),
    "y": (18, 9, 0, 21, 12, 3, 24, 15, 6, 19, 10, 1, 22, 13, 4, 25, 16, 7, 20, 11, 2, 23, 14, 5, 26, 17, 8),
    "Z": (6, 3, 0, 7, 4, 1, 8, 5, 2, 15, 12, 9, 16, 13, 10, 17, 14, 11, 24, 21, 18, 25, 22, 19, 26, 23, 20),
    "z": (2, 5, 8, 1, 4, 7, 0, 3, 6, 11, 14, 17, 10, 13, 16, 9, 12, 15, 20, 23, 26, 19, 22, 25, 18, 21, 24),
}

# {target slot: source slot}
_LAYER_TURNS = {
    "R": {2: 8, 11: 5, 20: 2, 5: 17, 23: 11, 8: 26, 17: 23, 26: 20},
    "r": {2: 20, 11: 23, 20: 26, 5: 11, 23: 17, 8: 2, 17: 5, 26: 8},
    "M": {1: 19, 10: 22, 19: 25, 4: 10, 22: 16, 7: 1, 16: 4, 25: 7},
    "m": {1: 7, 10: 4, 19: 1, 4: 16, 22: 10, 7: 25, 16: 22, 25: 19},
    "L": {18: 24, 9: 21, 0: 18, 21: 15, 3: 9, 24: 6, 15: 3, 6: 0},
    "l": {18: 0, 9: 3, 0: 6, 21: 9, 3: 15, 24: 18, 15: 21, 6: 24},
    "U": {18: 0, 19: 9, 20: 18, 9: 1, 11: 19, 0: 2, 1: 11, 2: 20},
    "u": {18: 20, 19: 11, 20: 2, 9: 19, 11: 1, 0: 18, 1: 9, 2: 0},
    "E": {21: 23, 22: 14, 23: 5, 12: 22, 14: 4, 3: 21, 4: 12, 5: 3},
    "e": {21: 3, 22: 12, 23: 21, 12: 4, 14: 22, 3: 5, 4: 14, 5: 23},
    "D": {6: 24, 7: 15, 8: 6, 15: 25, 17: 7, 24: 26, 25: 17, 26: 8},
    "d": {6: 8, 7: 17, 8: 26, 15: 7, 17: 25, 24: 6, 25: 15, 26: 24},
    "F": {0: 6, 1: 3, 2: 0, 3: 7, 5: 1, 6: 8, 7: 5, 8: 2},
    "f": {0: 2, 1: 5, 2: 8, 3: 1, 5: 7, 6: 0, 7: 3, 8: 6},
    "S": {9: 15, 10: 12, 11: 9, 12: 16, 14: 10, 15: 17, 16: 14, 17: 11},
    "s": {9: 11, 10: 14, 11: 17, 12: 10, 14: 16, 15: 9, 16: 12, 17: 15},
    "B": {18: 20, 19: 23, 20: 26, 21: 19, 23: 25, 24: 18, 25: 21, 26: 24},
    "b": {18: 24, 19: 21, 20: 18, 21: 25, 23: 19, 24: 26, 25: 23, 26: 20},
}


def _build_tables() -> Dict[str, np.ndarray]:
    tables = {}
    for command, sources in _CUBE_TURNS.items():
        tables[command] = np.array(sources, dtype=np.intp)
    for command, moves in _LAYER_TURNS.items():
        table = np.arange(SLOTS, dtype=np.intp)
        for target, source in moves.items():
            table[target] = source
        tables[command] = table

    for command, table in tables.items():
        if table.shape != (SLOTS,) or not np.array_equal(np.sort(table), np.arange(SLOTS)):
            raise PermutationError(f"Table {command!r} is not a bijection on {SLOTS} slots", command=command)
    return tables


TABLES = _build_tables()


def get_table(command: str) -> np.ndarray:
    """
    Return a copy of the permutation table for ``command``.

    Raises:
        PermutationError: If there is no table for ``command``
    """
    try:
        return TABLES[command].copy()
    except KeyError:
        raise PermutationError(f"No permutation for command {command!r}", command=command) from None


def apply_permutation(cubelets: Sequence, command: str, times: int = 1) -> List:
    """
    Reorder ``cubelets`` by the table for ``command``, ``times`` times.

    Returns:
        list: A new list; the input is left untouched

    Raises:
        PermutationError: If the input is not 27 long or a Cubelet goes missing
    """
    if len(cubelets) != SLOTS:
        raise PermutationError(f"Expected {SLOTS} cubelets, got {len(cubelets)}", command=command)
    table = TABLES.get(command)
    if table is None:
        raise PermutationError(f"No permutation for command {command!r}", command=command)

    result = list(cubelets)
    for _ in range(times):
        result = [result[i] for i in table]

    if len({id(cubelet) for cubelet in result}) != SLOTS:
        raise PermutationError("Permutation lost a cubelet", command=command)
    logger.debug("Applied permutation", command=command, times=times)
    return result
