"""Sticker-level turns on a 48-facet cube layout.

Stickers are kept in a flat mutable sequence of 48 entries, eight per face
in the order U, L, F, R, B, D. Each face stores its stickers clockwise,
starting from the top-left::

    0 1 2
    7   3
    6 5 4

Centres are kept apart in a sequence of six entries, one per face.

Every turn takes a number of clockwise quarter turns. It is reduced modulo
four, so ``-1`` or ``3`` is a prime turn and ``2`` is a half turn. The
sequences are changed in place.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

from rubikscube.cube import CubeError, Face

_STICKERS_PER_FACE = 8

# Clockwise side cycles for each face turn: (two-sticker runs, single stickers).
# After one quarter turn, the sticker at position i takes the value found at
# position i + 1 of the same cycle.
_FACE_SIDES: dict[Face, tuple[tuple[int, ...], tuple[int, ...]]] = {
    Face.UP: ((8, 16, 24, 32), (10, 18, 26, 34)),
    Face.LEFT: ((6, 34, 46, 22), (0, 36, 40, 16)),
    Face.FRONT: ((4, 10, 40, 30), (6, 12, 42, 24)),
    Face.RIGHT: ((2, 18, 42, 38), (4, 20, 44, 32)),
    Face.BACK: ((0, 26, 44, 14), (2, 28, 46, 8)),
    Face.DOWN: ((12, 36, 28, 20), (14, 38, 30, 22)),
}

# Clockwise cycles for each slice turn: (ring a, ring b, centre ring).
_SLICES: dict[str, tuple[tuple[int, ...], tuple[int, ...], tuple[int, ...]]] = {
    "M": ((1, 37, 41, 17), (5, 33, 45, 21), (0, 4, 5, 2)),
    "E": ((15, 39, 31, 23), (11, 35, 27, 19), (1, 4, 3, 2)),
    "S": ((3, 9, 47, 29), (7, 13, 43, 25), (0, 1, 5, 3)),
}


def _cycle(
    seq: MutableSequence[Any],
    positions: Sequence[int],
    width: int,
    quarter_turns: int,
) -> None:
    """Shift runs of ``width`` items around ``positions`` by ``quarter_turns``."""
    count = len(positions)
    if count == 0:
        return
    shift = quarter_turns % count
    if shift == 0:
        return
    runs = [list(seq[p:p + width]) for p in positions]
    for target, source in zip(positions, runs[shift:] + runs[:shift]):
        seq[target:target + width] = source


def _check_ring(name: str, ring: Sequence[int], size: int = 4) -> None:
    if len(ring) != size:
        raise CubeError(f"{name} must hold {size} positions, got {len(ring)}.")


def roll_face(
    stickers: MutableSequence[Any], face: Face | int, quarter_turns: int
) -> None:
    """Rotate the eight stickers of one face clockwise by quarter turns."""
    try:
        face = Face(face)
    except ValueError:
        raise CubeError(f"Invalid face: {face!r}.") from None
    base = int(face) * _STICKERS_PER_FACE
    shift = (2 * quarter_turns) % _STICKERS_PER_FACE
    if shift == 0:
        return
    segment = list(stickers[base:base + _STICKERS_PER_FACE])
    stickers[base:base + _STICKERS_PER_FACE] = segment[-shift:] + segment[:-shift]


def rotate_sides(
    stickers: MutableSequence[Any],
    pairs: Sequence[int],
    singles: Sequence[int],
    quarter_turns: int,
) -> None:
    """Cycle the side stickers around a turning face.

    ``pairs`` names the first of two adjacent stickers moved together and
    ``singles`` the stickers moved alone; both are given in clockwise order.
    """
    _check_ring("pairs", pairs)
    _check_ring("singles", singles)
    _cycle(stickers, pairs, 2, quarter_turns)
    _cycle(stickers, singles, 1, quarter_turns)


def rotate_slice(
    stickers: MutableSequence[Any],
    centers: MutableSequence[Any],
    ring_a: Sequence[int],
    ring_b: Sequence[int],
    center_ring: Sequence[int],
    quarter_turns: int,
) -> None:
    """Cycle two rings of stickers and a ring of centres for a slice turn."""
    _check_ring("ring_a", ring_a)
    _check_ring("ring_b", ring_b)
    _check_ring("center_ring", center_ring)
    _cycle(stickers, ring_a, 1, quarter_turns)
    _cycle(stickers, ring_b, 1, quarter_turns)
    _cycle(centers, center_ring, 1, quarter_turns)


def face_turn(
    stickers: MutableSequence[Any], face: Face | int, quarter_turns: int
) -> None:
    """Turn one face of the cube by quarter turns, clockwise when positive."""
    try:
        face = Face(face)
    except ValueError:
        raise CubeError(f"Invalid face: {face!r}.") from None
    pairs, singles = _FACE_SIDES[face]
    roll_face(stickers, face, quarter_turns)
    rotate_sides(stickers, pairs, singles, quarter_turns)


def slice_turn(
    stickers: MutableSequence[Any],
    centers: MutableSequence[Any],
    slice_name: str,
    quarter_turns: int,
) -> None:
    """Turn the M, E or S slice by quarter turns.

    M turns the same way as L, E the same way as D and S the same way as F.
    """
    try:
        ring_a, ring_b, center_ring = _SLICES[slice_name]
    except KeyError:
        raise CubeError(f"Invalid slice: {slice_name!r}.") from None
    rotate_slice(stickers, centers, ring_a, ring_b, center_ring, quarter_turns)