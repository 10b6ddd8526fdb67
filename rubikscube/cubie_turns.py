"""Cubie-level turns for a cube stored as edge and corner cubies.

A cube is described by twelve edge cubies and eight corner cubies, each
held in a mutable sequence indexed by position (see :class:`Edge` and
:class:`Corner`). Every cubie records which piece it is and how it is
oriented: ``0..1`` for edges and ``0..2`` for corners.

The layout assumes red on top and white in front. Corner orientation 0
means red or orange faces up or down, 1 means the piece is twisted
clockwise from that face, and 2 counterclockwise. Edges are flipped only
by F and B quarter turns.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, replace
from typing import Any

from rubikscube.cube import Corner, CubeError, Edge, Face


@dataclass(frozen=True)
class Cubie:
    """One piece of the cube: its identity and its orientation."""

    index: int
    orientation: int = 0


@dataclass(frozen=True)
class _FaceTurn:
    corners: tuple[Corner, ...]
    edges: tuple[Edge, ...]
    twists: tuple[tuple[Corner, int], ...] = ()
    flips: tuple[Edge, ...] = ()


# Clockwise cycles: after one quarter turn each position takes the cubie
# found at the next position of the same cycle.
_FACE_TURNS: dict[Face, _FaceTurn] = {
    Face.UP: _FaceTurn(
        corners=(Corner.ULF, Corner.URF, Corner.URB, Corner.ULB),
        edges=(Edge.UL, Edge.UF, Edge.UR, Edge.UB),
    ),
    Face.LEFT: _FaceTurn(
        corners=(Corner.DLB, Corner.DLF, Corner.ULF, Corner.ULB),
        edges=(Edge.BL, Edge.DL, Edge.FL, Edge.UL),
        twists=((Corner.DLB, 1), (Corner.DLF, 2), (Corner.ULF, 1), (Corner.ULB, 2)),
    ),
    Face.FRONT: _FaceTurn(
        corners=(Corner.ULF, Corner.DLF, Corner.DRF, Corner.URF),
        edges=(Edge.UF, Edge.FL, Edge.DF, Edge.FR),
        twists=((Corner.ULF, 2), (Corner.URF, 1), (Corner.DRF, 2), (Corner.DLF, 1)),
        flips=(Edge.UF, Edge.FL, Edge.DF, Edge.FR),
    ),
    Face.RIGHT: _FaceTurn(
        corners=(Corner.DRB, Corner.URB, Corner.URF, Corner.DRF),
        edges=(Edge.BR, Edge.UR, Edge.FR, Edge.DR),
        twists=((Corner.DRB, 2), (Corner.DRF, 1), (Corner.URF, 2), (Corner.URB, 1)),
    ),
    Face.BACK: _FaceTurn(
        corners=(Corner.ULB, Corner.URB, Corner.DRB, Corner.DLB),
        edges=(Edge.UB, Edge.BR, Edge.DB, Edge.BL),
        twists=((Corner.ULB, 1), (Corner.URB, 2), (Corner.DRB, 1), (Corner.DLB, 2)),
        flips=(Edge.UB, Edge.BL, Edge.DB, Edge.BR),
    ),
    Face.DOWN: _FaceTurn(
        corners=(Corner.DLB, Corner.DRB, Corner.DRF, Corner.DLF),
        edges=(Edge.DB, Edge.DR, Edge.DF, Edge.DL),
    ),
}


def cycle(cubies: MutableSequence[Any], positions: Sequence[int]) -> None:
    """Cycle items in place: each position takes the item of the next one.

    The last position takes the item that was at the first.
    """
    positions = [int(p) for p in positions]
    if len(positions) < 2:
        return
    moved = [cubies[p] for p in positions]
    for target, source in zip(positions, moved[1:] + moved[:1]):
        cubies[target] = source


def twist_corner(
    corners: MutableSequence[Cubie], corner: Corner | int, amount: int
) -> None:
    """Add ``amount`` to the orientation of the corner cubie at a position, mod 3."""
    cubie = corners[int(corner)]
    corners[int(corner)] = replace(
        cubie, orientation=(cubie.orientation + amount) % 3
    )


def flip_edge(edges: MutableSequence[Cubie], edge: Edge | int) -> None:
    """Toggle the orientation of the edge cubie at a position."""
    cubie = edges[int(edge)]
    edges[int(edge)] = replace(cubie, orientation=cubie.orientation ^ 1)


def face_turn(
    edges: MutableSequence[Cubie],
    corners: MutableSequence[Cubie],
    face: Face | int,
    quarter_turns: int,
) -> None:
    """Turn one face by quarter turns, clockwise when positive.

    The count is reduced modulo four, so ``-1`` or ``3`` is a prime turn and
    ``2`` a half turn. Half turns change no orientation.
    """
    try:
        face = Face(face)
    except ValueError:
        raise CubeError(f"Invalid face: {face!r}.") from None
    turn = _FACE_TURNS[face]
    quarter_turns %= 4
    if quarter_turns == 0:
        return

    if quarter_turns == 3:
        corner_cycle = turn.corners[::-1]
        edge_cycle = turn.edges[::-1]
        repeats = 1
    else:
        corner_cycle = turn.corners
        edge_cycle = turn.edges
        repeats = quarter_turns

    for _ in range(repeats):
        cycle(corners, corner_cycle)
        cycle(edges, edge_cycle)

    if quarter_turns == 2:
        return
    for corner, amount in turn.twists:
        twist_corner(corners, corner, amount)
    for edge in turn.flips:
        flip_edge(edges, edge)