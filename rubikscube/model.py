"""A sticker-based cube model with fast face, slice and whole-cube turns."""

from __future__ import annotations

from enum import IntEnum
from typing import TypeVar

from rubikscube.cube import Color, Corner, CubeError, Edge, Face, RubiksCube
from rubikscube.sticker_turns import face_turn, slice_turn

_E = TypeVar("_E", bound=IntEnum)

_STICKERS_PER_FACE = 8

# Row-major (row * 3 + col) position to the clockwise storage slot of a face.
_ROW_COL_LOOKUP = (0, 1, 2, 7, 0, 3, 6, 5, 4)

# Sticker indices for each edge. For M and S slice edges the U/D colour is
# first; for E slice edges the F/B colour is first.
_EDGE_STICKERS: dict[Edge, tuple[int, int]] = {
    Edge.UB: (1, 33),
    Edge.UR: (3, 25),
    Edge.UF: (5, 17),
    Edge.UL: (7, 9),
    Edge.FR: (19, 31),
    Edge.FL: (23, 11),
    Edge.BL: (35, 15),
    Edge.BR: (39, 27),
    Edge.DF: (41, 21),
    Edge.DL: (47, 13),
    Edge.DB: (45, 37),
    Edge.DR: (43, 29),
}

# Sticker indices for each corner in Y, X, Z order (e.g. up-left-back).
_CORNER_STICKERS: dict[Corner, tuple[int, int, int]] = {
    Corner.ULB: (0, 8, 34),
    Corner.URB: (2, 26, 32),
    Corner.URF: (4, 24, 18),
    Corner.ULF: (6, 10, 16),
    Corner.DLF: (40, 12, 22),
    Corner.DLB: (46, 14, 36),
    Corner.DRB: (44, 28, 38),
    Corner.DRF: (42, 30, 20),
}

# Sum of (1 << colour) over a cubie's stickers identifies the cubie.
_CORNER_SUMS = {44: 0, 38: 1, 7: 2, 13: 3, 25: 4, 56: 5, 50: 6}
_EDGE_SUMS = {36: 0, 6: 1, 5: 2, 12: 3, 3: 4, 9: 5, 40: 6, 34: 7, 17: 8, 24: 9, 48: 10}

_CLOCKWISE_CHECK_SECOND = frozenset({Corner.ULB, Corner.URF, Corner.DLF, Corner.DRB})
_UD_COLORS = frozenset({Color.RED, Color.ORANGE})
_LR_COLORS = frozenset({Color.BLUE, Color.GREEN})
_FB_COLORS = frozenset({Color.WHITE, Color.YELLOW})

# Solved state as seen by the solvers: red on top, white in front.
_SOLVED_FACES: dict[Face, Color] = {
    Face.FRONT: Color.WHITE,
    Face.RIGHT: Color.GREEN,
    Face.UP: Color.RED,
    Face.LEFT: Color.BLUE,
    Face.DOWN: Color.ORANGE,
    Face.BACK: Color.YELLOW,
}


def _coerce(enum_cls: type[_E], value: int, message: str) -> _E:
    try:
        return enum_cls(value)
    except ValueError:
        raise CubeError(message) from None


def _packed(color: Color) -> int:
    return int.from_bytes(bytes([int(color)]) * _STICKERS_PER_FACE, "little")


class RubiksCubeModel(RubiksCube):
    """Raw cube of 48 stickers plus six separately stored centres.

    A new model has white on top and red in front; the layout is::

            U
          L F R B
            D
    """

    def __init__(self) -> None:
        self._stickers: list[Color] = [
            Color(i // _STICKERS_PER_FACE) for i in range(6 * _STICKERS_PER_FACE)
        ]
        self._centers: list[Color] = list(Color)

    def copy(self) -> RubiksCubeModel:
        """An independent copy of this cube."""
        clone = RubiksCubeModel()
        clone._stickers = list(self._stickers)
        clone._centers = list(self._centers)
        return clone

    __copy__ = copy

    # Inspection.

    def color(self, face: Face | int, row: int, col: int) -> Color:
        face = _coerce(Face, face, f"Invalid face: {face!r}.")
        if not (0 <= row <= 2 and 0 <= col <= 2):
            raise CubeError(f"Invalid row/column: ({row}, {col}).")
        if row == 1 and col == 1:
            return self._centers[face]
        slot = _ROW_COL_LOOKUP[row * 3 + col]
        return self._stickers[face * _STICKERS_PER_FACE + slot]

    def sticker(self, index: int) -> Color:
        """Colour of the sticker at a flat index in ``0..47``."""
        if not 0 <= index < len(self._stickers):
            raise CubeError(f"Invalid sticker index: {index!r}.")
        return self._stickers[index]

    def edge_colors(self, edge: Edge | int) -> tuple[Color, Color]:
        edge = _coerce(Edge, edge, "RubiksCubeModel.edge_colors Bad edge index.")
        first, second = _EDGE_STICKERS[edge]
        return self._stickers[first], self._stickers[second]

    def corner_colors(self, corner: Corner | int) -> tuple[Color, Color, Color]:
        corner = _coerce(
            Corner, corner, "RubiksCubeModel.corner_colors Bad corner index."
        )
        y, x, z = _CORNER_STICKERS[corner]
        return self._stickers[y], self._stickers[x], self._stickers[z]

    def face(self, face: Face | int) -> int:
        """The eight stickers of a face packed little-endian into one integer."""
        face = _coerce(Face, face, f"Invalid face: {face!r}.")
        base = face * _STICKERS_PER_FACE
        segment = self._stickers[base:base + _STICKERS_PER_FACE]
        return int.from_bytes(bytes(int(c) for c in segment), "little")

    def is_solved(self) -> bool:
        """Solved with red on top and white in front."""
        return all(
            self.face(face) == _packed(color) for face, color in _SOLVED_FACES.items()
        )

    # Indexing.

    def corner_index(self, corner: Corner | int) -> int:
        """Index ``0..7`` of the cubie occupying a corner position."""
        side_sum = sum(1 << int(c) for c in self.corner_colors(corner))
        return _CORNER_SUMS.get(side_sum, 7)

    def corner_orientation(self, corner: Corner | int) -> int:
        """Orientation ``0..2`` of the cubie at a corner (red on top, white front).

        0: red or orange faces up or down; 1: twisted clockwise; 2: twisted
        counterclockwise.
        """
        corner = _coerce(
            Corner, corner, "RubiksCubeModel.corner_orientation Bad corner index."
        )
        colors = self.corner_colors(corner)
        if colors[0] in _UD_COLORS:
            return 0
        checked = colors[1] if corner in _CLOCKWISE_CHECK_SECOND else colors[2]
        return 1 if checked in _UD_COLORS else 2

    def edge_index(self, edge: Edge | int) -> int:
        """Index ``0..11`` of the cubie occupying an edge position."""
        side_sum = sum(1 << int(c) for c in self.edge_colors(edge))
        return _EDGE_SUMS.get(side_sum, 11)

    def edge_orientation(self, edge: Edge | int) -> int:
        """0 if the edge at a position is oriented, 1 if it is flipped."""
        first, second = self.edge_colors(edge)
        if first in _LR_COLORS:
            return 1
        if first in _FB_COLORS and second in _UD_COLORS:
            return 1
        return 0

    # Comparison.

    def _faces(self) -> tuple[int, ...]:
        return tuple(self.face(face) for face in Face)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RubiksCubeModel):
            return NotImplemented
        return any(a < b for a, b in zip(self._faces(), other._faces()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RubiksCubeModel):
            return NotImplemented
        return self._faces() == other._faces()

    def __hash__(self) -> int:
        return hash(self._faces())

    def __repr__(self) -> str:
        return f"RubiksCubeModel(solved={self.is_solved()})"

    # Face turns.

    def _turn(self, face: Face, quarter_turns: int) -> RubiksCubeModel:
        face_turn(self._stickers, face, quarter_turns)
        return self

    def _slice(self, name: str, quarter_turns: int) -> RubiksCubeModel:
        slice_turn(self._stickers, self._centers, name, quarter_turns)
        return self

    def u(self) -> RubiksCubeModel:
        return self._turn(Face.UP, 1)

    def u_prime(self) -> RubiksCubeModel:
        return self._turn(Face.UP, -1)

    def u2(self) -> RubiksCubeModel:
        return self._turn(Face.UP, 2)

    def l(self) -> RubiksCubeModel:  # noqa: E743
        return self._turn(Face.LEFT, 1)

    def l_prime(self) -> RubiksCubeModel:
        return self._turn(Face.LEFT, -1)

    def l2(self) -> RubiksCubeModel:
        return self._turn(Face.LEFT, 2)

    def f(self) -> RubiksCubeModel:
        return self._turn(Face.FRONT, 1)

    def f_prime(self) -> RubiksCubeModel:
        return self._turn(Face.FRONT, -1)

    def f2(self) -> RubiksCubeModel:
        return self._turn(Face.FRONT, 2)

    def r(self) -> RubiksCubeModel:
        return self._turn(Face.RIGHT, 1)

    def r_prime(self) -> RubiksCubeModel:
        return self._turn(Face.RIGHT, -1)

    def r2(self) -> RubiksCubeModel:
        return self._turn(Face.RIGHT, 2)

    def b(self) -> RubiksCubeModel:
        return self._turn(Face.BACK, 1)

    def b_prime(self) -> RubiksCubeModel:
        return self._turn(Face.BACK, -1)

    def b2(self) -> RubiksCubeModel:
        return self._turn(Face.BACK, 2)

    def d(self) -> RubiksCubeModel:
        return self._turn(Face.DOWN, 1)

    def d_prime(self) -> RubiksCubeModel:
        return self._turn(Face.DOWN, -1)

    def d2(self) -> RubiksCubeModel:
        return self._turn(Face.DOWN, 2)

    # Slice turns.

    def m(self) -> RubiksCubeModel:
        """M slice, turning the same way as L."""
        return self._slice("M", 1)

    def m_prime(self) -> RubiksCubeModel:
        return self._slice("M", -1)

    def m2(self) -> RubiksCubeModel:
        return self._slice("M", 2)

    def e(self) -> RubiksCubeModel:
        """E slice, turning the same way as D."""
        return self._slice("E", 1)

    def e_prime(self) -> RubiksCubeModel:
        return self._slice("E", -1)

    def e2(self) -> RubiksCubeModel:
        return self._slice("E", 2)

    def s(self) -> RubiksCubeModel:
        """S slice, turning the same way as F."""
        return self._slice("S", 1)

    def s_prime(self) -> RubiksCubeModel:
        return self._slice("S", -1)

    def s2(self) -> RubiksCubeModel:
        return self._slice("S", 2)

    # Whole-cube rotations.

    def x(self) -> RubiksCubeModel:
        return self.l_prime().m_prime().r()

    def x_prime(self) -> RubiksCubeModel:
        return self.l().m().r_prime()

    def x2(self) -> RubiksCubeModel:
        return self.x().x()

    def y(self) -> RubiksCubeModel:
        return self.u().d_prime().e_prime()

    def y_prime(self) -> RubiksCubeModel:
        return self.u_prime().d().e()

    def y2(self) -> RubiksCubeModel:
        return self.y().y()

    def z(self) -> RubiksCubeModel:
        return self.f().s().b_prime()

    def z_prime(self) -> RubiksCubeModel:
        return self.f_prime().s_prime().b()

    def z2(self) -> RubiksCubeModel:
        return self.z().z()