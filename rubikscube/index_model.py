"""A cube model stored as edge and corner cubies, built for fast face turns."""

from __future__ import annotations

from typing import NamedTuple, Union

from rubikscube.cube import Color, Corner, CubeError, Edge, Face, RubiksCube
from rubikscube.cubie_turns import Cubie, face_turn
from rubikscube.model import RubiksCubeModel

# Colours of each edge piece, keyed by the piece's home position.
_EDGE_PIECE_COLORS: dict[Edge, tuple[Color, Color]] = {
    Edge.UB: (Color.RED, Color.YELLOW),
    Edge.UR: (Color.RED, Color.GREEN),
    Edge.UF: (Color.RED, Color.WHITE),
    Edge.UL: (Color.RED, Color.BLUE),
    Edge.FR: (Color.WHITE, Color.GREEN),
    Edge.FL: (Color.WHITE, Color.BLUE),
    Edge.BL: (Color.YELLOW, Color.BLUE),
    Edge.BR: (Color.YELLOW, Color.GREEN),
    Edge.DF: (Color.ORANGE, Color.WHITE),
    Edge.DL: (Color.ORANGE, Color.BLUE),
    Edge.DB: (Color.ORANGE, Color.YELLOW),
    Edge.DR: (Color.ORANGE, Color.GREEN),
}

# Colours of each corner piece (U/D colour first), keyed by home position.
_CORNER_PIECE_COLORS: dict[Corner, tuple[Color, Color, Color]] = {
    Corner.ULB: (Color.RED, Color.BLUE, Color.YELLOW),
    Corner.URB: (Color.RED, Color.GREEN, Color.YELLOW),
    Corner.URF: (Color.RED, Color.GREEN, Color.WHITE),
    Corner.ULF: (Color.RED, Color.BLUE, Color.WHITE),
    Corner.DLF: (Color.ORANGE, Color.BLUE, Color.WHITE),
    Corner.DLB: (Color.ORANGE, Color.BLUE, Color.YELLOW),
    Corner.DRB: (Color.ORANGE, Color.GREEN, Color.YELLOW),
    Corner.DRF: (Color.ORANGE, Color.GREEN, Color.WHITE),
}

# For each corner orientation, the Y/X/Z slots that receive the piece's
# colours, for even and odd parity of (piece index + position). A quarter
# turn of U or D swaps the two colours that are not on top.
_CORNER_SLOTS: dict[int, tuple[tuple[int, int, int], tuple[int, int, int]]] = {
    0: ((0, 1, 2), (0, 2, 1)),
    1: ((1, 2, 0), (2, 1, 0)),
    2: ((2, 0, 1), (1, 0, 2)),
}

# Red on top and white in front.
_CENTERS: dict[Face, Color] = {
    Face.UP: Color.RED,
    Face.LEFT: Color.BLUE,
    Face.FRONT: Color.WHITE,
    Face.RIGHT: Color.GREEN,
    Face.BACK: Color.YELLOW,
    Face.DOWN: Color.ORANGE,
}


class _Facet(NamedTuple):
    position: Union[Edge, Corner]
    slot: int


def _facets(
    rows: tuple[tuple[_Facet, _Facet, _Facet], tuple[_Facet, _Facet], tuple[_Facet, _Facet, _Facet]]
) -> dict[tuple[int, int], _Facet]:
    top, middle, bottom = rows
    table = {(0, col): facet for col, facet in enumerate(top)}
    table[(1, 0)], table[(1, 2)] = middle
    table.update({(2, col): facet for col, facet in enumerate(bottom)})
    return table


_C = Corner
_E = Edge

# Which cubie and colour slot shows on each non-centre facet.
_FACETS: dict[Face, dict[tuple[int, int], _Facet]] = {
    Face.UP: _facets((
        (_Facet(_C.ULB, 0), _Facet(_E.UB, 0), _Facet(_C.URB, 0)),
        (_Facet(_E.UL, 0), _Facet(_E.UR, 0)),
        (_Facet(_C.ULF, 0), _Facet(_E.UF, 0), _Facet(_C.URF, 0)),
    )),
    Face.LEFT: _facets((
        (_Facet(_C.ULB, 1), _Facet(_E.UL, 1), _Facet(_C.ULF, 1)),
        (_Facet(_E.BL, 1), _Facet(_E.FL, 1)),
        (_Facet(_C.DLB, 1), _Facet(_E.DL, 1), _Facet(_C.DLF, 1)),
    )),
    Face.FRONT: _facets((
        (_Facet(_C.ULF, 2), _Facet(_E.UF, 1), _Facet(_C.URF, 2)),
        (_Facet(_E.FL, 0), _Facet(_E.FR, 0)),
        (_Facet(_C.DLF, 2), _Facet(_E.DF, 1), _Facet(_C.DRF, 2)),
    )),
    Face.RIGHT: _facets((
        (_Facet(_C.URF, 1), _Facet(_E.UR, 1), _Facet(_C.URB, 1)),
        (_Facet(_E.FR, 1), _Facet(_E.BR, 1)),
        (_Facet(_C.DRF, 1), _Facet(_E.DR, 1), _Facet(_C.DRB, 1)),
    )),
    Face.BACK: _facets((
        (_Facet(_C.URB, 2), _Facet(_E.UB, 1), _Facet(_C.ULB, 2)),
        (_Facet(_E.BR, 0), _Facet(_E.BL, 0)),
        (_Facet(_C.DRB, 2), _Facet(_E.DB, 1), _Facet(_C.DLB, 2)),
    )),
    Face.DOWN: _facets((
        (_Facet(_C.DLF, 0), _Facet(_E.DF, 0), _Facet(_C.DRF, 0)),
        (_Facet(_E.DL, 0), _Facet(_E.DR, 0)),
        (_Facet(_C.DLB, 0), _Facet(_E.DB, 0), _Facet(_C.DRB, 0)),
    )),
}


def _as_edge(edge: Edge | int) -> Edge:
    try:
        return Edge(edge)
    except ValueError:
        raise CubeError(f"Invalid edge index: {edge!r}.") from None


def _as_corner(corner: Corner | int) -> Corner:
    try:
        return Corner(corner)
    except ValueError:
        raise CubeError(f"Invalid corner index: {corner!r}.") from None


class RubiksCubeIndexModel(RubiksCube):
    """Cube stored as twelve edge and eight corner cubies.

    Oriented with red on top and white in front. Only face turns are
    supported; slice turns and whole-cube rotations raise :class:`CubeError`.
    """

    def __init__(self, cube: RubiksCubeModel | None = None) -> None:
        if cube is None:
            self._edges = [Cubie(int(edge)) for edge in Edge]
            self._corners = [Cubie(int(corner)) for corner in Corner]
            return

        if (
            cube.color(Face.UP, 1, 1) != Color.RED
            or cube.color(Face.FRONT, 1, 1) != Color.WHITE
        ):
            raise CubeError(
                "RubiksCubeIndexModel can only be initialized from a model if "
                "it's oriented with red on top and white up front."
            )
        self._corners = [
            Cubie(cube.corner_index(corner), cube.corner_orientation(corner))
            for corner in Corner
        ]
        self._edges = [
            Cubie(cube.edge_index(edge), cube.edge_orientation(edge))
            for edge in Edge
        ]

    def __repr__(self) -> str:
        return f"RubiksCubeIndexModel(solved={self.is_solved()})"

    # Inspection.

    def edge_colors(self, edge: Edge | int) -> tuple[Color, Color]:
        """Colours of the edge cubie at a position, U/D or F/B colour first."""
        cubie = self._edges[_as_edge(edge)]
        first, second = _EDGE_PIECE_COLORS[Edge(cubie.index)]
        if cubie.orientation == 1:
            return second, first
        return first, second

    def corner_colors(self, corner: Corner | int) -> tuple[Color, Color, Color]:
        """Colours of the corner cubie at a position, in Y, X, Z order."""
        position = _as_corner(corner)
        cubie = self._corners[position]
        orientation = cubie.orientation if cubie.orientation in (0, 1) else 2
        slots = _CORNER_SLOTS[orientation][(cubie.index + int(position)) % 2]
        colors: list[Color] = [Color.WHITE] * 3
        for slot, color in zip(slots, _CORNER_PIECE_COLORS[Corner(cubie.index)]):
            colors[slot] = color
        return colors[0], colors[1], colors[2]

    def color(self, face: Face | int, row: int, col: int) -> Color:
        try:
            face = Face(face)
        except ValueError:
            raise CubeError(f"Invalid face: {face!r}.") from None
        if not (0 <= row <= 2 and 0 <= col <= 2):
            raise CubeError(f"Invalid row/column: ({row}, {col}).")
        if row == 1 and col == 1:
            return _CENTERS[face]
        position, slot = _FACETS[face][(row, col)]
        if isinstance(position, Edge):
            return self.edge_colors(position)[slot]
        return self.corner_colors(position)[slot]

    # Indexing.

    def edge_index(self, edge: Edge | int) -> int:
        """Index of the cubie occupying an edge position."""
        return self._edges[_as_edge(edge)].index

    def edge_orientation(self, edge: Edge | int) -> int:
        """Orientation (0 or 1) of the cubie occupying an edge position."""
        return self._edges[_as_edge(edge)].orientation

    def corner_index(self, corner: Corner | int) -> int:
        """Index of the cubie occupying a corner position."""
        return self._corners[_as_corner(corner)].index

    def corner_orientation(self, corner: Corner | int) -> int:
        """Orientation (0, 1 or 2) of the cubie occupying a corner position."""
        return self._corners[_as_corner(corner)].orientation

    def is_solved(self) -> bool:
        return all(
            cubie.index == position and cubie.orientation == 0
            for cubies in (self._corners, self._edges)
            for position, cubie in enumerate(cubies)
        )

    # Face turns.

    def _turn(self, face: Face, quarter_turns: int) -> RubiksCubeIndexModel:
        face_turn(self._edges, self._corners, face, quarter_turns)
        return self

    def u(self) -> RubiksCubeIndexModel:
        return self._turn(Face.UP, 1)

    def u_prime(self) -> RubiksCubeIndexModel:
        return self._turn(Face.UP, -1)

    def u2(self) -> RubiksCubeIndexModel:
        return self._turn(Face.UP, 2)

    def l(self) -> RubiksCubeIndexModel:  # noqa: E743
        return self._turn(Face.LEFT, 1)

    def l_prime(self) -> RubiksCubeIndexModel:
        return self._turn(Face.LEFT, -1)

    def l2(self) -> RubiksCubeIndexModel:
        return self._turn(Face.LEFT, 2)

    def f(self) -> RubiksCubeIndexModel:
        return self._turn(Face.FRONT, 1)

    def f_prime(self) -> RubiksCubeIndexModel:
        return self._turn(Face.FRONT, -1)

    def f2(self) -> RubiksCubeIndexModel:
        return self._turn(Face.FRONT, 2)

    def r(self) -> RubiksCubeIndexModel:
        return self._turn(Face.RIGHT, 1)

    def r_prime(self) -> RubiksCubeIndexModel:
        return self._turn(Face.RIGHT, -1)

    def r2(self) -> RubiksCubeIndexModel:
        return self._turn(Face.RIGHT, 2)

    def b(self) -> RubiksCubeIndexModel:
        return self._turn(Face.BACK, 1)

    def b_prime(self) -> RubiksCubeIndexModel:
        return self._turn(Face.BACK, -1)

    def b2(self) -> RubiksCubeIndexModel:
        return self._turn(Face.BACK, 2)

    def d(self) -> RubiksCubeIndexModel:
        return self._turn(Face.DOWN, 1)

    def d_prime(self) -> RubiksCubeIndexModel:
        return self._turn(Face.DOWN, -1)

    def d2(self) -> RubiksCubeIndexModel:
        return self._turn(Face.DOWN, 2)

    # Slice turns and whole-cube rotations move the centres, which this
    # model keeps fixed.

    @staticmethod
    def _unsupported(name: str) -> RubiksCube:
        raise CubeError(
            f"RubiksCubeIndexModel.{name} is unsupported: only face turns are allowed."
        )

    def m(self) -> RubiksCube:
        return self._unsupported("m")

    def m_prime(self) -> RubiksCube:
        return self._unsupported("m_prime")

    def m2(self) -> RubiksCube:
        return self._unsupported("m2")

    def e(self) -> RubiksCube:
        return self._unsupported("e")

    def e_prime(self) -> RubiksCube:
        return self._unsupported("e_prime")

    def e2(self) -> RubiksCube:
        return self._unsupported("e2")

    def s(self) -> RubiksCube:
        return self._unsupported("s")

    def s_prime(self) -> RubiksCube:
        return self._unsupported("s_prime")

    def s2(self) -> RubiksCube:
        return self._unsupported("s2")

    def y(self) -> RubiksCube:
        return self._unsupported("y")

    def y_prime(self) -> RubiksCube:
        return self._unsupported("y_prime")

    def y2(self) -> RubiksCube:
        return self._unsupported("y2")

    def x(self) -> RubiksCube:
        return self._unsupported("x")

    def x_prime(self) -> RubiksCube:
        return self._unsupported("x_prime")

    def x2(self) -> RubiksCube:
        return self._unsupported("x2")

    def z(self) -> RubiksCube:
        return self._unsupported("z")

    def z_prime(self) -> RubiksCube:
        return self._unsupported("z_prime")

    def z2(self) -> RubiksCube:
        return self._unsupported("z2")