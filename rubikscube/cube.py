"""Shared vocabulary and interface for Rubik's Cube models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum


class CubeError(Exception):
    """Raised when a cube operation is invalid."""


class Face(IntEnum):
    UP = 0
    LEFT = 1
    FRONT = 2
    RIGHT = 3
    BACK = 4
    DOWN = 5


class Color(IntEnum):
    WHITE = 0
    GREEN = 1
    RED = 2
    BLUE = 3
    ORANGE = 4
    YELLOW = 5


class Edge(IntEnum):
    UB = 0
    UR = 1
    UF = 2
    UL = 3
    FR = 4
    FL = 5
    BL = 6
    BR = 7
    DF = 8
    DL = 9
    DB = 10
    DR = 11


class Corner(IntEnum):
    ULB = 0
    URB = 1
    URF = 2
    ULF = 3
    DLF = 4
    DLB = 5
    DRB = 6
    DRF = 7


class Move(IntEnum):
    L = 0
    L_PRIME = 1
    L2 = 2
    R = 3
    R_PRIME = 4
    R2 = 5
    U = 6
    U_PRIME = 7
    U2 = 8
    D = 9
    D_PRIME = 10
    D2 = 11
    F = 12
    F_PRIME = 13
    F2 = 14
    B = 15
    B_PRIME = 16
    B2 = 17
    Y = 18
    Y_PRIME = 19
    Y2 = 20
    X = 21
    X_PRIME = 22
    X2 = 23
    Z = 24
    Z_PRIME = 25
    Z2 = 26
    M = 27
    M_PRIME = 28
    M2 = 29
    E = 30
    E_PRIME = 31
    E2 = 32
    S = 33
    S_PRIME = 34
    S2 = 35

    @property
    def notation(self) -> str:
        """Standard notation, e.g. ``L``, ``L'`` or ``L2``."""
        return self.name.replace("_PRIME", "'")


def _build_move_table() -> dict[Move, tuple[str, str]]:
    table: dict[Move, tuple[str, str]] = {}
    for letter in "LRUDFBYXZMES":
        base = letter.lower()
        prime = f"{base}_prime"
        double = f"{base}2"
        table[Move[letter]] = (base, prime)
        table[Move[f"{letter}_PRIME"]] = (prime, base)
        table[Move[f"{letter}2"]] = (double, double)
    return table


# Maps each move to (method applying it, method applying its inverse).
_MOVE_METHODS = _build_move_table()


def _as_move(move: Move | int) -> Move:
    try:
        return Move(move)
    except ValueError:
        raise CubeError("Invalid face turn index.") from None


class RubiksCube(ABC):
    """Base class for cube models; turns return the cube for chaining."""

    @abstractmethod
    def color(self, face: Face, row: int, col: int) -> Color:
        """Colour of the facet at ``face``, ``row``, ``col``."""

    @abstractmethod
    def is_solved(self) -> bool:
        """Whether the cube is in its solved state."""

    def describe(self, move: Move | int) -> str:
        """Notation of a move."""
        return _as_move(move).notation

    def move(self, move: Move | int) -> RubiksCube:
        """Apply a move."""
        method, _ = _MOVE_METHODS[_as_move(move)]
        return getattr(self, method)()

    def invert(self, move: Move | int) -> RubiksCube:
        """Apply the inverse of a move."""
        _, method = _MOVE_METHODS[_as_move(move)]
        return getattr(self, method)()

    # Face turns.
    @abstractmethod
    def u(self) -> RubiksCube: ...

    @abstractmethod
    def u_prime(self) -> RubiksCube: ...

    @abstractmethod
    def u2(self) -> RubiksCube: ...

    @abstractmethod
    def l(self) -> RubiksCube: ...  # noqa: E743

    @abstractmethod
    def l_prime(self) -> RubiksCube: ...

    @abstractmethod
    def l2(self) -> RubiksCube: ...

    @abstractmethod
    def f(self) -> RubiksCube: ...

    @abstractmethod
    def f_prime(self) -> RubiksCube: ...

    @abstractmethod
    def f2(self) -> RubiksCube: ...

    @abstractmethod
    def r(self) -> RubiksCube: ...

    @abstractmethod
    def r_prime(self) -> RubiksCube: ...

    @abstractmethod
    def r2(self) -> RubiksCube: ...

    @abstractmethod
    def b(self) -> RubiksCube: ...

    @abstractmethod
    def b_prime(self) -> RubiksCube: ...

    @abstractmethod
    def b2(self) -> RubiksCube: ...

    @abstractmethod
    def d(self) -> RubiksCube: ...

    @abstractmethod
    def d_prime(self) -> RubiksCube: ...

    @abstractmethod
    def d2(self) -> RubiksCube: ...

    # Slice turns.
    @abstractmethod
    def m(self) -> RubiksCube: ...

    @abstractmethod
    def m_prime(self) -> RubiksCube: ...

    @abstractmethod
    def m2(self) -> RubiksCube: ...

    @abstractmethod
    def e(self) -> RubiksCube: ...

    @abstractmethod
    def e_prime(self) -> RubiksCube: ...

    @abstractmethod
    def e2(self) -> RubiksCube: ...

    @abstractmethod
    def s(self) -> RubiksCube: ...

    @abstractmethod
    def s_prime(self) -> RubiksCube: ...

    @abstractmethod
    def s2(self) -> RubiksCube: ...

    # Whole-cube rotations.
    @abstractmethod
    def y(self) -> RubiksCube: ...

    @abstractmethod
    def y_prime(self) -> RubiksCube: ...

    @abstractmethod
    def y2(self) -> RubiksCube: ...

    @abstractmethod
    def x(self) -> RubiksCube: ...

    @abstractmethod
    def x_prime(self) -> RubiksCube: ...

    @abstractmethod
    def x2(self) -> RubiksCube: ...

    @abstractmethod
    def z(self) -> RubiksCube: ...

    @abstractmethod
    def z_prime(self) -> RubiksCube: ...

    @abstractmethod
    def z2(self) -> RubiksCube: ...