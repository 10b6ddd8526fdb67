import pytest

from rubikscube.cube import Color, CubeError, Face, Move, RubiksCube


def _record(name):
    def method(self):
        self.log.append(name)
        return self

    method.__name__ = name
    return method


class RecordingCube(RubiksCube):
    def __init__(self):
        self.log = []

    def color(self, face, row, col):
        return Color(face)

    def is_solved(self):
        return not self.log

    u = _record("u")
    u_prime = _record("u_prime")
    u2 = _record("u2")
    l = _record("l")  # noqa: E741
    l_prime = _record("l_prime")
    l2 = _record("l2")
    f = _record("f")
    f_prime = _record("f_prime")
    f2 = _record("f2")
    r = _record("r")
    r_prime = _record("r_prime")
    r2 = _record("r2")
    b = _record("b")
    b_prime = _record("b_prime")
    b2 = _record("b2")
    d = _record("d")
    d_prime = _record("d_prime")
    d2 = _record("d2")
    m = _record("m")
    m_prime = _record("m_prime")
    m2 = _record("m2")
    e = _record("e")
    e_prime = _record("e_prime")
    e2 = _record("e2")
    s = _record("s")
    s_prime = _record("s_prime")
    s2 = _record("s2")
    y = _record("y")
    y_prime = _record("y_prime")
    y2 = _record("y2")
    x = _record("x")
    x_prime = _record("x_prime")
    x2 = _record("x2")
    z = _record("z")
    z_prime = _record("z_prime")
    z2 = _record("z2")


@pytest.mark.parametrize(
    "move, text",
    [
        (Move.L, "L"),
        (Move.L_PRIME, "L'"),
        (Move.R2, "R2"),
        (Move.U_PRIME, "U'"),
        (Move.Y, "Y"),
        (Move.X_PRIME, "X'"),
        (Move.Z2, "Z2"),
        (Move.M_PRIME, "M'"),
        (Move.E2, "E2"),
        (Move.S, "S"),
    ],
)
def test_describe(move, text):
    assert RecordingCube().describe(move) == text


def test_describe_accepts_int():
    cube = RecordingCube()
    assert RubiksCube.describe(cube, 1) == "L'"
    assert RubiksCube.describe(cube, 35) == "S2"


@pytest.mark.parametrize(
    "move, method",
    [
        (Move.L, "l"),
        (Move.L_PRIME, "l_prime"),
        (Move.L2, "l2"),
        (Move.D_PRIME, "d_prime"),
        (Move.F2, "f2"),
        (Move.Y_PRIME, "y_prime"),
        (Move.S, "s"),
    ],
)
def test_move_dispatches(move, method):
    cube = RecordingCube()
    assert cube.move(move) is cube
    assert cube.log == [method]


@pytest.mark.parametrize(
    "move, method",
    [
        (Move.L, "l_prime"),
        (Move.L_PRIME, "l"),
        (Move.L2, "l2"),
        (Move.B, "b_prime"),
        (Move.X_PRIME, "x"),
        (Move.E2, "e2"),
    ],
)
def test_invert_dispatches(move, method):
    cube = RecordingCube()
    assert cube.invert(move) is cube
    assert cube.log == [method]


def test_every_move_and_inverse_dispatch_to_distinct_pairs():
    for move in Move:
        cube = RecordingCube()
        assert RubiksCube.move(cube, move) is cube
        assert RubiksCube.invert(cube, move) is cube
        applied, undone = cube.log
        if move.name.endswith("2"):
            assert applied == undone
        else:
            assert applied != undone
            assert {applied, undone} == {
                move.name[0].lower(),
                move.name[0].lower() + "_prime",
            }


@pytest.mark.parametrize("bad", [36, 99, -1])
def test_invalid_move_raises(bad):
    cube = RecordingCube()
    with pytest.raises(CubeError, match="Invalid face turn index."):
        RubiksCube.move(cube, bad)
    with pytest.raises(CubeError):
        RubiksCube.invert(cube, bad)
    with pytest.raises(CubeError):
        RubiksCube.describe(cube, bad)
    assert cube.log == []


def test_notation_round_trip_is_unique():
    cube = RecordingCube()
    described = [RubiksCube.describe(cube, index) for index in range(len(Move))]
    notations = [Move(index).notation for index in range(len(Move))]
    assert described == notations
    assert len(set(described)) == len(Move)
    assert described[:3] == ["L", "L'", "L2"]


def test_subclass_color_and_solved():
    cube = RecordingCube()
    assert cube.color(Face.FRONT, 0, 0) is Color.RED
    assert cube.is_solved()
    assert RubiksCube.move(cube, Move(6)) is cube
    assert cube.log == ["u"]
    assert not cube.is_solved()