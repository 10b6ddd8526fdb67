from collections import Counter

import pytest

from rubikscube.cube import Color, Corner, CubeError, Edge, Face, Move
from rubikscube.index_model import RubiksCubeIndexModel
from rubikscube.model import RubiksCubeModel

FACE_MOVES = [
    Move.L, Move.L_PRIME, Move.L2,
    Move.R, Move.R_PRIME, Move.R2,
    Move.U, Move.U_PRIME, Move.U2,
    Move.D, Move.D_PRIME, Move.D2,
    Move.F, Move.F_PRIME, Move.F2,
    Move.B, Move.B_PRIME, Move.B2,
]

SCRAMBLE = [
    Move.R, Move.U, Move.F_PRIME, Move.L2, Move.D, Move.B_PRIME,
    Move.R2, Move.U_PRIME, Move.F2, Move.D_PRIME, Move.L, Move.B2,
    Move.F, Move.B, Move.U2, Move.R_PRIME, Move.L_PRIME, Move.D2,
]

SOLVED_CENTERS = {
    Face.UP: Color.RED,
    Face.LEFT: Color.BLUE,
    Face.FRONT: Color.WHITE,
    Face.RIGHT: Color.GREEN,
    Face.BACK: Color.YELLOW,
    Face.DOWN: Color.ORANGE,
}


def _oriented_sticker_model():
    cube = RubiksCubeModel()
    cube.x()
    cube.y2()
    return cube


def _state(cube):
    return (
        tuple(cube.edge_index(e) for e in Edge),
        tuple(cube.edge_orientation(e) for e in Edge),
        tuple(cube.corner_index(c) for c in Corner),
        tuple(cube.corner_orientation(c) for c in Corner),
    )


def test_new_model_is_solved():
    assert RubiksCubeIndexModel().is_solved()


@pytest.mark.parametrize("face", list(Face))
def test_solved_faces_are_uniform(face):
    cube = RubiksCubeIndexModel()
    colors = {cube.color(face, row, col) for row in range(3) for col in range(3)}
    assert colors == {SOLVED_CENTERS[face]}


def test_solved_piece_colors():
    cube = RubiksCubeIndexModel()
    assert cube.edge_colors(Edge.UB) == (Color.RED, Color.YELLOW)
    assert cube.edge_colors(Edge.DR) == (Color.ORANGE, Color.GREEN)
    assert cube.corner_colors(Corner.ULB) == (Color.RED, Color.BLUE, Color.YELLOW)
    assert cube.corner_colors(Corner.DRF) == (Color.ORANGE, Color.GREEN, Color.WHITE)


def test_solved_indices_match_positions():
    cube = RubiksCubeIndexModel()
    assert [cube.edge_index(e) for e in Edge] == list(range(12))
    assert [cube.corner_index(c) for c in Corner] == list(range(8))
    assert all(cube.edge_orientation(e) == 0 for e in Edge)
    assert all(cube.corner_orientation(c) == 0 for c in Corner)


def test_from_oriented_solved_sticker_model():
    sticker = _oriented_sticker_model()
    assert sticker.is_solved()
    assert RubiksCubeIndexModel(sticker).is_solved()


def test_from_unoriented_sticker_model_raises():
    with pytest.raises(CubeError):
        RubiksCubeIndexModel(RubiksCubeModel())


@pytest.mark.parametrize("move", FACE_MOVES)
def test_single_move_matches_sticker_model(move):
    sticker = _oriented_sticker_model()
    cube = RubiksCubeIndexModel()
    sticker.move(move)
    cube.move(move)
    assert _state(cube) == _state(RubiksCubeIndexModel(sticker))


def test_scramble_matches_sticker_model():
    sticker = _oriented_sticker_model()
    cube = RubiksCubeIndexModel()
    for move in SCRAMBLE:
        sticker.move(move)
        cube.move(move)
    assert not cube.is_solved()
    assert _state(cube) == _state(RubiksCubeIndexModel(sticker))


def test_f_turn_flips_edge_onto_top():
    cube = RubiksCubeIndexModel().f()
    assert cube.edge_index(Edge.UF) == Edge.FL
    assert cube.edge_orientation(Edge.UF) == 1
    assert cube.color(Face.UP, 2, 1) == Color.BLUE
    assert cube.color(Face.FRONT, 0, 1) == Color.WHITE


@pytest.mark.parametrize("move", FACE_MOVES)
def test_move_then_invert_is_solved(move):
    cube = RubiksCubeIndexModel()
    cube.move(move)
    cube.invert(move)
    assert cube.is_solved()


@pytest.mark.parametrize("name", ["u", "l", "f", "r", "b", "d"])
def test_four_quarter_turns_restore(name):
    cube = RubiksCubeIndexModel()
    for _ in range(4):
        getattr(cube, name)()
    assert cube.is_solved()


@pytest.mark.parametrize("name", ["u", "l", "f", "r", "b", "d"])
def test_half_turn_equals_two_quarters(name):
    half = getattr(RubiksCubeIndexModel(), f"{name}2")()
    quarters = RubiksCubeIndexModel()
    getattr(quarters, name)()
    getattr(quarters, name)()
    assert _state(half) == _state(quarters)


@pytest.mark.parametrize("name", ["u", "l", "f", "r", "b", "d"])
def test_prime_equals_three_quarters(name):
    prime = getattr(RubiksCubeIndexModel(), f"{name}_prime")()
    quarters = RubiksCubeIndexModel()
    for _ in range(3):
        getattr(quarters, name)()
    assert _state(prime) == _state(quarters)


def test_scramble_undone_by_inverse_sequence():
    cube = RubiksCubeIndexModel()
    for move in SCRAMBLE:
        cube.move(move)
    for move in reversed(SCRAMBLE):
        cube.invert(move)
    assert cube.is_solved()


def test_udlr_turns_keep_edges_oriented():
    cube = RubiksCubeIndexModel()
    cube.r().u().l_prime().d2().u_prime().r2().l()
    assert all(cube.edge_orientation(e) == 0 for e in Edge)


def test_scramble_preserves_piece_sets_and_parity_sums():
    cube = RubiksCubeIndexModel()
    for move in SCRAMBLE:
        cube.move(move)
    assert sorted(cube.edge_index(e) for e in Edge) == list(range(12))
    assert sorted(cube.corner_index(c) for c in Corner) == list(range(8))
    assert sum(cube.edge_orientation(e) for e in Edge) % 2 == 0
    assert sum(cube.corner_orientation(c) for c in Corner) % 3 == 0


def test_scrambled_colors_match_each_face_count():
    cube = RubiksCubeIndexModel()
    for move in SCRAMBLE:
        cube.move(move)
    stickers = [
        cube.color(face, row, col)
        for face in Face
        for row in range(3)
        for col in range(3)
    ]
    assert len(stickers) == 54
    assert Counter(stickers) == Counter({color: 9 for color in Color})


def test_moves_return_self():
    cube = RubiksCubeIndexModel()
    assert cube.u() is cube
    assert cube.move(Move.R) is cube


@pytest.mark.parametrize(
    "move",
    [Move.M, Move.E_PRIME, Move.S2, Move.X, Move.Y_PRIME, Move.Z2],
)
def test_slice_and_rotation_moves_raise(move):
    cube = RubiksCubeIndexModel()
    with pytest.raises(CubeError):
        cube.move(move)


def test_invalid_indices_raise():
    cube = RubiksCubeIndexModel()
    with pytest.raises(CubeError):
        cube.edge_index(12)
    with pytest.raises(CubeError):
        cube.corner_colors(8)
    with pytest.raises(CubeError):
        cube.color(Face.UP, 3, 0)
    with pytest.raises(CubeError):
        cube.color(6, 0, 0)