# rubikscube

Two models of a 3x3x3 Rubik's Cube that share one interface,
`rubikscube.cube.RubiksCube`.

- `rubikscube.model.RubiksCubeModel` stores the 48 outer stickers and the six
  centres. It supports every face turn, the M, E and S slice turns and the
  whole-cube rotations X, Y and Z. A new model has white on top and red in
  front.
- `rubikscube.index_model.RubiksCubeIndexModel` stores each cubie as an index
  and an orientation, which keeps face turns cheap and suits pattern-database
  indexing. It is oriented with red on top and white in front and supports the
  face turns U, L, F, R, B and D only.

## Installing

```
pip install .
```

## Vocabulary

`rubikscube.cube` defines the enums `Face`, `Color`, `Edge`, `Corner` and
`Move`, and the exception `CubeError`. `Move` members are named `L`,
`L_PRIME`, `L2` and so on for L, R, U, D, F, B, Y, X, Z, M, E and S; a
member's `notation` property gives the standard form, such as `"L'"`.

Every model offers:

- `move(move)` applies a move, `invert(move)` applies its inverse;
- `describe(move)` returns the move's notation;
- `color(face, row, col)` returns the `Color` of a facet (rows and columns
  `0..2`, `(1, 1)` being the centre);
- `is_solved()`;
- one method per turn: `u()`, `u_prime()`, `u2()`, `l()`, ..., `s2()`,
  `x()`, ..., `z2()`. Turns return the cube, so they can be chained.

A move index outside the `Move` range raises `CubeError`.

## The sticker model

```python
from rubikscube.cube import Face, Move
from rubikscube.model import RubiksCubeModel

cube = RubiksCubeModel()
cube.r().u().r_prime().u_prime()
cube.move(Move.F2)
cube.invert(Move.F2)

print(cube.color(Face.UP, 0, 2))      # a Color
print(cube.describe(Move.R_PRIME))    # "R'"
```

Besides the shared interface it has `copy()`, `sticker(index)` for a flat
sticker index `0..47`, `edge_colors(edge)`, `corner_colors(corner)`,
`face(face)` (a face's eight stickers packed into one integer), and
`corner_index`, `corner_orientation`, `edge_index` and `edge_orientation`,
which identify the cubie at a position. Models compare equal when every face
matches, are hashable, and order by their packed faces.

`is_solved` expects red on top and white in front. Bring a freshly built cube
into that orientation with `x()` then `y2()`.

## The index model

```python
from rubikscube.cube import Corner, Edge
from rubikscube.model import RubiksCubeModel
from rubikscube.index_model import RubiksCubeIndexModel

stickers = RubiksCubeModel()
stickers.x().y2()
stickers.r().u()

cubies = RubiksCubeIndexModel(stickers)
print(cubies.corner_index(Corner.URF), cubies.corner_orientation(Corner.URF))
print(cubies.edge_index(Edge.UF), cubies.edge_orientation(Edge.UF))
```

Built with no argument, the index model starts solved. Built from a sticker
model, it takes over that model's state; the sticker model must have red on
top and white in front, otherwise `CubeError` is raised. It also offers
`edge_colors` and `corner_colors`. Slice turns and whole-cube rotations raise
`CubeError`.

## Lower-level helpers

`rubikscube.sticker_turns` turns faces and slices on plain sticker lists
(`roll_face`, `rotate_sides`, `rotate_slice`, `face_turn`, `slice_turn`), and
`rubikscube.cubie_turns` does the same on lists of `Cubie` values (`cycle`,
`twist_corner`, `flip_edge`, `face_turn`). Turn counts are clockwise quarter
turns, taken modulo four.

## What it does not do

The package is a library of cube models only. It has no solver, no command
line, and no drawing or animation of the cube.