# sudokit

A small Sudoku board model that keeps track of the candidates left in each
cell, together with a set of plain-Python 2D and 3D math helpers: vectors,
4x4 matrices and quaternions. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Sudoku boards

```python
from sudokit.board import Board, check_board

board = Board()
board.update_at_pos(0, 0, 5, True, False)   # row, col, value, predefined, reset
board.update_at_index(10, 3, False, False)  # cell 10 is row 1, column 1

tile = board[(0, 1)]
print(5 in tile.candidates)  # False: 5 is ruled out for this cell
print(tile.value)            # None: the cell is still open

snapshot = board.copy()      # independent copy of the tiles
board.reset_tile_positions() # recompute every open cell's candidates

print(check_board(board))    # False: the grid is not filled in
```

- `Board` is a 9x9 grid of `Tile` objects in `board.tiles`. It is indexed
  either by a `(row, col)` pair or by a flat row-major index from 0 to 80;
  anything outside the grid raises `IndexError`.
- `Tile` holds `candidates` (a set of the digits still possible),
  `predefined` (whether the puzzle gave the value) and `value` (`None`
  until the tile is filled). `Tile.set(value, predefined)` fills it in and
  narrows its candidates to that value.
- `Board.update_at_pos(row, col, value, predefined, reset)` and
  `Board.update_at_index(index, value, predefined, reset)` fill a tile. With
  `reset` false, the value is removed from the candidates of every tile in
  the same row, column and 3x3 box; with `reset` true, every open tile's
  candidates are rebuilt from scratch with `reset_tile_positions()`.
- `Board.copy()` returns a board with deep copies of the tiles.
- `check_board(board)` returns `True` when every tile is filled and each
  row and each column holds the digits 1 to 9 exactly once. It does not
  look at the 3x3 boxes.

## Math helpers

```python
from sudokit.mathutil import clamp, lerp, normalize, remap, wrap, float_equals
from sudokit.vector2 import Vector2
from sudokit.vector3 import Vector3
from sudokit.matrix import Matrix
from sudokit.quaternion import Quaternion

clamp(12.0, 0.0, 10.0)                           # 10.0
remap(5.0, 0.0, 10.0, 0.0, 100.0)                # 50.0
Vector2(3.0, 4.0).length()                       # 5.0
Vector3(1, 0, 0).cross_product(Vector3(0, 1, 0)) # Vector3(x=0, y=0, z=1)
Matrix.translate(1, 2, 3) * Matrix.identity()
Quaternion.from_axis_angle(Vector3(0, 1, 0), 1.57).to_matrix()
```

- `Vector2` and `Vector3` are immutable. They support `+` and `-` with
  another vector, unary `-`, and `*` and `/` with another vector
  (component-wise) or a number. Both offer length, distance, dot product,
  normalisation, interpolation, reflection, clamping and more; `Vector3`
  adds cross product, rotation by axis-angle or quaternion, barycentric
  coordinates, unprojection, refraction and a sphere collision check.
- `Matrix` is an immutable 4x4 matrix with fields `m0` to `m15`. It has
  builders for identity, translation, rotation, scaling, frustum,
  perspective, orthographic and look-at matrices, and supports `+`, `-`
  and `*` (matrix product) with another matrix, `determinant()`,
  `trace()`, `transpose()`, `invert()` and `to_list()`.
- `Quaternion` is immutable. It supports `+` and `-` with another
  quaternion, `*` (Hamilton product, or scaling by a number) and `/`
  (component-wise, or by a number), plus normalisation, inversion, lerp,
  nlerp, slerp and conversions to and from matrices, axis-angle and Euler
  angles.
- `Vector2.equals`, `Vector3.equals` and `Quaternion.equals` compare with
  the same relative tolerance as `float_equals`; `Quaternion.equals` also
  treats `q` and `-q` as equal.

## What it does not do

sudokit is a library only. It does not solve or generate puzzles, has no
command-line tool, and draws nothing on screen: it provides the board state
and math building blocks for a program that does.