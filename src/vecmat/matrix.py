# Copyright 2024 Gergely Bencsik
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#     http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from typing import Iterable, Optional, Union

import numpy as np

from vecmat.defs import *
from vecmat.errors import ShapeError
from vecmat.vector import Vector, check_index


class Matrix:
    """
    A real-valued matrix of M rows and N columns, zero-initialized.

    Besides coefficient access and products, the matrix can be configured in
    place as one of the standard linear maps (identity, scaling, reflections,
    rotations) or homogeneous 3D affine maps (scaling, translation).
    Every `set_...` configurator overwrites the whole matrix and returns the
    matrix itself, so a map can be built in one expression::

        rot = Matrix(3, 3).set_rotation_3d_z(PI / 2)
        p = rot @ Vector.from_coords((1, 0, 0))

    Parameters
    ----------
    rows : int
        Number of rows (M), at least 1.
    cols : int
        Number of columns (N), at least 1.

    Operations returning a `Vector` (`row`, `column`, `multiply_vector`)
    need the vector to have at least 2 coordinates, they raise `ShapeError`
    on 1-wide matrices.
    """

    __array_ufunc__ = None

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ShapeError(
                f"Matrix shape ({rows}, {cols}) is empty, "
                f"rows and columns need at least 1 entry"
            )
        self._grid = np.zeros((rows, cols), dtype=float)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> "Matrix":
        """Create a matrix from a nested sequence of rows."""
        try:
            grid = np.array(
                [np.asarray(row, dtype=float) for row in rows], dtype=float
            )
        except ValueError as err:
            raise ShapeError("Rows of a matrix must have equal length") from err
        if grid.ndim != 2:
            raise ShapeError(f"Expected a 2D grid of values, got {grid.ndim}D")
        mat = cls(*grid.shape)
        mat._grid[:, :] = grid
        return mat

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        return cls(size, size).set_identity()

    def copy(self) -> "Matrix":
        mat = Matrix(*self.shape)
        mat._grid[:, :] = self._grid
        return mat

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    @property
    def row_count(self) -> int:
        return self._grid.shape[0]

    @property
    def col_count(self) -> int:
        return self._grid.shape[1]

    @property
    def shape(self):
        return self._grid.shape

    @property
    def is_square(self):
        return self.row_count == self.col_count

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._grid.copy()
        return self._grid.astype(dtype)

    def get(self, i: int, j: int) -> float:
        i = check_index(i, self.row_count, "row index")
        j = check_index(j, self.col_count, "column index")
        return float(self._grid[i, j])

    def set(self, i: int, j: int, value: float):
        i = check_index(i, self.row_count, "row index")
        j = check_index(j, self.col_count, "column index")
        self._grid[i, j] = value

    @staticmethod
    def _unpack_index(index):
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError(f"matrix index must be (row, col), got {index!r}")
        return index

    def __getitem__(self, index):
        return self.get(*self._unpack_index(index))

    def __setitem__(self, index, value):
        self.set(*self._unpack_index(index), value)

    def _to_vector(self, values: np.ndarray, what: str) -> Vector:
        if len(values) < MIN_DIMENSION:
            raise ShapeError(
                f"{what} of a matrix of shape {self.shape} has {len(values)} "
                f"entries, a vector needs at least {MIN_DIMENSION}"
            )
        return Vector.from_coords(values)

    def row(self, i: int) -> Vector:
        """Return a copy of row i as a new vector."""
        i = check_index(i, self.row_count, "row index")
        return self._to_vector(self._grid[i, :], "Row")

    def column(self, j: int) -> Vector:
        """Return a copy of column j as a new vector."""
        j = check_index(j, self.col_count, "column index")
        return self._to_vector(self._grid[:, j], "Column")

    def multiply_vector(self, vector: Vector) -> Optional[Vector]:
        """
        Calculate the product of this matrix and a (column) vector.

        Parameters
        ----------
        vector : Vector
            Vector with dimension equal to the column count of the matrix.

        Returns
        -------
        Vector or None
            New vector of dimension equal to the row count, its i-th coordinate
            is the dot product of row i and the input vector.
            None if the dimension of the vector does not match the column count.

        Raises
        ------
        ShapeError
            If the matrix has a single row, so the product has only 1 entry.
        """
        if vector.dimension != self.col_count:
            logging.debug(
                f"Cannot multiply matrix of shape {self.shape} "
                f"with vector of dimension {vector.dimension}"
            )
            return None
        return self._to_vector(self._grid @ np.asarray(vector), "Product")

    def multiply_matrix(self, other: "Matrix") -> Optional["Matrix"]:
        """
        Calculate the matrix product self @ other.

        Returns
        -------
        Matrix or None
            New matrix of shape (self.row_count, other.col_count),
            or None if the column count of this matrix differs from the row
            count of the other.
        """
        if self.col_count != other.row_count:
            logging.debug(
                f"Cannot multiply matrices of shape {self.shape} and {other.shape}"
            )
            return None
        mat = Matrix(self.row_count, other.col_count)
        mat._grid[:, :] = self._grid @ other._grid
        return mat

    def __matmul__(self, other: Union[Vector, "Matrix"]):
        if isinstance(other, Vector):
            ret = self.multiply_vector(other)
            other_shape = (other.dimension,)
        elif isinstance(other, Matrix):
            ret = self.multiply_matrix(other)
            other_shape = other.shape
        else:
            return NotImplemented
        if ret is None:
            raise ShapeError(
                f"Shapes {self.shape} and {other_shape} are not aligned "
                f"for multiplication"
            )
        return ret

    def _require_shape(self, rows: int, cols: int, transform: str):
        if self.shape != (rows, cols):
            raise ShapeError(
                f"{transform} needs a {rows}x{cols} matrix, got shape {self.shape}"
            )

    def set_identity(self):
        return self.set_scaling(1.0)

    def set_scaling(self, factor: float):
        """Set as scaling: factor on the diagonal, 0 elsewhere.
        The matrix must be square."""
        if not self.is_square:
            raise ShapeError(f"Scaling needs a square matrix, got shape {self.shape}")
        self._grid[:, :] = np.eye(self.row_count) * factor
        return self

    def set_central_symmetry(self):
        return self.set_scaling(-1.0)

    def set_reflect_ox(self):
        """Set as 2D reflection across the Ox axis."""
        self._require_shape(2, 2, "Reflection across Ox")
        self.set_identity()
        self._grid[1, 1] = -1.0
        return self

    def set_reflect_oxoy(self):
        """Set as 3D reflection across the (Ox, Oy) plane."""
        self._require_shape(3, 3, "Reflection across the Oxy plane")
        self.set_identity()
        self._grid[2, 2] = -1.0
        return self

    def set_rotation_2d(self, angle: float):
        """Set as 2D rotation around the origin by angle (radians),
        counterclockwise for positive angles."""
        self._require_shape(2, 2, "2D rotation")
        c = np.cos(angle)
        s = np.sin(angle)
        self._grid[:, :] = [[c, -s], [s, c]]
        return self

    def _set_rotation_3d(self, angle: float, axis: int, name: str):
        self._require_shape(3, 3, f"3D rotation around {name}")
        self.set_identity()
        # plane orthogonal to the axis in cyclic order: (y,z), (z,x), (x,y)
        i = (axis + 1) % 3
        j = (axis + 2) % 3
        c = np.cos(angle)
        s = np.sin(angle)
        self._grid[i, i] = c
        self._grid[i, j] = -s
        self._grid[j, i] = s
        self._grid[j, j] = c
        return self

    def set_rotation_3d_x(self, angle: float):
        """Set as 3D rotation around the Ox axis by angle (radians)."""
        return self._set_rotation_3d(angle, X_AXIS, "Ox")

    def set_rotation_3d_y(self, angle: float):
        """Set as 3D rotation around the Oy axis by angle (radians)."""
        return self._set_rotation_3d(angle, Y_AXIS, "Oy")

    def set_rotation_3d_z(self, angle: float):
        """Set as 3D rotation around the Oz axis by angle (radians)."""
        return self._set_rotation_3d(angle, Z_AXIS, "Oz")

    @staticmethod
    def compose_rotation(angle_x: float, angle_y: float, angle_z: float) -> "Matrix":
        """
        Build a 3D rotation from rotations around the 3 coordinate axes.

        The result is Rz @ Ry @ Rx, so when applied to a vector, the rotation
        around Ox happens first, then Oy, then Oz (extrinsic x-y-z angles).

        Parameters
        ----------
        angle_x, angle_y, angle_z : float
            Rotation angles around Ox, Oy and Oz in radians.

        Returns
        -------
        Matrix
            The 3x3 rotation matrix.
        """
        rot_x = Matrix(3, 3).set_rotation_3d_x(angle_x)
        rot_y = Matrix(3, 3).set_rotation_3d_y(angle_y)
        rot_z = Matrix(3, 3).set_rotation_3d_z(angle_z)
        return rot_z @ rot_y @ rot_x

    def set_scaling_homogeneous_3d(self, factor: float):
        """Set as 3D scaling in homogeneous coordinates (4x4).
        The homogeneous diagonal entry stays 1."""
        self._require_shape(4, 4, "Homogeneous 3D scaling")
        self.set_identity()
        for k in range(3):
            self._grid[k, k] = factor
        return self

    def set_translation_homogeneous_3d(self, offset: Vector):
        """Set as 3D translation by offset in homogeneous coordinates (4x4)."""
        self._require_shape(4, 4, "Homogeneous 3D translation")
        if offset.dimension != 3:
            raise ShapeError(
                f"Translation offset must be 3 dimensional, got {offset.dimension}"
            )
        self.set_identity()
        self._grid[:3, 3] = np.asarray(offset)
        return self

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self._grid == other._grid))

    def __repr__(self):
        return f"Matrix({self._grid.tolist()})"
