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

# Building blocks for transforming point sets, e.g. the vertices of a shape
# that a renderer draws frame by frame.

from collections.abc import Callable
from typing import Iterable, List, Optional

import numpy as np

from vecmat.defs import *
from vecmat.errors import ShapeError
from vecmat.matrix import Matrix
from vecmat.vector import Vector

VectorFunction = Callable[[Vector], Vector]

# Vertex index pairs of the cube edges, see cube_vertices()
CUBE_EDGES = (
    # back face
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 0),
    # front face
    (4, 5),
    (5, 6),
    (6, 7),
    (7, 4),
    # back to front
    (0, 4),
    (1, 5),
    (2, 6),
    (3, 7),
)


def apply(func: VectorFunction, vectors: Iterable[Vector]) -> List[Vector]:
    """Apply func to each vector, returning the results in a new list."""
    return [func(v) for v in vectors]


def apply_matrix(matrix: Matrix, vectors: Iterable[Vector]) -> List[Vector]:
    """
    Multiply each vector by the matrix.

    Raises
    ------
    ShapeError
        If a vector dimension does not match the column count of the matrix.
    """
    return apply(lambda v: matrix @ v, vectors)


def compose(*funcs: VectorFunction) -> VectorFunction:
    """Chain vector functions, the first one is applied first."""

    def composed(v: Vector) -> Vector:
        for func in funcs:
            v = func(v)
        return v

    return composed


def affine_matrix(
    linear: Optional[Matrix] = None,
    translation: Optional[Vector] = None,
    scale: float = 1.0,
) -> Matrix:
    """
    Build a 4x4 homogeneous matrix of a 3D affine map.

    The map scales, applies the linear part, then translates:
    p -> linear @ p * scale + translation.

    Parameters
    ----------
    linear : Matrix, optional
        3x3 linear part, e.g. a rotation. The default is identity.
    translation : Vector, optional
        3D translation. The default is no translation.
    scale : float, optional
        Uniform scale factor. The default is 1.

    Returns
    -------
    Matrix
        The 4x4 matrix, to be applied to points lifted by
        `Vector.to_homogeneous`.
    """
    if linear is None:
        orientation = np.eye(3)
    elif linear.shape != (3, 3):
        raise ShapeError(f"Linear part must be 3x3, got shape {linear.shape}")
    else:
        orientation = np.asarray(linear)

    if translation is None:
        center = np.zeros(3)
    elif translation.dimension != 3:
        raise ShapeError(
            f"Translation must be 3 dimensional, got {translation.dimension}"
        )
    else:
        center = np.asarray(translation)

    return Matrix.from_rows(
        np.block([[orientation * scale, center[:, np.newaxis]], [0, 0, 0, 1]])
    )


def cube_vertices(half_size: float = 1.0) -> List[Vector]:
    """
    Vertices of an axis-aligned cube centered on the origin.

    The back face (z=-half_size) comes first, going
    bottom-left, top-left, top-right, bottom-right, then the front face in the
    same order. `CUBE_EDGES` refers to this ordering.
    """
    face = [(-1, -1), (-1, 1), (1, 1), (1, -1)]
    return [
        Vector.from_coords((x * half_size, y * half_size, z * half_size))
        for z in (-1, 1)
        for x, y in face
    ]


def line_points(direction: Vector, extent: float = np.sqrt(72), num: int = 201):
    """
    Sample points of a line through the origin along direction.

    Each point is direction scaled by a scaling matrix, the factor sweeping
    evenly between -extent/|direction| and extent/|direction|.

    Parameters
    ----------
    direction : Vector
        Direction of the line, must not be zero.
    extent : float, optional
        Distance of the first and last point from the origin.
        The default is the distance from the origin to the corners of a 12x12
        square centered at the origin.
    num : int, optional
        Number of points. The default is 201.

    Returns
    -------
    List[Vector]
    """
    length = direction.norm()
    if length == 0:
        raise ValueError("Direction of a line cannot be the zero vector")
    k_max = extent / length
    scaling = Matrix(direction.dimension, direction.dimension)
    points = []
    for k in np.linspace(-k_max, k_max, num):
        scaling.set_scaling(k)
        points.append(scaling @ direction)
    return points


def circle_points(radius: float, num: int = 1000) -> List[Vector]:
    """
    Sample a circle centered on the origin by repeated small rotations.

    Starts at (radius, 0) and rotates by 2*pi/num num times, so the returned
    list has num+1 points with the last one back at the start.
    num must be at least 1.
    """
    if num < 1:
        raise ValueError(f"Number of circle steps must be at least 1, got {num}")
    rotation = Matrix(2, 2).set_rotation_2d(2 * PI / num)
    point = Vector.from_coords((radius, 0.0))
    points = [point]
    for _ in range(num):
        point = rotation @ point
        points.append(point)
    return points
