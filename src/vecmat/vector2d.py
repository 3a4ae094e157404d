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

# Planar helpers working on plain 2 dimensional Vectors.

from vecmat.errors import ShapeError
from vecmat.vector import Vector


def vector2(x: float, y: float) -> Vector:
    return Vector.from_coords((x, y))


def orthogonal_complement(v: Vector) -> Vector:
    """Return v rotated by -90 degrees: (x, y) -> (y, -x)."""
    if v.dimension != 2:
        raise ShapeError(
            f"Orthogonal complement needs a 2D vector, got dimension {v.dimension}"
        )
    return vector2(v.y, -v.x)


def distance(p0: Vector, p1: Vector) -> float:
    """Euclidean distance between two points."""
    return (p0 - p1).norm()


def segments_orthogonal(b: Vector, a: Vector, c: Vector) -> bool:
    """
    Check if segment [B,A] is orthogonal to segment [B,C].

    Parameters
    ----------
    b : Vector
        The common point of the two segments.
    a, c : Vector
        The other end points.
    """
    return (a - b).is_orthogonal(c - b)
