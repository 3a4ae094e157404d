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
import operator
from typing import Iterable, Optional

import numpy as np

from vecmat.defs import *
from vecmat.errors import ShapeError


def approx(a: float, b: float, rel_eps: float = REL_EPS, abs_eps: float = ABS_EPS):
    """
    Tolerance-based equality of two real numbers.

    Parameters
    ----------
    a, b : float
        Numbers to compare.
    rel_eps : float, optional
        Relative tolerance, scaled by the larger magnitude of the two numbers.
    abs_eps : float, optional
        Absolute tolerance, used when the relative term is smaller.

    Returns
    -------
    bool
        True if ``|a-b| <= max(max(|a|,|b|)*rel_eps, abs_eps)``.
    """
    return abs(a - b) <= max(max(abs(a), abs(b)) * rel_eps, abs_eps)


def check_index(index, size: int, name="index"):
    index = operator.index(index)
    if index < 0 or index >= size:
        raise IndexError(f"{name} {index} out of range [0, {size})")
    return index


class Vector:
    """
    A real-valued vector of fixed dimension (at least 2).

    The coordinates are stored in a float64 numpy array owned by the vector.
    Methods named after an action (`scale`, `normalize`, `add`) modify the
    vector in place, arithmetic operators return new vectors.

    Parameters
    ----------
    dimension : int, optional
        Number of coordinates. Values below 2 are clamped to 2.
        All coordinates are initialized to 0. The default is 2.
    """

    # keep numpy from taking over binary operators, eg. np.float64(2) * v
    __array_ufunc__ = None

    def __init__(self, dimension: int = MIN_DIMENSION):
        if dimension < MIN_DIMENSION:
            logging.debug(
                f"Vector dimension {dimension} clamped to {MIN_DIMENSION}"
            )
            dimension = MIN_DIMENSION
        self._coords = np.zeros(dimension, dtype=float)

    @classmethod
    def from_coords(cls, coords: Iterable[float]) -> "Vector":
        """Create a vector holding the given coordinate values."""
        values = np.array(coords, dtype=float).ravel()
        if values.size < MIN_DIMENSION:
            raise ShapeError(
                f"A vector needs at least {MIN_DIMENSION} coordinates, "
                f"got {values.size}"
            )
        vec = cls(values.size)
        vec._coords[:] = values
        return vec

    def copy(self) -> "Vector":
        """Return an independent vector with identical coordinates."""
        vec = Vector(self.dimension)
        vec._coords[:] = self._coords
        return vec

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    @property
    def dimension(self) -> int:
        return self._coords.size

    def __len__(self):
        return self.dimension

    @property
    def coords(self) -> np.ndarray:
        """Copy of the coordinates as a numpy array."""
        return self._coords.copy()

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._coords.copy()
        return self._coords.astype(dtype)

    def get(self, index: int) -> float:
        return float(self._coords[check_index(index, self.dimension)])

    def set(self, index: int, value: float):
        self._coords[check_index(index, self.dimension)] = value

    def __getitem__(self, index):
        return self.get(index)

    def __setitem__(self, index, value):
        self.set(index, value)

    def __iter__(self):
        return iter(self._coords.tolist())

    @property
    def x(self):
        return self.get(X_AXIS)

    @property
    def y(self):
        return self.get(Y_AXIS)

    @property
    def z(self):
        return self.get(Z_AXIS)

    def _check_same_dimension(self, other: "Vector", operation: str):
        if self.dimension != other.dimension:
            raise ShapeError(
                f"Cannot {operation} vectors of dimension {self.dimension} "
                f"and {other.dimension}"
            )

    def scale(self, factor: float):
        """Multiply every coordinate by factor, in place."""
        self._coords *= factor

    def norm(self) -> float:
        """Euclidean norm."""
        return float(np.sqrt(np.sum(self._coords * self._coords)))

    def normalize(self):
        """Scale to unit norm, in place. A zero vector is left unchanged."""
        length = self.norm()
        if length != 0:
            self.scale(1 / length)

    def add(self, other: "Vector"):
        """Add other to this vector elementwise, in place."""
        self._check_same_dimension(other, "add")
        self._coords += other._coords

    def dot(self, other: "Vector") -> float:
        self._check_same_dimension(other, "take the dot product of")
        return float(np.sum(self._coords * other._coords))

    def cross3(self, other: "Vector") -> Optional["Vector"]:
        """
        Cross product of two 3D vectors.

        Returns
        -------
        Vector or None
            The cross product, or None if either operand is not 3 dimensional.
        """
        if self.dimension != 3 or other.dimension != 3:
            return None
        a = self._coords
        b = other._coords
        return Vector.from_coords(
            (
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            )
        )

    def is_orthogonal(self, other: "Vector") -> bool:
        return approx(self.dot(other), 0.0)

    def is_collinear(self, other: "Vector") -> bool:
        # Cauchy-Schwarz holds with equality only for collinear vectors
        return approx(abs(self.dot(other)) - self.norm() * other.norm(), 0.0)

    def is_coplanar3(self, v1: "Vector", v2: "Vector") -> Optional[bool]:
        """
        Check if this vector and two others lie in a common plane, using the
        scalar triple product.

        Returns
        -------
        bool or None
            None if any of the three vectors is not 3 dimensional.
        """
        normal = v1.cross3(v2)
        if self.dimension != 3 or normal is None:
            return None
        return approx(self.dot(normal), 0.0)

    approx = staticmethod(approx)

    def to_homogeneous(self) -> "Vector":
        """Return a new vector with a trailing coordinate of 1 appended."""
        return Vector.from_coords(np.append(self._coords, HOMOGENEOUS_W))

    def from_homogeneous(self) -> "Vector":
        """
        Return a new vector with the trailing (homogeneous) coordinate dropped.

        No perspective division is applied, the trailing coordinate is assumed
        to be 1 as kept by affine maps.
        """
        if self.dimension <= MIN_DIMENSION:
            raise ShapeError(
                f"Cannot lower a vector of dimension {self.dimension} "
                f"from homogeneous coordinates"
            )
        return Vector.from_coords(self._coords[:-1])

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dimension == other.dimension and bool(
            np.all(self._coords == other._coords)
        )

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        ret = self.copy()
        ret.add(other)
        return ret

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self + (-other)

    def __neg__(self):
        return self * -1.0

    def __mul__(self, other):
        if isinstance(other, (int, float, np.number)):
            ret = self.copy()
            ret.scale(other)
            return ret
        else:
            return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float, np.number)):
            return self * (1 / other)
        else:
            return NotImplemented

    def __repr__(self):
        return f"Vector({self._coords.tolist()})"
