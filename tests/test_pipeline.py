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


import numpy as np
import pytest as pytest

from vecmat.defs import *
from vecmat.errors import ShapeError
from vecmat.matrix import Matrix
from vecmat.pipeline import *
from vecmat.vector import Vector


def vec(*values):
    return Vector.from_coords(values)


def as_array(vectors):
    return np.array([np.asarray(v) for v in vectors])


def test_apply():
    points = [vec(1, 2), vec(3, 4), vec(5, 6)]
    ret = apply(lambda v: v * 2, points)
    assert ret is not points
    assert ret == [vec(2, 4), vec(6, 8), vec(10, 12)]
    assert points == [vec(1, 2), vec(3, 4), vec(5, 6)]
    assert apply(Vector.copy, []) == []


def test_apply_matrix():
    rot = Matrix(2, 2).set_rotation_2d(PI / 2)
    ret = apply_matrix(rot, [vec(1, 0), vec(0, 1)])
    assert as_array(ret) == pytest.approx(np.array([[0, 1], [-1, 0]]), abs=1e-12)
    with pytest.raises(ShapeError):
        apply_matrix(rot, [vec(1, 0), vec(0, 1, 0)])


def test_compose_order():
    double = lambda v: v * 2
    shift = lambda v: v + vec(1, 1)
    assert compose(double, shift)(vec(1, 1)) == vec(3, 3)
    assert compose(shift, double)(vec(1, 1)) == vec(4, 4)
    assert compose()(vec(1, 1)) == vec(1, 1)


def test_homogeneous_pipeline():
    """Rotate, lift, translate and lower the vertices of a cube."""
    rot = Matrix.compose_rotation(PI / 4, PI / 4, PI / 4)
    move = Matrix(4, 4).set_translation_homogeneous_3d(vec(2, 2, 0))
    transform = compose(
        lambda p: rot @ p,
        Vector.to_homogeneous,
        lambda p: move @ p,
        Vector.from_homogeneous,
    )
    vertices = cube_vertices()
    ret = apply(transform, vertices)
    assert len(ret) == 8
    assert all(p.dimension == 3 for p in ret)
    # rotation keeps the centroid at the origin, translation moves it
    assert as_array(ret).mean(axis=0) == pytest.approx([2, 2, 0], abs=1e-12)
    for p, v in zip(ret, vertices):
        assert (p - vec(2, 2, 0)).norm() == pytest.approx(v.norm())


def test_scaling_translation_order():
    """Scaling then translating differs from translating then scaling."""
    scaling = Matrix(4, 4).set_scaling_homogeneous_3d(0.5)
    left = Matrix(4, 4).set_translation_homogeneous_3d(vec(-3, 0, 0))
    right = Matrix(4, 4).set_translation_homogeneous_3d(vec(3, 0, 0))
    vertices = apply(Vector.to_homogeneous, cube_vertices())

    scaled_first = apply_matrix(left, apply_matrix(scaling, vertices))
    moved_first = apply_matrix(scaling, apply_matrix(right, vertices))

    centroid1 = as_array(apply(Vector.from_homogeneous, scaled_first)).mean(axis=0)
    centroid2 = as_array(apply(Vector.from_homogeneous, moved_first)).mean(axis=0)
    assert centroid1 == pytest.approx([-3, 0, 0])
    assert centroid2 == pytest.approx([1.5, 0, 0])
    # the homogeneous coordinate stays 1 through scaling and translation
    assert all(p.get(3) == 1 for p in scaled_first + moved_first)


def test_affine_matrix_default_is_identity():
    assert affine_matrix() == Matrix.identity(4)


@pytest.mark.parametrize("scale", [1.0, 0.5, 3.0])
def test_affine_matrix(scale):
    rot = Matrix.compose_rotation(0.3, -0.2, 1.1)
    offset = vec(1, -2, 0.5)
    m = affine_matrix(rot, offset, scale=scale)
    # same map as separate matrices applied one after the other
    rot_h = affine_matrix(rot)
    scaling = Matrix(4, 4).set_scaling_homogeneous_3d(scale)
    move = Matrix(4, 4).set_translation_homogeneous_3d(offset)
    combined = move @ rot_h @ scaling
    assert np.asarray(m) == pytest.approx(np.asarray(combined), abs=1e-12)
    p = vec(0.5, 2, -1)
    expected = (rot @ p) * scale + offset
    ret = (m @ p.to_homogeneous()).from_homogeneous()
    assert np.asarray(ret) == pytest.approx(np.asarray(expected), abs=1e-12)


def test_affine_matrix_shapes():
    with pytest.raises(ShapeError):
        affine_matrix(Matrix(2, 2))
    with pytest.raises(ShapeError):
        affine_matrix(translation=vec(1, 2))


@pytest.mark.parametrize("half_size", [1.0, 0.5])
def test_cube(half_size):
    vertices = cube_vertices(half_size)
    assert len(vertices) == 8
    assert vertices[0] == vec(-1, -1, -1) * half_size
    assert vertices[6] == vec(1, 1, 1) * half_size
    assert len({tuple(v) for v in vertices}) == 8
    assert len(CUBE_EDGES) == 12
    for i, j in CUBE_EDGES:
        edge = vertices[j] - vertices[i]
        assert edge.norm() == pytest.approx(2 * half_size)
        assert sum(1 for c in edge if c != 0) == 1


@pytest.mark.parametrize("direction", [vec(1, 0), vec(1, 2), vec(0.5, -1, 2)])
def test_line_points(direction):
    points = line_points(direction)
    assert len(points) == 201
    assert points[0].norm() == pytest.approx(np.sqrt(72))
    assert points[-1].norm() == pytest.approx(np.sqrt(72))
    assert np.asarray(points[100]) == pytest.approx(np.zeros(direction.dimension))
    assert all(p.is_collinear(direction) for p in points)
    assert np.asarray(points[0]) == pytest.approx(-np.asarray(points[-1]))


def test_line_points_zero_direction():
    with pytest.raises(ValueError):
        line_points(Vector(2))


@pytest.mark.parametrize("radius", [1.0, 2.5])
def test_circle_points(radius):
    points = circle_points(radius, num=360)
    assert len(points) == 361
    assert points[0] == vec(radius, 0)
    assert [p.norm() for p in points] == pytest.approx([radius] * 361, rel=1e-9)
    assert np.asarray(points[90]) == pytest.approx([0, radius], abs=1e-9)
    assert np.asarray(points[-1]) == pytest.approx([radius, 0], abs=1e-9)


@pytest.mark.parametrize("num", [0, -5])
def test_circle_points_invalid_num(num):
    with pytest.raises(ValueError):
        circle_points(1.0, num=num)


def test_circle_points_single_step():
    points = circle_points(2.0, num=1)
    assert len(points) == 2
    assert np.asarray(points[1]) == pytest.approx([2, 0], abs=1e-9)


if __name__ == "__main__":
    test_homogeneous_pipeline()
