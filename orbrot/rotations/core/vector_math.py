# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Elementary 3 vector operations used as the building blocks of the quaternion routines.

Every function here accepts either a single length 3 vector or a 3xn array where each column is an independent vector.
When a single vector is paired with a 3xn array, the single vector is broadcast across all of the columns.
"""

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, F_SCALAR_OR_ARRAY, SCALAR_OR_ARRAY
from orbrot.rotations.core._helpers import _check_vector_array_and_shape, _broadcast_columns


__all__ = ["vector_mul", "vector_add", "vector_cross", "vector_dot", "vector_length_squared", "vector_normalize"]


def _paired(a: ARRAY_LIKE, b: ARRAY_LIKE) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY]:

    a = _check_vector_array_and_shape(a)
    b = _check_vector_array_and_shape(b)

    ndim = max(a.ndim, b.ndim)

    return _broadcast_columns(a, ndim), _broadcast_columns(b, ndim)


def vector_mul(vector: ARRAY_LIKE, scalar: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    """
    Scales the vector(s) by scalar.

    If `vector` is 3xn, `scalar` may be a length n array giving a different scale for each column.

    :param vector: The vector(s) to scale
    :param scalar: The scale factor(s)
    :return: The scaled vector(s) as a new array
    """

    return _check_vector_array_and_shape(vector) * np.asanyarray(scalar, dtype=np.float64)


def vector_add(vector_1: ARRAY_LIKE, vector_2: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns the component-wise sum of two vectors.

    :param vector_1: The first vector(s)
    :param vector_2: The second vector(s)
    :return: The sum as a new array
    """

    a, b = _paired(vector_1, vector_2)

    return a + b


def vector_cross(vector_1: ARRAY_LIKE, vector_2: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the right handed cross product :math:`\mathbf{a}\times\mathbf{b}`.

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\begin{array}{c} a_yb_z-a_zb_y \\ a_zb_x-a_xb_z \\
        a_xb_y-a_yb_x\end{array}\right]

    :param vector_1: The left hand vector(s)
    :param vector_2: The right hand vector(s)
    :return: The cross product(s)
    """

    a, b = _paired(vector_1, vector_2)

    return np.cross(a, b, axis=0)


def vector_dot(vector_1: ARRAY_LIKE, vector_2: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Computes the inner product of two vectors.

    :param vector_1: The first vector(s)
    :param vector_2: The second vector(s)
    :return: The dot product as a float, or as a length n array for 3xn input
    """

    a, b = _paired(vector_1, vector_2)

    dot = (a * b).sum(axis=0)

    if np.ndim(dot) == 0:
        return float(dot)

    return dot


def vector_length_squared(vector: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Returns the squared euclidean length of the vector(s).

    :param vector: The vector(s) to measure
    :return: The squared length(s)
    """

    return vector_dot(vector, vector)


def vector_normalize(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Scales the vector(s) to unit length.

    The length of the input must be non-zero.  No check is made; a zero vector yields non-finite components.

    :param vector: The vector(s) to normalize
    :return: The unit vector(s) as a new array
    """

    vector = _check_vector_array_and_shape(vector)

    return vector_mul(vector, 1. / np.sqrt(vector_length_squared(vector)))
