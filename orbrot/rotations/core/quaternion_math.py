# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, F_SCALAR_OR_ARRAY

from orbrot.rotations.core._helpers import _check_quaternion_array_and_shape, _broadcast_columns
from orbrot.rotations.core.vector_math import vector_cross

__all__ = ["quaternion_imag", "quaternion_multiplication", "quaternion_length_squared", "quaternion_conjugate",
           "quaternion_inverse", "quaternion_normalize"]


def quaternion_imag(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns the imaginary (vector) part of the quaternion(s), discarding the scalar part.

    :param quaternion: The quaternion(s) of the form [ix, iy, iz, r]
    :return: A new array holding the first three components
    """

    return _check_quaternion_array_and_shape(quaternion, return_copy=True)[:3]


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the hamiltonian quaternion multiplication operation.

    The multiplication is defined such that rotating a vector by the product is the same as rotating it by
    `quaternion_2_in` first and then by `quaternion_1_in`, that is
    `q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)`.

    Mathematically this is given by:

    .. math::
        \mathbf{p}\otimes\mathbf{q}=\left[\begin{array}{c}p_s\mathbf{q}_v + q_s\mathbf{p}_v +
        \mathbf{p}_v\times\mathbf{q}_v\\
        p_sq_s-\mathbf{p}_v^T\mathbf{q}_v\end{array}\right]

    This function is vectorized, therefore you can input multiple quaternions as a 4xn array where each column is an
    independent quaternion.  The product is not renormalized.

    :param quaternion_1_in: The rotation applied second
    :param quaternion_2_in: The rotation applied first
    :return: The hamiltonian product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    # a single quaternion multiplies every column of a 4xn array
    ndim = max(quaternion_1.ndim, quaternion_2.ndim)
    quaternion_1 = _broadcast_columns(quaternion_1, ndim)
    quaternion_2 = _broadcast_columns(quaternion_2, ndim)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[:3]

    qv = qs1 * qv2 + qs2 * qv1 + vector_cross(qv1, qv2)
    qs = qs1 * qs2 - (qv1 * qv2).sum(axis=0)

    return np.concatenate([qv, np.broadcast_to(qs, qv.shape[1:])[np.newaxis]], axis=0)


def quaternion_length_squared(quaternion: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Returns r**2 + ix**2 + iy**2 + iz**2 for the quaternion(s).

    :param quaternion: The quaternion(s) to measure
    :return: The squared norm(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    length_squared = (quaternion * quaternion).sum(axis=0)

    if np.ndim(length_squared) == 0:
        return float(length_squared)

    return length_squared


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Negates the vector portion of the quaternion(s), leaving the scalar portion alone.

    For a unit quaternion this is the inverse rotation.

    :param quaternion: The quaternion(s) to conjugate
    :return: The conjugate quaternion(s) as a new array
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    # negate the vector portion
    quaternion[:3] *= -1

    return quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the multiplicative inverse of a quaternion.

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion.  It is
    computed as the conjugate scaled by the inverse squared norm

    .. math::
        \mathbf{q}^{-1}=\frac{\mathbf{q}^*}{\left\|\mathbf{q}\right\|^2}

    so that it holds for quaternions which are not of unit length.  A zero quaternion has no inverse and produces
    non-finite components.

    This function is also vectorized, meaning that you can specify multiple quaternions to be inverted by specifying
    each quaternion as a column.

    :param quaternion: The quaternion(s) to be inverted
    :return: a numpy array representing the inverse quaternion(s)
    """

    conjugate = quaternion_conjugate(quaternion)

    return conjugate * (1. / np.asanyarray(quaternion_length_squared(conjugate)))


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Scales the quaternion(s) to unit length.

    Nothing in this package calls this implicitly; use it when accumulated floating point drift from repeated
    multiplication needs to be removed.  The sign of the scalar term is left as is.

    :param quaternion: the quaternion(s) to normalize
    :returns: The normalized quaternion(s) as a new array
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    work_quaternion /= np.linalg.norm(work_quaternion, axis=0, keepdims=True)

    return work_quaternion
