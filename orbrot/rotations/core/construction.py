# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Routines that build rotation quaternions from other descriptions of a rotation.

All routines here work on a single rotation and return a length 4 quaternion array of the form [ix, iy, iz, r] which is
of unit length (within floating point precision).
"""

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY

from orbrot.rotations.core._helpers import _check_vector_array_and_shape
from orbrot.rotations.core.vector_math import (vector_add, vector_cross, vector_dot, vector_length_squared,
                                               vector_mul, vector_normalize)
from orbrot.rotations.core.quaternion_math import quaternion_multiplication
from orbrot.rotations.core.application import rotate_vector


__all__ = ["identity_quaternion", "angle_axis_to_quaternion", "from_to_quaternion", "new_axes_to_quaternion",
           "orbital_to_quaternion"]


X_AXIS = np.array([1., 0., 0.])
Y_AXIS = np.array([0., 1., 0.])
Z_AXIS = np.array([0., 0., 1.])


def _to_quaternion(imag: DOUBLE_ARRAY, real: float) -> DOUBLE_ARRAY:
    return np.array([imag[0], imag[1], imag[2], real], dtype=np.float64)


def identity_quaternion() -> DOUBLE_ARRAY:
    """
    Returns the quaternion representing no rotation, [0, 0, 0, 1].
    """

    return np.array([0., 0., 0., 1.])


def angle_axis_to_quaternion(angle: float, axis: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Forms the quaternion rotating by `angle` radians about `axis` according to the right hand rule.

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    The axis does not need to be of unit length (it is normalized here) but it must not be zero.

    :param angle: The rotation angle in radians
    :param axis: The axis of rotation
    :return: The rotation quaternion
    """

    axis = vector_normalize(_check_vector_array_and_shape(axis).ravel())

    return _to_quaternion(vector_mul(axis, np.sin(angle / 2.)), np.cos(angle / 2.))


def _from_to_reduced(from_vector: DOUBLE_ARRAY, to_vector: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    """
    Shortest arc rotation between two unit vectors no more than 90 degrees apart, using the half vector.
    """

    half = vector_normalize(vector_add(from_vector, to_vector))

    return _to_quaternion(vector_cross(from_vector, half), vector_dot(from_vector, half))


def from_to_quaternion(from_vector: ARRAY_LIKE, to_vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Computes the shortest arc rotation that takes the direction of `from_vector` onto the direction of `to_vector`.

    Both inputs are normalized first so only their directions matter.  When the vectors are within 90 degrees of each
    other the quaternion is formed directly from the half vector :math:`\hat{\mathbf{h}}` bisecting them

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\hat{\mathbf{f}}\times\hat{\mathbf{h}}\\
        \hat{\mathbf{f}}^T\hat{\mathbf{h}}\end{array}\right]

    which requires no trigonometry.  As the vectors approach opposite directions the half vector shrinks towards zero,
    so for separations larger than 90 degrees the rotation is instead composed of two half rotations,
    from :math:`\hat{\mathbf{f}}` to :math:`\hat{\mathbf{h}}` and from :math:`\hat{\mathbf{h}}` to
    :math:`\hat{\mathbf{t}}`.

    When the vectors are exactly opposite any axis perpendicular to them works.  In this case the coordinate axis
    least aligned with `from_vector` (the smallest absolute component, preferring x then y on ties) is crossed with
    `from_vector` to produce the rotation axis and a 180 degree rotation about it is returned.

    :param from_vector: The starting direction
    :param to_vector: The target direction
    :return: The rotation quaternion taking `from_vector` to `to_vector`
    """

    from_vector = vector_normalize(_check_vector_array_and_shape(from_vector).ravel())
    to_vector = vector_normalize(_check_vector_array_and_shape(to_vector).ravel())

    if vector_dot(from_vector, to_vector) >= 0:
        return _from_to_reduced(from_vector, to_vector)

    half = vector_add(from_vector, to_vector)

    if vector_length_squared(half) == 0:
        abs_from = np.abs(from_vector)

        if abs_from[0] <= abs_from[1] and abs_from[0] <= abs_from[2]:
            reference = X_AXIS
        elif abs_from[1] <= abs_from[2]:
            reference = Y_AXIS
        else:
            reference = Z_AXIS

        return _to_quaternion(vector_normalize(vector_cross(from_vector, reference)), 0.)

    half = vector_normalize(half)

    return quaternion_multiplication(_from_to_reduced(from_vector, half), _from_to_reduced(half, to_vector))


def new_axes_to_quaternion(new_z: ARRAY_LIKE, new_x: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Computes the rotation taking the frame defined by `new_z` and `new_x` onto the coordinate axes.

    The first rotation takes `new_z` onto the z axis.  Since that leaves the rotation about z free, `new_x` is carried
    through the first rotation and a second rotation takes the result onto the x axis.  Applying the returned rotation
    to `new_z` gives the z axis and, when `new_x` is perpendicular to `new_z`, applying it to `new_x` gives the x axis.

    Neither input is modified.

    :param new_z: The direction that becomes the z axis
    :param new_x: The direction that becomes the x axis
    :return: The rotation quaternion into the new frame
    """

    q1 = from_to_quaternion(new_z, Z_AXIS)

    rotated_x = rotate_vector(_check_vector_array_and_shape(new_x).ravel(), q1)

    q2 = from_to_quaternion(rotated_x, X_AXIS)

    return quaternion_multiplication(q2, q1)


def orbital_to_quaternion(Omega: float, inc: float, omega: float) -> DOUBLE_ARRAY:
    r"""
    Forms the rotation from the orbital plane frame to the reference frame for the given orbital angles.

    The rotation is the 3-1-3 euler sequence (see Murray and Dermott, Solar System Dynamics, eq. 2.121)

    .. math::
        \mathbf{q} = \mathbf{P}_3(\Omega,\hat{\mathbf{z}})\otimes\mathbf{P}_2(i,\hat{\mathbf{x}})\otimes
        \mathbf{P}_1(\omega,\hat{\mathbf{z}})

    where the rightmost rotation is applied first.  All angles are in radians and may take any real value.

    :param Omega: The longitude of the ascending node
    :param inc: The inclination
    :param omega: The argument of periapsis
    :return: The rotation quaternion
    """

    p1 = angle_axis_to_quaternion(omega, Z_AXIS)
    p2 = angle_axis_to_quaternion(inc, X_AXIS)
    p3 = angle_axis_to_quaternion(Omega, Z_AXIS)

    return quaternion_multiplication(p3, quaternion_multiplication(p2, p1))
