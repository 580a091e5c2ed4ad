# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from orbrot._typing import SCALAR_OR_ARRAY, ARRAY_LIKE, DOUBLE_ARRAY
from orbrot.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ["rot_x", "rot_z", "skew"]


def _elemental(theta: SCALAR_OR_ARRAY, axis: int) -> DOUBLE_ARRAY:
    """
    Builds the right handed rotation matrix(ces) about coordinate `axis` (0 for x, 2 for z) by theta.
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).flatten()

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    # the two axes spanning the plane of rotation, in right handed order
    first, second = (axis + 1) % 3, (axis + 2) % 3

    mats = np.zeros((theta.size, 3, 3))
    mats[:, axis, axis] = 1
    mats[:, first, first] = ctheta
    mats[:, first, second] = -stheta
    mats[:, second, first] = stheta
    mats[:, second, second] = ctheta

    return mats.squeeze()


def rot_x(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the x axis by angle theta.

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    Theta should be in units of radians and can be a scalar or a vector.  If theta is a vector then each theta value
    will have a corresponding rotation matrix down the first axis of the output.

    :param theta: The angles to form the rotation matrix(ces) for
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    return _elemental(theta, 0)


def rot_z(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the z axis by angle theta.

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param theta: The angles to form the rotation matrix(ces) for
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    return _elemental(theta, 2)


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns the skew symmetric cross product matrix for vector.

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    This function is vectorized, therefore you can input multiple vectors as a 3xn array where each column is an
    independent vector.  The output is then nx3x3 where the first axis stores each matrix.

    :param vector: The vector to compute a skew symmetric matrix for
    :return: The skew symmetric cross product matrix(ces) corresponding to the vector(s)
    """

    vector = _check_vector_array_and_shape(vector)

    zeros = np.zeros(vector.shape[1:])

    return np.array([zeros, -vector[2], vector[1],
                     vector[2], zeros, -vector[0],
                     -vector[1], vector[0], zeros]).T.reshape(-1, 3, 3).squeeze()
