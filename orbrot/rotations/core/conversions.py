# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Conversions out of the quaternion representation.

This module contains the decomposition of a rotation quaternion into the orbital angles (longitude of the ascending
node, inclination, argument of periapsis) together with the equivalent rotation matrix forms.
"""

import warnings

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR_OR_ARRAY

from orbrot.rotations.core._helpers import _check_quaternion_array_and_shape
from orbrot.rotations.core.elementals import rot_x, rot_z, skew


__all__ = ['MIN_INCLINATION', 'DegenerateOrbitWarning',
           'quaternion_to_orbital', 'quaternion_to_rotmat', 'orbital_to_rotmat']


MIN_INCLINATION: float = 1e-8
"""
How close (in radians) the inclination may get to 0 or pi before the node longitude is considered undefined.
"""


class DegenerateOrbitWarning(UserWarning):
    """
    Issued when an orientation is decomposed at an inclination where the node longitude is undefined.
    """


def quaternion_to_orbital(quaternion: ARRAY_LIKE,
                          min_inclination: float = MIN_INCLINATION) -> tuple[float, float, float]:
    r"""
    Decomposes a rotation quaternion into the orbital angles of the 3-1-3 sequence built by
    :func:`.orbital_to_quaternion`.

    Labelling the quaternion components :math:`a=r`, :math:`b=i_z`, :math:`c=i_x` and :math:`d=i_y`, the angles are
    found in closed form as

    .. math::
        i = \text{cos}^{-1}\left(2(a^2+b^2)-1\right) \\
        \frac{\Omega+\omega}{2} = \text{atan2}(b, a) \\
        \frac{\Omega-\omega}{2} = \text{atan2}(d, c)

    (see Bernardes and Viollet, PLoS ONE 17(11), 2022).

    When the inclination is within `min_inclination` of 0 only the sum of the two angles is defined, and when it is
    within `min_inclination` of pi only their difference is.  In either case :math:`\Omega` is set to 0, the
    meaningful combination is reported as :math:`\omega`, and a :class:`DegenerateOrbitWarning` is issued.

    The returned :math:`\Omega` and :math:`\omega` are shifted into :math:`[0, 2\pi)` and :math:`i` lies in
    :math:`[0, \pi]`.

    .. warning::
        The angles are correct modulo :math:`2\pi` but are not guaranteed to land in the quadrant one might expect
        for every input.  No attempt is made to correct for this.

    :param quaternion: The rotation quaternion of the form [ix, iy, iz, r]
    :param min_inclination: The tolerance in radians for treating the inclination as 0 or pi
    :return: The longitude of the ascending node, the inclination, and the argument of periapsis in radians
    """

    quaternion = _check_quaternion_array_and_shape(quaternion).ravel()

    if quaternion.size != 4:
        raise ValueError('Only a single quaternion can be converted to orbital angles')

    a = quaternion[3]
    b = quaternion[2]
    c = quaternion[0]
    d = quaternion[1]

    # ensure the domain for acos (only will leave due to numerical issues)
    inc = float(np.arccos(np.clip(2. * (a * a + b * b) - 1., -1., 1.)))

    not_zero = abs(inc) > min_inclination
    not_pi = abs(inc - np.pi) > min_inclination

    if not_zero and not_pi:
        half_sum = np.arctan2(b, a)
        half_diff = np.arctan2(d, c)
        omega = float(half_sum - half_diff)
        Omega = float(half_sum + half_diff)

    else:
        warnings.warn(f'The inclination is within {min_inclination} of a pole so the longitude of the ascending node '
                      'is undefined.  Setting it to 0.', DegenerateOrbitWarning)

        Omega = 0.

        if not not_zero:
            omega = float(2. * np.arctan2(b, a))
        else:
            omega = float(2. * np.arctan2(d, c))

    return _wrap_angle(Omega), inc, _wrap_angle(omega)


def _wrap_angle(angle: float) -> float:
    """
    Shifts an angle into [0, 2pi).
    """

    angle %= 2. * np.pi

    # a tiny negative input rounds up to exactly 2pi
    if angle >= 2. * np.pi:
        angle = 0.

    return angle


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent rotation matrix.

    Rotation quaternions are converted to rotation matrices by using:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\mathbf{q}_v \\ q_s\end{array}\right] \\
        \mathbf{T} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    where :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`.skew`).  The
    matrix satisfies ``quaternion_to_rotmat(q) @ v == rotate_vector(v, q)`` for unit quaternions.

    This function is vectorized; for a 4xn input the matrices are stacked along the first axis of an nx3x3 output.

    :param quaternion: The rotation quaternion(s) to be converted to the rotation matrix(ces)
    :return: a numpy array containing the rotation matrix(ces) corresponding to the input quaternion(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    # extract the scalar and vector portion of the quaternion(s)
    qs = quaternion[-1].reshape(-1, 1, 1)
    qv = quaternion[:3].reshape(3, -1)

    return ((qs ** 2 - (qv * qv).sum(axis=0).reshape(-1, 1, 1)) * np.eye(3) + 2 * np.einsum('ij,kj->jik', qv, qv) +
            2 * qs * skew(qv).reshape(-1, 3, 3)).squeeze()


def orbital_to_rotmat(Omega: SCALAR_OR_ARRAY, inc: SCALAR_OR_ARRAY, omega: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Forms the rotation matrix from the orbital plane frame to the reference frame.

    .. math::
        \mathbf{T} = \mathbf{R}_z(\Omega)\mathbf{R}_x(i)\mathbf{R}_z(\omega)

    This is the matrix equivalent of :func:`.orbital_to_quaternion`.

    :param Omega: The longitude of the ascending node in radians
    :param inc: The inclination in radians
    :param omega: The argument of periapsis in radians
    :return: The 3x3 rotation matrix (nx3x3 if array inputs were given)
    """

    return rot_z(Omega) @ rot_x(inc) @ rot_z(omega)
