# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Routines applying a rotation quaternion to vectors and to particle state.

The functions prefixed with ``i`` work in place on caller owned data and return ``None``.  The caller is responsible
for making sure nothing else touches that data while the rotation is applied.
"""

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, ParticleLike, SimulationLike

from orbrot.rotations.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape
from orbrot.rotations.core.vector_math import vector_add, vector_cross, vector_mul


__all__ = ["rotate_vector", "irotate_vector", "irotate_particle", "irotate_simulation"]


def rotate_vector(vector: ARRAY_LIKE, quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates the vector(s) by the quaternion and returns the result as a new array.

    Rather than forming :math:`\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^{-1}` with two full quaternion
    multiplications, the rotation is evaluated as

    .. math::
        \mathbf{t} = 2\mathbf{q}_v\times\mathbf{v} \\
        \mathbf{v}' = \mathbf{v} + q_s\mathbf{t} + \mathbf{q}_v\times\mathbf{t}

    which is exact for unit quaternions.

    The vector may be a 3xn array of column vectors, in which case every column is rotated by the same quaternion (or
    by the matching column of a 4xn quaternion array).

    :param vector: The vector(s) to rotate
    :param quaternion: The rotation quaternion(s) of the form [ix, iy, iz, r]
    :return: The rotated vector(s)
    """

    vector = _check_vector_array_and_shape(vector)
    quaternion = _check_quaternion_array_and_shape(quaternion)

    imag = quaternion[:3]
    t = vector_mul(vector_cross(imag, vector), 2)

    return vector_add(vector, vector_add(vector_mul(t, quaternion[-1]), vector_cross(imag, t)))


def irotate_vector(vector: np.ndarray, quaternion: ARRAY_LIKE) -> None:
    """
    Rotates the vector(s) by the quaternion in place.

    See :func:`rotate_vector` for details.

    :param vector: A float numpy array holding the vector(s) to overwrite
    :param quaternion: The rotation quaternion of the form [ix, iy, iz, r]
    :raises TypeError: If `vector` is not a floating point numpy array and so cannot hold the rotated values in place
    """

    if not isinstance(vector, np.ndarray):
        raise TypeError('Only numpy arrays can be rotated in place.  Use rotate_vector instead.')

    if not np.issubdtype(vector.dtype, np.floating):
        raise TypeError(f'Only floating point arrays can be rotated in place, not {vector.dtype}.  '
                        'Use rotate_vector instead.')

    vector[...] = rotate_vector(vector, quaternion)


def irotate_particle(particle: ParticleLike, quaternion: ARRAY_LIKE) -> None:
    """
    Rotates the position and velocity of a particle in place.

    Both vectors are rotated independently by the same quaternion.  The velocity is treated as a free vector so no
    translation is involved.  Any other state carried by the particle (such as its mass) is left alone.

    :param particle: The particle to update
    :param quaternion: The rotation quaternion of the form [ix, iy, iz, r]
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    particle.position = rotate_vector(particle.position, quaternion)
    particle.velocity = rotate_vector(particle.velocity, quaternion)


def irotate_simulation(simulation: SimulationLike, quaternion: ARRAY_LIKE) -> None:
    """
    Rotates every particle of a simulation in place, in index order.

    The particles themselves are updated so their identity and order within the simulation are preserved.  Each
    particle is transformed independently.

    :param simulation: The simulation whose first ``simulation.N`` particles are rotated
    :param quaternion: The rotation quaternion of the form [ix, iy, iz, r]
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    particles = simulation.particles

    for index in range(simulation.N):
        irotate_particle(particles[index], quaternion)
