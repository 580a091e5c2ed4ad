# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import orbrot.rotations.core
import orbrot.rotations.rotation

from orbrot.rotations.core import *
from orbrot.rotations.rotation import Rotation

__all__ = ['vector_mul', 'vector_add', 'vector_cross', 'vector_dot', 'vector_length_squared', 'vector_normalize',
           'quaternion_imag', 'quaternion_multiplication', 'quaternion_length_squared', 'quaternion_conjugate',
           'quaternion_inverse', 'quaternion_normalize',
           'rotate_vector', 'irotate_vector', 'irotate_particle', 'irotate_simulation',
           'identity_quaternion', 'angle_axis_to_quaternion', 'from_to_quaternion', 'new_axes_to_quaternion',
           'orbital_to_quaternion',
           'MIN_INCLINATION', 'DegenerateOrbitWarning', 'quaternion_to_orbital', 'quaternion_to_rotmat',
           'orbital_to_rotmat',
           'rot_x', 'rot_z', 'skew',
           'Rotation']


r"""
This package defines the quaternion algebra used to reorient vectors and particle state, along with the conversions
between rotation quaternions and the orbital angles of the 3-1-3 euler sequence.

The representations used throughout the package are:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
vector             A length 3 array :math:`[x, y, z]`.  Most routines also accept a :math:`3\times n` array where each
                   column is an independent vector.
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} i_x \\ i_y \\ i_z \\ r\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is the axis of rotation and :math:`\theta` is the right handed angle
                   to rotate about it.  The rotation represented by :math:`\mathbf{q}` is the same rotation represented
                   by :math:`-\mathbf{q}`.  Quaternions are never renormalized automatically.
orbital angles     The longitude of the ascending node :math:`\Omega`, the inclination :math:`i`, and the argument of
                   periapsis :math:`\omega`, combined as
                   :math:`\mathbf{R}_z(\Omega)\mathbf{R}_x(i)\mathbf{R}_z(\omega)`.  All angles are in radians.
rotation matrix    A :math:`3\times 3` orthonormal matrix :math:`\mathbf{T}` such that :math:`\mathbf{T}\mathbf{v}`
                   is the rotated vector.
=================  =====================================================================================================

Composition follows the hamiltonian convention: the product :math:`\mathbf{p}\otimes\mathbf{q}` applies
:math:`\mathbf{q}` first and then :math:`\mathbf{p}`.

The :class:`.Rotation` object is the primary tool that will be used by users.  It offers named constructors
(:meth:`.Rotation.from_angle_axis`, :meth:`.Rotation.from_to`, :meth:`.Rotation.to_new_axes`,
:meth:`.Rotation.from_orbital`), operator overloading so that rotations compose with ``*``, and methods to apply the
rotation to vectors, particles, and entire simulations.  The functions it is built on are also exposed here for use
directly on numpy arrays.
"""
