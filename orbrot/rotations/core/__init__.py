# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This package contains the fundamental vector and quaternion operations for rotation calculations.

It has no dependencies on the :class:`.Rotation` class to avoid circular imports.  All functions here are pure
operations on numpy arrays (except for the ``irotate`` family which update caller owned data in place) and are used as
the building blocks for the higher level rotation object.
"""

import orbrot.rotations.core.vector_math
import orbrot.rotations.core.quaternion_math
import orbrot.rotations.core.application
import orbrot.rotations.core.construction
import orbrot.rotations.core.conversions
import orbrot.rotations.core.elementals

from orbrot.rotations.core.vector_math import (vector_mul, vector_add, vector_cross, vector_dot,
                                               vector_length_squared, vector_normalize)

from orbrot.rotations.core.quaternion_math import (quaternion_imag, quaternion_multiplication,
                                                   quaternion_length_squared, quaternion_conjugate,
                                                   quaternion_inverse, quaternion_normalize)

from orbrot.rotations.core.application import rotate_vector, irotate_vector, irotate_particle, irotate_simulation

from orbrot.rotations.core.construction import (identity_quaternion, angle_axis_to_quaternion, from_to_quaternion,
                                                new_axes_to_quaternion, orbital_to_quaternion)

from orbrot.rotations.core.conversions import (MIN_INCLINATION, DegenerateOrbitWarning, quaternion_to_orbital,
                                               quaternion_to_rotmat, orbital_to_rotmat)

from orbrot.rotations.core.elementals import rot_x, rot_z, skew

__all__ = ['vector_mul', 'vector_add', 'vector_cross', 'vector_dot', 'vector_length_squared', 'vector_normalize',
           'quaternion_imag', 'quaternion_multiplication', 'quaternion_length_squared', 'quaternion_conjugate',
           'quaternion_inverse', 'quaternion_normalize',
           'rotate_vector', 'irotate_vector', 'irotate_particle', 'irotate_simulation',
           'identity_quaternion', 'angle_axis_to_quaternion', 'from_to_quaternion', 'new_axes_to_quaternion',
           'orbital_to_quaternion',
           'MIN_INCLINATION', 'DegenerateOrbitWarning', 'quaternion_to_orbital', 'quaternion_to_rotmat',
           'orbital_to_rotmat',
           'rot_x', 'rot_z', 'skew']
