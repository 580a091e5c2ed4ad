# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from typing import Self

import copy

import numpy as np

from orbrot.rotations.core.quaternion_math import (quaternion_imag, quaternion_multiplication,
                                                   quaternion_length_squared, quaternion_conjugate,
                                                   quaternion_inverse, quaternion_normalize)
from orbrot.rotations.core.application import rotate_vector, irotate_vector, irotate_particle, irotate_simulation
from orbrot.rotations.core.construction import (identity_quaternion, angle_axis_to_quaternion, from_to_quaternion,
                                                new_axes_to_quaternion, orbital_to_quaternion)
from orbrot.rotations.core.conversions import MIN_INCLINATION, quaternion_to_orbital, quaternion_to_rotmat

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY, ParticleLike, SimulationLike


class Rotation:
    """
    A class to represent and manipulate rotations.

    The :class:`Rotation` class wraps a single rotation quaternion stored as ``[ix, iy, iz, r]`` (vector portion first,
    scalar portion last) and offers named constructors for the common ways of describing a rotation::

        >>> from orbrot.rotations import Rotation
        >>> from numpy import pi
        >>> rotated = Rotation.from_angle_axis(pi/2, [0, 0, 1]).rotate([1, 0, 0])  # approximately [0, 1, 0]

    The multiplication operator composes rotations so that ``p*q`` is the rotation that applies ``q`` first and then
    ``p``::

        >>> rotation_A2B = Rotation.from_angle_axis(pi, [1, 0, 0])
        >>> rotation_B2C = Rotation.from_angle_axis(pi/2, [0, 1, 0])
        >>> rotation_A2C = rotation_B2C*rotation_A2B

    The quaternion is stored exactly as given or computed.  It is never renormalized behind your back, so long chains of
    compositions can slowly drift from unit length.  Use :meth:`normalized` when that matters.

    The equality operator checks that the quaternions of two objects are identical.
    """

    def __init__(self, data: ARRAY_LIKE | Self | None = None):
        """
        :param data: The quaternion to initialize with as a length 4 array like ``[ix, iy, iz, r]``, another
                     :class:`Rotation` to copy, or ``None`` for the identity rotation
        :raises ValueError: If the data cannot be interpreted as a quaternion
        """

        self._quaternion = identity_quaternion()
        self._matrix = None
        self._mupdate = True

        if data is not None:
            self.quaternion = data

    @classmethod
    def identity(cls) -> Self:
        """
        Returns the rotation which leaves everything where it is.
        """

        return cls()

    @classmethod
    def from_angle_axis(cls, angle: float, axis: ARRAY_LIKE) -> Self:
        """
        Creates a right handed rotation of `angle` radians about `axis`.

        See :func:`.angle_axis_to_quaternion` for details.
        """

        return cls(angle_axis_to_quaternion(angle, axis))

    @classmethod
    def from_to(cls, from_vector: ARRAY_LIKE, to_vector: ARRAY_LIKE) -> Self:
        """
        Creates the shortest arc rotation taking the direction of `from_vector` to the direction of `to_vector`.

        See :func:`.from_to_quaternion` for details, including how opposite vectors are handled.
        """

        return cls(from_to_quaternion(from_vector, to_vector))

    @classmethod
    def to_new_axes(cls, new_z: ARRAY_LIKE, new_x: ARRAY_LIKE) -> Self:
        """
        Creates the rotation taking `new_z` onto the z axis and then `new_x` onto the x axis.

        See :func:`.new_axes_to_quaternion` for details.
        """

        return cls(new_axes_to_quaternion(new_z, new_x))

    @classmethod
    def from_orbital(cls, Omega: float, inc: float, omega: float) -> Self:
        """
        Creates the rotation from the orbital plane frame defined by the orbital angles (in radians).

        See :func:`.orbital_to_quaternion` for details.
        """

        return cls(orbital_to_quaternion(Omega, inc, omega))

    @property
    def quaternion(self) -> DOUBLE_ARRAY:
        """
        This property stores the quaternion representation of the rotation as a numpy array ``[ix, iy, iz, r]``.

        It also enables setting the rotation represented for this object, either from another :class:`Rotation` or
        from anything convertible to a numpy array with 4 elements.  The value is stored as given; it is not normalized.
        """

        return self._quaternion

    @quaternion.setter
    def quaternion(self, data: ARRAY_LIKE | 'Rotation'):

        if isinstance(data, Rotation):
            self._quaternion = data.quaternion.copy()

        else:
            try:
                data = np.array(data, dtype=np.float64).ravel()
            except TypeError as err:
                raise ValueError('The quaternion must be length 4 and numeric') from err

            if data.size != 4:
                raise ValueError('The quaternion must be length 4')

            self._quaternion = data

        self._mupdate = True

    @property
    def r(self) -> float:
        """
        The scalar portion of the quaternion.
        """

        return float(self._quaternion[3])

    @property
    def ix(self) -> float:
        """
        The x component of the vector portion of the quaternion.
        """

        return float(self._quaternion[0])

    @property
    def iy(self) -> float:
        """
        The y component of the vector portion of the quaternion.
        """

        return float(self._quaternion[1])

    @property
    def iz(self) -> float:
        """
        The z component of the vector portion of the quaternion.
        """

        return float(self._quaternion[2])

    @property
    def q_vector(self) -> DOUBLE_ARRAY:
        """
        This is an alias to the first three elements of the quaternion array (the vector portion of the quaternion)

        This property is read only.
        """

        return self._quaternion[:3]

    @property
    def q_scalar(self) -> float:
        """
        This is an alias to the last element of the quaternion array (the scalar portion of the quaternion)

        This property is read only.
        """

        return self.r

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        The 3x3 rotation matrix equivalent to this rotation.

        The matrix is computed on first access and cached until the quaternion is set again.  This property is read
        only.
        """

        if self._mupdate:
            self._matrix = quaternion_to_rotmat(self._quaternion)
            self._mupdate = False

        assert self._matrix is not None, "the matrix attribute is somehow None but _mupdate is set to false"
        return self._matrix

    def imag(self) -> DOUBLE_ARRAY:
        """
        Returns a copy of the vector portion of the quaternion.
        """

        return quaternion_imag(self._quaternion)

    def length_squared(self) -> float:
        """
        Returns the squared norm of the quaternion, which is 1 for a proper rotation.
        """

        return quaternion_length_squared(self._quaternion)

    def conjugate(self) -> 'Rotation':
        """
        Returns the conjugate as a new ``Rotation`` object.

        For a unit quaternion this is the inverse rotation.  See :func:`.quaternion_conjugate`.
        """

        return Rotation(quaternion_conjugate(self._quaternion))

    def inverse(self) -> 'Rotation':
        """
        This method returns the inverse rotation of the current instance as a new ``Rotation`` object.

        The conjugate is scaled by the inverse squared norm so ``self*self.inverse()`` is the identity even when self
        is not of unit length.  See :func:`.quaternion_inverse`.

        :return: The inverse rotation
        """

        return Rotation(quaternion_inverse(self._quaternion))

    def normalized(self) -> 'Rotation':
        """
        Returns a copy of this rotation scaled to unit length.
        """

        return Rotation(quaternion_normalize(self._quaternion))

    def rotate(self, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
        """
        Rotates a vector (or a 3xn array of column vectors) and returns the result as a new array.

        :param vector: The vector(s) to rotate
        :return: The rotated vector(s)
        """

        return rotate_vector(vector, self._quaternion)

    def irotate(self, vector: np.ndarray):
        """
        Rotates a numpy array of vector(s) in place.

        :param vector: The vector(s) to overwrite with their rotated values
        """

        irotate_vector(vector, self._quaternion)

    def irotate_particle(self, particle: ParticleLike):
        """
        Rotates the position and velocity of a particle in place.

        :param particle: The particle to update
        """

        irotate_particle(particle, self._quaternion)

    def irotate_simulation(self, simulation: SimulationLike):
        """
        Rotates the position and velocity of every particle in a simulation in place.

        :param simulation: The simulation to update
        """

        irotate_simulation(simulation, self._quaternion)

    def to_orbital(self, min_inclination: float = MIN_INCLINATION) -> tuple[float, float, float]:
        """
        Decomposes the rotation into orbital angles.

        See :func:`.quaternion_to_orbital` for details and caveats.

        :param min_inclination: The tolerance in radians for treating the inclination as 0 or pi
        :return: The longitude of the ascending node, the inclination, and the argument of periapsis in radians
        """

        return quaternion_to_orbital(self._quaternion, min_inclination=min_inclination)

    def copy(self) -> 'Rotation':
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)

    def __eq__(self, other) -> bool:

        if other is None:
            return False

        if not isinstance(other, Rotation):
            try:
                other = Rotation(other)
            except ValueError:
                # if we're here then other isn't something we can interpret as a rotation
                return False

        return bool((self._quaternion == other.quaternion).all())

    def __mul__(self, other: 'Rotation') -> 'Rotation':

        if isinstance(other, Rotation):
            return Rotation(quaternion_multiplication(self._quaternion, other.quaternion))

        return NotImplemented

    def __repr__(self) -> str:
        return 'Rotation({0!r})'.format(self._quaternion)

    def __str__(self) -> str:
        return str(self._quaternion)
