# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Minimal particle and simulation containers.

The rotation routines only need objects exposing ``position`` and ``velocity`` (see :class:`.ParticleLike`) collected in
something with ``particles`` and ``N`` (see :class:`.SimulationLike`).  The classes here satisfy those protocols so the
package can be used on its own; particles from another N-body code work just as well as long as they follow the
protocols.
"""

from dataclasses import dataclass, field

from typing import Iterator

import numpy as np

from orbrot._typing import ARRAY_LIKE, DOUBLE_ARRAY

from orbrot.rotations.core._helpers import _check_vector_array_and_shape


@dataclass
class Particle:
    """
    A point mass with a cartesian position and velocity.
    """

    m: float = 0.
    """
    The mass of the particle.  Rotations never change it.
    """

    x: float = 0.
    y: float = 0.
    z: float = 0.

    vx: float = 0.
    vy: float = 0.
    vz: float = 0.

    @property
    def position(self) -> DOUBLE_ARRAY:
        """
        The position as a new length 3 array.  Setting it overwrites x, y, and z.
        """

        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @position.setter
    def position(self, value: ARRAY_LIKE):

        value = _check_vector_array_and_shape(value).ravel()

        self.x, self.y, self.z = (float(component) for component in value)

    @property
    def velocity(self) -> DOUBLE_ARRAY:
        """
        The velocity as a new length 3 array.  Setting it overwrites vx, vy, and vz.
        """

        return np.array([self.vx, self.vy, self.vz], dtype=np.float64)

    @velocity.setter
    def velocity(self, value: ARRAY_LIKE):

        value = _check_vector_array_and_shape(value).ravel()

        self.vx, self.vy, self.vz = (float(component) for component in value)


@dataclass
class Simulation:
    """
    An ordered collection of particles.
    """

    particles: list[Particle] = field(default_factory=list)

    @property
    def N(self) -> int:
        """
        The number of particles in the simulation.
        """

        return len(self.particles)

    def add(self, particle: Particle | None = None, **kwargs) -> Particle:
        """
        Appends a particle to the end of the simulation.

        Either pass an existing particle or the keyword arguments to build one (see :class:`Particle`).

        :param particle: The particle to add
        :return: The particle that was added
        :raises ValueError: If both a particle and keyword arguments are given
        """

        if particle is None:
            particle = Particle(**kwargs)

        elif kwargs:
            raise ValueError('Specify either a particle or its attributes, not both')

        self.particles.append(particle)

        return particle

    def __len__(self) -> int:
        return self.N

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    def __getitem__(self, index: int) -> Particle:
        return self.particles[index]
