# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Quaternion rotations for reorienting vectors and N-body particle state.

The :mod:`orbrot.rotations` package holds the rotation algebra and :mod:`orbrot.particles` the minimal particle and
simulation containers it can operate on.
"""

from orbrot.rotations import Rotation
from orbrot.particles import Particle, Simulation

__all__ = ['Rotation', 'Particle', 'Simulation']

__version__ = '1.0.0'
