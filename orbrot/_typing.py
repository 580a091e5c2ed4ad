# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from typing import Union, Protocol, runtime_checkable, Any, Sequence

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]
F_SCALAR_OR_ARRAY = Union[float, DOUBLE_ARRAY]


@runtime_checkable
class ParticleLike(Protocol):
    """
    Anything carrying a mutable position and velocity that can be reoriented.
    """

    @property
    def position(self) -> DOUBLE_ARRAY: ...

    @position.setter
    def position(self, value: ARRAY_LIKE) -> None: ...

    @property
    def velocity(self) -> DOUBLE_ARRAY: ...

    @velocity.setter
    def velocity(self, value: ARRAY_LIKE) -> None: ...


@runtime_checkable
class SimulationLike(Protocol):
    """
    An ordered, finite collection of particles.
    """

    @property
    def particles(self) -> Sequence[Any]: ...

    @property
    def N(self) -> int: ...

