import abc
from dataclasses import dataclass
from typing import Literal

import numpy as np
from numpy.typing import ArrayLike


@dataclass(eq=False)
class Load(abc.ABC):
    """Base class of distributed loads acting along a bar.

    Parameters
    ----------
    direction : array_like
        Direction of the load as a vector with three components. Only the
        direction is used, the length is normalized away.
    coord : {'bar', 'system'}, default='bar'
        Coordinate system of :py:attr:`direction`:
            * :python:`'bar'` : local coordinate system of the bar.
            * :python:`'system'` : global coordinate system.

    Raises
    ------
    ValueError
        :py:attr:`direction` has to be a non-zero vector with three
        components.
    ValueError
        :py:attr:`coord` has to be either :python:`'bar'` or
        :python:`'system'`.
    """

    direction: ArrayLike
    coord: Literal['bar', 'system'] = 'bar'

    def __post_init__(self):
        try:
            self.direction = np.asarray(self.direction, dtype=float).reshape(3)
        except ValueError:
            raise ValueError(
                'direction has to be a vector with three components.'
            )
        if not np.any(self.direction):
            raise ValueError('direction must not be a zero vector.')
        if self.coord not in ('bar', 'system'):
            raise ValueError('coord has to be either "bar" or "system".')

    @property
    @abc.abstractmethod
    def iso_range(self) -> tuple[float, float]:
        """Loaded part of the bar in isoparametric coordinates."""

    @property
    @abc.abstractmethod
    def degree(self) -> int:
        """Polynomial degree of the magnitude profile."""

    @abc.abstractmethod
    def magnitude_at(self, xi: float) -> float:
        """Load intensity at the isoparametric coordinate ``xi``."""


@dataclass(eq=False)
class UniformLoad(Load):
    """Constant line load over the full length of a bar.

    Parameters
    ----------
    direction : array_like
        Direction of the load.
    coord : {'bar', 'system'}, default='bar'
        Coordinate system of the direction.
    magnitude : :any:`float`, default=0.0
        Load per unit length.

    Examples
    --------
    >>> from selements.core.preprocessing.loads import UniformLoad
    >>> load = UniformLoad([0, -1, 0], magnitude=5.0)
    >>> load.magnitude_at(0.3), load.iso_range, load.degree
    (5.0, (-1.0, 1.0), 0)
    """

    magnitude: float = 0.0

    @property
    def iso_range(self):
        return -1.0, 1.0

    @property
    def degree(self):
        return 0

    def magnitude_at(self, xi: float):
        return self.magnitude


@dataclass(eq=False)
class PartialTrapezoidalLoad(Load):
    r"""Line load varying linearly over a part of a bar.

    Parameters
    ----------
    direction : array_like
        Direction of the load.
    coord : {'bar', 'system'}, default='bar'
        Coordinate system of the direction.
    start_iso : :any:`float`, default=-1.0
        Isoparametric coordinate where the load starts.
    end_iso : :any:`float`, default=1.0
        Isoparametric coordinate where the load ends.
    start_magnitude : :any:`float`, default=0.0
        Load per unit length at :py:attr:`start_iso`.
    end_magnitude : :any:`float`, default=0.0
        Load per unit length at :py:attr:`end_iso`.

    Raises
    ------
    ValueError
        :math:`-1 \leq` :py:attr:`start_iso` :math:`<` :py:attr:`end_iso`
        :math:`\leq 1` is violated.

    Notes
    -----
    Outside of :math:`[\xi_0, \xi_1]` the magnitude is zero.
    """

    start_iso: float = -1.0
    end_iso: float = 1.0
    start_magnitude: float = 0.0
    end_magnitude: float = 0.0

    def __post_init__(self):
        super().__post_init__()
        if not -1 <= self.start_iso < self.end_iso <= 1:
            raise ValueError(
                'start_iso and end_iso have to satisfy '
                '-1 <= start_iso < end_iso <= 1.'
            )

    @property
    def iso_range(self):
        return float(self.start_iso), float(self.end_iso)

    @property
    def degree(self):
        return 1

    def magnitude_at(self, xi: float):
        """Linearly interpolated magnitude, zero outside of the loaded part.

        Examples
        --------
        >>> from selements.core.preprocessing.loads import (
        >>>     PartialTrapezoidalLoad)
        >>> load = PartialTrapezoidalLoad([0, 0, 1], start_iso=0,
        >>>                               start_magnitude=2, end_magnitude=4)
        >>> load.magnitude_at(0.5), load.magnitude_at(-0.5)
        (3.0, 0.0)
        """
        if not self.start_iso <= xi <= self.end_iso:
            return 0.0
        t = (xi - self.start_iso) / (self.end_iso - self.start_iso)
        return float(
            (1 - t) * self.start_magnitude + t * self.end_magnitude
        )
