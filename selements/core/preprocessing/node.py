from dataclasses import dataclass
from functools import cached_property

import numpy as np


@dataclass(eq=False)
class Node:
    """Create a node of a spatial bar structure.

    Parameters
    ----------
    x, y, z : :any:`float`
        Coordinates of the node in the global coordinate system.

    Raises
    ------
    ValueError
        A coordinate is not a finite number.
    """

    x: float
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        if not np.all(np.isfinite((self.x, self.y, self.z))):
            raise ValueError('The node coordinates have to be finite.')

    @cached_property
    def location(self):
        """The position of the node as a vector of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def same_location(self, other):
        """Checks whether two nodes share the same position.

        Parameters
        ----------
        other : :py:class:`Node`
            The node to compare with.

        Returns
        -------
        :any:`bool`
            :python:`True` if all coordinates are equal within floating
            point tolerance.

        Examples
        --------
        >>> from selements.core.preprocessing.node import Node
        >>> Node(1, 2, 3).same_location(Node(1, 2, 3))
        True
        >>> Node(1, 2, 3).same_location(Node(1, 2, 3.5))
        False
        """
        return bool(np.allclose(self.location, other.location))
