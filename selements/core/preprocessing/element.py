import abc
from dataclasses import dataclass, field
from functools import cached_property

import numpy as np
from numpy.typing import ArrayLike

from selements.core.logger_mixin import LoggerMixin
from selements.core.preprocessing.cross_section import (
    CrossSection, TaperedCrossSection
)
from selements.core.preprocessing.material import Material
from selements.core.preprocessing.node import Node
from selements.core.preprocessing.release import ReleaseCondition
from selements.core.utils import transformation_matrix


class Element(abc.ABC):
    """Base class of all structural elements.

    An element helper checks the kind of element it receives against its
    supported element types before evaluating anything.
    """

    @property
    @abc.abstractmethod
    def nodes(self) -> tuple[Node, ...]:
        """Ordered nodes of the element."""


@dataclass(eq=False)
class BarElement(Element, LoggerMixin):
    """Create a straight two-node bar element in 3D space.

    Parameters
    ----------
    node_i : :py:class:`Node`
        Node at the start of the bar.
    node_j : :py:class:`Node`
        Node at the end of the bar.
    cross_section : :py:class:`CrossSection` | :py:class:`TaperedCrossSection`
        Section provider, evaluated at isoparametric coordinates.
    material : :py:class:`Material`
        Material provider, evaluated at isoparametric coordinates.
    release_i : :py:class:`ReleaseCondition`, default=fixed
        Release condition at the start of the bar.
    release_j : :py:class:`ReleaseCondition`, default=fixed
        Release condition at the end of the bar.
    web_rotation : :any:`float`, default=0.0
        Rotation of the cross-section about the bar axis in rad.
    reference_vector : array_like, optional
        Vector in the local x-z plane, see
        :py:func:`~selements.core.utils.transformation_matrix`.
    debug : :any:`bool`, default=False
        Enables debug logging.

    Raises
    ------
    ValueError
        :py:attr:`node_i` and :py:attr:`node_j` need to have different
        locations.
    """

    node_i: Node
    node_j: Node
    cross_section: CrossSection | TaperedCrossSection
    material: Material
    release_i: ReleaseCondition = field(default_factory=ReleaseCondition)
    release_j: ReleaseCondition = field(default_factory=ReleaseCondition)
    web_rotation: float = 0.0
    reference_vector: ArrayLike | None = None
    debug: bool = False

    def __post_init__(self):
        if self.node_i.same_location(self.node_j):
            self.logger.error('Bar nodes share the same location.')
            raise ValueError(
                'node_i and node_j need to have different locations.'
            )
        self.logger.debug(
            f'Bar element from {self.node_i.location} to '
            f'{self.node_j.location} with length {self.length}.'
        )

    @property
    def nodes(self):
        return self.node_i, self.node_j

    @property
    def releases(self):
        """Release conditions of both ends, ordered like :py:attr:`nodes`."""
        return self.release_i, self.release_j

    @cached_property
    def length(self):
        r"""Distance between the start and end node,
        :math:`L = \| x_j - x_i \|`.

        Examples
        --------
        >>> from selements.core.preprocessing import (
        >>>     BarElement, CrossSection, Material, Node)
        >>> bar = BarElement(Node(0, 0, 0), Node(3, 4, 0),
        >>>                  CrossSection(1, 1, 1, 1), Material(1, 0.3))
        >>> bar.length
        5.0
        """
        return float(
            np.linalg.norm(self.node_j.location - self.node_i.location)
        )

    @cached_property
    def transformation_matrix(self):
        """The 3x3 rotation matrix from global into local coordinates.

        Returns
        -------
        :any:`numpy.array`
            Rows are the local x-, y- and z-axis in global coordinates.
        """
        return transformation_matrix(
            self.node_j.location - self.node_i.location,
            self.reference_vector, self.web_rotation
        )

    def global_to_local(self, vector: ArrayLike):
        """Rotates a global vector of shape (3,) into the local frame."""
        return self.transformation_matrix @ np.asarray(
            vector, dtype=float
        ).reshape(3)

    def local_to_global(self, vector: ArrayLike):
        """Rotates a local vector of shape (3,) into the global frame."""
        return self.transformation_matrix.T @ np.asarray(
            vector, dtype=float
        ).reshape(3)
