import abc
import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from selements.core.exceptions import (
    OutOfRangeError, TypeMismatchError, UnimplementedError
)
from selements.core.integration import engine
from selements.core.logger_mixin import LoggerMixin, table_matrix
from selements.core.preprocessing.dof import (
    Displacement, DoF, ElementLocalDof, Force, gather
)
from selements.core.preprocessing.element import BarElement, Element
from selements.core.preprocessing.loads import Load
from selements.core.utils import ISO_TOLERANCE


@dataclass(frozen=True)
class PolynomialDegree:
    r"""Upper bounds of the polynomial degree in :math:`\xi` of an element
    formulation.

    Parameters
    ----------
    shape : :any:`int`
        Degree of the shape function matrix N.
    strain : :any:`int`
        Degree of the strain-displacement matrix B.
    jacobian : :any:`int`
        Degree of the Jacobian determinant.
    """

    shape: int
    strain: int
    jacobian: int


class ElementHelper(LoggerMixin, abc.ABC):
    """Contract of an element formulation.

    An element helper evaluates the point-wise matrices of one formulation
    (shape functions N, strain-displacement matrix B, constitutive matrix
    D, inertia Rho, damping Mu and Jacobian J) for an element at
    isoparametric coordinates. The generic integration engine turns them
    into local stiffness, mass and damping matrices. The helper also
    converts distributed loads into equivalent nodal loads and recovers
    displacements and internal forces along the element.

    The matrix and recovery computations depend only on their arguments and
    the construction parameters, so a single instance may serve many
    elements. The logger is shared by all instances of a helper class.

    See Also
    --------
    :py:mod:`selements.core.integration.engine`
    """

    element_types: tuple[type[Element], ...] = (BarElement,)
    """ Element kinds the helper supports. """

    # VALIDATION -----------------------------------------------------
    def _check_element(self, element):
        if not isinstance(element, self.element_types):
            self.logger.error(
                f'{type(element).__name__} is not supported by '
                f'{type(self).__name__}.'
            )
            raise TypeMismatchError(
                f'{type(self).__name__} supports '
                f'{", ".join(t.__name__ for t in self.element_types)} '
                f'elements only, got {type(element).__name__}.'
            )

    def _check_xi(self, xi):
        if not -1 - ISO_TOLERANCE <= xi <= 1 + ISO_TOLERANCE:
            self.logger.error(f'Isoparametric coordinate {xi} out of range.')
            raise OutOfRangeError(
                f'The isoparametric coordinate has to be in [-1, 1], got {xi}.'
            )
        return min(max(float(xi), -1.0), 1.0)

    def _check(self, element, xi):
        self._check_element(element)
        return self._check_xi(xi)

    def _nodal_values(self, element, local_displacements):
        """Local nodal displacements as a column vector in DoF order.

        Raises
        ------
        ValueError
            Not exactly one record per element node is given.
        """
        if len(local_displacements) != len(element.nodes):
            self.logger.error(
                f'Got {len(local_displacements)} local displacements.'
            )
            raise ValueError(
                f'Expected {len(element.nodes)} local displacements, got '
                f'{len(local_displacements)}.'
            )
        return gather(local_displacements, self.dof_order(element))

    # POINT-WISE MATRICES --------------------------------------------
    @abc.abstractmethod
    def n_matrix(self, element, xi: float) -> np.ndarray:
        """Shape function matrix N at ``xi``."""

    @abc.abstractmethod
    def b_matrix(self, element, xi: float) -> np.ndarray:
        """Strain-displacement matrix B at ``xi``."""

    def b_i_matrix(self, element, i: int, xi: float) -> np.ndarray:
        """Row ``i`` of the strain-displacement matrix at ``xi``.

        Raises
        ------
        OutOfRangeError
            B has no row ``i``.
        """
        b = self.b_matrix(element, xi)
        if not 0 <= i < b.shape[0]:
            self.logger.error(f'B has no row {i}.')
            raise OutOfRangeError(
                f'Row index {i} is invalid, B has {b.shape[0]} row(s).'
            )
        return b[i:i + 1, :]

    @abc.abstractmethod
    def d_matrix(self, element, xi: float) -> np.ndarray:
        """Constitutive matrix D at ``xi``."""

    @abc.abstractmethod
    def rho_matrix(self, element, xi: float) -> np.ndarray:
        """Mass density matrix at ``xi``."""

    @abc.abstractmethod
    def mu_matrix(self, element, xi: float) -> np.ndarray:
        """Damping matrix at ``xi``."""

    def j_matrix(self, element, xi: float) -> np.ndarray:
        """Jacobian of the isoparametric mapping. For a straight two-node
        bar it is constant, :math:`J = L / 2`."""
        self._check(element, xi)
        return np.array([[element.length / 2]])

    # COORDINATES ----------------------------------------------------
    def iso_to_local(self, element, xi: float) -> float:
        r"""Position along the bar, :math:`x = L (\xi + 1) / 2`.

        Examples
        --------
        >>> from selements import (BarElement, CrossSection, Material, Node,
        >>>                        ShaftHelper)
        >>> bar = BarElement(Node(0), Node(4), CrossSection(1, 1, 1, 1),
        >>>                  Material(1, 0.3))
        >>> ShaftHelper().iso_to_local(bar, 0.5)
        3.0
        """
        self._check_element(element)
        return element.length * (xi + 1) / 2

    def local_to_iso(self, element, x: float) -> float:
        r"""Isoparametric coordinate, :math:`\xi = 2 x / L - 1`."""
        self._check_element(element)
        return 2 * x / element.length - 1

    # ELEMENT MATRICES -----------------------------------------------
    def does_override_k_matrix_calculation(
            self, element, transform_matrix: np.ndarray | None = None
    ) -> bool:
        """Whether the helper computes its stiffness matrix itself instead
        of using the generic integration engine."""
        return False

    def calc_local_k_matrix(self, element) -> np.ndarray:
        """Local stiffness matrix, ordered like :py:meth:`dof_order`.

        Raises
        ------
        UnimplementedError
            The helper claims to override the stiffness calculation without
            providing it.
        """
        self._check_element(element)
        if self.does_override_k_matrix_calculation(element):
            self.logger.error('Stiffness override without implementation.')
            raise UnimplementedError(
                f'{type(self).__name__} overrides the stiffness calculation '
                f'but does not implement calc_local_k_matrix.'
            )
        k = engine.calc_local_k_matrix(self, element)
        self._log_matrix('Local stiffness matrix', k, element)
        return k

    def calc_local_m_matrix(self, element) -> np.ndarray:
        """Consistent local mass matrix, ordered like :py:meth:`dof_order`."""
        self._check_element(element)
        m = engine.calc_local_m_matrix(self, element)
        self._log_matrix('Local mass matrix', m, element)
        return m

    def calc_local_c_matrix(self, element) -> np.ndarray:
        """Local damping matrix, ordered like :py:meth:`dof_order`."""
        self._check_element(element)
        c = engine.calc_local_c_matrix(self, element)
        self._log_matrix('Local damping matrix', c, element)
        return c

    def _log_matrix(self, description, matrix, element):
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        labels = [f'{d.node}:{d.dof.name}' for d in self.dof_order(element)]
        self.logger.debug(f'{description}:\n{table_matrix(matrix, labels)}')

    # DOF ORDER AND DEGREES ------------------------------------------
    @abc.abstractmethod
    def dof_order(self, element) -> tuple[ElementLocalDof, ...]:
        """Meaning of the rows and columns of the local matrices."""

    @abc.abstractmethod
    def polynomial_degree(self, element) -> PolynomialDegree:
        """Degree bounds of N, B and det J used to size Gauss rules."""

    def n_max_order(self, element) -> int:
        return self.polynomial_degree(element).shape

    def b_max_order(self, element) -> int:
        return self.polynomial_degree(element).strain

    def det_j_order(self, element) -> int:
        return self.polynomial_degree(element).jacobian

    # LOADS AND RECOVERY ---------------------------------------------
    @abc.abstractmethod
    def local_equivalent_nodal_loads(
            self, element, load: Load
    ) -> list[Force]:
        """Nodal forces equivalent to a distributed load, one per node."""

    @abc.abstractmethod
    def local_internal_force_at(
            self, element, local_displacements: Sequence[Displacement],
            xi: float
    ) -> list[tuple[DoF, float]]:
        """Internal forces at ``xi`` due to local nodal displacements."""

    @abc.abstractmethod
    def load_internal_force_at(
            self, element, load: Load, xi: float
    ) -> list[tuple[DoF, float]]:
        """Internal forces at ``xi`` due to a load on the fixed element."""

    @abc.abstractmethod
    def local_displacement_at(
            self, element, local_displacements: Sequence[Displacement],
            xi: float
    ) -> Displacement:
        """Displacement at ``xi`` interpolated from nodal displacements."""

    @abc.abstractmethod
    def load_displacement_at(
            self, element, load: Load, xi: float
    ) -> Displacement:
        """Displacement at ``xi`` due to a load on the fixed element."""
