from dataclasses import dataclass

import numpy as np

from selements.core.element_helpers.base import ElementHelper, PolynomialDegree
from selements.core.exceptions import UnimplementedError, UnsupportedError
from selements.core.preprocessing.dof import (
    Displacement, DoF, ElementLocalDof, Force
)
from selements.core.preprocessing.loads import (
    PartialTrapezoidalLoad, UniformLoad
)


@dataclass(eq=False)
class ShaftHelper(ElementHelper):
    r"""Saint-Venant torsion of a two-node bar.

    The twist :math:`\varphi` about the bar axis is interpolated linearly,

    .. math::
        N = \left[ \tfrac{1 - \xi}{2}, \tfrac{1 + \xi}{2} \right], \quad
        B = \left[ -\tfrac{1}{L}, \tfrac{1}{L} \right]

    and the torsional rigidity is :math:`GJ` with
    :math:`G = E / (2 (1 + \nu))`.

    Parameters
    ----------
    debug : :any:`bool`, default=False
        Enables debug logging.
    """

    debug: bool = False

    def __post_init__(self):
        self.logger.debug('Torsion helper created.')

    def _released(self, element):
        return [release.is_released(DoF.RX) for release in element.releases]

    def n_matrix(self, element, xi):
        xi = self._check(element, xi)
        n = np.array([[(1 - xi) / 2, (1 + xi) / 2]])
        n[:, self._released(element)] = 0.0
        return n

    def b_matrix(self, element, xi):
        self._check(element, xi)
        b = np.array([[-1.0, 1.0]]) / element.length
        b[:, self._released(element)] = 0.0
        return b

    def d_matrix(self, element, xi):
        """Torsional rigidity :math:`GJ`.

        Raises
        ------
        UnsupportedError
            The material is not isotropic.
        """
        xi = self._check(element, xi)
        material = element.material.properties(xi)
        if not material.is_isotropic:
            self.logger.error('Anisotropic material in torsion.')
            raise UnsupportedError(
                'Torsion is only supported for isotropic materials.'
            )
        section = element.cross_section.properties(xi)
        return np.array([[material.shear_mod * section.j]])

    def rho_matrix(self, element, xi):
        """Rotational inertia per length, :math:`J \\rho`."""
        xi = self._check(element, xi)
        section = element.cross_section.properties(xi)
        return np.array([[section.j * element.material.properties(xi)
                          .density]])

    def mu_matrix(self, element, xi):
        xi = self._check(element, xi)
        section = element.cross_section.properties(xi)
        return np.array([[section.j * element.material.properties(xi)
                          .damping]])

    def dof_order(self, element):
        self._check_element(element)
        return (ElementLocalDof(0, DoF.RX), ElementLocalDof(1, DoF.RX))

    def polynomial_degree(self, element):
        self._check_element(element)
        return PolynomialDegree(shape=1, strain=0, jacobian=0)

    def local_equivalent_nodal_loads(self, element, load):
        """Distributed torques are not modelled, every supported load gives
        zero nodal moments.

        Raises
        ------
        UnsupportedError
            The load is neither uniform nor partial trapezoidal.
        """
        self._check_element(element)
        if not isinstance(load, (UniformLoad, PartialTrapezoidalLoad)):
            self.logger.error(f'{type(load).__name__} is not supported.')
            raise UnsupportedError(
                f'{type(load).__name__} is not supported, only uniform and '
                f'partial trapezoidal loads are.'
            )
        return [Force.zero() for _ in element.nodes]

    def local_internal_force_at(self, element, local_displacements, xi):
        """Torque :math:`GJ \\, B u` at ``xi``."""
        xi = self._check(element, xi)
        u = self._nodal_values(element, local_displacements)
        torque = self.d_matrix(element, xi) @ self.b_matrix(element, xi) @ u
        return [(DoF.RX, float(torque[0, 0]))]

    def load_internal_force_at(self, element, load, xi):
        self._check(element, xi)
        self.logger.error('Load internal forces of shafts requested.')
        raise UnimplementedError(
            'Internal forces due to loads are not implemented for shafts.'
        )

    def local_displacement_at(self, element, local_displacements, xi):
        """Twist :math:`N u` at ``xi``."""
        xi = self._check(element, xi)
        u = self._nodal_values(element, local_displacements)
        twist = self.n_matrix(element, xi) @ u
        return Displacement(rx=float(twist[0, 0]))

    def load_displacement_at(self, element, load, xi):
        self._check(element, xi)
        self.logger.error('Load displacements of shafts requested.')
        raise UnimplementedError(
            'Displacements due to loads are not implemented for shafts.'
        )
