from dataclasses import dataclass
from enum import Enum

import numpy as np
import sympy

from selements.core.element_helpers.base import ElementHelper, PolynomialDegree
from selements.core.exceptions import UnimplementedError, UnsupportedError
from selements.core.integration import engine
from selements.core.integration.gauss import integrate, points_for_degree
from selements.core.logger_mixin import table_dof_values
from selements.core.preprocessing.dof import (
    Displacement, DoF, ElementLocalDof
)
from selements.core.preprocessing.loads import (
    PartialTrapezoidalLoad, UniformLoad
)


class BeamAxis(Enum):
    """Local axis a bending formulation rotates about.

    * :python:`Z` : deflection :math:`v` along y, rotation
      :math:`r_z = v'`, second moment of area :math:`I_z`.
    * :python:`Y` : deflection :math:`w` along z, rotation
      :math:`r_y = -w'`, second moment of area :math:`I_y`.
    """

    Y = 'y'
    Z = 'z'


_XI, _L = sympy.symbols('xi L')

_HERMITE = (
    (1 - _XI) ** 2 * (2 + _XI) / 4,
    _L / 8 * (1 - _XI) ** 2 * (1 + _XI),
    (1 + _XI) ** 2 * (2 - _XI) / 4,
    _L / 8 * (1 + _XI) ** 2 * (_XI - 1),
)


def _derivative_table():
    rows = [list(_HERMITE)]
    for _ in range(3):
        rows.append([sympy.diff(f, _XI) for f in rows[-1]])
    return sympy.Matrix(rows)


_hermite_table = sympy.lambdify((_XI, _L), _derivative_table(), modules='numpy')

# (translation, rotation, sign of the rotation, local load component)
_AXIS = {
    BeamAxis.Z: (DoF.DY, DoF.RZ, 1, 1),
    BeamAxis.Y: (DoF.DZ, DoF.RY, -1, 2),
}


@dataclass(eq=False)
class EulerBernoulliBeamHelper(ElementHelper):
    r"""Euler-Bernoulli bending formulation of a two-node bar.

    The deflection is interpolated by cubic Hermite polynomials

    .. math::
        N_1 = \tfrac{1}{4} (1 - \xi)^2 (2 + \xi), \quad
        M_1 = \tfrac{L}{8} (1 - \xi)^2 (1 + \xi), \\
        N_2 = \tfrac{1}{4} (1 + \xi)^2 (2 - \xi), \quad
        M_2 = \tfrac{L}{8} (1 + \xi)^2 (\xi - 1)

    weighting the end deflections (:math:`N`) and end slopes (:math:`M`).
    Bending about the local y-axis uses negated :math:`M` terms, because
    there the rotation is :math:`r_y = -w'`.

    Parameters
    ----------
    axis : :py:class:`BeamAxis` | {'y', 'z'}, default=BeamAxis.Z
        Axis the bar bends about.
    debug : :any:`bool`, default=False
        Enables debug logging.

    Raises
    ------
    ValueError
        :py:attr:`axis` is neither :python:`'y'` nor :python:`'z'`.

    Examples
    --------
    >>> from selements import (BarElement, CrossSection, Material, Node,
    >>>                        EulerBernoulliBeamHelper)
    >>> bar = BarElement(Node(0), Node(2), CrossSection(1, 1, 1, 1),
    >>>                  Material(1, 0.3))
    >>> EulerBernoulliBeamHelper('z').calc_local_k_matrix(bar)
    array([[ 1.5,  1.5, -1.5,  1.5],
           [ 1.5,  2. , -1.5,  1. ],
           [-1.5, -1.5,  1.5, -1.5],
           [ 1.5,  1. , -1.5,  2. ]])
    """

    axis: BeamAxis | str = BeamAxis.Z
    debug: bool = False

    def __post_init__(self):
        try:
            self.axis = BeamAxis(self.axis)
        except ValueError:
            raise ValueError('axis has to be either "y" or "z".')
        self.logger.debug(f'Bending helper about the {self.axis.value}-axis.')

    @property
    def _translation(self):
        return _AXIS[self.axis][0]

    @property
    def _rotation(self):
        return _AXIS[self.axis][1]

    @property
    def _sign(self):
        return _AXIS[self.axis][2]

    # SHAPE FUNCTIONS ------------------------------------------------
    def shape_function_table(self, element, xi: float):
        """Shape functions and their derivatives with respect to
        :math:`\\xi`.

        Returns
        -------
        :any:`numpy.array`
            A 4x4 matrix. Row :math:`k` holds the :math:`k`-th derivative,
            the columns belong to :math:`N_1, M_1, N_2, M_2`. Columns of
            released degrees of freedom are zero.
        """
        xi = self._check(element, xi)
        table = np.array(_hermite_table(xi, element.length), dtype=float)
        if self.axis is BeamAxis.Y:
            table[:, [1, 3]] *= -1

        for node, release in enumerate(element.releases):
            if release.is_released(self._translation):
                table[:, 2 * node] = 0.0
            if release.is_released(self._rotation):
                table[:, 2 * node + 1] = 0.0
        return table

    def n_matrix(self, element, xi):
        return self.shape_function_table(element, xi)[0:1, :]

    def b_matrix(self, element, xi):
        r"""Curvature-displacement matrix, the second derivative of the
        shape functions with respect to :math:`x`:
        :math:`B = \frac{1}{J^2} \frac{d^2 N}{d\xi^2}`."""
        j = element.length / 2
        return self.shape_function_table(element, xi)[2:3, :] / j ** 2

    # MATERIAL MATRICES ----------------------------------------------
    def d_matrix(self, element, xi, axis: BeamAxis | str | None = None):
        """Flexural rigidity :math:`EI`.

        Parameters
        ----------
        axis : :py:class:`BeamAxis`, optional
            Bending axis selecting :math:`I_y` or :math:`I_z`. Defaults to
            the helper's axis.
        """
        xi = self._check(element, xi)
        axis = self.axis if axis is None else BeamAxis(axis)
        section = element.cross_section.properties(xi)
        material = element.material.properties(xi)
        moment = section.iy if axis is BeamAxis.Y else section.iz
        return np.array([[material.young_mod * moment]])

    def rho_matrix(self, element, xi):
        xi = self._check(element, xi)
        section = element.cross_section.properties(xi)
        return np.array([[section.area * element.material.properties(xi)
                          .density]])

    def mu_matrix(self, element, xi):
        xi = self._check(element, xi)
        section = element.cross_section.properties(xi)
        return np.array([[section.area * element.material.properties(xi)
                          .damping]])

    # DOF ORDER AND DEGREES ------------------------------------------
    def dof_order(self, element):
        """``[(0, v), (0, r), (1, v), (1, r)]`` with the deflection and
        rotation DoFs of the helper's axis."""
        self._check_element(element)
        return tuple(
            ElementLocalDof(node, dof) for node in (0, 1)
            for dof in (self._translation, self._rotation)
        )

    def polynomial_degree(self, element):
        self._check_element(element)
        return PolynomialDegree(shape=3, strain=1, jacobian=0)

    # LOADS ----------------------------------------------------------
    def _check_load(self, load):
        if not isinstance(load, (UniformLoad, PartialTrapezoidalLoad)):
            self.logger.error(f'{type(load).__name__} is not supported.')
            raise UnsupportedError(
                f'{type(load).__name__} is not supported, only uniform and '
                f'partial trapezoidal loads are.'
            )

    def local_equivalent_nodal_loads(self, element, load):
        """Integrates :math:`N^T q |J|` over the loaded part of the bar.

        Examples
        --------
        A uniform load :math:`q` on a fixed bar gives :math:`qL/2` and
        :math:`\\pm qL^2/12` at the ends:

        >>> from selements import UniformLoad
        >>> f = EulerBernoulliBeamHelper('z').local_equivalent_nodal_loads(
        >>>     bar, UniformLoad([0, 1, 0], magnitude=3.0))
        >>> f[0].fy, f[0].mz, f[1].fy, f[1].mz
        (3.0, 1.0, 3.0, -1.0)
        """
        self._check_element(element)
        self._check_load(load)
        forces = engine.equivalent_nodal_loads(
            self, element, load, _AXIS[self.axis][3]
        )
        self.logger.debug(
            f'Equivalent nodal loads: {[f.vector for f in forces]}'
        )
        return forces

    def _load_resultants(self, element, load, x):
        """Resultant force and its moment about the start of the load
        acting on the part of the bar from 0 to ``x``."""
        direction = engine.local_load_direction(element, load)[
            _AXIS[self.axis][3]
        ]
        xi0, xi1 = load.iso_range
        x0 = self.iso_to_local(element, xi0)
        x1 = min(x, self.iso_to_local(element, xi1))
        if x1 <= x0:
            return 0.0, 0.0

        def integrand(s):
            q = load.magnitude_at(self.local_to_iso(element, s)) * direction
            return np.array([q, self._sign * q * s])

        v, m = integrate(integrand, x0, x1, points_for_degree(load.degree + 1))
        return float(v), float(m)

    def _load_shear_moment(self, element, load, start_force, x):
        v0 = -start_force[self._translation]
        m0 = -start_force[self._rotation]
        v_i, m_i = self._load_resultants(element, load, x)
        shear = -(v_i + v0)
        moment = -(m0 + m_i + self._sign * shear * x)
        return shear, moment

    def load_internal_force_at(self, element, load, xi):
        """Internal forces at ``xi`` due to a load on the fixed bar.

        The end forces at the start of the bar are the negated equivalent
        nodal loads. Adding the load resultant between the start and the
        section gives shear and moment at the section, as forces of the
        part behind the section acting on the part in front of it.

        Returns
        -------
        :any:`list`
            ``[(rotation DoF, moment), (deflection DoF, shear)]``.

        Raises
        ------
        UnsupportedError
            The load is neither uniform nor partial trapezoidal.
        """
        xi = self._check(element, xi)
        self._check_load(load)
        start_force = self.local_equivalent_nodal_loads(element, load)[0]
        shear, moment = self._load_shear_moment(
            element, load, start_force, self.iso_to_local(element, xi)
        )
        result = [(self._rotation, moment), (self._translation, shear)]
        self.logger.debug(
            f'Load internal forces at xi={xi}:\n{table_dof_values(result)}'
        )
        return result

    def load_displacement_at(self, element, load, xi):
        """Deflection and rotation at ``xi`` due to a load on the bar with
        both ends clamped.

        The curvature :math:`M / EI` is integrated twice starting from the
        clamped start of the bar, split at the ends of the loaded part.

        Raises
        ------
        UnimplementedError
            An end of the bar releases a degree of freedom of this bending
            axis.
        UnsupportedError
            The load is neither uniform nor partial trapezoidal.
        """
        xi = self._check(element, xi)
        self._check_load(load)
        for release in element.releases:
            if (release.is_released(self._translation) or
                    release.is_released(self._rotation)):
                self.logger.error('Released bar in load displacement.')
                raise UnimplementedError(
                    'Load displacements of bars with released bending '
                    'degrees of freedom are not implemented.'
                )

        x = self.iso_to_local(element, xi)
        start_force = self.local_equivalent_nodal_loads(element, load)[0]

        def integrand(s):
            _, moment = self._load_shear_moment(
                element, load, start_force, s
            )
            s_xi = self.local_to_iso(element, s)
            ei = self.d_matrix(element, s_xi, axis=self.axis)[0, 0]
            kappa = self._sign * moment / ei
            return np.array([(x - s) * kappa, kappa])

        bounds = sorted({0.0, x} | {
            b for b in (self.iso_to_local(element, v) for v in load.iso_range)
            if 0.0 < b < x
        })
        n_points = points_for_degree(load.degree + 3)
        deflection, slope = 0.0, 0.0
        for a, b in zip(bounds[:-1], bounds[1:]):
            d, s = integrate(integrand, a, b, n_points)
            deflection, slope = deflection + d, slope + s

        return Displacement.from_dofs({
            self._translation: float(deflection),
            self._rotation: self._sign * float(slope),
        })

    # RECOVERY FROM NODAL DISPLACEMENTS ------------------------------
    def local_displacement_at(self, element, local_displacements, xi):
        """Interpolates deflection and rotation at ``xi`` from the local
        nodal displacements."""
        table = self.shape_function_table(element, xi)
        f = table @ self._nodal_values(element, local_displacements)
        j = element.length / 2
        return Displacement.from_dofs({
            self._translation: f[0, 0],
            self._rotation: self._sign * f[1, 0] / j,
        })

    def local_internal_force_at(self, element, local_displacements, xi):
        r"""Bending moment and shear at ``xi`` from the local nodal
        displacements.

        Derivatives with respect to :math:`x` follow from the constant
        Jacobian, :math:`\frac{d^k}{dx^k} = \frac{1}{J^k}
        \frac{d^k}{d\xi^k}`. With the deflection :math:`v`
        the results are

        .. math::
            M = \pm EI \, v'', \quad V = -EI \, v'''

        where the moment is negated for bending about the y-axis.

        Returns
        -------
        :any:`list`
            ``[(rotation DoF, moment), (deflection DoF, shear)]``.
        """
        table = self.shape_function_table(element, xi)
        f = table @ self._nodal_values(element, local_displacements)
        j = element.length / 2
        ei = self.d_matrix(element, xi, axis=self.axis)[0, 0]
        moment = self._sign * ei * f[2, 0] / j ** 2
        shear = -ei * f[3, 0] / j ** 3
        return [(self._rotation, float(moment)),
                (self._translation, float(shear))]
