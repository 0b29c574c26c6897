"""Generic integration of element matrices and equivalent nodal loads.

The functions in this module only talk to an element helper through its
point-wise matrices (N, B, D, Rho, Mu, J) and its polynomial degree bounds.
They are therefore independent of the element formulation: the number of
Gauss points is chosen so that the polynomial integrands are integrated
exactly.
"""
import numpy as np

from selements.core.integration.gauss import integrate, points_for_degree
from selements.core.preprocessing.dof import Force
from selements.core.utils import unit_vector


def _det_j(helper, element, xi):
    return abs(np.linalg.det(np.atleast_2d(helper.j_matrix(element, xi))))


def calc_local_k_matrix(helper, element):
    r"""Integrates the local stiffness matrix.

    .. math::
        K = \int_{-1}^{1} B^T D B \, |J| \, d\xi

    The integrand has the degree :math:`2 d_B + d_J`.
    """
    degree = helper.polynomial_degree(element)
    n_points = points_for_degree(2 * degree.strain + degree.jacobian)

    def integrand(xi):
        b = helper.b_matrix(element, xi)
        d = helper.d_matrix(element, xi)
        return b.T @ d @ b * _det_j(helper, element, xi)

    return integrate(integrand, -1.0, 1.0, n_points)


def _calc_n_t_x_n(helper, element, x_matrix):
    degree = helper.polynomial_degree(element)
    n_points = points_for_degree(2 * degree.shape + degree.jacobian)

    def integrand(xi):
        n = helper.n_matrix(element, xi)
        return n.T @ x_matrix(element, xi) @ n * _det_j(helper, element, xi)

    return integrate(integrand, -1.0, 1.0, n_points)


def calc_local_m_matrix(helper, element):
    r"""Integrates the consistent local mass matrix.

    .. math::
        M = \int_{-1}^{1} N^T \rho N \, |J| \, d\xi
    """
    return _calc_n_t_x_n(helper, element, helper.rho_matrix)


def calc_local_c_matrix(helper, element):
    r"""Integrates the local damping matrix.

    .. math::
        C = \int_{-1}^{1} N^T \mu N \, |J| \, d\xi
    """
    return _calc_n_t_x_n(helper, element, helper.mu_matrix)


def local_load_direction(element, load):
    """Unit direction of a load in the element's local coordinate system.

    Loads given in the global system (``coord='system'``) are rotated by
    the element's transformation matrix.
    """
    direction = load.direction
    if load.coord == 'system':
        direction = element.global_to_local(direction)
    return unit_vector(direction)


def equivalent_nodal_loads(helper, element, load, component):
    r"""Converts a distributed load into equivalent nodal forces.

    Parameters
    ----------
    helper : :py:class:`ElementHelper`
        Element helper providing N, J, the degree bounds and the DoF order.
    element : :py:class:`BarElement`
        The loaded element.
    load : :py:class:`Load`
        A load with :py:meth:`~Load.magnitude_at`, :py:attr:`~Load.iso_range`
        and :py:attr:`~Load.degree`.
    component : :any:`int`
        Local direction (0 = x, 1 = y, 2 = z) the load is projected on.

    Returns
    -------
    :any:`list` of :py:class:`Force`
        One force record per element node.

    Notes
    -----
    The integrand

    .. math::
        N^T(\xi) \, q(\xi) \, (e \cdot d) \, |J(\xi)|

    is integrated over the loaded part :math:`[\xi_0, \xi_1]` with enough
    Gauss points for the degree :math:`d_N + d_q`. The entries are mapped
    to nodes and degrees of freedom through the helper's DoF order.
    """
    direction = local_load_direction(element, load)
    xi0, xi1 = load.iso_range
    degree = helper.polynomial_degree(element)
    n_points = points_for_degree(degree.shape + load.degree)

    def integrand(xi):
        n = helper.n_matrix(element, xi)
        q = load.magnitude_at(xi) * direction[component]
        return n * q * _det_j(helper, element, xi)

    result = np.ravel(integrate(integrand, xi0, xi1, n_points))

    values = [dict() for _ in element.nodes]
    for value, local in zip(result, helper.dof_order(element)):
        values[local.node][local.dof] = (
            values[local.node].get(local.dof, 0.0) + value
        )
    return [Force.from_dofs(v) for v in values]
