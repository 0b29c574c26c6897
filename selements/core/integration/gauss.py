from types import MappingProxyType
from typing import Callable

import numpy as np
from numpy.polynomial.legendre import leggauss

from selements.core.exceptions import OutOfRangeError


MAX_POINTS = 10
""" Largest tabulated number of Gauss points. """

GAUSS_LEGENDRE = MappingProxyType({
    n: tuple(zip(*(tuple(float(v) for v in arr) for arr in leggauss(n))))
    for n in range(1, MAX_POINTS + 1)
})
""" Gauss-Legendre rules on :math:`[-1, 1]`, keyed by the number of points.
Each rule is a tuple of ``(abscissa, weight)`` pairs. """


def points_for_degree(degree: int) -> int:
    r"""Smallest number of Gauss points integrating a polynomial of the
    given degree exactly.

    An :math:`n`-point rule is exact up to degree :math:`2n - 1`, hence
    :math:`n = \lfloor d / 2 \rfloor + 1`.

    Examples
    --------
    >>> from selements.core.integration.gauss import points_for_degree
    >>> [points_for_degree(d) for d in range(7)]
    [1, 1, 2, 2, 3, 3, 4]
    """
    if degree < 0:
        raise OutOfRangeError('The polynomial degree must not be negative.')
    return degree // 2 + 1


def points_and_weights(n_points: int, a: float = -1.0, b: float = 1.0):
    r"""Abscissae and weights of the ``n_points`` rule on :math:`[a, b]`.

    Parameters
    ----------
    n_points : :any:`int`
        Number of Gauss points, between 1 and :py:data:`MAX_POINTS`.
    a, b : :any:`float`, default=(-1, 1)
        Integration bounds.

    Returns
    -------
    :any:`tuple` of :any:`numpy.array`
        Abscissae and weights.

    Raises
    ------
    OutOfRangeError
        No rule is tabulated for ``n_points``.

    Notes
    -----
    The rule is mapped affinely from :math:`[-1, 1]`:

    .. math::
        x_i = \frac{b - a}{2} \xi_i + \frac{a + b}{2}, \quad
        w_i^{*} = \frac{b - a}{2} w_i
    """
    if n_points not in GAUSS_LEGENDRE:
        raise OutOfRangeError(
            f'No Gauss-Legendre rule with {n_points} points, the number of '
            f'points has to be between 1 and {MAX_POINTS}.'
        )
    xi, w = np.array(GAUSS_LEGENDRE[n_points]).T
    half = (b - a) / 2
    return half * xi + (a + b) / 2, half * w


def integrate(func: Callable, a: float, b: float, n_points: int):
    """Integrate a matrix-valued function over :math:`[a, b]`.

    Parameters
    ----------
    func : :any:`callable`
        Function of one coordinate returning a scalar or an array. All
        results have to share the same shape.
    a, b : :any:`float`
        Integration bounds.
    n_points : :any:`int`
        Number of Gauss points.

    Returns
    -------
    :any:`numpy.array`
        The weighted sum of ``func`` at the Gauss points.

    Examples
    --------
    >>> import numpy as np
    >>> from selements.core.integration.gauss import integrate
    >>> integrate(lambda x: np.array([[x ** 3, 1.0]]), 0, 2, 2)
    array([[4., 2.]])
    """
    points, weights = points_and_weights(n_points, a, b)
    result = None
    for x, w in zip(points, weights):
        value = w * np.asarray(func(float(x)), dtype=float)
        result = value if result is None else result + value
    return result
