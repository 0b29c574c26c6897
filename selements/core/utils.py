import numpy as np
from numpy.typing import ArrayLike


ISO_TOLERANCE = 1e-12
""" Absolute tolerance used when checking isoparametric coordinates against
the interval :math:`[-1, 1]`. """


def unit_vector(vector: ArrayLike):
    """Normalizes a 3D vector.

    Parameters
    ----------
    vector : array_like
        Vector with three components.

    Returns
    -------
    :any:`numpy.array`
        Vector of shape (3,) with length one.

    Raises
    ------
    ValueError
        The vector has a length of zero.

    Examples
    --------
    >>> from selements.core.utils import unit_vector
    >>> unit_vector([0, 3, 4])
    array([0. , 0.6, 0.8])
    """
    vector = np.asarray(vector, dtype=float).reshape(3)
    norm = np.linalg.norm(vector)
    if norm == 0:
        raise ValueError('A vector with a length of zero has no direction.')
    return vector / norm


def transformation_matrix(
        x_axis: ArrayLike, reference: ArrayLike | None = None,
        web_rotation: float = 0.0
):
    r"""Create the 3x3 rotation matrix from the global into a bar's local
    coordinate system.

    Parameters
    ----------
    x_axis : array_like
        Direction of the bar axis (start node to end node).
    reference : array_like, optional
        Vector lying in the local x-z plane. Defaults to the global
        z-axis, or to the negative global x-axis if the bar is vertical.
    web_rotation : :any:`float`, default=0.0
        Rotation of the cross-section about the bar axis in rad.

    Returns
    -------
    :any:`numpy.array`
        A 3x3 matrix whose rows are the local axes in global coordinates.
        Multiplying a global vector with it yields local components.

    Notes
    -----
    The local axes are built as

    .. math::
        \hat{y} = \frac{r \times \hat{x}}{\|r \times \hat{x}\|}, \quad
        \hat{z} = \hat{x} \times \hat{y}

    and then rotated about :math:`\hat{x}` by the web rotation. A bar along
    the global x-axis has the identity as transformation matrix.

    Examples
    --------
    >>> from selements.core.utils import transformation_matrix
    >>> transformation_matrix([2, 0, 0])
    array([[1., 0., 0.],
           [0., 1., 0.],
           [0., 0., 1.]])
    """
    x = unit_vector(x_axis)
    if reference is None:
        reference = np.array([0.0, 0.0, 1.0])
        if np.linalg.norm(np.cross(reference, x)) < 1e-9:
            reference = np.array([-1.0, 0.0, 0.0])
    y = np.cross(np.asarray(reference, dtype=float).reshape(3), x)
    if np.linalg.norm(y) < 1e-9:
        raise ValueError(
            'The reference vector must not be parallel to the bar axis.'
        )
    y = y / np.linalg.norm(y)
    z = np.cross(x, y)

    if web_rotation:
        c, s = np.cos(web_rotation), np.sin(web_rotation)
        y, z = c * y + s * z, -s * y + c * z

    return np.vstack((x, y, z))
