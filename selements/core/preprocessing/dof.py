from dataclasses import dataclass, fields
from enum import IntEnum
from functools import cached_property
from typing import Iterable, Mapping, NamedTuple, Sequence

import numpy as np


class DoF(IntEnum):
    """Degree of freedom of a node in 3D space.

    The value doubles as the index into the 6-component records
    :py:class:`Displacement` and :py:class:`Force`.
    """

    DX = 0
    DY = 1
    DZ = 2
    RX = 3
    RY = 4
    RZ = 5

    def __str__(self):
        return self.name


class ElementLocalDof(NamedTuple):
    """Meaning of one row/column of a local element matrix: the degree of
    freedom :py:attr:`dof` at the element's local node :py:attr:`node`."""

    node: int
    dof: DoF


@dataclass(eq=False)
class DegreesOfFreedom:
    """Base for 6-component nodal records with three translational and
    three rotational components.

    Subclasses only declare the six field names in :py:class:`DoF` order.
    """

    @classmethod
    def from_vector(cls, vector):
        """Create a record from a vector with six entries."""
        vector = np.asarray(vector, dtype=float).reshape(6)
        return cls(*vector.tolist())

    @classmethod
    def from_dofs(cls, values: Mapping[DoF, float]):
        """Create a record from a ``{DoF: value}`` mapping. Missing degrees
        of freedom are zero.

        Examples
        --------
        >>> from selements.core.preprocessing.dof import DoF, Force
        >>> Force.from_dofs({DoF.DY: 2.0, DoF.RZ: -1.0}).vector
        array([ 0.,  2.,  0.,  0.,  0., -1.])
        """
        vector = np.zeros(6)
        for dof, value in values.items():
            vector[DoF(dof)] += value
        return cls.from_vector(vector)

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    @cached_property
    def vector(self):
        """The record as a flat vector of shape (6,)."""
        return np.array(
            [getattr(self, f.name) for f in fields(self)], dtype=float
        )

    def __getitem__(self, dof: DoF):
        return float(self.vector[DoF(dof)])

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.from_vector(self.vector + other.vector)

    def __neg__(self):
        return self.from_vector(-self.vector)


@dataclass(eq=False)
class Displacement(DegreesOfFreedom):
    """Displacement of a node: translations :py:attr:`dx`, :py:attr:`dy`,
    :py:attr:`dz` and rotations :py:attr:`rx`, :py:attr:`ry`,
    :py:attr:`rz`."""

    dx: float = 0.0
    dy: float = 0.0
    dz: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0


@dataclass(eq=False)
class Force(DegreesOfFreedom):
    """Force acting on a node: forces :py:attr:`fx`, :py:attr:`fy`,
    :py:attr:`fz` and moments :py:attr:`mx`, :py:attr:`my`,
    :py:attr:`mz`."""

    fx: float = 0.0
    fy: float = 0.0
    fz: float = 0.0
    mx: float = 0.0
    my: float = 0.0
    mz: float = 0.0


def global_dof_indices(
        dof_order: Sequence[ElementLocalDof], node_ids: Sequence[int],
        dof_per_node: int = 6
) -> list[int]:
    """Map the local DoF order of an element helper onto global indices.

    Parameters
    ----------
    dof_order : :any:`list` of :py:class:`ElementLocalDof`
        The helper's local DoF order, see ``ElementHelper.dof_order``.
    node_ids : :any:`list` of :any:`int`
        Global index of each local node, e.g. ``[ni, nj]``.
    dof_per_node : :any:`int`, default=6
        Number of degrees of freedom per node in the global system.

    Returns
    -------
    :any:`list` of :any:`int`
        One global index per row/column of the local matrices, ready to
        scatter them into the global system.

    Raises
    ------
    ValueError
        A local node index has no global node or a DoF exceeds
        :py:attr:`dof_per_node`.

    Examples
    --------
    >>> from selements.core.preprocessing.dof import (
    >>>     DoF, ElementLocalDof, global_dof_indices)
    >>> order = (ElementLocalDof(0, DoF.DY), ElementLocalDof(0, DoF.RZ),
    >>>          ElementLocalDof(1, DoF.DY), ElementLocalDof(1, DoF.RZ))
    >>> global_dof_indices(order, [2, 5])
    [13, 17, 31, 35]
    """
    indices = []
    for local in dof_order:
        if not 0 <= local.node < len(node_ids):
            raise ValueError(
                f'Local node {local.node} has no global node index.'
            )
        if local.dof >= dof_per_node:
            raise ValueError(
                f'{local.dof.name} does not exist with {dof_per_node} degrees of '
                f'freedom per node.'
            )
        indices.append(dof_per_node * node_ids[local.node] + int(local.dof))
    return indices


def gather(records: Iterable[DegreesOfFreedom],
           dof_order: Sequence[ElementLocalDof]):
    """Collect the entries of per-node records in a helper's DoF order.

    Returns
    -------
    :any:`numpy.array`
        Column vector with one entry per local DoF.
    """
    records = tuple(records)
    return np.array(
        [[records[local.node][local.dof]] for local in dof_order], dtype=float
    )
