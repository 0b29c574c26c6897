from dataclasses import dataclass, fields
from enum import Enum

from selements.core.preprocessing.dof import DoF


class Constraint(Enum):
    """Connection of a bar end to its node for one degree of freedom."""

    FIXED = 'fixed'
    RELEASED = 'released'


@dataclass(frozen=True)
class ReleaseCondition:
    """Release condition of one bar end.

    A released degree of freedom models a hinge: no moment (rotation
    release) or no force (translation release) is transmitted between the
    bar end and its node.

    Parameters
    ----------
    dx, dy, dz, rx, ry, rz : :py:class:`Constraint`, default=FIXED
        Constraint per degree of freedom. The strings :python:`'fixed'`
        and :python:`'released'` are accepted as well.

    Raises
    ------
    ValueError
        A constraint is neither :python:`'fixed'` nor :python:`'released'`.

    Examples
    --------
    >>> from selements.core.preprocessing.dof import DoF
    >>> from selements.core.preprocessing.release import ReleaseCondition
    >>> ReleaseCondition.hinged().is_released(DoF.RZ)
    True
    >>> ReleaseCondition(dy='released').is_released(DoF.DY)
    True
    """

    dx: Constraint = Constraint.FIXED
    dy: Constraint = Constraint.FIXED
    dz: Constraint = Constraint.FIXED
    rx: Constraint = Constraint.FIXED
    ry: Constraint = Constraint.FIXED
    rz: Constraint = Constraint.FIXED

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, Constraint):
                try:
                    value = Constraint(value)
                except ValueError:
                    raise ValueError(
                        f'"{value}" is an invalid argument for {f.name}. Has '
                        f'to be either "fixed" or "released".'
                    )
                object.__setattr__(self, f.name, value)

    @classmethod
    def fixed(cls):
        """Rigid connection in all degrees of freedom."""
        return cls()

    @classmethod
    def hinged(cls):
        """All rotations released, all translations fixed."""
        return cls.released(DoF.RX, DoF.RY, DoF.RZ)

    @classmethod
    def released(cls, *dofs: DoF):
        """Release the given degrees of freedom, fix the rest."""
        return cls(**{
            f.name: Constraint.RELEASED for i, f in enumerate(fields(cls))
            if DoF(i) in dofs
        })

    def constraint(self, dof: DoF) -> Constraint:
        return getattr(self, fields(self)[DoF(dof)].name)

    def is_released(self, dof: DoF) -> bool:
        return self.constraint(dof) is Constraint.RELEASED
