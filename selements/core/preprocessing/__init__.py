from selements.core.preprocessing.cross_section import (
    CrossSection,
    TaperedCrossSection,
)
from selements.core.preprocessing.dof import (
    DegreesOfFreedom,
    Displacement,
    DoF,
    ElementLocalDof,
    Force,
    gather,
    global_dof_indices,
)
from selements.core.preprocessing.element import BarElement, Element
from selements.core.preprocessing.loads import (
    Load,
    PartialTrapezoidalLoad,
    UniformLoad,
)
from selements.core.preprocessing.material import Material
from selements.core.preprocessing.node import Node
from selements.core.preprocessing.release import Constraint, ReleaseCondition


__all__ = [
    'BarElement',
    'Constraint',
    'CrossSection',
    'DegreesOfFreedom',
    'Displacement',
    'DoF',
    'Element',
    'ElementLocalDof',
    'Force',
    'gather',
    'global_dof_indices',
    'Load',
    'Material',
    'Node',
    'PartialTrapezoidalLoad',
    'ReleaseCondition',
    'TaperedCrossSection',
    'UniformLoad',
]
