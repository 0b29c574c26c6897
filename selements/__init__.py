from selements.core import (
    BarElement, BeamAxis, CrossSection, Displacement, DoF, ElementHelper,
    ElementLocalDof, EulerBernoulliBeamHelper, Force, Material, Node,
    OutOfRangeError, PartialTrapezoidalLoad, ReleaseCondition, ShaftHelper,
    TaperedCrossSection, TypeMismatchError, UniformLoad, UnimplementedError,
    UnsupportedError, global_dof_indices, transformation_matrix
)

__all__ = [
    'BarElement',
    'BeamAxis',
    'CrossSection',
    'Displacement',
    'DoF',
    'ElementHelper',
    'ElementLocalDof',
    'EulerBernoulliBeamHelper',
    'Force',
    'global_dof_indices',
    'Material',
    'Node',
    'OutOfRangeError',
    'PartialTrapezoidalLoad',
    'ReleaseCondition',
    'ShaftHelper',
    'TaperedCrossSection',
    'transformation_matrix',
    'TypeMismatchError',
    'UniformLoad',
    'UnimplementedError',
    'UnsupportedError',
]
