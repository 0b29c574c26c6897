from selements.core.element_helpers.base import ElementHelper, PolynomialDegree
from selements.core.element_helpers.euler_bernoulli import (
    BeamAxis,
    EulerBernoulliBeamHelper,
)
from selements.core.element_helpers.shaft import ShaftHelper


__all__ = [
    'BeamAxis',
    'ElementHelper',
    'EulerBernoulliBeamHelper',
    'PolynomialDegree',
    'ShaftHelper',
]
