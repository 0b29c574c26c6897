
class TypeMismatchError(TypeError):
    """Raised when an element helper receives an element kind it does not
    support, e.g. a non-bar element passed to a bar helper."""


class OutOfRangeError(ValueError):
    """Raised for an isoparametric coordinate outside of :math:`[-1, 1]`,
    an invalid row index of the B matrix or an unknown number of Gauss
    points."""


class UnsupportedError(ValueError):
    """Raised for inputs a formulation cannot handle, e.g. an anisotropic
    material for the torsion constitutive matrix or an unknown load kind."""


class UnimplementedError(NotImplementedError):
    """Raised when a force or displacement recovery combination is not
    covered by an element helper."""
