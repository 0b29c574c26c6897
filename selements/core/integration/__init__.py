from selements.core.integration import engine
from selements.core.integration.gauss import (
    GAUSS_LEGENDRE,
    integrate,
    points_and_weights,
    points_for_degree,
)


__all__ = [
    'engine',
    'GAUSS_LEGENDRE',
    'integrate',
    'points_and_weights',
    'points_for_degree',
]
