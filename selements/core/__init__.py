from selements.core import element_helpers, integration, preprocessing
from selements.core.element_helpers import *  # noqa: F401, F403
from selements.core.exceptions import (  # noqa: F401
    OutOfRangeError, TypeMismatchError, UnimplementedError, UnsupportedError
)
from selements.core.integration import *  # noqa: F401, F403
from selements.core.preprocessing import *  # noqa: F401, F403
from selements.core.utils import transformation_matrix  # noqa: F401

__all__ = [
    'element_helpers',
    'integration',
    'preprocessing',
]
