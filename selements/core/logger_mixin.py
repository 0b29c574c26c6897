import logging
from typing import Any

import numpy as np
from tabulate import tabulate


class LoggerMixin:
    """
    A mixin class providing a configurable logger to any subclass.

    Every subclass gets a logger named after its module and class. The
    logger does not propagate, carries a ``NullHandler`` and logs on
    WARNING level. Passing ``debug=True`` attaches a ``StreamHandler`` and
    switches to DEBUG level, so that element helpers print the matrices
    they compute.

    Dataclasses that declare a ``debug`` field and a ``__post_init__`` are
    initialized automatically; for plain classes ``__init__`` is wrapped.

    Parameters
    ----------
    *args : Any
        Positional arguments passed to the parent class (if any).
    debug : bool, optional
        Enables debug-level logging output if True. Default is False.
    **kwargs : Any
        Additional keyword arguments passed to the parent class (if any).

    Attributes
    ----------
    logger : logging.Logger
        A logger instance configured for the specific subclass.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        self._logger.propagate = False

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        self._logger.setLevel(logging.WARNING)

        if debug:
            # only one StreamHandler per logger
            if not any(isinstance(h, logging.StreamHandler)
                       for h in self._logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(self._formatter)
                self._logger.addHandler(sh)
            self._logger.setLevel(logging.DEBUG)

        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )

    @property
    def logger(self) -> logging.Logger:
        """
        Returns the logger instance associated with this object.

        Returns
        -------
        logging.Logger
            The configured logger.
        """
        if not hasattr(self, "_logger"):
            LoggerMixin.__init__(self)
        return self._logger

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        has_debug = "debug" in getattr(cls, "__annotations__", {})

        # dataclass: hook into __post_init__
        orig_post = cls.__dict__.get("__post_init__")
        if orig_post is not None and has_debug:
            def wrapped_post(self, *a, **k):
                LoggerMixin.__init__(self, debug=getattr(self, "debug", False))
                return orig_post(self, *a, **k)

            cls.__post_init__ = wrapped_post
            return

        # plain class with its own __init__
        orig_init = cls.__dict__.get("__init__")
        if orig_init is not None:
            def wrapped_init(self, *a, **k):
                LoggerMixin.__init__(self, debug=k.get("debug", False))
                return orig_init(self, *a, **k)

            cls.__init__ = wrapped_init


def table_matrix(matrix, labels=None, decimals: int = 6):
    """Format a local element matrix as a grid table.

    Parameters
    ----------
    matrix : :any:`numpy.array`
        Matrix to format.
    labels : :any:`list`, optional
        Row and column labels, e.g. the helper's DoF order. Defaults to
        the row numbers.
    decimals : :any:`int`, default=6
        Number of decimals.

    Returns
    -------
    :any:`str`
        The matrix as a grid table.
    """
    matrix = np.atleast_2d(np.asarray(matrix, dtype=float))
    n_rows, n_cols = matrix.shape

    if labels is None:
        labels = [str(i) for i in range(max(n_rows, n_cols))]
    labels = [str(label) for label in labels]

    data = [
        [labels[i] if i < len(labels) else i] + matrix[i].tolist()
        for i in range(n_rows)
    ]
    return tabulate(data, headers=[''] + labels[:n_cols], tablefmt="grid",
                    floatfmt=f".{decimals}f")


def table_dof_values(values, decimals: int = 6):
    """Format recovered ``(DoF, value)`` pairs as a grid table."""
    data = [[str(dof), value] for dof, value in values]
    return tabulate(data, headers=['DoF', 'value'], tablefmt="grid",
                    floatfmt=f".{decimals}f")
