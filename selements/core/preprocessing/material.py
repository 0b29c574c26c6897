from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class Material:
    r"""Create a material for a bar.

    Parameters
    ----------
    young_mod : :any:`float`
        Young's modulus in the direction of the bar axis (:math:`E_x`).
    poisson : :any:`float`
        Poisson's ratio (:math:`\nu_{xy}`).
    density : :any:`float`, default=0.0
        Mass density (:math:`\rho`), used for the mass matrix.
    damping : :any:`float`, default=0.0
        Viscous damping coefficient (:math:`\mu`), used for the damping
        matrix.
    young_mod_y, young_mod_z : :any:`float`, optional
        Young's moduli in the local y and z directions. Default to
        :py:attr:`young_mod`, which makes the material isotropic.

    Raises
    ------
    ValueError
        :py:attr:`young_mod`, :py:attr:`young_mod_y` and
        :py:attr:`young_mod_z` have to be greater than zero.
    ValueError
        :py:attr:`poisson` has to be greater than -1 and less than 0.5.
    ValueError
        :py:attr:`density` and :py:attr:`damping` must not be negative.
    """

    young_mod: float
    poisson: float
    density: float = 0.0
    damping: float = 0.0
    young_mod_y: float | None = None
    young_mod_z: float | None = None

    def __post_init__(self):
        if self.young_mod_y is None:
            self.young_mod_y = self.young_mod
        if self.young_mod_z is None:
            self.young_mod_z = self.young_mod
        for name in ('young_mod', 'young_mod_y', 'young_mod_z'):
            if getattr(self, name) <= 0:
                raise ValueError(f'{name} has to be greater than zero.')
        if not -1 < self.poisson < 0.5:
            raise ValueError(
                'poisson has to be greater than -1 and less than 0.5.'
            )
        if self.density < 0:
            raise ValueError('density must not be negative.')
        if self.damping < 0:
            raise ValueError('damping must not be negative.')

    @property
    def is_isotropic(self):
        """:python:`True` if the Young's moduli of all three directions are
        equal."""
        return bool(np.isclose(self.young_mod, self.young_mod_y) and
                    np.isclose(self.young_mod, self.young_mod_z))

    @property
    def shear_mod(self):
        r"""Shear modulus of an isotropic material,
        :math:`G = \frac{E}{2 (1 + \nu)}`."""
        return self.young_mod / (2 * (1 + self.poisson))

    def properties(self, xi: float):
        """Material properties at the isoparametric coordinate ``xi``. A
        uniform material returns itself."""
        return self
