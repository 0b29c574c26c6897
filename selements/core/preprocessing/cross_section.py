from dataclasses import dataclass


@dataclass(eq=False)
class CrossSection:
    """Create a constant cross-section of a bar.

    Parameters
    ----------
    area : :any:`float`
        Cross-sectional area :math:`A`.
    iy : :any:`float`
        Second moment of area about the local y-axis :math:`I_y`.
    iz : :any:`float`
        Second moment of area about the local z-axis :math:`I_z`.
    j : :any:`float`
        Torsion constant :math:`J`.

    Raises
    ------
    ValueError
        :py:attr:`area`, :py:attr:`iy`, :py:attr:`iz` and :py:attr:`j` have
        to be greater than zero.
    """

    area: float
    iy: float
    iz: float
    j: float

    def __post_init__(self):
        if self.area <= 0:
            raise ValueError('area has to be greater than zero.')
        if self.iy <= 0:
            raise ValueError('iy has to be greater than zero.')
        if self.iz <= 0:
            raise ValueError('iz has to be greater than zero.')
        if self.j <= 0:
            raise ValueError('j has to be greater than zero.')

    def properties(self, xi: float):
        """Cross-section properties at the isoparametric coordinate ``xi``.
        A constant cross-section returns itself."""
        return self


@dataclass(eq=False)
class TaperedCrossSection:
    r"""Cross-section varying linearly between the bar ends.

    Parameters
    ----------
    start : :py:class:`CrossSection`
        Properties at the start of the bar (:math:`\xi = -1`).
    end : :py:class:`CrossSection`
        Properties at the end of the bar (:math:`\xi = 1`).

    Notes
    -----
    Every property is interpolated on its own, so the second moments of
    area are linear in :math:`\xi` as well. Element matrices of a tapered
    bar therefore have integrands of a higher polynomial degree than the
    helpers declare.
    """

    start: CrossSection
    end: CrossSection

    def properties(self, xi: float):
        """Interpolated :py:class:`CrossSection` at ``xi``.

        Examples
        --------
        >>> from selements.core.preprocessing.cross_section import (
        >>>     CrossSection, TaperedCrossSection)
        >>> s = TaperedCrossSection(CrossSection(1, 1, 1, 1),
        >>>                         CrossSection(3, 3, 3, 3))
        >>> s.properties(0).area
        2.0
        """
        t = (xi + 1) / 2
        return CrossSection(
            area=(1 - t) * self.start.area + t * self.end.area,
            iy=(1 - t) * self.start.iy + t * self.end.iy,
            iz=(1 - t) * self.start.iz + t * self.end.iz,
            j=(1 - t) * self.start.j + t * self.end.j,
        )
