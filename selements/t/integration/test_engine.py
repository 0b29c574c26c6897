from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from selements.core.element_helpers import EulerBernoulliBeamHelper, ShaftHelper
from selements.core.integration import engine
from selements.core.preprocessing import (
    BarElement, CrossSection, Material, Node, PartialTrapezoidalLoad,
    TaperedCrossSection, UniformLoad
)


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-7)


class TestEngine(TestCase):

    def setUp(self):
        self.bar = BarElement(Node(0), Node(4), CrossSection(2, 3, 5, 7),
                              Material(10, 0.25, density=0.5))

    def test_tapered_shaft(self):
        tapered = BarElement(
            Node(0), Node(4), TaperedCrossSection(CrossSection(2, 3, 5, 4),
                                                  CrossSection(2, 3, 5, 10)),
            Material(10, 0.25)
        )
        # GJ is linear, the midpoint rule integrates it exactly
        assert_allclose(
            engine.calc_local_k_matrix(ShaftHelper(), tapered),
            4 * 7 / 4 * np.array([[1, -1], [-1, 1]])
        )

    def test_linear_shape_functions(self):
        shaft = ShaftHelper()
        f = engine.equivalent_nodal_loads(
            shaft, self.bar, UniformLoad([1, 0, 0], magnitude=3), 0)
        assert_allclose([f[0].mx, f[1].mx], [6, 6])
        load = PartialTrapezoidalLoad([1, 0, 0], start_iso=0.0,
                                      start_magnitude=0, end_magnitude=6)
        f = engine.equivalent_nodal_loads(shaft, self.bar, load, 0)
        assert_allclose([f[0].mx, f[1].mx], [1, 5])

    def test_helper_matches_engine(self):
        helper = EulerBernoulliBeamHelper('y')
        assert_allclose(helper.calc_local_k_matrix(self.bar),
                        engine.calc_local_k_matrix(helper, self.bar))
        assert_allclose(helper.calc_local_m_matrix(self.bar),
                        engine.calc_local_m_matrix(helper, self.bar))

    def test_local_load_direction(self):
        inclined = BarElement(Node(0, 0, 0), Node(3, 4, 0),
                              CrossSection(1, 1, 1, 1), Material(1, 0.3))
        direction = engine.local_load_direction(
            inclined, UniformLoad([0, -2, 0], 'system'))
        assert_allclose(direction, [-0.8, -0.6, 0])
        assert_allclose(
            engine.local_load_direction(
                inclined, UniformLoad([0, 0, 5], 'bar')), [0, 0, 1]
        )
        f = engine.equivalent_nodal_loads(
            EulerBernoulliBeamHelper('z'), inclined,
            UniformLoad([0, -1, 0], 'system', magnitude=2), 1)
        self.assertAlmostEqual(f[0].fy + f[1].fy, -0.6 * 2 * 5)
