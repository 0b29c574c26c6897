from dataclasses import dataclass
from itertools import product
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from selements.core.element_helpers import (
    BeamAxis, EulerBernoulliBeamHelper, ShaftHelper
)
from selements.core.exceptions import (
    OutOfRangeError, TypeMismatchError, UnimplementedError, UnsupportedError
)
from selements.core.integration import engine
from selements.core.integration.gauss import (
    integrate, points_and_weights, points_for_degree
)
from selements.core.preprocessing.cross_section import (
    CrossSection, TaperedCrossSection
)
from selements.core.preprocessing.dof import (
    Displacement, DoF, ElementLocalDof, Force, gather, global_dof_indices
)
from selements.core.preprocessing.element import BarElement
from selements.core.preprocessing.loads import (
    Load, PartialTrapezoidalLoad, UniformLoad
)
from selements.core.preprocessing.material import Material
from selements.core.preprocessing.node import Node
from selements.core.preprocessing.release import (
    Constraint, ReleaseCondition
)


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-7)


ISO_POINTS = (-1.0, -0.5, 0.0, 0.5, 1.0)


def bar(length=4.0, **kwargs):
    kwargs.setdefault('cross_section', CrossSection(2, 3, 5, 7))
    kwargs.setdefault(
        'material', Material(10, 0.25, density=0.5, damping=0.1)
    )
    return BarElement(Node(0), Node(length), **kwargs)


@dataclass(eq=False)
class ConcentratedLoad(Load):

    position: float = 0.0

    @property
    def iso_range(self):
        return self.position, self.position

    @property
    def degree(self):
        return 0

    def magnitude_at(self, xi):
        return 1.0


class TestGauss(TestCase):

    def test_points_for_degree(self):
        self.assertEqual(
            [points_for_degree(d) for d in range(8)],
            [1, 1, 2, 2, 3, 3, 4, 4]
        )
        with self.assertRaises(OutOfRangeError):
            points_for_degree(-1)

    def test_exactness(self):
        for n in range(1, 11):
            degree = 2 * n - 1
            assert_allclose(
                integrate(lambda x: x ** degree + x ** (degree - 1), -1, 1, n),
                2 / degree,
                err_msg=f'A {n}-point rule must integrate polynomials of '
                        f'degree {degree} exactly.'
            )
            assert_allclose(
                integrate(lambda x: 3 * x ** 2, 0, 2, max(n, 2)), 8.0
            )

    def test_point_count_invariance(self):
        f = (lambda x: np.array([[x ** 3 - 2 * x, 1.0], [x ** 2, 5 * x]]))
        expected = integrate(f, 0.5, 3.0, 2)
        for n in range(3, 11):
            assert_allclose(
                integrate(f, 0.5, 3.0, n), expected,
                err_msg='More points than needed must not change the result.'
            )

    def test_points_and_weights(self):
        x, w = points_and_weights(1)
        assert_allclose(x, [0.0])
        assert_allclose(w, [2.0])
        x, w = points_and_weights(2, 0, 4)
        assert_allclose(x, [2 - 2 / np.sqrt(3), 2 + 2 / np.sqrt(3)])
        assert_allclose(w, [2.0, 2.0])
        for n in (0, 11):
            with self.assertRaises(OutOfRangeError):
                points_and_weights(n)


class TestDegreesOfFreedom(TestCase):

    def test_records(self):
        f = Force.from_dofs({DoF.DY: 2.0, DoF.RZ: -1.0})
        assert_allclose(f.vector, [0, 2, 0, 0, 0, -1])
        self.assertEqual(f[DoF.DY], 2.0)
        self.assertEqual(f.mz, -1.0)
        assert_allclose((f + f).vector, [0, 4, 0, 0, 0, -2])
        assert_allclose((-f).vector, [0, -2, 0, 0, 0, 1])
        assert_allclose(Displacement.zero().vector, np.zeros(6))
        d = Displacement.from_vector([1, 2, 3, 4, 5, 6])
        self.assertEqual((d.dx, d.ry, d.rz), (1, 5, 6))

    def test_global_dof_indices(self):
        order = EulerBernoulliBeamHelper('z').dof_order(bar())
        self.assertEqual(global_dof_indices(order, [2, 5]), [13, 17, 31, 35])
        order = ShaftHelper().dof_order(bar())
        self.assertEqual(global_dof_indices(order, [0, 1]), [3, 9])
        with self.assertRaises(ValueError):
            global_dof_indices(order, [0])
        with self.assertRaises(ValueError):
            global_dof_indices(order, [0, 1], dof_per_node=3)

    def test_gather(self):
        order = (ElementLocalDof(0, DoF.DZ), ElementLocalDof(1, DoF.RY))
        u = gather([Displacement(dz=1.5), Displacement(ry=-2.0)], order)
        assert_allclose(u, [[1.5], [-2.0]])


class TestReleaseCondition(TestCase):

    def test_constraints(self):
        release = ReleaseCondition()
        for dof in DoF:
            self.assertIs(release.constraint(dof), Constraint.FIXED)
        self.assertEqual(ReleaseCondition.fixed(), release)
        release = ReleaseCondition.hinged()
        self.assertEqual(
            [release.is_released(dof) for dof in DoF],
            [False, False, False, True, True, True]
        )
        release = ReleaseCondition(dy='released')
        self.assertTrue(release.is_released(DoF.DY))
        self.assertEqual(ReleaseCondition.released(DoF.DY), release)
        with self.assertRaises(ValueError):
            ReleaseCondition(rz='hinge')


class TestPreprocessing(TestCase):

    def test_node(self):
        with self.assertRaises(ValueError):
            Node(np.nan)
        self.assertTrue(Node(1, 2).same_location(Node(1, 2, 0)))

    def test_bar_element(self):
        b = BarElement(Node(1, 2, 2), Node(4, 6, 2), CrossSection(1, 1, 1, 1),
                       Material(1, 0.3))
        self.assertAlmostEqual(b.length, 5.0)
        assert_allclose(b.global_to_local([3, 4, 0]), [5, 0, 0])
        with self.assertRaises(ValueError):
            BarElement(Node(1), Node(1), CrossSection(1, 1, 1, 1),
                       Material(1, 0.3))

    def test_transformation_matrix(self):
        assert_allclose(bar().transformation_matrix, np.eye(3))
        for start, end, rotation in product(
                ((0, 0, 0), (1, -2, 3)), ((0, 0, 5), (3, 1, -1)),
                (0.0, 0.7)
        ):
            b = BarElement(Node(*start), Node(*end), CrossSection(1, 1, 1, 1),
                           Material(1, 0.3), web_rotation=rotation)
            t = b.transformation_matrix
            assert_allclose(
                t @ t.T, np.eye(3),
                err_msg='The transformation matrix must be orthonormal.'
            )
            assert_allclose(np.linalg.det(t), 1.0)
            assert_allclose(t[0] * np.linalg.norm(np.subtract(end, start)),
                            np.subtract(end, start))
            v = np.array([0.3, -1.2, 2.0])
            assert_allclose(b.local_to_global(b.global_to_local(v)), v)

    def test_cross_section(self):
        with self.assertRaises(ValueError):
            CrossSection(0, 1, 1, 1)
        with self.assertRaises(ValueError):
            CrossSection(1, 1, -1, 1)
        s = TaperedCrossSection(CrossSection(1, 2, 3, 4),
                                CrossSection(3, 4, 5, 6))
        p = s.properties(0.0)
        assert_allclose([p.area, p.iy, p.iz, p.j], [2, 3, 4, 5])

    def test_material(self):
        with self.assertRaises(ValueError):
            Material(0, 0.3)
        with self.assertRaises(ValueError):
            Material(1, 0.5)
        with self.assertRaises(ValueError):
            Material(1, 0.3, density=-1)
        self.assertTrue(Material(1, 0.3).is_isotropic)
        self.assertFalse(Material(1, 0.3, young_mod_y=2).is_isotropic)
        self.assertAlmostEqual(Material(13, 0.3).shear_mod, 5.0)

    def test_loads(self):
        with self.assertRaises(ValueError):
            UniformLoad([0, 0, 0], magnitude=1)
        with self.assertRaises(ValueError):
            UniformLoad([0, 1], magnitude=1)
        with self.assertRaises(ValueError):
            UniformLoad([0, 1, 0], coord='global')
        with self.assertRaises(ValueError):
            PartialTrapezoidalLoad([0, 1, 0], start_iso=0.5, end_iso=0.5)
        with self.assertRaises(ValueError):
            PartialTrapezoidalLoad([0, 1, 0], start_iso=-1.5)
        load = PartialTrapezoidalLoad([0, 1, 0], start_iso=-0.5, end_iso=0.5,
                                      start_magnitude=1, end_magnitude=3)
        self.assertEqual(load.magnitude_at(0.0), 2.0)
        self.assertEqual(load.magnitude_at(-0.75), 0.0)
        self.assertEqual(load.magnitude_at(0.75), 0.0)


class TestEulerBernoulliBeamHelper(TestCase):

    def setUp(self):
        self.bar = bar()
        self.z = EulerBernoulliBeamHelper(BeamAxis.Z)
        self.y = EulerBernoulliBeamHelper('y')

    def test_axis(self):
        self.assertIs(EulerBernoulliBeamHelper().axis, BeamAxis.Z)
        with self.assertRaises(ValueError):
            EulerBernoulliBeamHelper('x')

    def test_dof_order(self):
        self.assertEqual(
            self.z.dof_order(self.bar),
            ((0, DoF.DY), (0, DoF.RZ), (1, DoF.DY), (1, DoF.RZ))
        )
        self.assertEqual(
            self.y.dof_order(self.bar),
            ((0, DoF.DZ), (0, DoF.RY), (1, DoF.DZ), (1, DoF.RY))
        )

    def test_polynomial_degree(self):
        degree = self.z.polynomial_degree(self.bar)
        self.assertEqual(
            (degree.shape, degree.strain, degree.jacobian), (3, 1, 0)
        )
        self.assertEqual(self.z.n_max_order(self.bar), 3)
        self.assertEqual(self.z.b_max_order(self.bar), 1)
        self.assertEqual(self.z.det_j_order(self.bar), 0)

    def test_n_matrix(self):
        assert_allclose(self.z.n_matrix(self.bar, -1), [[1, 0, 0, 0]])
        assert_allclose(self.z.n_matrix(self.bar, 1), [[0, 0, 1, 0]])
        for xi in ISO_POINTS:
            n = self.z.n_matrix(self.bar, xi)
            self.assertEqual(n.shape, (1, 4))
            self.assertAlmostEqual(
                n[0, 0] + n[0, 2], 1.0,
                msg='The translational shape functions must sum to one.'
            )
            assert_allclose(
                self.y.n_matrix(self.bar, xi), n * [[1, -1, 1, -1]],
                err_msg='Bending about y negates the rotational terms.'
            )

    def test_shape_function_derivatives(self):
        # slope at the ends follows the nodal rotation, dN/dx = 2/L dN/dxi
        for xi, column in ((-1, 1), (1, 3)):
            table = self.z.shape_function_table(self.bar, xi)
            slopes = table[1] * 2 / self.bar.length
            assert_allclose(slopes, np.eye(4)[column])

    def test_closed_form_k_matrix(self):
        length, ei = self.bar.length, 10 * 5
        expected = ei / length ** 3 * np.array([
            [12, 6 * length, -12, 6 * length],
            [6 * length, 4 * length ** 2, -6 * length, 2 * length ** 2],
            [-12, -6 * length, 12, -6 * length],
            [6 * length, 2 * length ** 2, -6 * length, 4 * length ** 2],
        ])
        assert_allclose(self.z.calc_local_k_matrix(self.bar), expected)

        ei = 10 * 3
        sign = np.array([1, -1, 1, -1])
        assert_allclose(
            self.y.calc_local_k_matrix(self.bar),
            expected / 50 * ei * np.outer(sign, sign)
        )

    def test_symmetry(self):
        for helper in (self.z, self.y, ShaftHelper()):
            for matrix in (helper.calc_local_k_matrix(self.bar),
                           helper.calc_local_m_matrix(self.bar),
                           helper.calc_local_c_matrix(self.bar)):
                assert_allclose(matrix, matrix.T)

    def test_rigid_body_modes(self):
        length = self.bar.length
        for helper, rotation in ((self.z, [0, 1, length, 1]),
                                 (self.y, [0, 1, -length, 1])):
            k = helper.calc_local_k_matrix(self.bar)
            assert_allclose(k @ np.array([1, 0, 1, 0]), np.zeros(4))
            assert_allclose(k @ np.array(rotation), np.zeros(4))

    def test_consistent_mass_matrix(self):
        length = self.bar.length
        expected = 2 * 0.5 * length / 420 * np.array([
            [156, 22 * length, 54, -13 * length],
            [22 * length, 4 * length ** 2, 13 * length, -3 * length ** 2],
            [54, 13 * length, 156, -22 * length],
            [-13 * length, -3 * length ** 2, -22 * length, 4 * length ** 2],
        ])
        assert_allclose(self.z.calc_local_m_matrix(self.bar), expected)
        sign = np.array([1, -1, 1, -1])
        assert_allclose(self.y.calc_local_m_matrix(self.bar),
                        expected * np.outer(sign, sign))
        assert_allclose(self.z.calc_local_c_matrix(self.bar),
                        expected / 0.5 * 0.1)

    def test_gauss_point_invariance(self):
        def k_integrand(xi):
            b = self.z.b_matrix(self.bar, xi)
            return b.T @ self.z.d_matrix(self.bar, xi) @ b * (
                self.bar.length / 2)

        def m_integrand(xi):
            n = self.z.n_matrix(self.bar, xi)
            return n.T @ self.z.rho_matrix(self.bar, xi) @ n * (
                self.bar.length / 2)

        for n_points in range(5, 11):
            assert_allclose(integrate(k_integrand, -1, 1, n_points),
                            self.z.calc_local_k_matrix(self.bar))
            assert_allclose(integrate(m_integrand, -1, 1, n_points),
                            self.z.calc_local_m_matrix(self.bar))

    def test_d_matrix(self):
        assert_allclose(self.z.d_matrix(self.bar, 0), [[50]])
        assert_allclose(self.y.d_matrix(self.bar, 0), [[30]])
        assert_allclose(self.z.d_matrix(self.bar, 0, axis='y'), [[30]])
        assert_allclose(self.z.rho_matrix(self.bar, 0), [[1.0]])
        assert_allclose(self.z.mu_matrix(self.bar, 0), [[0.2]])
        tapered = bar(cross_section=TaperedCrossSection(
            CrossSection(2, 3, 5, 7), CrossSection(4, 5, 7, 9)))
        assert_allclose(self.z.d_matrix(tapered, -1), [[50]])
        assert_allclose(self.z.d_matrix(tapered, 0), [[60]])

    def test_releases(self):
        released = bar(release_i=ReleaseCondition.released(DoF.RZ),
                       release_j=ReleaseCondition.released(DoF.DZ))
        for xi in ISO_POINTS:
            for matrix in (self.z.n_matrix(released, xi),
                           self.z.b_matrix(released, xi)):
                assert_allclose(matrix[:, 1], 0.0)
            for matrix in (self.y.n_matrix(released, xi),
                           self.y.b_matrix(released, xi)):
                assert_allclose(matrix[:, 2], 0.0)
        k = self.z.calc_local_k_matrix(released)
        assert_allclose(k[1], 0.0)
        assert_allclose(k[:, 1], 0.0)

    def test_b_i_matrix(self):
        for xi in ISO_POINTS:
            assert_allclose(self.z.b_i_matrix(self.bar, 0, xi),
                            self.z.b_matrix(self.bar, xi))
        with self.assertRaises(OutOfRangeError):
            self.z.b_i_matrix(self.bar, 1, 0.0)
        with self.assertRaises(OutOfRangeError):
            self.z.b_i_matrix(self.bar, -1, 0.0)

    def test_iso_coordinates(self):
        self.assertAlmostEqual(self.z.iso_to_local(self.bar, -1), 0.0)
        self.assertAlmostEqual(self.z.iso_to_local(self.bar, 0.5), 3.0)
        for length in (0.1, 4.0, 1e3):
            b = bar(length)
            for xi in ISO_POINTS:
                assert_allclose(
                    self.z.local_to_iso(b, self.z.iso_to_local(b, xi)), xi,
                    err_msg=f'Mapping xi={xi} to x and back must be exact '
                            f'for L={length}.'
                )
            for x in np.linspace(0.0, length, 7):
                assert_allclose(
                    self.z.iso_to_local(b, self.z.local_to_iso(b, x)), x,
                    err_msg=f'Mapping x={x} to xi and back must be exact '
                            f'for L={length}.'
                )
        assert_allclose(self.z.j_matrix(self.bar, 0.3), [[2.0]])

    def test_invalid_arguments(self):
        for xi in (-1.001, 1.5):
            with self.assertRaises(OutOfRangeError):
                self.z.n_matrix(self.bar, xi)
        self.z.n_matrix(self.bar, 1 + 1e-14)
        with self.assertRaises(TypeMismatchError):
            self.z.calc_local_k_matrix(Node(0))
        with self.assertRaises(TypeMismatchError):
            self.z.dof_order('bar')
        with self.assertRaises(UnsupportedError):
            self.z.local_equivalent_nodal_loads(
                self.bar, ConcentratedLoad([0, 1, 0]))

    def test_uniform_load(self):
        q, length = 3.0, self.bar.length
        f = self.z.local_equivalent_nodal_loads(
            self.bar, UniformLoad([0, 1, 0], magnitude=q))
        assert_allclose([f[0].fy, f[0].mz, f[1].fy, f[1].mz],
                        [q * length / 2, q * length ** 2 / 12,
                         q * length / 2, -q * length ** 2 / 12])
        assert_allclose([f[0].fz, f[0].my, f[1].fx], 0.0)

        f = self.y.local_equivalent_nodal_loads(
            self.bar, UniformLoad([0, 0, 1], magnitude=q))
        assert_allclose([f[0].fz, f[0].my, f[1].fz, f[1].my],
                        [q * length / 2, -q * length ** 2 / 12,
                         q * length / 2, q * length ** 2 / 12])

        f = self.z.local_equivalent_nodal_loads(
            self.bar, UniformLoad([0, 0, 1], magnitude=q))
        assert_allclose([f[0].vector, f[1].vector], 0.0,
                        err_msg='A load perpendicular to the bending plane '
                                'has no equivalent nodal loads.')

    def test_trapezoidal_load(self):
        load = PartialTrapezoidalLoad([0, 2, 0], start_iso=-0.5, end_iso=0.5,
                                      start_magnitude=1, end_magnitude=3)
        f = self.z.local_equivalent_nodal_loads(self.bar, load)
        # q(x) = x on 1 <= x <= 3
        self.assertAlmostEqual(f[0].fy + f[1].fy, 4.0)
        self.assertAlmostEqual(
            f[1].fy * self.bar.length + f[0].mz + f[1].mz, 26 / 3,
            msg='The nodal loads must have the moment of the load about the '
                'start of the bar.'
        )

    def test_system_load(self):
        vertical = BarElement(Node(0, 0, 0), Node(0, 4, 0),
                              CrossSection(2, 3, 5, 7), Material(10, 0.25))
        assert_allclose(
            engine.local_load_direction(
                vertical, UniformLoad([-2, 0, 0], 'system')), [0, 1, 0]
        )
        f = self.z.local_equivalent_nodal_loads(
            vertical, UniformLoad([-1, 0, 0], 'system', magnitude=3))
        assert_allclose([f[0].fy, f[1].fy], [6, 6])

    def test_local_displacement(self):
        length, theta = self.bar.length, 0.01
        u = [Displacement(rz=theta), Displacement(dy=theta * length, rz=theta)]
        for xi in ISO_POINTS:
            d = self.z.local_displacement_at(self.bar, u, xi)
            assert_allclose(
                [d.dy, d.rz, d.dz],
                [theta * self.z.iso_to_local(self.bar, xi), theta, 0.0]
            )
            assert_allclose(
                [v for _, v in self.z.local_internal_force_at(self.bar, u, xi)],
                [0.0, 0.0], err_msg='Rigid body motion has no internal forces.'
            )
        u = [Displacement(ry=theta),
             Displacement(dz=-theta * length, ry=theta)]
        d = self.y.local_displacement_at(self.bar, u, 0.0)
        assert_allclose([d.dz, d.ry], [-theta * length / 2, theta])
        with self.assertRaises(ValueError):
            self.z.local_displacement_at(self.bar, u[:1], 0.0)

    def test_local_internal_force(self):
        phi = 0.02
        u = [Displacement(rz=-phi), Displacement(rz=phi)]
        for xi in ISO_POINTS:
            (dof_m, m), (dof_v, v) = self.z.local_internal_force_at(
                self.bar, u, xi)
            self.assertEqual((dof_m, dof_v), (DoF.RZ, DoF.DY))
            assert_allclose([m, v], [2 * 50 * phi / 4, 0.0])
        u = [Displacement(ry=-phi), Displacement(ry=phi)]
        (dof_m, m), (dof_v, v) = self.y.local_internal_force_at(
            self.bar, u, 0.3)
        self.assertEqual((dof_m, dof_v), (DoF.RY, DoF.DZ))
        assert_allclose([m, v], [2 * 30 * phi / 4, 0.0])

        # v = x ** 3
        u = [Displacement(), Displacement(dy=64, rz=48)]
        assert_allclose(
            [v for _, v in self.z.local_internal_force_at(self.bar, u, 0)],
            [600, -300]
        )
        u = [Displacement(), Displacement(dz=64, ry=-48)]
        assert_allclose(
            [v for _, v in self.y.local_internal_force_at(self.bar, u, 0)],
            [-360, -180]
        )

    def test_load_internal_force(self):
        load = UniformLoad([0, 1, 0], magnitude=3)
        expected = {-1: (4, 6), 0: (-2, 0), 1: (4, -6)}
        for xi, values in expected.items():
            result = self.z.load_internal_force_at(self.bar, load, xi)
            self.assertEqual([dof for dof, _ in result], [DoF.RZ, DoF.DY])
            assert_allclose([v for _, v in result], values)

        load = UniformLoad([0, 0, 1], magnitude=3)
        expected = {-1: (-4, 6), 0: (2, 0), 1: (-4, -6)}
        for xi, values in expected.items():
            result = self.y.load_internal_force_at(self.bar, load, xi)
            self.assertEqual([dof for dof, _ in result], [DoF.RY, DoF.DZ])
            assert_allclose([v for _, v in result], values)

    def test_partial_load_internal_force(self):
        for helper, direction in ((self.z, [0, 1, 0]), (self.y, [0, 0, 1])):
            load = PartialTrapezoidalLoad(direction, start_iso=0.0,
                                          start_magnitude=2, end_magnitude=5)
            f0, f1 = helper.local_equivalent_nodal_loads(self.bar, load)
            translation, rotation = (
                local.dof for local in helper.dof_order(self.bar)[:2])
            _, (_, v) = helper.load_internal_force_at(self.bar, load, -0.5)
            assert_allclose(v, f0[translation],
                            err_msg='The shear is constant in front of the '
                                    'load.')
            (_, m), (_, v) = helper.load_internal_force_at(
                self.bar, load, 1.0)
            assert_allclose(
                [m, v], [-f1[rotation], -f1[translation]],
                err_msg='The internal forces at the end must balance the '
                        'end node forces.'
            )

    def test_load_displacement(self):
        q, length = 3.0, self.bar.length
        for helper, direction, ei in ((self.z, [0, 1, 0], 50),
                                      (self.y, [0, 0, 1], 30)):
            load = UniformLoad(direction, magnitude=q)
            d = helper.load_displacement_at(self.bar, load, 0.0)
            assert_allclose(d.vector[direction.index(1)],
                            q * length ** 4 / (384 * ei))
            assert_allclose([d.ry, d.rz], 0.0)
            d = helper.load_displacement_at(self.bar, load, -0.5)
            assert_allclose(d.vector[direction.index(1)],
                            q * 9 / (24 * ei))
            d = helper.load_displacement_at(self.bar, load, 1.0)
            assert_allclose(d.vector, 0.0)

        load = PartialTrapezoidalLoad([0, 1, 0], start_iso=-0.3, end_iso=0.6,
                                      start_magnitude=4, end_magnitude=1)
        assert_allclose(
            self.z.load_displacement_at(self.bar, load, 1.0).vector, 0.0,
            err_msg='A clamped bar does not move at its ends.'
        )

        hinged = bar(release_j=ReleaseCondition.hinged())
        with self.assertRaises(UnimplementedError):
            self.z.load_displacement_at(
                hinged, UniformLoad([0, 1, 0], magnitude=q), 0.0)

    def test_debug_log(self):
        with self.assertLogs(self.z.logger, level='DEBUG') as logs:
            self.z.calc_local_k_matrix(self.bar)
        self.assertTrue(any('0:RZ' in line for line in logs.output))


class TestShaftHelper(TestCase):

    def setUp(self):
        self.bar = bar()
        self.shaft = ShaftHelper()

    def test_matrices(self):
        # G = 10 / 2.5 = 4, GJ / L = 7
        assert_allclose(self.shaft.calc_local_k_matrix(self.bar),
                        7 * np.array([[1, -1], [-1, 1]]))
        assert_allclose(self.shaft.calc_local_m_matrix(self.bar),
                        7 / 3 * np.array([[2, 1], [1, 2]]))
        assert_allclose(self.shaft.calc_local_c_matrix(self.bar),
                        7 * 0.1 * 4 / 6 * np.array([[2, 1], [1, 2]]))
        assert_allclose(self.shaft.n_matrix(self.bar, 0.5), [[0.25, 0.75]])
        self.assertEqual(
            self.shaft.dof_order(self.bar), ((0, DoF.RX), (1, DoF.RX))
        )

    def test_releases(self):
        released = bar(release_j=ReleaseCondition.released(DoF.RX))
        for xi in ISO_POINTS:
            assert_allclose(self.shaft.n_matrix(released, xi)[:, 1], 0.0)
            assert_allclose(self.shaft.b_matrix(released, xi)[:, 1], 0.0)

    def test_anisotropic_material(self):
        anisotropic = bar(material=Material(10, 0.25, young_mod_z=20))
        with self.assertRaises(UnsupportedError):
            self.shaft.d_matrix(anisotropic, 0.0)
        with self.assertRaises(UnsupportedError):
            self.shaft.calc_local_k_matrix(anisotropic)

    def test_recovery(self):
        u = [Displacement(), Displacement(rx=0.4)]
        self.assertEqual(
            self.shaft.local_internal_force_at(self.bar, u, 0.3)[0][0], DoF.RX
        )
        assert_allclose(
            self.shaft.local_internal_force_at(self.bar, u, 0.3)[0][1], 2.8
        )
        d = self.shaft.local_displacement_at(self.bar, u, 0.0)
        assert_allclose(d.vector, [0, 0, 0, 0.2, 0, 0])
        for records in (u[:1], u + [Displacement(rx=9.0)]):
            with self.assertRaises(ValueError):
                self.shaft.local_displacement_at(self.bar, records, 0.0)
            with self.assertRaises(ValueError):
                self.shaft.local_internal_force_at(self.bar, records, 0.0)

    def test_loads(self):
        load = UniformLoad([1, 0, 0], magnitude=5)
        f = self.shaft.local_equivalent_nodal_loads(self.bar, load)
        assert_allclose([f[0].vector, f[1].vector], 0.0)
        with self.assertRaises(UnsupportedError):
            self.shaft.local_equivalent_nodal_loads(
                self.bar, ConcentratedLoad([1, 0, 0]))
        with self.assertRaises(UnimplementedError):
            self.shaft.load_internal_force_at(self.bar, load, 0.0)
        with self.assertRaises(UnimplementedError):
            self.shaft.load_displacement_at(self.bar, load, 0.0)
        for method in (self.shaft.load_internal_force_at,
                       self.shaft.load_displacement_at):
            with self.assertRaises(TypeMismatchError):
                method(Node(0), load, 0.0)
            with self.assertRaises(OutOfRangeError):
                method(self.bar, load, 1.5)

    def test_stiffness_override(self):
        class OverridingShaftHelper(ShaftHelper):

            def does_override_k_matrix_calculation(
                    self, element, transform_matrix=None
            ):
                return True

        self.assertFalse(self.shaft.does_override_k_matrix_calculation(
            self.bar))
        with self.assertRaises(UnimplementedError):
            OverridingShaftHelper().calc_local_k_matrix(self.bar)

    def test_shared_logger(self):
        self.assertIs(ShaftHelper().logger, self.shaft.logger)
        self.assertIsNot(EulerBernoulliBeamHelper().logger, self.shaft.logger)
