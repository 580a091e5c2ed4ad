from unittest import TestCase

import numpy as np

from orbrot import rotations as rot
from orbrot.particles import Particle, Simulation


class TestRotation(TestCase):

    def check_rotation(self, rotation, quaternion, mupdate):

        np.testing.assert_array_almost_equal(quaternion, rotation.quaternion)
        np.testing.assert_array_almost_equal(quaternion[:3], rotation.q_vector)
        self.assertAlmostEqual(quaternion[-1], rotation.q_scalar)
        self.assertIs(rotation._mupdate, mupdate)

    def test_init(self):

        rotation = rot.Rotation()

        self.check_rotation(rotation, [0, 0, 0, 1], True)

        rotation = rot.Rotation([0, 0, 0, 1])

        self.check_rotation(rotation, [0, 0, 0, 1], True)

        rotation = rot.Rotation(data=[np.sqrt(2) / 2, 0, 0, -np.sqrt(2) / 2])

        # the scalar sign is kept as given
        self.check_rotation(rotation, [np.sqrt(2) / 2, 0, 0, -np.sqrt(2) / 2], True)

        # no normalization is performed
        rotation = rot.Rotation([1, 2, 3, 4])

        np.testing.assert_array_equal(rotation.quaternion, [1, 2, 3, 4])

        rotation2 = rot.Rotation(rotation)

        self.assertIsNot(rotation2, rotation)
        self.assertIsNot(rotation2.quaternion, rotation.quaternion)
        self.assertEqual(rotation2, rotation)

        with self.assertRaises(ValueError):
            rot.Rotation([1, 2])

        with self.assertRaises(ValueError):
            rot.Rotation(np.eye(4))

        with self.assertRaises(ValueError):
            rot.Rotation(object())

        with self.assertRaises(ValueError):
            rot.Rotation({'r': 1})

    def test_init_breaks_mutability(self):

        data = np.array([0., 0, 0, 1])

        rotation = rot.Rotation(data)

        data[0] = 5

        np.testing.assert_array_equal(rotation.quaternion, [0, 0, 0, 1])

    def test_components(self):

        rotation = rot.Rotation([1, 2, 3, 4])

        self.assertEqual(rotation.ix, 1)
        self.assertEqual(rotation.iy, 2)
        self.assertEqual(rotation.iz, 3)
        self.assertEqual(rotation.r, 4)

        np.testing.assert_array_equal(rotation.imag(), [1, 2, 3])
        self.assertEqual(rotation.length_squared(), 30)

    def test_quaternion_setter(self):

        rotation = rot.Rotation()

        rotation._mupdate = False

        rotation.quaternion = [np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2]

        self.check_rotation(rotation, [np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2], True)

        rotation2 = rot.Rotation([0, 1, 0, 0])
        rotation.quaternion = rotation2

        self.check_rotation(rotation, [0, 1, 0, 0], True)
        self.assertIsNot(rotation.quaternion, rotation2.quaternion)

        with self.assertRaises(ValueError):
            rotation.quaternion = np.eye(4)

    def test_matrix(self):

        rotation = rot.Rotation([np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2])

        np.testing.assert_array_almost_equal([[1, 0, 0], [0, 0, -1], [0, 1, 0]], rotation.matrix)

        np.testing.assert_array_almost_equal([[1, 0, 0], [0, 0, -1], [0, 1, 0]], rotation._matrix)
        self.assertFalse(rotation._mupdate)

        # this is bad and you should never do this but it checks that the caching is working
        rotation._matrix = np.eye(3)

        np.testing.assert_array_equal(rotation.matrix, np.eye(3))

        rotation.quaternion = [0, 0, 0, 1]

        self.assertTrue(rotation._mupdate)
        np.testing.assert_array_almost_equal(rotation.matrix, np.eye(3))

    def test_conjugate(self):

        rotation = rot.Rotation([1, 2, 3, 4])

        self.check_rotation(rotation.conjugate(), [-1, -2, -3, 4], True)
        self.check_rotation(rotation, [1, 2, 3, 4], True)

    def test_inverse(self):

        rotation = rot.Rotation([np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2])

        self.check_rotation(rotation.inverse(), [-np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2], True)
        self.check_rotation(rotation, [np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2], True)

        rotation = rot.Rotation([1, 2, 3, 4])

        self.check_rotation(rotation * rotation.inverse(), [0, 0, 0, 1], True)
        self.check_rotation(rotation.inverse() * rotation, [0, 0, 0, 1], True)

    def test_normalized(self):

        rotation = rot.Rotation([1, 2, 3, 4])

        self.check_rotation(rotation.normalized(), np.array([1, 2, 3, 4]) / np.sqrt(30), True)
        np.testing.assert_array_equal(rotation.quaternion, [1, 2, 3, 4])

    def test_eq(self):

        rotation = rot.Rotation()

        self.assertTrue(rotation == rot.Rotation())
        self.assertTrue(rotation == [0, 0, 0, 1])
        self.assertFalse(rotation == [0, 0, 0, -1])
        self.assertFalse(rotation == [1, 2])
        self.assertFalse(rotation == 'identity')
        self.assertFalse(rotation == None)
        self.assertFalse(rotation == object())
        self.assertFalse(rotation == {'r': 1})

    def test_mul(self):

        rotation = rot.Rotation.from_angle_axis(1.3, [1, 2, 3])

        self.check_rotation(rotation * rotation.inverse(), [0, 0, 0, 1], True)

        first = rot.Rotation.from_angle_axis(np.pi / 2, [0, 0, 1])
        second = rot.Rotation.from_angle_axis(np.pi / 2, [1, 0, 0])

        # first takes x to y, then second takes y to z
        np.testing.assert_array_almost_equal((second * first).rotate([1, 0, 0]), [0, 0, 1])
        np.testing.assert_array_almost_equal((first * second).rotate([1, 0, 0]), [0, 1, 0])

        with self.assertRaises(TypeError):
            _ = rotation * [0, 0, 0, 1]

        with self.assertRaises(TypeError):
            _ = [0, 0, 0, 1] * rotation

    def test_rotate(self):

        rotation = rot.Rotation.from_angle_axis(np.pi / 2, [0, 0, 1])

        vector = np.array([1., 0, 0])

        np.testing.assert_array_almost_equal(rotation.rotate(vector), [0, 1, 0])
        np.testing.assert_array_equal(vector, [1, 0, 0])

        rotation.irotate(vector)

        np.testing.assert_array_almost_equal(vector, [0, 1, 0])

    def test_copy(self):

        rotation = rot.Rotation([1, 0, 0, 0])

        rotation2 = rotation.copy()

        self.assertEqual(rotation, rotation2)
        self.assertIsNot(rotation.quaternion, rotation2.quaternion)

    def test_repr(self):

        self.assertEqual(repr(rot.Rotation()), 'Rotation(array([0., 0., 0., 1.]))')
        self.assertEqual(str(rot.Rotation()), '[0. 0. 0. 1.]')


class TestRotationConstructors(TestCase):

    def test_identity(self):

        self.assertEqual(rot.Rotation.identity(), rot.Rotation([0, 0, 0, 1]))

    def test_from_angle_axis(self):

        rotation = rot.Rotation.from_angle_axis(np.pi / 2, [0, 0, 1])

        np.testing.assert_array_almost_equal(rotation.rotate([1, 0, 0]), [0, 1, 0])
        self.assertAlmostEqual(rotation.length_squared(), 1)

    def test_from_to(self):

        rotation = rot.Rotation.from_to([1, 0, 0], [-1, 0, 0])

        self.assertEqual(rotation.r, 0)
        np.testing.assert_array_almost_equal(rotation.rotate([1, 0, 0]), [-1, 0, 0])

        rotation = rot.Rotation.from_to([0, 2, 0], [0, 3, 3])

        np.testing.assert_array_almost_equal(rotation.rotate([0, 1, 0]), [0, np.sqrt(2) / 2, np.sqrt(2) / 2])

    def test_to_new_axes(self):

        rotation = rot.Rotation.to_new_axes([0, 0, 1], [1, 0, 0])

        np.testing.assert_array_almost_equal(rotation.quaternion, [0, 0, 0, 1])

        rotation = rot.Rotation.to_new_axes([1, 0, 0], [0, 1, 0])

        np.testing.assert_array_almost_equal(rotation.rotate([1, 0, 0]), [0, 0, 1])
        np.testing.assert_array_almost_equal(rotation.rotate([0, 1, 0]), [1, 0, 0])
        np.testing.assert_array_almost_equal(rotation.rotate([0, 0, 1]), [0, 1, 0])

    def test_orbital(self):

        np.testing.assert_array_almost_equal(rot.Rotation.from_orbital(0, 0, 0).quaternion, [0, 0, 0, 1])

        rotation = rot.Rotation.from_orbital(1.2, 0.8, 4.1)

        np.testing.assert_array_almost_equal(rotation.matrix, rot.orbital_to_rotmat(1.2, 0.8, 4.1))
        np.testing.assert_array_almost_equal(rotation.to_orbital(), [1.2, 0.8, 4.1])

        with self.assertWarns(rot.DegenerateOrbitWarning):
            Omega, inc, omega = rotation.to_orbital(min_inclination=1)

        self.assertEqual(Omega, 0)


class TestRotationParticles(TestCase):

    def test_irotate_particle(self):

        particle = Particle(m=2.5, x=1, y=0, z=0, vx=0, vy=1, vz=0)

        rot.Rotation.from_angle_axis(np.pi / 2, [0, 0, 1]).irotate_particle(particle)

        np.testing.assert_array_almost_equal(particle.position, [0, 1, 0])
        np.testing.assert_array_almost_equal(particle.velocity, [-1, 0, 0])
        self.assertEqual(particle.m, 2.5)

    def test_irotate_simulation(self):

        sim = Simulation()
        sim.add(m=1)
        sim.add(m=1e-3, x=1, vy=1)
        sim.add(m=1e-6, x=0.5, y=0.5, z=0.1, vx=-0.3, vy=0.3, vz=0.05)

        rotation = rot.Rotation.from_orbital(0.3, 0.2, 1.5)

        expected = [(rotation.rotate(p.position), rotation.rotate(p.velocity)) for p in sim]

        rotation.irotate_simulation(sim)

        for particle, (position, velocity) in zip(sim, expected):
            np.testing.assert_array_almost_equal(particle.position, position)
            np.testing.assert_array_almost_equal(particle.velocity, velocity)
