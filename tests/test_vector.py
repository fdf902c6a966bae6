import dataclasses
import math
import unittest
import numpy as np

from kinemath import vector as vec
from kinemath.rng import RandomContext
from kinemath.vector import Vector2, Vector3


class TestVector3(unittest.TestCase):
    def setUp(self):
        self.rng = RandomContext(seed=1234)

    def test_constants(self):
        self.assertEqual(Vector3.ZERO, Vector3(0, 0, 0))
        self.assertEqual(Vector3.ONE, Vector3(1, 1, 1))
        self.assertEqual(Vector3.RIGHT, Vector3(1, 0, 0))
        self.assertEqual(Vector3.UP, Vector3(0, 1, 0))
        self.assertEqual(Vector3.FORWARD, Vector3(0, 0, 1))
        self.assertEqual(Vector3.LEFT, -Vector3.RIGHT)
        self.assertEqual(Vector3.DOWN, -Vector3.UP)
        self.assertEqual(Vector3.BACKWARD, -Vector3.FORWARD)

    def test_components_are_floats(self):
        v = Vector3(1, 2, 3)
        self.assertIsInstance(v.x, float)
        self.assertEqual(v.to_tuple(), (1.0, 2.0, 3.0))
        self.assertEqual(list(v), [1.0, 2.0, 3.0])

    def test_immutable(self):
        v = Vector3(1, 2, 3)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            v.x = 5.0

    def test_from_iterable(self):
        self.assertEqual(Vector3.from_iterable(np.array([1, 2, 3])), Vector3(1, 2, 3))
        with self.assertRaises(ValueError):
            Vector3.from_iterable([1, 2])

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, -5, 6)
        self.assertEqual(a + b, Vector3(5, -3, 9))
        self.assertEqual(a - b, Vector3(-3, 7, -3))
        self.assertEqual(a * b, Vector3(4, -10, 18))
        self.assertEqual(a * 2, Vector3(2, 4, 6))
        self.assertEqual(2 * a, Vector3(2, 4, 6))
        self.assertEqual(b / Vector3(2, 5, 3), Vector3(2, -1, 2))
        self.assertEqual(vec.add(a, b), a + b)
        self.assertEqual(vec.subtract(a, b), a - b)
        self.assertEqual(vec.multiply(a, b), a * b)
        self.assertEqual(vec.scale(a, 0.5), Vector3(0.5, 1, 1.5))

    def test_divide_by_zero_is_ieee(self):
        res = vec.divide(Vector3(1, -1, 0), Vector3(0, 0, 0))
        self.assertEqual(res.x, math.inf)
        self.assertEqual(res.y, -math.inf)
        self.assertTrue(math.isnan(res.z))
        self.assertEqual((Vector3(1, 1, 1) / 0.0).x, math.inf)

    def test_dot_and_cross(self):
        self.assertEqual(vec.dot(Vector3(1, 2, 3), Vector3(4, 5, 6)), 32.0)
        self.assertEqual(vec.cross(Vector3.UNIT_X, Vector3.UNIT_Y), Vector3.UNIT_Z)
        self.assertEqual(vec.cross(Vector3.UNIT_Y, Vector3.UNIT_Z), Vector3.UNIT_X)
        self.assertEqual(vec.cross(Vector3.UNIT_Z, Vector3.UNIT_X), Vector3.UNIT_Y)

    def test_cross_is_anticommutative_and_orthogonal(self):
        for _ in range(50):
            a = vec.rand(self.rng)
            b = vec.rand(self.rng)
            c = a.cross(b)
            self.assertEqual(c, -b.cross(a))
            self.assertAlmostEqual(c.dot(a), 0.0, places=12)
            self.assertAlmostEqual(c.dot(b), 0.0, places=12)

    def test_cross_matches_numpy(self):
        a = Vector3(1.5, -2, 0.25)
        b = Vector3(-3, 4, 7)
        np.testing.assert_allclose(vec.cross(a, b).to_tuple(), np.cross(a.to_tuple(), b.to_tuple()))

    def test_lengths(self):
        v = Vector3(3, 4, 0)
        self.assertEqual(v.length(), 5.0)
        self.assertEqual(v.length_squared(), 25.0)
        self.assertAlmostEqual(v.fast_length(), 5.0, delta=5.0 * 2e-3)
        self.assertEqual(vec.distance(Vector3(1, 2, 3), Vector3(4, 6, 3)), 5.0)
        self.assertEqual(vec.distance_squared(Vector3(1, 2, 3), Vector3(4, 6, 3)), 25.0)

    def test_normalize(self):
        for _ in range(20):
            v = vec.rand(self.rng)
            self.assertAlmostEqual(vec.normalize(v).length(), 1.0, places=12)
        self.assertEqual(Vector3(0, 0, 2).normalize(), Vector3.UNIT_Z)

    def test_normalize_zero_is_nan(self):
        n = vec.normalize(Vector3.ZERO)
        self.assertTrue(all(math.isnan(c) for c in n))

    def test_componentwise_helpers(self):
        a = Vector3(1, -5, 3.5)
        b = Vector3(2, -6, 3)
        self.assertEqual(vec.minimum(a, b), Vector3(1, -6, 3))
        self.assertEqual(vec.maximum(a, b), Vector3(2, -5, 3.5))
        self.assertEqual(vec.absolute(a), Vector3(1, 5, 3.5))
        self.assertEqual(vec.ceil(Vector3(1.2, -1.2, 3)), Vector3(2, -1, 3))
        self.assertEqual(vec.floor(Vector3(1.2, -1.2, 3)), Vector3(1, -2, 3))
        self.assertEqual(vec.round(Vector3(0.5, -0.5, 1.4)), Vector3(1, 0, 1))
        self.assertEqual(vec.round(Vector3(2.5, -2.5, -2.6)), Vector3(3, -2, -3))
        self.assertEqual(vec.power(Vector3(2, 3, 4), 2), Vector3(4, 9, 16))

    def test_rand_is_in_cube_and_not_normalized(self):
        samples = [Vector3.rand(self.rng) for _ in range(200)]
        for v in samples:
            for c in v:
                self.assertGreaterEqual(c, -1.0)
                self.assertLessEqual(c, 1.0)
        self.assertTrue(any(abs(v.length() - 1.0) > 0.1 for v in samples))

    def test_rand_is_reproducible_with_seed(self):
        a = [vec.rand(RandomContext(seed=7)) for _ in range(3)]
        b = [vec.rand(RandomContext(seed=7)) for _ in range(3)]
        self.assertEqual(a, b)

    def test_conversions(self):
        v = Vector3(1, 2, 3)
        self.assertEqual(vec.to_vector2(v), Vector2(1, 3))
        self.assertEqual(v.to_vector2(), Vector2(1, 3))
        self.assertEqual(vec.to_array(v), [1.0, 2.0, 3.0])

    def test_compare(self):
        self.assertLess(vec.compare(Vector3(1, 0, 0), Vector3(2, 0, 0)), 0)
        self.assertGreater(vec.compare(Vector3(3, 0, 0), Vector3(0, 1, 1)), 0)
        self.assertEqual(vec.compare(Vector3(0, 0, 1), Vector3(1, 0, 0)), 0)

    def test_isclose(self):
        self.assertTrue(Vector3(1, 2, 3).isclose(Vector3(1 + 1e-9, 2, 3)))
        self.assertFalse(Vector3(1, 2, 3).isclose(Vector3(1.1, 2, 3)))
        self.assertTrue(Vector3(1, 2, 3).isclose(Vector3(1.1, 2, 3), tol=0.2))


class TestVector2(unittest.TestCase):
    def test_arithmetic(self):
        a = Vector2(1, 2)
        b = Vector2(3, -4)
        self.assertEqual(a + b, Vector2(4, -2))
        self.assertEqual(a - b, Vector2(-2, 6))
        self.assertEqual(-a, Vector2(-1, -2))
        self.assertEqual(a * 3, Vector2(3, 6))
        self.assertEqual(3 * a, Vector2(3, 6))
        self.assertEqual(a * b, Vector2(3, -8))
        self.assertEqual(a.dot(b), -5.0)

    def test_length_and_normalize(self):
        v = Vector2(3, 4)
        self.assertEqual(v.length(), 5.0)
        self.assertEqual(v.length_squared(), 25.0)
        self.assertAlmostEqual(v.normalize().length(), 1.0, places=12)
        self.assertTrue(all(math.isnan(c) for c in Vector2.ZERO.normalize()))


if __name__ == "__main__":
    unittest.main()
