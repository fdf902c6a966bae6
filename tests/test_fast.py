import math
import unittest
import numpy as np

from kinemath import fast
from kinemath.constants import (
    PI, HALF_PI, TWO_PI, THREE_PI_HALVES, QUARTER_PI, SQUARED_PI,
    DEGTORAD, RADTODEG, SQRTOFTWO, HALF_SQRTOFTWO,
    DBL_EPSILON, FLT_EPSILON, double_to_bits, bits_to_double, float_to_bits, bits_to_float,
)


class TestConstants(unittest.TestCase):
    def test_epsilons_come_from_bit_patterns(self):
        self.assertEqual(DBL_EPSILON, 2.0 ** -52)
        self.assertEqual(FLT_EPSILON, 2.0 ** -23)
        self.assertEqual(double_to_bits(DBL_EPSILON), 0x3cb0000000000000)
        self.assertEqual(float_to_bits(FLT_EPSILON), 0x34000000)

    def test_bit_round_trip(self):
        for value in [1.0, -2.5, 1e-300, 123456.789]:
            self.assertEqual(bits_to_double(double_to_bits(value)), value)
        self.assertEqual(bits_to_float(float_to_bits(0.5)), 0.5)
        self.assertEqual(double_to_bits(1.0), 0x3FF0000000000000)

    def test_angle_constants(self):
        self.assertEqual(PI, math.pi)
        self.assertEqual(SQUARED_PI, PI * PI)
        self.assertEqual(HALF_PI, 0.5 * PI)
        self.assertEqual(QUARTER_PI, 0.5 * HALF_PI)
        self.assertEqual(TWO_PI, 2.0 * PI)
        self.assertEqual(THREE_PI_HALVES, TWO_PI - HALF_PI)
        self.assertEqual(DEGTORAD, PI / 180.0)
        self.assertEqual(RADTODEG, 180.0 / PI)
        self.assertEqual(SQRTOFTWO, math.sqrt(2.0))
        self.assertEqual(HALF_SQRTOFTWO, 0.5 * math.sqrt(2.0))


class TestFastRoots(unittest.TestCase):
    def test_sqrt_of_four(self):
        self.assertAlmostEqual(fast.sqrt(4.0), 2.0, places=2)

    def test_sqrt_relative_error(self):
        for x in np.logspace(-8, 8, 201):
            exact = math.sqrt(x)
            self.assertLess(abs(fast.sqrt(x) - exact) / exact, 2e-3, msg=f"x={x}")

    def test_inverse_sqrt_relative_error(self):
        for x in [0.01, 0.5, 1.0, 2.0, 9.0, 1e5]:
            exact = 1.0 / math.sqrt(x)
            self.assertLess(abs(fast.inverse_sqrt(x) - exact) / exact, 2e-3, msg=f"x={x}")

    def test_inverse_sqrt_bit_seed_values(self):
        self.assertAlmostEqual(fast.inverse_sqrt(4.0), 0.4991540713559072, places=12)
        self.assertAlmostEqual(fast.inverse_sqrt(2.0), 0.7069296507954639, places=12)

    def test_sqrt_accepts_ints(self):
        self.assertAlmostEqual(fast.sqrt(16), 4.0, places=1)


class TestFastTrig(unittest.TestCase):
    def setUp(self):
        self.xs = np.linspace(-PI, PI, 2001)

    def test_sin_error_bound(self):
        err = max(abs(fast.sin(x) - math.sin(x)) for x in self.xs)
        self.assertLessEqual(err, 0.0015)

    def test_cos_error_bound(self):
        err = max(abs(fast.cos(x) - math.cos(x)) for x in self.xs)
        self.assertLessEqual(err, 0.0015)

    def test_sin_is_odd_and_hits_zeros(self):
        self.assertEqual(fast.sin(0.0), 0.0)
        self.assertAlmostEqual(fast.sin(PI), 0.0, places=9)
        for x in [0.1, 0.7, 2.0, 3.0]:
            self.assertAlmostEqual(fast.sin(-x), -fast.sin(x), places=12)

    def test_cos_branch_above_half_pi(self):
        # x > HALF_PI takes the -3PI/2 phase shift
        for x in [HALF_PI + 0.01, 2.0, 2.5, PI]:
            self.assertAlmostEqual(fast.cos(x), math.cos(x), delta=0.0015)

    def test_tan(self):
        for x in [-1.0, -0.5, 0.0, 0.3, 0.9]:
            self.assertAlmostEqual(fast.tan(x), math.tan(x), delta=0.01)

    def test_asin_acos(self):
        for x in np.linspace(-1.0, 1.0, 401):
            self.assertAlmostEqual(fast.asin(x), math.asin(x), delta=0.005)
            self.assertAlmostEqual(fast.acos(x), math.acos(x), delta=0.005)
        self.assertEqual(fast.asin(0.0), 0.0)

    def test_asin_outside_domain_is_nan(self):
        self.assertTrue(math.isnan(fast.asin(1.5)))

    def test_atan(self):
        for x in np.linspace(-20.0, 20.0, 2001):
            self.assertAlmostEqual(fast.atan(x), math.atan(x), delta=0.006)
        self.assertEqual(fast.atan(0.0), 0.0)
        self.assertAlmostEqual(fast.atan(-3.0), -fast.atan(3.0), places=12)


class TestWrapping(unittest.TestCase):
    angles = [-1e6, -720.0, -540.0, -360.0, -190.0, -180.0, -179.5, -90.0, 0.0,
              45.0, 179.9, 180.0, 180.1, 270.0, 359.5, 360.0, 540.0, 1e6 + 0.25]

    def test_wrap_angle_range_and_idempotence(self):
        for a in self.angles:
            w = fast.wrap_angle(a)
            self.assertGreater(w, -180.0, msg=f"a={a}")
            self.assertLessEqual(w, 180.0, msg=f"a={a}")
            self.assertEqual(fast.wrap_angle(w), w, msg=f"a={a}")

    def test_wrap_angle_values(self):
        self.assertEqual(fast.wrap_angle(180.0), 180.0)
        self.assertEqual(fast.wrap_angle(-180.0), 180.0)
        self.assertEqual(fast.wrap_angle(190.0), -170.0)
        self.assertEqual(fast.wrap_angle(-190.0), 170.0)
        self.assertEqual(fast.wrap_angle(360.0), 0.0)
        self.assertEqual(fast.wrap_angle(725.0), 5.0)

    def test_wrap_angle_pitch_clamps(self):
        self.assertEqual(fast.wrap_angle_pitch(45.0), 45.0)
        self.assertEqual(fast.wrap_angle_pitch(100.0), 90.0)
        self.assertEqual(fast.wrap_angle_pitch(-100.0), -90.0)
        self.assertEqual(fast.wrap_angle_pitch(270.0), -90.0)
        self.assertEqual(fast.wrap_angle_pitch(400.0), 40.0)

    def test_wrap_radian_range_and_idempotence(self):
        for a in self.angles:
            r = a * DEGTORAD
            w = fast.wrap_radian(r)
            self.assertGreater(w, -PI, msg=f"r={r}")
            self.assertLessEqual(w, PI, msg=f"r={r}")
            self.assertEqual(fast.wrap_radian(w), w, msg=f"r={r}")
        self.assertEqual(fast.wrap_radian(PI), PI)
        self.assertEqual(fast.wrap_radian(-PI), PI)
        self.assertAlmostEqual(fast.wrap_radian(TWO_PI + 0.5), 0.5, places=12)

    def test_differences(self):
        self.assertEqual(fast.angle_difference(170.0, -170.0), 20.0)
        self.assertEqual(fast.angle_difference(10.0, 30.0), 20.0)
        self.assertAlmostEqual(fast.radian_difference(PI - 0.1, -PI + 0.1), 0.2, places=12)


if __name__ == "__main__":
    unittest.main()
