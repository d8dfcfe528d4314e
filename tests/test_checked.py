import unittest

from lowterms import INT64, UNBOUNDED, DivideByZero, FixedWidthIntegers, FractionOverflow
from lowterms.checked import tdiv

MAX = 2**63 - 1
MIN = -(2**63)


class FixedWidthTests(unittest.TestCase):
    def test_bounds(self):
        self.assertEqual(INT64.max_value, MAX)
        self.assertEqual(INT64.min_value, MIN)
        self.assertTrue(INT64.bounded)
        self.assertFalse(UNBOUNDED.bounded)

    def test_check(self):
        self.assertEqual(INT64.check(MAX), MAX)
        with self.assertRaises(FractionOverflow):
            INT64.check(MAX + 1)
        with self.assertRaises(OverflowError):
            INT64.check(MIN - 1)

    def test_add_and_sub(self):
        self.assertEqual(INT64.add(MAX, MIN), -1)
        self.assertEqual(INT64.sub(-1, MIN), MAX)
        with self.assertRaises(FractionOverflow):
            INT64.add(MAX, 1)
        with self.assertRaises(FractionOverflow):
            INT64.add(MIN, -1)
        with self.assertRaises(FractionOverflow):
            INT64.sub(MIN, 1)
        with self.assertRaises(FractionOverflow):
            INT64.sub(0, MIN)

    def test_mul(self):
        self.assertEqual(INT64.mul(2**31, 2**31), 2**62)
        self.assertEqual(INT64.mul(-(2**62), 2), MIN)
        self.assertEqual(INT64.mul(MIN, 1), MIN)
        self.assertEqual(INT64.mul(MIN, 0), 0)
        for a, b in ((MAX, 2), (2**32, 2**31), (MIN, -1), (-1, MIN), (-(2**62) - 1, 2), (-(2**32), -(2**31))):
            with self.subTest(a=a, b=b):
                with self.assertRaises(FractionOverflow):
                    INT64.mul(a, b)

    def test_neg_and_abs(self):
        self.assertEqual(INT64.neg(MAX), -MAX)
        self.assertEqual(INT64.abs(-MAX), MAX)
        with self.assertRaises(FractionOverflow):
            INT64.neg(MIN)
        with self.assertRaises(FractionOverflow):
            INT64.abs(MIN)

    def test_pow(self):
        self.assertEqual(INT64.pow(2, 62), 2**62)
        self.assertEqual(INT64.pow(-2, 63), MIN)
        self.assertEqual(INT64.pow(-1, 2**40 + 1), -1)
        self.assertEqual(INT64.pow(7, 0), 1)
        with self.assertRaises(FractionOverflow):
            INT64.pow(2, 63)
        with self.assertRaises(FractionOverflow) as ctx:
            INT64.pow(3, 40)
        self.assertIn("(3)^(40)", str(ctx.exception))

    def test_gcd_and_lcm(self):
        self.assertEqual(INT64.gcd(-12, 18), 6)
        self.assertEqual(INT64.lcm(4, -6), 12)
        self.assertEqual(INT64.lcm(0, 0), 0)
        with self.assertRaises(FractionOverflow):
            INT64.gcd(MIN, 0)
        with self.assertRaises(FractionOverflow):
            INT64.lcm(MAX, MAX - 1)

    def test_divmod_truncates(self):
        self.assertEqual(INT64.divmod(-7, 2), (-3, -1))
        self.assertEqual(INT64.divmod(7, -2), (-3, 1))
        with self.assertRaises(FractionOverflow):
            INT64.divmod(MIN, -1)
        with self.assertRaises(DivideByZero):
            INT64.divmod(1, 0)

    def test_cross_compare_never_overflows(self):
        self.assertEqual(INT64.cross_compare(MAX, MAX, MIN, MIN), -1)
        self.assertEqual(INT64.cross_compare(MAX, 2, 2, MAX), 0)
        self.assertEqual(INT64.cross_compare(1, 3, 1, 2), 1)

    def test_narrow_widths(self):
        int8 = FixedWidthIntegers(8)
        self.assertEqual(int8.max_value, 127)
        self.assertEqual(int8.mul(-8, 16), -128)
        with self.assertRaises(FractionOverflow):
            int8.add(100, 28)
        with self.assertRaises(ValueError):
            FixedWidthIntegers(1)


class UnboundedTests(unittest.TestCase):
    def test_never_overflows(self):
        self.assertEqual(UNBOUNDED.mul(MAX, MAX), MAX * MAX)
        self.assertEqual(UNBOUNDED.neg(MIN), 2**63)
        self.assertEqual(UNBOUNDED.pow(3, 40), 3**40)

    def test_truncated_division(self):
        self.assertEqual(tdiv(-7, 2), -3)
        self.assertEqual(tdiv(7, -2), -3)
        self.assertEqual(tdiv(-7, -2), 3)
        self.assertEqual(UNBOUNDED.divmod(-7, -2), (3, -1))

    def test_lcm(self):
        self.assertEqual(UNBOUNDED.lcm(-4, 6), 12)
        self.assertEqual(UNBOUNDED.lcm(0, 0), 0)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
