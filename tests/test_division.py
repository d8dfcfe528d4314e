import unittest
from fractions import Fraction

from lowterms import UNBOUNDED, BigFraction, DivideByZero, DivisionMode, InvalidArgument
from lowterms.division import divide_and_remainder, integral_quotient, parts

TRUNCATED = DivisionMode.TRUNCATED
FLOORED = DivisionMode.FLOORED
EUCLIDEAN = DivisionMode.EUCLIDEAN


class DivideAndRemainderTests(unittest.TestCase):
    def test_reference_examples(self):
        a = BigFraction(-5, 4)
        b = BigFraction(1, 2)
        self.assertEqual(a.divide_and_remainder(b, FLOORED), (-3, BigFraction(1, 4)))
        self.assertEqual(a.divide_and_remainder(b, EUCLIDEAN), (-3, BigFraction(1, 4)))
        self.assertEqual(a.divide_and_remainder(b, TRUNCATED), (-2, BigFraction(-1, 4)))
        self.assertEqual(a.divide_and_remainder(b), (-2, BigFraction(-1, 4)))

    def test_all_sign_combinations(self):
        cases = {
            # (a, b): {mode: (q, r)}
            ((5, 4), (-1, 2)): {TRUNCATED: (-2, (1, 4)), FLOORED: (-3, (-1, 4)), EUCLIDEAN: (-2, (1, 4))},
            ((-5, 4), (-1, 2)): {TRUNCATED: (2, (-1, 4)), FLOORED: (2, (-1, 4)), EUCLIDEAN: (3, (1, 4))},
            ((5, 4), (1, 2)): {TRUNCATED: (2, (1, 4)), FLOORED: (2, (1, 4)), EUCLIDEAN: (2, (1, 4))},
        }
        for (a, b), expected in cases.items():
            for mode, (q, r) in expected.items():
                with self.subTest(a=a, b=b, mode=mode):
                    self.assertEqual(
                        BigFraction(*a).divide_and_remainder(BigFraction(*b), mode),
                        (q, BigFraction(*r)),
                    )

    def test_identity_holds(self):
        values = [BigFraction(n, d) for n in (-7, -3, 0, 2, 9) for d in (1, 2, 5)]
        divisors = [BigFraction(n, d) for n in (-4, -1, 3) for d in (1, 3)]
        for a in values:
            for b in divisors:
                for mode in DivisionMode:
                    q, r = a.divide_and_remainder(b, mode)
                    self.assertEqual(b * q + r, a)
                    self.assertEqual(a / b, q + r / b)
                    if mode is EUCLIDEAN:
                        self.assertGreaterEqual(r, 0)

    def test_exact_division_has_zero_remainder(self):
        self.assertEqual(BigFraction(3, 2).divide_and_remainder(BigFraction(1, 2)), (3, BigFraction(0)))
        self.assertEqual(BigFraction(0).divide_and_remainder(7, FLOORED), (0, BigFraction(0)))

    def test_division_by_zero(self):
        with self.assertRaises(DivideByZero):
            BigFraction(1).divide_and_remainder(0)
        with self.assertRaises(DivideByZero):
            BigFraction(0).divide_to_integral_value(0)
        with self.assertRaises(DivideByZero):
            divide_and_remainder(UNBOUNDED, (1, 2), (0, 1))

    def test_missing_mode(self):
        with self.assertRaises(InvalidArgument):
            BigFraction(1).divide_and_remainder(2, None)
        with self.assertRaises(InvalidArgument):
            integral_quotient(UNBOUNDED, (1, 1), (2, 1), None)

    def test_quotient_and_remainder_helpers(self):
        self.assertEqual(BigFraction(-7, 2).divide_to_integral_value(2, FLOORED), -2)
        self.assertEqual(BigFraction(-7, 2).remainder(2), BigFraction(-3, 2))
        self.assertEqual(BigFraction.integral_quotient(7, Fraction(2, 3)), 10)
        self.assertEqual(BigFraction.remainder_of(7, Fraction(2, 3)), BigFraction(1, 3))
        self.assertEqual(BigFraction.quotient_and_remainder(-7, 2, EUCLIDEAN), (-4, BigFraction(1)))


class PartsTests(unittest.TestCase):
    def test_parts(self):
        value = BigFraction(-7, 3)
        self.assertEqual(value.parts(), (-2, BigFraction(-1, 3)))
        self.assertEqual(value.parts(FLOORED), (-3, BigFraction(2, 3)))
        self.assertEqual(value.parts(EUCLIDEAN), (-3, BigFraction(2, 3)))
        self.assertEqual(BigFraction(7, 3).integer_part(), 2)
        self.assertEqual(BigFraction(7, 3).fraction_part(), BigFraction(1, 3))
        self.assertEqual(BigFraction(4).parts(FLOORED), (4, BigFraction(0)))

    def test_pair_level_parts(self):
        self.assertEqual(parts(UNBOUNDED, -1, 2, FLOORED), (-1, (1, 2)))
        with self.assertRaises(InvalidArgument):
            parts(UNBOUNDED, -1, 2, None)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
