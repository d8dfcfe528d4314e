import unittest

from lowterms import BigFraction, FractionOverflow, LongFraction

MAX = 2**63 - 1
MIN = -(2**63)


class OverflowTests(unittest.TestCase):
    def test_construction_out_of_range(self):
        with self.assertRaises(FractionOverflow):
            LongFraction(2**63)
        with self.assertRaises(FractionOverflow):
            LongFraction(1, 2**64)
        with self.assertRaises(FractionOverflow):
            LongFraction.from_float(1e300)
        self.assertEqual(LongFraction(MIN).numerator, MIN)

    def test_negative_denominators_at_the_bound(self):
        self.assertEqual(LongFraction(2, MIN), LongFraction(-1, 2**62))
        self.assertEqual(LongFraction(MIN, MIN), 1)
        with self.assertRaises(FractionOverflow):
            LongFraction(1, MIN)

    def test_arithmetic_overflow(self):
        with self.assertRaises(FractionOverflow):
            LongFraction(MAX) * 2
        with self.assertRaises(FractionOverflow):
            LongFraction(MAX) + 1
        with self.assertRaises(FractionOverflow):
            LongFraction(MIN) - 1
        with self.assertRaises(FractionOverflow):
            LongFraction(1, MAX) + LongFraction(1, MAX - 1)

    def test_minimum_value_has_no_negation(self):
        value = LongFraction(MIN)
        with self.assertRaises(FractionOverflow):
            value.negate()
        with self.assertRaises(FractionOverflow):
            abs(value)
        with self.assertRaises(FractionOverflow):
            value.divide(-1)
        with self.assertRaises(FractionOverflow):
            value.reciprocal().negate()

    def test_powers(self):
        self.assertEqual(LongFraction(2).pow(62), 2**62)
        self.assertEqual(LongFraction(-2).pow(63), MIN)
        with self.assertRaises(FractionOverflow):
            LongFraction(2).pow(63)
        with self.assertRaises(FractionOverflow):
            LongFraction(3, 2) ** 40

    def test_overflow_is_an_overflow_error(self):
        with self.assertRaises(OverflowError) as ctx:
            LongFraction(MAX) * 3
        self.assertTrue(str(ctx.exception).startswith("Integer Overflow:"))


class CancellationTests(unittest.TestCase):
    def test_cross_cancellation_avoids_overflow(self):
        a = LongFraction(2**62, 3)
        b = LongFraction(3, 2**62)
        self.assertEqual(a * b, 1)
        self.assertEqual(LongFraction(MAX, 2) * LongFraction(2, MAX), 1)

    def test_integer_fast_paths(self):
        self.assertEqual(LongFraction(-1, MAX) + 1, LongFraction(MAX - 1, MAX))
        self.assertEqual(LongFraction(MAX - 1, 2) + 0, LongFraction(MAX - 1, 2))

    def test_comparison_uses_exact_products(self):
        self.assertLess(LongFraction(MAX, MAX - 1), LongFraction(MAX - 1, MAX - 2))
        self.assertTrue(LongFraction(1, 2) < 10**30)
        self.assertFalse(LongFraction(MIN) < -(10**30))
        self.assertEqual(LongFraction(MIN).compare_to(BigFraction(MIN)), 0)

    def test_conversions_at_the_bound(self):
        self.assertEqual(LongFraction(MIN).to_int_exact(), MIN)
        self.assertEqual(LongFraction(MIN).to_string(), f"{MIN}/1")
        self.assertEqual(LongFraction(MIN, 3).round(), -3074457345618258603)


class MixedTypeTests(unittest.TestCase):
    def test_equality_and_hash_across_backings(self):
        self.assertEqual(LongFraction(1, 3), BigFraction(1, 3))
        self.assertEqual(hash(LongFraction(-7, 9)), hash(BigFraction(-7, 9)))
        self.assertEqual(len({LongFraction(1, 2), BigFraction(1, 2), 0.5}), 1)

    def test_operators_promote_to_unbounded(self):
        self.assertIsInstance(LongFraction(1, 2) + BigFraction(1, 3), BigFraction)
        self.assertIsInstance(BigFraction(1, 3) * LongFraction(1, 2), BigFraction)
        self.assertIsInstance(LongFraction(MAX) - BigFraction(-1), BigFraction)
        self.assertEqual(LongFraction(MAX) + BigFraction(1), 2**63)

    def test_named_methods_keep_receiver_type(self):
        self.assertIsInstance(LongFraction(1, 2).add(BigFraction(1, 3)), LongFraction)
        self.assertIsInstance(BigFraction(1, 2).add(LongFraction(1, 3)), BigFraction)
        self.assertIsInstance(LongFraction(1, 2) + 1, LongFraction)

    def test_value_of(self):
        big = BigFraction(3, 4)
        self.assertIsInstance(LongFraction.value_of(big), LongFraction)
        self.assertEqual(LongFraction.value_of(big), big)
        with self.assertRaises(FractionOverflow):
            LongFraction.value_of(BigFraction(2**70))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
