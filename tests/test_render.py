import unittest

from lowterms import BigFraction, InvalidArgument, LongFraction, RoundingMode
from lowterms.render import repeating_digit_string


class FractionStringTests(unittest.TestCase):
    def test_to_string(self):
        self.assertEqual(BigFraction(3).to_string(), "3/1")
        self.assertEqual(BigFraction(3).to_string(denominator_optional=True), "3")
        self.assertEqual(BigFraction(-3, 4).to_string(), "-3/4")
        self.assertEqual(BigFraction(255, 16).to_string(16), "ff/10")
        self.assertEqual(BigFraction(-5, 2).to_string(2), "-101/10")
        self.assertEqual(BigFraction(1, 2).to_string(99), "1/2")

    def test_mixed_string(self):
        self.assertEqual(BigFraction(-4, 3).to_mixed_string(), "-1 1/3")
        self.assertEqual(BigFraction(7, 2).to_mixed_string(), "3 1/2")
        self.assertEqual(BigFraction(1, 3).to_mixed_string(), "1/3")
        self.assertEqual(BigFraction(-1, 3).to_mixed_string(), "-1/3")
        self.assertEqual(BigFraction(4).to_mixed_string(), "4")
        self.assertEqual(BigFraction(33, 16).to_mixed_string(16), "2 1/10")


class DecimalStringTests(unittest.TestCase):
    def test_trailing_zeros_are_kept(self):
        self.assertEqual(BigFraction(1, 2).to_decimal_string(3), "0.500")
        self.assertEqual(BigFraction(5).to_decimal_string(2), "5.00")

    def test_rounding(self):
        self.assertEqual(BigFraction(2, 3).to_decimal_string(2), "0.67")
        self.assertEqual(BigFraction(-2, 3).to_decimal_string(2), "-0.67")
        self.assertEqual(BigFraction(2, 3).to_decimal_string(2, RoundingMode.DOWN), "0.66")
        self.assertEqual(BigFraction(1, 8).to_decimal_string(2, RoundingMode.HALF_EVEN), "0.12")
        self.assertEqual(BigFraction(1234567, 1000).to_decimal_string(1), "1234.6")

    def test_sign_follows_rounded_value(self):
        self.assertEqual(BigFraction(-1, 1000).to_decimal_string(2), "0.00")
        self.assertEqual(BigFraction(-1, 1000).to_decimal_string(2, RoundingMode.FLOOR), "-0.01")

    def test_zero_digits(self):
        self.assertEqual(BigFraction(5, 2).to_decimal_string(0), "3")
        self.assertEqual(BigFraction(-5, 2).to_decimal_string(0, RoundingMode.HALF_EVEN), "-2")

    def test_negative_digit_counts(self):
        self.assertEqual(BigFraction(1234).to_decimal_string(-2), "1200")
        self.assertEqual(BigFraction(-1250).to_decimal_string(-2), "-1300")
        self.assertEqual(BigFraction(1, 3).to_decimal_string(-1), "0")

    def test_radixed(self):
        self.assertEqual(BigFraction(1, 3).to_radixed_string(2, 4), "0.0101")
        self.assertEqual(BigFraction(-255, 16).to_radixed_string(16, 2), "-f.f0")
        self.assertEqual(LongFraction(1, 3).to_radixed_string(3, 3), "0.100")

    def test_missing_mode(self):
        with self.assertRaises(InvalidArgument):
            BigFraction(1, 3).to_decimal_string(2, None)


class RepeatingDigitStringTests(unittest.TestCase):
    def test_reference_examples(self):
        self.assertEqual(BigFraction(1, 9).to_repeating_digit_string(), "0.(1)")
        self.assertEqual(BigFraction(500, 11).to_repeating_digit_string(), "45.(45)")
        self.assertEqual(BigFraction(1).to_repeating_digit_string(force_repeating=True), "0.(9)")

    def test_prefix_before_cycle(self):
        self.assertEqual(BigFraction(45, 22).to_repeating_digit_string(), "2.0(45)")
        self.assertEqual(BigFraction(1, 6).to_repeating_digit_string(), "0.1(6)")
        self.assertEqual(BigFraction(-1, 3).to_repeating_digit_string(), "-0.(3)")
        self.assertEqual(BigFraction(1, 7).to_repeating_digit_string(), "0.(142857)")

    def test_terminating(self):
        self.assertEqual(BigFraction(1, 4).to_repeating_digit_string(), "0.25")
        self.assertEqual(BigFraction(3).to_repeating_digit_string(), "3.0")
        self.assertEqual(BigFraction(0).to_repeating_digit_string(), "0.0")
        self.assertEqual(BigFraction(-5, 4).to_repeating_digit_string(), "-1.25")

    def test_forced(self):
        self.assertEqual(BigFraction(1, 4).to_repeating_digit_string(force_repeating=True), "0.24(9)")
        self.assertEqual(BigFraction(1, 100).to_repeating_digit_string(force_repeating=True), "0.00(9)")
        self.assertEqual(BigFraction(0).to_repeating_digit_string(force_repeating=True), "0.(0)")
        self.assertEqual(BigFraction(-2).to_repeating_digit_string(force_repeating=True), "-1.(9)")
        self.assertEqual(BigFraction(1, 3).to_repeating_digit_string(force_repeating=True), "0.(3)")

    def test_other_radixes(self):
        self.assertEqual(BigFraction(1, 3).to_repeating_digit_string(2), "0.(01)")
        self.assertEqual(BigFraction(1, 2).to_repeating_digit_string(2, True), "0.0(1)")
        self.assertEqual(BigFraction(1, 3).to_repeating_digit_string(16), "0.(5)")
        self.assertEqual(BigFraction(1).to_repeating_digit_string(16, True), "0.(f)")
        self.assertEqual(repeating_digit_string(1, 9, 1), "0.(1)")


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
