import unittest
from decimal import Decimal
from fractions import Fraction

import numpy as np

from balanced_bst import ConversionError, process_items, to_number


class TestToNumber(unittest.TestCase):
    def test_ints_and_floats_pass_through(self):
        self.assertEqual(to_number(3), 3)
        self.assertEqual(to_number(-2.5), -2.5)
        self.assertEqual(to_number(Fraction(1, 2)), Fraction(1, 2))

    def test_numpy_scalars_are_accepted(self):
        self.assertEqual(to_number(np.int64(4)), 4)
        self.assertEqual(to_number(np.float32(1.5)), 1.5)

    def test_numeric_strings_are_parsed(self):
        self.assertEqual(to_number("3"), 3)
        self.assertIsInstance(to_number("3"), int)
        self.assertEqual(to_number(" 2.5 "), 2.5)
        self.assertEqual(to_number("-1e3"), -1000.0)
        self.assertEqual(to_number(b"7"), 7)

    def test_decimal_goes_through_float(self):
        self.assertEqual(to_number(Decimal("1.5")), 1.5)

    def test_non_numeric_strings_raise(self):
        for value in ("abc", "", "   ", "1,5", "nan"):
            with self.subTest(value=value):
                with self.assertRaises(ConversionError):
                    to_number(value)

    def test_other_objects_raise(self):
        for value in (None, [1], {}, object(), b"\xff"):
            with self.subTest(value=value):
                with self.assertRaises(ConversionError):
                    to_number(value)

    def test_bool_is_rejected(self):
        with self.assertRaises(ConversionError):
            to_number(True)

    def test_nan_is_rejected(self):
        with self.assertRaises(ConversionError):
            to_number(float("nan"))
        with self.assertRaises(ConversionError):
            to_number(np.float64("nan"))

    def test_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            to_number("abc")

    def test_huge_ints_and_fractions_pass_through(self):
        self.assertEqual(to_number(10 ** 400), 10 ** 400)
        self.assertEqual(to_number(-(10 ** 400)), -(10 ** 400))
        self.assertEqual(to_number(Fraction(10 ** 400, 3)), Fraction(10 ** 400, 3))
        self.assertEqual(to_number("1" * 400), int("1" * 400))

    def test_integer_text_never_becomes_inf(self):
        # on interpreters with an int digit limit this must fail, not return inf
        for text in ("1" * 5000, "-" + "2" * 5000):
            with self.subTest(length=len(text)):
                try:
                    number = to_number(text)
                except ConversionError:
                    continue
                self.assertIsInstance(number, int)
                self.assertEqual(number, int(text))

    def test_numpy_bool_is_rejected(self):
        for value in (np.True_, np.False_):
            with self.subTest(value=value):
                with self.assertRaises(ConversionError):
                    to_number(value)

    def test_error_keeps_value_and_cause(self):
        with self.assertRaises(ConversionError) as ctx:
            to_number("abc")
        self.assertEqual(ctx.exception.value, "abc")
        self.assertIsInstance(ctx.exception.__cause__, ValueError)
        self.assertIn("'abc'", str(ctx.exception))


class TestProcessItems(unittest.TestCase):
    def test_sorts_and_deduplicates(self):
        self.assertEqual(process_items([3, 6, 6, 1, 8, 1]), [1, 3, 6, 8])

    def test_mixed_input_types(self):
        self.assertEqual(process_items(["3", 1, 1.0, "2"]), [1, 2, 3])

    def test_long_integer_texts_stay_distinct(self):
        try:
            result = process_items(["1" * 5000, "2" * 5000])
        except ConversionError:
            return
        self.assertEqual(len(result), 2)

    def test_empty_input(self):
        self.assertEqual(process_items([]), [])

    def test_any_bad_item_fails(self):
        with self.assertRaises(ConversionError):
            process_items([1, 2, "x", 4])


if __name__ == "__main__":
    unittest.main()
