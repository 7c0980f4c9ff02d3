import io
import unittest

from ratcalc import (
    DomainError,
    FormattingStyle,
    Interrupted,
    Rational,
    Settings,
    Sign,
    format_rational,
    terminates_in_base,
)
from ratcalc.interrupt import CountdownInterrupt, EventInterrupt

FALLBACK = FormattingStyle.EXACT_FLOAT_WITH_FRACTION_FALLBACK
FLOAT_STYLES = (
    FormattingStyle.EXACT_FLOAT,
    FALLBACK,
    FormattingStyle.AUTO,
    FormattingStyle.approx_float(5),
)


def render(value, **kwargs):
    return value.to_string(**kwargs)


class FormattingStyleTests(unittest.TestCase):
    def test_approx_float_precision(self):
        self.assertEqual(FormattingStyle.approx_float(3).precision, 3)
        with self.assertRaises(ValueError):
            FormattingStyle.approx_float(0)
        with self.assertRaises(TypeError):
            FormattingStyle.approx_float(2.5)

    def test_stock_styles_take_no_precision(self):
        self.assertIsNone(FormattingStyle.EXACT_FLOAT.precision)
        with self.assertRaises(ValueError):
            FormattingStyle("exact_float", 4)
        with self.assertRaises(ValueError):
            FormattingStyle("scientific")


class TerminationTests(unittest.TestCase):
    def test_terminates_in_base(self):
        self.assertTrue(terminates_in_base(Rational(1, 4), 10))
        self.assertTrue(terminates_in_base(Rational(7, 20), 10))
        self.assertFalse(terminates_in_base(Rational(1, 3), 10))
        self.assertTrue(terminates_in_base(Rational(1, 3), 3))
        self.assertFalse(terminates_in_base(Rational(3, 10), 2))
        self.assertFalse(terminates_in_base(Rational(1, 6), 10))

    def test_unsimplified_input(self):
        self.assertTrue(terminates_in_base(Rational(3, 12), 10))


class IntegerFormattingTests(unittest.TestCase):
    def test_two_plus_two(self):
        total = Rational.from_int(2) + Rational.from_int(2)
        self.assertEqual(render(total), ("4", True))
        self.assertEqual(render(total, style=FormattingStyle.EXACT_FRACTION), ("4", True))

    def test_unsimplified_integer(self):
        self.assertEqual(render(Rational(12, 4)), ("3", True))

    def test_negative_integer(self):
        self.assertEqual(render(Rational(7, 1, Sign.NEGATIVE)), ("-7", True))

    def test_negative_zero_prints_without_sign(self):
        self.assertEqual(render(Rational(0, 5, Sign.NEGATIVE)), ("0", True))

    def test_other_bases(self):
        self.assertEqual(render(Rational(255), base=16), ("ff", True))
        self.assertEqual(render(Rational(5), base=2), ("101", True))
        self.assertEqual(render(Rational(35), base=36), ("z", True))

    def test_invalid_base(self):
        for base in (0, 1, 37):
            with self.subTest(base=base):
                with self.assertRaises(DomainError):
                    render(Rational(1), base=base)


class FloatFormattingTests(unittest.TestCase):
    def test_quarter(self):
        for style in FLOAT_STYLES:
            with self.subTest(style=style):
                self.assertEqual(render(Rational(1, 4), style=style), ("0.25", True))

    def test_third_with_fraction_fallback(self):
        self.assertEqual(render(Rational(1, 3), style=FALLBACK), ("1/3", True))

    def test_third_as_exact_float(self):
        self.assertEqual(render(Rational(1, 3), style=FormattingStyle.EXACT_FLOAT), ("0.(3)", True))

    def test_third_approximated(self):
        style = FormattingStyle.approx_float(2)
        self.assertEqual(render(Rational(1, 3), style=style), ("0.33", False))

    def test_repeating_with_prefix(self):
        style = FormattingStyle.EXACT_FLOAT
        self.assertEqual(render(Rational(1, 6), style=style), ("0.1(6)", True))
        self.assertEqual(render(Rational(1, 7), style=style), ("0.(142857)", True))
        self.assertEqual(render(Rational(22, 7), style=style), ("3.(142857)", True))
        self.assertEqual(render(Rational(7, 12), style=style), ("0.58(3)", True))

    def test_negative_values(self):
        value = Rational(3, 2, Sign.NEGATIVE)
        self.assertEqual(render(value), ("-1.5", True))
        self.assertEqual(render(value, style=FormattingStyle.EXACT_FRACTION), ("-3/2", True))

    def test_fraction_is_reduced(self):
        self.assertEqual(render(Rational(4, 6), style=FormattingStyle.EXACT_FRACTION), ("2/3", True))

    def test_other_bases(self):
        self.assertEqual(render(Rational(1, 4), base=2), ("0.01", True))
        self.assertEqual(render(Rational(1, 3), base=3), ("0.1", True))
        self.assertEqual(render(Rational(1, 3), base=2, style=FormattingStyle.EXACT_FLOAT), ("0.(01)", True))
        self.assertEqual(render(Rational(1, 3), base=2), ("1/11", True))
        self.assertEqual(render(Rational(255, 16), base=16), ("f.f", True))

    def test_auto_uses_default_digit_limit(self):
        self.assertEqual(render(Rational(1, 3), style=FormattingStyle.AUTO), ("0.3333333333", False))
        self.assertEqual(
            render(Rational(1, 3), style=FormattingStyle.AUTO, default_max_digits=3),
            ("0.333", False),
        )

    def test_default_digit_limit_from_settings(self):
        settings = Settings(default_max_digits=4)
        text, exact = render(Rational(2, 7), style=FormattingStyle.AUTO, settings=settings)
        self.assertEqual((text, exact), ("0.2857", False))
        out = io.StringIO()
        self.assertFalse(format_rational(Rational(1, 3), out, style=FormattingStyle.AUTO, settings=settings))
        self.assertEqual(out.getvalue(), "0.3333")

    def test_explicit_digit_limit_overrides_settings(self):
        text, _ = render(
            Rational(2, 7),
            style=FormattingStyle.AUTO,
            default_max_digits=2,
            settings=Settings(default_max_digits=6),
        )
        self.assertEqual(text, "0.28")

    def test_digit_limit_must_be_positive(self):
        for limit in (0, -3):
            with self.subTest(limit=limit):
                with self.assertRaises(DomainError):
                    render(Rational(1, 3), style=FormattingStyle.AUTO, default_max_digits=limit)
        with self.assertRaises(TypeError):
            render(Rational(1, 3), style=FormattingStyle.AUTO, default_max_digits=2.5)

    def test_approx_float_ending_early_is_exact(self):
        style = FormattingStyle.approx_float(10)
        self.assertEqual(render(Rational(1, 8), style=style), ("0.125", True))
        self.assertEqual(render(Rational(1, 8), style=FormattingStyle.approx_float(2)), ("0.12", False))

    def test_str_uses_fraction_fallback(self):
        self.assertEqual(str(Rational(3, 2)), "1.5")
        self.assertEqual(str(Rational(2, 3)), "2/3")


class ImaginaryFormattingTests(unittest.TestCase):
    def test_unit(self):
        self.assertEqual(render(Rational(1), imag=True), ("i", True))
        self.assertEqual(render(Rational(1, 1, Sign.NEGATIVE), imag=True), ("-i", True))

    def test_integer_and_float(self):
        self.assertEqual(render(Rational(2), imag=True), ("2i", True))
        self.assertEqual(render(Rational(1, 2), imag=True), ("0.5i", True))
        self.assertEqual(render(Rational(1, 3), imag=True), ("i/3", True))
        self.assertEqual(render(Rational(2, 3), imag=True), ("2i/3", True))

    def test_unit_outside_base_ten(self):
        self.assertEqual(render(Rational(1), base=2, imag=True), ("1i", True))

    def test_high_bases_separate_marker(self):
        self.assertEqual(render(Rational(2), base=20, imag=True), ("2 i", True))
        self.assertEqual(render(Rational(1, 2), base=20, imag=True), ("0.a i", True))


class SinkAndInterruptTests(unittest.TestCase):
    def test_writes_to_any_sink(self):
        out = io.StringIO()
        out.write("x = ")
        exact = format_rational(Rational(5, 4), out)
        self.assertTrue(exact)
        self.assertEqual(out.getvalue(), "x = 1.25")

    def test_rational_format_delegates(self):
        out = io.StringIO()
        self.assertFalse(Rational(2, 3).format(out, style=FormattingStyle.approx_float(3)))
        self.assertEqual(out.getvalue(), "0.666")

    def test_cancelled_before_start(self):
        event = EventInterrupt()
        event.cancel()
        with self.assertRaises(Interrupted):
            Rational(1, 7).to_string(style=FormattingStyle.EXACT_FLOAT, interrupt=event)

    def test_long_expansion_is_interruptible(self):
        # 1/983 repeats with a period of 982 digits in base 10
        with self.assertRaises(Interrupted) as ctx:
            Rational(1, 983).to_string(
                style=FormattingStyle.EXACT_FLOAT, interrupt=CountdownInterrupt(200)
            )
        self.assertNotIsInstance(ctx.exception, DomainError)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
