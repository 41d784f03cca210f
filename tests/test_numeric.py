import unittest

from flowcheck import InvalidParamError, MissingParamError
from flowcheck.numeric import check_ge_zero, check_gt_zero, check_integer


class NumericTests(unittest.TestCase):
    def test_check_gt_zero(self):
        self.assertEqual(check_gt_zero(120, "test"), 120)
        for value in (0, -1):
            with self.assertRaises(InvalidParamError):
                check_gt_zero(value, "test")

    def test_check_ge_zero(self):
        self.assertEqual(check_ge_zero(120, "test"), 120)
        self.assertEqual(check_ge_zero(0, "test"), 0)
        with self.assertRaises(InvalidParamError):
            check_ge_zero(-1, "test")

    def test_bounds_reject_non_integers(self):
        with self.assertRaises(MissingParamError):
            check_gt_zero(None, "test")
        with self.assertRaises(InvalidParamError):
            check_ge_zero(True, "test")
        with self.assertRaises(InvalidParamError):
            check_gt_zero("5", "test")

    def test_check_integer(self):
        self.assertEqual(check_integer("120", "test"), 120)
        self.assertEqual(check_integer("-12", "test"), -12)

    def test_check_integer_rejects_non_integer_text(self):
        for text in ("ABCD", "1.5", "", " 1", "1 ", "+1", "--1", "1e3"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidParamError):
                    check_integer(text, "test")

    def test_check_integer_none(self):
        with self.assertRaises(MissingParamError):
            check_integer(None, "test")

    def test_error_names_parameter(self):
        with self.assertRaises(InvalidParamError) as ctx:
            check_gt_zero(0, "concurrency")
        self.assertEqual(ctx.exception.param_name, "concurrency")
        self.assertTrue(str(ctx.exception).startswith("concurrency: "))


if __name__ == "__main__":
    unittest.main()
