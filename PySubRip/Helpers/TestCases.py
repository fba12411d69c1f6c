import unittest
from typing import Any

from PySubRip.Helpers.Tests import log_input_expected_error, log_input_expected_result, log_test_name

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that logs the expected and actual values of every assertion
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def assertLoggedEqual(self, description : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected, actual)
        self.assertEqual(expected, actual, description)

    def assertLoggedSequenceEqual(self, description : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected, actual)
        self.assertSequenceEqual(expected, actual, description)

    def assertLoggedTrue(self, description : str, condition : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, True, bool(condition))
        self.assertTrue(condition, description)

    def assertLoggedFalse(self, description : str, condition : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, False, bool(condition))
        self.assertFalse(condition, description)

    def assertLoggedIsNone(self, description : str, value : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, None, value)
        self.assertIsNone(value, description)

    def assertLoggedIs(self, description : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected, actual)
        self.assertIs(expected, actual, description)

    def assertLoggedIsInstance(self, description : str, value : Any, expected_type : type, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected_type.__name__, type(value).__name__)
        self.assertIsInstance(value, expected_type, description)

    def assertLoggedRaises(self, description : str, expected_error : type[Exception], func, *args, **kwargs) -> Any:
        """
        Assert that calling func raises expected_error and return the error for further checks
        """
        error : Exception|None = None
        try:
            func(*args, **kwargs)
        except Exception as e:
            error = e

        log_input_expected_error(description, expected_error, error)
        self.assertIsInstance(error, expected_error, description)
        return error


SAMPLE_SUBRIP = (
    "1\n"
    "00:00:01,000 --> 00:00:03,500\n"
    "It's been a long time.\n"
    "\n"
    "2\n"
    "00:00:04,000 --> 00:00:06,250\n"
    "<i>Too long.</i>\n"
    "- Where have you been?\n"
    "\n"
    "\n"
    "3\n"
    "00:00:07,100 --> 00:00:09,900\n"
    "Away.\n"
    "\n"
    "5\n"
    "00:01:15,000 --> 00:01:18,000\n"
    "Numbers don't have to be contiguous.\n"
)

SAMPLE_SUBRIP_CRLF = SAMPLE_SUBRIP.replace("\n", "\r\n")

SAMPLE_SUBRIP_WITH_BOM = "\ufeff" + SAMPLE_SUBRIP.replace("\n2\n", "\n\ufeff2\n")
