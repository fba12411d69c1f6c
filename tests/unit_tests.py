import logging
import os
import sys
import unittest

base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if base_path not in sys.path:
    sys.path.insert(0, base_path)

from PySubRip.Helpers.Tests import create_logfile

def discover_tests(base_dir=None):
    """Automatically discover all test modules following naming conventions.

    Args:
        base_dir: Base directory to search from. If None, uses parent of this file.
    """
    if base_dir is None:
        base_dir = base_path

    loader = unittest.TestLoader()
    original_dir = os.getcwd()

    try:
        os.chdir(base_dir)

        test_dir = os.path.join(base_dir, 'tests', 'PySubRipTests')
        if not os.path.exists(test_dir):
            return unittest.TestSuite()

        return loader.discover(test_dir, pattern='test_*.py', top_level_dir=test_dir)

    finally:
        os.chdir(original_dir)

if __name__ == '__main__':
    results_directory = os.path.join(base_path, "test_results")

    logging.getLogger().setLevel(logging.INFO)

    create_logfile(results_directory, "unit_tests.log")

    runner = unittest.TextTestRunner(verbosity=1)
    result = runner.run(discover_tests())
    if not result.wasSuccessful():
        print("Some tests failed or had errors.")
        sys.exit(1)
