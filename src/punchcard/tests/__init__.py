"""Tests for punchcard"""
import unittest

from punchcard.tests import test_main
from punchcard.tests.core import test_parser, test_time, test_utils


def test_suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite([
        loader.loadTestsFromModule(test_time),
        loader.loadTestsFromModule(test_utils),
        loader.loadTestsFromModule(test_parser),
        loader.loadTestsFromModule(test_main),
    ])


def main():
    unittest.main(module='punchcard.tests', defaultTest='test_suite')
