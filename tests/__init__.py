# encoding: utf-8
from contextlib import contextmanager
from unittest import TestCase

from mo_testing.fuzzytestcase import FuzzyTestCase

from mo_signature import Engine, ParseException, parse_signature


class SignatureTestCase(FuzzyTestCase):
    """
    Every test runs against a fresh Engine, so settings do not leak between tests
    """

    def setUp(self):
        self.engine = Engine()

    def tearDown(self):
        self.engine.release()

    def assertInputs(self, signature, expected_names, expected_types):
        """
        Compare the names and types of the top-level inputs, in order
        """
        if isinstance(signature, str):
            signature = parse_signature(signature)
        self.assertEqual([i.name for i in signature.inputs], expected_names)
        self.assertEqual([i.type for i in signature.inputs], expected_types)
        return signature

    @contextmanager
    def assertRaisesParseException(self, exc_type=ParseException, msg=None):
        with TestCase.assertRaises(self, exc_type, msg=msg) as context:
            yield context
