"""
Tests for lexing error values and diagnostics.
"""

import copy
import pickle
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from calclex.lexer import (
    tokenize, LexerConfig, Grammar, LexingError, IncorrectNumber, IncorrectExpression,
    NumberLexingError, ExpressionLexingError, Diagnostic
)
from calclex.lexer.errors import (
    ERROR_CODES, expected_digit_after_point, unexpected_character, unexpected_eoi,
    strict_number_error
)


class TestLexingErrorValues(unittest.TestCase):

    def test_equality_ignores_position(self):
        first = unexpected_character("x")
        second = IncorrectExpression(ExpressionLexingError.UNEXPECTED_CHARACTER, "x", position=9)
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))

    def test_character_takes_part_in_equality(self):
        self.assertNotEqual(unexpected_character("x"), unexpected_character("y"))

    def test_families_are_distinct(self):
        self.assertNotEqual(expected_digit_after_point(), unexpected_eoi())
        self.assertIsInstance(expected_digit_after_point(), IncorrectNumber)
        self.assertIsInstance(unexpected_eoi(), IncorrectExpression)
        self.assertIsInstance(unexpected_eoi(), LexingError)

    def test_every_kind_has_a_code(self):
        kinds = list(NumberLexingError) + list(ExpressionLexingError)
        self.assertEqual(set(ERROR_CODES), set(kinds))
        self.assertEqual(len(set(ERROR_CODES.values())), len(kinds))

    def test_codes(self):
        self.assertEqual(expected_digit_after_point().code, "L101")
        self.assertEqual(unexpected_character("?").code, "L201")
        self.assertEqual(unexpected_eoi().code, "L202")

    def test_strict_number_error(self):
        error = strict_number_error(NumberLexingError.EXPECTED_POINT_AFTER_ZERO)
        self.assertEqual(error.code, "L102")
        with self.assertRaises(ValueError):
            strict_number_error(NumberLexingError.EXPECTED_DIGIT_AFTER_POINT)

    def test_repr(self):
        self.assertEqual(repr(unexpected_character("f")), "IncorrectExpression(UNEXPECTED_CHARACTER, 'f')")
        self.assertEqual(repr(expected_digit_after_point()), "IncorrectNumber(EXPECTED_DIGIT_AFTER_POINT)")

    def _raised(self, text, config=None):
        with self.assertRaises(LexingError) as cm:
            tokenize(text, config)
        return cm.exception

    def test_copy_keeps_error_fields(self):
        for text in ("43.", "43  f  ", "43 +"):
            with self.subTest(text=text):
                error = self._raised(text)
                duplicate = copy.copy(error)
                self.assertIs(type(duplicate), type(error))
                self.assertEqual(duplicate, error)
                self.assertEqual(duplicate.position, error.position)
                self.assertEqual(str(duplicate), str(error))

    def test_pickle_round_trip(self):
        for error in (self._raised("43."), self._raised("43  f  "),
                      self._raised("00.5", LexerConfig(grammar=Grammar.STRICT))):
            with self.subTest(error=error):
                restored = pickle.loads(pickle.dumps(error))
                self.assertIs(type(restored), type(error))
                self.assertEqual(restored, error)
                self.assertEqual(restored.kind, error.kind)
                self.assertEqual(restored.character, error.character)
                self.assertEqual(restored.position, error.position)
                self.assertEqual(restored.code, error.code)

    def test_str_includes_position(self):
        with self.assertRaises(LexingError) as cm:
            tokenize("43  f  ")
        self.assertEqual(str(cm.exception), "Unexpected character: 'f' at position 4")


class TestDiagnostic(unittest.TestCase):

    def test_diagnostic_from_error(self):
        with self.assertRaises(LexingError) as cm:
            tokenize("43.")
        diagnostic = cm.exception.diagnostic
        self.assertIsInstance(diagnostic, Diagnostic)
        self.assertEqual(diagnostic.code, "L101")
        self.assertEqual(diagnostic.position, 3)
        self.assertIsNotNone(diagnostic.help_text)

    def test_diagnostic_rendering(self):
        diagnostic = unexpected_character("f").diagnostic
        diagnostic.position = 4
        rendered = str(diagnostic)
        self.assertTrue(rendered.startswith("ERROR[L201]: Unexpected character: 'f'"))
        self.assertIn("--> column 5", rendered)
        self.assertIn("help:", rendered)

    def test_diagnostic_without_position(self):
        rendered = str(unexpected_eoi().diagnostic)
        self.assertNotIn("-->", rendered)

    def test_to_dict(self):
        data = unexpected_eoi().diagnostic.to_dict()
        self.assertEqual(data["code"], "L202")
        self.assertEqual(data["severity"], "error")
        self.assertIsNone(data["position"])


if __name__ == '__main__':
    unittest.main()
