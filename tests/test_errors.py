"""
Tests for lexer diagnostics and error construction.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from fnlang.lexer.errors import (
    SourceLocation, Diagnostic, LexerError, LexerErrorKind, UnrecognizedLexemeError,
    FailedToParseIntegerError, ERROR_CODES, create_invalid_character_error,
    create_invalid_number_error
)


class TestSourceLocation(unittest.TestCase):
    
    def test_str_is_one_based(self):
        location = SourceLocation("main.fn", 0, 4, 4)
        self.assertEqual(str(location), "main.fn:1:5")
    
    def test_repr_is_raw(self):
        location = SourceLocation("main.fn", 2, 3, 10)
        self.assertEqual(repr(location), "SourceLocation('main.fn', 2, 3, 10)")


class TestDiagnostic(unittest.TestCase):
    
    def test_format(self):
        diagnostic = Diagnostic(
            message="Invalid character: '@'",
            location=SourceLocation("main.fn", 1, 2, 5),
            severity="error",
            code="L001",
            help_text="Not allowed.",
            suggestions=["Remove it"]
        )
        self.assertEqual(
            str(diagnostic),
            "ERROR[L001]: Invalid character: '@'\n"
            "  --> main.fn:2:3\n"
            "  help: Not allowed.\n"
            "  suggestions:\n"
            "    - Remove it\n"
        )
    
    def test_format_without_extras(self):
        diagnostic = Diagnostic("oops", SourceLocation("<string>", 0, 0, 0), "warning")
        self.assertEqual(str(diagnostic), "WARNING: oops\n  --> <string>:1:1\n")


class TestErrorFactories(unittest.TestCase):
    
    def setUp(self):
        self.location = SourceLocation("<string>", 0, 2, 2)
    
    def test_invalid_character(self):
        error = create_invalid_character_error("@", self.location)
        self.assertIsInstance(error, LexerError)
        self.assertIs(error.kind, LexerErrorKind.UNRECOGNIZED_LEXEME)
        self.assertEqual(error.char, "@")
        self.assertEqual(error.code, "L001")
        self.assertEqual(error.location, self.location)
        self.assertIn("'@'", error.diagnostic.message)
    
    def test_whitespace_gets_named(self):
        for char, name in ((" ", "space"), ("\t", "tab"), ("\r", "carriage return")):
            with self.subTest(name=name):
                error = create_invalid_character_error(char, self.location)
                self.assertEqual(error.diagnostic.message, f"Unexpected {name}")
                self.assertIn("newlines", error.diagnostic.help_text)
    
    def test_non_printable_character(self):
        error = create_invalid_character_error("\x07", self.location)
        self.assertIn("U+0007", error.diagnostic.message)
        self.assertIn("U+0007", error.diagnostic.help_text)
    
    def test_invalid_number(self):
        error = create_invalid_number_error("_1", self.location, "Must start with a digit.")
        self.assertIsInstance(error, FailedToParseIntegerError)
        self.assertIs(error.kind, LexerErrorKind.FAILED_TO_PARSE_INTEGER)
        self.assertEqual(error.lexeme, "_1")
        self.assertEqual(error.code, "L003")
        self.assertIn("L003", ERROR_CODES)
    
    def test_str_is_diagnostic(self):
        error = create_invalid_number_error("99", self.location, "Too big.", code="L007")
        self.assertTrue(str(error).startswith("ERROR[L007]: Invalid integer literal: '99'"))
    
    def test_kinds_are_distinct(self):
        self.assertFalse(issubclass(UnrecognizedLexemeError, FailedToParseIntegerError))
        self.assertFalse(issubclass(FailedToParseIntegerError, UnrecognizedLexemeError))


if __name__ == "__main__":
    unittest.main()
