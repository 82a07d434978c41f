"""
Error handling for the fnlang lexer.

Provides error reporting with source location information and
IDE-friendly diagnostics. The lexer stops at the first error, so every
diagnostic produced here is fatal.

Author: xwest
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.
    
    line and column are zero-based, matching token spans; offset counts
    characters from the start of the source.
    """
    filename: str
    line: int
    column: int
    offset: int
    
    def __str__(self) -> str:
        # Editors count from one
        return f"{self.filename}:{self.line + 1}:{self.column + 1}"
    
    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass
class Diagnostic:
    """A lexer diagnostic ready to be shown to the user."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None
    
    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"
        
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        
        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"
        
        return result


class LexerErrorKind(Enum):
    UNRECOGNIZED_LEXEME = "UnrecognizedLexeme"
    FAILED_TO_PARSE_INTEGER = "FailedToParseInteger"


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.
    
    Contains detailed diagnostic information for error reporting.
    """
    
    kind: LexerErrorKind
    
    def __init__(
        self, 
        message: str, 
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location, 
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
    
    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location
    
    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code
    
    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedLexemeError(LexerError):
    """A character that matches no token rule."""
    
    kind = LexerErrorKind.UNRECOGNIZED_LEXEME
    
    def __init__(self, char: str, location: SourceLocation, **kwargs):
        super().__init__(_describe_character(char), location, **kwargs)
        self.char = char


class FailedToParseIntegerError(LexerError):
    """A digit run that is not a valid signed 64-bit integer."""
    
    kind = LexerErrorKind.FAILED_TO_PARSE_INTEGER
    
    def __init__(self, lexeme: str, location: SourceLocation, **kwargs):
        super().__init__(f"Invalid integer literal: '{lexeme}'", location, **kwargs)
        self.lexeme = lexeme


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L003": "Invalid numeric literal",
    "L007": "Number literal overflow",
}

_WHITESPACE_NAMES = {
    ' ': "space",
    '\t': "tab",
    '\r': "carriage return",
}


def _describe_character(char: str) -> str:
    if char in _WHITESPACE_NAMES:
        return f"Unexpected {_WHITESPACE_NAMES[char]}"
    if char.isprintable():
        return f"Invalid character: '{char}'"
    return f"Invalid character: U+{ord(char):04X}"


# Helper functions for creating common errors
def create_invalid_character_error(char: str, location: SourceLocation) -> UnrecognizedLexemeError:
    """Create an error for a character no token can start with."""
    if char in _WHITESPACE_NAMES:
        help_text = "Only newlines may separate tokens."
        suggestions = ["Remove the whitespace", "Use a newline instead"]
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in fnlang source code."
        suggestions = None
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
        suggestions = None
    
    return UnrecognizedLexemeError(
        char,
        location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_invalid_number_error(lexeme: str, location: SourceLocation, reason: str,
                                code: str = "L003") -> FailedToParseIntegerError:
    """Create an error for an invalid integer literal."""
    return FailedToParseIntegerError(
        lexeme,
        location,
        code=code,
        help_text=reason,
    )
