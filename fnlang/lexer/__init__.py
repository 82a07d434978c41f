"""
fnlang Lexer Package

Implements the lexical analyzer (tokenizer) for the fnlang language.

Key Features:
- Reserved words, punctuation, identifiers and 64-bit integer literals
- Zero-based line/column spans on every token
- Fail-fast error reporting with source locations
- Reentrant: scanning state is local to each tokenize() call

Author: xwest
"""

from .tokens import Token, TokenType, Span, SpannedToken, KEYWORDS, PUNCTUATION
from .lexer import Lexer, tokenize_string
from .errors import (
    LexerError,
    LexerErrorKind,
    UnrecognizedLexemeError,
    FailedToParseIntegerError,
    SourceLocation,
)

__all__ = [
    "Lexer", 
    "tokenize_string",
    "Token", 
    "TokenType", 
    "Span",
    "SpannedToken",
    "KEYWORDS",
    "PUNCTUATION",
    "SourceLocation",
    "LexerError",
    "LexerErrorKind",
    "UnrecognizedLexemeError",
    "FailedToParseIntegerError",
]
