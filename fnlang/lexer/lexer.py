"""
fnlang Lexer - turns source text into spanned tokens

The language is tiny: four reserved words, five punctuation characters,
identifiers and decimal integers. Whitespace other than newline is not
allowed between tokens, and the first bad character aborts the whole run.

Position bookkeeping lives in a ScanState created per tokenize() call,
so one Lexer can be reused (or shared between threads) freely.

xwest
"""

import logging
import unicodedata
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .tokens import (
    Token, TokenType, SpannedToken, KEYWORDS, PUNCTUATION, I64_MAX
)
from .errors import (
    LexerError, SourceLocation, create_invalid_character_error,
    create_invalid_number_error
)

logger = logging.getLogger(__name__)

_I64_MAX_DIGITS = len(str(I64_MAX))

# Letter numbers (Nl) such as roman numerals count as alphabetic; ideographs
# with a numeric value (e.g. 五) are letters, not numbers.
_NUMERIC_CATEGORIES = ("Nd", "Nl", "No")


def _is_alphabetic(char: str) -> bool:
    return char.isalpha() or unicodedata.category(char) == "Nl"


def _is_numeric(char: str) -> bool:
    return unicodedata.category(char) in _NUMERIC_CATEGORIES


def _is_identifier_continue(char: str) -> bool:
    return _is_alphabetic(char) or _is_numeric(char) or char == '_'


@dataclass
class ScanState:
    """
    Mutable position counters for a single tokenize() call.
    
    char_count is the number of characters consumed from the start of the
    source and doubles as the index of the next character. column is the
    number of characters consumed on the current line, so the character
    just consumed sits at column - 1.
    """
    source: str
    char_count: int = 0
    column: int = 0
    line: int = 0
    
    def at_end(self) -> bool:
        return self.char_count >= len(self.source)
    
    def peek(self) -> Optional[str]:
        """Look at the next character without consuming it."""
        if self.at_end():
            return None
        return self.source[self.char_count]
    
    def advance(self) -> str:
        """Consume one character, updating the counters."""
        char = self.source[self.char_count]
        self.char_count += 1
        self.column += 1
        return char
    
    def newline(self):
        self.line += 1
        self.column = 0
    
    def location(self, filename: str, column: int) -> SourceLocation:
        offset = self.char_count - (self.column - column)
        return SourceLocation(filename, self.line, column, offset)


class Lexer:
    """
    fnlang lexical analyzer.
    
    Converts source code text into a list of spanned tokens. Fails fast:
    the first unrecognized character or unparsable integer raises a
    LexerError and no tokens are returned.
    """
    
    def __init__(self, filename: str = "<unknown>"):
        """
        Initialize the lexer.
        
        Args:
            filename: Name of source file for error reporting
        """
        self.filename = filename
        self.keywords: Mapping[str, TokenType] = KEYWORDS
    
    def tokenize(self, source: str) -> List[SpannedToken]:
        """
        Tokenize the entire source code.
        
        Args:
            source: Complete source text
            
        Returns:
            List of spanned tokens in source order (empty for empty input)
            
        Raises:
            LexerError: On the first character or literal that can't be scanned
        """
        state = ScanState(source)
        tokens: List[SpannedToken] = []
        logger.debug("Tokenizing %s (%d characters)", self.filename, len(source))
        
        while not state.at_end():
            char = state.advance()
            try:
                token = self._scan_token(char, state)
            except LexerError as e:
                logger.debug("Tokenizing %s aborted: %s", self.filename, e)
                raise
            if token is not None:
                tokens.append(token)
        
        logger.debug("Tokenized %s: %d tokens on %d lines",
                     self.filename, len(tokens), state.line + 1)
        return tokens
    
    def _scan_token(self, char: str, state: ScanState) -> Optional[SpannedToken]:
        """Dispatch on the character just consumed."""
        if char in PUNCTUATION:
            return SpannedToken.new_single(
                Token(PUNCTUATION[char]), state.line, state.column - 1
            )
        if _is_alphabetic(char):
            return self._scan_identifier(char, state)
        # '_' starts a number but never continues one, so '_'-led runs
        # always fail to parse
        if _is_numeric(char) or char == '_':
            return self._scan_number(char, state)
        if char == '\n':
            state.newline()
            return None
        raise create_invalid_character_error(
            char, state.location(self.filename, state.column - 1)
        )
    
    def _scan_identifier(self, char: str, state: ScanState) -> SpannedToken:
        """Scan an identifier or reserved word starting with char."""
        start = state.column - 1
        chars = [char]
        
        while True:
            next_char = state.peek()
            if next_char is None or not _is_identifier_continue(next_char):
                break
            chars.append(state.advance())
        
        lexeme = ''.join(chars)
        keyword = self.keywords.get(lexeme)
        token = Token(keyword) if keyword is not None else Token.identifier(lexeme)
        return SpannedToken.new(token, state.line, start, state.column - 1)
    
    def _scan_number(self, char: str, state: ScanState) -> SpannedToken:
        """Scan a decimal integer literal starting with char."""
        start = state.column - 1
        chars = [char]
        
        while True:
            next_char = state.peek()
            if next_char is None or not _is_numeric(next_char):
                break
            chars.append(state.advance())
        
        lexeme = ''.join(chars)
        value = self._parse_integer(lexeme, state.location(self.filename, start))
        return SpannedToken.new(Token.integer(value), state.line, start, state.column - 1)
    
    def _parse_integer(self, lexeme: str, location: SourceLocation) -> int:
        # Numeric runs may hold superscripts, fractions and non-ASCII digits,
        # none of which are valid in a literal
        if not (lexeme.isascii() and lexeme.isdigit()):
            if lexeme.startswith('_'):
                reason = "Integer literals must start with a digit."
            else:
                reason = "Integer literals may only contain the digits 0-9."
            raise create_invalid_number_error(lexeme, location, reason)
        
        significant = lexeme.lstrip('0') or '0'
        if len(significant) > _I64_MAX_DIGITS or int(significant) > I64_MAX:
            raise create_invalid_number_error(
                lexeme,
                location,
                f"Integer literals must not exceed {I64_MAX}.",
                code="L007"
            )
        return int(significant)


def tokenize_string(source: str, filename: str = "<string>") -> List[SpannedToken]:
    """
    Convenience function to tokenize a source string.
    
    Args:
        source: Source code string
        filename: Filename for error reporting
        
    Returns:
        List of spanned tokens
        
    Raises:
        LexerError: If lexing fails
    """
    return Lexer(filename).tokenize(source)
