"""
Token definitions for the fnlang lexer.

This module defines the closed set of token types supported by fnlang:
- Reserved words (fn, return, void, i32)
- Single-character punctuation
- Identifiers and integer literals (the only tokens with a payload)

Tokens are paired with a Span locating the lexeme in the source.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union


I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


class TokenType(Enum):
    """
    Enumeration of all token types in fnlang.
    
    Organized by category for clarity and maintainability.
    """
    
    # ========================================================================
    # Reserved words
    # ========================================================================
    FN = auto()                     # fn
    RETURN = auto()                 # return
    VOID = auto()                   # void
    I32 = auto()                    # i32
    
    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COLON = auto()                  # :
    
    # ========================================================================
    # Identifiers and literals
    # ========================================================================
    IDENTIFIER = auto()             # main, random_ident123
    INTEGER = auto()                # 42


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the fnlang language.
    
    Equality is structural: two tokens are equal when their type and
    payload are equal. Only IDENTIFIER (str) and INTEGER (int) carry a value.
    """
    type: TokenType
    value: Union[str, int, None] = None
    
    def __post_init__(self):
        if self.type == TokenType.IDENTIFIER:
            if not isinstance(self.value, str) or not self.value:
                raise ValueError(f"IDENTIFIER needs a non-empty str, got {self.value!r}")
        elif self.type == TokenType.INTEGER:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise ValueError(f"INTEGER needs an int, got {self.value!r}")
            if not I64_MIN <= self.value <= I64_MAX:
                raise ValueError(f"integer {self.value} does not fit in 64 bits")
        elif self.value is not None:
            raise ValueError(f"{self.type.name} carries no value, got {self.value!r}")
    
    @classmethod
    def identifier(cls, text: str) -> "Token":
        return cls(TokenType.IDENTIFIER, text)
    
    @classmethod
    def integer(cls, value: int) -> "Token":
        return cls(TokenType.INTEGER, value)
    
    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name
    
    @property
    def spelling(self) -> str:
        """Canonical source text for this token."""
        if self.type == TokenType.INTEGER:
            return str(self.value)
        if self.type == TokenType.IDENTIFIER:
            return self.value
        return SPELLINGS[self.type]
    
    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORDS.values()
    
    @property
    def is_punctuation(self) -> bool:
        return self.type in PUNCTUATION.values()
    
    @property
    def is_literal(self) -> bool:
        return self.type == TokenType.INTEGER
    
    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER


@dataclass(frozen=True)
class Span:
    """
    Location of a lexeme within its source line.
    
    All fields are zero-based. start and end are inclusive offsets from the
    beginning of the line, so a single-character token has start == end.
    """
    line: int
    start: int
    end: int
    
    @classmethod
    def single(cls, line: int, pos: int) -> "Span":
        return cls(line, pos, pos)
    
    def __len__(self) -> int:
        return self.end - self.start + 1
    
    def __str__(self) -> str:
        return f"{self.line}:{self.start}-{self.end}"
    
    def extract(self, source: str) -> str:
        """Re-slice the lexeme covered by this span out of the original source."""
        return source.split("\n")[self.line][self.start:self.end + 1]


@dataclass(frozen=True)
class SpannedToken:
    """A token together with the span of source text it was scanned from."""
    token: Token
    span: Span
    
    @classmethod
    def new(cls, token: Token, line: int, start: int, end: int) -> "SpannedToken":
        return cls(token, Span(line, start, end))
    
    @classmethod
    def new_single(cls, token: Token, line: int, pos: int) -> "SpannedToken":
        return cls(token, Span.single(line, pos))
    
    @property
    def line(self) -> int:
        return self.span.line
    
    @property
    def start(self) -> int:
        return self.span.start
    
    @property
    def end(self) -> int:
        return self.span.end
    
    def __str__(self) -> str:
        return f"{self.token} @ {self.span}"


# Lookup tables used by the lexer. Read-only, never mutated after import.

KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "fn": TokenType.FN,
    "i32": TokenType.I32,
    "return": TokenType.RETURN,
    "void": TokenType.VOID,
})

PUNCTUATION: Mapping[str, TokenType] = MappingProxyType({
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ":": TokenType.COLON,
})

SPELLINGS: Mapping[TokenType, str] = MappingProxyType({
    token_type: text
    for table in (KEYWORDS, PUNCTUATION)
    for text, token_type in table.items()
})
