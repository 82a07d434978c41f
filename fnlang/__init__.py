"""
fnlang Compiler Package

Front end for fnlang, a minimal statically-typed language.

Architecture:
    fnlang/
    └── lexer/           # Tokenization and lexical analysis

Only the lexer exists so far; a parser will consume its token stream.

Author: xwest
License: MIT
"""

from ._version import __version__

__author__ = "xwest"
__email__ = "dev@fnlang.org"
__license__ = "MIT"

from .lexer import Lexer, tokenize_string

__all__ = [
    # Core classes  
    "Lexer",
    "tokenize_string",
    
    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
