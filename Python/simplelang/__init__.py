from .lexing import Token, TokenKind, TokenizerConfig, tokenize
from .parser.main import parse_statement, parse_expression, parse_line
from .segmenter import Chunk, segment_lines
from .runtime import VariableStore, Evaluator
from .core import Interpreter, StatementError, run_program, set_debug
from .errors import (
    SimpleLangError, LexError, ParseError,
    RedeclaredVariableError, UndeclaredVariableError,
    DivisionByZeroError, InvalidInputError,
)

__all__ = [
    "Token", "TokenKind", "TokenizerConfig", "tokenize",
    "parse_statement", "parse_expression", "parse_line",
    "Chunk", "segment_lines",
    "VariableStore", "Evaluator",
    "Interpreter", "StatementError", "run_program", "set_debug",
    "SimpleLangError", "LexError", "ParseError",
    "RedeclaredVariableError", "UndeclaredVariableError",
    "DivisionByZeroError", "InvalidInputError",
]
