from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Tuple
import re
from simplelang.errors import LexError

DEBUG_LEX = False

def log(msg: str):
    if DEBUG_LEX:
        print(f"[LEX] {msg}")

# ======================================
# Token Definition
# ======================================

class TokenKind(Enum):
    NUMBER = auto()
    IDENTIFIER = auto()

    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    REMAINDER = auto()
    POWER = auto()

    GREATER = auto()
    LESS = auto()
    GREATER_EQUAL = auto()
    LESS_EQUAL = auto()
    EQUAL_EQUAL = auto()
    NOT_EQUAL = auto()

    ASSIGN = auto()
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    LBRACE = auto()
    RBRACE = auto()

    LET = auto()
    INPUT = auto()
    OUTPUT = auto()
    IF = auto()
    ELSE = auto()

    END_OF_INPUT = auto()

    def __str__(self):
        return self.name

@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __repr__(self):
        return f"{self.kind}({self.text})"

END_TOKEN = Token(TokenKind.END_OF_INPUT, "")

# ======================================
# Tokenizer Config
# ======================================

class TokenizerConfig:
    def __init__(self, keywords: Dict[str, TokenKind], operators: Dict[str, TokenKind], delimiters: Dict[str, TokenKind]):
        self.keywords = keywords
        self.operators = operators
        self.delimiters = delimiters

    @staticmethod
    def default() -> 'TokenizerConfig':
        return TokenizerConfig(
            keywords={
                "let": TokenKind.LET,
                "input": TokenKind.INPUT,
                "output": TokenKind.OUTPUT,
                "if": TokenKind.IF,
                "else": TokenKind.ELSE,
            },
            operators={
                "==": TokenKind.EQUAL_EQUAL,
                "!=": TokenKind.NOT_EQUAL,
                ">=": TokenKind.GREATER_EQUAL,
                "<=": TokenKind.LESS_EQUAL,
                "+": TokenKind.PLUS,
                "-": TokenKind.MINUS,
                "*": TokenKind.MULTIPLY,
                "/": TokenKind.DIVIDE,
                "%": TokenKind.REMAINDER,
                "^": TokenKind.POWER,
                ">": TokenKind.GREATER,
                "<": TokenKind.LESS,
                "=": TokenKind.ASSIGN,
            },
            delimiters={
                "(": TokenKind.LPAREN,
                ")": TokenKind.RPAREN,
                ",": TokenKind.COMMA,
                "{": TokenKind.LBRACE,
                "}": TokenKind.RBRACE,
            }
        )

# ======================================
# Tokenizer Types and Constructors
# ======================================

# Tokenizer: (input_str, pos) -> (token or None for skipped text, next_pos) or None if no match
Tokenizer = Callable[[str, int], Optional[Tuple[Optional[Token], int]]]

def lex_regex_longest(pattern: str, converter: Callable[[str], Optional[Token]]) -> Tokenizer:
    regex = re.compile(pattern)

    def tokenizer(input_str: str, pos: int) -> Optional[Tuple[Optional[Token], int]]:
        m = regex.match(input_str, pos)
        if m and m.end() > pos:
            sub = m.group(0)
            return converter(sub), pos + len(sub)
        return None

    return tokenizer

def lex_delim(delimiters: Dict[str, TokenKind]) -> Tokenizer:
    def tokenizer(input_str: str, pos: int) -> Optional[Tuple[Optional[Token], int]]:
        for d, kind in delimiters.items():
            if input_str.startswith(d, pos):
                return Token(kind, d), pos + len(d)
        return None
    return tokenizer

def build_tokenizers(config: TokenizerConfig) -> List[Tokenizer]:
    ws_regex = r"\s+"
    number_regex = r"[0-9]+(?:\.[0-9]*)?"
    # letters first, then letters or digits
    ident_regex = r"[^\W\d_][^\W_]*"

    # Longest operators first so ">=" wins over ">"
    sorted_ops = sorted(config.operators.keys(), key=len, reverse=True)
    op_regex = "|".join(re.escape(k) for k in sorted_ops)

    def keyword_or_ident(s: str) -> Token:
        kind = config.keywords.get(s.lower())
        return Token(kind, s) if kind is not None else Token(TokenKind.IDENTIFIER, s)

    return [
        lex_regex_longest(ws_regex, lambda s: None),
        lex_regex_longest(number_regex, lambda s: Token(TokenKind.NUMBER, s)),
        lex_regex_longest(ident_regex, keyword_or_ident),
        lex_regex_longest(op_regex, lambda s: Token(config.operators[s], s)),
        lex_delim(config.delimiters),
    ]

_default_tokenizers: Optional[List[Tokenizer]] = None

def _tokenizers_for(config: Optional[TokenizerConfig]) -> List[Tokenizer]:
    global _default_tokenizers
    if config is not None:
        return build_tokenizers(config)
    if _default_tokenizers is None:
        _default_tokenizers = build_tokenizers(TokenizerConfig.default())
    return _default_tokenizers

# ======================================
# Main Lexer
# ======================================

def tokenize(text: str, config: Optional[TokenizerConfig] = None) -> List[Token]:
    """Split one statement chunk into tokens, always ending with END_OF_INPUT."""
    text = text or ""
    tokenizers = _tokenizers_for(config)
    tokens: List[Token] = []
    pos = 0

    while pos < len(text):
        for tokenizer in tokenizers:
            match = tokenizer(text, pos)
            if match is not None:
                tok, pos = match
                if tok is not None:
                    tokens.append(tok)
                break
        else:
            c = text[pos]
            if c == "!":
                raise LexError(f"Expected '=' after '!' at column {pos + 1} in: {text}")
            raise LexError(f"Unexpected character '{c}' at column {pos + 1} in: {text}")

    tokens.append(END_TOKEN)
    log(f"{text!r} -> {show_tokens(tokens)}")
    return tokens

def show_tokens(tokens: List[Token]) -> str:
    return " ".join(repr(t) for t in tokens)
