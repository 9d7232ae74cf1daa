from typing import List, Optional
from ..lexing import Token, TokenKind, TokenizerConfig, tokenize
from ..syntax import ast
from ..errors import ParseError
from .engine import Parser

def parse_statement(tokens: List[Token], debug: Optional[bool] = None) -> ast.Node:
    """Parse exactly one statement; anything after it is an error."""
    parser = Parser(tokens, debug=debug)
    node = parser.parse_statement()
    if not parser.at_end():
        raise ParseError(f"Expected {TokenKind.END_OF_INPUT} but got {Parser._describe(parser.current)}")
    return node

def parse_expression(tokens: List[Token]) -> ast.Node:
    parser = Parser(tokens)
    node = parser.parse_expression()
    parser.expect(TokenKind.END_OF_INPUT)
    return node

def parse_line(text: str, config: Optional[TokenizerConfig] = None) -> ast.Node:
    return parse_statement(tokenize(text, config))
