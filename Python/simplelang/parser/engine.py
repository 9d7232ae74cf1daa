from typing import FrozenSet, List, Optional
from ..lexing import Token, TokenKind, END_TOKEN
from ..syntax import ast
from ..errors import ParseError

DEBUG_PARSE = False

# Parentheses plus if-blocks one statement may open
MAX_NESTING = 64

# Binary precedence levels, lowest first. Every level is left-associative.
PRECEDENCE: List[FrozenSet[TokenKind]] = [
    frozenset({
        TokenKind.EQUAL_EQUAL, TokenKind.NOT_EQUAL,
        TokenKind.GREATER, TokenKind.LESS,
        TokenKind.GREATER_EQUAL, TokenKind.LESS_EQUAL,
    }),
    frozenset({TokenKind.PLUS, TokenKind.MINUS}),
    frozenset({TokenKind.MULTIPLY, TokenKind.DIVIDE, TokenKind.REMAINDER}),
    frozenset({TokenKind.POWER}),
]

EXPRESSION_STARTS = frozenset({
    TokenKind.NUMBER, TokenKind.IDENTIFIER, TokenKind.LPAREN, TokenKind.INPUT,
})

# ======================================
# Recursive Descent Parser
# ======================================

class Parser:
    def __init__(self, tokens: List[Token], debug: Optional[bool] = None):
        self.tokens = tokens
        self.pos = 0
        self.nesting = 0
        self.debug = DEBUG_PARSE if debug is None else debug

    def log(self, msg: str):
        if self.debug:
            print(f"[PARSE] {msg}")

    def enter(self):
        self.nesting += 1
        if self.nesting > MAX_NESTING:
            raise ParseError(f"Nested too deeply (more than {MAX_NESTING} levels)")

    def leave(self):
        self.nesting -= 1

    # --- Cursor ---

    @property
    def current(self) -> Token:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return END_TOKEN

    def peek(self, offset: int = 1) -> Token:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return END_TOKEN

    def at_end(self) -> bool:
        return self.current.kind == TokenKind.END_OF_INPUT

    def consume(self) -> Token:
        tok = self.current
        self.pos += 1
        return tok

    def expect(self, kind: TokenKind) -> Token:
        tok = self.current
        if tok.kind != kind:
            raise ParseError(f"Expected {kind} but got {self._describe(tok)}")
        self.pos += 1
        return tok

    @staticmethod
    def _describe(tok: Token) -> str:
        if tok.kind == TokenKind.END_OF_INPUT:
            return "END_OF_INPUT"
        return f"{tok.kind} '{tok.text}'"

    # --- Statements ---

    def parse_statement(self) -> ast.Node:
        tok = self.current
        kind = tok.kind

        if kind == TokenKind.LET:
            node = self.parse_let()
        elif kind == TokenKind.OUTPUT:
            node = self.parse_output()
        elif kind == TokenKind.IF:
            node = self.parse_if()
        elif kind == TokenKind.IDENTIFIER and self.peek().kind == TokenKind.ASSIGN:
            node = self.parse_assign()
        elif kind in EXPRESSION_STARTS:
            node = ast.ExprStmt(self.parse_expression())
        else:
            raise ParseError(f"Unknown statement starting with {self._describe(tok)}")

        self.log(f"statement: {node}")
        return node

    def parse_let(self) -> ast.LetDecl:
        self.expect(TokenKind.LET)
        name = self.expect(TokenKind.IDENTIFIER).text
        if self.current.kind == TokenKind.ASSIGN:
            self.consume()
            return ast.LetDecl(name, self.parse_expression())
        return ast.LetDecl(name)

    def parse_assign(self) -> ast.Assign:
        name = self.expect(TokenKind.IDENTIFIER).text
        self.expect(TokenKind.ASSIGN)
        return ast.Assign(name, self.parse_expression())

    def parse_output(self) -> ast.Output:
        self.expect(TokenKind.OUTPUT)
        self.expect(TokenKind.LPAREN)
        value = self.parse_expression()
        self.expect(TokenKind.RPAREN)
        return ast.Output(value)

    def parse_if(self) -> ast.Node:
        self.expect(TokenKind.IF)
        self.expect(TokenKind.LPAREN)
        condition = self.parse_expression()
        self.expect(TokenKind.RPAREN)
        then_body = self.parse_block()

        if self.current.kind == TokenKind.ELSE:
            self.consume()
            else_body = self.parse_block()
            return ast.IfElse(condition, then_body, else_body)
        return ast.If(condition, then_body)

    def parse_block(self) -> List[ast.Node]:
        self.expect(TokenKind.LBRACE)
        self.enter()
        body: List[ast.Node] = []
        while self.current.kind != TokenKind.RBRACE:
            if self.at_end():
                raise ParseError(f"Expected {TokenKind.RBRACE} but reached END_OF_INPUT")
            body.append(self.parse_statement())
        self.expect(TokenKind.RBRACE)
        self.leave()
        return body

    # --- Expressions ---

    def parse_expression(self) -> ast.Node:
        return self.parse_binary(0)

    def parse_binary(self, level: int) -> ast.Node:
        if level == len(PRECEDENCE):
            return self.parse_primary()

        ops = PRECEDENCE[level]
        left = self.parse_binary(level + 1)
        while self.current.kind in ops:
            op = self.consume().kind
            right = self.parse_binary(level + 1)
            left = ast.BinaryOp(left, right, op)
        return left

    def parse_primary(self) -> ast.Node:
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            self.consume()
            return ast.Num(float(tok.text))

        if tok.kind == TokenKind.IDENTIFIER:
            self.consume()
            return ast.Var(tok.text)

        if tok.kind == TokenKind.LPAREN:
            self.consume()
            self.enter()
            expr = self.parse_expression()
            self.expect(TokenKind.RPAREN)
            self.leave()
            return expr

        if tok.kind == TokenKind.INPUT:
            self.consume()
            self.expect(TokenKind.LPAREN)
            self.expect(TokenKind.RPAREN)
            return ast.InputCall()

        raise ParseError(f"Unexpected token {self._describe(tok)}")
