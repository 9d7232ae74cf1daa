from typing import Callable, List, Optional
import re
from ..syntax import ast
from .types import VariableStore
from ..prelude import eval_arithmetic
from ..errors import InvalidInputError, RedeclaredVariableError, UndeclaredVariableError

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}")

InputProvider = Callable[[], str]
OutputSink = Callable[[float], None]

# Locale-independent decimal: optional sign, digits with at most one point, optional exponent
NUMBER_INPUT = re.compile(r"\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")

def parse_number(raw: Optional[str]) -> float:
    if raw is None or not NUMBER_INPUT.fullmatch(raw):
        raise InvalidInputError(f"Input must be a number, got {raw!r}.")
    return float(raw)

# ======================================
# Evaluator
# ======================================

class Evaluator:
    def __init__(self, store: VariableStore, input_provider: InputProvider, output_sink: OutputSink):
        self.store = store
        self.input_provider = input_provider
        self.output_sink = output_sink

    # --- Statements ---

    def execute(self, node: ast.Node):
        log(f"execute: {node}")

        if isinstance(node, ast.LetDecl):
            if self.store.contains(node.name):
                raise RedeclaredVariableError(node.name)
            value = self.evaluate(node.initializer) if node.initializer is not None else 0.0
            self.store.add(node.name, value)
            log(f"  {node.name} := {value}")

        elif isinstance(node, ast.Assign):
            if not self.store.contains(node.name):
                raise UndeclaredVariableError(node.name)
            value = self.evaluate(node.value)
            self.store.update(node.name, value)
            log(f"  {node.name} := {value}")

        elif isinstance(node, ast.Output):
            self.output_sink(self.evaluate(node.value))

        elif isinstance(node, ast.IfElse):
            if self.evaluate(node.condition) != 0.0:
                self.execute_all(node.then_body)
            else:
                self.execute_all(node.else_body)

        elif isinstance(node, ast.If):
            if self.evaluate(node.condition) != 0.0:
                self.execute_all(node.then_body)

        elif isinstance(node, ast.ExprStmt):
            self.evaluate(node.expr)

        else:
            raise TypeError(f"Not a statement: {node!r}")

    def execute_all(self, body: List[ast.Node]):
        for stmt in body:
            self.execute(stmt)

    # --- Expressions ---

    def evaluate(self, node: ast.Node) -> float:
        if isinstance(node, ast.Num):
            return node.value

        if isinstance(node, ast.Var):
            return self.store.get(node.name)

        if isinstance(node, ast.InputCall):
            raw = self.input_provider()
            log(f"input: {raw!r}")
            return parse_number(raw)

        if isinstance(node, ast.BinaryOp):
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            result = eval_arithmetic(node.op, left, right)
            log(f"  {left} {node.op} {right} -> {result}")
            return result

        raise TypeError(f"Not an expression: {node!r}")
