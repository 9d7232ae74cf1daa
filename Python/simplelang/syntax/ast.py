from dataclasses import dataclass, field
from typing import List, Optional
from ..lexing import TokenKind

# ======================================
# AST Nodes
# ======================================

class Node: pass

# --- Expressions ---

@dataclass
class Num(Node):
    value: float
    def __repr__(self): return f"Num({self.value})"

@dataclass
class Var(Node):
    name: str
    def __repr__(self): return f"Var({self.name})"

@dataclass
class BinaryOp(Node):
    left: Node
    right: Node
    op: TokenKind
    def __repr__(self): return f"BinaryOp({self.op}, {self.left}, {self.right})"

@dataclass
class InputCall(Node):
    def __repr__(self): return "InputCall()"

# --- Statements ---

@dataclass
class LetDecl(Node):
    name: str
    initializer: Optional[Node] = None
    def __repr__(self): return f"LetDecl({self.name}, {self.initializer})"

@dataclass
class Assign(Node):
    name: str
    value: Node
    def __repr__(self): return f"Assign({self.name}, {self.value})"

@dataclass
class Output(Node):
    value: Node
    def __repr__(self): return f"Output({self.value})"

@dataclass
class If(Node):
    condition: Node
    then_body: List[Node] = field(default_factory=list)
    def __repr__(self): return f"If({self.condition}, {self.then_body})"

@dataclass
class IfElse(Node):
    condition: Node
    then_body: List[Node] = field(default_factory=list)
    else_body: List[Node] = field(default_factory=list)
    def __repr__(self): return f"IfElse({self.condition}, {self.then_body}, {self.else_body})"

# A bare expression used as a statement, e.g. a standalone input()
@dataclass
class ExprStmt(Node):
    expr: Node
    def __repr__(self): return f"ExprStmt({self.expr})"
