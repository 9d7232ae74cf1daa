from typing import Callable, Dict
import math
from ..lexing import TokenKind
from ..errors import DivisionByZeroError

def _truth(b: bool) -> float:
    return 1.0 if b else 0.0

def divide(a: float, b: float) -> float:
    if b == 0.0:
        raise DivisionByZeroError("Division by zero.")
    return a / b

def remainder(a: float, b: float) -> float:
    # fmod keeps the sign of the dividend: -7 % 3 == -1
    if b == 0.0:
        raise DivisionByZeroError("Remainder by zero.")
    if math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)

def _odd_integer(b: float) -> bool:
    return b.is_integer() and int(b) % 2 == 1

def power(a: float, b: float) -> float:
    # odd integer exponents keep the sign of the base, -0.0 included
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        # 0 ^ negative -> +-inf, negative ^ fractional -> nan
        if a == 0.0:
            return math.copysign(math.inf, a) if _odd_integer(b) else math.inf
        return math.nan

OPERATORS: Dict[TokenKind, Callable[[float, float], float]] = {
    TokenKind.PLUS: lambda a, b: a + b,
    TokenKind.MINUS: lambda a, b: a - b,
    TokenKind.MULTIPLY: lambda a, b: a * b,
    TokenKind.DIVIDE: divide,
    TokenKind.REMAINDER: remainder,
    TokenKind.POWER: power,
    TokenKind.GREATER: lambda a, b: _truth(a > b),
    TokenKind.LESS: lambda a, b: _truth(a < b),
    TokenKind.GREATER_EQUAL: lambda a, b: _truth(a >= b),
    TokenKind.LESS_EQUAL: lambda a, b: _truth(a <= b),
    TokenKind.EQUAL_EQUAL: lambda a, b: _truth(a == b),
    TokenKind.NOT_EQUAL: lambda a, b: _truth(a != b),
}

def eval_arithmetic(op: TokenKind, a: float, b: float) -> float:
    fn = OPERATORS.get(op)
    if fn is None:
        raise RuntimeError(f"Unknown operator: {op}")
    return fn(a, b)
