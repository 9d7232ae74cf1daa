from .engine import Parser
from .main import parse_statement, parse_expression, parse_line

__all__ = ["Parser", "parse_statement", "parse_expression", "parse_line"]
