from .types import VariableStore
from .evaluator import Evaluator, InputProvider, OutputSink, parse_number

__all__ = ["VariableStore", "Evaluator", "InputProvider", "OutputSink", "parse_number"]
