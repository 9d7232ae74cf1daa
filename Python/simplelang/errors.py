from typing import Optional

# ======================================
# Language Errors
# ======================================

class SimpleLangError(Exception):
    """Base class for every error a statement can raise while running."""
    pass

class LexError(SimpleLangError): pass
class ParseError(SimpleLangError): pass
class DivisionByZeroError(SimpleLangError): pass
class InvalidInputError(SimpleLangError): pass

class VariableError(SimpleLangError):
    def __init__(self, name: str, message: Optional[str] = None):
        super().__init__(message or name)
        self.name = name

class RedeclaredVariableError(VariableError):
    def __init__(self, name: str):
        super().__init__(name, f"Variable '{name}' already declared.")

class UndeclaredVariableError(VariableError):
    def __init__(self, name: str):
        super().__init__(name, f"Variable '{name}' not declared.")
