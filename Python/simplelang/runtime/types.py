from typing import Dict, Iterator, List, Tuple
from ..errors import RedeclaredVariableError, UndeclaredVariableError

# ======================================
# Variable Store
# ======================================

class VariableStore:
    """
    Name -> number bindings for one interpreter session.

    A name has to be added once before it can be read or updated; adding it
    again raises RedeclaredVariableError, touching an unknown name raises
    UndeclaredVariableError.
    """

    def __init__(self):
        self._values: Dict[str, float] = {}

    def add(self, name: str, value: float):
        if name in self._values:
            raise RedeclaredVariableError(name)
        self._values[name] = value

    def get(self, name: str) -> float:
        try:
            return self._values[name]
        except KeyError:
            raise UndeclaredVariableError(name) from None

    def update(self, name: str, value: float):
        if name not in self._values:
            raise UndeclaredVariableError(name)
        self._values[name] = value

    def remove(self, name: str):
        if self._values.pop(name, None) is None:
            raise UndeclaredVariableError(name)

    def contains(self, name: str) -> bool: return name in self._values
    def clear(self): self._values.clear()
    def items(self) -> List[Tuple[str, float]]: return list(self._values.items())

    def __contains__(self, name: str) -> bool: return name in self._values
    def __len__(self) -> int: return len(self._values)
    def __iter__(self) -> Iterator[str]: return iter(self._values)

    def show(self) -> str:
        return "\n".join(f"{name} = {value}" for name, value in self._values.items())

    def __repr__(self): return f"VariableStore({self._values})"
