import os
from typing import Iterator, List

# ======================================
# Console Collaborators
# ======================================

class ConsoleInput:
    def __init__(self, prompt: str = "input: "):
        self.prompt = prompt

    def __call__(self) -> str:
        try:
            return input(self.prompt)
        except EOFError:
            # closed stdin reads as an empty line, which input() rejects
            return ""

def console_output(value: float):
    print(value)

# ======================================
# Source Suppliers
# ======================================

DEMO_PROGRAM: List[str] = [
    "let x = 2 + 3 * (4 - 1)",
    "let y = x ^ 2",
    "let z = y + 10 / 2",
    "let a",
    "output(z)",
    "a = input()",
    "output(a + 5)",
    "if (a % 2 == 0) {",
    "    output(1)",
    "} else {",
    "    output(0)",
    "}",
]

def read_source_lines(path: str) -> Iterator[str]:
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            yield line.rstrip("\r\n")

def list_source_files(directory: str, extension: str = ".txt") -> List[str]:
    names = sorted(n for n in os.listdir(directory) if n.endswith(extension))
    return [os.path.join(directory, n) for n in names if os.path.isfile(os.path.join(directory, n))]
