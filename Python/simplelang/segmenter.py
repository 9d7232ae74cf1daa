from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple
import re

ELSE_LINE = re.compile(r"else\b", re.IGNORECASE)

@dataclass
class Chunk:
    text: str
    line: int  # 1-based number of the first source line
    def __repr__(self): return f"Chunk({self.line}: {self.text})"

def brace_delta(line: str) -> int:
    return line.count("{") - line.count("}")

def segment_lines(lines: Iterable[str]) -> Iterator[Chunk]:
    """
    Group raw source lines into statement chunks.

    A line that leaves braces open starts a block: following lines are joined
    onto it with single spaces until the braces balance again. A line starting
    with `else` right after a closed block continues the same chunk. Input that
    ends inside a block is yielded as collected; the parser reports it.
    """
    numbered = _non_empty(lines)
    pending: Optional[Tuple[int, str]] = next(numbered, None)

    while pending is not None:
        lineno, text = pending
        parts: List[str] = [text]
        depth = brace_delta(text)
        pending = next(numbered, None)

        while pending is not None:
            if depth > 0:
                parts.append(pending[1])
                depth += brace_delta(pending[1])
            elif len(parts) > 1 or "{" in text:
                if not ELSE_LINE.match(pending[1]):
                    break
                parts.append(pending[1])
                depth += brace_delta(pending[1])
            else:
                break
            pending = next(numbered, None)

        yield Chunk(" ".join(parts), lineno)

def _non_empty(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    for lineno, raw in enumerate(lines, start=1):
        text = raw.strip()
        if text:
            yield lineno, text
