from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple
from simplelang import console, lexing
from simplelang.errors import ParseError, SimpleLangError
from simplelang.lexing import TokenizerConfig
from simplelang.parser import engine as parser_engine
from simplelang.parser.main import parse_statement
from simplelang.runtime import evaluator as runtime_evaluator
from simplelang.runtime import Evaluator, InputProvider, OutputSink, VariableStore
from simplelang.segmenter import Chunk, segment_lines

# ======================================
# Statement Errors
# ======================================

@dataclass
class StatementError:
    line: int
    source: str
    error: SimpleLangError

    @property
    def kind(self) -> str:
        return type(self.error).__name__

    def __str__(self):
        return f"Error at line {self.line}: {self.error}"

ErrorSink = Callable[[StatementError], None]

def print_error(err: StatementError):
    print(str(err))

def set_debug(enabled: bool):
    lexing.DEBUG_LEX = enabled
    parser_engine.DEBUG_PARSE = enabled
    runtime_evaluator.DEBUG_EVAL = enabled

# ======================================
# Interpreter Session
# ======================================

class Interpreter:
    """
    One session: a single variable store plus the collaborators used for
    input(), output() and error reporting.
    """

    def __init__(
        self,
        input_provider: Optional[InputProvider] = None,
        output_sink: Optional[OutputSink] = None,
        error_sink: Optional[ErrorSink] = None,
        config: Optional[TokenizerConfig] = None,
    ):
        if input_provider is None:
            input_provider = console.ConsoleInput()
        if output_sink is None:
            output_sink = console.console_output
        self.store = VariableStore()
        self.config = config
        self.error_sink = error_sink if error_sink is not None else print_error
        self.evaluator = Evaluator(self.store, input_provider, output_sink)

    @property
    def variables(self) -> dict:
        return dict(self.store.items())

    def execute_line(self, text: str):
        """Lex, parse and run one statement chunk. Errors propagate."""
        tokens = lexing.tokenize(text, self.config)
        node = parse_statement(tokens)
        self.evaluator.execute(node)

    def execute_chunk(self, chunk: Chunk) -> Optional[StatementError]:
        try:
            self.execute_line(chunk.text)
        except SimpleLangError as e:
            error = e
        except RecursionError:
            # operator chains long enough to exhaust the evaluator's stack
            error = ParseError("Statement nested too deeply")
        else:
            return None
        err = StatementError(chunk.line, chunk.text, error)
        self.error_sink(err)
        return err

    def run(self, lines: Iterable[str]) -> List[StatementError]:
        """Run a whole program; a failing statement is reported and skipped."""
        errors = []
        for chunk in segment_lines(lines):
            err = self.execute_chunk(chunk)
            if err is not None:
                errors.append(err)
        return errors

    def show_variables(self) -> str:
        return self.store.show()

def run_program(
    lines: Iterable[str],
    inputs: Iterable[str] = (),
) -> Tuple[List[float], List[StatementError]]:
    """Run `lines` on a fresh session with scripted input; returns (outputs, errors)."""
    outputs: List[float] = []
    feed = iter(inputs)
    interp = Interpreter(
        input_provider=lambda: next(feed, ""),
        output_sink=outputs.append,
        error_sink=lambda err: None,
    )
    errors = interp.run(lines)
    return outputs, errors
