import sys
import os
import time
from typing import List, Optional

from .core import Interpreter, StatementError, print_error, set_debug
from .console import DEMO_PROGRAM, read_source_lines, list_source_files

OPTIONS = {"debug", "demo", "novars"}

def print_demo_error(err: StatementError):
    print(f"Demo error: {err.error}")

def ask(prompt: str) -> str:
    print(prompt)
    try:
        return input().strip()
    except EOFError:
        return ""

def choose_from_directory(directory: str) -> Optional[str]:
    files = list_source_files(directory)
    if not files:
        print(f"No .txt files in {directory}")
        return None

    print("Available files:")
    for i, path in enumerate(files):
        print(f"{i + 1}: {os.path.basename(path)}")

    choice = ask("Enter the number of the file to use:")
    try:
        index = int(choice)
    except ValueError:
        return None
    if 1 <= index <= len(files):
        return files[index - 1]
    return None

def interactive_menu(directory: str) -> Optional[str]:
    """Returns the chosen program path, or None for the demo."""
    has_files = bool(list_source_files(directory))

    print("Choose an option:")
    print("1. Enter path to source file manually")
    if has_files:
        print("2. Use a file from the current folder")
    print("Press Enter to run demo")

    choice = ask("")
    if choice == "1":
        return ask("Enter full path to the source file:")
    if choice == "2" and has_files:
        return choose_from_directory(directory)
    return None

def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    options = set(args)
    use_debug = "debug" in options
    use_demo = "demo" in options
    show_vars = "novars" not in options

    if use_debug:
        set_debug(True)

    path = next((a for a in args if a not in OPTIONS), None)
    if use_demo:
        path = None
    elif path is None:
        path = interactive_menu(os.getcwd())
    elif os.path.isdir(path):
        path = choose_from_directory(path)

    if path is None:
        print("Running built-in demo program...\n")
        lines = DEMO_PROGRAM
        finished = "Demo finished. Variables:"
        error_sink = print_demo_error
    else:
        if not os.path.isfile(path):
            print(f"File not found: {path}")
            return 1
        try:
            lines = list(read_source_lines(path))
        except (OSError, UnicodeDecodeError) as e:
            print(f"Failed to read file: {path}")
            print(f"Error: {e}")
            return 1
        finished = "Execution finished. Variables:"
        error_sink = print_error

    if use_debug:
        print("=== SimpleLang Interpreter ===")
        print(f"Input: {path or 'built-in demo'}")
        print(f"Lines: {len(lines)}")
        print()

    interpreter = Interpreter(error_sink=error_sink)
    run_start = time.time() * 1000
    errors = interpreter.run(lines)
    run_end = time.time() * 1000

    if show_vars:
        print()
        print(finished)
        listing = interpreter.show_variables()
        if listing:
            print(listing)

    if use_debug:
        print()
        print(f"Errors: {len(errors)}")
        print(f"Total time: {int(run_end - run_start)}ms")

    return 0

if __name__ == "__main__":
    sys.exit(main())
