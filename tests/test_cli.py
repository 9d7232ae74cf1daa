import os

from simplelang.__main__ import main

def feed(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

def output_lines(capsys):
    return capsys.readouterr().out.splitlines()

def test_runs_arithmetic_program(programs_dir, capsys):
    assert main([os.path.join(programs_dir, "arithmetic.txt"), "novars"]) == 0
    assert output_lines(capsys) == ["11.0", "121.0", "126.0", "64.0", "1.0"]

def test_runs_conditionals_program(programs_dir, capsys):
    main([os.path.join(programs_dir, "conditionals.txt"), "novars"])
    assert output_lines(capsys) == ["3.14", "3.2"]

def test_errors_are_reported_per_line(programs_dir, capsys):
    main([os.path.join(programs_dir, "errors.txt")])
    lines = output_lines(capsys)
    assert lines[:5] == [
        "Error at line 2: Unexpected token END_OF_INPUT",
        "Error at line 3: Variable 'x' already declared.",
        "Error at line 4: Division by zero.",
        "Error at line 5: Variable 'y' not declared.",
        "1.0",
    ]
    assert lines[-2:] == ["Execution finished. Variables:", "x = 1.0"]

def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    assert main([str(missing)]) == 1
    assert output_lines(capsys) == [f"File not found: {missing}"]

def test_demo_option(monkeypatch, capsys):
    feed(monkeypatch, ["4"])
    assert main(["demo"]) == 0
    lines = output_lines(capsys)
    assert lines[0] == "Running built-in demo program..."
    assert ["126.0", "9.0", "1.0"] == [l for l in lines if l in ("126.0", "9.0", "1.0")]
    assert "Demo finished. Variables:" in lines
    assert "a = 4.0" in lines

def test_directory_listing_choice(tmp_path, monkeypatch, capsys):
    (tmp_path / "b.txt").write_text("output(2)\n", encoding="utf-8")
    (tmp_path / "a.txt").write_text("output(1)\n", encoding="utf-8")
    (tmp_path / "notes.md").write_text("ignored", encoding="utf-8")
    feed(monkeypatch, ["2"])
    main([str(tmp_path), "novars"])
    lines = output_lines(capsys)
    assert "1: a.txt" in lines
    assert "2: b.txt" in lines
    assert lines[-1] == "2.0"

def test_interactive_menu_manual_path(tmp_path, monkeypatch, capsys):
    program = tmp_path / "prog.txt"
    program.write_text("let x = 5\noutput(x * 2)\n", encoding="utf-8")
    feed(monkeypatch, ["1", str(program)])
    main(["novars"])
    assert output_lines(capsys)[-1] == "10.0"

def test_interactive_menu_enter_runs_demo(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, ["", "2"])
    main(["novars"])
    lines = output_lines(capsys)
    assert "Running built-in demo program..." in lines
    assert "7.0" in lines

def test_interactive_menu_lists_current_folder(tmp_path, monkeypatch, capsys):
    (tmp_path / "only.txt").write_text("output(42)\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, ["2", "1"])
    main(["novars"])
    lines = output_lines(capsys)
    assert "2. Use a file from the current folder" in lines
    assert lines[-1] == "42.0"

def test_debug_option_prints_header(programs_dir, capsys):
    main([os.path.join(programs_dir, "arithmetic.txt"), "debug", "novars"])
    out = capsys.readouterr().out
    assert "=== SimpleLang Interpreter ===" in out
    assert "[EVAL]" in out
    assert "Total time:" in out

def test_menu_empty_path_is_reported_missing(monkeypatch, capsys):
    feed(monkeypatch, ["1", ""])
    assert main(["novars"]) == 1
    lines = output_lines(capsys)
    assert lines[-1] == "File not found: "
    assert "Running built-in demo program..." not in lines

def test_demo_errors_use_demo_prefix(monkeypatch, capsys):
    feed(monkeypatch, ["abc"])
    main(["demo", "novars"])
    lines = output_lines(capsys)
    assert "Demo error: Input must be a number, got 'abc'." in lines
    assert not any(l.startswith("Error at line") for l in lines)
    assert lines[-2:] == ["5.0", "1.0"]
