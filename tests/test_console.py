import io

import pyperclip

from Algebra import Console


SETTINGS = {"prompt": "> ", "copy_result": False, "debug": False}


def run_lines(text, settings=SETTINGS):
    output = io.StringIO()
    evaluated = Console.run(io.StringIO(text), output, settings)
    return evaluated, output.getvalue()


def test_console_prints_results_and_errors_until_end_of_input():
    evaluated, output = run_lines("2 + 3\n\nx*y\n2x\n")

    assert evaluated == 3
    assert output == "> 5\n> > x*y\n> Exception: Invalid Syntax\n> \n"


def test_console_handles_last_line_without_newline():
    evaluated, output = run_lines("x + x")

    assert evaluated == 1
    assert "2*x\n" in output


def test_console_skips_blank_lines():
    evaluated, _ = run_lines("   \n\t\n")

    assert evaluated == 0


def test_console_errors_do_not_affect_following_lines():
    _, output = run_lines("1/0\n0^0\n2*(x + 3)\n")

    assert output.splitlines()[:3] == [
        "> Exception: Division by Zero Not Defined",
        "> Exception: Zero Raised to Zero Not Defined",
        "> 2*x + 6",
    ]


def test_console_copies_results_but_not_errors(monkeypatch):
    copied = []
    monkeypatch.setattr(Console.pyperclip, "copy", copied.append)

    run_lines("x + x\n1/0\n", {**SETTINGS, "copy_result": True})

    assert copied == ["2*x"]


def test_console_warns_once_when_clipboard_is_missing(monkeypatch):
    def no_clipboard(text):
        raise pyperclip.PyperclipException("no backend")

    monkeypatch.setattr(Console.pyperclip, "copy", no_clipboard)

    _, output = run_lines("1 + 1\n2 + 2\n", {**SETTINGS, "copy_result": True})

    assert output.count("Clipboard not available") == 1
    assert "4\n" in output
