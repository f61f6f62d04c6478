# Console.py
"""""
Read-eval-print loop around MathEngine.

Reads one line at a time, skips empty lines, prints the canonical form or the
error line, and stops at end of input. There is no exit command.
"""""

import sys

import pyperclip

from . import MathEngine as MathEngine
from . import config_manager as config_manager


def copy_to_clipboard(text, output):
    """Copy a result; a missing clipboard backend only costs a warning."""
    try:
        pyperclip.copy(text)
        return True
    except pyperclip.PyperclipException as e:
        output.write(f"Clipboard not available: {e}\n")
        return False


def run(input_stream=None, output=None, settings=None):
    """Run the loop until input_stream is exhausted. Returns the number of evaluated lines."""
    input_stream = input_stream if input_stream is not None else sys.stdin
    output = output if output is not None else sys.stdout
    if settings is None:
        settings = config_manager.load_setting_value("all")

    prompt = settings.get("prompt", ">>> ")
    copy_result = settings.get("copy_result", False)
    debug = settings.get("debug", False)
    evaluated = 0

    while True:
        output.write(prompt)
        output.flush()

        try:
            line = input_stream.readline()
        except KeyboardInterrupt:
            break

        if line == "":
            # End of input
            break

        problem = line.rstrip("\r\n")
        if problem.strip() == "":
            continue

        result = MathEngine.calculate(problem, debug=debug)
        output.write(result + "\n")
        evaluated += 1

        if copy_result and not result.startswith(MathEngine.ERROR_PREFIX):
            if not copy_to_clipboard(result, output):
                copy_result = False

    output.write("\n")
    return evaluated


def main():
    run()


if __name__ == "__main__":
    main()
