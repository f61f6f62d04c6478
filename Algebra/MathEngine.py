# MathEngine.py
"""""
Core engine of the algebra simplifier.

Pipeline
--------
1) Scanner:       text -> tokens, pulled one at a time by the parser
2) Parser:        tokens -> expression tree (recursive descent, no implicit multiplication)
3) Simplifier:    tree -> simplified tree (folding, like terms, distribution, powers)
4) Canonicalizer: simplified tree -> canonical string

evaluate() is the engine API, calculate() is what the drivers call.
"""""

import sys

from . import Parser
from . import Simplifier
from . import Canonicalizer
from . import config_manager as config_manager
from . import error as E

# Integers are unbounded, and so is their decimal text (literals and rendered constants)
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


# Prefix the drivers print in front of every error message
ERROR_PREFIX = "Exception: "


def evaluate(problem, debug=None):
    """Return the canonical form of problem.

    If no rewrite rule applies the input line is returned unchanged.
    Raises InvalidCharacterError, InvalidSyntaxError, DivisionByZeroError or
    ZeroRaisedToZeroError (with .equation set to problem) on failure.
    """
    if debug is None:
        debug = config_manager.load_setting_value("debug")

    try:
        tree = Parser.parse(problem)
        if debug:
            print("Parsed AST:")
            print(tree)

        try:
            simplified = Simplifier.simplify(tree)
        except E.NothingToSimplify:
            if debug:
                print("Nothing to simplify, echoing input.")
            return problem

        if debug:
            print("Simplified AST:")
            print(simplified)
            print("Terms: " + str(Canonicalizer.flatten(simplified)))

        return Canonicalizer.render(simplified)

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise e
    # Deeply nested input exhausts the call stack
    except RecursionError as e:
        raise E.MathError(message="Expression nested too deeply.", code="9999", equation=problem) from e
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        raise E.MathError(message=str(e).strip(), code="9999", equation=problem) from e


def describe_error(error):
    """Return the line a driver prints for error, e.g. 'Exception: Invalid Syntax'."""
    text = E.ERROR_MESSAGES.get(error.code, E.ERROR_MESSAGES["9999"])
    if text.endswith(": "):
        text += str(error.message)
    return ERROR_PREFIX + text


def calculate(problem, debug=None):
    """Driver entry point: the canonical form or the printable error line, never raises MathError."""
    try:
        return evaluate(problem, debug=debug)
    except E.MathError as e:
        return describe_error(e)


def test_main():
    """Simple REPL-like runner for manual testing of the engine."""
    print("Enter the problem: ")
    problem = input()
    print(calculate(problem, debug=True))


if __name__ == "__main__":
    # Allow running this module directly for quick CLI tests:
    #   python -m Algebra.MathEngine
    test_main()
