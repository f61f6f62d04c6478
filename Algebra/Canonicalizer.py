# Canonicalizer.py
"""""
Turns a simplified tree into its canonical string.

1) flatten: sum/difference tree -> flat list of signed terms (Number / Variable)
2) group:   constants summed, variable terms keyed by (name, exponent)
3) render:  name ascending, exponent descending, constant last
"""""

from .Nodes import Number, Variable, BinOp, PLUS, MINUS
from . import error as E


def flatten(tree):
    """Return the additive terms of tree, signs applied to values / coefficients."""
    if isinstance(tree, BinOp) and tree.operator == PLUS:
        return flatten(tree.left) + flatten(tree.right)
    if isinstance(tree, BinOp) and tree.operator == MINUS:
        return flatten(tree.left) + negate(flatten(tree.right))
    if isinstance(tree, (Number, Variable)):
        return [tree]
    # Anything else means the simplifier left work undone
    raise E.CalculationError(f"{tree}", code="3104")


def negate(terms):
    return [term.negated() for term in terms]


def sort_key(key):
    name, exponent = key
    return (name, -exponent)


def group(terms):
    """Return (constant, {(name, exponent): coefficient}) with keys in output order."""
    constant = 0
    coefficients = {}

    for term in terms:
        if isinstance(term, Number):
            constant += term.value
        else:
            key = (term.name, term.exponent)
            coefficients[key] = coefficients.get(key, 0) + term.coefficient

    ordered = {key: coefficients[key] for key in sorted(coefficients, key=sort_key)}
    return constant, ordered


def format_power(name, exponent):
    if exponent == 1:
        return name
    return f"{name}^{exponent}"


def format_term(name, exponent, coefficient, leading):
    """Render one variable term; non-leading terms carry a spaced '+ ' / '- ' separator."""
    power = format_power(name, exponent)

    if abs(coefficient) == 1:
        body = power
    else:
        body = f"{abs(coefficient)}*{power}"

    if leading:
        return f"-{body}" if coefficient < 0 else body
    if coefficient < 0:
        return f"- {body}"
    return f"+ {body}"


def render(tree):
    """Canonical string of a simplified tree."""
    constant, coefficients = group(flatten(tree))

    pieces = []
    for (name, exponent), coefficient in coefficients.items():
        if exponent == 0:
            # name^0 is 1, so the coefficient is a constant
            constant += coefficient
            continue
        if coefficient == 0:
            continue
        pieces.append(format_term(name, exponent, coefficient, leading=not pieces))

    if not pieces:
        return str(constant)

    if constant > 0:
        pieces.append(f"+ {constant}")
    elif constant < 0:
        pieces.append(f"- {abs(constant)}")
    return " ".join(pieces)
