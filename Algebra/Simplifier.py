# Simplifier.py
"""""
Tree rewriting simplifier.

simplify(tree) returns a new tree in which

- constants are folded,
- like terms (same variable name and exponent) of a sum/difference are combined,
- products and quotients are distributed over sums and differences,
- integer powers are expanded into products,
- unary signs are pushed down onto numbers and coefficients.

The result is a sum/difference tree whose leaves are Number and Variable
nodes; the Canonicalizer collects it into the final string.

Internally every rule returns either the rewritten node or None when no rule
matches. None travels back up through the return values; only the public
simplify() turns it into NothingToSimplify. Real failures (division by zero,
0^0) are raised where they are detected.

All arithmetic is integer arithmetic, division truncates toward zero.
"""""

from .Nodes import (Number, Variable, UnaryOp, BinOp, is_term,
                    PLUS, MINUS, MUL, DIV, POW, ADDITIVE)
from . import error as E
from .Canonicalizer import flatten, group


def simplify(tree):
    """Return the simplified form of tree; raise NothingToSimplify if no rule applies."""
    result = rewrite(tree)
    if result is None:
        raise E.NothingToSimplify(f"No rewrite rule for {tree}")
    return result


def rewrite(node):
    """Dispatch on the node variant. Returns the new node or None."""
    if isinstance(node, (Number, Variable)):
        return node

    if isinstance(node, UnaryOp):
        if node.operator == PLUS:
            return rewrite_unary_plus(node)
        if node.operator == MINUS:
            return rewrite_unary_minus(node)
        return None

    if isinstance(node, BinOp):
        rule = BINARY_RULES.get(node.operator)
        if rule is None:
            return None
        return rule(node)

    return None


# -----------------------------
# Integer helpers
# -----------------------------

def truncate_divide(numerator, denominator):
    """Integer division rounding toward zero (-7 / 2 == -3)."""
    if denominator == 0:
        raise E.DivisionByZeroError(f"Division by zero: {numerator} / 0")
    quotient = abs(numerator) // abs(denominator)
    if (numerator >= 0) == (denominator > 0):
        return quotient
    return -quotient


def rewrite_all(*nodes):
    """Rewrite every node; None if any of them cannot be rewritten."""
    results = []
    for node in nodes:
        result = rewrite(node)
        if result is None:
            return None
        results.append(result)
    return results


# -----------------------------
# Unary signs
# -----------------------------

def rewrite_unary_plus(node):
    operand = rewrite(node.operand)
    if operand is None:
        return None

    # Leading '+' is a no-op on terms and sums
    if is_term(operand):
        return operand
    if isinstance(operand, BinOp) and operand.operator in ADDITIVE:
        return operand
    return UnaryOp(PLUS, operand)


def rewrite_unary_minus(node):
    operand = rewrite(node.operand)
    if operand is None:
        return None

    if is_term(operand):
        return operand.negated()

    if isinstance(operand, BinOp) and operand.operator in ADDITIVE:
        # -(a + b) = (-a) + (-b),  -(a - b) = (-a) - (-b)
        parts = rewrite_all(UnaryOp(MINUS, operand.left), UnaryOp(MINUS, operand.right))
        if parts is None:
            return None
        return BinOp(parts[0], operand.operator, parts[1])

    return UnaryOp(MINUS, operand)


# -----------------------------
# Sum / difference
# -----------------------------

def rewrite_additive(node):
    parts = rewrite_all(node.left, node.right)
    if parts is None:
        return None
    left, right = parts

    if isinstance(left, Number) and isinstance(right, Number):
        if node.operator == PLUS:
            return Number(left.value + right.value)
        return Number(left.value - right.value)

    if (isinstance(left, Variable) and isinstance(right, Variable)
            and left.name == right.name and left.exponent == right.exponent):
        if node.operator == PLUS:
            return left.with_coefficient(left.coefficient + right.coefficient)
        return left.with_coefficient(left.coefficient - right.coefficient)

    # Unlike terms stay a sum, the Canonicalizer collects them
    return BinOp(left, node.operator, right)


# -----------------------------
# Power
# -----------------------------

def rewrite_power(node):
    exponent = rewrite(node.right)
    if not isinstance(exponent, Number):
        return None
    power = exponent.value

    if power == 0:
        base = rewrite(node.left)
        if base is None:
            # An irreducible base still gives 1
            return Number(1)
        if isinstance(base, Number) and base.value == 0:
            raise E.ZeroRaisedToZeroError(f"0^0 in {node}")
        if isinstance(base, Variable) and base.coefficient == 0:
            raise E.ZeroRaisedToZeroError(f"0^0 in {node}")
        return Number(1)

    if power == 1:
        return rewrite(node.left)

    if power > 1:
        base = rewrite(node.left)
        if base is None:
            return None

        # Same result as multiplying base by itself power times
        if isinstance(base, Number):
            return Number(base.value ** power)
        if isinstance(base, Variable):
            return Variable(base.name, base.coefficient ** power, base.exponent * power)

        product = base
        for _ in range(power - 1):
            product = rewrite(BinOp(product, MUL, base))
            if product is None:
                return None
            # One term per (name, exponent) keeps each step linear in the degree
            product = collect_terms(product)
        return product

    # Negative exponents are only reachable through division
    return None


def is_flat_sum(node):
    if is_term(node):
        return True
    return (isinstance(node, BinOp) and node.operator in ADDITIVE
            and is_flat_sum(node.left) and is_flat_sum(node.right))


def collect_terms(tree):
    """Combine like terms of a flat sum into one Variable per (name, exponent) plus a constant.

    Renders to the same string as tree. Anything that is not a flat sum of
    terms is returned as is.
    """
    if not is_flat_sum(tree):
        return tree

    constant, coefficients = group(flatten(tree))
    terms = [Variable(name, coefficient, exponent)
             for (name, exponent), coefficient in coefficients.items()
             if coefficient != 0]
    if constant != 0 or not terms:
        terms.append(Number(constant))

    result = terms[0]
    for term in terms[1:]:
        result = BinOp(result, PLUS, term)
    return result


# -----------------------------
# Product / quotient
# -----------------------------

def distribute(node):
    """Shared structure of '*' and '/'.

    Returns (handled, result). handled is False when both sides are already
    terms and the caller has to combine them itself.
    """
    operator = node.operator
    left, right = node.left, node.right

    if isinstance(left, UnaryOp) or isinstance(right, UnaryOp):
        parts = rewrite_all(left, right)
        if parts is None:
            return True, None
        if isinstance(parts[0], UnaryOp) or isinstance(parts[1], UnaryOp):
            return True, None
        return True, rewrite(BinOp(parts[0], operator, parts[1]))

    if isinstance(left, BinOp):
        if left.operator in ADDITIVE:
            # (a + b) op r = (a op r) + (b op r)
            parts = rewrite_all(BinOp(left.left, operator, right), BinOp(left.right, operator, right))
            if parts is None:
                return True, None
            return True, BinOp(parts[0], left.operator, parts[1])

        parts = rewrite_all(left, right)
        if parts is None:
            return True, None
        return True, rewrite(BinOp(parts[0], operator, parts[1]))

    if isinstance(right, BinOp):
        if right.operator in ADDITIVE:
            if operator == MUL:
                # l * (a + b) = (a * l) + (b * l)
                parts = rewrite_all(BinOp(right.left, MUL, left), BinOp(right.right, MUL, left))
                if parts is None:
                    return True, None
                return True, BinOp(parts[0], right.operator, parts[1])

            # A sum in the denominator only divides once it collapses to a term
            denominator = rewrite(right)
            if denominator is None or not is_term(denominator):
                return True, None
            return True, rewrite(BinOp(left, DIV, denominator))

        parts = rewrite_all(left, right)
        if parts is None:
            return True, None
        if operator == MUL:
            return True, rewrite(BinOp(parts[1], MUL, parts[0]))
        return True, rewrite(BinOp(parts[0], DIV, parts[1]))

    return False, None


def rewrite_multiply(node):
    handled, result = distribute(node)
    if handled:
        return result

    left, right = node.left, node.right

    if isinstance(left, Variable) and isinstance(right, Number):
        return left.with_coefficient(left.coefficient * right.value)

    if isinstance(left, Number) and isinstance(right, Variable):
        return right.with_coefficient(right.coefficient * left.value)

    if isinstance(left, Number) and isinstance(right, Number):
        return Number(left.value * right.value)

    if isinstance(left, Variable) and isinstance(right, Variable) and left.name == right.name:
        return Variable(left.name,
                        left.coefficient * right.coefficient,
                        left.exponent + right.exponent)

    # Different variable names: a product of two variables is not a term
    return None


def rewrite_divide(node):
    handled, result = distribute(node)
    if handled:
        if result is None:
            return same_operands(node)
        return result

    left, right = node.left, node.right

    if isinstance(left, Variable) and isinstance(right, Number):
        return left.with_coefficient(truncate_divide(left.coefficient, right.value))

    if isinstance(left, Number) and isinstance(right, Variable):
        return Variable(right.name,
                        truncate_divide(left.value, right.coefficient),
                        -right.exponent)

    if isinstance(left, Number) and isinstance(right, Number):
        return Number(truncate_divide(left.value, right.value))

    if isinstance(left, Variable) and isinstance(right, Variable) and left.name == right.name:
        return Variable(left.name,
                        truncate_divide(left.coefficient, right.coefficient),
                        left.exponent - right.exponent)

    if left == right:
        return Number(1)
    return None


def same_operands(node):
    """Number(1) when numerator and denominator simplify to the same tree, else None."""
    parts = rewrite_all(node.left, node.right)
    if parts is None or parts[0] != parts[1]:
        return None
    return Number(1)


BINARY_RULES = {
    PLUS: rewrite_additive,
    MINUS: rewrite_additive,
    POW: rewrite_power,
    MUL: rewrite_multiply,
    DIV: rewrite_divide,
}
