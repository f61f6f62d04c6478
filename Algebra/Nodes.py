# Nodes.py
"""""
Expression tree node types.

Four variants, nothing else is ever put into a tree:
    Number(value)
    Variable(name, coefficient=1, exponent=1)    -> coefficient * name^exponent
    UnaryOp(operator, operand)                   -> operator is '+' or '-'
    BinOp(left, operator, right)                 -> operator is '+', '-', '*', '/' or '^'

Nodes are frozen. The simplifier never changes a node, it builds a new one
(see with_coefficient / negated), so no subtree can be changed behind the back
of another owner. Equality is structural, which the '/' rule relies on.
"""""

from dataclasses import dataclass, replace


PLUS = "+"
MINUS = "-"
MUL = "*"
DIV = "/"
POW = "^"

ADDITIVE = (PLUS, MINUS)


class Node:
    """Common base of the four node variants."""
    __slots__ = ()


@dataclass(frozen=True)
class Number(Node):
    value: int

    def negated(self):
        return Number(-self.value)

    def __repr__(self):
        return f"Number({self.value})"


@dataclass(frozen=True)
class Variable(Node):
    name: str
    coefficient: int = 1
    exponent: int = 1

    def with_coefficient(self, coefficient):
        return replace(self, coefficient=coefficient)

    def negated(self):
        return self.with_coefficient(-self.coefficient)

    def __repr__(self):
        return f"Variable('{self.name}', coefficient={self.coefficient}, exponent={self.exponent})"


@dataclass(frozen=True)
class UnaryOp(Node):
    operator: str
    operand: Node

    def __repr__(self):
        return f"UnaryOp({self.operator!r}, {self.operand})"


@dataclass(frozen=True)
class BinOp(Node):
    left: Node
    operator: str
    right: Node

    def __repr__(self):
        return f"BinOp({self.operator!r}, left={self.left}, right={self.right})"


def is_term(node):
    """True for the two leaf variants a canonical sum is made of."""
    return isinstance(node, (Number, Variable))
