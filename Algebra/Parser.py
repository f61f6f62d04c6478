# Parser.py
"""""
Recursive-descent parser.

Grammar
-------
    expression := term (('+'|'-') term)*
    term       := factor (('*'|'/') factor)*
    factor     := atom ('^' factor)?            right associative
    atom       := ('+'|'-') factor | INTEGER | IDENTIFIER | '(' expression ')'

A unary sign takes a whole factor as operand, so "-2^2" is -(2^2),
but the signed factor is still a single factor of the surrounding term.

There is no implicit multiplication. After every consumed token the pair
(previous token, next token) is checked against FORBIDDEN_PAIRS, which turns
"2x", "x2", "2 3", "x y", "2(3)", "x(3)", "(2)3" and "(2)x" into syntax errors.
")(" is not in the list.

Parsing stops after one complete expression. Trailing tokens are ignored,
but the rest of the text still goes through the scanner, so an unknown
character anywhere in the line is reported.
"""""

from .Scanner import Scanner, TokenType
from .Nodes import Number, Variable, UnaryOp, BinOp
from . import error as E


FORBIDDEN_PAIRS = {
    (TokenType.INTEGER, TokenType.INTEGER),
    (TokenType.IDENTIFIER, TokenType.IDENTIFIER),
    (TokenType.INTEGER, TokenType.IDENTIFIER),
    (TokenType.IDENTIFIER, TokenType.INTEGER),
    (TokenType.INTEGER, TokenType.LPAREN),
    (TokenType.IDENTIFIER, TokenType.LPAREN),
    (TokenType.RPAREN, TokenType.INTEGER),
    (TokenType.RPAREN, TokenType.IDENTIFIER),
}


class Parser:

    def __init__(self, scanner):
        self.scanner = scanner
        self.current_token = self.scanner.get_next_token()

    def error(self, detail="Invalid Syntax"):
        raise E.InvalidSyntaxError(detail)

    def consume(self, token_type):
        """Accept the current token if it has the expected type and pull the next one."""
        if self.current_token.type != token_type:
            self.error(f"Expected {token_type.name}, got {self.current_token.type.name}")

        last_token = self.current_token
        self.current_token = self.scanner.get_next_token()

        if (last_token.type, self.current_token.type) in FORBIDDEN_PAIRS:
            self.error(f"Missing operator between {last_token.value!r} and {self.current_token.value!r}")
        return last_token

    def atom(self):
        token = self.current_token

        if token.type in (TokenType.PLUS, TokenType.MINUS):
            self.consume(token.type)
            return UnaryOp(token.value, self.factor())

        elif token.type == TokenType.INTEGER:
            self.consume(TokenType.INTEGER)
            return Number(token.value)

        elif token.type == TokenType.IDENTIFIER:
            self.consume(TokenType.IDENTIFIER)
            return Variable(token.value)

        elif token.type == TokenType.LPAREN:
            self.consume(TokenType.LPAREN)
            node = self.expression()
            self.consume(TokenType.RPAREN)
            return node

        self.error(f"Unexpected token: {token.type.name}")

    def factor(self):
        node = self.atom()
        if self.current_token.type == TokenType.POW:
            operator = self.consume(TokenType.POW).value
            node = BinOp(node, operator, self.factor())
        return node

    def term(self):
        node = self.factor()
        while self.current_token.type in (TokenType.MUL, TokenType.DIV):
            operator = self.consume(self.current_token.type).value
            node = BinOp(node, operator, self.factor())
        return node

    def expression(self):
        node = self.term()
        while self.current_token.type in (TokenType.PLUS, TokenType.MINUS):
            operator = self.consume(self.current_token.type).value
            node = BinOp(node, operator, self.term())
        return node

    def parse(self):
        node = self.expression()
        # Trailing tokens are ignored, but still scanned so bad characters surface
        while self.current_token.type != TokenType.EOF:
            self.current_token = self.scanner.get_next_token()
        return node


def parse(text):
    """Scan and parse one line of text into an expression tree."""
    return Parser(Scanner(text)).parse()
