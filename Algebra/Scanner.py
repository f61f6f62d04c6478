# Scanner.py
"""""
Lexical scanner for the algebra simplifier.

The scanner is pull based: the parser asks for one token at a time with
get_next_token(), nothing is tokenized ahead of time.

Token classes
-------------
- INTEGER     maximal run of decimal digits
- IDENTIFIER  maximal run of letters
- + - * / ^ ( )  single character operators / punctuation
- EOF         end of text (returned again on every further call)
"""""

from enum import Enum

from . import error as E


class TokenType(Enum):
    INTEGER = "INTEGER"
    IDENTIFIER = "IDENTIFIER"
    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"
    LPAREN = "("
    RPAREN = ")"
    EOF = "EOF"


# Single character tokens, looked up by the character itself
Operations = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MUL,
    "/": TokenType.DIV,
    "^": TokenType.POW,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


class Token:
    """A (type, value) pair. Value is the int / name for literals, the symbol otherwise."""
    def __init__(self, type, value=None):
        self.type = type
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"


class Scanner:
    """Walks the input text with a position / current character cursor."""

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current_char = text[0] if text else None

    def advance(self):
        self.pos += 1
        if self.pos > len(self.text) - 1:
            self.current_char = None  # End of text
        else:
            self.current_char = self.text[self.pos]

    def skip_whitespace(self):
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self):
        """Consume a maximal run of digits and return it as int."""
        result = ""
        while self.current_char is not None and self.current_char.isdecimal():
            result += self.current_char
            self.advance()
        return int(result)

    def identifier(self):
        """Consume a maximal run of letters."""
        name = ""
        while self.current_char is not None and self.current_char.isalpha():
            name += self.current_char
            self.advance()
        return name

    def get_next_token(self):
        """Return the next token; raises InvalidCharacterError on an unknown symbol."""
        self.skip_whitespace()

        if self.current_char is None:
            return Token(TokenType.EOF)

        if self.current_char.isdecimal():
            return Token(TokenType.INTEGER, self.integer())

        if self.current_char.isalpha():
            return Token(TokenType.IDENTIFIER, self.identifier())

        token_type = Operations.get(self.current_char)
        if token_type is None:
            raise E.InvalidCharacterError(f"Invalid Character: {self.current_char!r} at position {self.pos}")

        symbol = self.current_char
        self.advance()
        return Token(token_type, symbol)

    def __iter__(self):
        """Yield tokens up to and including EOF."""
        while True:
            token = self.get_next_token()
            yield token
            if token.type == TokenType.EOF:
                return
