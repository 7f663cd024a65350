"""Lexical analysis for paris language: turns source text into a lazy stream of tokens.

Token grammar can be loosely defined as follows:

```
<newline>    ::= "\\n"                            ; statement terminator
<assign>     ::= ":="
<string>     ::= "`" <char>* "`"                  ; may span lines, no escapes
<number>     ::= <digit>+ ["." <digit>*]          ; always a float at runtime
<boolean>    ::= "true" | "false"
<display>    ::= "display"
<identifier> ::= (<letter> | "_") (<letter> | <digit> | "_")*

<comment>    ::= "#" <char>*                      ; runs until (not including) the end of line
```

Spaces, tabs and carriage returns are skipped. A Lexer can be iterated any number of times; every iteration scans the
source again from the start.
"""

import enum
import math
from dataclasses import dataclass

from paris.lang.error import LexicalError, LexicalErrorKind, Position


class TokenKind(enum.Enum):
    """Kinds of token. Values are used when describing tokens in error messages."""
    IDENTIFIER = "identifier"
    STRING_LITERAL = "string literal"
    NUMBER_LITERAL = "number literal"
    BOOLEAN_LITERAL = "boolean literal"
    ASSIGN = "':='"
    DISPLAY = "'display'"
    LEFT_PAREN = "'('"
    RIGHT_PAREN = "')'"
    NEWLINE = "newline"
    END_OF_INPUT = "end of input"

    def __str__(self):
        return self.value


KEYWORDS = {
    "display": TokenKind.DISPLAY,
    "true": TokenKind.BOOLEAN_LITERAL,
    "false": TokenKind.BOOLEAN_LITERAL,
}

OPERATORS = {
    ":=": TokenKind.ASSIGN,
}

DELIMITERS = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

OPERATOR_CHARS = set(":=+-*/%<>!&|^~?.,;@$\\")  # characters that make up operator runs
DIGITS = "0123456789"
WHITESPACE = " \t\r"
QUOTE = "`"
COMMENT = "#"


@dataclass(frozen=True)
class Token:
    """Smallest lexical unit of paris. lexeme is the exact source text of the token and offset its index in source."""
    kind: TokenKind
    lexeme: str
    position: Position
    offset: int

    @property
    def value(self):
        """Python value of a literal token: str for strings, float for numbers, bool for booleans."""
        if self.kind is TokenKind.STRING_LITERAL:
            return self.lexeme[1:-1]
        elif self.kind is TokenKind.NUMBER_LITERAL:
            return float(self.lexeme)
        elif self.kind is TokenKind.BOOLEAN_LITERAL:
            return self.lexeme == "true"
        return None

    def describe(self):
        """Short description of this token for error messages."""
        if self.kind in (TokenKind.NEWLINE, TokenKind.END_OF_INPUT) or self.kind.value.startswith("'"):
            return str(self.kind)
        return f"{self.kind} '{self.lexeme}'"

    def __repr__(self):
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.position})"


def is_identifier_start(char):
    return char.isalpha() or char == "_"


def is_identifier_char(char):
    return char.isalnum() or char == "_"


class Lexer:
    """Scans source text lazily. Iterating over a Lexer yields Tokens, ending with a single END_OF_INPUT token."""

    def __init__(self, source):
        self.source = source

    def __iter__(self):
        return self.tokens()

    def tokens(self):
        """Generator of the tokens of self.source. Raises a LexicalError at the first malformed token."""
        source = self.source
        current = 0
        line, line_start = 1, 0

        while current < len(source):
            char = source[current]
            start = current
            position = Position(line, current - line_start + 1)

            if char in WHITESPACE:
                current += 1
                continue

            elif char == COMMENT:
                while current < len(source) and source[current] != "\n":
                    current += 1
                continue

            elif char == "\n":
                current += 1
                yield Token(TokenKind.NEWLINE, char, position, start)
                line, line_start = line + 1, current
                continue

            elif char == QUOTE:
                end = source.find(QUOTE, start + 1)
                if end == -1:
                    raise LexicalError(LexicalErrorKind.UNTERMINATED_STRING_LITERAL,
                                       "string literal is never closed", position)

                current = end + 1
                yield Token(TokenKind.STRING_LITERAL, source[start:current], position, start)

                # string literals may span lines
                newlines = source.count("\n", start, current)
                if newlines:
                    line, line_start = line + newlines, source.rfind("\n", start, current) + 1

            elif char in DIGITS:
                current = self._scan_number(start, position)
                yield Token(TokenKind.NUMBER_LITERAL, source[start:current], position, start)

            elif is_identifier_start(char):
                while current < len(source) and is_identifier_char(source[current]):
                    current += 1
                lexeme = source[start:current]
                yield Token(KEYWORDS.get(lexeme, TokenKind.IDENTIFIER), lexeme, position, start)

            elif char in DELIMITERS:
                current += 1
                yield Token(DELIMITERS[char], char, position, start)

            elif char in OPERATOR_CHARS:
                while current < len(source) and source[current] in OPERATOR_CHARS:
                    current += 1
                lexeme = source[start:current]
                if lexeme not in OPERATORS:
                    raise LexicalError(LexicalErrorKind.UNRECOGNIZED_OPERATOR,
                                       f"'{lexeme}' is not a known operator", position)
                yield Token(OPERATORS[lexeme], lexeme, position, start)

            else:
                raise LexicalError(LexicalErrorKind.UNRECOGNIZED_CHARACTER,
                                   f"unexpected character {char!r}", position)

        yield Token(TokenKind.END_OF_INPUT, "", Position(line, current - line_start + 1), current)

    def _scan_number(self, start, position):
        """Returns the end offset of the number literal starting at start. Raises a LexicalError if it is malformed."""
        source = self.source
        current = start
        points = 0

        while current < len(source) and (source[current] in DIGITS or source[current] == "."):
            points += source[current] == "."
            current += 1

        # glue like '12ab' or '1_000' is not a number either
        while current < len(source) and is_identifier_char(source[current]):
            current += 1
            points = -1

        lexeme = source[start:current]
        if points > 1 or points < 0:
            raise LexicalError(LexicalErrorKind.INVALID_NUMBER_LITERAL,
                               f"'{lexeme}' is not a valid number literal", position)
        elif math.isinf(float(lexeme)):
            raise LexicalError(LexicalErrorKind.INVALID_NUMBER_LITERAL,
                               f"'{lexeme}' is too large to be a number", position)

        return current


def tokenize(source):
    """Returns a lazy generator over the tokens of source."""
    return iter(Lexer(source))
