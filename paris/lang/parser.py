"""Syntactic analysis for paris language: builds a Program tree out of a token stream.

Formally, paris grammar can be defined as

```
<program>    ::= <newline>* (<statement> <newline>*)* <end_of_input>
<statement>  ::= <assignment> | <display>
<assignment> ::= <identifier> ":=" <expression> <terminator>
<display>    ::= "display" <expression> <terminator>
<expression> ::= <literal> | <identifier> | "(" <expression> ")"
<terminator> ::= <newline> | <end_of_input>
```

Statements are parsed by recursive descent, one method per rule. Expressions are parsed with binding powers (Pratt
parsing): PREFIX_RULES maps the token that starts an expression to the method parsing it, INFIX_RULES maps an operator
token to its binding power and the method combining it with its left operand. There are no operators yet, so
INFIX_RULES is empty; adding one is a matter of adding an entry and its method. Expressions nest at most MAX_DEPTH deep,
so that deeply parenthesized input is a ParseError rather than a RecursionError.
"""

from paris.lang.error import ParseError
from paris.lang.lexical import Lexer, TokenKind
from paris.lang.tree import AssignmentStatement, DisplayStatement, Identifier, Literal, Program
from paris.lang.values import from_python


class Parser:
    """Parses a token iterable (usually a Lexer) into a Program. Tokens are pulled one at a time and not retained."""
    TERMINATORS = (TokenKind.NEWLINE, TokenKind.END_OF_INPUT)

    PREFIX_RULES = {
        TokenKind.STRING_LITERAL: "literal",
        TokenKind.NUMBER_LITERAL: "literal",
        TokenKind.BOOLEAN_LITERAL: "literal",
        TokenKind.IDENTIFIER: "identifier",
        TokenKind.LEFT_PAREN: "grouping",
    }
    INFIX_RULES = {}  # TokenKind: (binding power, method name)
    MAX_DEPTH = 200  # nested expressions

    def __init__(self, tokens):
        self._tokens = iter(tokens)
        self.current = None
        self.depth = 0
        self.advance()

    def parse(self):
        """Parses every statement up to the end of input. Raises a ParseError on the first grammar violation (and lets
        LexicalErrors of the underlying lexer through).
        """
        statements = []

        self.skip_newlines()
        while not self.check(TokenKind.END_OF_INPUT):
            statements.append(self.statement())
            self.skip_newlines()

        return Program(tuple(statements))

    # statements

    def statement(self):
        token = self.current

        if token.kind is TokenKind.IDENTIFIER:
            return self.assignment_statement()
        elif token.kind is TokenKind.DISPLAY:
            return self.display_statement()
        elif token.kind is TokenKind.BOOLEAN_LITERAL:
            self.advance()
            if self.check(TokenKind.ASSIGN):
                raise self.reserved_assignment(token)
            raise self.error("statement", token)

        raise self.error("statement")

    def assignment_statement(self):
        name = self.identifier(self.advance())
        self.consume(TokenKind.ASSIGN, "':='")
        value = self.expression()
        self.terminator()

        return AssignmentStatement(name, value, name.position)

    def display_statement(self):
        keyword = self.advance()
        if self.check(TokenKind.ASSIGN):
            raise self.reserved_assignment(keyword)

        value = self.expression()
        self.terminator()

        return DisplayStatement(value, keyword.position)

    def terminator(self):
        """Consumes the newline ending a statement. End of input also ends a statement, but is left in place."""
        if self.check(TokenKind.NEWLINE):
            self.advance()
        elif not self.check(TokenKind.END_OF_INPUT):
            raise self.error("newline after statement")

    # expressions

    def expression(self, binding_power=0):
        """Parses an expression whose operators all bind tighter than binding_power."""
        token = self.current
        if token.kind not in self.PREFIX_RULES:
            raise self.error("expression")

        if self.depth >= self.MAX_DEPTH:
            raise ParseError("expression", token.describe(), token.position, "expression nested too deeply")

        self.advance()
        self.depth += 1
        try:
            left = getattr(self, self.PREFIX_RULES[token.kind])(token)
        finally:
            self.depth -= 1

        while self.current.kind in self.INFIX_RULES:
            power, rule = self.INFIX_RULES[self.current.kind]
            if power <= binding_power:
                break
            operator = self.advance()
            left = getattr(self, rule)(left, operator, power)

        return left

    def literal(self, token):
        return Literal(from_python(token.value), token.position)

    def identifier(self, token):
        return Identifier(token.lexeme, token.position)

    def grouping(self, token):
        expression = self.expression()
        self.consume(TokenKind.RIGHT_PAREN, "')'")
        return expression

    # helpers

    def advance(self):
        """Moves to the next token and returns the previous one."""
        previous = self.current
        if previous is None or previous.kind is not TokenKind.END_OF_INPUT:
            self.current = next(self._tokens)
        return previous

    def check(self, kind):
        return self.current.kind is kind

    def consume(self, kind, expected):
        """Consumes and returns the current token if it is of kind, otherwise raises a ParseError."""
        if not self.check(kind):
            raise self.error(expected)
        return self.advance()

    def skip_newlines(self):
        while self.check(TokenKind.NEWLINE):
            self.advance()

    def error(self, expected, token=None):
        """Returns a ParseError for token (default: the current token) when expected was expected."""
        if token is None:
            token = self.current
        return ParseError(expected, token.describe(), token.position)

    @staticmethod
    def reserved_assignment(token):
        message = f"cannot assign to reserved keyword '{token.lexeme}'"
        return ParseError("identifier", token.describe(), token.position, message)


def parse(source):
    """Lexes and parses source into a Program."""
    return Parser(Lexer(source)).parse()
