"""Error handling for paris language. The core (lexer, parser, evaluator) only ever raises LangErrors and never prints:
they are turned into ErrorDescriptions by the session and rendered by ErrorHandler, which is used by the host (command
line and shell) only. If another type of error makes it all the way to ErrorHandler, it is assumed to be an internal
issue.
"""

import enum
import sys
from dataclasses import dataclass
from typing import NamedTuple, Optional

from termcolor import colored


class Position(NamedTuple):
    """1-based line and column of a character in source text."""
    line: int
    column: int

    def __str__(self):
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class ErrorDescription:
    """What the host gets back when a run fails: error kind, human-readable message and (if known) position. Lexical
    errors also name their reason, e.g. UnterminatedStringLiteral.
    """
    kind: str
    message: str
    position: Optional[Position] = None
    reason: Optional[str] = None

    def __str__(self):
        if self.position is None:
            return f"{self.kind}: {self.message}"
        return f"{self.kind} at {self.position}: {self.message}"


class LangError(Exception):
    """Superclass of every error the paris core can raise. Subclasses set kind, which is the error kind reported to the
    host.
    """
    kind = "Error"

    def __init__(self, message, position=None):
        super().__init__(message)
        self.message = message
        self.position = position

    def describe(self):
        """Returns this error as an ErrorDescription."""
        return ErrorDescription(self.kind, self.message, self.position)

    def __str__(self):
        return str(self.describe())


class LexicalErrorKind(enum.Enum):
    """Reasons for a LexicalError."""
    UNTERMINATED_STRING_LITERAL = "UnterminatedStringLiteral"
    INVALID_NUMBER_LITERAL = "InvalidNumberLiteral"
    UNRECOGNIZED_CHARACTER = "UnrecognizedCharacter"
    UNRECOGNIZED_OPERATOR = "UnrecognizedOperator"


class LexicalError(LangError):
    """Source text could not be split into tokens."""
    kind = "LexicalError"

    def __init__(self, reason, message, position):
        super().__init__(f"{reason.value}: {message}", position)
        self.reason = reason

    def describe(self):
        return ErrorDescription(self.kind, self.message, self.position, self.reason.value)


class ParseError(LangError):
    """Token sequence does not match the grammar. Reported with the SyntaxError kind."""
    kind = "SyntaxError"

    def __init__(self, expected, found, position, message=None):
        super().__init__(message or f"expected {expected}, found {found}", position)
        self.expected = expected
        self.found = found


class UndefinedVariable(LangError):
    """Identifier lookup missed every scope."""
    kind = "UndefinedVariable"

    def __init__(self, name, position=None):
        super().__init__(f"'{name}' is not defined", position)
        self.name = name


class TypeMismatch(LangError):
    """A value of the wrong type was given to an operation. Not reachable from the current grammar (there are no
    operators combining values yet), but operators added later report through it.
    """
    kind = "TypeMismatch"

    def __init__(self, expected, actual, position=None):
        super().__init__(f"expected {expected}, got {actual}", position)
        self.expected = expected
        self.actual = actual


class ErrorHandler:
    """Context manager that renders paris errors for the user and silently suppresses them, exiting the process if
    fatal.
    """
    ERROR = "red"

    def __init__(self, fatal=True, path="<in>"):
        self.fatal = fatal
        self.path = path      # used for error messages
        self.source = None    # source text of the run currently being handled, used for diagnosis
        self.failed = False

    def register_source(self, source, path=None):
        """Registers the source text (and optionally its path) the next errors will refer to."""
        self.source = source
        if path is not None:
            self.path = path

    def source_line(self, line_num):
        """Returns line line_num (1-based) of the registered source, or None if it is not available."""
        if self.source is None:
            return None

        lines = self.source.split("\n")
        if 0 < line_num <= len(lines):
            return lines[line_num - 1].rstrip("\r")
        return None

    @staticmethod
    def diagnose(line, column, length=1):
        """Returns line with the offending part highlighted and bolded, and a marker beneath it."""
        start = min(column - 1, len(line))
        end = max(min(start + length, len(line)), start + 1)

        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def format(self, error, internal=False):
        """Returns the rendered message for error, an ErrorDescription."""
        error_msg = colored(f"{self.path}:", attrs=["bold"])
        if error.position is not None:
            error_msg += colored(f"{error.position}:", attrs=["bold"])
        error_msg += " "

        if internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += colored(error.kind, attrs=["bold"]) + f": {error.message}"

        if error.position is not None:
            line = self.source_line(error.position.line)
            if line is not None:
                error_msg += "\n" + ErrorHandler.diagnose(line, error.position.column)

        return error_msg

    def throw(self, error, internal=False):
        """Reports error (a LangError or an ErrorDescription) and exits if this handler is fatal."""
        if isinstance(error, LangError):
            error = error.describe()

        self.failed = True
        print(self.format(error, internal), file=sys.stderr)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(ErrorDescription("Interrupted", "keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(ErrorDescription("RecursionError", "maximum recursion depth exceeded"), internal=True)
        elif exc_type is not None and issubclass(exc_type, LangError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(ErrorDescription(exc_type.__name__, f"unknown error: '{exc_val}'"), internal=True)
            do_exit = True

        return not do_exit
