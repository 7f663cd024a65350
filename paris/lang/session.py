"""Session control for paris language: the entry point hosts (command line, shell, tests) use to run source text.

A Session owns one Environment, so bindings made by one execute call are visible to the next (used by the shell).
run builds a throwaway Session per call, so independent runs never share state.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from paris.lang.environment import Environment
from paris.lang.error import ErrorDescription, LangError
from paris.lang.evaluator import Evaluator
from paris.lang.lexical import Lexer
from paris.lang.parser import Parser


@dataclass
class RunResult:
    """Output lines of a run, in order, and the error that stopped it (None on success)."""
    output: List[str] = field(default_factory=list)
    error: Optional[ErrorDescription] = None

    @property
    def success(self):
        return self.error is None


class Session:
    """Governs a paris session, with control over the scope of variables."""

    def __init__(self, emit=None):
        """emit, if given, is called with every output line as soon as it is produced."""
        self.environment = Environment()
        self.emit = emit

    def parse(self, source):
        """Returns the Program for source. Raises LexicalError or ParseError."""
        return Parser(Lexer(source)).parse()

    def execute(self, source):
        """Lexes, parses and evaluates source in this session's environment. Errors raised by any phase stop the run
        and are returned in the RunResult rather than raised; lines displayed before the error are kept.
        """
        result = RunResult()

        def emit(line):
            result.output.append(line)
            if self.emit is not None:
                self.emit(line)

        try:
            program = self.parse(source)
            Evaluator(self.environment, emit).execute(program)
        except LangError as error:
            result.error = error.describe()

        return result

    def lookup(self, name):
        """Returns the value currently bound to name. Raises UndefinedVariable if there is none."""
        return self.environment.lookup(name)


def run(source, emit=None):
    """Runs source in a fresh environment and returns its RunResult."""
    return Session(emit).execute(source)
