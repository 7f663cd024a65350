"""paris language interpreter.

Basic program flow:
    1. Lexer: splits source text into a lazy stream of tokens (see paris/lang/lexical.py)
    2. Parser: builds an abstract syntax tree out of the tokens, one statement per line (see paris/lang/parser.py and
       paris/lang/tree.py)
    3. Evaluator: walks the tree and runs each statement against an environment of variables (see
       paris/lang/evaluator.py and paris/lang/environment.py)

Each phase stops at its first error and raises a structured LangError (see paris/lang/error.py). run (see
paris/lang/session.py) ties the phases together and returns output lines plus the error, if any, without printing
anything: printing is left to the command line (paris/main.py) and shell (paris/lang/shell.py).
"""

from paris.lang.session import RunResult, Session, run

__all__ = ["RunResult", "Session", "run"]
