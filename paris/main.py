"""Runs paris source files or inline source, or starts command-line mode. Uses the error handling context manager to
report errors. Called from the paris executable script.
"""

import argparse
import sys

from paris.lang.error import ErrorDescription, ErrorHandler
from paris.lang.lexical import Lexer
from paris.lang.session import Session
from paris.lang.shell import Shell


def build_parser():
    parser = argparse.ArgumentParser(prog="paris", description="paris language interpreter")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("-c", "--command", help="source text to run instead of a file")
    parser.add_argument("--tokens", action="store_true", help="print the token stream instead of running")
    parser.add_argument("--ast", action="store_true", help="print the syntax tree instead of running")
    return parser


def read_source(path, error_handler):
    """Returns the contents of path, reporting an error if it cannot be read."""
    try:
        with open(path, "r", encoding="utf-8") as file:
            return file.read()
    except OSError as error:
        error_handler.throw(ErrorDescription("IOError", f"'{path}' could not be opened ({error.strerror})"))


def main(argv=None):
    """Runs paris interpreter. Called from paris executable script."""
    with ErrorHandler() as error_handler:
        parser = build_parser()
        args = parser.parse_args(argv)
        if args.command is not None and args.file is not None:
            parser.error("a file and -c/--command cannot be given together")
        if (args.tokens or args.ast) and args.command is None and args.file is None:
            parser.error("--tokens and --ast need a file or -c/--command")

        if args.command is not None:
            source, path = args.command, "<command>"
        elif args.file is not None:
            source, path = read_source(args.file, error_handler), args.file
        else:
            Shell(Session(emit=print), error_handler).cmdloop()
            return

        error_handler.register_source(source, path)
        sess = Session(emit=print)

        if args.tokens:
            for token in Lexer(source):
                print(repr(token))
        elif args.ast:
            print(sess.parse(source).display())
        else:
            result = sess.execute(source)
            if not result.success:
                error_handler.throw(result.error)


if __name__ == "__main__":
    sys.exit(main())
