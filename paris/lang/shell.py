"""Handles interactive/command-line mode for paris interpreter. Uses cmd as backend."""

import cmd

from paris.lang.error import LexicalError, LexicalErrorKind
from paris.lang.lexical import Lexer


class Shell(cmd.Cmd):
    """paris interpreter shell."""
    intro = "paris interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, error_handler, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.error_handler = error_handler
        self.error_handler.fatal = False

        self._tmp_line = ""

    @staticmethod
    def is_incomplete(source):
        """Whether or not source ends inside a string literal, in which case the next line continues it."""
        try:
            for __ in Lexer(source):
                pass
        except LexicalError as error:
            return error.reason is LexicalErrorKind.UNTERMINATED_STRING_LITERAL
        return False

    def onecmd(self, line):
        """Continuation lines are source text, not commands: they reach default unstripped."""
        if self._tmp_line and line != "EOF":
            return self.default(line)
        return super().onecmd(line)

    def default(self, line):
        """Executes arbitrary paris statement."""
        with self.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            line = self._tmp_line + "\n" + line if self._tmp_line else line

            if self.is_incomplete(line):
                self._tmp_line = line
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            self.error_handler.register_source(line)
            result = self.sess.execute(line)
            if not result.success:
                self.error_handler.throw(result.error)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        if arg:  # 'help' is a valid variable name
            return self.default(f"help {arg}")

        print("Welcome to the paris interpreter!\n\n"
              "Bind a value to a name with ':=' and print it with 'display'. Try typing\n"
              "'greeting := `hello world`', then 'display greeting'. Strings are written\n"
              "between backticks, numbers like 42 or 1.5, and booleans as true or false.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        if self._tmp_line:
            self.default("")
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return True

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:  # 'exit' is a valid variable name
            return self.default(f"exit {arg}")
        return True
