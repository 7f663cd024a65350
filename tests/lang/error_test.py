import io
import unittest
from contextlib import redirect_stderr

from paris.lang.error import (ErrorDescription, ErrorHandler, LexicalError, LexicalErrorKind, ParseError, Position,
                              UndefinedVariable)


class ErrorTestCase(unittest.TestCase):

    def test_describe(self):
        cases = [
            (UndefinedVariable("y", Position(1, 9)), "UndefinedVariable", "'y' is not defined", None),
            (ParseError("expression", "newline", Position(2, 3)), "SyntaxError", "expected expression, found newline",
             None),
            (LexicalError(LexicalErrorKind.INVALID_NUMBER_LITERAL, "bad", Position(1, 1)), "LexicalError",
             "InvalidNumberLiteral: bad", "InvalidNumberLiteral"),
            (LexicalError(LexicalErrorKind.UNTERMINATED_STRING_LITERAL, "no closing `", Position(1, 6)), "LexicalError",
             "UnterminatedStringLiteral: no closing `", "UnterminatedStringLiteral"),
        ]
        for error, kind, message, reason in cases:
            description = error.describe()
            self.assertEqual(kind, description.kind, error)
            self.assertEqual(message, description.message, error)
            self.assertEqual(error.position, description.position, error)
            self.assertEqual(reason, description.reason, error)

    def test_str(self):
        self.assertEqual("UndefinedVariable at 1:9: 'y' is not defined", str(UndefinedVariable("y", Position(1, 9))))
        self.assertEqual("IOError: nope", str(ErrorDescription("IOError", "nope")))


class ErrorHandlerTestCase(unittest.TestCase):

    def test_throw(self):
        handler = ErrorHandler(fatal=False, path="prog.paris")
        handler.register_source("x := 1\ndisplay y\n")

        stderr = io.StringIO()
        with redirect_stderr(stderr):
            handler.throw(UndefinedVariable("y", Position(2, 9)))

        output = stderr.getvalue()
        self.assertIn("prog.paris", output)
        self.assertIn("UndefinedVariable", output)
        self.assertIn("'y' is not defined", output)
        self.assertIn("display ", output)
        self.assertIn("^", output)
        self.assertTrue(handler.failed)

    def test_fatal(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                ErrorHandler().throw(ErrorDescription("IOError", "could not be opened"))
        self.assertEqual(1, context.exception.code)

    def test_context_manager(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            with ErrorHandler(fatal=False):
                raise UndefinedVariable("x")
        self.assertIn("UndefinedVariable", stderr.getvalue())

        with redirect_stderr(io.StringIO()):
            with self.assertRaises(ValueError):
                with ErrorHandler(fatal=False):
                    raise ValueError("boom")

    def test_source_line(self):
        handler = ErrorHandler()
        self.assertIsNone(handler.source_line(1))

        handler.register_source("a\r\nb", "file.paris")
        self.assertEqual("a", handler.source_line(1))
        self.assertEqual("b", handler.source_line(2))
        self.assertIsNone(handler.source_line(3))
        self.assertEqual("file.paris", handler.path)


if __name__ == '__main__':
    unittest.main()
