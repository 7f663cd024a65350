import unittest

from paris.lang.error import LexicalError, LexicalErrorKind, Position
from paris.lang.lexical import Lexer, TokenKind, tokenize


def kinds(source):
    return [token.kind for token in Lexer(source)]


def relex(source):
    """Rebuilds source out of its tokens' lexemes and the separators between them."""
    result, previous = "", 0
    for token in Lexer(source):
        result += source[previous:token.offset] + token.lexeme
        previous = token.offset + len(token.lexeme)
    return result


class LexerTestCase(unittest.TestCase):

    def test_kinds(self):
        cases = {
            "x := `hello world`\ndisplay x": [
                TokenKind.IDENTIFIER, TokenKind.ASSIGN, TokenKind.STRING_LITERAL, TokenKind.NEWLINE,
                TokenKind.DISPLAY, TokenKind.IDENTIFIER, TokenKind.END_OF_INPUT
            ],
            "display 42": [TokenKind.DISPLAY, TokenKind.NUMBER_LITERAL, TokenKind.END_OF_INPUT],
            "display (true)": [
                TokenKind.DISPLAY, TokenKind.LEFT_PAREN, TokenKind.BOOLEAN_LITERAL, TokenKind.RIGHT_PAREN,
                TokenKind.END_OF_INPUT
            ],
            "x:=false": [TokenKind.IDENTIFIER, TokenKind.ASSIGN, TokenKind.BOOLEAN_LITERAL, TokenKind.END_OF_INPUT],
            "display 1 # prints one\n": [
                TokenKind.DISPLAY, TokenKind.NUMBER_LITERAL, TokenKind.NEWLINE, TokenKind.END_OF_INPUT
            ],
            "\t \r\n\n": [TokenKind.NEWLINE, TokenKind.NEWLINE, TokenKind.END_OF_INPUT],
            "": [TokenKind.END_OF_INPUT],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, kinds(case), case)

    def test_keywords(self):
        cases = {
            "display": TokenKind.DISPLAY,
            "true": TokenKind.BOOLEAN_LITERAL,
            "false": TokenKind.BOOLEAN_LITERAL,
            "displayed": TokenKind.IDENTIFIER,
            "True": TokenKind.IDENTIFIER,
            "_x1": TokenKind.IDENTIFIER,
            "été": TokenKind.IDENTIFIER,
        }
        for case, expected in cases.items():
            token = next(tokenize(case))
            self.assertEqual(expected, token.kind, case)
            self.assertEqual(case, token.lexeme, case)

    def test_values(self):
        cases = {
            "`hello world`": "hello world",
            "``": "",
            "`two\nlines`": "two\nlines",
            "42": 42.0,
            "1.5": 1.5,
            "1.": 1.0,
            "007": 7.0,
            "true": True,
            "false": False,
        }
        for case, expected in cases.items():
            self.assertEqual(expected, next(tokenize(case)).value, case)

    def test_positions(self):
        tokens = list(Lexer("x := `hello world`\ndisplay x"))
        expected = [(1, 1), (1, 3), (1, 6), (1, 19), (2, 1), (2, 9), (2, 10)]
        self.assertEqual([Position(*pos) for pos in expected], [token.position for token in tokens])

        tokens = list(Lexer("x := `a\nb`\n  display x"))
        self.assertEqual(Position(3, 3), tokens[4].position)
        self.assertEqual(TokenKind.DISPLAY, tokens[4].kind)

    def test_relex(self):
        cases = [
            "x := `hello world`\ndisplay x\n",
            "  x:=1.5   # trailing comment",
            "\n\ny := `multi\nline`\n\ndisplay (y)\n",
            "display true\r\ndisplay false",
        ]
        for case in cases:
            self.assertEqual(case, relex(case), case)

    def test_restartable(self):
        lexer = Lexer("x := 1\ndisplay x")
        self.assertEqual(list(lexer), list(lexer))
        self.assertEqual(1, kinds("x := 1\ndisplay x").count(TokenKind.END_OF_INPUT))

    def test_lazy(self):
        tokens = tokenize("display 1\n:=:")
        self.assertEqual(TokenKind.DISPLAY, next(tokens).kind)
        self.assertEqual(TokenKind.NUMBER_LITERAL, next(tokens).kind)
        self.assertEqual(TokenKind.NEWLINE, next(tokens).kind)
        self.assertRaises(LexicalError, next, tokens)

    def test_errors(self):
        should_raise = {
            "x := `abc": (LexicalErrorKind.UNTERMINATED_STRING_LITERAL, (1, 6)),
            "display `a\nb": (LexicalErrorKind.UNTERMINATED_STRING_LITERAL, (1, 9)),
            "x := 1.2.3": (LexicalErrorKind.INVALID_NUMBER_LITERAL, (1, 6)),
            "x := 12ab": (LexicalErrorKind.INVALID_NUMBER_LITERAL, (1, 6)),
            "x := 1_000": (LexicalErrorKind.INVALID_NUMBER_LITERAL, (1, 6)),
            "x := " + "9" * 400: (LexicalErrorKind.INVALID_NUMBER_LITERAL, (1, 6)),
            "x = 1": (LexicalErrorKind.UNRECOGNIZED_OPERATOR, (1, 3)),
            "x :== 1": (LexicalErrorKind.UNRECOGNIZED_OPERATOR, (1, 3)),
            "display x;": (LexicalErrorKind.UNRECOGNIZED_OPERATOR, (1, 10)),
            "x := .5": (LexicalErrorKind.UNRECOGNIZED_OPERATOR, (1, 6)),
            "x := 'a'": (LexicalErrorKind.UNRECOGNIZED_CHARACTER, (1, 6)),
            "\ndisplay {": (LexicalErrorKind.UNRECOGNIZED_CHARACTER, (2, 9)),
        }
        for case, (reason, position) in should_raise.items():
            with self.assertRaises(LexicalError, msg=case) as context:
                list(Lexer(case))
            self.assertEqual(reason, context.exception.reason, case)
            self.assertEqual(Position(*position), context.exception.position, case)
            self.assertEqual("LexicalError", context.exception.describe().kind, case)

    def test_unterminated_message(self):
        with self.assertRaises(LexicalError) as context:
            list(Lexer("x := `abc"))
        self.assertTrue(context.exception.message.startswith("UnterminatedStringLiteral"))


if __name__ == '__main__':
    unittest.main()
