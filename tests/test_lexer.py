from __future__ import annotations

import unittest

from stackarr.lexer import Lexer, Primitive, Token, TokenKind, tokenize
from stackarr.values import Number


class LexerTests(unittest.TestCase):
    def _kinds(self, source: str):
        return [(tok.kind, tok.value) for tok in tokenize(source)]

    def test_fixed_character_table(self) -> None:
        self.assertEqual(
            self._kinds("+-:.;<>⊏[]"),
            [
                (TokenKind.PRIMITIVE, Primitive.ADD),
                (TokenKind.PRIMITIVE, Primitive.SUB),
                (TokenKind.PRIMITIVE, Primitive.FLIP),
                (TokenKind.PRIMITIVE, Primitive.DUPLICATE),
                (TokenKind.PRIMITIVE, Primitive.DROP),
                (TokenKind.PRIMITIVE, Primitive.LESS_THAN),
                (TokenKind.PRIMITIVE, Primitive.GREATER_THAN),
                (TokenKind.PRIMITIVE, Primitive.SELECT),
                (TokenKind.LBRACKET, None),
                (TokenKind.RBRACKET, None),
            ],
        )

    def test_every_ascii_digit_is_a_number_literal(self) -> None:
        for digit in "0123456789":
            with self.subTest(digit=digit):
                self.assertEqual(self._kinds(digit), [(TokenKind.LITERAL, Number(float(digit)))])

    def test_digits_are_lexed_one_at_a_time(self) -> None:
        self.assertEqual(
            self._kinds("12"),
            [(TokenKind.LITERAL, Number(1.0)), (TokenKind.LITERAL, Number(2.0))],
        )

    def test_unrecognized_characters_are_skipped(self) -> None:
        self.assertEqual(tokenize(" \t\nabc XYZ ٣ ⍉ ,!"), [])
        self.assertEqual(self._kinds(" 1 x + "), [(TokenKind.LITERAL, Number(1.0)), (TokenKind.PRIMITIVE, Primitive.ADD)])

    def test_tokens_preserve_source_order_and_spans(self) -> None:
        for source in ("2 2 +", "[1 [2 3]] ⊏", "a1b2c;", "", "   ", "9:8.7<6>5"):
            with self.subTest(source=source):
                tokens = tokenize(source)
                self.assertLessEqual(len(tokens), len(source))
                positions = [tok.pos for tok in tokens]
                self.assertEqual(positions, sorted(positions))
                for tok in tokens:
                    self.assertEqual(source[tok.pos : tok.end], tok.text)

    def test_scenario_token_stream(self) -> None:
        self.assertEqual(repr(tokenize("2 2 +")), "[Lit(Number(2.0)), Lit(Number(2.0)), Pri(ADD)]")
        self.assertEqual(repr(tokenize("[3]")), "[LBracket, Lit(Number(3.0)), RBracket]")

    def test_peek_does_not_consume(self) -> None:
        lexer = Lexer("+1")
        self.assertEqual(lexer.peek_char(), "+")
        self.assertEqual(lexer.next_char(), "+")
        self.assertEqual(lexer.peek_char(), "1")
        self.assertEqual(lexer.next_char(), "1")
        self.assertIsNone(lexer.peek_char())
        self.assertIsNone(lexer.next_char())

    def test_token_constructors_match_lexed_tokens(self) -> None:
        lexed = tokenize("[1-]")
        built = [Token.lbracket(), Token.literal(Number(1.0)), Token.primitive(Primitive.SUB), Token.rbracket()]
        self.assertTrue(all(a.same_as(b) for a, b in zip(lexed, built, strict=True)))


if __name__ == "__main__":
    unittest.main()
