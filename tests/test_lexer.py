import unittest

from forksh.lexer import first_word, tokenize


class TestLexer(unittest.TestCase):
    def test_tokenize_splits_on_whitespace_runs(self):
        self.assertEqual(["echo", "a", "b"], tokenize("  echo   a  b "))

    def test_tokenize_empty(self):
        self.assertEqual([], tokenize(""))
        self.assertEqual([], tokenize(" \t\r\n\v"))

    def test_tokenize_keeps_operator_characters(self):
        # operators are split off by the parser, never by the lexer
        self.assertEqual(["a;b", "|"], tokenize("a;b |"))

    def test_first_word(self):
        self.assertEqual("out.txt", first_word("  out.txt more"))
        self.assertEqual("x", first_word("x"))

    def test_first_word_empty(self):
        self.assertEqual("", first_word(""))
        self.assertEqual("", first_word(" \t "))


if __name__ == "__main__":
    unittest.main()
