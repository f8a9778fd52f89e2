import unittest
from nesasm.tokenizer import Tokenizer, TokenType

class TestTokenizer(unittest.TestCase):
    def tokenize(self, text):
        return Tokenizer(text, 1).tokens()

    def test_simple_tokens(self):
        tokens = self.tokenize("LDA #$01")
        # ID LDA, OP #, NUM $01, EOF
        self.assertEqual([t.type for t in tokens],
                         [TokenType.ID, TokenType.OP, TokenType.NUM, TokenType.EOF])
        self.assertEqual(tokens[0].lexeme, "LDA")
        self.assertEqual(tokens[2].lexeme, "$01")

    def test_positions(self):
        tokens = self.tokenize("  LDA #$01")
        self.assertEqual(tokens[0].pos, 2)
        self.assertEqual(tokens[0].end, 5)
        # '#' and '$01' touch
        self.assertEqual(tokens[1].end, tokens[2].pos)

    def test_comment_is_one_token(self):
        tokens = self.tokenize("LDA $01 ; load, accumulator\n")
        self.assertEqual(tokens[2].type, TokenType.COMMENT)
        self.assertEqual(tokens[2].lexeme, "; load, accumulator")
        self.assertEqual(tokens[3].type, TokenType.EOF)

    def test_directive(self):
        tokens = self.tokenize(".org $8000")
        self.assertEqual(tokens[0].type, TokenType.DIR)
        self.assertEqual(tokens[0].lexeme, ".org")
        self.assertEqual(tokens[1].type, TokenType.NUM)

    def test_bad_hex_stays_one_token(self):
        tokens = self.tokenize("$4G")
        self.assertEqual(tokens[0].type, TokenType.NUM)
        self.assertEqual(tokens[0].lexeme, "$4G")

    def test_indirect_punctuation(self):
        tokens = self.tokenize("($44),Y")
        self.assertEqual([t.lexeme for t in tokens[:-1]], ["(", "$44", ")", ",", "Y"])

    def test_unknown_character(self):
        tokens = self.tokenize("==")
        self.assertEqual(tokens[0].type, TokenType.UNKNOWN)
        self.assertEqual(tokens[1].type, TokenType.UNKNOWN)

    def test_line_terminator_is_whitespace(self):
        tokens = self.tokenize("\r\n")
        self.assertEqual([t.type for t in tokens], [TokenType.EOF])

if __name__ == '__main__':
    unittest.main()
