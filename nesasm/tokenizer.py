import re
from enum import Enum

class TokenType(Enum):
  UNKNOWN = 0
  EOF = 1
  ID = 2
  DIR = 3
  NUM = 4
  OP = 5
  COMMENT = 6

class Token:
  def __init__(self, type: TokenType, lexeme: str, pos: int, line: int):
    self.type = type
    self.lexeme = lexeme
    self.pos = pos
    self.line = line

  @property
  def end(self) -> int:
    return self.pos + len(self.lexeme)

  def isa(self, type: TokenType, lexeme: str = None) -> bool:
    return self.type == type and (lexeme is None or self.lexeme == lexeme)

  def __str__(self):
    return f"Token({self.type.name}: {repr(self.lexeme)} @ {self.line}:{self.pos})"

  def __repr__(self):
    return self.__str__()

class Tokenizer:
    """Splits a single source line into tokens.

    Whitespace (including a trailing line terminator) only separates tokens;
    callers that care whether two tokens touch compare ``pos`` and ``end``.
    A ``;`` turns the rest of the line into one COMMENT token.
    """

    patterns = [
        (TokenType.DIR, re.compile(r'\.[a-zA-Z0-9_]+')),
        # Anything alphanumeric after '$' so bad digits reach the parser
        (TokenType.NUM, re.compile(r'\$[0-9a-zA-Z_]*')),
        (TokenType.OP,  re.compile(r'[#(),:]')),
        (TokenType.ID,  re.compile(r'[0-9a-zA-Z_]+')),
    ]

    def __init__(self, text: str, line: int = 0):
        self.text = text
        self.line = line
        self.pos = 0
        self.len = len(text)

    def next_token(self) -> Token:
        self._skip_whitespace()

        if self.pos >= self.len:
            return Token(TokenType.EOF, "", self.pos, self.line)

        if self.text[self.pos] == ';':
            return self._read_comment()

        for type, pattern in self.patterns:
            match = pattern.match(self.text, self.pos)
            if match:
                tok = Token(type, match.group(0), self.pos, self.line)
                self.pos = match.end()
                return tok

        # Unknown character
        tok = Token(TokenType.UNKNOWN, self.text[self.pos], self.pos, self.line)
        self.pos += 1
        return tok

    def tokens(self) -> list[Token]:
        result = []
        while True:
            tok = self.next_token()
            result.append(tok)
            if tok.type == TokenType.EOF:
                return result

    def _skip_whitespace(self):
        while self.pos < self.len and self.text[self.pos].isspace():
            self.pos += 1

    def _read_comment(self) -> Token:
        start = self.pos
        end = self.text.find('\n', start)
        if end < 0:
            end = self.len
        self.pos = end
        return Token(TokenType.COMMENT, self.text[start:end].rstrip('\r'), start, self.line)
