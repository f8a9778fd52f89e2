from typing import Iterable, List, Optional, Tuple
import re
from .tokenizer import Tokenizer, Token, TokenType
from .ast import AddressMode, Address, LabelRef, Instruction, Label, Comment, EmptyLine, Org, Directive, Line, Operand
from .errors import ParseError, GrammarError, IncompleteInputError, InvalidOperandError, InvalidDirectiveError
from .validation import validate_instruction

HEX_DIGITS = re.compile(r'[0-9a-fA-F]+')

INDEXED_MODES = {
    # index: (zero page mode, absolute mode)
    None: (AddressMode.ZERO_PAGE, AddressMode.ABSOLUTE),
    'X': (AddressMode.ZERO_PAGE_X, AddressMode.ABSOLUTE_X),
    'Y': (AddressMode.ZERO_PAGE_Y, AddressMode.ABSOLUTE_Y),
}

class Parser:
    """Parses one line of source into a Line.

    Alternatives are tried in order: comment, label definition, directive,
    instruction, blank line. A line either parses completely or raises.
    """

    def __init__(self, tokenizer: Tokenizer):
        self.lex = tokenizer
        self.line = tokenizer.line
        self.peeked: List[Token] = []

    def peektok(self, offset: int = 0) -> Token:
        while len(self.peeked) <= offset:
            self.peeked.append(self.lex.next_token())
        return self.peeked[offset]

    def nexttok(self) -> Token:
        tok = self.peektok()
        if tok.type != TokenType.EOF:
            self.peeked.pop(0)
        return tok

    def expect(self, type: TokenType, lexeme: str = None, casei: bool = False) -> Optional[Token]:
        tok = self.peektok()
        if tok.type != type:
            return None
        if lexeme is not None and not _same(tok.lexeme, lexeme, casei):
            return None
        return self.nexttok()

    def require(self, type: TokenType, lexeme: str = None, casei: bool = False) -> Token:
        tok = self.peektok()
        if tok.type == TokenType.EOF:
            raise IncompleteInputError(self.line)
        if tok.type != type or (lexeme is not None and not _same(tok.lexeme, lexeme, casei)):
            raise self.unexpected()
        return self.nexttok()

    def require_end(self):
        if self.peektok().type != TokenType.EOF:
            raise self.unexpected()

    def unexpected(self) -> ParseError:
        return ParseError("Unexpected token", self.line)

    def parse_line(self) -> Line:
        tok = self.peektok()
        if tok.type == TokenType.COMMENT:
            self.nexttok()
            return Comment()
        if self.at_label():
            return self.parse_label()
        if tok.type == TokenType.DIR:
            return self.parse_directive()
        if tok.type == TokenType.ID:
            return self.parse_instruction()
        if tok.type == TokenType.EOF:
            return EmptyLine()
        raise self.unexpected()

    def at_label(self) -> bool:
        name, colon, end = self.peektok(), self.peektok(1), self.peektok(2)
        return (name.type == TokenType.ID and not name.lexeme.isdigit()
                and colon.isa(TokenType.OP, ':') and colon.pos == name.end
                and end.type == TokenType.EOF)

    def parse_label(self) -> Label:
        name = self.require(TokenType.ID)
        self.require(TokenType.OP, ':')
        return Label(name.lexeme)

    def parse_directive(self) -> Directive:
        tok = self.require(TokenType.DIR)
        arg = self.peektok()
        if arg.type != TokenType.NUM or arg.pos == tok.end or not HEX_DIGITS.fullmatch(arg.lexeme[1:]):
            raise self.unexpected()
        self.nexttok()
        self.require_end()

        name = tok.lexeme[1:]
        if name.lower() == 'org':
            value = int(arg.lexeme[1:], 16)
            if value > 0xFFFF:
                raise GrammarError(f"ORG address {arg.lexeme} does not fit in 16 bits", self.line)
            return Org(value)
        raise InvalidDirectiveError(name, self.line)

    def parse_instruction(self) -> Instruction:
        tok = self.require(TokenType.ID)
        mnemonic = tok.lexeme.upper()
        operand = None

        nxt = self.peektok()
        if nxt.type not in (TokenType.COMMENT, TokenType.EOF):
            if nxt.pos == tok.end:
                raise self.unexpected()
            operand = self.parse_operand()

        self.expect(TokenType.COMMENT)
        self.require_end()

        instr = Instruction(mnemonic, operand)
        validate_instruction(instr, self.line)
        return instr

    def parse_operand(self) -> Operand:
        # immediate - signaled by #
        if tok := self.expect(TokenType.OP, '#'):
            num = self.require(TokenType.NUM)
            if num.pos != tok.end:
                raise self.unexpected()
            return Address(self.hex_value(num), AddressMode.IMMEDIATE)

        # zero page or absolute, decided by digit count, with possible index
        if num := self.expect(TokenType.NUM):
            value = self.hex_value(num)
            index = None
            if self.expect(TokenType.OP, ','):
                index = self.parse_index()
            zero_page, absolute = INDEXED_MODES[index]
            return Address(value, absolute if len(num.lexeme) - 1 > 2 else zero_page)

        # indirect: ($nn,X) / ($nn),Y / ($nnnn)
        if self.expect(TokenType.OP, '('):
            num = self.require(TokenType.NUM)
            value = self.hex_value(num)
            digits = len(num.lexeme) - 1
            if self.expect(TokenType.OP, ','):
                self.require(TokenType.ID, 'X', casei=True)
                self.require(TokenType.OP, ')')
                return self.indirect(value, digits, 2, AddressMode.INDIRECT_X)
            self.require(TokenType.OP, ')')
            if self.expect(TokenType.OP, ','):
                self.require(TokenType.ID, 'Y', casei=True)
                return self.indirect(value, digits, 2, AddressMode.INDIRECT_Y)
            return self.indirect(value, digits, 4, AddressMode.INDIRECT)

        if tok := self.expect(TokenType.ID):
            if tok.lexeme in ('A', 'a'):
                return Address(0, AddressMode.ACCUMULATOR)
            if not tok.lexeme[0].isdigit():
                return LabelRef(tok.lexeme)

        raise self.unexpected()

    def parse_index(self) -> str:
        index = self.require(TokenType.ID)
        register = index.lexeme.upper()
        if register not in ('X', 'Y'):
            raise InvalidOperandError(f"Invalid index register: {index.lexeme}", self.line)
        return register

    def indirect(self, value: int, digits: int, max_digits: int, mode: AddressMode) -> Address:
        if digits > max_digits:
            raise self.unexpected()
        return Address(value, mode)

    def hex_value(self, tok: Token) -> int:
        digits = tok.lexeme[1:]
        try:
            value = int(digits, 16)
        except ValueError as e:
            raise ParseError(str(e), self.line) from e
        # int() also takes '0x' prefixes and '_' separators
        if not HEX_DIGITS.fullmatch(digits):
            raise ParseError(f"invalid hexadecimal digits: {digits!r}", self.line)
        return value

def _same(a: str, b: str, casei: bool) -> bool:
    if casei:
        return a.lower() == b.lower()
    return a == b

def parse_line(text: str, line_num: int) -> Line:
    """Parse one line of source, validating any instruction it holds."""
    return Parser(Tokenizer(text, line_num)).parse_line()

def parse_lines(lines: Iterable[str]) -> List[Tuple[Line, int]]:
    """Parse source lines in order, numbering them from 1."""
    return [(parse_line(text, line_num), line_num) for line_num, text in enumerate(lines, start=1)]
