from typing import Optional, Union
from dataclasses import dataclass
from enum import Enum

class AddressMode(Enum):
    ACCUMULATOR = 'ACC'
    ABSOLUTE = 'ABS'
    ABSOLUTE_X = 'ABSX'
    ABSOLUTE_Y = 'ABSY'
    IMMEDIATE = '#'
    IMPLIED = 'IMP'
    INDIRECT = 'IND'
    INDIRECT_X = 'INDX'
    INDIRECT_Y = 'INDY'
    RELATIVE = 'REL'
    ZERO_PAGE = 'ZP'
    ZERO_PAGE_X = 'ZPX'
    ZERO_PAGE_Y = 'ZPY'

    @property
    def variant(self) -> str:
        # ZERO_PAGE_X -> ZeroPageX
        return ''.join(part.capitalize() for part in self.name.split('_'))

    def __str__(self):
        return _DISPLAY_NAMES[self]

_DISPLAY_NAMES = {
    AddressMode.ACCUMULATOR: 'Accumulator',
    AddressMode.ABSOLUTE: 'Absolute',
    AddressMode.ABSOLUTE_X: 'Absolute X',
    AddressMode.ABSOLUTE_Y: 'Absolute Y',
    AddressMode.IMMEDIATE: 'Immediate',
    AddressMode.IMPLIED: 'Implied',
    AddressMode.INDIRECT: 'Indirect',
    AddressMode.INDIRECT_X: 'Indirect X',
    AddressMode.INDIRECT_Y: 'Indirect Y',
    AddressMode.RELATIVE: 'Relative',
    AddressMode.ZERO_PAGE: 'ZeroPage',
    AddressMode.ZERO_PAGE_X: 'ZeroPage X',
    AddressMode.ZERO_PAGE_Y: 'ZeroPage Y',
}

# Operands

@dataclass(frozen=True)
class Address:
    address: int
    mode: AddressMode

    def __str__(self):
        return f"Address Mode - {self.mode}, Address: {self.address}"

@dataclass(frozen=True)
class LabelRef:
    name: str

Operand = Union[Address, LabelRef]

# Lines

@dataclass(frozen=True)
class EmptyLine:
    pass

@dataclass(frozen=True)
class Comment:
    pass

@dataclass(frozen=True)
class Label:
    name: str

@dataclass(frozen=True)
class Instruction:
    mnemonic: str
    operand: Optional[Operand] = None

@dataclass(frozen=True)
class Org:
    address: int

Directive = Union[Org]

Line = Union[EmptyLine, Comment, Label, Instruction, Org]
