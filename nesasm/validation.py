"""Per-mnemonic addressing-mode checks.

The whitelists here are independent of the opcode table: an instruction can
pass validation and still have no opcode for its effective mode (a branch to
a label, for instance, is resolved to an Absolute operand and only fails once
it is encoded).
"""

from types import MappingProxyType

from .ast import AddressMode, Address, LabelRef, Instruction
from .errors import InvalidOpCodeError

ACC = AddressMode.ACCUMULATOR
ABS = AddressMode.ABSOLUTE
ABSX = AddressMode.ABSOLUTE_X
ABSY = AddressMode.ABSOLUTE_Y
IMM = AddressMode.IMMEDIATE
IMP = AddressMode.IMPLIED
IND = AddressMode.INDIRECT
INDX = AddressMode.INDIRECT_X
INDY = AddressMode.INDIRECT_Y
REL = AddressMode.RELATIVE
ZP = AddressMode.ZERO_PAGE
ZPX = AddressMode.ZERO_PAGE_X
ZPY = AddressMode.ZERO_PAGE_Y

_ALU = frozenset({IMM, ZP, ZPX, ABS, ABSX, ABSY, INDX, INDY})
_SHIFT = frozenset({ACC, ZP, ZPX, ABS, ABSX})
_INC_DEC = frozenset({ZP, ZPX, ABS, ABSX})
_COMPARE_INDEX = frozenset({IMM, ZP, ABS})
_IMPLIED = frozenset({IMP})
_RELATIVE = frozenset({REL})

BRANCHES = frozenset({'BPL', 'BMI', 'BVC', 'BVS', 'BCC', 'BCS', 'BNE', 'BEQ'})

# Mnemonics whose label operands are accepted as-is; everything else must be
# written with a literal address.
LABEL_TARGETS = frozenset({'JMP', 'JSR'}) | BRANCHES

LEGAL_MODES = MappingProxyType({
    'ADC': _ALU,
    'AND': _ALU,
    'CMP': _ALU,
    'EOR': _ALU,
    'LDA': _ALU,
    'ORA': _ALU,
    'SBC': _ALU,
    'STA': _ALU - {IMM},

    'ASL': _SHIFT,
    'LSR': _SHIFT,
    'ROL': _SHIFT,
    'ROR': _SHIFT,

    'BIT': frozenset({ZP, ABS}),
    'CPX': _COMPARE_INDEX,
    'CPY': _COMPARE_INDEX,
    'DEC': _INC_DEC,
    'INC': _INC_DEC,

    'JMP': frozenset({ABS, IND}),
    'JSR': frozenset({ABS}),

    'LDX': frozenset({IMM, ZP, ZPY, ABS, ABSY}),
    'LDY': frozenset({IMM, ZP, ZPX, ABS, ABSX}),
    'STX': frozenset({ZP, ZPY, ABS}),
    'STY': frozenset({ZP, ZPX, ABS}),

    **{branch: _RELATIVE for branch in BRANCHES},

    **{name: _IMPLIED for name in (
        'BRK', 'NOP', 'RTI', 'RTS',
        'CLC', 'SEC', 'CLI', 'SEI', 'CLV', 'CLD', 'SED',
        'TAX', 'TXA', 'TAY', 'TYA', 'TSX', 'TXS',
        'DEX', 'INX', 'DEY', 'INY',
        'PHA', 'PLA', 'PHP', 'PLP',
    )},
})


def validate_instruction(instr: Instruction, line_num: int) -> None:
    """Raise InvalidOpCodeError unless the operand suits the mnemonic."""
    mnemonic = instr.mnemonic.upper()
    modes = LEGAL_MODES.get(mnemonic)
    if modes is None:
        raise InvalidOpCodeError(f"{instr.mnemonic} is invalid.", line_num)

    operand = instr.operand
    if IMP in modes:
        if operand is not None:
            raise InvalidOpCodeError(f"{instr.mnemonic} does not take an address.", line_num)
        return

    if operand is None:
        raise InvalidOpCodeError(f"{instr.mnemonic} requires an address.", line_num)

    if isinstance(operand, LabelRef):
        if mnemonic not in LABEL_TARGETS:
            raise InvalidOpCodeError(f"{instr.mnemonic} does not support labels", line_num)
    elif isinstance(operand, Address):
        if operand.mode not in modes:
            raise InvalidOpCodeError(
                f"{instr.mnemonic} does not support {operand.mode} addressing.", line_num)
    else:
        raise TypeError(f"Unknown operand: {operand!r}")
