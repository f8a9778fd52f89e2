from typing import Iterable

from .ast import AddressMode, Address, LabelRef, Instruction
from .bytes import ByteConverter
from .image import build_binary
from .errors import OpCodeConversionError, OperandOutOfRangeError, InvalidOperandError
from .opcodes import MODE_SIZES, lookup_opcode

WORD_MODES = frozenset({
    AddressMode.ABSOLUTE, AddressMode.ABSOLUTE_X, AddressMode.ABSOLUTE_Y,
})
BYTE_MODES = frozenset({
    AddressMode.ZERO_PAGE, AddressMode.ZERO_PAGE_X, AddressMode.ZERO_PAGE_Y,
    AddressMode.INDIRECT, AddressMode.INDIRECT_Y, AddressMode.IMMEDIATE,
})


def effective_mode(instr: Instruction) -> AddressMode:
    """Mode used for the opcode lookup. JSR is always Absolute."""
    if instr.mnemonic == 'JSR':
        return AddressMode.ABSOLUTE
    operand = instr.operand
    if operand is None:
        return AddressMode.IMPLIED
    if isinstance(operand, Address):
        return operand.mode
    if isinstance(operand, LabelRef):
        # labels always resolve to Absolute operands
        return AddressMode.ABSOLUTE
    raise TypeError(f"Unknown operand: {operand!r}")


def instruction_size(instr: Instruction) -> int:
    if instr.operand is None:
        return 1
    return MODE_SIZES[effective_mode(instr)]


def encode_instruction(instr: Instruction) -> bytes:
    """Opcode byte followed by 0, 1 or 2 little-endian operand bytes."""
    operand = instr.operand
    if isinstance(operand, LabelRef):
        raise InvalidOperandError(f"label '{operand.name}' is unresolved")

    mode = effective_mode(instr)
    opcode = lookup_opcode(instr.mnemonic, mode)
    if opcode is None:
        raise OpCodeConversionError(instr.mnemonic)

    out = bytearray([opcode])
    if operand is None:
        return bytes(out)

    if mode in WORD_MODES:
        if not ByteConverter.word_fits(operand.address):
            raise OperandOutOfRangeError(str(operand))
        out += ByteConverter.convert_int(operand.address, 2)
    elif mode in BYTE_MODES:
        if not ByteConverter.byte_fits(operand.address):
            raise OperandOutOfRangeError(str(operand))
        out += ByteConverter.convert_int(operand.address, 1)
    # Accumulator, Implied, IndirectX and Relative carry no operand bytes
    return bytes(out)


def to_bytes(instructions: Iterable[Instruction]) -> bytes:
    return build_binary(encode_instruction(instr) for instr in instructions)
