import dataclasses
import logging
from typing import List, Sequence, Tuple
from .ast import Address, AddressMode, LabelRef, Instruction, Label, Comment, EmptyLine, Org, Line
from .encoder import instruction_size
from .errors import InvalidLabelError
from .symtab import SymbolTable

logger = logging.getLogger(__name__)

class Compiler:
    """Two-pass address and label resolver.

    Pass 0 finds the load origin, pass 1 assigns an address to every label,
    pass 2 replaces label operands with Absolute addresses.
    """

    def __init__(self):
        self.symbols = SymbolTable()
        self.origin = 0
        self.pc = 0 # Program Counter

    def compile(self, lines: Sequence[Tuple[Line, int]]) -> Tuple[List[Instruction], int]:
        self.symbols = SymbolTable()

        # Pass 0: origin (the last .ORG wins, default 0)
        self.origin = 0
        for line, _ in lines:
            if isinstance(line, Org):
                self.origin = line.address
        logger.info("Found ORG directive. Starting at 0x%04X", self.origin)

        # Pass 1: calculate addresses and define labels
        self.pc = self.origin
        for line, line_num in lines:
            self.visit_line(line, line_num)

        # Pass 2: rewrite label operands
        instructions = []
        for line, line_num in lines:
            if isinstance(line, Instruction):
                instructions.append(self.resolve_instruction(line, line_num))

        return instructions, self.origin

    def visit_line(self, line: Line, line_num: int):
        if isinstance(line, Label):
            logger.debug("line %d: label '%s' = 0x%04X", line_num, line.name, self.pc)
            self.symbols.define(line.name, self.pc)
        elif isinstance(line, Instruction):
            self.pc += instruction_size(line)
        elif isinstance(line, (Org, Comment, EmptyLine)):
            pass
        else:
            raise TypeError(f"Unknown line at {line_num}: {line!r}")

    def resolve_instruction(self, inst: Instruction, line_num: int) -> Instruction:
        if not isinstance(inst.operand, LabelRef):
            return inst

        name = inst.operand.name
        address = self.symbols.get(name)
        if address is None:
            logger.error("Didn't find label: %s", name)
            raise InvalidLabelError(name, line_num)

        return dataclasses.replace(inst, operand=Address(address, AddressMode.ABSOLUTE))

def process_instructions(lines: Sequence[Tuple[Line, int]]) -> Tuple[List[Instruction], int]:
    """Resolve parsed lines into (instructions, origin)."""
    return Compiler().compile(lines)
