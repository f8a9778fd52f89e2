"""JSON dump of a parsed program.

Each entry is a ``[line, line_number]`` pair. Line kinds without data are
plain strings, the rest are single-key objects named after the kind::

    [
      [{"Directive": {"Org": 32768}}, 1],
      [{"Label": "start"}, 2],
      [{"Instruction": {"opcode": "LDA", "operand":
          {"Address": {"address": 5, "address_mode": "Immediate"}}}}, 3],
      ["Comment", 4]
    ]
"""

import json
from typing import Optional, Sequence, Tuple

from .ast import Address, LabelRef, Instruction, Label, Comment, EmptyLine, Org, Line, Operand


def operand_to_json(operand: Optional[Operand]):
    if operand is None:
        return None
    if isinstance(operand, Address):
        return {"Address": {"address": operand.address, "address_mode": operand.mode.variant}}
    if isinstance(operand, LabelRef):
        return {"Label": operand.name}
    raise TypeError(f"Unknown operand: {operand!r}")


def line_to_json(line: Line):
    if isinstance(line, EmptyLine):
        return "EmptyLine"
    if isinstance(line, Comment):
        return "Comment"
    if isinstance(line, Label):
        return {"Label": line.name}
    if isinstance(line, Instruction):
        return {"Instruction": {"opcode": line.mnemonic, "operand": operand_to_json(line.operand)}}
    if isinstance(line, Org):
        return {"Directive": {"Org": line.address}}
    raise TypeError(f"Unknown line: {line!r}")


def to_json(lines: Sequence[Tuple[Line, int]]) -> str:
    return json.dumps([[line_to_json(line), line_num] for line, line_num in lines], indent=2)
