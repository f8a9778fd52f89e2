import logging
from io import StringIO
from typing import List, Optional, TextIO, Tuple

from .ast import Instruction, Line
from .compiler import Compiler
from .dump import to_json
from .encoder import to_bytes
from .image import build_rom, write_hex_output
from .parser import parse_lines
from .symtab import SymbolTable

logger = logging.getLogger(__name__)

class Assembler:
  """Runs source text through parse, resolve and encode.

  Usage::

      asm = Assembler()
      asm.assemble_stream(f, "game.asm")
      asm.parse()       # lines, for the JSON dump
      asm.compile()     # instructions, origin and bytes
      rom = asm.rom()
  """

  def __init__(self):
    self.filename: Optional[str] = None
    self.source: List[str] = []
    self.reset()

  def reset(self):
    self.lines: List[Tuple[Line, int]] = []
    self.instructions: List[Instruction] = []
    self.compiler = Compiler()
    self.parsed = False
    self.compiled = False
    self._bytes = b""

  @property
  def bytes(self) -> bytes:
    return self._bytes

  @property
  def origin(self) -> int:
    return self.compiler.origin

  @property
  def symbols(self) -> SymbolTable:
    return self.compiler.symbols

  def assemble_stream(self, stream: TextIO, filename: str = None):
    # New source drops anything parsed or compiled from the previous one
    self.reset()
    self.filename = filename
    self.source = list(stream)

  def parse(self) -> List[Tuple[Line, int]]:
    self.lines = parse_lines(self.source)
    self.parsed = True
    return self.lines

  def compile(self) -> bytes:
    if not self.parsed:
      self.parse()
    self.instructions, _ = self.compiler.compile(self.lines)
    for name, address in self.symbols.items():
      logger.debug("%s: 0x%04X", name, address)
    self._bytes = to_bytes(self.instructions)
    self.compiled = True
    logger.debug(" ".join(f"0x{b:02X}" for b in self._bytes))
    return self._bytes

  def rom(self) -> bytes:
    if not self.compiled:
      self.compile()
    return build_rom(self._bytes, self.origin)

  def json(self) -> str:
    if not self.parsed:
      self.parse()
    return to_json(self.lines)

  def write_hex(self, f: TextIO):
    if not self.compiled:
      self.compile()
    write_hex_output(self.origin, self._bytes, f)


def parse_source(source: str) -> List[Tuple[Line, int]]:
  asm = Assembler()
  asm.assemble_stream(StringIO(source))
  return asm.parse()

def assemble(source: str) -> bytes:
  """Assemble source text to raw instruction bytes."""
  asm = Assembler()
  asm.assemble_stream(StringIO(source))
  return asm.compile()

def assemble_rom(source: str) -> bytes:
  """Assemble source text to a 4 KiB PRG image with interrupt vectors."""
  asm = Assembler()
  asm.assemble_stream(StringIO(source))
  asm.compile()
  return asm.rom()
