"""6502 assembler producing raw binaries, NES PRG ROM images or a JSON dump.

Usage as library:
    from nesasm import assemble, assemble_rom
    rom = assemble_rom(open('game.asm').read())

Usage from command line:
    nesasm -i game.asm -o game.prg nes
"""

from .asm import Assembler, assemble, assemble_rom, parse_source
from .errors import AssemblyError

__all__ = ["Assembler", "AssemblyError", "assemble", "assemble_rom", "parse_source"]
