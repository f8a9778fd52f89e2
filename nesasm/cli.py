import argparse
import io
import logging
import sys

from .asm import Assembler
from .errors import AssemblyError, AssemblerIOError

LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nesasm",
        description="Parses 6502 assembly into JSON or a byte array. Optionally builds a NES PRG ROM.")
    parser.add_argument("-i", "--input", required=True, help="Input assembly file")
    parser.add_argument("-o", "--output", required=True, help="Output file (with extension)")
    parser.add_argument("-v", "--verbose", choices=list(LOG_LEVELS), help="Logging verbosity")

    commands = parser.add_subparsers(dest="command", required=True)
    assemble = commands.add_parser("assemble", help="Assemble the file to a binary")
    assemble.add_argument("-f", "--format", choices=["bin", "hex"], default="bin",
                          help="Output format (bin is default)")
    commands.add_parser("json", help="Write the parsed file as JSON")
    commands.add_parser("nes", help="Generate the full PRG ROM with interrupt vectors")
    return parser

def read_source(path: str) -> Assembler:
    asm = Assembler()
    try:
        with open(path, "r", encoding="utf-8") as f:
            asm.assemble_stream(f, path)
    except (OSError, UnicodeDecodeError) as e:
        raise AssemblerIOError(str(e)) from e
    return asm

def write_output(path: str, data):
    mode = "w" if isinstance(data, str) else "wb"
    try:
        with open(path, mode) as f:
            f.write(data)
    except OSError as e:
        raise AssemblerIOError(str(e)) from e

def run(args) -> str:
    asm = read_source(args.input)
    asm.parse()

    if args.command == "json":
        write_output(args.output, asm.json())
        return f"Successfully wrote the JSON to {args.output}"

    asm.compile()
    if args.command == "nes":
        data = asm.rom()
    elif args.format == "hex":
        listing = io.StringIO()
        asm.write_hex(listing)
        write_output(args.output, listing.getvalue())
        return f"Assembled {len(asm.bytes)} bytes to {args.output} (hex)"
    else:
        data = asm.bytes

    write_output(args.output, data)
    return f"Assembled {len(data)} bytes to {args.output}"

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVELS.get(args.verbose, logging.WARNING),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        message = run(args)
    except AssemblyError as e:
        print(f"{args.input}: {e}", file=sys.stderr)
        return 1

    print(message)
    return 0
