"""Error types for nesasm.

Every failure in the pipeline is raised as a subclass of AssemblyError and
aborts the run; nothing inside the assembler catches them.
"""

from typing import Optional


class AssemblyError(Exception):
    """Base error for nesasm."""

    def __init__(self, msg: str, line: Optional[int] = None):
        super().__init__(msg)
        self.msg = msg
        self.line = line

    def __str__(self):
        return self.msg


class ParseError(AssemblyError):
    """A source line could not be parsed."""

    def __str__(self):
        return f"Parse error at line {self.line}: {self.msg}"


class GrammarError(ParseError):
    """A line matched the grammar but its value is unusable."""

    def __str__(self):
        return f"Parse error: {self.msg}"


class IncompleteInputError(ParseError):
    """A line ended in the middle of an operand."""

    def __init__(self, line: Optional[int] = None):
        super().__init__("Incomplete input", line)

    def __str__(self):
        return f"Incomplete input at line {self.line}"


class InvalidOperandError(AssemblyError):
    def __str__(self):
        return f"Invalid operand: {self.msg}"


class InvalidOpCodeError(AssemblyError):
    """Unknown mnemonic, or a mode the mnemonic does not allow."""

    def __str__(self):
        return f"Invalid opcode at line: {self.line}: {self.msg}"


class OpCodeConversionError(AssemblyError):
    """No opcode byte exists for the instruction's effective mode."""

    def __init__(self, mnemonic: str):
        super().__init__(mnemonic)
        self.mnemonic = mnemonic

    def __str__(self):
        return f"Unable to convert opcode to a byte: {self.mnemonic}"


class OperandOutOfRangeError(AssemblyError):
    def __str__(self):
        return f"Operand address out of range: {self.msg}"


class InvalidDirectiveError(AssemblyError):
    def __init__(self, name: str, line: Optional[int] = None):
        super().__init__(name, line)
        self.name = name

    def __str__(self):
        return f"Invalid directive: {self.name}"


class InvalidLabelError(AssemblyError):
    """A label reference has no matching definition."""

    def __init__(self, label: str, line: Optional[int] = None):
        super().__init__(f"Did not find {label}", line)
        self.label = label

    def __str__(self):
        return f"Invalid label at line: {self.line}: {self.msg}"


class ProgramTooLargeError(AssemblyError):
    def __init__(self, size: int):
        super().__init__(f"{size} bytes")
        self.size = size

    def __str__(self):
        return "Program too large"


class AssemblerIOError(AssemblyError):
    def __str__(self):
        return f"I/O error: {self.msg}"
