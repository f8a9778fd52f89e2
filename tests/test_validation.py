import unittest
from nesasm.ast import AddressMode, Address, LabelRef, Instruction
from nesasm.errors import InvalidOpCodeError
from nesasm.opcodes import OPCODES
from nesasm.validation import validate_instruction, LEGAL_MODES, BRANCHES

class TestValidation(unittest.TestCase):
    def check(self, mnemonic, operand=None, line=1):
        validate_instruction(Instruction(mnemonic, operand), line)

    def rejects(self, mnemonic, operand=None, line=1):
        with self.assertRaises(InvalidOpCodeError) as cm:
            self.check(mnemonic, operand, line)
        self.assertEqual(cm.exception.line, line)
        return cm.exception

    def test_covers_every_mnemonic(self):
        self.assertEqual(len(LEGAL_MODES), 56)
        self.assertEqual(set(LEGAL_MODES), set(OPCODES))

    def test_whitelists_match_opcode_table(self):
        for mnemonic, modes in LEGAL_MODES.items():
            self.assertEqual(set(modes), set(OPCODES[mnemonic]), mnemonic)

    def test_lda_modes(self):
        for mode in (AddressMode.IMMEDIATE, AddressMode.ZERO_PAGE, AddressMode.ZERO_PAGE_X,
                     AddressMode.ABSOLUTE, AddressMode.ABSOLUTE_X, AddressMode.ABSOLUTE_Y,
                     AddressMode.INDIRECT_X, AddressMode.INDIRECT_Y):
            self.check("LDA", Address(0x10, mode))
        err = self.rejects("LDA", Address(0x10, AddressMode.ZERO_PAGE_Y), line=12)
        self.assertEqual(str(err), "Invalid opcode at line: 12: LDA does not support ZeroPage Y addressing.")

    def test_sta_has_no_immediate(self):
        self.rejects("STA", Address(0x10, AddressMode.IMMEDIATE))

    def test_implied_only(self):
        for mnemonic in ("NOP", "TAX", "RTS", "RTI", "BRK", "PHA"):
            self.check(mnemonic)
        err = self.rejects("NOP", Address(0x10, AddressMode.ZERO_PAGE))
        self.assertIn("does not take an address", err.msg)

    def test_operand_required(self):
        err = self.rejects("LDA")
        self.assertEqual(err.msg, "LDA requires an address.")
        # shifts need an explicit A
        self.rejects("ASL")
        self.check("ASL", Address(0, AddressMode.ACCUMULATOR))

    def test_labels_rejected(self):
        err = self.rejects("LDA", LabelRef("data"))
        self.assertEqual(err.msg, "LDA does not support labels")

    def test_jumps_accept_labels(self):
        self.check("JMP", LabelRef("loop"))
        self.check("JSR", LabelRef("init"))

    def test_jsr_absolute_only(self):
        self.check("JSR", Address(0x8000, AddressMode.ABSOLUTE))
        self.rejects("JSR", Address(0x80, AddressMode.ZERO_PAGE))
        self.rejects("JSR", Address(0x8000, AddressMode.INDIRECT))

    def test_branch_with_address_always_fails(self):
        for branch in BRANCHES:
            self.rejects(branch, Address(0x10, AddressMode.ZERO_PAGE))
            self.rejects(branch, Address(0x1000, AddressMode.ABSOLUTE))

    def test_branch_with_label_passes(self):
        for branch in BRANCHES:
            self.check(branch, LabelRef("loop"))

    def test_branch_relative_mode_passes(self):
        self.check("BNE", Address(0x02, AddressMode.RELATIVE))

    def test_unknown_mnemonic(self):
        err = self.rejects("XYZ", line=5)
        self.assertEqual(err.msg, "XYZ is invalid.")

if __name__ == '__main__':
    unittest.main()
