import unittest
from nesasm.ast import AddressMode
from nesasm.opcodes import OPCODES, OPCODE_SIZES, MODE_SIZES, lookup_opcode

class TestOpcodes(unittest.TestCase):
    def test_structure(self):
        for mnemonic, modes in OPCODES.items():
            self.assertIsInstance(mnemonic, str)
            self.assertTrue(2 <= len(mnemonic) <= 4)
            for mode, opcode in modes.items():
                self.assertIsInstance(mode, AddressMode)
                self.assertTrue(0 <= opcode <= 255)

    def test_opcodes_are_unique(self):
        seen = [opcode for modes in OPCODES.values() for opcode in modes.values()]
        self.assertEqual(len(seen), len(set(seen)))
        self.assertEqual(len(seen), 151)

    def test_immediate_mode(self):
        # LDA #$00 -> A9
        self.assertEqual(lookup_opcode("LDA", AddressMode.IMMEDIATE), 0xA9)

    def test_jmp_absolute(self):
        # JMP $1234 -> 4C
        self.assertEqual(lookup_opcode("JMP", AddressMode.ABSOLUTE), 0x4C)
        self.assertEqual(lookup_opcode("JMP", AddressMode.INDIRECT), 0x6C)

    def test_missing_pairs(self):
        self.assertIsNone(lookup_opcode("BNE", AddressMode.ABSOLUTE))
        self.assertIsNone(lookup_opcode("STA", AddressMode.IMMEDIATE))
        self.assertIsNone(lookup_opcode("XYZ", AddressMode.IMPLIED))

    def test_sizes(self):
        self.assertEqual(set(MODE_SIZES), set(AddressMode))
        self.assertEqual(OPCODE_SIZES[("LDA", AddressMode.ABSOLUTE_X)], 3)
        self.assertEqual(OPCODE_SIZES[("LDA", AddressMode.IMMEDIATE)], 2)
        self.assertEqual(OPCODE_SIZES[("NOP", AddressMode.IMPLIED)], 1)
        self.assertEqual(OPCODE_SIZES[("LDA", AddressMode.INDIRECT_X)], 1)
        self.assertEqual(len(OPCODE_SIZES), 151)

    def test_read_only(self):
        with self.assertRaises(TypeError):
            OPCODES["LDA"][AddressMode.IMPLIED] = 0xFF
        with self.assertRaises(TypeError):
            OPCODES["FOO"] = {}

if __name__ == '__main__':
    unittest.main()
