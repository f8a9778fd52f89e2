import json
import unittest
from nesasm import parse_source
from nesasm.ast import AddressMode, Address, LabelRef
from nesasm.dump import to_json, operand_to_json, line_to_json

class TestDump(unittest.TestCase):
    def test_program(self):
        source = ".ORG $8000\n\nstart:\n  LDA #$05 ; five\n; note\nJMP start\nBRK"
        doc = json.loads(to_json(parse_source(source)))
        self.assertEqual(doc, [
            [{"Directive": {"Org": 32768}}, 1],
            ["EmptyLine", 2],
            [{"Label": "start"}, 3],
            [{"Instruction": {"opcode": "LDA", "operand":
                {"Address": {"address": 5, "address_mode": "Immediate"}}}}, 4],
            ["Comment", 5],
            [{"Instruction": {"opcode": "JMP", "operand": {"Label": "start"}}}, 6],
            [{"Instruction": {"opcode": "BRK", "operand": None}}, 7],
        ])

    def test_mode_names(self):
        self.assertEqual(operand_to_json(Address(0x10, AddressMode.ZERO_PAGE_X)),
                         {"Address": {"address": 16, "address_mode": "ZeroPageX"}})
        self.assertEqual(operand_to_json(Address(0x10, AddressMode.INDIRECT_Y))["Address"]["address_mode"],
                         "IndirectY")
        self.assertEqual(operand_to_json(LabelRef("x")), {"Label": "x"})
        self.assertIsNone(operand_to_json(None))

    def test_empty(self):
        self.assertEqual(json.loads(to_json([])), [])

    def test_unknown_line(self):
        with self.assertRaises(TypeError):
            line_to_json("NOP")

if __name__ == '__main__':
    unittest.main()
