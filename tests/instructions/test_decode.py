# tests/instructions/test_decode.py
"""
chip8_core.instructions.decode_opcodeの単体テスト。
デコードは状態に依存しないため、実行とは独立して検証します。
"""
import pytest

from chip8_core.core.snapshot import Instruction
from chip8_core.instructions import decode_opcode
from chip8_core.instructions.maps import EXECUTE_MAP, SYNTAX_MAP

# @intent:test_suite オペコードワードから命令への2段階デコードを検証します。


class TestDecodeOpcode:
    @pytest.mark.parametrize("opcode, instruction", [
        (0x00E0, Instruction.CLS),
        (0x00EE, Instruction.RET),
        (0x1ABC, Instruction.JP),
        (0x2ABC, Instruction.CALL),
        (0x3A12, Instruction.SE_BYTE),
        (0x4A12, Instruction.SNE_BYTE),
        (0x5AB0, Instruction.SE_REG),
        (0x6A12, Instruction.LD_BYTE),
        (0x7A12, Instruction.ADD_BYTE),
        (0x8AB0, Instruction.LD_REG),
        (0x8AB1, Instruction.OR),
        (0x8AB2, Instruction.AND),
        (0x8AB3, Instruction.XOR),
        (0x8AB4, Instruction.ADD_REG),
        (0x8AB5, Instruction.SUB),
        (0x8AB6, Instruction.SHR),
        (0x8AB7, Instruction.SUBN),
        (0x8ABE, Instruction.SHL),
        (0x9AB0, Instruction.SNE_REG),
        (0xAABC, Instruction.LD_I),
        (0xBABC, Instruction.JP_V0),
        (0xCA12, Instruction.RND),
        (0xDAB5, Instruction.DRW),
        (0xEA9E, Instruction.SKP),
        (0xEAA1, Instruction.SKNP),
        (0xFA07, Instruction.LD_VX_DT),
        (0xFA0A, Instruction.LD_VX_K),
        (0xFA15, Instruction.LD_DT_VX),
        (0xFA18, Instruction.LD_ST_VX),
        (0xFA1E, Instruction.ADD_I_VX),
        (0xFA29, Instruction.LD_F_VX),
        (0xFA33, Instruction.LD_B_VX),
        (0xFA55, Instruction.LD_MEM_VX),
        (0xFA65, Instruction.LD_VX_MEM),
    ])
    def test_known_opcodes(self, opcode, instruction):
        op = decode_opcode(opcode, 0x200)
        assert op.instruction is instruction
        assert op.opcode == opcode
        assert op.address == 0x200

    # @intent:test_case_unknown 未定義のサブキーはUNKNOWNになることを検証します。
    @pytest.mark.parametrize("opcode", [
        0x0000, 0x0123, 0x00E1, 0x5AB1, 0x8AB8, 0x8ABF, 0x9AB1, 0xEA9F, 0xFA00, 0xFAFF,
    ])
    def test_unknown_opcodes(self, opcode):
        op = decode_opcode(opcode, 0x300)
        assert op.instruction is Instruction.UNKNOWN
        assert op.mnemonic == "UNKNOWN"
        assert op.operands == [f"${opcode:04X}"]

    # @intent:test_case_syntax ニーモニックとオペランドの表記を検証します。
    @pytest.mark.parametrize("opcode, text", [
        (0x00E0, "CLS"),
        (0x1234, "JP $234"),
        (0x6A05, "LD VA, #05"),
        (0x8126, "SHR V1"),
        (0xD015, "DRW V0, V1, 5"),
        (0xA2F0, "LD I, $2F0"),
        (0xB300, "JP V0, $300"),
        (0xF355, "LD [I], V3"),
        (0xF265, "LD V2, [I]"),
        (0xF90A, "LD V9, K"),
    ])
    def test_syntax(self, opcode, text):
        assert str(decode_opcode(opcode, 0x200)) == text

    def test_tables_cover_every_instruction(self):
        defined = set(Instruction) - {Instruction.UNKNOWN}
        assert set(EXECUTE_MAP) == defined
        assert set(SYNTAX_MAP) == defined
