import random
import unittest

from chip8_core.core.state import Chip8State
from chip8_core.instructions import decode_opcode, execute_instruction
from chip8_core.instructions.base import ExecutionContext


class TestChip8AluInstructions(unittest.TestCase):
    def setUp(self):
        self.state = Chip8State()
        self.ctx = ExecutionContext(rng=random.Random(0))

    def _execute(self, opcode, address=0x200):
        self.state.memory[address] = opcode >> 8
        self.state.memory[address + 1] = opcode & 0xFF
        self.state.pc = address
        op = decode_opcode(opcode, address)
        execute_instruction(op, self.state, self.ctx)
        return op

    def test_add_byte_wraps(self):
        self.state.v[2] = 0xF0
        self.state.vf = 0x07
        self._execute(0x7220)
        self.assertEqual(self.state.v[2], 0x10)
        self.assertEqual(self.state.vf, 0x07)  # 7XNNはVFに触れない
        self.assertEqual(self.state.pc, 0x202)

    def test_or_and_xor(self):
        self.state.v[0] = 0b1100
        self.state.v[1] = 0b1010
        self._execute(0x8011)
        self.assertEqual(self.state.v[0], 0b1110)
        self.state.v[0] = 0b1100
        self._execute(0x8012)
        self.assertEqual(self.state.v[0], 0b1000)
        self.state.v[0] = 0b1100
        self._execute(0x8013)
        self.assertEqual(self.state.v[0], 0b0110)
        self.assertEqual(self.state.pc, 0x202)

    def test_add_reg_with_carry(self):
        self.state.v[3] = 0xFF
        self.state.v[4] = 0x01
        self._execute(0x8344)
        self.assertEqual(self.state.v[3], 0x00)
        self.assertEqual(self.state.vf, 1)

    def test_add_reg_without_carry(self):
        self.state.v[3] = 0xFE
        self.state.v[4] = 0x01
        self.state.vf = 1
        self._execute(0x8344)
        self.assertEqual(self.state.v[3], 0xFF)
        self.assertEqual(self.state.vf, 0)

    def test_sub_with_borrow(self):
        self.state.v[5] = 0x01
        self.state.v[6] = 0x02
        self._execute(0x8565)
        self.assertEqual(self.state.v[5], 0xFF)
        self.assertEqual(self.state.vf, 0)

    def test_sub_without_borrow(self):
        self.state.v[5] = 0x05
        self.state.v[6] = 0x05
        self._execute(0x8565)
        self.assertEqual(self.state.v[5], 0x00)
        self.assertEqual(self.state.vf, 1)

    def test_subn(self):
        self.state.v[0] = 0x05
        self.state.v[1] = 0x03
        self._execute(0x8017)
        self.assertEqual(self.state.v[0], 0xFE)  # 3 - 5
        self.assertEqual(self.state.vf, 0)

        self.state.v[0] = 0x03
        self.state.v[1] = 0x05
        self._execute(0x8017)
        self.assertEqual(self.state.v[0], 0x02)
        self.assertEqual(self.state.vf, 1)

    def test_shr_captures_low_bit(self):
        self.state.v[7] = 0b10000011
        self.state.v[8] = 0xAA  # Vyは使われない
        self._execute(0x8786)
        self.assertEqual(self.state.v[7], 0b01000001)
        self.assertEqual(self.state.vf, 1)
        self.assertEqual(self.state.v[8], 0xAA)

    def test_shl_captures_high_bit(self):
        self.state.v[7] = 0b10000011
        self._execute(0x870E)
        self.assertEqual(self.state.v[7], 0b00000110)
        self.assertEqual(self.state.vf, 1)

        self.state.v[7] = 0b01000000
        self._execute(0x870E)
        self.assertEqual(self.state.v[7], 0b10000000)
        self.assertEqual(self.state.vf, 0)

    # VFをオペランドに使うと、フラグの書き込みが先に行われる
    def test_add_reg_with_vf_as_source(self):
        self.state.v[0] = 0x10
        self.state.vf = 0x20
        self._execute(0x80F4)
        self.assertEqual(self.state.vf, 0)
        self.assertEqual(self.state.v[0], 0x10)  # 0x10 + 0 (上書き後のVF)

    def test_add_reg_with_vf_as_target(self):
        self.state.vf = 0xFF
        self.state.v[1] = 0x02
        self._execute(0x8F14)
        # フラグ1を書き込んだ後に VF + V1 が計算される
        self.assertEqual(self.state.vf, 0x03)

    def test_rnd_masks_with_nn(self):
        for _ in range(50):
            self._execute(0xC30F)
            self.assertEqual(self.state.v[3] & 0xF0, 0)
        self._execute(0xC300)
        self.assertEqual(self.state.v[3], 0)

    def test_add_i_vx(self):
        self.state.i = 0x0FF0
        self.state.v[2] = 0x0F
        self._execute(0xF21E)
        self.assertEqual(self.state.i, 0x0FFF)
        self.assertEqual(self.state.vf, 0)

    def test_add_i_vx_overflow_flag_without_truncation(self):
        self.state.i = 0x0FFF
        self.state.v[2] = 0x02
        self._execute(0xF21E)
        self.assertEqual(self.state.i, 0x1001)
        self.assertEqual(self.state.vf, 1)


if __name__ == '__main__':
    unittest.main()
