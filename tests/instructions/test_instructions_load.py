import random
import unittest

from chip8_core.common.errors import MemoryFault
from chip8_core.core.state import Chip8State
from chip8_core.instructions import decode_opcode, execute_instruction
from chip8_core.instructions.base import ExecutionContext


class TestChip8LoadInstructions(unittest.TestCase):
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

    def test_ld_byte(self):
        self._execute(0x6A5C)
        self.assertEqual(self.state.v[0xA], 0x5C)
        self.assertEqual(self.state.pc, 0x202)

    def test_ld_reg(self):
        self.state.v[2] = 0x33
        self._execute(0x8120)
        self.assertEqual(self.state.v[1], 0x33)

    def test_ld_i(self):
        self._execute(0xA123)
        self.assertEqual(self.state.i, 0x123)

    def test_timers(self):
        self.state.v[3] = 60
        self._execute(0xF315)
        self.assertEqual(self.state.delay_timer, 60)
        self._execute(0xF318)
        self.assertEqual(self.state.sound_timer, 60)
        self.state.delay_timer = 17
        self._execute(0xF407)
        self.assertEqual(self.state.v[4], 17)

    def test_key_wait_without_key_stalls(self):
        self._execute(0xF20A)
        self.assertEqual(self.state.pc, 0x200)
        self.assertEqual(self.state.v[2], 0)

    def test_key_wait_stores_highest_pressed_key(self):
        self.state.keys[1] = True
        self.state.keys[0xC] = True
        self._execute(0xF20A)
        self.assertEqual(self.state.v[2], 0xC)
        self.assertEqual(self.state.pc, 0x202)

    def test_ld_f_vx_points_at_glyph(self):
        self.state.v[0] = 0xA
        self._execute(0xF029)
        self.assertEqual(self.state.i, 50)
        self.assertEqual(self.state.memory[self.state.i], 0xF0)

    def test_bcd(self):
        self.state.v[5] = 156
        self.state.i = 0x300
        self._execute(0xF533)
        self.assertEqual(list(self.state.memory[0x300:0x303]), [1, 5, 6])
        self.assertEqual(self.state.i, 0x300)

    def test_bcd_small_value(self):
        self.state.v[5] = 7
        self.state.i = 0x300
        self._execute(0xF533)
        self.assertEqual(list(self.state.memory[0x300:0x303]), [0, 0, 7])

    def test_store_registers(self):
        self.state.v[0:4] = bytes([1, 2, 3, 4])
        self.state.i = 0x400
        self._execute(0xF255)
        self.assertEqual(list(self.state.memory[0x400:0x404]), [1, 2, 3, 0])
        self.assertEqual(self.state.i, 0x400)

    def test_load_registers(self):
        self.state.memory[0x400:0x404] = bytes([9, 8, 7, 6])
        self.state.i = 0x400
        self._execute(0xF265)
        self.assertEqual(list(self.state.v[0:4]), [9, 8, 7, 0])
        self.assertEqual(self.state.i, 0x400)

    def test_store_all_registers(self):
        self.state.v[:] = bytes(range(16))
        self.state.i = 0x500
        self._execute(0xFF55)
        self.assertEqual(bytes(self.state.memory[0x500:0x510]), bytes(range(16)))

    def test_store_past_end_of_memory_leaves_memory_untouched(self):
        self.state.v[0:3] = bytes([1, 2, 3])
        self.state.i = 0xFFE
        with self.assertRaises(MemoryFault):
            self._execute(0xF255, address=0x200)
        self.assertEqual(len(self.state.memory), 0x1000)
        self.assertEqual(self.state.memory[0xFFE], 0)
        self.assertEqual(self.state.pc, 0x200)

    def test_bcd_past_end_of_memory(self):
        self.state.i = 0xFFF
        with self.assertRaises(IndexError):
            self._execute(0xF033)


if __name__ == '__main__':
    unittest.main()
