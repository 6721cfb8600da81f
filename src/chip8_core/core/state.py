# chip8_core/core/state.py
"""
Core Layer (マシン状態)

このモジュールは、CHIP-8のメモリ、レジスタ、スタック、タイマー、フレームバッファ、
キー入力ラッチを一つにまとめた可変データ構造を定義します。
振る舞いは持たず、命令の実行はInstruction Layerに委ねられます。
"""
from dataclasses import dataclass, field
from typing import List

MEMORY_SIZE = 0x1000
PROGRAM_START = 0x200
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START  # 3584

NUM_REGISTERS = 16
STACK_DEPTH = 16
NUM_KEYS = 16
FLAG_REGISTER = 0xF

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32

FONT_GLYPH_SIZE = 5

# @intent:constant 16進数字0-Fのグリフ（各5バイト、4x5ドット）。メモリ先頭0x000-0x04Fに配置されます。
FONTSET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])


def _initial_memory() -> bytearray:
    memory = bytearray(MEMORY_SIZE)
    memory[0:len(FONTSET)] = FONTSET
    return memory


# @intent:responsibility CHIP-8マシンの全ての可変状態を保持します。
# @intent:rationale 状態は一つのCPUインスタンスが排他的に所有し、命令実行関数へ明示的に渡されます。
#                  bytearrayを用いることで、8ビットの範囲外の値の書き込みは即座にValueErrorとなります。
@dataclass
class Chip8State:
    """
    CHIP-8のマシン状態を保持するデータクラス。

    レジスタVFは加算・減算・シフト・スプライト描画でキャリー/ボロー/衝突フラグとして
    上書きされるため、汎用レジスタとしての値は保証されません。
    """
    memory: bytearray = field(default_factory=_initial_memory)
    v: bytearray = field(default_factory=lambda: bytearray(NUM_REGISTERS))
    i: int = 0x0000   # Index Register
    pc: int = PROGRAM_START
    sp: int = 0       # Stack Pointer (0..16)
    stack: List[int] = field(default_factory=lambda: [0] * STACK_DEPTH)
    delay_timer: int = 0
    sound_timer: int = 0
    framebuffer: bytearray = field(default_factory=lambda: bytearray(SCREEN_WIDTH * SCREEN_HEIGHT))
    keys: List[bool] = field(default_factory=lambda: [False] * NUM_KEYS)
    redraw: bool = False

    # @intent:accessor 衝突/キャリーフラグとして使われるVFへのアクセスを提供します。
    @property
    def vf(self) -> int:
        return self.v[FLAG_REGISTER]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[FLAG_REGISTER] = value

    # @intent:responsibility サウンドタイマーが非ゼロ（トーンを鳴らすべき）かどうかを返します。
    @property
    def sound_active(self) -> bool:
        return self.sound_timer > 0

    # @intent:responsibility 座標(x, y)のピクセル値(0/1)を返します。座標は画面サイズで折り返します。
    def pixel(self, x: int, y: int) -> int:
        return self.framebuffer[(x % SCREEN_WIDTH) + (y % SCREEN_HEIGHT) * SCREEN_WIDTH]

    # @intent:responsibility 描画担当の協調者向けに、フレームバッファを行単位で返します。
    def framebuffer_rows(self) -> List[List[int]]:
        return [
            list(self.framebuffer[row * SCREEN_WIDTH:(row + 1) * SCREEN_WIDTH])
            for row in range(SCREEN_HEIGHT)
        ]

    # @intent:responsibility 入力担当の協調者がキーラッチを更新するためのヘルパー。
    # @intent:pre-condition サイクルとサイクルの間にのみ呼び出すこと。
    def press_key(self, key: int) -> None:
        self.keys[key] = True

    def release_key(self, key: int) -> None:
        self.keys[key] = False
