# chip8_core/core/snapshot.py
"""
デコード結果と実行結果のデータ構造

このモジュールは、オペコードワードをデコードした命令（タグ付きバリアント）と、
1サイクル実行後の結果を記録する不変のデータ構造を定義します。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from chip8_core.core.state import Chip8State


# @intent:responsibility CHIP-8の全命令を列挙します。値はオペコードのパターン表記です。
class Instruction(Enum):
    CLS = "00E0"
    RET = "00EE"
    JP = "1NNN"
    CALL = "2NNN"
    SE_BYTE = "3XNN"
    SNE_BYTE = "4XNN"
    SE_REG = "5XY0"
    LD_BYTE = "6XNN"
    ADD_BYTE = "7XNN"
    LD_REG = "8XY0"
    OR = "8XY1"
    AND = "8XY2"
    XOR = "8XY3"
    ADD_REG = "8XY4"
    SUB = "8XY5"
    SHR = "8XY6"
    SUBN = "8XY7"
    SHL = "8XYE"
    SNE_REG = "9XY0"
    LD_I = "ANNN"
    JP_V0 = "BNNN"
    RND = "CXNN"
    DRW = "DXYN"
    SKP = "EX9E"
    SKNP = "EXA1"
    LD_VX_DT = "FX07"
    LD_VX_K = "FX0A"
    LD_DT_VX = "FX15"
    LD_ST_VX = "FX18"
    ADD_I_VX = "FX1E"
    LD_F_VX = "FX29"
    LD_B_VX = "FX33"
    LD_MEM_VX = "FX55"
    LD_VX_MEM = "FX65"
    UNKNOWN = "????"


# @intent:responsibility デコードされた命令の詳細を記録します。
@dataclass(frozen=True)
class Operation:
    """
    デコードされた命令。オペコードワードから切り出したフィールドを全て保持するため、
    実行側はビット演算をやり直す必要がありません。
    """
    opcode: int                 # 16ビットのオペコードワード
    address: int                # フェッチしたアドレス
    instruction: Instruction
    mnemonic: str
    operands: List[str] = field(default_factory=list)

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:04X}"

    @property
    def x(self) -> int:
        return (self.opcode & 0x0F00) >> 8

    @property
    def y(self) -> int:
        return (self.opcode & 0x00F0) >> 4

    @property
    def n(self) -> int:
        return self.opcode & 0x000F

    @property
    def nn(self) -> int:
        return self.opcode & 0x00FF

    @property
    def nnn(self) -> int:
        return self.opcode & 0x0FFF

    def __str__(self) -> str:
        text = self.mnemonic
        if self.operands:
            text += " " + ", ".join(self.operands)
        return text


# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True)
class Metadata:
    cycle_count: int
    stalled: bool = False   # PCが命令のアドレスに留まった（FX0Aのキー待ち、未知の命令、自己ジャンプ）
    redraw: bool = False
    sound_active: bool = False


# @intent:responsibility 1サイクル実行後の結果を記録します。
@dataclass(frozen=True)
class Snapshot:
    """
    1サイクル実行後の結果。stateは実行後のマシン状態そのもの（コピーではない）であり、
    次のstep()呼び出しまでの間だけ有効な読み取り専用ビューとして扱います。
    """
    state: Chip8State
    operation: Operation
    metadata: Metadata
