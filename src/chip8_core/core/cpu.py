# chip8_core/core/cpu.py
"""
Core Layer (インタプリタサイクル)

このモジュールは、マシン状態の所有と命令サイクル（フェッチ→デコード→実行→タイマー更新）の
駆動を提供します。具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
import random
from typing import Dict, Optional

from chip8_core.core.snapshot import Metadata, Operation, Snapshot
from chip8_core.core.state import Chip8State
from chip8_core.instructions import decode_opcode, execute_instruction
from chip8_core.instructions.base import ExecutionContext, check_memory_range


# @intent:responsibility CHIP-8インタプリタの状態を所有し、1サイクルずつ実行します。
class Chip8Cpu:
    """
    CHIP-8インタプリタ。

    step()を1回呼ぶと、ちょうど1命令のフェッチ・デコード・実行と1回のタイマー更新が行われます。
    キー入力ラッチ(state.keys)はstep()の呼び出しの合間にのみ書き換えてください。
    """
    # @intent:responsibility 初期状態と実行環境（乱数源、strictモード）を用意します。
    # @intent:pre-condition `seed`を指定すると、CXNN命令の乱数列が再現可能になります。
    def __init__(self, strict: bool = False, seed: Optional[int] = None):
        self._state: Chip8State = Chip8State()
        self._seed = seed
        self._context = ExecutionContext(rng=random.Random(seed), strict=strict)
        self._cycle_count: int = 0

    @property
    def strict(self) -> bool:
        return self._context.strict

    # @intent:responsibility マシン状態を初期値に戻します。ロード済みのプログラムも消去されます。
    # @intent:post-condition 乱数源も構築時のシードで作り直されるため、リセット後の実行は構築直後と同じ乱数列を使います。
    def reset(self) -> None:
        self._state = Chip8State()
        self._context = ExecutionContext(rng=random.Random(self._seed), strict=self._context.strict)
        self._cycle_count = 0

    # @intent:responsibility 現在のマシン状態を返します。
    def get_state(self) -> Chip8State:
        return self._state

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    # @intent:responsibility PCが指す2バイトをビッグエンディアンのオペコードワードとして読み出します。
    def _fetch(self) -> int:
        pc = self._state.pc
        check_memory_range(pc, 2)
        return (self._state.memory[pc] << 8) | self._state.memory[pc + 1]

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode, self._state.pc)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._context)

    # @intent:responsibility 2つのタイマーをそれぞれ1減らします。0で止まり、折り返しません。
    def _tick_timers(self) -> None:
        if self._state.delay_timer > 0:
            self._state.delay_timer -= 1
        if self._state.sound_timer > 0:
            self._state.sound_timer -= 1

    # @intent:responsibility 1命令サイクルを実行し、その結果のスナップショットを返します。
    # @intent:flow 再描画フラグのクリア -> フェッチ -> デコード -> 実行 -> タイマー更新 -> スナップショット生成
    # @intent:rationale PCの更新は各命令の実行関数が行う。未知の命令とキー待ち(FX0A)ではPCは進まないが、
    #                  タイマーはどちらの場合も更新される。
    def step(self) -> Snapshot:
        self._state.redraw = False

        opcode = self._fetch()
        operation = self._decode(opcode)
        self._execute(operation)
        self._tick_timers()

        self._cycle_count += 1
        return Snapshot(
            state=self._state,
            operation=operation,
            metadata=Metadata(
                cycle_count=self._cycle_count,
                stalled=self._state.pc == operation.address,
                redraw=self._state.redraw,
                sound_active=self._state.sound_active,
            ),
        )

    # @intent:responsibility 表示・ログ用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{index:X}": value for index, value in enumerate(s.v)}
        registers.update({
            "I": s.i, "PC": s.pc, "SP": s.sp, "DT": s.delay_timer, "ST": s.sound_timer
        })
        return registers
