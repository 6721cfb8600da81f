# chip8_core/instructions/load.py
"""
転送命令（レジスタ、インデックスレジスタ、タイマー、メモリ間）の実装。
"""
from chip8_core.core.snapshot import Operation
from chip8_core.core.state import Chip8State, FONT_GLYPH_SIZE, NUM_KEYS
from .base import ExecutionContext, advance, check_memory_range


# --- 6XNN ---
def execute_ld_byte(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.v[op.x] = op.nn
    advance(state, op)


# --- 8XY0 ---
def execute_ld_reg(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.v[op.x] = state.v[op.y]
    advance(state, op)


# --- ANNN ---
def execute_ld_i(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.i = op.nnn
    advance(state, op)


# --- FX07 ---
def execute_ld_vx_dt(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.v[op.x] = state.delay_timer
    advance(state, op)


# --- FX0A ---
# @intent:responsibility キー入力を待ちます。押されているキーのうち最大の番号をVxに格納します。
# @intent:rationale ブロッキングはPCを進めないことで表現する。呼び出し側は入力が変わるまでサイクルを繰り返す。
def execute_ld_vx_k(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    pressed = [key for key in range(NUM_KEYS) if state.keys[key]]
    if not pressed:
        state.pc = op.address
        return
    state.v[op.x] = pressed[-1]
    advance(state, op)


# --- FX15 / FX18 ---
def execute_ld_dt_vx(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.delay_timer = state.v[op.x]
    advance(state, op)


def execute_ld_st_vx(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.sound_timer = state.v[op.x]
    advance(state, op)


# --- FX29 ---
# @intent:responsibility Vxの数字に対応するフォントグリフの先頭アドレスをIに設定します。
def execute_ld_f_vx(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.i = state.v[op.x] * FONT_GLYPH_SIZE
    advance(state, op)


# --- FX33 ---
# @intent:responsibility Vxを10進数に分解し、百・十・一の位をI, I+1, I+2に格納します。
def execute_ld_b_vx(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    check_memory_range(state.i, 3)
    value = state.v[op.x]
    state.memory[state.i] = value // 100
    state.memory[state.i + 1] = (value // 10) % 10
    state.memory[state.i + 2] = value % 10
    advance(state, op)


# --- FX55 ---
# @intent:responsibility V0..Vxをメモリ(Iから)へ書き出します。Iは変化しません。
def execute_ld_mem_vx(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    count = op.x + 1
    check_memory_range(state.i, count)
    state.memory[state.i:state.i + count] = state.v[0:count]
    advance(state, op)


# --- FX65 ---
# @intent:responsibility メモリ(Iから)をV0..Vxへ読み込みます。Iは変化しません。
def execute_ld_vx_mem(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    count = op.x + 1
    check_memory_range(state.i, count)
    state.v[0:count] = state.memory[state.i:state.i + count]
    advance(state, op)
