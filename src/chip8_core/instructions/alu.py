# chip8_core/instructions/alu.py
"""
算術論理演算命令の実装。

8XY4/8XY5/8XY6/8XY7/8XYEはフラグをVFへ書き込んでから結果を計算します。
XまたはYがFの場合、フラグの書き込みがオペランドを上書きしますが、これは互換性のために再現している挙動です。
"""
from chip8_core.core.snapshot import Operation
from chip8_core.core.state import Chip8State
from .base import ExecutionContext, advance, warn_flag_operand


# --- 7XNN ---
# @intent:responsibility Vx += NN（8ビットで折り返し）。VFは変化しません。
def execute_add_byte(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF
    advance(state, op)


# --- 8XY1 / 8XY2 / 8XY3 ---
def execute_or(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.v[op.x] |= state.v[op.y]
    advance(state, op)


def execute_and(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.v[op.x] &= state.v[op.y]
    advance(state, op)


def execute_xor(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.v[op.x] ^= state.v[op.y]
    advance(state, op)


# --- 8XY4 ---
# @intent:responsibility Vx += Vy。キャリーは折り返し前の比較で判定します。
def execute_add_reg(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    warn_flag_operand(op, ctx, op.x, op.y)
    state.vf = 1 if state.v[op.y] > 0xFF - state.v[op.x] else 0
    state.v[op.x] = (state.v[op.x] + state.v[op.y]) & 0xFF
    advance(state, op)


# --- 8XY5 ---
# @intent:responsibility Vx -= Vy。ボローがあればVF=0、なければVF=1。
def execute_sub(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    warn_flag_operand(op, ctx, op.x, op.y)
    state.vf = 0 if state.v[op.y] > state.v[op.x] else 1
    state.v[op.x] = (state.v[op.x] - state.v[op.y]) & 0xFF
    advance(state, op)


# --- 8XY7 ---
# @intent:responsibility Vx = Vy - Vx。ボローがあればVF=0、なければVF=1。
def execute_subn(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    warn_flag_operand(op, ctx, op.x, op.y)
    state.vf = 0 if state.v[op.x] > state.v[op.y] else 1
    state.v[op.x] = (state.v[op.y] - state.v[op.x]) & 0xFF
    advance(state, op)


# --- 8XY6 ---
# @intent:responsibility Vxを1ビット右シフトします。押し出される最下位ビットをシフト前にVFへ格納します。Vyは使いません。
def execute_shr(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    warn_flag_operand(op, ctx, op.x)
    state.vf = state.v[op.x] & 0x01
    state.v[op.x] >>= 1
    advance(state, op)


# --- 8XYE ---
# @intent:responsibility Vxを1ビット左シフトします。押し出される最上位ビットをシフト前にVFへ格納します。
def execute_shl(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    warn_flag_operand(op, ctx, op.x)
    state.vf = state.v[op.x] >> 7
    state.v[op.x] = (state.v[op.x] << 1) & 0xFF
    advance(state, op)


# --- CXNN ---
def execute_rnd(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.v[op.x] = ctx.rng.randint(0, 0xFF) & op.nn
    advance(state, op)


# --- FX1E ---
# @intent:responsibility I += Vx。和が0xFFFを超えればVF=1。Iは12ビットに切り詰めません。
def execute_add_i_vx(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    warn_flag_operand(op, ctx, op.x)
    state.vf = 1 if state.i + state.v[op.x] > 0xFFF else 0
    state.i = (state.i + state.v[op.x]) & 0xFFFF
    advance(state, op)
