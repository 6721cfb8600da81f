# chip8_core/instructions/control.py
"""
分岐・サブルーチン・条件スキップ命令の実装。
"""
from chip8_core.core.snapshot import Operation
from chip8_core.core.state import Chip8State
from .base import ExecutionContext, pop_return, push_return, skip_if


# --- 00EE ---
# @intent:responsibility サブルーチンから復帰し、CALL命令の次へ進みます。
def execute_ret(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.pc = pop_return(state, ctx) + 2


# --- 1NNN ---
def execute_jp(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.pc = op.nnn


# --- 2NNN ---
# @intent:responsibility CALL命令自身のアドレスを積み、NNNへ分岐します。
def execute_call(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    push_return(state, op.address, ctx)
    state.pc = op.nnn


# --- 3XNN / 4XNN ---
def execute_se_byte(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    skip_if(state, op, state.v[op.x] == op.nn)


def execute_sne_byte(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    skip_if(state, op, state.v[op.x] != op.nn)


# --- 5XY0 / 9XY0 ---
def execute_se_reg(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    skip_if(state, op, state.v[op.x] == state.v[op.y])


def execute_sne_reg(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    skip_if(state, op, state.v[op.x] != state.v[op.y])


# --- BNNN ---
# @intent:responsibility NNN + V0へ分岐します。結果は12ビットに切り詰めません。
def execute_jp_v0(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.pc = op.nnn + state.v[0]


# --- EX9E / EXA1 ---
# @intent:rationale Vxが0xFを超えるキー番号はキーラッチ配列の範囲外となり、PCを更新する前にIndexErrorが送出される。
def execute_skp(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    skip_if(state, op, state.keys[state.v[op.x]])


def execute_sknp(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    skip_if(state, op, not state.keys[state.v[op.x]])
