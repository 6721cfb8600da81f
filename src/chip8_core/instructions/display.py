# chip8_core/instructions/display.py
"""
フレームバッファを操作する命令（画面クリア、スプライト描画）の実装。
"""
from chip8_core.core.snapshot import Operation
from chip8_core.core.state import Chip8State, SCREEN_HEIGHT, SCREEN_WIDTH
from .base import ExecutionContext, advance, check_memory_range


# --- 00E0 ---
def execute_cls(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    state.framebuffer[:] = bytes(len(state.framebuffer))
    state.redraw = True
    advance(state, op)


# --- DXYN ---
# @intent:responsibility Iから読んだN行×8ビットのスプライトを(Vx, Vy)にXOR描画します。
# @intent:rationale 座標はスプライト単位ではなくピクセル単位で画面サイズの剰余をとる。
#                  VFは描画前に0とし、点灯→消灯したピクセルがあればORで1を積み上げる。
#                  座標レジスタは各ピクセルで読み直すため、XまたはYがFの場合は衝突フラグの影響を受ける。
def execute_drw(state: Chip8State, op: Operation, ctx: ExecutionContext) -> None:
    height = op.n
    check_memory_range(state.i, height)

    state.vf = 0
    for row in range(height):
        sprite_row = state.memory[state.i + row]
        py = (state.v[op.y] + row) % SCREEN_HEIGHT
        for col in range(8):
            if sprite_row & (0x80 >> col):
                px = (state.v[op.x] + col) % SCREEN_WIDTH
                index = px + py * SCREEN_WIDTH
                state.vf |= state.framebuffer[index] & 1
                state.framebuffer[index] ^= 1

    state.redraw = True
    advance(state, op)
