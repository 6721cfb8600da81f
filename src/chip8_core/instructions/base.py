# chip8_core/instructions/base.py
"""
CHIP-8命令実装用の共通ユーティリティ。
"""
import logging
import random
from dataclasses import dataclass, field

from chip8_core.common.errors import MemoryFault, StackFault
from chip8_core.core.snapshot import Operation
from chip8_core.core.state import Chip8State, FLAG_REGISTER, MEMORY_SIZE, STACK_DEPTH

logger = logging.getLogger(__name__)


# @intent:responsibility 命令実行時にマシン状態以外で必要となる環境（乱数源、strictモード）を保持します。
@dataclass
class ExecutionContext:
    rng: random.Random = field(default_factory=random.Random)
    strict: bool = False


# @intent:utility_function 命令の後続（次の命令）へPCを進めます。
def advance(state: Chip8State, op: Operation) -> None:
    state.pc = op.address + 2


# @intent:utility_function 条件が真なら次の命令をスキップします。
def skip_if(state: Chip8State, op: Operation, condition: bool) -> None:
    state.pc = op.address + (4 if condition else 2)


# @intent:utility_function リターンアドレスをスタックへ積みます。
# @intent:rationale 通常モードではリファレンス同様にスタックポインタの上限を検査しない。
#                  溢れた場合はリストの範囲外書き込みとしてIndexErrorになり、spは変化しません。
def push_return(state: Chip8State, address: int, ctx: ExecutionContext) -> None:
    if ctx.strict and state.sp >= STACK_DEPTH:
        raise StackFault(f"Stack overflow at PC {address:#06x} (sp={state.sp})")
    state.stack[state.sp] = address
    state.sp += 1


# @intent:utility_function スタックからリターンアドレスを取り出します。
# @intent:rationale spは16ビットとして扱うため、空スタックからのpopは0xFFFFを指して範囲外読み出しになります。
#                  読み出しに成功してからspを更新するので、失敗時に状態は変化しません。
def pop_return(state: Chip8State, ctx: ExecutionContext) -> int:
    if ctx.strict and state.sp == 0:
        raise StackFault(f"Stack underflow at PC {state.pc:#06x}")
    new_sp = (state.sp - 1) & 0xFFFF
    address = state.stack[new_sp]
    state.sp = new_sp
    return address


# @intent:utility_function メモリ範囲[start, start+length)がアドレス空間内か検査します。
# @intent:rationale bytearrayへのスライス代入は範囲外で配列を伸長してしまい、ループ書き込みは途中まで反映されてしまう。
#                  複数バイトにアクセスする命令は、状態を変更する前にこの検査を通すことで原子性を保つ。
def check_memory_range(start: int, length: int) -> None:
    if start < 0 or start + length > MEMORY_SIZE:
        raise MemoryFault(f"Memory access {start:#06x}+{length} outside address space")


# @intent:utility_function strictモードで、VFをオペランドとするALU命令を警告します。
# @intent:rationale フラグ書き込みがオペランドを上書きするのはこの命令セット固有の挙動であり、結果は変えない。
def warn_flag_operand(op: Operation, ctx: ExecutionContext, *registers: int) -> None:
    if ctx.strict and FLAG_REGISTER in registers:
        logger.warning("%s at %#06x uses VF as an operand; the flag write overwrites it", op, op.address)
