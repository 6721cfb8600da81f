# chip8_core/instructions/__init__.py
"""
CHIP-8命令セット実装パッケージ。
"""
import logging

from chip8_core.core.snapshot import Instruction, Operation
from chip8_core.core.state import Chip8State
from .base import ExecutionContext
from .maps import EXECUTE_MAP, PRIMARY_MAP, SECONDARY_MAP, SYNTAX_MAP

logger = logging.getLogger(__name__)


# @intent:responsibility 16ビットのオペコードワードを命令に変換します。
# @intent:rationale デコードは状態を参照しない純粋関数とし、実行とは独立に検証できるようにする。
def decode_opcode(opcode: int, address: int) -> Operation:
    """
    オペコードワードを上位ニブル、次いでサブキーで引き、Operationオブジェクトを返します。
    未定義の組み合わせはInstruction.UNKNOWNになります。
    """
    high = (opcode & 0xF000) >> 12
    instruction = PRIMARY_MAP.get(high)
    if instruction is None and high in SECONDARY_MAP:
        mask, table = SECONDARY_MAP[high]
        instruction = table.get(opcode & mask)

    if instruction is None:
        return Operation(opcode, address, Instruction.UNKNOWN, "UNKNOWN", [f"${opcode:04X}"])

    mnemonic, operand_formats = SYNTAX_MAP[instruction]
    fields = dict(
        x=(opcode & 0x0F00) >> 8,
        y=(opcode & 0x00F0) >> 4,
        n=opcode & 0x000F,
        nn=opcode & 0x00FF,
        nnn=opcode & 0x0FFF,
    )
    operands = [fmt.format(**fields) for fmt in operand_formats]
    return Operation(opcode, address, instruction, mnemonic, operands)


# @intent:responsibility デコードされた命令を実行し、マシン状態を変更します。
def execute_instruction(operation: Operation, state: Chip8State, ctx: ExecutionContext) -> None:
    """
    デコードされた命令を実行します。未知の命令は警告を記録するだけで、PCを含め状態を変更しません。
    """
    executor = EXECUTE_MAP.get(operation.instruction)
    if executor is None:
        logger.warning("Unknown opcode %s at %#06x", operation.opcode_hex, operation.address)
        return
    executor(state, operation, ctx)
