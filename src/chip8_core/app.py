# chip8_core/app.py
"""
ヘッドレス実行のエントリポイント。
設定とコマンドライン引数からマシンを構築し、指定サイクル数を実行してフレームバッファをテキストで出力します。
"""
import argparse
import logging
import sys
import time
from typing import List, Optional, TextIO

from chip8_core.common.errors import Chip8Error
from chip8_core.config.builder import MachineBuilder
from chip8_core.config.loader import ConfigLoader
from chip8_core.config.models import MachineConfig
from chip8_core.core.cpu import Chip8Cpu
from chip8_core.core.state import Chip8State

logger = logging.getLogger(__name__)


# @intent:responsibility フレームバッファを1行64文字のテキストに変換します。
def render_text(state: Chip8State, on: str = "#", off: str = ".") -> str:
    return "\n".join(
        "".join(on if cell else off for cell in row)
        for row in state.framebuffer_rows()
    )


# @intent:responsibility `cycles`回（0なら無制限）サイクルを実行します。cycle_hzが正なら実時間に合わせて待機します。
def run(cpu: Chip8Cpu, cycles: int, cycle_hz: int = 0) -> int:
    period = 1.0 / cycle_hz if cycle_hz > 0 else 0.0
    next_deadline = time.perf_counter()
    executed = 0
    while cycles == 0 or executed < cycles:
        snapshot = cpu.step()
        executed += 1
        logger.debug("%#06x: %s", snapshot.operation.address, snapshot.operation)
        if period:
            next_deadline += period
            delay = next_deadline - time.perf_counter()
            if delay > 0:
                time.sleep(delay)
    return executed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chip8-run", description="Run a CHIP-8 program headlessly.")
    parser.add_argument("rom", nargs="?", help="program image (overrides the config file)")
    parser.add_argument("-c", "--config", help="YAML machine configuration")
    parser.add_argument("-n", "--cycles", type=int, help="number of cycles to run (0 = forever)")
    parser.add_argument("--seed", type=int, help="random seed for CXNN")
    parser.add_argument("--strict", action="store_true", help="enable debug assertions")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every executed instruction")
    return parser


def _resolve_config(args: argparse.Namespace) -> MachineConfig:
    config = ConfigLoader().load_from_file(args.config) if args.config else MachineConfig()
    if args.rom:
        config.rom = args.rom
    if args.cycles is not None:
        config.max_cycles = args.cycles
    if args.seed is not None:
        config.seed = args.seed
    if args.strict:
        config.strict = True
    if args.verbose:
        config.log_level = "DEBUG"
    return config


# @intent:responsibility コマンドラインから実行し、終了コードを返します。
def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        config = _resolve_config(args)
        logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
        if not config.rom:
            logger.error("No program image given")
            return 1
        if config.max_cycles == 0 and config.cycle_hz == 0:
            logger.warning("Running unthrottled with no cycle limit")
        cpu = MachineBuilder().build_machine(config)
        if cpu.strict:
            logger.info("Strict mode: stack faults and VF operand warnings enabled")
    except Chip8Error as e:
        logger.error("%s", e)
        return 1

    try:
        run(cpu, config.max_cycles, config.cycle_hz)
    except Chip8Error as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted after %d cycles", cpu.cycle_count)

    out = out or sys.stdout
    state = cpu.get_state()
    out.write(render_text(state) + "\n")
    out.write(" ".join(f"{name}={value:02X}" for name, value in cpu.get_register_map().items()) + "\n")
    return 0


if __name__ == '__main__':
    sys.exit(main())
