from typing import Optional

from chip8_core.core.cpu import Chip8Cpu
from chip8_core.loader.loader import ProgramLoader
from .models import MachineConfig


# @intent:responsibility 設定（Config）に基づいてCPUを生成し、プログラムのロードと初期キー状態を適用します。
class MachineBuilder:
    def __init__(self, loader: Optional[ProgramLoader] = None):
        self._loader = loader or ProgramLoader()

    def build_machine(self, config: MachineConfig) -> Chip8Cpu:
        cpu = Chip8Cpu(strict=config.strict, seed=config.seed)

        if config.rom:
            self._loader.load_file(config.rom, cpu.get_state())

        self.apply_initial_keys(cpu, config)
        return cpu

    # @intent:responsibility Configで指定されたキーを押下状態にします。
    def apply_initial_keys(self, cpu: Chip8Cpu, config: MachineConfig) -> None:
        state = cpu.get_state()
        for key in config.keys:
            state.press_key(key)
