import os
import yaml
from typing import Dict, Any, Optional

from chip8_core.common.errors import ConfigError
from chip8_core.core.state import NUM_KEYS
from .models import MachineConfig

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoader:
    def load_from_file(self, path: str) -> MachineConfig:
        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        config = self._parse_config(data or {})
        # ROMの相対パスは設定ファイルの位置を基準にする
        if config.rom and not os.path.isabs(config.rom):
            config.rom = os.path.join(os.path.dirname(os.path.abspath(path)), config.rom)
        return config

    def _parse_config(self, data: Dict[str, Any]) -> MachineConfig:
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")

        rom = data.get("rom")
        if rom is not None and not isinstance(rom, str):
            raise ConfigError(f"Invalid rom path: {rom!r}")

        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {log_level}")

        keys = []
        for key_value in data.get("keys", []) or []:
            key = self._parse_int(key_value)
            if not 0 <= key < NUM_KEYS:
                raise ConfigError(f"Key out of range 0x0-0xF: {key_value}")
            keys.append(key)

        cycle_hz = self._parse_int(data.get("cycle_hz", 500))
        max_cycles = self._parse_int(data.get("max_cycles", 0))
        if cycle_hz < 0 or max_cycles < 0:
            raise ConfigError("cycle_hz and max_cycles must be non-negative")

        strict = data.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigError(f"Invalid strict flag (expected true/false): {strict!r}")

        return MachineConfig(
            rom=rom,
            strict=strict,
            seed=self._parse_optional_int(data.get("seed")),
            cycle_hz=cycle_hz,
            max_cycles=max_cycles,
            log_level=log_level,
            keys=keys,
        )

    def _parse_optional_int(self, value: Any) -> Optional[int]:
        if value is None:
            return None
        return self._parse_int(value)

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ConfigError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.lower().startswith("0x"):
                    return int(value, 16)
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Invalid integer format: {value}")
