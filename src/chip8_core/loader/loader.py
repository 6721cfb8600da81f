# chip8_core/loader/loader.py
"""
プログラムローダーモジュール。
ヘッダやチェックサムを持たない生のバイナリイメージを、メモリのプログラム領域(0x200-)へ配置します。
"""
import logging
import os
from typing import Union

from chip8_core.common.errors import ProgramLoadError, ProgramTooLargeError
from chip8_core.core.state import Chip8State, MAX_PROGRAM_SIZE, PROGRAM_START

logger = logging.getLogger(__name__)


class ProgramLoader:
    """
    プログラムイメージをChip8Stateのメモリへロードするローダー。
    PCやレジスタは変更しません。
    """
    # @intent:responsibility バイト列をmemory[0x200 : 0x200 + len(data)]へコピーします。
    # @intent:pre-condition 長さは3584バイト以下であること。超える場合は何も書き込まずに失敗する。
    def load_bytes(self, data: bytes, state: Chip8State) -> int:
        size = len(data)
        if size > MAX_PROGRAM_SIZE:
            raise ProgramTooLargeError(size, MAX_PROGRAM_SIZE)
        state.memory[PROGRAM_START:PROGRAM_START + size] = data
        return size

    # @intent:responsibility ファイルを読み込み、プログラム領域へロードします。
    # @intent:rationale 読み込み失敗は部分ロードからの回復をせず、致命的エラーとして呼び出し側へ伝える。
    def load_file(self, file_path: Union[str, os.PathLike], state: Chip8State) -> int:
        logger.info("Loading: %s", file_path)
        try:
            with open(file_path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise ProgramLoadError(f"Cannot read program image {file_path}: {e}") from e

        logger.info("Filesize: %d", len(data))
        return self.load_bytes(data, state)
