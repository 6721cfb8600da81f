# chip8_core/common/errors.py
"""
例外階層を定義するモジュール。
ロード時の致命的エラー、strictモードでのみ送出されるマシンフォルト、設定エラーを区別します。
"""


# @intent:responsibility パッケージ内で送出される全ての例外の基底クラス。
class Chip8Error(Exception):
    pass


# @intent:responsibility プログラムイメージの読み込み失敗（致命的）を表します。
class ProgramLoadError(Chip8Error):
    pass


# @intent:responsibility イメージがプログラム領域(0x200-0xFFF)に収まらないことを表します。
class ProgramTooLargeError(ProgramLoadError, ValueError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"Program image too big for memory: {size} bytes (max {limit})")
        self.size = size
        self.limit = limit


# @intent:responsibility strictモードのデバッグアサーションが検出した異常。
# @intent:rationale 通常モードではリファレンス同様に範囲チェックを行わないため、この系統は送出されない。
class MachineFault(Chip8Error):
    pass


class StackFault(MachineFault, IndexError):
    pass


# @intent:responsibility アドレス空間(0x000-0xFFF)外へのメモリアクセスを表します。
# @intent:rationale 複数バイトを扱う命令の原子性を保つための検査であり、strictモードに関係なく送出される。
#                  strict専用のMachineFaultとは区別し、IndexErrorとして扱えるようにする。
class MemoryFault(Chip8Error, IndexError):
    pass


# @intent:responsibility 設定ファイルの値が不正であることを表します。
class ConfigError(Chip8Error, ValueError):
    pass
