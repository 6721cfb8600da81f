from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class MachineConfig:
    rom: Optional[str] = None        # プログラムイメージのパス
    strict: bool = False             # デバッグアサーションを有効にする
    seed: Optional[int] = None       # CXNN用の乱数シード
    cycle_hz: int = 500              # ホストのサイクル速度。0は無制限
    max_cycles: int = 0              # ヘッドレス実行の上限。0は無制限
    log_level: str = "WARNING"
    keys: List[int] = field(default_factory=list)  # 起動時から押下状態にするキー
