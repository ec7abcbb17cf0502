"""
どこで: `api` 入口（高レベル公開 API）。
何を: ランプ生成・ベントー生成・ホスト連携の主要関数/型を再輸出。
なぜ: 利用者が単一名前空間から生成→書き出し→ホスト登録まで完結できるようにするため。

Usage:
    from api import generate_ramp, export_tokens

    ramp = generate_ramp("#3B82F6", name="Primary")
    tokens = export_tokens(ramp)          # {"Primary/50": "#...", ...}

    from api import BentoParams, generate_bento

    layout = generate_bento(BentoParams(preset="golden"))
"""

from host import Document, handle_message, realize_bento, register_ramp
from layout import BentoLayout, BentoParams, generate_bento
from palette import (
    Color,
    ExportFormat,
    InvalidFormatError,
    Ramp,
    WeightTable,
    export_ramp,
    export_tokens,
    generate_ramp,
)

__all__ = [
    # ランプ
    "generate_ramp",
    "export_ramp",
    "export_tokens",
    "Color",
    "ExportFormat",
    "InvalidFormatError",
    "Ramp",
    "WeightTable",
    # レイアウト
    "generate_bento",
    "BentoParams",
    "BentoLayout",
    # ホスト
    "Document",
    "handle_message",
    "realize_bento",
    "register_ramp",
]

__version__ = "0.1.0"
