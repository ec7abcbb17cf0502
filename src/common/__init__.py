"""
どこで: `common` パッケージ。
何を: palette/layout 双方で使う軽量基盤（BaseRegistry, 設定, ロギング）。
なぜ: 内側の層に共通部品を置き、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry
from .logging import setup_default_logging

__all__ = [
    "BaseRegistry",
    "setup_default_logging",
]
