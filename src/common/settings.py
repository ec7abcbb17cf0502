"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: ログレベルや上限値の既定を一箇所に集め、テストから差し替えやすくするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_choice, env_int

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # Palette
    DEBUG_RAMP: bool = False

    # Layout
    MAX_GRID_CELLS: int = 400


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `BTK_LOG_LEVEL`: ルートロガーの既定レベル（不明な名前は INFO）。
    - `BTK_DEBUG_RAMP`: ランプ生成時にウェイト毎の値を DEBUG ログへ出す。
    - `BTK_MAX_GRID_CELLS`: grid プリセットのセル数上限（1 未満は 1 に丸める）。
    """
    _settings.LOG_LEVEL = env_choice("BTK_LOG_LEVEL", _LOG_LEVELS, "INFO")
    _settings.DEBUG_RAMP = env_bool("BTK_DEBUG_RAMP", False)
    _settings.MAX_GRID_CELLS = env_int("BTK_MAX_GRID_CELLS", 400, min_value=1) or 400


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
