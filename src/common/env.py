"""
どこで: `common.env`
何を: `BTK_*` 環境変数を型付きで読むためのヘルパ（int/bool/str/選択肢）。
なぜ: 未設定・空白・不正値はすべて既定値へ倒す、という扱いを設定層で揃えるため。
"""

from __future__ import annotations

import os
from typing import Collection, Optional

_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "off"})


def _raw(name: str) -> Optional[str]:
    """前後の空白を除いた値。未設定または空白のみなら None。"""
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数環境変数を取得する。

    Parameters
    ----------
    name : str
        環境変数名。
    default : Optional[int]
        未設定/不正値のときに返す値。
    min_value : Optional[int]
        下限。解釈した値がこれを下回る場合は下限を返す（既定値には適用しない）。
    """
    raw = _raw(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if min_value is not None:
        value = max(value, min_value)
    return value


def env_bool(name: str, default: bool = False) -> bool:
    """真偽環境変数を取得する（数値は非 0 を真、語は on/off 系を解釈）。"""
    raw = _raw(name)
    if raw is None:
        return bool(default)
    if raw.lstrip("+-").isdigit():
        return int(raw) != 0
    word = raw.lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return bool(default)


def env_str(name: str, default: str = "") -> str:
    """文字列環境変数を取得する（未設定/空白のみは既定値）。"""
    raw = _raw(name)
    return default if raw is None else raw


def env_choice(name: str, choices: Collection[str], default: str) -> str:
    """大文字化した値が `choices` に含まれればそれを、そうでなければ既定値を返す。"""
    raw = _raw(name)
    if raw is None:
        return default
    value = raw.upper()
    return value if value in choices else default


__all__ = ["env_int", "env_bool", "env_str", "env_choice"]
