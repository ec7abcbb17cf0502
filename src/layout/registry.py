"""
どこで: `layout` のレジストリ層（プリセット関数専用）。
何を: `@preset` デコレータでプリセット関数を登録し、取得/一覧/検査を提供。
なぜ: UI から届くキー（"heroRight" など）と Python 名を同じ正規化で解決するため。

概要:
- 登録対象は `(rows, cols) -> Composition` の関数のみ。
- デコレータは名前省略可（`@preset` / `@preset()`）と明示名指定をサポート。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from common.base_registry import BaseRegistry

from .composition import Composition

PresetFn = Callable[[int, int], Composition]

_preset_registry = BaseRegistry("preset")


def preset(arg: Any | None = None, /, name: str | None = None):
    """プリセット関数をレジストリに登録するデコレータ。

    使用例:
    - `@preset` / `@preset()`                      → 関数名から自動推論。
    - `@preset("custom")` / `@preset(name="custom")` → 明示名で登録。
    """

    def _register_checked(obj: Any, resolved_name: str | None = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@preset は関数のみ登録可能です: got {obj!r}")
        return _preset_registry.register(resolved_name)(obj)

    # 直付け (@preset)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数で名前を渡した (@preset("name"))
    if isinstance(arg, str) and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_preset(name: str) -> PresetFn:
    """登録されたプリセット関数を取得（未登録は KeyError）。"""
    return _preset_registry.get(name)


def list_presets() -> list[str]:
    """登録順のプリセット名一覧。"""
    return _preset_registry.list_all()


def is_preset_registered(name: str) -> bool:
    return _preset_registry.is_registered(name)


def unregister(name: str) -> None:
    """名前を指定して登録を解除（存在しない場合は無視）。"""
    _preset_registry.unregister(name)


__all__ = [
    "preset",
    "get_preset",
    "list_presets",
    "is_preset_registered",
    "unregister",
]
