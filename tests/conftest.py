"""共通フィクスチャ。

- 設定（環境変数）の隔離
- 代表的なシード/ランプ
- 空のホストドキュメント
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from host import Document
from palette import Ramp, generate_ramp


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """BTK_* 環境変数を外し、テスト後に設定を再読込する。"""
    for name in ("BTK_LOG_LEVEL", "BTK_DEBUG_RAMP", "BTK_MAX_GRID_CELLS"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def blue_ramp() -> Ramp:
    return generate_ramp("#3B82F6", name="Primary")


@pytest.fixture()
def doc() -> Document:
    return Document(viewport_center=(500.0, 400.0))
