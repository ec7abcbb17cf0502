"""
どこで: `util.utils`
何を: `configs/default.yaml` とルート `config.yaml` を読み、節（palette / bento）単位で返す。
なぜ: コレクション名やベントーの既定値をコード外で差し替えられるようにするため。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# 後に読むファイルがトップレベル節ごと上書きする
_CONFIG_LAYERS = (Path("configs") / "default.yaml", Path("config.yaml"))
_ROOT_MARKERS = ("pyproject.toml", "configs", ".git")


def _read_mapping(path: Path) -> Dict[str, Any]:
    """YAML を辞書として読む。無い/壊れている/辞書でない場合は空辞書。"""
    if not path.is_file():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.debug("ignoring config %s: top level is not a mapping", path)
        return {}
    return data


def _find_project_root(start: Path) -> Path:
    """`start` から上へ辿り、ルートの目印を持つ最初のディレクトリを返す。"""
    start = start.resolve()
    for candidate in (start, *start.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    # <repo>/src/util/utils.py
    return start.parents[1]


def load_config(root: Optional[Path] = None) -> Dict[str, Any]:
    """構成をフェイルソフトに読み込む（ディープマージはしない）。"""
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for layer in _CONFIG_LAYERS:
        merged.update(_read_mapping(project_root / layer))
    return merged


def config_section(name: str, root: Optional[Path] = None) -> Dict[str, Any]:
    section = load_config(root).get(name)
    return dict(section) if isinstance(section, dict) else {}


__all__ = ["load_config", "config_section"]
