"""
どこで: `host.document`。
何を: デザインツール側のオブジェクトモデル（ペイントスタイル/変数コレクション/フレーム/テキスト）の
      インメモリ実装。
なぜ: プラグインのメッセージ処理を実アプリ無しで end-to-end に動かし、テストできるようにするため。
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

RGB01 = tuple[float, float, float]

_ids = itertools.count(1)


def _next_id(prefix: str) -> str:
    return f"{prefix}:{next(_ids)}"


@dataclass(frozen=True)
class SolidPaint:
    color: RGB01
    type: str = "SOLID"


@dataclass
class PaintStyle:
    id: str
    name: str = ""
    paints: list[SolidPaint] = field(default_factory=list)


@dataclass(frozen=True)
class Mode:
    mode_id: str
    name: str


@dataclass
class VariableCollection:
    id: str
    name: str
    modes: list[Mode] = field(default_factory=list)

    @property
    def default_mode_id(self) -> str:
        return self.modes[0].mode_id


@dataclass
class Variable:
    id: str
    name: str
    collection_id: str
    resolved_type: str
    values_by_mode: dict[str, Any] = field(default_factory=dict)

    def set_value_for_mode(self, mode_id: str, value: Any) -> None:
        self.values_by_mode[mode_id] = value


@dataclass
class TextNode:
    id: str
    name: str = "Text"
    characters: str = ""
    font_size: float = 12.0
    font: tuple[str, str] = ("Inter", "Regular")
    fills: list[SolidPaint] = field(default_factory=list)


@dataclass
class FrameNode:
    id: str
    name: str = "Frame"
    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 100.0
    fills: list[SolidPaint] = field(default_factory=list)
    corner_radius: float = 0.0
    clips_content: bool = True
    effects: list[Any] = field(default_factory=list)
    layout_mode: str = "NONE"
    padding: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    item_spacing: float = 0.0
    children: list[FrameNode | TextNode] = field(default_factory=list)

    def resize(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"node size must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)

    def append_child(self, node: FrameNode | TextNode) -> None:
        self.children.append(node)


@dataclass(frozen=True)
class Notification:
    message: str
    error: bool = False


class Document:
    """ホストドキュメント（1 ページ + スタイル/変数レジストリ + 通知）。"""

    def __init__(self, viewport_center: tuple[float, float] = (0.0, 0.0)) -> None:
        self.viewport_center = viewport_center
        self.paint_styles: list[PaintStyle] = []
        self.collections: list[VariableCollection] = []
        self.variables: list[Variable] = []
        self.page: list[FrameNode] = []
        self.selection: list[FrameNode] = []
        self.notifications: list[Notification] = []
        self.closed = False

    # --- スタイル/変数 ---
    def create_paint_style(self, name: str, color: RGB01) -> PaintStyle:
        style = PaintStyle(id=_next_id("S"), name=name, paints=[SolidPaint(color)])
        self.paint_styles.append(style)
        return style

    def create_variable_collection(self, name: str) -> VariableCollection:
        collection = VariableCollection(
            id=_next_id("VC"), name=name, modes=[Mode(_next_id("M"), "Mode 1")]
        )
        self.collections.append(collection)
        return collection

    def create_variable(self, name: str, collection: VariableCollection, resolved_type: str) -> Variable:
        if any(v.collection_id == collection.id and v.name == name for v in self.variables):
            raise ValueError(f"variable {name!r} already exists in collection {collection.name!r}")
        variable = Variable(
            id=_next_id("V"), name=name, collection_id=collection.id, resolved_type=resolved_type
        )
        self.variables.append(variable)
        return variable

    def variables_in(self, collection: VariableCollection) -> list[Variable]:
        return [v for v in self.variables if v.collection_id == collection.id]

    # --- ノード ---
    def create_frame(self) -> FrameNode:
        frame = FrameNode(id=_next_id("F"))
        self.page.append(frame)
        return frame

    def create_text(self) -> TextNode:
        return TextNode(id=_next_id("T"))

    def select(self, nodes: list[FrameNode]) -> None:
        self.selection = list(nodes)

    # --- UI ---
    def notify(self, message: str, *, error: bool = False) -> None:
        if error:
            logger.warning("%s", message)
        else:
            logger.info("%s", message)
        self.notifications.append(Notification(message, error))

    def close(self) -> None:
        self.closed = True


__all__ = [
    "Document",
    "FrameNode",
    "Mode",
    "Notification",
    "PaintStyle",
    "SolidPaint",
    "TextNode",
    "Variable",
    "VariableCollection",
]
