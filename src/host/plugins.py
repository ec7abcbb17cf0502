"""
どこで: `host.plugins`。
何を: UI パネルから届くメッセージ（generate-palette / generate / relaunch）を処理し、
      ランプをスタイル/変数として登録、ベントーをフレームとして配置する。
なぜ: palette/layout の純粋な生成結果を、ホストドキュメントへ写す責務を一箇所に閉じるため。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from layout import BentoLayout, BentoParams, generate_bento
from palette import InvalidFormatError, Ramp, generate_ramp, token_name
from util.utils import config_section

from .document import Document, FrameNode, SolidPaint

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "UI Colors"


def _palette_config() -> tuple[str, str]:
    cfg = config_section("palette")
    collection = str(cfg.get("collection_name") or DEFAULT_COLLECTION)
    group = str(cfg.get("style_group") or collection)
    return collection, group


def register_ramp(
    doc: Document,
    ramp: Ramp,
    name: str,
    *,
    collection_name: str | None = None,
    style_group: str | None = None,
) -> list[str]:
    """ランプを 1 つの変数コレクションとペイントスタイル群として登録する。

    - スタイル名: "<group>/<name>/<weight>"
    - 変数名: "<name>/<weight>"（COLOR 型、既定モードに 0–1 の RGB を設定）

    返値は登録した変数名のリスト（テーブル順）。
    """
    cfg_collection, cfg_group = _palette_config()
    collection_name = collection_name or cfg_collection
    style_group = style_group or cfg_group

    # 名前の検証を先に済ませ、途中まで登録された状態を残さない
    names = [token_name(name, w) for w in ramp.weights]

    collection = doc.create_variable_collection(collection_name)
    mode_id = collection.default_mode_id
    for token, color in zip(names, ramp.colors):
        doc.create_paint_style(f"{style_group}/{token}", color.srgb)
        variable = doc.create_variable(token, collection, "COLOR")
        variable.set_value_for_mode(mode_id, color.srgb)
    logger.info(
        "registered %d tokens for %r (seed %s, base weight %s)",
        len(names),
        name,
        ramp.seed.hex,
        ramp.base_weight,
    )
    return names


def realize_bento(doc: Document, layout: BentoLayout) -> FrameNode:
    """レイアウトをビューポート中央のフレームとして配置し、選択状態にする。"""
    frame = doc.create_frame()
    frame.name = layout.name
    frame.resize(layout.width, layout.height)
    frame.fills = [SolidPaint(layout.fill)]
    frame.corner_radius = layout.corner_radius
    frame.clips_content = False
    cx, cy = doc.viewport_center
    frame.x = cx - layout.width / 2
    frame.y = cy - layout.height / 2

    for card in layout.cards:
        node = FrameNode(id=f"{frame.id}/{card.name}", name=card.name, x=card.x, y=card.y)
        node.resize(card.width, card.height)
        node.corner_radius = card.radius
        node.fills = [SolidPaint(card.fill)]
        node.effects = [card.shadow] if card.shadow is not None else []
        # 後からコンテンツを載せられるよう縦方向オートレイアウト
        node.layout_mode = "VERTICAL"
        node.padding = (16.0, 16.0, 16.0, 16.0)
        node.item_spacing = 8.0
        if card.label is not None:
            label = doc.create_text()
            label.name = "Label"
            label.characters = card.label
            label.font = ("Inter", "Bold")
            label.font_size = 16.0
            label.fills = [SolidPaint((1.0, 1.0, 1.0))]
            node.append_child(label)
        frame.append_child(node)

    doc.select([frame])
    return frame


def _handle_generate_palette(doc: Document, msg: Mapping[str, Any]) -> None:
    name = str(msg.get("name") or "").strip()
    hex_value = msg.get("hex")
    try:
        ramp = generate_ramp(hex_value, name=name or None)  # type: ignore[arg-type]
    except InvalidFormatError:
        doc.notify("Invalid hex code provided.", error=True)
        return
    if not name:
        doc.notify("A palette name is required.", error=True)
        return
    collection_name, _ = _palette_config()
    register_ramp(doc, ramp, name)
    doc.notify(f'"{name}" styles created in the "{collection_name}" group!')
    doc.close()


def _handle_generate(doc: Document, msg: Mapping[str, Any]) -> None:
    payload = msg.get("payload")
    if payload is not None and not isinstance(payload, Mapping):
        raise TypeError(f"generate payload must be a mapping, got {type(payload).__name__}")
    try:
        layout = generate_bento(BentoParams.from_mapping(payload or {}))
    except (KeyError, ValueError) as exc:
        doc.notify(f"Could not build bento: {exc}", error=True)
        return
    realize_bento(doc, layout)
    doc.close()


def handle_message(doc: Document, msg: Mapping[str, Any]) -> None:
    """UI メッセージを処理する（未知の種別はログのみで無視）。"""
    kind = msg.get("type")
    if kind == "generate-palette":
        _handle_generate_palette(doc, msg)
    elif kind == "generate":
        _handle_generate(doc, msg)
    elif kind == "relaunch":
        doc.close()
    else:
        logger.debug("ignoring message of type %r", kind)


__all__ = ["register_ramp", "realize_bento", "handle_message", "DEFAULT_COLLECTION"]
