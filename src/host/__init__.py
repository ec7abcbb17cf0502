"""
どこで: `host` パッケージ。
何を: インメモリのホストドキュメントと、プラグインのメッセージハンドラを公開する。
"""

from .document import Document, FrameNode, Notification, PaintStyle, TextNode, Variable
from .plugins import handle_message, realize_bento, register_ramp

__all__ = [
    "Document",
    "FrameNode",
    "Notification",
    "PaintStyle",
    "TextNode",
    "Variable",
    "handle_message",
    "realize_bento",
    "register_ramp",
]
