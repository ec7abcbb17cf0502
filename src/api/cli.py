"""
どこで: `api.cli`（`bento-tones` コマンド）。
何を: シードカラーからのランプ生成と、ベントーレイアウト生成を JSON で標準出力へ書き出す。
なぜ: ホストアプリ無しでも生成結果を確認/他ツールへ受け渡せるようにするため。

Usage:
    bento-tones ramp "#3B82F6" --name Primary
    bento-tones ramp 0f0 --name Green --format srgb_255
    bento-tones bento --preset hero_right --labels letters
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from common.logging import setup_default_logging
from layout import BentoParams, generate_bento, list_fill_palettes, list_presets
from palette import ExportFormat, InvalidFormatError, export_tokens, generate_ramp

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bento-tones",
        description="Generate tonal color ramps and bento grid layouts.",
    )
    parser.add_argument(
        "--log-level", default=None, help="logging level (default: BTK_LOG_LEVEL or INFO)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_ramp = sub.add_parser("ramp", help="derive an 11-step ramp from a seed hex color")
    p_ramp.add_argument("seed", help="seed color, #RGB or #RRGGBB")
    p_ramp.add_argument("--name", default="Color", help="token name prefix (default: Color)")
    p_ramp.add_argument(
        "--format",
        dest="fmt",
        default=ExportFormat.HEX.value,
        choices=[f.value for f in ExportFormat],
        help="value format of each token",
    )

    p_bento = sub.add_parser("bento", help="compute a bento layout")
    p_bento.add_argument("--preset", choices=list_presets())
    p_bento.add_argument("--rows", type=int)
    p_bento.add_argument("--cols", type=int)
    p_bento.add_argument("--width", type=float)
    p_bento.add_argument("--height", type=float)
    p_bento.add_argument("--gap", type=float)
    p_bento.add_argument("--padding", type=float)
    p_bento.add_argument("--radius", type=float)
    p_bento.add_argument("--palette", choices=list_fill_palettes())
    p_bento.add_argument("--labels", dest="label_style", choices=["none", "numbers", "letters"])
    p_bento.add_argument("--no-shadow", dest="add_shadow", action="store_false", default=None)
    return parser


def _run_ramp(args: argparse.Namespace) -> dict[str, Any]:
    ramp = generate_ramp(args.seed, name=args.name)
    return {
        "name": args.name,
        "seed": ramp.seed.hex,
        "base_weight": ramp.base_weight,
        "tokens": export_tokens(ramp, args.name, args.fmt),
    }


def _run_bento(args: argparse.Namespace) -> dict[str, Any]:
    options = {
        key: getattr(args, key)
        for key in (
            "preset",
            "rows",
            "cols",
            "width",
            "height",
            "gap",
            "padding",
            "radius",
            "palette",
            "label_style",
            "add_shadow",
        )
        if getattr(args, key) is not None
    }
    return generate_bento(BentoParams.from_mapping(options)).to_dict()


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    try:
        if args.command == "ramp":
            result = _run_ramp(args)
        else:
            result = _run_bento(args)
    except InvalidFormatError as exc:
        logger.error("%s", exc)
        return 2
    except (KeyError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    sys.stdout.write(json.dumps(result, ensure_ascii=False, indent=2) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
