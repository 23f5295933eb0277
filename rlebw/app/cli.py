from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from .. import image as ops
from ..image import BLACK, WHITE, BWImage
from ..instrumentation import MEMORY, RUNS, Counters
from ..rendering import export, load_bw
from ..settings import Settings

COLORS = {"white": WHITE, "black": BLACK}

UNARY: Dict[str, Callable[[BWImage], BWImage]] = {
    "neg": ops.image_neg,
    "hmirror": ops.horizontal_mirror,
    "vmirror": ops.vertical_mirror,
}

CONCAT: Dict[str, Callable[[BWImage, BWImage], BWImage]] = {
    "bottom": ops.replicate_at_bottom,
    "right": ops.replicate_at_right,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rlebw",
        description="Black and white images stored as run-length encoded rows.",
    )
    parser.add_argument("--method", choices=ops.METHODS, help="Boolean operation algorithm")
    parser.add_argument("--log-level", help="Logging level (default: WARNING or $RLEBW_LOG_LEVEL)")
    parser.add_argument("--no-dither", action="store_true", help="Threshold instead of dithering on import")
    parser.add_argument("--width", type=int, help="Resize non-PBM inputs to this width")
    sub = parser.add_subparsers(dest="command", required=True)

    for name in ("info", "raw", "rle"):
        cmd = sub.add_parser(name, help=f"Show {name} of an image")
        cmd.add_argument("path")

    create = sub.add_parser("create", help="Create a solid image")
    create.add_argument("width", type=int)
    create.add_argument("height", type=int)
    create.add_argument("color", choices=sorted(COLORS))
    create.add_argument("output")

    chess = sub.add_parser("chessboard", help="Create a chessboard image")
    chess.add_argument("width", type=int)
    chess.add_argument("height", type=int)
    chess.add_argument("edge", type=int)
    chess.add_argument("color", choices=sorted(COLORS), help="Color of the top-left square")
    chess.add_argument("output")
    chess.add_argument("--counters", action="store_true", help="Print run and memory counters")

    for name in UNARY:
        cmd = sub.add_parser(name, help=f"Apply {name} to an image")
        cmd.add_argument("input")
        cmd.add_argument("output")

    for name in ops.OPERATORS:
        cmd = sub.add_parser(name, help=f"Pixel-wise {name.upper()} of two images")
        cmd.add_argument("first")
        cmd.add_argument("second")
        cmd.add_argument("output")
        cmd.add_argument("--counters", action="store_true", help="Print the operation counter")

    for name in CONCAT:
        cmd = sub.add_parser(name, help=f"Place the second image at the {name} of the first")
        cmd.add_argument("first")
        cmd.add_argument("second")
        cmd.add_argument("output")

    compare = sub.add_parser("compare", help="Exit 0 if two images have the same pixels, 1 otherwise")
    compare.add_argument("first")
    compare.add_argument("second")

    convert = sub.add_parser("convert", help="Convert between PBM and other raster formats")
    convert.add_argument("input")
    convert.add_argument("output")
    return parser


def resolve_settings(args: argparse.Namespace, settings: Optional[Settings] = None) -> Settings:
    if settings is None:
        settings = Settings.from_env()
    if args.method:
        settings.boolean_method = args.method
    if args.log_level:
        settings.log_level = args.log_level.upper()
    if args.no_dither:
        settings.dither = False
    settings.validate()
    return settings


def _load(path: str, args: argparse.Namespace, settings: Settings) -> BWImage:
    return load_bw(path, width=args.width, dither=settings.dither, threshold_bias=settings.threshold_bias)


def _print_counters(counters: Counters) -> None:
    report = counters.report()
    if report:
        print(report)


def run(args: argparse.Namespace, settings: Settings) -> int:
    command = args.command
    if command in ("info", "raw", "rle"):
        img = _load(args.path, args, settings)
        if command == "raw":
            print(ops.raw_text(img), end="")
        elif command == "rle":
            print(ops.rle_text(img), end="")
        else:
            runs = sum(ops.run_count(row) for row in img.rows)
            print(f"{args.path}: {img.width}x{img.height}, {runs} runs")
        return 0
    if command == "create":
        export(BWImage.create(args.width, args.height, COLORS[args.color]), args.output)
        return 0
    if command == "chessboard":
        counters = Counters()
        counters.set_name(RUNS, "runs")
        counters.set_name(MEMORY, "memory_bytes")
        img = BWImage.create_chessboard(args.width, args.height, args.edge, COLORS[args.color], counters)
        export(img, args.output)
        if args.counters:
            _print_counters(counters)
        return 0
    if command in UNARY:
        export(UNARY[command](_load(args.input, args, settings)), args.output)
        return 0
    if command in ops.OPERATORS:
        counters = Counters()
        counters.set_name(RUNS, "pixels" if settings.boolean_method == ops.METHOD_PIXELS else "spans")
        first = _load(args.first, args, settings)
        second = _load(args.second, args, settings)
        result = ops.combine(first, second, command, settings.boolean_method, counters)
        export(result, args.output)
        if args.counters:
            _print_counters(counters)
        return 0
    if command in CONCAT:
        first = _load(args.first, args, settings)
        second = _load(args.second, args, settings)
        export(CONCAT[command](first, second), args.output)
        return 0
    if command == "compare":
        equal = ops.is_equal(_load(args.first, args, settings), _load(args.second, args, settings))
        print("equal" if equal else "different")
        return 0 if equal else 1
    if command == "convert":
        export(_load(args.input, args, settings), args.output)
        return 0
    return 2


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    logging.basicConfig(level=settings.log_level_number, format="%(levelname)s %(name)s: %(message)s")
    try:
        return run(args, settings)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
