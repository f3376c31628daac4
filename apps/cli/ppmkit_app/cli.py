"""CLI entrypoints for inspecting, normalizing and generating plain PPM files."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import numpy as np

from ppmkit_canvas import Canvas
from ppmkit_codec import PpmError, load, save
from ppmkit_core import AppConfig, load_config
from ppmkit_core.logging_setup import configure_logging
from ppmkit_imaging import PATTERNS, build_test_pattern


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _print_error(exc: PpmError) -> int:
    _print_json(
        {
            "success": False,
            "error": exc.kind.value,
            "message": exc.message,
            "path": exc.path,
        }
    )
    return 2


def _dimension(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if size < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {size}")
    return size


def _write(canvas: Canvas, out: str) -> int:
    try:
        path = save(canvas, Path(out))
    except PpmError as exc:
        return _print_error(exc)
    _print_json({"success": True, "path": path, "width": canvas.width, "height": canvas.height})
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    try:
        canvas = load(Path(args.path))
    except PpmError as exc:
        return _print_error(exc)

    if canvas.pixels:
        mean = np.asarray([c.as_tuple() for c in canvas.pixels]).mean(axis=0).round(4).tolist()
    else:
        mean = [0.0, 0.0, 0.0]
    _print_json(
        {
            "success": True,
            "path": args.path,
            "width": canvas.width,
            "height": canvas.height,
            "pixels": len(canvas.pixels),
            "mean_rgb": mean,
        }
    )
    return 0


def cmd_normalize(args: argparse.Namespace) -> int:
    try:
        canvas = load(Path(args.src))
    except PpmError as exc:
        return _print_error(exc)
    return _write(canvas, args.dst)


def cmd_blank(args: argparse.Namespace) -> int:
    return _write(Canvas(args.width, args.height), args.out)


def cmd_pattern(args: argparse.Namespace) -> int:
    canvas = build_test_pattern(args.name, width=args.width, height=args.height)
    return _write(canvas, args.out)


def build_parser(cfg: AppConfig | None = None) -> argparse.ArgumentParser:
    cfg = cfg or load_config(patterns=PATTERNS)

    parser = argparse.ArgumentParser(prog="ppmkit", description="Plain PPM (P3) canvas tools")
    sub = parser.add_subparsers(dest="command", required=True)

    info_cmd = sub.add_parser("info", help="Print dimensions and mean color of a P3 file")
    info_cmd.add_argument("path")
    info_cmd.set_defaults(func=cmd_info)

    norm_cmd = sub.add_parser("normalize", help="Re-encode a P3 file at scale 255")
    norm_cmd.add_argument("src")
    norm_cmd.add_argument("dst")
    norm_cmd.set_defaults(func=cmd_normalize)

    blank_cmd = sub.add_parser("blank", help="Write an all-black canvas")
    blank_cmd.add_argument("out")
    blank_cmd.add_argument("--width", type=_dimension, default=cfg.canvas.width)
    blank_cmd.add_argument("--height", type=_dimension, default=cfg.canvas.height)
    blank_cmd.set_defaults(func=cmd_blank)

    pat_cmd = sub.add_parser("pattern", help="Write a deterministic test pattern")
    pat_cmd.add_argument("out")
    pat_cmd.add_argument("--name", default=cfg.canvas.pattern, choices=list(PATTERNS))
    pat_cmd.add_argument("--width", type=_dimension, default=cfg.canvas.width)
    pat_cmd.add_argument("--height", type=_dimension, default=cfg.canvas.height)
    pat_cmd.set_defaults(func=cmd_pattern)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config(patterns=PATTERNS)
    configure_logging(cfg.logging)
    parser = build_parser(cfg)
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
