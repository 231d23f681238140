"""CLI entrypoints for call tracing, configuration and environment checks."""

from __future__ import annotations

import argparse
import json
import platform
from dataclasses import asdict
from importlib import metadata
from importlib.util import find_spec
from pathlib import Path

import numpy as np

from imgui_image import Image, LegacyImageButton, RecordingBackend, Ui
from imgui_image_core import AppConfig, configure_logging, load_config, save_config
from imgui_image_core.config import config_path


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _installed_version() -> str:
    try:
        return metadata.version("imgui-image")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _load(args: argparse.Namespace) -> AppConfig:
    return load_config(Path(args.config) if getattr(args, "config", None) else None)


def cmd_trace(args: argparse.Namespace) -> int:
    cfg = _load(args)
    backend = RecordingBackend(default_click=args.clicked)
    ui = Ui(backend, cfg)

    with ui.frame():
        if args.widget == "image":
            (
                Image(args.texture, args.size)
                .uv0(args.uv0)
                .uv1(args.uv1)
                .tint_color(args.tint)
                .border_color(args.border)
                .build(ui)
            )
            result = None
        elif args.widget == "button":
            result = (
                ui.image_button_config(args.id, args.texture, args.size)
                .uv0(args.uv0)
                .uv1(args.uv1)
                .tint_color(args.tint)
                .background_color(args.background)
                .build()
            )
        else:
            result = (
                LegacyImageButton(args.texture, args.size)
                .uv0(args.uv0)
                .uv1(args.uv1)
                .tint_color(args.tint)
                .background_color(args.background)
                .frame_padding(args.frame_padding)
                .build(ui)
            )

    report = backend.report()
    payload = {
        "widget": args.widget,
        "result": result,
        "calls": [asdict(c) for c in backend.calls],
        "report": asdict(report),
        "success": report.balanced,
    }
    _print_json(payload)
    return 0 if report.balanced else 2


def cmd_config_show(args: argparse.Namespace) -> int:
    cfg = _load(args)
    _print_json(asdict(cfg))
    return 0


def cmd_config_init(args: argparse.Namespace) -> int:
    path = Path(args.path).expanduser() if args.path else config_path()
    if path.exists() and not args.force:
        _print_json({"success": False, "path": str(path), "error": "exists"})
        return 1
    written = save_config(AppConfig(), path)
    _print_json({"success": True, "path": str(written)})
    return 0


def cmd_doctor(_args: argparse.Namespace) -> int:
    _print_json(
        {
            "python": platform.python_version(),
            "platform": platform.platform(),
            "imgui_image": _installed_version(),
            "numpy": np.__version__,
            "pyimgui_available": find_spec("imgui") is not None,
            "config_path": str(config_path()),
        }
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="imgui-image", description="Image widget binding tools")
    parser.add_argument("--config", default=None, help="Optional config file path")
    sub = parser.add_subparsers(dest="command", required=True)

    trace_cmd = sub.add_parser("trace", help="Build one widget against a recording backend and print the calls")
    trace_cmd.add_argument("widget", choices=["image", "button", "legacy-button"])
    trace_cmd.add_argument("--texture", type=int, default=1)
    trace_cmd.add_argument("--size", type=float, nargs=2, default=[32.0, 32.0], metavar=("W", "H"))
    trace_cmd.add_argument("--uv0", type=float, nargs=2, default=[0.0, 0.0], metavar=("U", "V"))
    trace_cmd.add_argument("--uv1", type=float, nargs=2, default=[1.0, 1.0], metavar=("U", "V"))
    trace_cmd.add_argument("--tint", type=float, nargs=4, default=[1.0, 1.0, 1.0, 1.0], metavar=("R", "G", "B", "A"))
    trace_cmd.add_argument("--border", type=float, nargs=4, default=[0.0, 0.0, 0.0, 0.0], metavar=("R", "G", "B", "A"))
    trace_cmd.add_argument(
        "--background", type=float, nargs=4, default=[0.0, 0.0, 0.0, 0.0], metavar=("R", "G", "B", "A")
    )
    trace_cmd.add_argument("--id", default="image_button", help="String id for the keyed button")
    trace_cmd.add_argument("--frame-padding", type=int, default=-1)
    trace_cmd.add_argument("--clicked", action="store_true", help="Have the recording backend report a click")
    trace_cmd.set_defaults(func=cmd_trace)

    config_cmd = sub.add_parser("config", help="Inspect or create the config file")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print effective configuration")
    show_cmd.set_defaults(func=cmd_config_show)
    init_cmd = config_sub.add_parser("init", help="Write default configuration")
    init_cmd.add_argument("--path", default=None)
    init_cmd.add_argument("--force", action="store_true")
    init_cmd.set_defaults(func=cmd_config_init)

    doctor_cmd = sub.add_parser("doctor", help="Print environment diagnostics")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = _load(args)
    configure_logging(
        level=cfg.logging.level,
        keep_files=cfg.logging.keep_files,
        console=cfg.logging.console,
        to_file=cfg.logging.to_file,
    )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
