"""CLI for inspecting devices and rendering mockup PDFs."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .blocks import Block, CompositeBlock, ImageBlock, SafeAreaOverlayBlock, SolidFillBlock
from .devices import (
    DeviceCatalog,
    generic_desktop_monitor,
    generic_laptop,
    generic_phone,
    generic_tablet,
    load_device_catalog,
)
from .frame_styles import available_frame_styles, parse_color, resolve_frame_style
from .geometry import EdgeInsets, Rect, Size
from .info import DeviceInfo, DeviceType, TargetPlatform
from .orientation import Orientation
from .painters import (
    GenericDesktopMonitorFramePainter,
    GenericLaptopFramePainter,
    GenericPhoneFramePainter,
    GenericTabletFramePainter,
)
from .rendering import generate_mockup

GENERIC_FAMILIES = ("phone", "tablet", "laptop", "monitor")


def _fmt_size(size: Size) -> str:
    return f"{size.width:g}x{size.height:g}"


def _fmt_insets(insets: EdgeInsets) -> str:
    return f"{insets.left:g},{insets.top:g},{insets.right:g},{insets.bottom:g}"


def parse_size(raw: str) -> Size:
    """Parse `WIDTHxHEIGHT`, e.g. `390x844`."""
    parts = raw.lower().split("x")
    if len(parts) != 2:
        msg = f"size '{raw}' must look like WIDTHxHEIGHT."
        raise ValueError(msg)
    try:
        width, height = (float(part) for part in parts)
    except ValueError as exc:
        msg = f"size '{raw}' must contain two numbers."
        raise ValueError(msg) from exc
    return Size(width, height)


def parse_window(raw: str) -> Rect:
    """Parse `LEFT,TOP,WIDTH,HEIGHT` relative to the screen."""
    parts = raw.split(",")
    if len(parts) != 4:
        msg = f"window '{raw}' must look like LEFT,TOP,WIDTH,HEIGHT."
        raise ValueError(msg)
    try:
        left, top, width, height = (float(part) for part in parts)
    except ValueError as exc:
        msg = f"window '{raw}' must contain four numbers."
        raise ValueError(msg) from exc
    return Rect(left=left, top=top, right=left + width, bottom=top + height)


def _load_catalog(plugin_modules: Sequence[str]) -> DeviceCatalog:
    catalog, warnings = load_device_catalog(plugin_modules)
    for warning in warnings:
        print(warning, file=sys.stderr)
    return catalog


def _build_content(
    *,
    content_color: str | None = None,
    content_image: Path | None = None,
    show_safe_areas: bool = False,
) -> Block | None:
    blocks: list[Block] = []
    if content_color is not None:
        blocks.append(SolidFillBlock(parse_color(content_color, key="--content-color")))
    if content_image is not None:
        blocks.append(ImageBlock(content_image))
    if show_safe_areas:
        blocks.append(SafeAreaOverlayBlock())
    if not blocks:
        return None
    return CompositeBlock(tuple(blocks))


def _print_device(device: DeviceInfo, *, with_path: bool) -> None:
    bounds = device.screen_path.bounds()
    print(f"id: {device.identifier}")
    print(f"name: {device.name}")
    print(f"platform: {device.platform.value}")
    print(f"type: {device.type.value}")
    print(f"screen: {_fmt_size(device.screen_size)}")
    print(f"content: {_fmt_size(device.content_size)}")
    print(f"frame: {_fmt_size(device.frame_size)}")
    print(f"pixel ratio: {device.pixel_ratio:g}")
    print(f"safe areas: {_fmt_insets(device.safe_areas)}")
    if device.rotated_safe_areas is not None:
        print(f"rotated safe areas: {_fmt_insets(device.rotated_safe_areas)}")
    print(f"rotatable: {'yes' if device.can_rotate else 'no'}")
    print(
        f"screen bounds: {bounds.left:g},{bounds.top:g},{bounds.right:g},{bounds.bottom:g}"
        f" ({device.screen_path.fill_rule.value})"
    )
    if with_path:
        print(f"path: {device.screen_path.to_svg_path_data()}")


def build_generic_device(
    family: str,
    *,
    platform: TargetPlatform,
    screen_size: Size,
    window: Rect | None = None,
    device_id: str = "custom",
    name: str | None = None,
    rotatable: bool = False,
    style_profile: str = "default",
    style_file: Path | None = None,
) -> DeviceInfo:
    """Build a generic device from CLI-style arguments."""
    if family not in GENERIC_FAMILIES:
        msg = f"unknown family '{family}'. Valid families: {', '.join(GENERIC_FAMILIES)}."
        raise ValueError(msg)
    style = resolve_frame_style(profile=style_profile, style_file=style_file)
    display_name = name or f"Custom {family}"
    rotated_safe_areas = EdgeInsets.ZERO if rotatable else None

    if family in ("phone", "tablet"):
        painter_cls = GenericPhoneFramePainter if family == "phone" else GenericTabletFramePainter
        builder = generic_phone if family == "phone" else generic_tablet
        return builder(
            platform,
            device_id,
            display_name,
            screen_size,
            rotated_safe_areas=rotated_safe_areas,
            painter=painter_cls(**style.painter_kwargs(painter_cls.STYLE_KEYS)),
        )

    window_position = window or Rect.from_size(screen_size)
    if family == "laptop":
        return generic_laptop(
            platform,
            device_id,
            display_name,
            screen_size,
            window_position,
            rotated_safe_areas=rotated_safe_areas,
            painter=GenericLaptopFramePainter(
                platform,
                window_position,
                **style.painter_kwargs(GenericLaptopFramePainter.STYLE_KEYS),
            ),
        )
    return generic_desktop_monitor(
        platform,
        device_id,
        display_name,
        screen_size,
        window_position,
        rotated_safe_areas=rotated_safe_areas,
        painter=GenericDesktopMonitorFramePainter(
            platform,
            window_position,
            **style.painter_kwargs(GenericDesktopMonitorFramePainter.STYLE_KEYS),
        ),
    )


def _add_plugin_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--device-plugin",
        action="append",
        default=[],
        help="Additional device plugin module path (repeatable).",
    )


def _add_render_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output PDF path. Default: mockup_<device>_<orientation>.pdf",
    )
    parser.add_argument(
        "--orientation",
        choices=[orientation.value for orientation in Orientation],
        default=Orientation.PORTRAIT.value,
        help="Device orientation. Landscape only rotates devices that support it.",
    )
    parser.add_argument(
        "--hide-frame",
        action="store_true",
        help="Render only the screen area without the device frame.",
    )
    parser.add_argument("--content-color", default=None, help="Fill the screen with a color.")
    parser.add_argument(
        "--content-image",
        type=Path,
        default=None,
        help="Image file stretched over the screen.",
    )
    parser.add_argument(
        "--show-safe-areas",
        action="store_true",
        help="Tint the safe-area strips of the screen.",
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render device frame mockups as PDF.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    devices_parser = subparsers.add_parser("devices", help="Inspect the device catalog.")
    devices_subparsers = devices_parser.add_subparsers(dest="devices_command", required=True)

    list_parser = devices_subparsers.add_parser("list", help="List available devices.")
    list_parser.add_argument(
        "--platform",
        choices=[platform.value for platform in TargetPlatform],
        default=None,
        help="Only list devices of this platform.",
    )
    list_parser.add_argument(
        "--type",
        choices=[device_type.value for device_type in DeviceType],
        default=None,
        help="Only list devices of this type.",
    )
    _add_plugin_arg(list_parser)

    show_parser = devices_subparsers.add_parser("show", help="Show details for one device.")
    show_parser.add_argument("device", help="Device identifier or unique short name.")
    show_parser.add_argument("--path", action="store_true", help="Print screen path data.")
    _add_plugin_arg(show_parser)

    render_parser = subparsers.add_parser("render", help="Render one catalog device.")
    render_parser.add_argument("device", help="Device identifier or unique short name.")
    _add_render_args(render_parser)
    _add_plugin_arg(render_parser)

    generic_parser = subparsers.add_parser("generic", help="Render a generic device.")
    generic_parser.add_argument("family", choices=GENERIC_FAMILIES, help="Device family.")
    generic_parser.add_argument(
        "--platform",
        choices=[platform.value for platform in TargetPlatform],
        required=True,
        help="Target platform.",
    )
    generic_parser.add_argument("--screen", required=True, help="Screen size as WIDTHxHEIGHT.")
    generic_parser.add_argument(
        "--window",
        default=None,
        help="Window rect as LEFT,TOP,WIDTH,HEIGHT (laptop/monitor). Default: whole screen.",
    )
    generic_parser.add_argument("--id", default="custom", help="Device id used in identifiers.")
    generic_parser.add_argument("--name", default=None, help="Display name.")
    generic_parser.add_argument(
        "--rotatable",
        action="store_true",
        help="Allow landscape rotation with zero rotated safe areas.",
    )
    generic_parser.add_argument(
        "--style-profile",
        choices=available_frame_styles(),
        default="default",
        help="Built-in frame style name.",
    )
    generic_parser.add_argument(
        "--style-file",
        type=Path,
        default=None,
        help="JSON file with frame style overrides.",
    )
    _add_render_args(generic_parser)
    return parser


def _render(args: argparse.Namespace, device: DeviceInfo) -> Path:
    return generate_mockup(
        device,
        args.output,
        orientation=Orientation.from_value(args.orientation),
        frame_visible=not args.hide_frame,
        content=_build_content(
            content_color=args.content_color,
            content_image=args.content_image,
            show_safe_areas=args.show_safe_areas,
        ),
    )


def _run(args: argparse.Namespace) -> int:
    if args.command == "devices":
        catalog = _load_catalog(args.device_plugin)
        if args.devices_command == "list":
            devices = catalog.all()
            if args.platform is not None:
                platform = TargetPlatform.from_value(args.platform)
                devices = tuple(device for device in devices if device.platform is platform)
            if args.type is not None:
                device_type = DeviceType.from_value(args.type)
                devices = tuple(device for device in devices if device.type is device_type)
            for device in devices:
                print(f"{device.identifier}\t{device.name}")
            return 0
        _print_device(catalog.get(args.device), with_path=args.path)
        return 0

    if args.command == "render":
        catalog = _load_catalog(args.device_plugin)
        destination = _render(args, catalog.get(args.device))
        print(f"Generated mockup at: {destination}")
        return 0

    device = build_generic_device(
        args.family,
        platform=TargetPlatform.from_value(args.platform),
        screen_size=parse_size(args.screen),
        window=parse_window(args.window) if args.window else None,
        device_id=args.id,
        name=args.name,
        rotatable=args.rotatable,
        style_profile=args.style_profile,
        style_file=args.style_file,
    )
    destination = _render(args, device)
    print(f"Generated mockup at: {destination}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        return _run(args)
    except ValueError as exc:
        parser.exit(status=2, message=f"error: {exc}\n")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
