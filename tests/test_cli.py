"""CLI-level tests."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from deviceframe.geometry import Rect, Size
from deviceframe.info import DeviceType, TargetPlatform
from deviceframe.main import build_generic_device, main as deviceframe_main, parse_size, parse_window


class DeviceDiscoveryCliTests(unittest.TestCase):
    def test_devices_list_command(self) -> None:
        output = io.StringIO()
        with redirect_stdout(output):
            status = deviceframe_main(["devices", "list"])
        self.assertEqual(status, 0)
        text = output.getvalue()
        self.assertIn("ios_phone_iphone-13\tiPhone 13", text)
        self.assertIn("linux_desktop_wide-monitor", text)

    def test_devices_list_filters_by_platform_and_type(self) -> None:
        output = io.StringIO()
        with redirect_stdout(output):
            status = deviceframe_main(["devices", "list", "--platform", "android", "--type", "tablet"])
        self.assertEqual(status, 0)
        self.assertEqual(
            output.getvalue().strip().splitlines(),
            ["android_tablet_medium-tablet\tAndroid Tablet"],
        )

    def test_devices_show_command(self) -> None:
        output = io.StringIO()
        with redirect_stdout(output):
            status = deviceframe_main(["devices", "show", "macbook-pro", "--path"])
        self.assertEqual(status, 0)
        text = output.getvalue()
        self.assertIn("id: macos_laptop_macbook-pro", text)
        self.assertIn("content: 1200x750", text)
        self.assertIn("rotatable: no", text)
        self.assertIn("path: M", text)

    def test_devices_show_ambiguous_name_exits_with_cli_error(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as context:
                deviceframe_main(["devices", "show", "wide-monitor"])

        self.assertEqual(context.exception.code, 2)
        self.assertIn("error: device name 'wide-monitor' is ambiguous", stderr.getvalue())

    def test_bad_plugin_is_reported_on_stderr(self) -> None:
        stderr = io.StringIO()
        with redirect_stdout(io.StringIO()), redirect_stderr(stderr):
            status = deviceframe_main(
                ["devices", "list", "--device-plugin", "no_such_device_plugin"]
            )
        self.assertEqual(status, 0)
        self.assertIn("warning: failed to load device plugin 'no_such_device_plugin'", stderr.getvalue())


class RenderCliTests(unittest.TestCase):
    def test_render_command_writes_pdf(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            output_path = Path(tmp_dir) / "iphone.pdf"
            output = io.StringIO()
            with redirect_stdout(output):
                status = deviceframe_main(
                    [
                        "render",
                        "iphone-13",
                        "--orientation",
                        "landscape",
                        "--content-color",
                        "#FFFFFF",
                        "--show-safe-areas",
                        "--output",
                        str(output_path),
                    ]
                )
            self.assertEqual(status, 0)
            self.assertTrue(output_path.exists())
            self.assertIn(f"Generated mockup at: {output_path}", output.getvalue())

    def test_render_invalid_color_exits_with_cli_error(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as context:
                deviceframe_main(["render", "iphone-13", "--content-color", "not-a-color"])

        self.assertEqual(context.exception.code, 2)
        self.assertIn("error: invalid color value 'not-a-color'", stderr.getvalue())

    def test_render_missing_image_exits_with_cli_error(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as context:
                deviceframe_main(["render", "iphone-13", "--content-image", "/nonexistent.png"])

        self.assertEqual(context.exception.code, 2)
        self.assertIn("error: image file not found", stderr.getvalue())


class GenericCliTests(unittest.TestCase):
    def test_generic_laptop_with_window_and_style_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            output_path = Path(tmp_dir) / "laptop.pdf"
            style_path = Path(tmp_dir) / "style.json"
            style_path.write_text(json.dumps({"outer_body_color": "#112233"}), encoding="utf-8")
            with redirect_stdout(io.StringIO()):
                status = deviceframe_main(
                    [
                        "generic",
                        "laptop",
                        "--platform",
                        "linux",
                        "--screen",
                        "1280x800",
                        "--window",
                        "40,40,1200,700",
                        "--style-file",
                        str(style_path),
                        "--output",
                        str(output_path),
                    ]
                )
            self.assertEqual(status, 0)
            self.assertTrue(output_path.exists())

    def test_generic_window_outside_screen_exits_with_cli_error(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as context:
                deviceframe_main(
                    [
                        "generic",
                        "monitor",
                        "--platform",
                        "windows",
                        "--screen",
                        "1920x1080",
                        "--window",
                        "100,100,1920,1080",
                    ]
                )

        self.assertEqual(context.exception.code, 2)
        self.assertIn("does not fit", stderr.getvalue())

    def test_generic_bad_screen_exits_with_cli_error(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            with self.assertRaises(SystemExit) as context:
                deviceframe_main(["generic", "phone", "--platform", "ios", "--screen", "0x800"])

        self.assertEqual(context.exception.code, 2)
        self.assertIn("screen size must be positive", stderr.getvalue())


class GenericDeviceBuilderTests(unittest.TestCase):
    def test_parse_helpers(self) -> None:
        self.assertEqual(parse_size("390x844"), Size(390.0, 844.0))
        self.assertEqual(parse_window("10,20,100,200"), Rect(10.0, 20.0, 110.0, 220.0))
        with self.assertRaises(ValueError):
            parse_size("390")
        with self.assertRaises(ValueError):
            parse_window("1,2,3")

    def test_rotatable_phone_uses_light_style(self) -> None:
        device = build_generic_device(
            "phone",
            platform=TargetPlatform.IOS,
            screen_size=Size(390.0, 844.0),
            rotatable=True,
            style_profile="light",
        )
        self.assertIs(device.type, DeviceType.PHONE)
        self.assertTrue(device.can_rotate)
        self.assertEqual(str(device.identifier), "ios_phone_custom")

    def test_monitor_defaults_to_full_screen_window(self) -> None:
        device = build_generic_device(
            "monitor",
            platform=TargetPlatform.WINDOWS,
            screen_size=Size(1920.0, 1080.0),
            name="Desk",
        )
        self.assertEqual(device.name, "Desk")
        self.assertEqual(device.window_size, Size(1920.0, 1040.0))

    def test_unknown_family_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_generic_device(
                "watch", platform=TargetPlatform.IOS, screen_size=Size(100.0, 100.0)
            )
