"""Tests for page rendering and PDF output."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock

from deviceframe.blocks import SafeAreaOverlayBlock, SolidFillBlock
from deviceframe.devices import load_device_catalog
from deviceframe.orientation import Orientation
from deviceframe.rendering import default_mockup_filename, generate_mockup, render_device_page


class RenderDevicePageTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.catalog, _warnings = load_device_catalog()

    def test_page_is_closed_after_rendering(self) -> None:
        pdf = MagicMock()
        layout = render_device_page(
            pdf,
            device=self.catalog.get("iphone-13"),
            orientation=Orientation.PORTRAIT,
        )
        self.assertEqual(pdf.method_calls[-1][0], "show_page")
        self.assertEqual(layout.page_size, self.catalog.get("iphone-13").frame_size)

    def test_default_filename(self) -> None:
        self.assertEqual(
            default_mockup_filename(self.catalog.get("iphone-13"), Orientation.LANDSCAPE),
            "mockup_ios_phone_iphone-13_landscape.pdf",
        )


class GenerateMockupTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.catalog, _warnings = load_device_catalog()

    def test_every_builtin_device_renders_a_pdf(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            for device in self.catalog:
                for orientation in Orientation:
                    with self.subTest(device=str(device.identifier), orientation=orientation.value):
                        output = Path(tmp_dir) / default_mockup_filename(device, orientation)
                        destination = generate_mockup(
                            device,
                            output,
                            orientation=orientation,
                            content=SolidFillBlock("white"),
                        )
                        self.assertEqual(destination, output)
                        self.assertTrue(output.read_bytes().startswith(b"%PDF"))

    def test_hidden_frame_with_safe_area_overlay(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            output = Path(tmp_dir) / "screen_only.pdf"
            generate_mockup(
                self.catalog.get("oneplus-8-pro"),
                output,
                orientation=Orientation.LANDSCAPE,
                frame_visible=False,
                content=SafeAreaOverlayBlock(),
            )
            self.assertTrue(output.exists())

    def test_default_output_path_uses_working_directory(self) -> None:
        previous = os.getcwd()
        with tempfile.TemporaryDirectory() as tmp_dir:
            os.chdir(tmp_dir)
            try:
                destination = generate_mockup(self.catalog.get("medium-phone"))
                self.assertEqual(destination.name, "mockup_android_phone_medium-phone_portrait.pdf")
                self.assertTrue((Path(tmp_dir) / destination).exists())
            finally:
                os.chdir(previous)
