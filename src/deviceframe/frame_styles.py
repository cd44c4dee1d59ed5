"""Color styles for the parametric frame painters."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from reportlab.lib import colors


@dataclass(frozen=True)
class FrameStyle:
    """Serializable colors of a generic device frame."""

    outer_body_color: str = "#3A4245"
    inner_body_color: str = "#121515"
    button_color: str = "#121515"
    camera_border_color: str = "#262C2D"
    camera_inner_color: str = "#121515"
    camera_reflect_color: str = "#465256"

    def painter_kwargs(self, keys: Iterable[str] | None = None) -> dict[str, colors.Color]:
        """Parsed colors keyed by painter argument name.

        Pass a painter's `STYLE_KEYS` to keep only the arguments it accepts.
        """
        wanted = None if keys is None else set(keys)
        return {
            item.name: parse_color(getattr(self, item.name), key=item.name)
            for item in fields(self)
            if wanted is None or item.name in wanted
        }


_BUILTIN_FRAME_STYLES: dict[str, FrameStyle] = {
    "default": FrameStyle(),
    "light": FrameStyle(
        outer_body_color="#D5D9DB",
        inner_body_color="#F4F5F5",
        button_color="#B8BEC1",
        camera_border_color="#C9CED0",
        camera_inner_color="#2B3133",
        camera_reflect_color="#6C787C",
    ),
}


def available_frame_styles() -> tuple[str, ...]:
    """Return built-in frame style names."""
    return tuple(sorted(_BUILTIN_FRAME_STYLES))


def resolve_frame_style(
    *,
    profile: str = "default",
    style_file: str | Path | None = None,
) -> FrameStyle:
    """Resolve one built-in style plus optional file overrides."""
    if profile not in _BUILTIN_FRAME_STYLES:
        valid = ", ".join(available_frame_styles())
        msg = f"unknown frame style '{profile}'. Valid styles: {valid}."
        raise ValueError(msg)

    style = _BUILTIN_FRAME_STYLES[profile]
    if style_file is not None:
        style = replace(style, **_load_style_file(Path(style_file)))
    # Fail on bad colors now rather than while painting.
    style.painter_kwargs()
    return style


def _load_style_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        msg = f"style file '{path}' does not exist."
        raise ValueError(msg)

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"style file '{path}' is not valid JSON: {exc}."
        raise ValueError(msg) from exc

    if not isinstance(payload, dict):
        msg = "style file content must be a JSON object."
        raise ValueError(msg)

    allowed = {item.name for item in fields(FrameStyle)}
    unknown = sorted(key for key in payload if key not in allowed)
    if unknown:
        msg = f"unknown style key(s): {', '.join(unknown)}."
        raise ValueError(msg)

    return payload


def parse_color(raw_value: str, *, key: str) -> colors.Color:
    if not isinstance(raw_value, str) or not raw_value.strip():
        msg = f"'{key}' must be a non-empty color string."
        raise ValueError(msg)
    try:
        if raw_value.startswith("#"):
            return colors.HexColor(raw_value)
        return colors.toColor(raw_value)
    except Exception as exc:  # noqa: BLE001
        msg = f"invalid color value '{raw_value}' for '{key}'."
        raise ValueError(msg) from exc
