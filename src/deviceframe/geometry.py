"""Pure geometry primitives for device frames.

All coordinates use a y-down space: the origin is the top-left corner of the
device frame and `bottom > top` for every non-empty rect.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .errors import InvalidScreenSizeError


@dataclass(frozen=True)
class Size:
    """Width/height pair in device units."""

    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Offset:
    """2D point or translation in device units."""

    x: float
    y: float

    def __add__(self, other: Offset) -> Offset:
        return Offset(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Offset) -> Offset:
        return Offset(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Offset:
        return Offset(-self.x, -self.y)


@dataclass(frozen=True)
class CornerRadius:
    """Elliptical corner radius; `y` defaults to `x`."""

    x: float
    y: float | None = None

    @property
    def vertical(self) -> float:
        return self.x if self.y is None else self.y


@dataclass(frozen=True)
class EdgeInsets:
    """Padding on the four sides of a rectangle."""

    ZERO: ClassVar[EdgeInsets]

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def __post_init__(self) -> None:
        for name in ("left", "top", "right", "bottom"):
            if getattr(self, name) < 0:
                msg = f"edge inset '{name}' must be >= 0."
                raise ValueError(msg)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    @classmethod
    def all(cls, value: float) -> EdgeInsets:
        return cls(left=value, top=value, right=value, bottom=value)


EdgeInsets.ZERO = EdgeInsets()


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in y-down device units."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_offset_size(cls, offset: Offset, size: Size) -> Rect:
        return cls(
            left=offset.x,
            top=offset.y,
            right=offset.x + size.width,
            bottom=offset.y + size.height,
        )

    @classmethod
    def from_size(cls, size: Size) -> Rect:
        return cls(left=0.0, top=0.0, right=size.width, bottom=size.height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def top_left(self) -> Offset:
        return Offset(self.left, self.top)

    @property
    def center(self) -> Offset:
        return Offset((self.left + self.right) / 2, (self.top + self.bottom) / 2)

    @property
    def bottom_center(self) -> Offset:
        return Offset((self.left + self.right) / 2, self.bottom)

    def translate(self, dx: float, dy: float) -> Rect:
        return Rect(
            left=self.left + dx,
            top=self.top + dy,
            right=self.right + dx,
            bottom=self.bottom + dy,
        )

    def deflate(self, insets: EdgeInsets) -> Rect:
        """Return a rect shrunk by each edge inset."""
        return Rect(
            left=self.left + insets.left,
            top=self.top + insets.top,
            right=self.right - insets.right,
            bottom=self.bottom - insets.bottom,
        )

    def contains_rect(self, other: Rect, *, tolerance: float = 1e-6) -> bool:
        return (
            other.left >= self.left - tolerance
            and other.top >= self.top - tolerance
            and other.right <= self.right + tolerance
            and other.bottom <= self.bottom + tolerance
        )


class FillRule(Enum):
    """Winding rule used to fill (and clip to) a path."""

    NON_ZERO = "nonzero"
    EVEN_ODD = "evenodd"


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CubicTo:
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float


@dataclass(frozen=True)
class Close:
    pass


@dataclass(frozen=True)
class AddRoundRect:
    rect: Rect
    radius: CornerRadius


@dataclass(frozen=True)
class AddOval:
    rect: Rect


PathCommand = MoveTo | LineTo | CubicTo | Close | AddRoundRect | AddOval


def _cubic_axis_extrema(p0: float, p1: float, p2: float, p3: float) -> list[float]:
    """Return the curve values at the interior extrema of one cubic axis."""
    a = 3 * (-p0 + 3 * p1 - 3 * p2 + p3)
    b = 6 * (p0 - 2 * p1 + p2)
    c = 3 * (p1 - p0)

    roots: list[float] = []
    if abs(a) < 1e-12:
        if abs(b) > 1e-12:
            roots.append(-c / b)
    else:
        discriminant = b * b - 4 * a * c
        if discriminant >= 0:
            sqrt_d = math.sqrt(discriminant)
            roots.append((-b + sqrt_d) / (2 * a))
            roots.append((-b - sqrt_d) / (2 * a))

    values: list[float] = []
    for t in roots:
        if 0.0 < t < 1.0:
            mt = 1.0 - t
            values.append(
                mt * mt * mt * p0 + 3 * mt * mt * t * p1 + 3 * mt * t * t * p2 + t * t * t * p3
            )
    return values


def _fmt(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class Path:
    """Immutable vector outline made of path commands."""

    commands: tuple[PathCommand, ...] = ()
    fill_rule: FillRule = FillRule.NON_ZERO

    @classmethod
    def round_rect(cls, rect: Rect, radius: CornerRadius) -> Path:
        return cls(commands=(AddRoundRect(rect=rect, radius=radius),))

    @classmethod
    def oval(cls, rect: Rect) -> Path:
        return cls(commands=(AddOval(rect=rect),))

    @classmethod
    def from_commands(
        cls,
        data: Iterable[Sequence[object]],
        *,
        fill_rule: FillRule = FillRule.NON_ZERO,
    ) -> Path:
        """Build a path from tuple data like `("M", x, y)` or `("C", x1, y1, x2, y2, x3, y3)`."""
        builder = PathBuilder(fill_rule=fill_rule)
        for entry in data:
            op, *args = entry
            coords = [float(arg) for arg in args]  # type: ignore[arg-type]
            if op == "M" and len(coords) == 2:
                builder.move_to(*coords)
            elif op == "L" and len(coords) == 2:
                builder.line_to(*coords)
            elif op == "C" and len(coords) == 6:
                builder.cubic_to(*coords)
            elif op == "Z" and not coords:
                builder.close()
            else:
                msg = f"invalid path command {tuple(entry)!r}."
                raise ValueError(msg)
        return builder.build()

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def bounds(self) -> Rect:
        """Return the tight bounding rect of all commands."""
        xs: list[float] = []
        ys: list[float] = []
        current = Offset(0.0, 0.0)
        subpath_start = current
        for command in self.commands:
            if isinstance(command, MoveTo):
                current = subpath_start = Offset(command.x, command.y)
                xs.append(command.x)
                ys.append(command.y)
            elif isinstance(command, LineTo):
                current = Offset(command.x, command.y)
                xs.append(command.x)
                ys.append(command.y)
            elif isinstance(command, CubicTo):
                xs.append(command.x3)
                ys.append(command.y3)
                xs.extend(_cubic_axis_extrema(current.x, command.x1, command.x2, command.x3))
                ys.extend(_cubic_axis_extrema(current.y, command.y1, command.y2, command.y3))
                current = Offset(command.x3, command.y3)
            elif isinstance(command, Close):
                current = subpath_start
            else:
                rect = command.rect
                xs.extend((rect.left, rect.right))
                ys.extend((rect.top, rect.bottom))
        if not xs:
            return Rect(0.0, 0.0, 0.0, 0.0)
        return Rect(left=min(xs), top=min(ys), right=max(xs), bottom=max(ys))

    def translate(self, dx: float, dy: float) -> Path:
        moved: list[PathCommand] = []
        for command in self.commands:
            if isinstance(command, MoveTo):
                moved.append(MoveTo(command.x + dx, command.y + dy))
            elif isinstance(command, LineTo):
                moved.append(LineTo(command.x + dx, command.y + dy))
            elif isinstance(command, CubicTo):
                moved.append(
                    CubicTo(
                        command.x1 + dx,
                        command.y1 + dy,
                        command.x2 + dx,
                        command.y2 + dy,
                        command.x3 + dx,
                        command.y3 + dy,
                    )
                )
            elif isinstance(command, AddRoundRect):
                moved.append(AddRoundRect(command.rect.translate(dx, dy), command.radius))
            elif isinstance(command, AddOval):
                moved.append(AddOval(command.rect.translate(dx, dy)))
            else:
                moved.append(command)
        return Path(commands=tuple(moved), fill_rule=self.fill_rule)

    def to_svg_path_data(self) -> str:
        """Return SVG `d` attribute text for the path."""
        parts: list[str] = []
        for command in self.commands:
            if isinstance(command, MoveTo):
                parts.append(f"M{_fmt(command.x)} {_fmt(command.y)}")
            elif isinstance(command, LineTo):
                parts.append(f"L{_fmt(command.x)} {_fmt(command.y)}")
            elif isinstance(command, CubicTo):
                coords = (command.x1, command.y1, command.x2, command.y2, command.x3, command.y3)
                parts.append("C" + " ".join(_fmt(value) for value in coords))
            elif isinstance(command, Close):
                parts.append("Z")
            elif isinstance(command, AddRoundRect):
                parts.append(_round_rect_svg(command.rect, command.radius))
            else:
                parts.append(_oval_svg(command.rect))
        return " ".join(parts)


def _round_rect_svg(rect: Rect, radius: CornerRadius) -> str:
    rx = min(radius.x, rect.width / 2)
    ry = min(radius.vertical, rect.height / 2)
    arc = f"A{_fmt(rx)} {_fmt(ry)} 0 0 1"
    return (
        f"M{_fmt(rect.left + rx)} {_fmt(rect.top)} "
        f"H{_fmt(rect.right - rx)} {arc} {_fmt(rect.right)} {_fmt(rect.top + ry)} "
        f"V{_fmt(rect.bottom - ry)} {arc} {_fmt(rect.right - rx)} {_fmt(rect.bottom)} "
        f"H{_fmt(rect.left + rx)} {arc} {_fmt(rect.left)} {_fmt(rect.bottom - ry)} "
        f"V{_fmt(rect.top + ry)} {arc} {_fmt(rect.left + rx)} {_fmt(rect.top)} Z"
    )


def _oval_svg(rect: Rect) -> str:
    rx = rect.width / 2
    ry = rect.height / 2
    center = rect.center
    arc = f"A{_fmt(rx)} {_fmt(ry)} 0 1 1"
    return (
        f"M{_fmt(rect.left)} {_fmt(center.y)} "
        f"{arc} {_fmt(rect.right)} {_fmt(center.y)} "
        f"{arc} {_fmt(rect.left)} {_fmt(center.y)} Z"
    )


@dataclass
class PathBuilder:
    """Mutable helper that collects commands into an immutable `Path`."""

    fill_rule: FillRule = FillRule.NON_ZERO
    _commands: list[PathCommand] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> PathBuilder:
        self._commands.append(MoveTo(x, y))
        return self

    def line_to(self, x: float, y: float) -> PathBuilder:
        self._commands.append(LineTo(x, y))
        return self

    def cubic_to(
        self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> PathBuilder:
        self._commands.append(CubicTo(x1, y1, x2, y2, x3, y3))
        return self

    def close(self) -> PathBuilder:
        self._commands.append(Close())
        return self

    def add_round_rect(self, rect: Rect, radius: CornerRadius) -> PathBuilder:
        self._commands.append(AddRoundRect(rect=rect, radius=radius))
        return self

    def add_oval(self, rect: Rect) -> PathBuilder:
        self._commands.append(AddOval(rect=rect))
        return self

    def build(self) -> Path:
        return Path(commands=tuple(self._commands), fill_rule=self.fill_rule)


def validate_screen_size(size: Size) -> Size:
    """Raise when a screen size has a non-positive dimension."""
    if size.width <= 0 or size.height <= 0:
        msg = f"screen size must be positive, got {_fmt(size.width)}x{_fmt(size.height)}."
        raise InvalidScreenSizeError(msg)
    return size
