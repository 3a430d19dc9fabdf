"""A drawing surface that records fills and text for each frame."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 0xFF

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"colour component {name} out of range: {value}")

    def scaled(self, numerator: int, denominator: int) -> Color:
        """Darken the RGB channels by ``numerator / denominator``; alpha is kept."""
        if denominator <= 0:
            raise ValueError("denominator must be positive")
        if not 0 <= numerator <= denominator:
            raise ValueError("scale must lie between 0 and 1")
        return Color(
            self.r * numerator // denominator,
            self.g * numerator // denominator,
            self.b * numerator // denominator,
            self.a,
        )


@dataclass(frozen=True)
class FontStyle:
    """Fill and outline colour for text."""

    color: Color
    outline_color: Color


def default_font_styles() -> dict[int, FontStyle]:
    """Style 0 is white text, style 1 yellow (highlighted); both outlined black."""
    black = Color(0, 0, 0, 255)
    return {
        0: FontStyle(Color(255, 255, 255, 255), black),
        1: FontStyle(Color(255, 255, 0, 255), black),
    }


@dataclass(frozen=True)
class Clear:
    color: Color


@dataclass(frozen=True)
class FillRect:
    x0: int
    y0: int
    x1: int
    y1: int
    color: Color


@dataclass(frozen=True)
class Text:
    x: int
    y: int
    text: str
    style: FontStyle
    width: int


DrawCommand = Clear | FillRect | Text


@dataclass
class Canvas:
    """Collects draw commands; ``present`` closes the frame."""

    styles: dict[int, FontStyle] = field(default_factory=default_font_styles)
    pending: list[DrawCommand] = field(default_factory=list)
    frames: list[tuple[DrawCommand, ...]] = field(default_factory=list)

    def clear(self, color: Color) -> None:
        """Fill the whole frame with ``color``, dropping what was drawn before."""
        self.pending = [Clear(color)]

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        """Fill the rectangle with corners (x0, y0) and (x1, y1)."""
        self.pending.append(FillRect(x0, y0, x1, y1, color))

    def text(self, x: int, y: int, text: str, style: int = 0, width: int = 100) -> None:
        """Print ``text`` at (x, y) in the registered style ``style``."""
        try:
            font_style = self.styles[style]
        except KeyError:
            raise ValueError(f"no font style registered with id {style}") from None
        self.pending.append(Text(x, y, text, font_style, width))

    def present(self) -> tuple[DrawCommand, ...]:
        """Finish the frame, store it and return its commands."""
        frame = tuple(self.pending)
        self.frames.append(frame)
        self.pending = []
        return frame