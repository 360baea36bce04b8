from __future__ import annotations

from dataclasses import dataclass

# Tailwind slate shades shared by every palette.
SLATE_950 = "#020617"
SLATE_900 = "#0f172a"
SLATE_200 = "#e2e8f0"


@dataclass(frozen=True, slots=True)
class Palette:
    name: str
    c900: str
    c400: str

    @property
    def buffer_bg(self) -> str:
        return SLATE_950

    @property
    def header_bg(self) -> str:
        return self.c900

    @property
    def header_fg(self) -> str:
        return SLATE_200

    @property
    def row_fg(self) -> str:
        return SLATE_200

    @property
    def selected_fg(self) -> str:
        return self.c400

    @property
    def normal_row_bg(self) -> str:
        return SLATE_950

    @property
    def alt_row_bg(self) -> str:
        return SLATE_900

    @property
    def footer_border(self) -> str:
        return self.c400


PALETTES: tuple[Palette, ...] = (
    Palette(name="blue", c900="#1e3a8a", c400="#60a5fa"),
    Palette(name="emerald", c900="#064e3b", c400="#34d399"),
    Palette(name="indigo", c900="#312e81", c400="#818cf8"),
    Palette(name="red", c900="#7f1d1d", c400="#f87171"),
)
