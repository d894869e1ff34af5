"""Terminal colours for wait counts, discard alerts and deal-in risk."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """ANSI foreground colour codes."""

    FG_RED = 31
    FG_WHITE = 37
    FG_HI_RED = 91
    FG_HI_YELLOW = 93
    FG_HI_CYAN = 96

    def wrap(self, text: str) -> str:
        """Text wrapped in this colour's escape sequence."""
        return f"\x1b[{self.value}m{text}\x1b[0m"


def _fixed_waits_color(fixed_waits_count: float) -> Color:
    if fixed_waits_count < 13:
        return Color.FG_HI_CYAN
    if fixed_waits_count <= 18:
        return Color.FG_HI_YELLOW
    return Color.FG_HI_RED


def waits_count_color(shanten: int, waits_count: float) -> Color:
    """Colour rating a wait count for the given shanten."""
    if shanten == 0:
        return _fixed_waits_color(waits_count * 3)
    weight = 2 ** max(0, shanten - 1)
    return _fixed_waits_color(waits_count / weight)


def other_discard_alert_color(index: int) -> Color:
    """Colour highlighting an opponent's middle-tile discard."""
    if index < 0:
        raise ValueError(f"bad tile index: {index}")
    if index >= 27:
        return Color.FG_WHITE
    rank = index % 9 + 1
    if rank in (1, 2, 8, 9):
        return Color.FG_WHITE
    if rank in (3, 7):
        return Color.FG_HI_YELLOW
    return Color.FG_HI_RED


def num_risk_color(risk: float) -> Color:
    """Colour rating a deal-in risk percentage."""
    if risk < 5:
        return Color.FG_HI_CYAN
    if risk < 10:
        return Color.FG_HI_YELLOW
    if risk < 15:
        return Color.FG_HI_RED
    return Color.FG_RED