"""Riichi mahjong building blocks: tile notation, waits, shanten search, yaku and tenpai estimates."""

__version__ = "0.1.0"