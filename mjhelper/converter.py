"""Conversions between tile indexes, count tables and human notation like "123m 45p"."""

from __future__ import annotations

from typing import Iterable, Sequence

_SUITS = "mpsz"


class TileParseError(ValueError):
    """Raised when a tile or hand string cannot be parsed."""


def tiles34_to_tiles(tiles34: Sequence[int]) -> list[int]:
    """Expand a 34-entry count table into a sorted list of tile indexes."""
    return [tile for tile, count in enumerate(tiles34) for _ in range(count)]


def tiles_to_tiles34(tiles: Iterable[int]) -> list[int]:
    """Count table of a list of tile indexes."""
    tiles34 = [0] * 34
    for tile in tiles:
        tiles34[tile] += 1
    return tiles34


def str_to_tile34(human_tile: str) -> tuple[int, bool]:
    """Parse one tile such as "3m"; "0m", "0p", "0s" denote red fives.

    Returns the tile index and whether it is a red five.
    """
    text = human_tile.strip()
    if len(text) != 2:
        raise TileParseError(f"bad tile: {human_tile}")
    suit = _SUITS.find(text[1].lower()) if text[1].isascii() else -1
    if suit == -1:
        raise TileParseError(f"bad tile: {human_tile}")
    digit = text[0]
    is_red_five = False
    if digit == "0":
        if suit == 3:
            raise TileParseError(f"bad tile: {human_tile}")
        digit = "5"
        is_red_five = True
    if digit not in "123456789":
        raise TileParseError(f"bad tile: {human_tile}")
    tile34 = 9 * suit + int(digit) - 1
    if tile34 >= 34:
        raise TileParseError(f"bad tile: {human_tile}")
    return tile34, is_red_five


def str_to_tiles34(human_tiles: str) -> tuple[list[int], list[int]]:
    """Parse a hand such as "224m 24p" (spaces optional).

    Returns the 34-entry count table and the number of red fives per suit (m, p, s).
    """
    spaced = human_tiles
    for suit in _SUITS:
        spaced = spaced.replace(suit, suit + " ")
    spaced = spaced.strip()
    if not spaced:
        raise TileParseError("hand to parse must not be empty")

    tiles34 = [0] * 34
    num_red_fives = [0, 0, 0]
    for group in spaced.split(" "):
        group = group.strip()
        if not group:
            continue
        if len(group) < 2:
            raise TileParseError(f"bad hand: {human_tiles}")
        suit = group[-1]
        for digit in group[:-1]:
            tile34, is_red_five = str_to_tile34(digit + suit)
            tiles34[tile34] += 1
            if tiles34[tile34] > 4:
                raise TileParseError(f"bad hand: {human_tiles} holds more than 4 of one tile")
            if is_red_five:
                num_red_fives[tile34 // 9] += 1
    return tiles34, num_red_fives


def str_to_tiles(human_tiles: str) -> tuple[list[int], list[int]]:
    """Parse a hand into sorted tile indexes, e.g. "11122z" -> [27, 27, 27, 28, 28]."""
    tiles34, num_red_fives = str_to_tiles34(human_tiles)
    return tiles34_to_tiles(tiles34), num_red_fives


def tiles34_to_str(tiles34: Sequence[int]) -> str:
    """Human notation of a count table, e.g. "13p 1z"."""
    parts = []
    for suit_index, suit in enumerate(_SUITS):
        start = suit_index * 9
        counts = tiles34[start:start + 9]
        digits = "".join(str(rank + 1) * count for rank, count in enumerate(counts))
        if digits:
            parts.append(digits + suit)
    return " ".join(parts)


def tiles_to_str(tiles: Iterable[int]) -> str:
    """Human notation of tile indexes, e.g. [9, 11, 27] -> "13p 1z"."""
    return tiles34_to_str(tiles_to_tiles34(tiles))


def tile34_to_str(tile34: int) -> str:
    return tiles_to_str([tile34])


def tiles_to_str_with_bracket(tiles: Iterable[int]) -> str:
    """e.g. [9, 11, 27] -> "[13p 1z]"."""
    return "[" + tiles_to_str(tiles) + "]"


def tiles34_to_str_with_bracket(tiles34: Sequence[int]) -> str:
    return "[" + tiles34_to_str(tiles34) + "]"