"""Tile indexes, wait sets and small numeric helpers.

Tiles are indexed 0..33: 0-8 man, 9-17 pin, 18-26 sou, 27-33 honors
(east, south, west, north, white, green, red).
"""

from __future__ import annotations

import random
import sys
from typing import Iterable, Sequence

from mjhelper.converter import tiles_to_str_with_bracket

MAHJONG = (
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "1z", "2z", "3z", "4z", "5z", "6z", "7z",
)

MAHJONG_UPPER = (
    "1M", "2M", "3M", "4M", "5M", "6M", "7M", "8M", "9M",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1S", "2S", "3S", "4S", "5S", "6S", "7S", "8S", "9S",
    "1Z", "2Z", "3Z", "4Z", "5Z", "6Z", "7Z",
)

MAHJONG_ZH = (
    "1万", "2万", "3万", "4万", "5万", "6万", "7万", "8万", "9万",
    "1饼", "2饼", "3饼", "4饼", "5饼", "6饼", "7饼", "8饼", "9饼",
    "1索", "2索", "3索", "4索", "5索", "6索", "7索", "8索", "9索",
    "东", "南", "西", "北", "白", "发", "中",
)

YAOCHU_TILES = (0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33)

# 258m 258p 258s 12345z is eight away from tenpai when ignoring kokushi and chiitoi
_CHINESE_SHANTEN = (
    "和了", "听牌", "一向听", "两向听", "三向听",
    "四向听", "五向听", "六向听", "七向听", "八向听",
)

_EPS = 1e-5


def tiles_to_zh(tiles: Iterable[int]) -> list[str]:
    """Chinese names of the given tile indexes."""
    return [MAHJONG_ZH[tile] for tile in tiles]


class Waits(dict):
    """Mapping of waiting tile index to the number of copies still available."""

    def all_count(self) -> int:
        return sum(self.values())

    def available_tiles(self) -> list[int]:
        """Sorted waiting tiles that still have copies left."""
        return sorted(tile for tile, left in self.items() if left > 0)

    def indexes(self) -> list[int]:
        """Sorted waiting tiles, including exhausted ones."""
        return sorted(self)

    def tiles_zh(self) -> list[str]:
        return tiles_to_zh(self.indexes())

    def same_tiles(self, other: "Waits") -> bool:
        """Whether both wait sets have the same available tiles."""
        return self.available_tiles() == other.available_tiles()

    def __str__(self) -> str:
        return f"{self.all_count()} 进张 {tiles_to_str_with_bracket(self.indexes())}"


def is_man(tile: int) -> bool:
    return tile < 9


def is_pin(tile: int) -> bool:
    return 9 <= tile < 18


def is_sou(tile: int) -> bool:
    return 18 <= tile < 27


def is_yaochupai(tile: int) -> bool:
    """Terminal or honor tile."""
    if tile >= 27:
        return True
    return tile % 9 in (0, 8)


def is_isolated_tile(tile: int, tiles34: Sequence[int]) -> bool:
    """Whether `tile` would have no neighbour within two steps in the hand."""
    if tile >= 27:
        return tiles34[tile] == 0
    t = tile % 9
    left = tile - t + max(0, t - 2)
    right = tile - t + min(8, t + 2)
    return all(tiles34[i] == 0 for i in range(left, right + 1))


def count_of_tiles34(tiles34: Iterable[int]) -> int:
    return sum(tiles34)


def count_pairs_of_tiles34(tiles34: Iterable[int]) -> int:
    return sum(1 for c in tiles34 if c >= 2)


def init_left_tiles34() -> list[int]:
    return [4] * 34


def init_left_tiles34_with_tiles34(tiles34: Sequence[int]) -> list[int]:
    """Remaining copies of each tile once the given tiles are removed."""
    return [4 - count for count in tiles34]


def outside_tiles(tile: int) -> list[int]:
    """Tiles outside `tile` in its suit, considered safer after it was discarded."""
    if tile >= 27:
        return []
    rank = tile % 9 + 1
    base = tile - tile % 9
    if rank in (1, 9):
        return []
    if rank in (2, 3, 4):
        return list(range(base, tile))
    if rank == 5:
        return [tile - 2, tile + 2]
    return list(range(base + 8, tile, -1))


def random_add_tile(tiles34: list[int], rng: random.Random | None = None) -> int:
    """Add one random tile that is not already held four times; return it."""
    if all(c >= 4 for c in tiles34):
        raise ValueError("every tile is already held four times")
    chooser = rng if rng is not None else random
    while True:
        tile = chooser.randrange(34)
        if tiles34[tile] < 4:
            tiles34[tile] += 1
            return tile


def number_to_chinese_shanten(num: int) -> str:
    """-1 is a win, 0 is tenpai, 1 is one away and so on."""
    if not -1 <= num < len(_CHINESE_SHANTEN) - 1:
        raise IndexError(f"shanten out of range: {num}")
    return _CHINESE_SHANTEN[num + 1]


def rate_above_one(x: float, y: float) -> float:
    """Ratio of the larger to the smaller value, at least one."""
    x, y = float(x), float(y)
    if x == y:
        return 1.0
    if x == 0 or y == 0:
        return sys.float_info.max
    return x / y if x > y else y / x


def in_delta(a: float, b: float, delta: float) -> bool:
    return abs(a - b) < delta


def float_equal(a: float, b: float) -> bool:
    return in_delta(a, b, _EPS)