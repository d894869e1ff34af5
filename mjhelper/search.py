"""Search trees of draws that advance shanten and of discards that keep it.

The shanten calculation is supplied by the caller as a function taking a
34-entry count table and returning the shanten number (-1 for a complete hand).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from mjhelper.tiles import MAHJONG, Waits, init_left_tiles34_with_tiles34

ShantenFunc = Callable[[Sequence[int]], int]

SHANTEN_AGARI = -1
SHANTEN_TENPAI = 0


@dataclass
class SearchNode13:
    """A 3k+1 tile hand: its waits and, per advancing draw, the resulting 3k+2 node."""

    shanten: int
    waits: Waits = field(default_factory=Waits)
    children: dict[int, Optional["SearchNode14"]] = field(default_factory=dict)

    def render(self, prefix: str = "") -> str:
        """Indented tree of draws and discards, ordered by tile."""
        parts = []
        child_prefix = prefix + "  "
        for tile in sorted(self.children):
            node14 = self.children[tile]
            parts.append(f"{prefix}摸 {MAHJONG[tile]}\n")
            if node14 is None:
                parts.append(child_prefix + "end\n")
            else:
                parts.append(node14.render(child_prefix))
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


@dataclass
class SearchNode14:
    """A 3k+2 tile hand: per discard that keeps the shanten, the resulting 3k+1 node."""

    shanten: int
    children: dict[int, SearchNode13] = field(default_factory=dict)

    def render(self, prefix: str = "") -> str:
        """Indented tree of discards and draws, ordered by tile."""
        if self.shanten == SHANTEN_AGARI:
            return prefix + "end\n"
        parts = []
        for tile in sorted(self.children):
            parts.append(f"{prefix}舍 {MAHJONG[tile]}\n")
            parts.append(self.children[tile].render(prefix + "  "))
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


class _Searcher:
    """Depth-limited search over private working copies of the hand and the wall."""

    def __init__(
        self,
        hand_tiles34: Sequence[int],
        left_tiles34: Sequence[int],
        stop_at_shanten: int,
        shanten_func: ShantenFunc,
    ) -> None:
        if len(hand_tiles34) != 34:
            raise ValueError(f"hand must have 34 counts, got {len(hand_tiles34)}")
        if len(left_tiles34) != 34:
            raise ValueError(f"remaining tiles must have 34 counts, got {len(left_tiles34)}")
        self.hand = list(hand_tiles34)
        self.left = list(left_tiles34)
        self.stop = stop_at_shanten
        self.shanten = shanten_func

    def node13(self, current_shanten: int) -> SearchNode13:
        hand, left = self.hand, self.left
        node = SearchNode13(current_shanten)
        is_tenpai = current_shanten == SHANTEN_TENPAI
        for tile in range(34):
            if hand[tile] == 4:
                continue
            hand[tile] += 1
            if is_tenpai:
                if self.shanten(hand) == SHANTEN_AGARI:
                    node.waits[tile] = left[tile]
                    node.children[tile] = None
            elif self.shanten(hand) < current_shanten:
                # recorded even when none are left: furiten checks need the wait kinds
                node.waits[tile] = left[tile]
                if left[tile] > 0 and current_shanten - 1 >= self.stop:
                    left[tile] -= 1
                    node.children[tile] = self.node14(current_shanten - 1)
                    left[tile] += 1
                else:
                    node.children[tile] = None
            hand[tile] -= 1
        return node

    def node14(self, target_shanten: int) -> SearchNode14:
        hand = self.hand
        node = SearchNode14(target_shanten)
        for tile in range(34):
            if hand[tile] == 0:
                continue
            hand[tile] -= 1
            if self.shanten(hand) == target_shanten:
                node.children[tile] = self.node13(target_shanten)
            hand[tile] += 1
        return node


def search13(
    current_shanten: int,
    hand_tiles34: Sequence[int],
    left_tiles34: Sequence[int],
    stop_at_shanten: int,
    shanten_func: ShantenFunc,
) -> SearchNode13:
    """Search draws that advance a 3k+1 hand, down to `stop_at_shanten`."""
    return _Searcher(hand_tiles34, left_tiles34, stop_at_shanten, shanten_func).node13(current_shanten)


def search14(
    target_shanten: int,
    hand_tiles34: Sequence[int],
    left_tiles34: Sequence[int],
    stop_at_shanten: int,
    shanten_func: ShantenFunc,
) -> SearchNode14:
    """Search discards of a 3k+2 hand that leave `target_shanten`.

    Passing the hand's shanten plus one searches discards that step back.
    """
    return _Searcher(hand_tiles34, left_tiles34, stop_at_shanten, shanten_func).node14(target_shanten)


def search_shanten14(
    shanten: int,
    hand_tiles34: Sequence[int],
    left_tiles34: Sequence[int],
    stop_at_shanten: int,
    shanten_func: ShantenFunc,
) -> SearchNode14:
    """Like `search14`, but a complete hand yields an empty node."""
    if shanten == SHANTEN_AGARI:
        return SearchNode14(shanten)
    return search14(shanten, hand_tiles34, left_tiles34, stop_at_shanten, shanten_func)


def calculate_shanten_and_waits13(
    tiles34: Sequence[int],
    left_tiles34: Sequence[int] | None,
    shanten_func: ShantenFunc,
) -> tuple[int, Waits]:
    """Shanten and waits of a 3k+1 hand; without remaining counts only the hand is removed from the wall."""
    if not left_tiles34:
        left_tiles34 = init_left_tiles34_with_tiles34(tiles34)
    shanten = shanten_func(tiles34)
    node = search13(shanten, tiles34, left_tiles34, shanten, shanten_func)
    return shanten, node.waits